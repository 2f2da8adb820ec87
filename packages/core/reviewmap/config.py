"""Configuration management for reviewmap"""

import os
from typing import Dict


class ShapeConfig:
    """Configuration for line shape generation"""

    # Line length to cut each shape off at
    DEFAULT_MAX_LINE_LENGTH = 40

    @classmethod
    def get_max_line_length(cls) -> int:
        """
        Get the window length used when generating line shapes.

        Can be overridden via REVIEWMAP_MAX_LINE_LENGTH environment variable.

        Returns:
            Window length in characters (default: 40)
        """
        try:
            value = int(os.getenv("REVIEWMAP_MAX_LINE_LENGTH", cls.DEFAULT_MAX_LINE_LENGTH))
        except ValueError:
            # If invalid value provided, return default
            return cls.DEFAULT_MAX_LINE_LENGTH

        if value <= 0:
            return cls.DEFAULT_MAX_LINE_LENGTH
        return value


class OverviewConfig:
    """Configuration for the code overview column, in pixels"""

    DEFAULTS = {
        "overview_padding": 10,  # Padding of the overview container
        "row_top_padding": 2,
        "row_height": 10,  # Height of a row, including row_top_padding
    }

    @classmethod
    def get(cls, name: str) -> int:
        """
        Get an overview layout setting.

        Environment variables:
            REVIEWMAP_OVERVIEW_PADDING
            REVIEWMAP_ROW_TOP_PADDING
            REVIEWMAP_ROW_HEIGHT

        Args:
            name: Setting name (overview_padding, row_top_padding, row_height)

        Returns:
            Setting value in pixels. Negative values, and a zero row height,
            fall back to the default.
        """
        default = cls.DEFAULTS[name]
        try:
            value = int(os.getenv(f"REVIEWMAP_{name.upper()}", default))
        except ValueError:
            return default

        if value < 0 or (name == "row_height" and value == 0):
            return default
        return value

    @classmethod
    def get_all(cls) -> Dict[str, int]:
        """Get all overview layout settings"""
        return {name: cls.get(name) for name in cls.DEFAULTS}
