"""Fitting line shapes into the fixed-height code overview column."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, List, Optional, Sequence, Union

from reviewmap.annotations.linter import LinterMessage, LinterMessagesByPath
from reviewmap.config import OverviewConfig
from reviewmap.diff.comparison import get_code_line_anchor as default_code_line_anchor_getter
from reviewmap.shapes import AllLineShapes, LineShapes

# Anchor id of the block listing a file's global linter messages.
GLOBAL_LINTER_ANCHOR_ID = "GLOBAL-LINTER-MESSAGES"


def _config_default(name: str):
    return field(default_factory=lambda: OverviewConfig.get(name))


@dataclass
class OverviewLayout:
    """Pixel sizes of the overview column"""

    overview_padding: int = _config_default("overview_padding")
    row_top_padding: int = _config_default("row_top_padding")
    row_height: int = _config_default("row_height")


@dataclass
class OverviewFit:
    number_of_rows: int
    chunked_line_shapes: List[AllLineShapes]


def _chunk(items: Sequence[LineShapes], size: int) -> List[AllLineShapes]:
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def fit_line_shapes_into_overview(
    all_line_shapes: AllLineShapes,
    overview_height: Optional[int],
    layout: Optional[OverviewLayout] = None,
) -> OverviewFit:
    """
    Split line shapes evenly between the rows that fit in the overview.

    Args:
        all_line_shapes: Shapes of every line of the file
        overview_height: Height of the overview column in pixels
        layout: Padding and row sizes (configured defaults if omitted)

    Returns:
        Number of rows and the line shapes grouped per row

    Raises:
        ValueError: overview_height is not set, or the row height is not positive
    """
    if not overview_height:
        raise ValueError("overview_height must be set when calling fit_line_shapes_into_overview()")

    layout = layout or OverviewLayout()
    if layout.row_height <= 0:
        raise ValueError(f"row_height must be positive, got {layout.row_height}")

    available_height = (
        overview_height
        # Remove the top and bottom padding.
        - layout.overview_padding * 2
        # The first row has no top padding.
        - layout.row_top_padding
    )
    number_of_rows = max(0, math.floor(available_height / layout.row_height))

    chunk_size = 1
    if number_of_rows and len(all_line_shapes) > number_of_rows:
        chunk_size = math.ceil(len(all_line_shapes) / number_of_rows)

    return OverviewFit(
        number_of_rows=number_of_rows,
        chunked_line_shapes=_chunk(all_line_shapes, chunk_size),
    )


def find_row_messages(
    shapes: Sequence[LineShapes],
    message_map: Optional[LinterMessagesByPath],
) -> List[LinterMessage]:
    """Collect linter messages for every line in a row."""
    if not message_map:
        return []

    messages: List[LinterMessage] = []
    for shape in shapes:
        if shape.line == 1:
            messages.extend(message_map.global_messages)
        messages.extend(message_map.by_line.get(shape.line, []))
    return messages


def select_row_line(
    shapes: Sequence[LineShapes],
    inserted_lines: Sequence[int] = (),
    message_map: Optional[LinterMessagesByPath] = None,
) -> Union[int, str, None]:
    """Pick the line a row of the overview links to.

    Changed lines come first, then global linter messages (on the row that
    starts the file), then lines with linter messages, then the first line
    of the row.
    """
    if not shapes:
        return None

    line = shapes[0].line

    if inserted_lines:
        for shape in shapes:
            if shape.line in inserted_lines:
                return shape.line
        return line

    if message_map is None:
        return line

    if line == 1 and message_map.global_messages:
        return GLOBAL_LINTER_ANCHOR_ID

    for shape in shapes:
        if message_map.by_line.get(shape.line):
            return shape.line

    return line


def get_row_anchor(
    shapes: Sequence[LineShapes],
    inserted_lines: Sequence[int] = (),
    message_map: Optional[LinterMessagesByPath] = None,
    get_code_line_anchor: Callable[[int], str] = default_code_line_anchor_getter,
) -> str:
    """Return the anchor a row of the overview links to, or "" for an empty row."""
    line = select_row_line(shapes, inserted_lines, message_map)
    if line is None:
        return ""
    if line == GLOBAL_LINTER_ANCHOR_ID:
        return f"#{GLOBAL_LINTER_ANCHOR_ID}"
    return get_code_line_anchor(line)
