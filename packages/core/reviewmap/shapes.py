"""Compact code shapes used to sketch a file before it is highlighted."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from reviewmap.config import ShapeConfig

TAB_WIDTH = 2


class Token(str, Enum):
    """Character classes a shape is made of"""

    CODE = "code"
    WHITESPACE = "whitespace"


@dataclass
class TokenShape:
    """The shape of one or more same-class characters."""

    token: Token
    count: int = 0
    percent_of_width: float = 0.0

    def to_dict(self) -> dict:
        return {
            "token": self.token.value,
            "count": self.count,
            "percentOfWidth": self.percent_of_width,
        }


@dataclass
class LineShapes:
    """A collection of shapes for one line of code."""

    line: int
    tokens: List[TokenShape] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"line": self.line, "tokens": [token.to_dict() for token in self.tokens]}


# Shape collections for all lines of code.
AllLineShapes = List[LineShapes]


def get_lines(content: str) -> List[str]:
    """Split file content into lines."""
    return content.replace("\r\n", "\n").split("\n")


def _classify(char: str) -> Token:
    return Token.WHITESPACE if char == " " else Token.CODE


def generate_line_shapes(
    file_lines: Sequence[str],
    max_line_length: Optional[int] = None,
) -> AllLineShapes:
    """Generate a shape for every line of a file.

    Each line is scanned over a fixed window of ``max_line_length``
    characters. Tabs count as two spaces, positions past the end of the line
    are padding (whitespace) and anything past the window is dropped.

    Args:
        file_lines: Lines of the file, without line endings.
        max_line_length: Window length; defaults to the configured length.

    Returns:
        One LineShapes per input line, in input order.
    """
    if max_line_length is None:
        max_line_length = ShapeConfig.get_max_line_length()

    all_line_shapes: AllLineShapes = []

    for line_index, code in enumerate(file_lines):
        characters = code.replace("\t", " " * TAB_WIDTH)[:max_line_length]
        line_shapes = LineShapes(line=line_index + 1)

        for i in range(max_line_length):
            char = characters[i] if i < len(characters) else " "
            token = _classify(char)

            if not line_shapes.tokens or line_shapes.tokens[-1].token is not token:
                line_shapes.tokens.append(TokenShape(token=token))

            line_shapes.tokens[-1].count += 1

        # Width percentages are only known once the whole window is counted.
        for shape in line_shapes.tokens:
            shape.percent_of_width = (shape.count / max_line_length) * 100

        all_line_shapes.append(line_shapes)

    return all_line_shapes
