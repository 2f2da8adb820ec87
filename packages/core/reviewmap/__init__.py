"""
reviewmap - Line anchors, code shapes and annotation keys for code review
"""

from reviewmap.annotations.keys import AnnotationKey, InvalidCoordinateError, create_comment_key
from reviewmap.diff.comparison import ForwardComparisonMap
from reviewmap.diff.parser import Change, ChangeType, FileDiff, Hunk, parse_unified_diff
from reviewmap.shapes import LineShapes, Token, TokenShape, generate_line_shapes, get_lines

__version__ = "0.1.0"

__all__ = [
    "AnnotationKey",
    "InvalidCoordinateError",
    "create_comment_key",
    "ForwardComparisonMap",
    "Change",
    "ChangeType",
    "FileDiff",
    "Hunk",
    "parse_unified_diff",
    "LineShapes",
    "Token",
    "TokenShape",
    "generate_line_shapes",
    "get_lines",
]
