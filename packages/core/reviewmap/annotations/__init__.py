"""Comment keys and linter message grouping."""

from reviewmap.annotations.keys import AnnotationKey, InvalidCoordinateError, create_comment_key
from reviewmap.annotations.linter import (
    LinterMessage,
    LinterMessageMap,
    LinterMessagesByPath,
    MessageType,
    find_most_severe_type,
    find_most_severe_type_for_path,
    get_message_map,
)

__all__ = [
    "AnnotationKey",
    "InvalidCoordinateError",
    "create_comment_key",
    "LinterMessage",
    "LinterMessageMap",
    "LinterMessagesByPath",
    "MessageType",
    "find_most_severe_type",
    "find_most_severe_type_for_path",
    "get_message_map",
]
