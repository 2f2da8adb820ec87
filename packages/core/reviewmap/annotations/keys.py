"""Grouping keys for comments and messages attached to a file/line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote


class InvalidCoordinateError(ValueError):
    """Raised for a line number that is not attached to a file."""


def create_comment_key(
    file_name: Optional[str],
    line: Optional[int],
    version_id: Optional[int] = None,
) -> str:
    """
    Create the key that groups annotations on the same coordinate.

    A version-level annotation has neither a file nor a line; a file-level
    annotation has a file but no line.

    Args:
        file_name: Path of the file inside the version, if any
        line: Line number inside the file, if any
        version_id: Version the annotation belongs to, if known

    Returns:
        Key such as "version:3;file:manifest.json;line:5"

    Raises:
        InvalidCoordinateError: line is set but file_name is not
    """
    parts = []
    if version_id is not None:
        parts.append(f"version:{version_id}")
    if file_name is not None:
        # Escape ";" and ":" so a file name cannot imitate another part.
        parts.append(f"file:{quote(file_name, safe='/')}")
    if line is not None:
        parts.append(f"line:{line}")
    key = ";".join(parts)

    if line is not None and file_name is None:
        raise InvalidCoordinateError(f'Cannot create key "{key}" because fileName is empty')

    return key


@dataclass(frozen=True)
class AnnotationKey:
    """A validated (file, line) coordinate"""

    file_name: Optional[str] = None
    line: Optional[int] = None
    version_id: Optional[int] = None

    def __post_init__(self):
        create_comment_key(self.file_name, self.line, self.version_id)

    @property
    def key(self) -> str:
        return create_comment_key(self.file_name, self.line, self.version_id)
