"""Unified diff parsing into hunks of change records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import List, Optional, Tuple


HUNK_HEADER_RE = re.compile(
    r"@@\s+-(?P<old_start>\d+)(?:,(?P<old_count>\d+))?\s+\+(?P<new_start>\d+)"
    r"(?:,(?P<new_count>\d+))?\s+@@"
)

# Line number used for the side of a change where the line does not exist.
ABSENT_LINE = -1
EOFNL_SUFFIX = "-eofnl"


class ChangeType(str, Enum):
    """Kinds of change record inside a hunk"""

    INSERT = "insert"
    DELETE = "delete"
    NORMAL = "normal"


@dataclass(frozen=True)
class Change:
    """Represents a single line inside a diff hunk."""

    type: ChangeType
    content: str
    old_line_number: int = ABSENT_LINE
    new_line_number: int = ABSENT_LINE

    @property
    def line_number(self) -> int:
        """Line number on the side this change lives on."""
        if self.type is ChangeType.DELETE:
            return self.old_line_number
        return self.new_line_number

    @classmethod
    def from_external(cls, data: dict) -> "Change":
        """Build a change from the API's JSON representation."""
        type_ = data["type"]
        # "*-eofnl" types mark a line missing its trailing newline.
        if type_.endswith(EOFNL_SUFFIX):
            type_ = type_[: -len(EOFNL_SUFFIX)]

        return cls(
            type=ChangeType(type_),
            content=data.get("content", ""),
            old_line_number=data.get("old_line_number", ABSENT_LINE),
            new_line_number=data.get("new_line_number", ABSENT_LINE),
        )


@dataclass
class Hunk:
    """Represents a diff hunk."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    changes: List[Change] = field(default_factory=list)
    header: str = ""

    @classmethod
    def from_external(cls, data: dict) -> "Hunk":
        return cls(
            old_start=data["old_start"],
            old_lines=data["old_lines"],
            new_start=data["new_start"],
            new_lines=data["new_lines"],
            changes=[Change.from_external(change) for change in data.get("changes", [])],
            header=data.get("header", ""),
        )


@dataclass
class FileDiff:
    """Represents a file touched by the diff."""

    old_path: Optional[str]
    new_path: Optional[str]
    hunks: List[Hunk] = field(default_factory=list)
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False

    @property
    def path(self) -> Optional[str]:
        return self.new_path or self.old_path

    @property
    def lines_added(self) -> int:
        return sum(
            1 for hunk in self.hunks for change in hunk.changes if change.type is ChangeType.INSERT
        )

    @property
    def lines_deleted(self) -> int:
        return sum(
            1 for hunk in self.hunks for change in hunk.changes if change.type is ChangeType.DELETE
        )

    @classmethod
    def from_external(cls, data: dict) -> "FileDiff":
        """Build a file diff from the API's JSON representation.

        The ``mode`` field carries a git status letter (A, D, R, M, C).
        """
        mode = data.get("mode", "M")
        return cls(
            old_path=data.get("old_path"),
            new_path=data.get("path"),
            hunks=[Hunk.from_external(hunk) for hunk in data.get("hunks", [])],
            is_new=mode == "A",
            is_deleted=mode == "D",
            is_renamed=mode == "R",
        )


def _strip_diff_prefix(path: str) -> Optional[str]:
    path = path.split("\t", 1)[0].strip()
    if path.startswith("a/") or path.startswith("b/"):
        path = path[2:]
    if path in ("/dev/null", "dev/null"):
        return None
    return path or None


def _parse_hunk_header(line: str) -> Tuple[int, int, int, int]:
    match = HUNK_HEADER_RE.search(line)
    if not match:
        return 0, 0, 0, 0
    old_start = int(match.group("old_start"))
    old_count = int(match.group("old_count") or 1)
    new_start = int(match.group("new_start"))
    new_count = int(match.group("new_count") or 1)
    return old_start, old_count, new_start, new_count


def _hunk_is_complete(hunk: Hunk, old_line_num: int, new_line_num: int) -> bool:
    return (
        old_line_num >= hunk.old_start + hunk.old_lines
        and new_line_num >= hunk.new_start + hunk.new_lines
    )


def parse_unified_diff(diff_content: str) -> List[FileDiff]:
    """Parse unified diff content into per-file hunks.

    Args:
        diff_content: Git diff output string.

    Returns:
        FileDiff for every file in the diff, in diff order.
    """
    files: List[FileDiff] = []

    current_file: Optional[FileDiff] = None
    current_hunk: Optional[Hunk] = None
    old_line_num = ABSENT_LINE
    new_line_num = ABSENT_LINE

    for line in diff_content.splitlines():
        if line.startswith("diff --git"):
            if current_file:
                files.append(current_file)
            parts = line.split()
            old_path = _strip_diff_prefix(parts[2]) if len(parts) > 2 else None
            new_path = _strip_diff_prefix(parts[3]) if len(parts) > 3 else None
            current_file = FileDiff(old_path=old_path, new_path=new_path)
            current_hunk = None
            continue

        if current_file is None:
            # Plain "---"/"+++" diffs without a git header line.
            if line.startswith("--- "):
                current_file = FileDiff(old_path=None, new_path=None)
            else:
                continue

        if current_hunk is not None and _hunk_is_complete(current_hunk, old_line_num, new_line_num):
            current_hunk = None

        if line.startswith("new file mode"):
            current_file.is_new = True
            continue
        if line.startswith("deleted file mode"):
            current_file.is_deleted = True
            continue
        if line.startswith("rename from "):
            current_file.old_path = line[len("rename from ") :].strip() or current_file.old_path
            current_file.is_renamed = True
            continue
        if line.startswith("rename to "):
            current_file.new_path = line[len("rename to ") :].strip() or current_file.new_path
            current_file.is_renamed = True
            continue

        if current_hunk is None or not line.startswith(("+", "-", " ", "\\")):
            if line.startswith("--- "):
                if current_file.hunks:
                    # Next file of a plain diff without "diff --git" headers.
                    files.append(current_file)
                    current_file = FileDiff(old_path=None, new_path=None)
                current_file.old_path = _strip_diff_prefix(line[4:]) or current_file.old_path
                if line[4:].strip() == "/dev/null":
                    current_file.old_path = None
                    current_file.is_new = True
                continue
            if line.startswith("+++ "):
                current_file.new_path = _strip_diff_prefix(line[4:]) or current_file.new_path
                if line[4:].strip() == "/dev/null":
                    current_file.new_path = None
                    current_file.is_deleted = True
                continue

        if line.startswith("@@"):
            old_start, old_count, new_start, new_count = _parse_hunk_header(line)
            current_hunk = Hunk(
                old_start=old_start,
                old_lines=old_count,
                new_start=new_start,
                new_lines=new_count,
                header=line,
            )
            current_file.hunks.append(current_hunk)
            old_line_num = old_start
            new_line_num = new_start
            continue

        if current_hunk is None:
            continue

        if line.startswith("\\"):
            # "\ No newline at end of file"
            continue

        prefix = line[:1]
        content = line[1:]

        if prefix == "+":
            current_hunk.changes.append(
                Change(ChangeType.INSERT, content, new_line_number=new_line_num)
            )
            new_line_num += 1
        elif prefix == "-":
            current_hunk.changes.append(
                Change(ChangeType.DELETE, content, old_line_number=old_line_num)
            )
            old_line_num += 1
        else:
            current_hunk.changes.append(
                Change(
                    ChangeType.NORMAL,
                    content,
                    old_line_number=old_line_num,
                    new_line_number=new_line_num,
                )
            )
            old_line_num += 1
            new_line_num += 1

    if current_file:
        files.append(current_file)

    return files
