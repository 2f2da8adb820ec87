"""Line anchors for a diff, preferring the newer ("forward") file."""

from __future__ import annotations

import functools
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from reviewmap.diff.parser import Change, ChangeType, FileDiff, Hunk

logger = logging.getLogger(__name__)

# Changes sharing a line number are ordered by this list.
CHANGE_TYPE_PRIORITY: Tuple[ChangeType, ...] = (
    ChangeType.INSERT,
    ChangeType.NORMAL,
    ChangeType.DELETE,
)

_CHANGE_KEY_PREFIXES = {
    ChangeType.INSERT: "I",
    ChangeType.DELETE: "D",
    ChangeType.NORMAL: "N",
}


def get_all_hunk_changes(hunks: Iterable[Hunk]) -> Iterator[Change]:
    """Yield every change of every hunk, in hunk order."""
    for hunk in hunks:
        yield from hunk.changes


def get_change_key(change: Change) -> str:
    """Return the key a rendered diff uses to identify a change.

    Normal changes are keyed by their old line number, inserts and deletes
    by the line number on their own side.
    """
    prefix = _CHANGE_KEY_PREFIXES[change.type]
    if change.type is ChangeType.NORMAL:
        return f"{prefix}{change.old_line_number}"
    return f"{prefix}{change.line_number}"


def get_code_line_anchor(line: int) -> str:
    """Anchor of a line in a plain (non-diff) file view."""
    return f"#L{line}"


def change_priority(change: Change) -> int:
    """Rank of a change when several share a line number (lower wins)."""
    return CHANGE_TYPE_PRIORITY.index(change.type)


def compare_changes(first: Change, second: Change) -> int:
    return change_priority(first) - change_priority(second)


def _append_change(change_map: Dict[str, List[Change]], line: str, change: Change) -> None:
    change_map.setdefault(line, []).append(change)


class ForwardComparisonMap:
    """Map of an old vs. new file comparison.

    Every change is indexed under both its old and its new line number, so a
    single number can collect changes from either side. When more than one
    change shares a number, inserts win over normal lines, which win over
    deletes.
    """

    def __init__(
        self,
        diff: Union[FileDiff, Sequence[Hunk]],
        log: Optional[logging.Logger] = None,
    ):
        self._log = log or logger
        hunks = diff.hunks if isinstance(diff, FileDiff) else diff

        change_map: Dict[str, List[Change]] = {}
        for change in get_all_hunk_changes(hunks):
            _append_change(change_map, str(change.old_line_number), change)
            _append_change(change_map, str(change.new_line_number), change)

        # list.sort() is stable: same-type changes keep their diff order.
        for changes in change_map.values():
            changes.sort(key=functools.cmp_to_key(compare_changes))

        self._change_map = change_map

    def changes_for_line(self, line: int) -> Tuple[Change, ...]:
        """Changes mapped to a line number, highest priority first."""
        return tuple(self._change_map.get(str(line), ()))

    def create_code_line_anchor_getter(self) -> Callable[[int], str]:
        return self.get_code_line_anchor

    def get_code_line_anchor(self, line: int) -> str:
        """Return the anchor for a line number, or "" when nothing maps to it."""
        line_changes = self._change_map.get(str(line))
        if not line_changes:
            self._log.warning("No changes were mapped for line %s", line)
            return ""

        return f"#{get_change_key(line_changes[0])}"
