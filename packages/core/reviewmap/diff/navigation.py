"""Jumping between blocks of changes in a diff."""

from __future__ import annotations

from enum import Enum
import re
from typing import Iterable, List, Optional, Sequence

from reviewmap.diff.comparison import get_change_key
from reviewmap.diff.parser import ChangeType, Hunk

_NUMBER_RE = re.compile(r"\d+")


class RelativePosition(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


def extract_number(value: str) -> Optional[int]:
    """Return the first number found in a string, e.g. 12 for "#I12"."""
    match = _NUMBER_RE.search(value)
    if not match:
        return None
    return int(match.group())


def get_diff_anchors(hunks: Iterable[Hunk]) -> List[str]:
    """Return the change key of the first change in every block of changes."""
    anchors: List[str] = []

    for hunk in hunks:
        seeking_change = True
        for change in hunk.changes:
            if change.type is ChangeType.NORMAL:
                seeking_change = True
            elif seeking_change:
                anchors.append(get_change_key(change))
                seeking_change = False

    return anchors


def get_inserted_lines(hunks: Iterable[Hunk]) -> List[int]:
    """Return the new-file line numbers of all inserted lines."""
    inserted_lines: List[int] = []

    for hunk in hunks:
        for change in hunk.changes:
            if change.type is not ChangeType.INSERT:
                continue
            line = change.line_number
            if line > 0 and line not in inserted_lines:
                inserted_lines.append(line)

    return inserted_lines


def get_relative_diff_anchor(
    hunks: Sequence[Hunk],
    current_anchor: str = "",
    position: RelativePosition = RelativePosition.NEXT,
) -> Optional[str]:
    """Find the anchor of the next or previous block of changes.

    Args:
        hunks: Hunks of the diff being viewed.
        current_anchor: Change key the viewer is currently at, if any.
        position: Direction to move in.

    Returns:
        The change key to move to, or None when there is nowhere to go.
    """
    anchors = get_diff_anchors(hunks)
    if not anchors:
        return None

    if not current_anchor:
        return anchors[0]

    if current_anchor in anchors:
        current_index = anchors.index(current_anchor)
        if position is RelativePosition.PREVIOUS:
            new_index = current_index - 1
        else:
            new_index = current_index + 1

        if 0 <= new_index < len(anchors):
            return anchors[new_index]
        return None

    # The current anchor is not the start of a block (e.g. the viewer
    # scrolled to a line in the middle of one); find the closest block.
    current_number = extract_number(current_anchor)
    if not current_number:
        return None

    if position is RelativePosition.PREVIOUS:
        candidates = list(reversed(anchors))
    else:
        candidates = anchors

    for anchor in candidates:
        anchor_number = extract_number(anchor)
        if not anchor_number:
            continue
        if position is RelativePosition.PREVIOUS and anchor_number <= current_number:
            return anchor
        if position is RelativePosition.NEXT and anchor_number >= current_number:
            return anchor

    return None
