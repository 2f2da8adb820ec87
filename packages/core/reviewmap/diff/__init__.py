"""Diff parsing, line anchors and change navigation."""

from reviewmap.diff.parser import (
    ABSENT_LINE,
    Change,
    ChangeType,
    FileDiff,
    Hunk,
    parse_unified_diff,
)
from reviewmap.diff.comparison import (
    CHANGE_TYPE_PRIORITY,
    ForwardComparisonMap,
    change_priority,
    compare_changes,
    get_all_hunk_changes,
    get_change_key,
    get_code_line_anchor,
)
from reviewmap.diff.navigation import (
    RelativePosition,
    extract_number,
    get_diff_anchors,
    get_inserted_lines,
    get_relative_diff_anchor,
)

__all__ = [
    "ABSENT_LINE",
    "Change",
    "ChangeType",
    "FileDiff",
    "Hunk",
    "parse_unified_diff",
    "CHANGE_TYPE_PRIORITY",
    "ForwardComparisonMap",
    "change_priority",
    "compare_changes",
    "get_all_hunk_changes",
    "get_change_key",
    "get_code_line_anchor",
    "RelativePosition",
    "extract_number",
    "get_diff_anchors",
    "get_inserted_lines",
    "get_relative_diff_anchor",
]
