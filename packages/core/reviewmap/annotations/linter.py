"""Linter messages grouped by file and line."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class MessageType(str, Enum):
    """Linter message severities"""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


SEVERITY_RANK = {
    MessageType.ERROR: 3,
    MessageType.WARNING: 2,
    MessageType.NOTICE: 1,
}


@dataclass
class LinterMessage:
    """A single linter finding"""

    uid: str
    message: str
    type: MessageType
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    code: List[str] = field(default_factory=list)
    description: List[str] = field(default_factory=list)

    @classmethod
    def from_external(cls, data: dict) -> "LinterMessage":
        """Build a message from the linter's JSON output."""
        description = data.get("description") or []
        if not isinstance(description, list):
            description = [description]

        return cls(
            uid=data["uid"],
            message=data["message"],
            type=MessageType(data["type"]),
            file=data.get("file"),
            line=data.get("line"),
            column=data.get("column"),
            code=list(data.get("id") or []),
            description=description,
        )

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "message": self.message,
            "type": self.type.value,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "code": self.code,
            "description": self.description,
        }


@dataclass
class LinterMessagesByPath:
    """Messages for one file: file-wide ones and per-line ones"""

    global_messages: List[LinterMessage] = field(default_factory=list)
    by_line: Dict[int, List[LinterMessage]] = field(default_factory=dict)

    def all_messages(self) -> List[LinterMessage]:
        messages = list(self.global_messages)
        for line in sorted(self.by_line):
            messages.extend(self.by_line[line])
        return messages


LinterMessageMap = Dict[str, LinterMessagesByPath]


def get_message_map(result: dict, log: Optional[logging.Logger] = None) -> LinterMessageMap:
    """
    Group a linter result's messages by file path and line.

    Args:
        result: Linter result JSON with a validation.messages list
        log: Logger for messages that cannot be mapped (module logger by default)

    Returns:
        Mapping of file path to its messages
    """
    log = log or logger
    msg_map: LinterMessageMap = {}

    for data in result["validation"]["messages"]:
        if not data.get("file"):
            log.error(
                "Unexpectedly received a message not mapped to a file: %s",
                data.get("message"),
            )
            continue

        message = LinterMessage.from_external(data)
        by_path = msg_map.setdefault(message.file, LinterMessagesByPath())

        if message.line:
            by_path.by_line.setdefault(message.line, []).append(message)
        else:
            by_path.global_messages.append(message)

    return msg_map


def find_most_severe_type(messages: Iterable[LinterMessage]) -> Optional[MessageType]:
    """Return the most severe type among messages, or None if there are none."""
    most_severe: Optional[MessageType] = None
    for message in messages:
        if most_severe is None or SEVERITY_RANK[message.type] > SEVERITY_RANK[most_severe]:
            most_severe = message.type
    return most_severe


def find_most_severe_type_for_path(
    message_map: LinterMessageMap, path: str
) -> Optional[MessageType]:
    by_path = message_map.get(path)
    if not by_path:
        return None
    return find_most_severe_type(by_path.all_messages())
