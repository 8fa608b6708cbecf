from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..common.validators import optional_text
from ..core.constants import ATTENDANCE_KEYWORDS, STATUS_KEYWORDS
from ..core.enums import Command


@dataclass(frozen=True)
class AttendanceIntent:
    command: Command
    keyword: str
    note: Optional[str] = None


@dataclass(frozen=True)
class StatusIntent:
    keyword: str


class CommandRouter:
    """Turn one chat message into at most one attendance intent.

    Keywords are checked in a fixed order and the first one found anywhere in
    the text wins; a message such as "出勤 ... 退勤" is a check-in only.
    Anything that is not an intent returns None and may be translated instead.
    """

    def __init__(
        self,
        keywords: Sequence[Tuple[str, Command]] = ATTENDANCE_KEYWORDS,
        status_keywords=STATUS_KEYWORDS,
    ):
        self._keywords = tuple(keywords)
        self._status_keywords = frozenset(status_keywords)

    def route(self, text: str):
        text = text or ""
        if text.strip() in self._status_keywords:
            return StatusIntent(keyword=text.strip())

        match = self.match_command(text)
        if match:
            return match
        return None

    def match_command(self, text: str) -> Optional[AttendanceIntent]:
        for keyword, command in self._keywords:
            if keyword in text:
                note = optional_text(text.replace(keyword, "", 1))
                return AttendanceIntent(command=command, keyword=keyword, note=note)
        return None
