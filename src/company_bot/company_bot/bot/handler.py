from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..attendance.service import AttendanceService
from ..commands.router import AttendanceIntent, CommandRouter, StatusIntent
from ..core.enums import Command, OutgoingTarget
from ..core.exceptions import TransitionError
from ..notifications.formatter import (
    GENERIC_ERROR_TEXT,
    NOT_STARTED_TEXT,
    RECORDED_TEXT,
    NotificationFormatter,
)
from ..notifications.model import StructuredMessage
from ..translation.service import TranslationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncomingMessage:
    user_id: str
    username: str
    content: str
    channel_id: str
    timestamp: datetime
    is_bot: bool = False


@dataclass(frozen=True)
class OutgoingMessage:
    target: OutgoingTarget
    body: Union[str, StructuredMessage]


class MessageHandler:
    """Decide what the bot sends back for one chat message.

    Knows nothing about Discord: the transport turns the returned
    OutgoingMessage list into replies and channel sends.
    """

    def __init__(
        self,
        attendance: AttendanceService,
        router: CommandRouter,
        formatter: NotificationFormatter,
        translator: Optional[TranslationService] = None,
        *,
        attendance_channel_id: Optional[str] = None,
        excluded_translation_channels: Iterable[str] = (),
    ):
        self._attendance = attendance
        self._router = router
        self._formatter = formatter
        self._translator = translator
        self._attendance_channel_id = attendance_channel_id
        self._excluded = {str(c) for c in excluded_translation_channels if c}

    def handle(self, message: IncomingMessage) -> List[OutgoingMessage]:
        if message.is_bot:
            return []

        intent = self._router.route(message.content)
        if isinstance(intent, StatusIntent):
            return self._status(message)
        if isinstance(intent, AttendanceIntent):
            try:
                return self._attendance_command(message, intent)
            except TransitionError as e:
                return [OutgoingMessage(OutgoingTarget.REPLY, str(e))]
            except Exception:
                logger.exception("Error handling attendance command from %s", message.username)
                return [OutgoingMessage(OutgoingTarget.REPLY, GENERIC_ERROR_TEXT)]

        return self._translation(message)

    def _attendance_command(self, message: IncomingMessage, intent: AttendanceIntent) -> List[OutgoingMessage]:
        result = self._attendance.apply(
            message.user_id,
            message.username,
            intent.command,
            now=message.timestamp,
            note=intent.note,
        )
        rendered = self._formatter.render(result)
        out = [
            OutgoingMessage(OutgoingTarget.REPLY, rendered),
            OutgoingMessage(OutgoingTarget.CHANNEL, RECORDED_TEXT),
        ]
        if (
            intent.command == Command.CHECK_IN
            and self._attendance_channel_id
            and str(self._attendance_channel_id) != str(message.channel_id)
        ):
            out.append(OutgoingMessage(OutgoingTarget.ATTENDANCE, rendered))
        return out

    def _status(self, message: IncomingMessage) -> List[OutgoingMessage]:
        day = self._attendance.today(message.timestamp)
        record = self._attendance.status(message.user_id, day)
        if record is None:
            return [OutgoingMessage(OutgoingTarget.REPLY, NOT_STARTED_TEXT)]
        rendered = self._formatter.render_status(message.username, record, timestamp=message.timestamp)
        return [OutgoingMessage(OutgoingTarget.REPLY, rendered)]

    def _translation(self, message: IncomingMessage) -> List[OutgoingMessage]:
        if self._translator is None or str(message.channel_id) in self._excluded:
            return []

        try:
            translation = self._translator.translate(message.content)
        except Exception:
            logger.exception("Translation failed for message from %s", message.username)
            return []
        if translation is None:
            return []

        logger.info("Translation sent (%s) for message from %s", translation.direction.name, message.username)
        text = self._formatter.translation_text(translation.direction.name, translation.text)
        return [OutgoingMessage(OutgoingTarget.REPLY, text)]
