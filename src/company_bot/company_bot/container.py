from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .bot.handler import MessageHandler
from .commands.router import CommandRouter
from .core.constants import (
    DEFAULT_DATA_PATH,
    DEFAULT_DAY_KEY_TIMEZONE,
    DEFAULT_DISPLAY_TIMEZONE,
    TRANSLATION_API_URL,
    TRANSLATION_TIMEOUT_SECONDS,
)
from .notifications.formatter import NotificationFormatter
from .translation.service import TranslationService
from .webhooks.notifier import Notifier
from .webhooks.service import PushNotificationService


@dataclass(frozen=True)
class Container:
    attendance_repo: JsonAttendanceRepository

    attendance_service: AttendanceService
    router: CommandRouter
    formatter: NotificationFormatter
    translator: Optional[TranslationService]
    message_handler: MessageHandler
    push_service: PushNotificationService


def build_container(
    *,
    bot_config: dict,
    notifier: Notifier,
    translator: Optional[TranslationService] = None,
) -> Container:
    attendance_channel_id = bot_config.get("attendance_channel_id") or None
    git_channel_id = bot_config.get("git_channel_id") or None

    attendance_repo = JsonAttendanceRepository(bot_config.get("data_path") or DEFAULT_DATA_PATH)
    attendance_service = AttendanceService(
        attendance_repo,
        day_key_timezone=bot_config.get("day_key_timezone") or DEFAULT_DAY_KEY_TIMEZONE,
    )
    router = CommandRouter()
    formatter = NotificationFormatter(bot_config.get("display_timezone") or DEFAULT_DISPLAY_TIMEZONE)

    if translator is None and bot_config.get("translation_enabled", True):
        translator = TranslationService(
            api_url=bot_config.get("translation_api_url") or TRANSLATION_API_URL,
            timeout=float(bot_config.get("translation_timeout") or TRANSLATION_TIMEOUT_SECONDS),
        )

    message_handler = MessageHandler(
        attendance_service,
        router,
        formatter,
        translator,
        attendance_channel_id=attendance_channel_id,
        excluded_translation_channels=[attendance_channel_id, git_channel_id],
    )
    push_service = PushNotificationService(formatter, notifier, git_channel_id=git_channel_id)

    return Container(
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        router=router,
        formatter=formatter,
        translator=translator,
        message_handler=message_handler,
        push_service=push_service,
    )
