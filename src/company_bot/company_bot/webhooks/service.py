from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..common.datetime_utils import now_utc
from ..notifications.formatter import NotificationFormatter
from . import bitbucket, github
from .model import PushEvent
from .notifier import Notifier

logger = logging.getLogger(__name__)


class PushNotificationService:
    """Normalize provider push payloads and forward them to the git channel."""

    def __init__(self, formatter: NotificationFormatter, notifier: Notifier, *, git_channel_id: Optional[str]):
        self._formatter = formatter
        self._notifier = notifier
        self._git_channel_id = git_channel_id

    def handle_github(self, event_type: Optional[str], payload: Any) -> int:
        """Returns the number of notifications sent."""
        if event_type != github.PUSH_EVENT:
            logger.info("Ignoring GitHub event type: %s", event_type)
            return 0
        event = github.parse_push(payload)
        return self._announce([event] if event else [])

    def handle_bitbucket(self, event_type: Optional[str], payload: Any) -> int:
        if event_type != bitbucket.PUSH_EVENT:
            logger.info("Ignoring Bitbucket event type: %s", event_type)
            return 0
        return self._announce(bitbucket.parse_push(payload))

    def _announce(self, events: Iterable[PushEvent]) -> int:
        sent = 0
        for event in events:
            logger.info(
                "%d commit(s) to %s/%s by %s",
                event.total_commits,
                event.repository,
                event.branch,
                event.pusher_name,
            )
            message = self._formatter.render_push(event, timestamp=now_utc())
            if self._notifier.send(self._git_channel_id, message):
                logger.info("Git notification sent for %s/%s", event.repository, event.branch)
                sent += 1
        return sent
