from __future__ import annotations

from typing import Protocol

from ..notifications.model import StructuredMessage


class Notifier(Protocol):
    def send(self, channel_id: str, message: StructuredMessage) -> bool:
        """Deliver ``message`` to ``channel_id``; False when it could not be sent."""

        raise NotImplementedError
