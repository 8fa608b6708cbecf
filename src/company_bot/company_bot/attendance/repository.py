from __future__ import annotations

from typing import Protocol

from .model import AttendanceTable


class AttendanceRepository(Protocol):
    def load(self) -> AttendanceTable:
        """Return the whole table; an empty one when nothing usable is stored."""

        raise NotImplementedError

    def save(self, table: AttendanceTable) -> None:
        """Replace the durable copy with ``table``. Raises PersistenceError."""

        raise NotImplementedError
