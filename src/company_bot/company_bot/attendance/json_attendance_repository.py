from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..core.exceptions import PersistenceError
from .model import AttendanceRecord, AttendanceTable

logger = logging.getLogger(__name__)


class JsonAttendanceRepository:
    """Whole-table JSON file: ``{user_id: {day: record}}``.

    Every save rewrites the file through a temp file in the same directory and
    ``os.replace`` so a crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AttendanceTable:
        if not self._path.exists():
            logger.info("No attendance data at %s, starting empty", self._path)
            return {}

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            table = self._decode(raw)
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Attendance data at %s is unreadable (%s), starting empty", self._path, e)
            return {}

        logger.info("Loaded attendance data for %d user(s) from %s", len(table), self._path)
        return table

    def save(self, table: AttendanceTable) -> None:
        payload = {
            user_id: {day: record.to_dict() for day, record in days.items()}
            for user_id, days in table.items()
        }
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(directory), prefix=".attendance-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, self._path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise PersistenceError(f"Could not write {self._path}: {e}") from e

        logger.debug("Attendance data saved to %s", self._path)

    @staticmethod
    def _decode(raw) -> AttendanceTable:
        if not isinstance(raw, dict):
            raise TypeError("top level must be an object")

        table: AttendanceTable = {}
        for user_id, days in raw.items():
            if not isinstance(days, dict):
                raise TypeError(f"entry for user {user_id} must be an object")
            table[str(user_id)] = {str(day): AttendanceRecord.from_dict(data) for day, data in days.items()}
        return table
