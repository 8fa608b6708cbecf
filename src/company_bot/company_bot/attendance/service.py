from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Optional

from ..common.datetime_utils import day_key, ensure_aware, now_utc
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_DAY_KEY_TIMEZONE
from ..core.enums import AttendanceStatus, Command
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyFinished,
    AlreadyOnBreak,
    InvalidTimestamp,
    NotCheckedIn,
    NotOnBreak,
    PersistenceError,
)
from .calculator.base import WorkTimeCalculator
from .calculator.standard_calculator import StandardWorkTimeCalculator
from .model import AttendanceRecord, AttendanceTable, BreakInterval, TransitionResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Per-user, per-day attendance state machine.

    The service owns the in-memory table loaded from the repository. Every
    transition runs under one lock and is saved before it is returned, so two
    commands for the same day never interleave. A failed save is logged and the
    in-memory change is kept.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkTimeCalculator] = None,
        day_key_timezone: str = DEFAULT_DAY_KEY_TIMEZONE,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkTimeCalculator()
        self._tz = day_key_timezone
        self._lock = threading.Lock()
        self._table: AttendanceTable = attendance.load()
        self._handlers: Dict[Command, Callable[..., TransitionResult]] = {
            Command.CHECK_IN: self._check_in,
            Command.START_BREAK: self._start_break,
            Command.RESUME: self._resume,
            Command.CHECK_OUT: self._check_out,
        }

    def today(self, now: Optional[datetime] = None) -> str:
        return day_key(now or now_utc(), self._tz)

    def apply(
        self,
        user_id: str,
        username: str,
        command: Command,
        *,
        now: Optional[datetime] = None,
        note: Optional[str] = None,
    ) -> TransitionResult:
        user_id = require_non_empty(user_id, "user_id")
        now = ensure_aware(now or now_utc())
        today = self.today(now)
        note = optional_text(note)

        with self._lock:
            result = self._handlers[command](user_id, username, today, now, note)
            self._persist()

        logger.info(
            "%s %s on %s at %s%s",
            username,
            command.name.lower(),
            today,
            now.isoformat(),
            " with note" if note else "",
        )
        return result

    def check_in(self, user_id: str, username: str, *, now: Optional[datetime] = None, note: Optional[str] = None):
        return self.apply(user_id, username, Command.CHECK_IN, now=now, note=note)

    def start_break(self, user_id: str, username: str, *, now: Optional[datetime] = None, note: Optional[str] = None):
        return self.apply(user_id, username, Command.START_BREAK, now=now, note=note)

    def resume(self, user_id: str, username: str, *, now: Optional[datetime] = None, note: Optional[str] = None):
        return self.apply(user_id, username, Command.RESUME, now=now, note=note)

    def check_out(self, user_id: str, username: str, *, now: Optional[datetime] = None, note: Optional[str] = None):
        return self.apply(user_id, username, Command.CHECK_OUT, now=now, note=note)

    def status(self, user_id: str, day: str) -> Optional[AttendanceRecord]:
        """Copy of the record for ``day``, or None when the user has not started."""
        with self._lock:
            record = self._table.get(str(user_id), {}).get(day)
            return record.snapshot() if record else None

    # Transitions. Called with the lock held.

    def _check_in(self, user_id, username, today, now, note) -> TransitionResult:
        existing = self._get(user_id, today)
        if existing and existing.check_in is not None:
            raise AlreadyCheckedIn()

        record = AttendanceRecord(username=username, check_in=now, check_in_report=note)
        self._table.setdefault(user_id, {})[today] = record
        return self._result(Command.CHECK_IN, user_id, record, today, now, note)

    def _start_break(self, user_id, username, today, now, note) -> TransitionResult:
        record = self._get(user_id, today)
        if not record or record.check_in is None:
            raise NotCheckedIn()
        if record.status == AttendanceStatus.ON_BREAK:
            raise AlreadyOnBreak()
        if record.status == AttendanceStatus.FINISHED:
            raise AlreadyFinished()
        self._require_in_order(record, now)

        interval = BreakInterval(start=now, note=note)
        record.breaks.append(interval)
        return self._result(Command.START_BREAK, user_id, record, today, now, note, interval)

    def _resume(self, user_id, username, today, now, note) -> TransitionResult:
        record = self._get(user_id, today)
        if not record or record.status != AttendanceStatus.ON_BREAK:
            raise NotOnBreak()
        self._require_in_order(record, now)

        interval = self._close_break(record, now)
        interval.return_note = note
        return self._result(Command.RESUME, user_id, record, today, now, note, interval)

    def _check_out(self, user_id, username, today, now, note) -> TransitionResult:
        record = self._get(user_id, today)
        if not record or record.check_in is None:
            raise NotCheckedIn()
        if record.status == AttendanceStatus.FINISHED:
            raise AlreadyFinished()
        self._require_in_order(record, now)

        closed = self._close_break(record, now) if record.status == AttendanceStatus.ON_BREAK else None

        totals = self._calculator.totals(record, now)
        record.check_out = now
        record.check_out_report = note
        record.total_work_hours = totals.work_hours
        record.total_break_minutes = totals.break_minutes
        return self._result(Command.CHECK_OUT, user_id, record, today, now, note, closed)

    # Helpers

    def _get(self, user_id: str, today: str) -> Optional[AttendanceRecord]:
        return self._table.get(user_id, {}).get(today)

    def _close_break(self, record: AttendanceRecord, now: datetime) -> BreakInterval:
        interval = record.open_break
        interval.end = now
        interval.duration_minutes = self._calculator.break_minutes(interval.start, now)
        return interval

    @staticmethod
    def _require_in_order(record: AttendanceRecord, now: datetime) -> None:
        last = record.last_event_at
        if last is not None and now < last:
            raise InvalidTimestamp()

    def _persist(self) -> None:
        try:
            self._attendance.save(self._table)
        except PersistenceError:
            logger.exception("Failed to save attendance data; keeping in-memory state")

    @staticmethod
    def _result(command, user_id, record, today, now, note, interval=None) -> TransitionResult:
        snapshot = record.snapshot()
        if interval is not None:
            position = next(i for i, b in enumerate(record.breaks) if b is interval)
            interval = snapshot.breaks[position]
        return TransitionResult(
            command=command,
            user_id=user_id,
            username=record.username,
            day=today,
            at=now,
            record=snapshot,
            note=note,
            break_interval=interval,
        )
