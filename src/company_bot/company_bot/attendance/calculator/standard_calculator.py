from __future__ import annotations

import math
from datetime import datetime

from ...common.datetime_utils import minutes_between
from ..model import AttendanceRecord
from .base import WorkTimeCalculator, WorkTotals


class StandardWorkTimeCalculator(WorkTimeCalculator):
    """Standard rule: (out - in) - closed breaks, not below 0."""

    def break_minutes(self, start: datetime, end: datetime) -> int:
        # Half-up, so a 29.5 minute break counts as 30.
        return int(math.floor(minutes_between(start, end) + 0.5))

    def totals(self, record: AttendanceRecord, check_out: datetime) -> WorkTotals:
        if record.check_in is None:
            return WorkTotals(elapsed_hours=0.0, break_minutes=0, work_hours=0.0)

        elapsed_hours = minutes_between(record.check_in, check_out) / 60
        break_minutes = sum(int(b.duration_minutes or 0) for b in record.breaks if not b.is_open)
        work_hours = round(max(elapsed_hours - break_minutes / 60, 0.0), 2)
        return WorkTotals(elapsed_hours=elapsed_hours, break_minutes=break_minutes, work_hours=work_hours)
