from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ..model import AttendanceRecord


@dataclass(frozen=True)
class WorkTotals:
    elapsed_hours: float
    break_minutes: int
    work_hours: float


class WorkTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for time accounting)."""

    @abstractmethod
    def break_minutes(self, start: datetime, end: datetime) -> int:
        raise NotImplementedError

    @abstractmethod
    def totals(self, record: AttendanceRecord, check_out: datetime) -> WorkTotals:
        raise NotImplementedError
