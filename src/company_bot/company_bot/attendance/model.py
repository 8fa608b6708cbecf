from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import parse_iso, to_iso
from ..core.enums import AttendanceStatus, Command


@dataclass
class BreakInterval:
    """Một lần nghỉ giải lao. ``end`` và ``duration_minutes`` được ghi cùng lúc."""

    start: datetime
    end: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    note: Optional[str] = None
    return_note: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"start": to_iso(self.start), "report": self.note}
        if self.end is not None:
            data["end"] = to_iso(self.end)
            data["duration"] = self.duration_minutes
        if self.return_note:
            data["returnReport"] = self.return_note
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakInterval":
        duration = data.get("duration")
        return cls(
            start=parse_iso(data["start"]),
            end=parse_iso(data.get("end")),
            duration_minutes=int(duration) if duration is not None else None,
            note=data.get("report"),
            return_note=data.get("returnReport"),
        )


@dataclass
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một người trong một ngày."""

    username: str
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    breaks: List[BreakInterval] = field(default_factory=list)
    check_in_report: Optional[str] = None
    check_out_report: Optional[str] = None
    total_work_hours: Optional[float] = None
    total_break_minutes: Optional[int] = None

    @property
    def status(self) -> Optional[AttendanceStatus]:
        """Derived from the fields present; None means not started."""
        if self.check_in is None:
            return None
        if self.check_out is not None:
            return AttendanceStatus.FINISHED
        if self.open_break is not None:
            return AttendanceStatus.ON_BREAK
        return AttendanceStatus.WORKING

    @property
    def open_break(self) -> Optional[BreakInterval]:
        for interval in reversed(self.breaks):
            if interval.is_open:
                return interval
        return None

    @property
    def last_event_at(self) -> Optional[datetime]:
        moments = [self.check_in, self.check_out]
        for interval in self.breaks:
            moments.extend([interval.start, interval.end])
        known = [m for m in moments if m is not None]
        return max(known) if known else None

    def snapshot(self) -> "AttendanceRecord":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        status = self.status
        data: Dict[str, Any] = {
            "username": self.username,
            "start": to_iso(self.check_in),
            "status": status.value if status else None,
            "breaks": [b.to_dict() for b in self.breaks],
            "reports": {"checkIn": self.check_in_report},
        }
        if self.check_out is not None:
            data["end"] = to_iso(self.check_out)
        if self.check_out_report:
            data["reports"]["checkOut"] = self.check_out_report
        if self.total_work_hours is not None:
            data["totalHours"] = self.total_work_hours
        if self.total_break_minutes is not None:
            data["totalBreakMinutes"] = self.total_break_minutes
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttendanceRecord":
        reports = data.get("reports") or {}
        total_hours = data.get("totalHours")
        total_break = data.get("totalBreakMinutes")
        return cls(
            username=str(data.get("username") or ""),
            check_in=parse_iso(data.get("start")),
            check_out=parse_iso(data.get("end")),
            breaks=[BreakInterval.from_dict(b) for b in data.get("breaks") or []],
            check_in_report=reports.get("checkIn"),
            check_out_report=reports.get("checkOut"),
            total_work_hours=float(total_hours) if total_hours is not None else None,
            total_break_minutes=int(total_break) if total_break is not None else None,
        )


# {user_id: {day: record}}
AttendanceTable = Dict[str, Dict[str, AttendanceRecord]]


@dataclass(frozen=True)
class TransitionResult:
    """Kết quả của một lần chuyển trạng thái hợp lệ."""

    command: Command
    user_id: str
    username: str
    day: str
    at: datetime
    record: AttendanceRecord
    note: Optional[str] = None
    break_interval: Optional[BreakInterval] = None
