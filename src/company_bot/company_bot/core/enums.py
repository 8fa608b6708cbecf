from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái của bản ghi trong ngày. Giá trị khớp với file JSON đã lưu."""

    WORKING = "working"
    ON_BREAK = "break"
    FINISHED = "finished"


class Command(str, Enum):
    """Lệnh chuyển trạng thái chấm công."""

    CHECK_IN = "start"
    START_BREAK = "break"
    RESUME = "return"
    CHECK_OUT = "off"


class OutgoingTarget(str, Enum):
    REPLY = "reply"
    CHANNEL = "channel"
    ATTENDANCE = "attendance"


class Provider(str, Enum):
    GITHUB = "github"
    BITBUCKET = "bitbucket"
