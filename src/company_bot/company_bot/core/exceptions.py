from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PersistenceError(DomainError):
    """Raised when the attendance table cannot be written to durable storage."""


class TransitionError(DomainError):
    """Raised when an attendance command is not valid for the current record.

    The message is the bilingual text shown to the user.
    """

    message = "エラーが発生しました。(Invalid attendance command.)"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class AlreadyCheckedIn(TransitionError):
    message = "❌ 今日はもう出勤済みです！(You have already checked in today!)"


class NotCheckedIn(TransitionError):
    message = "❌ まず出勤してください！(Please check in first!)"


class AlreadyOnBreak(TransitionError):
    message = "❌ すでに休憩中です！(You are already on break!)"


class NotOnBreak(TransitionError):
    message = "❌ 休憩中ではありません！(You are not on break!)"


class AlreadyFinished(TransitionError):
    message = "❌ 今日はもう退勤済みです！(You have already checked out today!)"


class InvalidTimestamp(TransitionError):
    message = "❌ 時刻が前回の記録より前です。(The time is earlier than your last record.)"
