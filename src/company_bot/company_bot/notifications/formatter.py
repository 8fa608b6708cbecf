from __future__ import annotations

from ..attendance.model import AttendanceRecord, TransitionResult
from ..common.datetime_utils import format_time
from ..core.constants import DEFAULT_DISPLAY_TIMEZONE
from ..core.enums import AttendanceStatus, Command, Provider
from ..webhooks.model import PushEvent
from .model import StructuredMessage

GREEN = 0x00FF00
YELLOW = 0xFFFF00
RED = 0xFF0000
BLUE = 0x0099FF
GITHUB_DARK = 0x24292E
BITBUCKET_BLUE = 0x0052CC

RECORDED_TEXT = "**📊 スプレッドシートに記録しました**"
NOT_STARTED_TEXT = "📝 今日はまだ出勤していません。(You have not checked in today yet.)"
GENERIC_ERROR_TEXT = "エラーが発生しました。もう一度お試しください。(An error occurred. Please try again.)"

TRANSLATION_FLAGS = {
    "jp-to-en": "🇯🇵➡️🇺🇸",
    "en-to-jp": "🇺🇸➡️🇯🇵",
}


class NotificationFormatter:
    """Render attendance results and push events as StructuredMessage.

    Pure: no I/O and no state besides the display time zone.
    """

    def __init__(self, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE):
        self._tz = display_timezone
        self._renderers = {
            Command.CHECK_IN: self._check_in,
            Command.START_BREAK: self._break_start,
            Command.RESUME: self._break_end,
            Command.CHECK_OUT: self._check_out,
        }

    def render(self, result: TransitionResult) -> StructuredMessage:
        return self._renderers[result.command](result)

    def _time(self, value) -> str:
        return format_time(value, self._tz)

    def _check_in(self, r: TransitionResult) -> StructuredMessage:
        msg = (
            StructuredMessage(
                title="🟢 出勤 (Check In)",
                color=GREEN,
                description=f"{r.username}さんが出勤しました",
                timestamp=r.at,
            )
            .with_field("時間 (Time)", self._time(r.at))
            .with_field("日付 (Date)", r.day)
        )
        if r.note:
            msg = msg.with_field("報告 (Report)", r.note, inline=False)
        return msg

    def _break_start(self, r: TransitionResult) -> StructuredMessage:
        msg = StructuredMessage(
            title="🟡 休憩開始 (Break Start)",
            color=YELLOW,
            description=f"{r.username}さんが休憩に入りました",
            timestamp=r.at,
        ).with_field("時間 (Time)", self._time(r.at))
        if r.note:
            msg = msg.with_field("進捗報告 (Progress Report)", r.note, inline=False)
        return msg

    def _break_end(self, r: TransitionResult) -> StructuredMessage:
        minutes = r.break_interval.duration_minutes if r.break_interval else 0
        msg = (
            StructuredMessage(
                title="🟢 休憩終了 (Break End)",
                color=GREEN,
                description=f"{r.username}さんが仕事に戻りました",
                timestamp=r.at,
            )
            .with_field("時間 (Time)", self._time(r.at))
            .with_field("休憩時間 (Break Duration)", f"{minutes or 0}分")
        )
        if r.note:
            msg = msg.with_field("復帰報告 (Return Report)", r.note, inline=False)
        return msg

    def _check_out(self, r: TransitionResult) -> StructuredMessage:
        record = r.record
        msg = (
            StructuredMessage(
                title="🔴 退勤 (Check Out)",
                color=RED,
                description=f"{r.username}さんがお疲れ様でした",
                timestamp=r.at,
            )
            .with_field("退勤時間 (Check Out)", self._time(r.at))
            .with_field("総労働時間 (Total Work)", f"{record.total_work_hours or 0:.2f}時間")
            .with_field("休憩時間 (Break Time)", f"{record.total_break_minutes or 0}分")
            .with_field("出勤時間 (Check In)", self._time(record.check_in))
        )
        if r.note:
            msg = msg.with_field("本日の業務報告 (Daily Work Report)", r.note, inline=False)
        return msg

    def render_status(self, username: str, record: AttendanceRecord, *, timestamp=None) -> StructuredMessage:
        label = {
            AttendanceStatus.WORKING: "🟢 勤務中 (Working)",
            AttendanceStatus.ON_BREAK: "🟡 休憩中 (On Break)",
            AttendanceStatus.FINISHED: "🔴 退勤済み (Checked Out)",
        }.get(record.status, "❓ 不明 (Unknown)")

        msg = (
            StructuredMessage(
                title=f"📊 {username}さんの今日の状況 (Today's Status)",
                color=BLUE,
                timestamp=timestamp,
            )
            .with_field("現在の状態 (Current Status)", label)
            .with_field("出勤時間 (Check In)", self._time(record.check_in))
            .with_field("退勤時間 (Check Out)", self._time(record.check_out))
            .with_field("休憩回数 (Break Count)", f"{len(record.breaks)}回")
        )
        if record.total_work_hours is not None:
            msg = msg.with_field("総労働時間 (Total Hours)", f"{record.total_work_hours:.2f}時間")
        return msg

    def render_push(self, event: PushEvent, *, timestamp=None) -> StructuredMessage:
        if event.provider == Provider.GITHUB:
            title, color = "📦 GitHub Push Notification", GITHUB_DARK
        else:
            title, color = "🔧 Bitbucket Push Notification", BITBUCKET_BLUE

        msg = (
            StructuredMessage(
                title=title,
                color=color,
                description=(
                    f"**Repository:** {event.repository}\n"
                    f"**Branch:** {event.branch}\n"
                    f"**Pushed by:** {event.pusher_name}"
                ),
                thumbnail_url=event.pusher_avatar_url,
                timestamp=timestamp,
            )
            .with_field("Commits", f"{event.total_commits} commit(s)")
            .with_field("Repository", self._repository_link(event))
        )

        lines = []
        for commit in event.commits:
            if commit.url:
                lines.append(f"• [`{commit.short_hash}`]({commit.url}) {commit.message}")
            else:
                lines.append(f"• `{commit.short_hash}` {commit.message}")
        if lines:
            if event.is_truncated:
                heading = f"Recent Commits (showing {len(event.commits)} of {event.total_commits})"
            else:
                heading = "Commits"
            msg = msg.with_field(heading, "\n".join(lines), inline=False)
        return msg

    @staticmethod
    def _repository_link(event: PushEvent) -> str:
        if event.repository_url:
            return f"[{event.repository_full_name}]({event.repository_url})"
        return event.repository_full_name

    @staticmethod
    def translation_text(direction: str, translated: str) -> str:
        return f"{TRANSLATION_FLAGS.get(direction, '🌐')} {translated}"
