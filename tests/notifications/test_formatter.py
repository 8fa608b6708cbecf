from __future__ import annotations

from src.company_bot.company_bot.attendance.service import AttendanceService
from src.company_bot.company_bot.core.enums import Provider
from src.company_bot.company_bot.notifications.formatter import (
    BITBUCKET_BLUE,
    BLUE,
    GITHUB_DARK,
    GREEN,
    RED,
    YELLOW,
    NotificationFormatter,
)
from src.company_bot.company_bot.webhooks.model import CommitSummary, PushEvent


def _formatter():
    return NotificationFormatter("Asia/Tokyo")


def test_check_in_message(repo, at):
    result = AttendanceService(repo).check_in("1", "taro", now=at("00:30"), note="plan: X")

    msg = _formatter().render(result)

    assert msg.title == "🟢 出勤 (Check In)"
    assert msg.color == GREEN
    assert msg.description == "taroさんが出勤しました"
    assert msg.field_value("時間 (Time)") == "09:30:00"
    assert msg.field_value("日付 (Date)") == "2026-01-15"
    assert msg.field_value("報告 (Report)") == "plan: X"
    assert msg.fields[-1].inline is False


def test_check_in_without_note_has_no_report_field(repo, at):
    result = AttendanceService(repo).check_in("1", "taro", now=at("00:30"))

    msg = _formatter().render(result)

    assert [f.name for f in msg.fields] == ["時間 (Time)", "日付 (Date)"]


def test_break_messages(repo, at):
    svc = AttendanceService(repo)
    svc.check_in("1", "taro", now=at("00:00"))
    started = _formatter().render(svc.start_break("1", "taro", now=at("03:00"), note="API half done"))
    ended = _formatter().render(svc.resume("1", "taro", now=at("03:40")))

    assert started.color == YELLOW
    assert started.field_value("進捗報告 (Progress Report)") == "API half done"
    assert ended.title == "🟢 休憩終了 (Break End)"
    assert ended.field_value("休憩時間 (Break Duration)") == "40分"


def test_check_out_message(repo, at):
    svc = AttendanceService(repo)
    svc.check_in("1", "taro", now=at("00:00"))
    svc.start_break("1", "taro", now=at("03:00"))
    svc.resume("1", "taro", now=at("03:30"))

    msg = _formatter().render(svc.check_out("1", "taro", now=at("09:00"), note="done"))

    assert msg.color == RED
    assert msg.field_value("総労働時間 (Total Work)") == "8.50時間"
    assert msg.field_value("休憩時間 (Break Time)") == "30分"
    assert msg.field_value("出勤時間 (Check In)") == "09:00:00"
    assert msg.field_value("本日の業務報告 (Daily Work Report)") == "done"


def test_status_report(repo, at):
    svc = AttendanceService(repo)
    svc.check_in("1", "taro", now=at("00:00"))
    svc.start_break("1", "taro", now=at("03:00"))

    msg = _formatter().render_status("taro", svc.status("1", "2026-01-15"))

    assert msg.color == BLUE
    assert msg.field_value("現在の状態 (Current Status)") == "🟡 休憩中 (On Break)"
    assert msg.field_value("退勤時間 (Check Out)") == "未記録"
    assert msg.field_value("休憩回数 (Break Count)") == "1回"
    assert msg.field_value("総労働時間 (Total Hours)") is None


def _push(provider, total, commits):
    return PushEvent(
        provider=provider,
        repository="bot",
        repository_full_name="acme/bot",
        repository_url="https://example.com/acme/bot",
        branch="main",
        pusher_name="taro",
        total_commits=total,
        commits=tuple(commits),
        pusher_avatar_url="https://example.com/a.png",
    )


def test_push_message_lists_commits():
    commits = [CommitSummary("abc1234", "Fix login", "https://example.com/c/abc1234"), CommitSummary("def5678", "Docs")]

    msg = _formatter().render_push(_push(Provider.GITHUB, 2, commits))

    assert msg.color == GITHUB_DARK
    assert "**Branch:** main" in msg.description
    assert msg.field_value("Commits") == "2 commit(s)"
    assert msg.field_value("Repository") == "[acme/bot](https://example.com/acme/bot)"
    assert msg.fields[-1].value == "• [`abc1234`](https://example.com/c/abc1234) Fix login\n• `def5678` Docs"
    assert msg.thumbnail_url == "https://example.com/a.png"


def test_push_message_truncation_heading():
    commits = [CommitSummary(f"{i:07d}", f"c{i}") for i in range(5)]

    msg = _formatter().render_push(_push(Provider.BITBUCKET, 8, commits))

    assert msg.color == BITBUCKET_BLUE
    assert msg.fields[-1].name == "Recent Commits (showing 5 of 8)"


def test_translation_text():
    assert NotificationFormatter.translation_text("jp-to-en", "Hello") == "🇯🇵➡️🇺🇸 Hello"
