from __future__ import annotations

import pytest

from src.company_bot.company_bot.attendance.service import AttendanceService
from src.company_bot.company_bot.bot.handler import IncomingMessage, MessageHandler
from src.company_bot.company_bot.commands.router import CommandRouter
from src.company_bot.company_bot.core.enums import OutgoingTarget
from src.company_bot.company_bot.notifications.formatter import (
    GENERIC_ERROR_TEXT,
    NOT_STARTED_TEXT,
    RECORDED_TEXT,
    NotificationFormatter,
)
from src.company_bot.company_bot.notifications.model import StructuredMessage
from src.company_bot.company_bot.translation.service import JA_TO_EN, Translation

ATTENDANCE_CHANNEL = "100"
GIT_CHANNEL = "200"
WORK_CHANNEL = "300"


class FakeTranslator:
    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def translate(self, text):
        self.calls.append(text)
        return self.result


@pytest.fixture
def service(repo):
    return AttendanceService(repo)


@pytest.fixture
def translator():
    return FakeTranslator(Translation(direction=JA_TO_EN, text="Good morning"))


@pytest.fixture
def handler(service, translator):
    return MessageHandler(
        service,
        CommandRouter(),
        NotificationFormatter("Asia/Tokyo"),
        translator,
        attendance_channel_id=ATTENDANCE_CHANNEL,
        excluded_translation_channels=[ATTENDANCE_CHANNEL, GIT_CHANNEL],
    )


def msg(at, text, hhmm="09:00", channel=WORK_CHANNEL, **kw):
    return IncomingMessage(user_id="1", username="taro", content=text, channel_id=channel, timestamp=at(hhmm), **kw)


def test_check_in_replies_records_and_mirrors(handler, at):
    out = handler.handle(msg(at, "出勤 today I will work on X"))

    assert [o.target for o in out] == [OutgoingTarget.REPLY, OutgoingTarget.CHANNEL, OutgoingTarget.ATTENDANCE]
    assert isinstance(out[0].body, StructuredMessage)
    assert out[0].body.field_value("報告 (Report)") == "today I will work on X"
    assert out[1].body == RECORDED_TEXT
    assert out[2].body == out[0].body


def test_check_in_from_attendance_channel_is_not_mirrored(handler, at):
    out = handler.handle(msg(at, "出勤", channel=ATTENDANCE_CHANNEL))

    assert [o.target for o in out] == [OutgoingTarget.REPLY, OutgoingTarget.CHANNEL]


def test_notes_for_check_in_and_check_out_are_kept(handler, service, at):
    handler.handle(msg(at, "出勤 today I will work on X", "09:00"))
    out = handler.handle(msg(at, "退勤 done for today", "18:00"))

    record = service.status("1", "2026-01-15")
    assert record.check_in_report == "today I will work on X"
    assert record.check_out_report == "done for today"
    assert [o.target for o in out] == [OutgoingTarget.REPLY, OutgoingTarget.CHANNEL]


def test_rejection_is_a_reply(handler, at):
    out = handler.handle(msg(at, "休憩"))

    assert len(out) == 1
    assert out[0].target == OutgoingTarget.REPLY
    assert "まず出勤してください" in out[0].body


def test_status_before_check_in(handler, at):
    out = handler.handle(msg(at, "状況"))

    assert out[0].body == NOT_STARTED_TEXT


def test_status_after_check_in(handler, at):
    handler.handle(msg(at, "出勤", "09:00"))

    out = handler.handle(msg(at, "確認", "10:00"))

    assert out[0].body.field_value("現在の状態 (Current Status)") == "🟢 勤務中 (Working)"


def test_commands_are_never_translated(handler, translator, at):
    handler.handle(msg(at, "出勤 おはようございます"))

    assert translator.calls == []


def test_plain_text_is_translated(handler, translator, at):
    out = handler.handle(msg(at, "おはようございます"))

    assert translator.calls == ["おはようございます"]
    assert out[0].target == OutgoingTarget.REPLY
    assert out[0].body == "🇯🇵➡️🇺🇸 Good morning"


@pytest.mark.parametrize("channel", [ATTENDANCE_CHANNEL, GIT_CHANNEL])
def test_no_translation_in_excluded_channels(handler, translator, at, channel):
    assert handler.handle(msg(at, "おはようございます", channel=channel)) == []
    assert translator.calls == []


def test_failed_translation_sends_nothing(handler, translator, at):
    translator.result = None

    assert handler.handle(msg(at, "Good morning")) == []


def test_bot_messages_are_ignored(handler, at):
    assert handler.handle(msg(at, "出勤", is_bot=True)) == []


def test_unexpected_error_gives_generic_reply(handler, service, at, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(service, "apply", boom)

    out = handler.handle(msg(at, "出勤"))

    assert out[0].body == GENERIC_ERROR_TEXT
