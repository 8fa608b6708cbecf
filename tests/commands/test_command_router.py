import pytest

from src.company_bot.company_bot.commands.router import AttendanceIntent, CommandRouter, StatusIntent
from src.company_bot.company_bot.core.enums import Command


@pytest.mark.parametrize(
    "text, command",
    [
        ("出勤", Command.CHECK_IN),
        ("休憩", Command.START_BREAK),
        ("再開", Command.RESUME),
        ("退勤", Command.CHECK_OUT),
    ],
)
def test_keywords_map_to_commands(text, command):
    intent = CommandRouter().route(text)

    assert isinstance(intent, AttendanceIntent)
    assert intent.command == command
    assert intent.note is None


def test_note_is_text_without_keyword():
    router = CommandRouter()

    assert router.route("出勤 today I will work on X").note == "today I will work on X"
    assert router.route("退勤 done for today").note == "done for today"
    assert router.route("お昼なので休憩します").note == "お昼なのでします"


def test_only_first_keyword_occurrence_is_removed():
    intent = CommandRouter().route("休憩 休憩室の掃除")

    assert intent.command == Command.START_BREAK
    assert intent.note == "休憩室の掃除"


def test_higher_priority_keyword_wins():
    intent = CommandRouter().route("退勤 and 出勤 in one message")

    assert intent.command == Command.CHECK_IN
    assert intent.note == "退勤 and  in one message"


@pytest.mark.parametrize("text", ["状況", "確認", " 状況 "])
def test_status_keywords(text):
    assert isinstance(CommandRouter().route(text), StatusIntent)


def test_status_keyword_inside_sentence_is_not_status():
    assert CommandRouter().route("状況を教えて") is None


def test_plain_text_is_not_a_command():
    router = CommandRouter()

    assert router.route("hello team") is None
    assert router.route("") is None
    assert router.route("おはようございます") is None
