from datetime import datetime, timedelta

import pytest
import pytz

from src.company_bot.company_bot.attendance.calculator.standard_calculator import StandardWorkTimeCalculator
from src.company_bot.company_bot.attendance.model import AttendanceRecord, BreakInterval

START = datetime(2025, 1, 1, 8, 0, tzinfo=pytz.utc)


def test_standard_calculator_subtracts_breaks():
    record = AttendanceRecord(
        username="a",
        check_in=START,
        breaks=[
            BreakInterval(start=START + timedelta(hours=4), end=START + timedelta(hours=5), duration_minutes=60),
        ],
    )

    totals = StandardWorkTimeCalculator().totals(record, START + timedelta(hours=9))

    assert totals.elapsed_hours == pytest.approx(9.0)
    assert totals.break_minutes == 60
    assert totals.work_hours == 8.0


def test_open_breaks_are_not_counted():
    record = AttendanceRecord(username="a", check_in=START, breaks=[BreakInterval(start=START + timedelta(hours=1))])

    totals = StandardWorkTimeCalculator().totals(record, START + timedelta(hours=2))

    assert totals.break_minutes == 0
    assert totals.work_hours == 2.0


def test_break_minutes_round_half_up():
    calc = StandardWorkTimeCalculator()

    assert calc.break_minutes(START, START + timedelta(minutes=29, seconds=30)) == 30
    assert calc.break_minutes(START, START + timedelta(minutes=29, seconds=29)) == 29


def test_work_hours_not_below_zero():
    record = AttendanceRecord(
        username="a",
        check_in=START,
        breaks=[BreakInterval(start=START, end=START + timedelta(minutes=10), duration_minutes=90)],
    )

    assert StandardWorkTimeCalculator().totals(record, START + timedelta(minutes=30)).work_hours == 0.0
