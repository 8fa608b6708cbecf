from __future__ import annotations

from datetime import datetime

import pytest
import pytz

from src.company_bot.company_bot.core.exceptions import PersistenceError


class InMemoryAttendanceRepo:
    def __init__(self, initial=None, *, fail_on_save: bool = False):
        self._initial = initial or {}
        self.fail_on_save = fail_on_save
        self.saves = []

    def load(self):
        return self._initial

    def save(self, table):
        if self.fail_on_save:
            raise PersistenceError("disk full")
        self.saves.append({u: {d: r.to_dict() for d, r in days.items()} for u, days in table.items()})


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 9, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def at(fixed_now):
    """at("12:30") -> aware datetime on the fixed day."""

    def _at(hhmm: str) -> datetime:
        hour, minute = (int(x) for x in hhmm.split(":"))
        return fixed_now.replace(hour=hour, minute=minute)

    return _at


@pytest.fixture
def repo() -> InMemoryAttendanceRepo:
    return InMemoryAttendanceRepo()


@pytest.fixture
def repo_factory():
    return InMemoryAttendanceRepo
