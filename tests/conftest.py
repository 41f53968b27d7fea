# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from storage import util
from storage.database import base as db_base
from storage.service import user as user_service


class FrozenClock:
    """
    Stand-in for storage.util.utc_now.

    Every timestamp the code writes (created_at, completed_at, skipped_at) and
    every "today" it computes goes through utc_now, so pinning it makes day
    bucketing deterministic.
    """

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, iso: str) -> None:
        self.now = datetime.fromisoformat(iso.replace("Z", "+00:00"))

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("YARUKOTO_TIMEZONE", raising=False)
    monkeypatch.setenv("YARUKOTO_HOME", str(tmp_path / "home"))


@pytest.fixture()
def clock(monkeypatch: pytest.MonkeyPatch) -> FrozenClock:
    # 2024-01-15 12:00 in Asia/Tokyo
    frozen = FrozenClock(datetime(2024, 1, 15, 3, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(util, "utc_now", frozen)
    return frozen


@pytest.fixture()
def db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    url = f"sqlite:///{tmp_path / 'yarukoto.sqlite3'}"
    monkeypatch.setenv("DATABASE_URL", url)
    engine = db_base.init_db(url)
    yield engine
    db_base.close_db()


@pytest.fixture()
def user_id(db, clock) -> int:
    return user_service.get_or_create_user("owner@example.com", name="Owner").id


@pytest.fixture()
def other_user_id(db, clock) -> int:
    return user_service.get_or_create_user("someone@example.com", name="Someone").id
