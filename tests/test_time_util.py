# tests/test_time_util.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from storage import time_util


def test_today_uses_configured_timezone_not_utc(clock) -> None:
    # 15:00 UTC on the 14th is already midnight of the 15th in Tokyo
    clock.set("2024-01-14T15:00:00.000Z")
    assert time_util.today() == "2024-01-15"

    clock.set("2024-01-14T14:59:59.999Z")
    assert time_util.today() == "2024-01-14"


def test_timezone_can_be_overridden(clock, monkeypatch: pytest.MonkeyPatch) -> None:
    clock.set("2024-01-14T15:00:00.000Z")
    monkeypatch.setenv("YARUKOTO_TIMEZONE", "UTC")
    assert time_util.today() == "2024-01-14"


def test_unknown_timezone_falls_back_to_tokyo(clock, monkeypatch: pytest.MonkeyPatch) -> None:
    clock.set("2024-01-14T15:00:00.000Z")
    monkeypatch.setenv("YARUKOTO_TIMEZONE", "Nowhere/Atlantis")
    assert time_util.today() == "2024-01-15"


def test_date_range_covers_the_local_day() -> None:
    assert time_util.date_range("2024-01-15") == (
        "2024-01-14T15:00:00.000Z",
        "2024-01-15T14:59:59.999Z",
    )


@pytest.mark.parametrize(
    ("month", "expected"),
    [
        ("2024-02", ("2024-01-31T15:00:00.000Z", "2024-02-29T14:59:59.999Z")),
        ("2023-02", ("2023-01-31T15:00:00.000Z", "2023-02-28T14:59:59.999Z")),
        ("2024-04", ("2024-03-31T15:00:00.000Z", "2024-04-30T14:59:59.999Z")),
        ("2024-12", ("2024-11-30T15:00:00.000Z", "2024-12-31T14:59:59.999Z")),
    ],
)
def test_month_range_uses_calendar_length(month: str, expected: tuple[str, str]) -> None:
    assert time_util.month_range(month) == expected


def test_month_date_bounds_leap_year() -> None:
    assert time_util.month_date_bounds("2024-02") == ("2024-02-01", "2024-02-29")
    assert time_util.month_date_bounds("1900-02") == ("1900-02-01", "1900-02-28")


@pytest.mark.parametrize(
    ("date", "days", "expected"),
    [
        ("2024-02-28", 1, "2024-02-29"),
        ("2024-03-01", -1, "2024-02-29"),
        ("2023-12-31", 1, "2024-01-01"),
        ("2024-01-15", 0, "2024-01-15"),
        ("2024-01-15", -30, "2023-12-16"),
    ],
)
def test_add_days(date: str, days: int, expected: str) -> None:
    assert time_util.add_days(date, days) == expected


def test_add_days_across_dst_transition(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YARUKOTO_TIMEZONE", "America/New_York")
    assert time_util.add_days("2024-03-09", 1) == "2024-03-10"
    assert time_util.add_days("2024-03-10", 1) == "2024-03-11"
    assert time_util.add_days("2024-11-03", 1) == "2024-11-04"


def test_format_date_converts_instants_to_local_dates() -> None:
    assert time_util.format_date("2024-01-14T15:00:00.000Z") == "2024-01-15"
    assert time_util.format_date(datetime(2024, 1, 14, 14, 59, tzinfo=timezone.utc)) == "2024-01-14"


def test_parse_date_anchors_at_local_noon() -> None:
    assert time_util.parse_date("2024-01-15") == datetime(2024, 1, 15, 3, 0, tzinfo=timezone.utc)
    assert time_util.format_date(time_util.parse_date("2024-01-15")) == "2024-01-15"


def test_is_today(clock) -> None:
    assert time_util.is_today("2024-01-15")
    assert not time_util.is_today("2024-01-14")
    assert time_util.is_today("2024-01-14T16:00:00.000Z")
    assert not time_util.is_today("2024-01-14T14:00:00.000Z")


def test_date_and_month_validation() -> None:
    assert time_util.is_valid_date("2024-02-29")
    assert not time_util.is_valid_date("2023-02-29")
    assert not time_util.is_valid_date("2024-1-5")
    assert not time_util.is_valid_date("2024-01-15T00:00")
    assert time_util.is_valid_month("2024-12")
    assert not time_util.is_valid_month("2024-13")
    assert not time_util.is_valid_month("2024-1")


def test_utc_iso_round_trip_keeps_milliseconds() -> None:
    dt = datetime(2024, 1, 15, 3, 4, 5, 678000, tzinfo=timezone.utc)
    assert time_util.to_utc_iso(dt) == "2024-01-15T03:04:05.678Z"
    assert time_util.from_utc_iso("2024-01-15T03:04:05.678Z") == dt


def test_format_date_for_display() -> None:
    assert time_util.format_date_for_display("2024-01-15") == "2024年1月15日（月）"
    assert time_util.format_date_for_display("2024-01-21") == "2024年1月21日（日）"
