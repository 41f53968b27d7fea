"""Calendar dates and instants in the fixed application timezone.

Calendar dates travel as ``YYYY-MM-DD`` strings and months as ``YYYY-MM``.
Instants are stored as UTC ISO 8601 strings with millisecond precision
(``2024-01-15T03:00:00.000Z``), which sort in time order, so an instant range
is also a string range.
"""

import calendar
import os
import re
from datetime import datetime, timedelta, timezone
from typing import Tuple, Union

from dateutil import tz as dateutil_tz

from storage import util
from storage.util import format_utc_iso8601

DEFAULT_TIMEZONE = "Asia/Tokyo"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")
_WEEKDAYS = ["月", "火", "水", "木", "金", "土", "日"]


def get_configured_tz():
    """Return the configured timezone, falling back to Asia/Tokyo."""
    tz_name = os.getenv("YARUKOTO_TIMEZONE")
    if tz_name:
        tz = dateutil_tz.gettz(tz_name)
        if tz:
            return tz
    return dateutil_tz.gettz(DEFAULT_TIMEZONE)


def is_valid_date(value: str) -> bool:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def is_valid_month(value: str) -> bool:
    if not isinstance(value, str) or not _MONTH_RE.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m")
    except ValueError:
        return False
    return True


def to_utc_iso(dt: datetime) -> str:
    return format_utc_iso8601(dt)


def from_utc_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def today() -> str:
    """Current calendar date in the configured timezone."""
    return util.utc_now().astimezone(get_configured_tz()).strftime("%Y-%m-%d")


def _local(date_str: str, hour: int, minute: int, second: int, microsecond: int) -> datetime:
    day = datetime.strptime(date_str, "%Y-%m-%d")
    return day.replace(hour=hour, minute=minute, second=second, microsecond=microsecond, tzinfo=get_configured_tz())


def date_range(date_str: str) -> Tuple[str, str]:
    """UTC instants for local 00:00:00.000 and 23:59:59.999 of the given date."""
    start = _local(date_str, 0, 0, 0, 0)
    end = _local(date_str, 23, 59, 59, 999000)
    return to_utc_iso(start), to_utc_iso(end)


def month_range(month: str) -> Tuple[str, str]:
    """UTC instants for the first local instant and last local millisecond of a month."""
    year, month_num = (int(p) for p in month.split("-"))
    last_day = calendar.monthrange(year, month_num)[1]
    start, _ = date_range(f"{year:04d}-{month_num:02d}-01")
    _, end = date_range(f"{year:04d}-{month_num:02d}-{last_day:02d}")
    return start, end


def month_date_bounds(month: str) -> Tuple[str, str]:
    """First and last calendar date strings of a month."""
    year, month_num = (int(p) for p in month.split("-"))
    last_day = calendar.monthrange(year, month_num)[1]
    return f"{year:04d}-{month_num:02d}-01", f"{year:04d}-{month_num:02d}-{last_day:02d}"


def parse_date(date_str: str) -> datetime:
    """Instant at local noon of a calendar date."""
    return _local(date_str, 12, 0, 0, 0).astimezone(timezone.utc)


def format_date(value: Union[datetime, str]) -> str:
    """Calendar date of an instant (aware datetime or stored UTC string) in the configured timezone."""
    if isinstance(value, str):
        value = from_utc_iso(value)
    return value.astimezone(get_configured_tz()).strftime("%Y-%m-%d")


def add_days(date_str: str, days: int) -> str:
    # Anchored at local noon so a zone with DST can't push the result across midnight.
    shifted = parse_date(date_str) + timedelta(days=days)
    return format_date(shifted)


def is_today(value: Union[datetime, str]) -> bool:
    if isinstance(value, str) and is_valid_date(value):
        return value == today()
    return format_date(value) == today()


def format_date_for_display(date_str: str) -> str:
    """e.g. 2024年1月15日（月）"""
    day = datetime.strptime(date_str, "%Y-%m-%d")
    return f"{day.year}年{day.month}月{day.day}日（{_WEEKDAYS[day.weekday()]}）"
