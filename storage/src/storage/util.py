"""Shared helpers: ids and current-time stamps."""

import uuid
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime. Every clock read goes through here."""
    return datetime.now(timezone.utc)


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


def format_utc_iso8601(dt: datetime) -> str:
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def get_utc_iso8601_timestamp() -> str:
    return format_utc_iso8601(utc_now())


def get_unix_timestamp() -> int:
    return int(utc_now().timestamp() * 1000)
