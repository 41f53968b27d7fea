"""Input models for service operations.

Each operation parses its arguments through one of these models before touching
the store. Fields left out by the caller are absent from ``model_fields_set``,
which is how updates tell "not provided" apart from "clear this field".
"""

import re
from typing import List, Optional

from pydantic import BaseModel, field_validator

from storage import time_util
from storage.constants import (
    CATEGORY_NAME_MAX_LENGTH,
    MEMO_MAX_LENGTH,
    SKIP_REASON_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from storage.entity.dto import PRIORITIES, TASK_STATUSES

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _title(value: Optional[str]) -> str:
    value = value.strip() if isinstance(value, str) else ""
    if not value:
        raise ValueError("Title is required")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValueError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return value


def _memo(value: Optional[str]) -> Optional[str]:
    value = value.strip() if isinstance(value, str) else ""
    if len(value) > MEMO_MAX_LENGTH:
        raise ValueError(f"Memo must be at most {MEMO_MAX_LENGTH} characters")
    return value or None


def _optional_date(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    if not time_util.is_valid_date(value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    return value


def _priority(value: Optional[str]) -> Optional[str]:
    if value is None or value == "" or value.lower() == "none":
        return None
    value = value.upper()
    if value not in PRIORITIES:
        raise ValueError("Priority must be one of HIGH, MEDIUM, LOW")
    return value


def _optional_id(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    return value


def _required_id(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required")
    return value.strip()


class TaskIdInput(BaseModel):
    task_id: str

    @field_validator("task_id")
    @classmethod
    def _check_id(cls, v):
        return _required_id(v, "Task ID")


class _TaskFields(BaseModel):
    title: Optional[str] = None
    scheduled_at: Optional[str] = None
    category_id: Optional[str] = None
    priority: Optional[str] = None
    memo: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, v):
        return _title(v)

    @field_validator("scheduled_at")
    @classmethod
    def _check_date(cls, v):
        return _optional_date(v)

    @field_validator("category_id")
    @classmethod
    def _check_category(cls, v):
        return _optional_id(v)

    @field_validator("priority")
    @classmethod
    def _check_priority(cls, v):
        return _priority(v)

    @field_validator("memo")
    @classmethod
    def _check_memo(cls, v):
        return _memo(v)


class CreateTaskInput(_TaskFields):
    title: str


class UpdateTaskInput(_TaskFields):
    task_id: str

    @field_validator("task_id")
    @classmethod
    def _check_id(cls, v):
        return _required_id(v, "Task ID")

    def provided_fields(self) -> List[str]:
        return [name for name in self.model_fields_set if name != "task_id"]


class SkipTaskInput(TaskIdInput):
    reason: Optional[str] = None

    @field_validator("reason")
    @classmethod
    def _check_reason(cls, v):
        v = (v or "").strip()
        if len(v) > SKIP_REASON_MAX_LENGTH:
            raise ValueError(f"Skip reason must be at most {SKIP_REASON_MAX_LENGTH} characters")
        return v or None


class ReorderTasksInput(BaseModel):
    task_ids: List[str]

    @field_validator("task_ids")
    @classmethod
    def _check_ids(cls, v):
        if not v:
            raise ValueError("A list of task IDs is required")
        if len(set(v)) != len(v):
            raise ValueError("Task IDs must not repeat")
        return v


class DateInput(BaseModel):
    date: str

    @field_validator("date")
    @classmethod
    def _check_date(cls, v):
        if not time_util.is_valid_date(v):
            raise ValueError("Date must be in YYYY-MM-DD format")
        return v


class MonthInput(BaseModel):
    month: str

    @field_validator("month")
    @classmethod
    def _check_month(cls, v):
        if not time_util.is_valid_month(v):
            raise ValueError("Month must be in YYYY-MM format")
        return v


class SearchTasksInput(BaseModel):
    keyword: Optional[str] = None
    status: Optional[str] = None
    category_id: Optional[str] = None
    priority: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    @field_validator("keyword")
    @classmethod
    def _check_keyword(cls, v):
        return (v or "").strip() or None

    @field_validator("status")
    @classmethod
    def _check_status(cls, v):
        if v is None or v == "" or v.lower() == "all":
            return None
        v = v.upper()
        if v not in TASK_STATUSES:
            raise ValueError("Status must be one of all, pending, completed, skipped")
        return v

    @field_validator("priority")
    @classmethod
    def _check_priority(cls, v):
        if v is not None and v.lower() == "all":
            return None
        return _priority(v)

    @field_validator("category_id")
    @classmethod
    def _check_category(cls, v):
        return _optional_id(v)

    @field_validator("date_from", "date_to")
    @classmethod
    def _check_dates(cls, v):
        return _optional_date(v)


def _category_name(value: Optional[str]) -> str:
    value = value.strip() if isinstance(value, str) else ""
    if not value:
        raise ValueError("Category name is required")
    if len(value) > CATEGORY_NAME_MAX_LENGTH:
        raise ValueError(f"Category name must be at most {CATEGORY_NAME_MAX_LENGTH} characters")
    return value


def _color(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    if not _HEX_COLOR_RE.match(value):
        raise ValueError("Color must be in #RRGGBB format")
    return value.upper()


class _CategoryFields(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, v):
        return _category_name(v)

    @field_validator("color")
    @classmethod
    def _check_color(cls, v):
        return _color(v)


class CreateCategoryInput(_CategoryFields):
    name: str


class UpdateCategoryInput(_CategoryFields):
    category_id: str

    @field_validator("category_id")
    @classmethod
    def _check_id(cls, v):
        return _required_id(v, "Category ID")

    def provided_fields(self) -> List[str]:
        return [name for name in self.model_fields_set if name != "category_id"]


class CategoryIdInput(BaseModel):
    category_id: str

    @field_validator("category_id")
    @classmethod
    def _check_id(cls, v):
        return _required_id(v, "Category ID")


class ChangeEmailInput(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v):
        v = v.strip()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v
