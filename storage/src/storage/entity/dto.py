"""Plain data objects returned by repositories and services."""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

PENDING = "PENDING"
COMPLETED = "COMPLETED"
SKIPPED = "SKIPPED"
TASK_STATUSES = (PENDING, COMPLETED, SKIPPED)

PRIORITIES = ("HIGH", "MEDIUM", "LOW")


class _Unset:
    """Marks a filter or field that the caller did not provide (as opposed to None)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass
class CategorySummary:
    category_id: str
    name: str
    color: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class Category:
    category_id: str
    name: str
    color: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)

    def summary(self) -> CategorySummary:
        return CategorySummary(category_id=self.category_id, name=self.name, color=self.color)


@dataclass
class Task:
    task_id: str
    title: str
    memo: Optional[str] = None
    status: str = PENDING
    priority: Optional[str] = None
    scheduled_at: Optional[str] = None
    completed_at: Optional[str] = None
    skipped_at: Optional[str] = None
    skip_reason: Optional[str] = None
    category_id: Optional[str] = None
    category: Optional[CategorySummary] = None
    display_order: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    created_at_unix: Optional[int] = None
    updated_at_unix: Optional[int] = None

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "Task":
        data = dict(data)
        category = data.pop("category", None)
        if isinstance(category, dict):
            category = CategorySummary(**category)
        return cls(category=category, **data)


@dataclass
class TodayTasks:
    overdue: List[Task] = field(default_factory=list)
    due_today: List[Task] = field(default_factory=list)
    undated: List[Task] = field(default_factory=list)
    completed_today: List[Task] = field(default_factory=list)
    skipped_today: List[Task] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class DateTasks:
    is_past: bool
    is_future: bool
    scheduled: List[Task] = field(default_factory=list)
    completed_on_date: List[Task] = field(default_factory=list)
    skipped_on_date: List[Task] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SearchTasksResult:
    tasks: List[Task]
    total: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class DayTaskStats:
    total: int = 0
    completed: int = 0
    overdue: int = 0
    skipped: int = 0
    completed_categories: List[CategorySummary] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class User:
    id: int
    email: str
    name: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)
