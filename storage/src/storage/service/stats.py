"""Monthly per-day task statistics."""

from typing import Dict, Iterable, List

from storage import time_util
from storage.entity.dto import DayTaskStats, Task, PENDING


def _dates_in_month(task: Task, first_date: str, last_date: str, start: str, end: str) -> List[str]:
    """Distinct local dates among the task's schedule/completion/skip stamps inside the month."""
    dates: List[str] = []
    candidates = []
    if task.scheduled_at and first_date <= task.scheduled_at <= last_date:
        candidates.append(task.scheduled_at)
    if task.completed_at and start <= task.completed_at <= end:
        candidates.append(time_util.format_date(task.completed_at))
    if task.skipped_at and start <= task.skipped_at <= end:
        candidates.append(time_util.format_date(task.skipped_at))
    for date in candidates:
        if date not in dates:
            dates.append(date)
    return dates


def build_monthly_stats(tasks: Iterable[Task], month: str, today: str) -> Dict[str, DayTaskStats]:
    """Tally tasks into per-day buckets for ``month``.

    A task counts toward ``total`` on its schedule date (and ``overdue`` there
    when still pending and the date is before ``today``), toward ``completed``
    on its completion date and toward ``skipped`` on its skip date. These can be
    three different buckets. Categories of tasks completed on a day are
    collected on that day, once per category.
    """
    first_date, last_date = time_util.month_date_bounds(month)
    start, end = time_util.month_range(month)
    stats: Dict[str, DayTaskStats] = {}

    for task in tasks:
        scheduled_date = task.scheduled_at
        completed_date = time_util.format_date(task.completed_at) if task.completed_at else None
        skipped_date = time_util.format_date(task.skipped_at) if task.skipped_at else None

        for date in _dates_in_month(task, first_date, last_date, start, end):
            day = stats.setdefault(date, DayTaskStats())

            if scheduled_date == date:
                day.total += 1
                if task.status == PENDING and date < today:
                    day.overdue += 1

            if completed_date == date:
                day.completed += 1
                if task.category and all(
                    c.category_id != task.category.category_id for c in day.completed_categories
                ):
                    day.completed_categories.append(task.category)

            if skipped_date == date:
                day.skipped += 1

    return dict(sorted(stats.items()))
