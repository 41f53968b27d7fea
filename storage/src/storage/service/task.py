"""Task service: day views, search, monthly statistics and state transitions.

Every public operation returns an ``ActionResult``. Ownership is checked
before any write; a task or category owned by someone else is reported exactly
like a missing one.
"""

from typing import Dict, List, Optional

from loguru import logger

from storage import time_util
from storage.constants import ERROR_MESSAGES
from storage.entity.dto import (
    DateTasks,
    DayTaskStats,
    SearchTasksResult,
    Task,
    TodayTasks,
    COMPLETED,
    PENDING,
    SKIPPED,
    UNSET,
)
from storage.repository import category as category_repo
from storage.repository import task as task_repo
from storage.service.result import NotFound, ValidationFailed, action
from storage.service.stats import build_monthly_stats
from storage.service.validation import (
    CreateTaskInput,
    DateInput,
    MonthInput,
    ReorderTasksInput,
    SearchTasksInput,
    SkipTaskInput,
    TaskIdInput,
    UpdateTaskInput,
)
from storage.util import generate_id, get_utc_iso8601_timestamp


def _require_task(user_id: int, task_id: str) -> Task:
    task = task_repo.get_task(user_id, task_id)
    if not task:
        raise NotFound(ERROR_MESSAGES["TASK_NOT_FOUND"])
    return task


def _resolve_category(user_id: int, category_id: Optional[str]) -> Optional[int]:
    """Map a public category id to its row id. Raises NotFound if the user doesn't own it."""
    if category_id is None:
        return None
    pk = category_repo.get_category_pk(user_id, category_id)
    if pk is None:
        raise NotFound(ERROR_MESSAGES["CATEGORY_NOT_FOUND"])
    return pk


# ---- queries ----

@action(ERROR_MESSAGES["TASK_FETCH_FAILED"])
def get_today_tasks(user_id: int) -> TodayTasks:
    today = time_util.today()
    start, end = time_util.date_range(today)
    return TodayTasks(
        overdue=task_repo.list_overdue_tasks(user_id, today),
        due_today=task_repo.list_tasks_scheduled_on(user_id, today, status=PENDING),
        undated=task_repo.list_undated_pending_tasks(user_id),
        completed_today=task_repo.list_tasks_completed_between(user_id, start, end),
        skipped_today=task_repo.list_tasks_skipped_between(user_id, start, end),
    )


@action(ERROR_MESSAGES["TASK_FETCH_FAILED"])
def get_tasks_by_date(user_id: int, date: str) -> DateTasks:
    date = DateInput(date=date).date
    today = time_util.today()
    result = DateTasks(
        is_past=date < today,
        is_future=date > today,
        scheduled=task_repo.list_tasks_scheduled_on(user_id, date),
    )
    # Nothing can have been completed or skipped on a day that hasn't happened yet.
    if result.is_past:
        start, end = time_util.date_range(date)
        result.completed_on_date = task_repo.list_tasks_completed_between(user_id, start, end)
        result.skipped_on_date = task_repo.list_tasks_skipped_between(user_id, start, end)
    return result


@action(ERROR_MESSAGES["SEARCH_FAILED"])
def search_tasks(user_id: int, **filters) -> SearchTasksResult:
    """Filter tasks by keyword (title or memo), status, category, priority and schedule range.

    Passing ``category_id=None`` explicitly selects tasks without a category;
    leaving it out applies no category filter.
    """
    parsed = SearchTasksInput(**filters)
    category_id = parsed.category_id if "category_id" in parsed.model_fields_set else UNSET
    tasks = task_repo.search_tasks(
        user_id,
        keyword=parsed.keyword,
        status=parsed.status,
        category_id=category_id,
        priority=parsed.priority,
        date_from=parsed.date_from,
        date_to=parsed.date_to,
    )
    return SearchTasksResult(tasks=tasks, total=len(tasks))


@action(ERROR_MESSAGES["TASK_FETCH_FAILED"])
def get_all_tasks(user_id: int, category_id=UNSET) -> List[Task]:
    return task_repo.list_tasks(user_id, category_id=category_id)


@action(ERROR_MESSAGES["TASK_STATS_FAILED"])
def get_monthly_stats(user_id: int, month: str) -> Dict[str, DayTaskStats]:
    month = MonthInput(month=month).month
    first_date, last_date = time_util.month_date_bounds(month)
    start, end = time_util.month_range(month)
    tasks = task_repo.list_tasks_in_month(user_id, first_date, last_date, start, end)
    return build_monthly_stats(tasks, month, time_util.today())


# ---- mutations ----

@action(ERROR_MESSAGES["TASK_CREATE_FAILED"])
def create_task(
    user_id: int,
    title: str,
    scheduled_at: Optional[str] = None,
    category_id: Optional[str] = None,
    priority: Optional[str] = None,
    memo: Optional[str] = None,
) -> Task:
    parsed = CreateTaskInput(
        title=title, scheduled_at=scheduled_at, category_id=category_id,
        priority=priority, memo=memo,
    )
    category_pk = _resolve_category(user_id, parsed.category_id)
    task = task_repo.save_task(user_id, generate_id(), dict(
        title=parsed.title,
        memo=parsed.memo,
        status=PENDING,
        priority=parsed.priority,
        scheduled_at=parsed.scheduled_at,
        category_id=category_pk,
    ))
    logger.info("Created task user_id={} task_id={}", user_id, task.task_id)
    return task


@action(ERROR_MESSAGES["TASK_UPDATE_FAILED"])
def update_task(user_id: int, task_id: str, **fields) -> Task:
    """Patch a task. Only the keyword arguments actually passed are written; None clears a nullable field."""
    parsed = UpdateTaskInput(task_id=task_id, **fields)
    provided = parsed.provided_fields()
    if not provided:
        raise ValidationFailed("No fields to update")
    _require_task(user_id, parsed.task_id)
    changes = {}
    for key in provided:
        value = getattr(parsed, key)
        if key == "category_id":
            value = _resolve_category(user_id, value)
        changes[key] = value
    task = task_repo.save_task(user_id, parsed.task_id, changes)
    logger.info("Updated task user_id={} task_id={} fields={}", user_id, task.task_id, sorted(changes))
    return task


@action(ERROR_MESSAGES["TASK_COMPLETE_FAILED"])
def complete_task(user_id: int, task_id: str) -> Task:
    task_id = TaskIdInput(task_id=task_id).task_id
    task = _require_task(user_id, task_id)
    if task.status == COMPLETED:
        return task
    return task_repo.save_task(user_id, task_id, dict(
        status=COMPLETED,
        completed_at=get_utc_iso8601_timestamp(),
        skipped_at=None,
        skip_reason=None,
    ))


@action(ERROR_MESSAGES["TASK_UPDATE_FAILED"])
def uncomplete_task(user_id: int, task_id: str) -> Task:
    task_id = TaskIdInput(task_id=task_id).task_id
    task = _require_task(user_id, task_id)
    if task.status != COMPLETED:
        raise ValidationFailed("Task is not completed")
    return task_repo.save_task(user_id, task_id, dict(status=PENDING, completed_at=None))


@action(ERROR_MESSAGES["TASK_UPDATE_FAILED"])
def skip_task(user_id: int, task_id: str, reason: Optional[str] = None) -> Task:
    parsed = SkipTaskInput(task_id=task_id, reason=reason)
    _require_task(user_id, parsed.task_id)
    return task_repo.save_task(user_id, parsed.task_id, dict(
        status=SKIPPED,
        skipped_at=get_utc_iso8601_timestamp(),
        skip_reason=parsed.reason,
        completed_at=None,
    ))


@action(ERROR_MESSAGES["TASK_UPDATE_FAILED"])
def unskip_task(user_id: int, task_id: str) -> Task:
    task_id = TaskIdInput(task_id=task_id).task_id
    task = _require_task(user_id, task_id)
    if task.status != SKIPPED:
        raise ValidationFailed("Task is not skipped")
    return task_repo.save_task(user_id, task_id, dict(status=PENDING, skipped_at=None, skip_reason=None))


@action(ERROR_MESSAGES["TASK_DELETE_FAILED"])
def delete_task(user_id: int, task_id: str) -> Dict[str, str]:
    task_id = TaskIdInput(task_id=task_id).task_id
    if not task_repo.delete_task(user_id, task_id):
        raise NotFound(ERROR_MESSAGES["TASK_NOT_FOUND"])
    logger.info("Deleted task user_id={} task_id={}", user_id, task_id)
    return {"task_id": task_id}


@action(ERROR_MESSAGES["TASK_UPDATE_FAILED"])
def reorder_tasks(user_id: int, task_ids: List[str]) -> Dict[str, List[str]]:
    task_ids = ReorderTasksInput(task_ids=task_ids).task_ids
    if not task_repo.set_display_orders(user_id, task_ids):
        raise NotFound(ERROR_MESSAGES["TASK_NOT_FOUND"])
    logger.info("Reordered {} tasks user_id={}", len(task_ids), user_id)
    return {"task_ids": task_ids}
