"""Function-based task repository using SQLAlchemy sessions.

Every query is scoped to one owner and returns Task DTOs with their category
attached. ``scheduled_at`` holds calendar-date strings and ``completed_at`` /
``skipped_at`` hold fixed-width UTC ISO strings, so all range filters below are
plain string comparisons.
"""

from typing import Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query

from storage.entity.task import TaskEntity
from storage.entity.category import CategoryEntity
from storage.entity.dto import Task, CategorySummary, PENDING, COMPLETED, SKIPPED, UNSET
from storage.database.base import get_db


def _entity_to_dto(entity: TaskEntity) -> Task:
    category = entity.category
    return Task(
        task_id=entity.task_id,
        title=entity.title,
        memo=entity.memo,
        status=entity.status,
        priority=entity.priority,
        scheduled_at=entity.scheduled_at,
        completed_at=entity.completed_at,
        skipped_at=entity.skipped_at,
        skip_reason=entity.skip_reason,
        category_id=category.category_id if category else None,
        category=CategorySummary(category_id=category.category_id, name=category.name, color=category.color) if category else None,
        display_order=entity.display_order,
        created_at=entity.created_at if entity.created_at else None,
        updated_at=entity.updated_at if entity.updated_at else None,
        created_at_unix=entity.created_at_unix if entity.created_at_unix else None,
        updated_at_unix=entity.updated_at_unix if entity.updated_at_unix else None,
    )


def _default_order(query: Query) -> Query:
    # display_order asc (unset last), newest first among equals
    return query.order_by(
        TaskEntity.display_order.asc().nullslast(),
        TaskEntity.created_at.desc(),
        TaskEntity.id.desc(),
    )


def _newest_first(query: Query) -> Query:
    return query.order_by(TaskEntity.created_at.desc(), TaskEntity.id.desc())


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _filter_category(query: Query, category_id) -> Query:
    if category_id is UNSET:
        return query
    if category_id is None:
        return query.filter(TaskEntity.category_id.is_(None))
    return query.filter(TaskEntity.category.has(CategoryEntity.category_id == category_id))


def get_task(user_id: int, task_id: str) -> Optional[Task]:
    with get_db() as session:
        row = session.query(TaskEntity).filter_by(user_id=user_id, task_id=task_id).first()
        if row:
            return _entity_to_dto(row)
        return None


def list_tasks(user_id: int, category_id=UNSET) -> List[Task]:
    """All of an owner's tasks; ``category_id=None`` selects uncategorized ones."""
    with get_db() as session:
        query = session.query(TaskEntity).filter_by(user_id=user_id)
        query = _filter_category(query, category_id)
        return [_entity_to_dto(row) for row in _default_order(query).all()]


def list_tasks_scheduled_on(user_id: int, date: str, status: Optional[str] = None) -> List[Task]:
    """Tasks whose schedule date equals ``date`` exactly.

    With a status the result is newest first (the due-today list); without one
    it uses the default manual ordering (the scheduled list for a day).
    """
    with get_db() as session:
        query = session.query(TaskEntity).filter_by(user_id=user_id, scheduled_at=date)
        if status:
            query = _newest_first(query.filter_by(status=status))
        else:
            query = _default_order(query)
        return [_entity_to_dto(row) for row in query.all()]


def list_overdue_tasks(user_id: int, today: str) -> List[Task]:
    with get_db() as session:
        query = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id, status=PENDING)
            .filter(TaskEntity.scheduled_at.isnot(None), TaskEntity.scheduled_at < today)
            .order_by(TaskEntity.scheduled_at.asc(), TaskEntity.created_at.desc(), TaskEntity.id.desc())
        )
        return [_entity_to_dto(row) for row in query.all()]


def list_undated_pending_tasks(user_id: int) -> List[Task]:
    with get_db() as session:
        query = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id, status=PENDING)
            .filter(TaskEntity.scheduled_at.is_(None))
        )
        return [_entity_to_dto(row) for row in _newest_first(query).all()]


def list_tasks_completed_between(user_id: int, start: str, end: str) -> List[Task]:
    with get_db() as session:
        query = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id, status=COMPLETED)
            .filter(TaskEntity.completed_at >= start, TaskEntity.completed_at <= end)
            .order_by(TaskEntity.completed_at.desc(), TaskEntity.id.desc())
        )
        return [_entity_to_dto(row) for row in query.all()]


def list_tasks_skipped_between(user_id: int, start: str, end: str) -> List[Task]:
    with get_db() as session:
        query = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id, status=SKIPPED)
            .filter(TaskEntity.skipped_at >= start, TaskEntity.skipped_at <= end)
            .order_by(TaskEntity.skipped_at.desc(), TaskEntity.id.desc())
        )
        return [_entity_to_dto(row) for row in query.all()]


def search_tasks(
    user_id: int,
    keyword: Optional[str] = None,
    status: Optional[str] = None,
    category_id=UNSET,
    priority: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> List[Task]:
    with get_db() as session:
        query = session.query(TaskEntity).filter_by(user_id=user_id)
        if keyword:
            pattern = f"%{_escape_like(keyword)}%"
            query = query.filter(or_(
                TaskEntity.title.ilike(pattern, escape="\\"),
                TaskEntity.memo.ilike(pattern, escape="\\"),
            ))
        if status:
            query = query.filter_by(status=status)
        query = _filter_category(query, category_id)
        if priority:
            query = query.filter_by(priority=priority)
        if date_from:
            query = query.filter(TaskEntity.scheduled_at >= date_from)
        if date_to:
            query = query.filter(TaskEntity.scheduled_at <= date_to)
        return [_entity_to_dto(row) for row in _default_order(query).all()]


def list_tasks_in_month(user_id: int, first_date: str, last_date: str, start: str, end: str) -> List[Task]:
    """Tasks scheduled, completed or skipped inside a month.

    ``first_date``/``last_date`` bound the calendar-date column and
    ``start``/``end`` the instant columns.
    """
    with get_db() as session:
        query = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id)
            .filter(or_(
                TaskEntity.scheduled_at.between(first_date, last_date),
                TaskEntity.completed_at.between(start, end),
                TaskEntity.skipped_at.between(start, end),
            ))
        )
        return [_entity_to_dto(row) for row in _default_order(query).all()]


def save_task(user_id: int, task_id: str, fields: Dict) -> Task:
    """Insert or update one task. ``fields`` are column values (``category_id`` is the category pk)."""
    with get_db() as session:
        entity = session.query(TaskEntity).filter_by(user_id=user_id, task_id=task_id).first()
        if entity:
            for k, v in fields.items():
                setattr(entity, k, v)
        else:
            entity = TaskEntity(user_id=user_id, task_id=task_id, **fields)
            session.add(entity)
        session.flush()
        session.refresh(entity)
        return _entity_to_dto(entity)


def delete_task(user_id: int, task_id: str) -> bool:
    with get_db() as session:
        count = session.query(TaskEntity).filter_by(user_id=user_id, task_id=task_id).delete()
        session.flush()
        return count > 0


def set_display_orders(user_id: int, task_ids: List[str]) -> bool:
    """Assign display_order = position for each id, all in one transaction.

    Returns False without writing anything if any id is not owned by the user.
    """
    with get_db() as session:
        rows = (
            session.query(TaskEntity)
            .filter_by(user_id=user_id)
            .filter(TaskEntity.task_id.in_(task_ids))
            .all()
        )
        by_id = {row.task_id: row for row in rows}
        if len(by_id) != len(set(task_ids)):
            return False
        for index, task_id in enumerate(task_ids):
            by_id[task_id].display_order = index
        session.flush()
        return True
