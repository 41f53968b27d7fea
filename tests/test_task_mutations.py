# tests/test_task_mutations.py

from __future__ import annotations

import pytest

from storage.entity.dto import UNSET
from storage.repository import task as task_repo
from storage.service import category as category_service
from storage.service import task as task_service

from .helpers import ids, ok


def _create(user_id: int, title: str = "Write report", **kwargs):
    return ok(task_service.create_task(user_id, title, **kwargs))


def _without_updated(task) -> dict:
    data = task.to_dict()
    data.pop("updated_at")
    data.pop("updated_at_unix")
    return data


def test_create_trims_and_starts_pending(user_id) -> None:
    task = _create(user_id, "  Buy milk  ", memo="  2 liters \n", priority="high", scheduled_at="2024-01-20")
    assert task.title == "Buy milk"
    assert task.memo == "2 liters"
    assert task.status == "PENDING"
    assert task.priority == "HIGH"
    assert task.scheduled_at == "2024-01-20"
    assert task.completed_at is None and task.skipped_at is None
    assert task.category is None
    assert task.display_order is None
    assert task_repo.get_task(user_id, task.task_id) == task


def test_blank_memo_is_stored_as_null(user_id) -> None:
    assert _create(user_id, memo="   ").memo is None


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        (dict(title="   "), "Title is required"),
        (dict(title="x" * 501), "Title must be at most 500 characters"),
        (dict(title="ok", memo="m" * 10001), "Memo must be at most 10000 characters"),
        (dict(title="ok", scheduled_at="2024/01/20"), "Date must be in YYYY-MM-DD format"),
        (dict(title="ok", priority="urgent"), "Priority must be one of HIGH, MEDIUM, LOW"),
    ],
)
def test_create_validation(user_id, kwargs: dict, message: str) -> None:
    result = task_service.create_task(user_id, **kwargs)
    assert not result.success
    assert result.code == "VALIDATION_ERROR"
    assert result.error == message
    assert ok(task_service.get_all_tasks(user_id)) == []


def test_title_at_limit_is_accepted(user_id) -> None:
    assert len(_create(user_id, "x" * 500).title) == 500


def test_create_with_category(user_id) -> None:
    category = ok(category_service.create_category(user_id, "Work", color="#3B82F6"))
    task = _create(user_id, category_id=category.category_id)
    assert task.category_id == category.category_id
    assert task.category.name == "Work"
    assert task.category.color == "#3B82F6"


def test_create_with_someone_elses_category_is_not_found(user_id, other_user_id) -> None:
    foreign = ok(category_service.create_category(other_user_id, "Theirs"))
    result = task_service.create_task(user_id, "mine", category_id=foreign.category_id)
    assert not result.success
    assert result.code == "NOT_FOUND"
    assert result.error == "Category not found"
    assert ok(task_service.get_all_tasks(user_id)) == []


def test_update_only_touches_provided_fields(user_id) -> None:
    task = _create(user_id, "Original", memo="keep me", priority="low", scheduled_at="2024-01-20")
    updated = ok(task_service.update_task(user_id, task.task_id, title="  Renamed "))
    assert updated.title == "Renamed"
    assert updated.memo == "keep me"
    assert updated.priority == "LOW"
    assert updated.scheduled_at == "2024-01-20"


def test_update_with_explicit_none_clears_nullable_fields(user_id) -> None:
    category = ok(category_service.create_category(user_id, "Home"))
    task = _create(user_id, memo="note", priority="medium", scheduled_at="2024-01-20", category_id=category.category_id)

    updated = ok(task_service.update_task(
        user_id, task.task_id, memo=None, priority=None, scheduled_at="", category_id=None,
    ))
    assert updated.memo is None
    assert updated.priority is None
    assert updated.scheduled_at is None
    assert updated.category_id is None and updated.category is None
    assert updated.title == task.title


def test_update_rejects_clearing_title(user_id) -> None:
    task = _create(user_id)
    for value in (None, "", "   "):
        result = task_service.update_task(user_id, task.task_id, title=value)
        assert result.code == "VALIDATION_ERROR"
    assert task_repo.get_task(user_id, task.task_id).title == task.title


def test_update_without_fields_is_a_validation_error(user_id) -> None:
    task = _create(user_id)
    result = task_service.update_task(user_id, task.task_id)
    assert result.code == "VALIDATION_ERROR"
    assert result.error == "No fields to update"


def test_update_someone_elses_task_is_not_found(user_id, other_user_id) -> None:
    theirs = _create(other_user_id, "theirs")
    result = task_service.update_task(user_id, theirs.task_id, title="hijacked")
    assert result.code == "NOT_FOUND"
    assert task_repo.get_task(other_user_id, theirs.task_id).title == "theirs"


def test_update_to_foreign_category_changes_nothing(user_id, other_user_id) -> None:
    foreign = ok(category_service.create_category(other_user_id, "Theirs"))
    task = _create(user_id, "mine")
    result = task_service.update_task(user_id, task.task_id, title="new", category_id=foreign.category_id)
    assert result.code == "NOT_FOUND"
    assert task_repo.get_task(user_id, task.task_id).title == "mine"


def test_complete_sets_timestamp_and_clears_skip(user_id, clock) -> None:
    task = _create(user_id)
    skipped = ok(task_service.skip_task(user_id, task.task_id, reason="tired"))
    assert skipped.skip_reason == "tired"

    clock.advance(hours=1)
    completed = ok(task_service.complete_task(user_id, task.task_id))
    assert completed.status == "COMPLETED"
    assert completed.completed_at == "2024-01-15T04:00:00.000Z"
    assert completed.skipped_at is None
    assert completed.skip_reason is None


def test_complete_twice_keeps_first_timestamp(user_id, clock) -> None:
    task = _create(user_id)
    first = ok(task_service.complete_task(user_id, task.task_id))
    clock.advance(hours=2)
    again = ok(task_service.complete_task(user_id, task.task_id))
    assert again.completed_at == first.completed_at


def test_uncomplete_restores_pre_complete_state(user_id, clock) -> None:
    task = _create(user_id, memo="details", priority="high", scheduled_at="2024-01-16")
    clock.advance(minutes=5)
    ok(task_service.complete_task(user_id, task.task_id))
    clock.advance(minutes=5)
    reopened = ok(task_service.uncomplete_task(user_id, task.task_id))

    assert reopened.status == "PENDING"
    assert reopened.completed_at is None
    assert _without_updated(reopened) == _without_updated(task)


def test_uncomplete_requires_completed_task(user_id) -> None:
    task = _create(user_id)
    result = task_service.uncomplete_task(user_id, task.task_id)
    assert result.code == "VALIDATION_ERROR"
    assert result.error == "Task is not completed"


def test_skip_trims_reason_and_clears_completion(user_id) -> None:
    task = _create(user_id)
    ok(task_service.complete_task(user_id, task.task_id))
    skipped = ok(task_service.skip_task(user_id, task.task_id, reason="  rained out  "))
    assert skipped.status == "SKIPPED"
    assert skipped.skip_reason == "rained out"
    assert skipped.skipped_at == "2024-01-15T03:00:00.000Z"
    assert skipped.completed_at is None


def test_skip_blank_reason_is_null(user_id) -> None:
    task = _create(user_id)
    assert ok(task_service.skip_task(user_id, task.task_id, reason="   ")).skip_reason is None


def test_skip_reason_length_limit(user_id) -> None:
    task = _create(user_id)
    result = task_service.skip_task(user_id, task.task_id, reason="r" * 1001)
    assert result.code == "VALIDATION_ERROR"
    assert task_repo.get_task(user_id, task.task_id).status == "PENDING"


def test_unskip_clears_skip_fields(user_id) -> None:
    task = _create(user_id)
    ok(task_service.skip_task(user_id, task.task_id, reason="later"))
    reopened = ok(task_service.unskip_task(user_id, task.task_id))
    assert reopened.status == "PENDING"
    assert reopened.skipped_at is None
    assert reopened.skip_reason is None

    assert task_service.unskip_task(user_id, task.task_id).code == "VALIDATION_ERROR"


def test_completed_and_skipped_timestamps_never_coexist(user_id, clock) -> None:
    task = _create(user_id)
    steps = [
        task_service.complete_task,
        task_service.skip_task,
        task_service.complete_task,
        task_service.uncomplete_task,
        task_service.skip_task,
        task_service.unskip_task,
        task_service.skip_task,
        task_service.complete_task,
    ]
    for step in steps:
        clock.advance(minutes=1)
        current = ok(step(user_id, task.task_id))
        assert not (current.completed_at and current.skipped_at)
        if current.status == "COMPLETED":
            assert current.completed_at and current.skip_reason is None
        elif current.status == "SKIPPED":
            assert current.skipped_at and current.completed_at is None
        else:
            assert current.completed_at is None and current.skipped_at is None


def test_transitions_on_someone_elses_task_are_not_found(user_id, other_user_id) -> None:
    theirs = _create(other_user_id, "theirs")
    for op in (
        task_service.complete_task,
        task_service.uncomplete_task,
        task_service.skip_task,
        task_service.unskip_task,
        task_service.delete_task,
    ):
        result = op(user_id, theirs.task_id)
        assert result.code == "NOT_FOUND", op.__name__
        assert result.error == "Task not found"
    assert task_repo.get_task(other_user_id, theirs.task_id).status == "PENDING"


def test_delete_removes_row(user_id) -> None:
    task = _create(user_id)
    assert ok(task_service.delete_task(user_id, task.task_id)) == {"task_id": task.task_id}
    assert task_repo.get_task(user_id, task.task_id) is None
    assert task_service.delete_task(user_id, task.task_id).code == "NOT_FOUND"


def test_blank_task_id_is_a_validation_error(user_id) -> None:
    result = task_service.complete_task(user_id, "  ")
    assert result.code == "VALIDATION_ERROR"
    assert result.error == "Task ID is required"


def test_reorder_assigns_positions(user_id, clock) -> None:
    a = _create(user_id, "a")
    clock.advance(minutes=1)
    b = _create(user_id, "b")
    clock.advance(minutes=1)
    c = _create(user_id, "c")
    clock.advance(minutes=1)
    d = _create(user_id, "d")

    assert ids(ok(task_service.get_all_tasks(user_id))) == [d.task_id, c.task_id, b.task_id, a.task_id]

    ok(task_service.reorder_tasks(user_id, [b.task_id, a.task_id, c.task_id]))
    tasks = ok(task_service.get_all_tasks(user_id))
    assert ids(tasks) == [b.task_id, a.task_id, c.task_id, d.task_id]
    assert [t.display_order for t in tasks] == [0, 1, 2, None]


def test_reorder_is_all_or_nothing(user_id, other_user_id) -> None:
    a = _create(user_id, "a")
    b = _create(user_id, "b")
    ok(task_service.reorder_tasks(user_id, [a.task_id, b.task_id]))
    foreign = _create(other_user_id, "theirs")

    result = task_service.reorder_tasks(user_id, [b.task_id, foreign.task_id, a.task_id])
    assert result.code == "NOT_FOUND"
    assert task_repo.get_task(user_id, a.task_id).display_order == 0
    assert task_repo.get_task(user_id, b.task_id).display_order == 1
    assert task_repo.get_task(other_user_id, foreign.task_id).display_order is None

    result = task_service.reorder_tasks(user_id, [b.task_id, "does-not-exist"])
    assert result.code == "NOT_FOUND"
    assert task_repo.get_task(user_id, b.task_id).display_order == 1


@pytest.mark.parametrize("task_ids", [[], ["x", "x"]])
def test_reorder_validation(user_id, task_ids: list[str]) -> None:
    assert task_service.reorder_tasks(user_id, task_ids).code == "VALIDATION_ERROR"


def test_storage_failure_is_an_internal_error(user_id, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(task_repo, "save_task", broken)
    result = task_service.create_task(user_id, "anything")
    assert not result.success
    assert result.code == "INTERNAL_ERROR"
    assert result.error == "Failed to create task"
    assert "disk on fire" not in result.error


def test_get_all_tasks_by_category(user_id) -> None:
    work = ok(category_service.create_category(user_id, "Work"))
    filed = _create(user_id, "filed", category_id=work.category_id)
    loose = _create(user_id, "loose")

    assert ids(ok(task_service.get_all_tasks(user_id, category_id=work.category_id))) == [filed.task_id]
    assert ids(ok(task_service.get_all_tasks(user_id, category_id=None))) == [loose.task_id]
    assert len(ok(task_service.get_all_tasks(user_id, category_id=UNSET))) == 2
