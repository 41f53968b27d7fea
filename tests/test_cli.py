# tests/test_cli.py

from __future__ import annotations

import pytest
from click.testing import CliRunner

from storage.log import setup_logging
from storage.service import category as category_service
from storage.service import task as task_service
from yarukoto import config as cli_config
from yarukoto.command_option import cli

from .helpers import ok


@pytest.fixture()
def run(user_id, monkeypatch: pytest.MonkeyPatch):
    # bind the log sink to pytest's stderr, not the runner's temporary stream
    setup_logging("WARNING")
    monkeypatch.setenv("YARUKOTO_USER", "owner@example.com")
    monkeypatch.setattr(cli_config, "_config", None)
    monkeypatch.setattr(cli_config, "_db_initialized", False)
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, list(args), catch_exceptions=False)

    return invoke


def test_add_then_today(run, user_id) -> None:
    result = run("task", "add", "Water plants", "--date", "2024-01-15", "--priority", "high")
    assert result.exit_code == 0
    assert "Created task 'Water plants'" in result.output

    result = run("task", "today")
    assert result.exit_code == 0
    assert "2024年1月15日（月）" in result.output
    assert "Water plants" in result.output
    assert "Today (1)" in result.output


def test_validation_errors_exit_nonzero(run) -> None:
    result = run("task", "add", "   ")
    assert result.exit_code == 1
    assert "Title is required" in result.output

    result = run("task", "done", "missing")
    assert result.exit_code == 1
    assert "Task not found" in result.output


def test_done_undone_skip(run, user_id) -> None:
    task = ok(task_service.create_task(user_id, "Stretch"))

    assert "Completed task 'Stretch'" in run("task", "done", task.task_id).output
    assert "Reopened task 'Stretch'" in run("task", "undone", task.task_id).output
    assert "Skipped task 'Stretch'" in run("task", "skip", task.task_id, "--reason", "sore").output
    assert run("task", "unskip", task.task_id).exit_code == 0
    assert task_service.get_all_tasks(user_id).data[0].status == "PENDING"


def test_date_keywords(run, user_id) -> None:
    ok(task_service.create_task(user_id, "Dentist", scheduled_at="2024-01-16"))
    result = run("task", "date", "tomorrow")
    assert "2024年1月16日（火）" in result.output
    assert "Dentist" in result.output

    result = run("task", "date", "yesterday")
    assert "2024年1月14日（日）" in result.output
    assert "Completed (0)" in result.output


def test_update_can_clear_fields(run, user_id) -> None:
    task = ok(task_service.create_task(user_id, "Pay rent", scheduled_at="2024-01-31", priority="high"))
    result = run("task", "update", task.task_id, "--date", "none", "--priority", "none")
    assert result.exit_code == 0
    updated = task_service.get_all_tasks(user_id).data[0]
    assert updated.scheduled_at is None
    assert updated.priority is None

    assert "No fields to update" in run("task", "update", task.task_id).output


def test_search_and_list(run, user_id) -> None:
    work = ok(category_service.create_category(user_id, "Work"))
    ok(task_service.create_task(user_id, "Review repo", category_id=work.category_id))
    ok(task_service.create_task(user_id, "Buy bread"))

    result = run("task", "search", "repo")
    assert "Found 1" in result.output
    assert "Review repo" in result.output
    assert "Buy bread" not in result.output

    result = run("task", "list", "--category", "none")
    assert "Buy bread" in result.output
    assert "Review repo" not in result.output


def test_stats(run, user_id) -> None:
    assert "No tasks in 2024-01" in run("task", "stats").output
    ok(task_service.create_task(user_id, "Old", scheduled_at="2024-01-10"))
    result = run("task", "stats", "2024-01")
    assert "2024-01-10" in result.output


def test_reorder_and_delete(run, user_id) -> None:
    a = ok(task_service.create_task(user_id, "a"))
    b = ok(task_service.create_task(user_id, "b"))
    assert "Reordered 2 tasks" in run("task", "reorder", b.task_id, a.task_id).output
    assert [t.task_id for t in task_service.get_all_tasks(user_id).data] == [b.task_id, a.task_id]

    assert run("task", "delete", a.task_id).exit_code == 0
    assert [t.task_id for t in task_service.get_all_tasks(user_id).data] == [b.task_id]


def test_category_commands(run, user_id) -> None:
    result = run("category", "add", "Errands", "--color", "#00ff00")
    assert "Created category 'Errands'" in result.output
    category = category_service.get_categories(user_id).data[0]
    assert category.color == "#00FF00"

    assert "Errands" in run("category", "list").output
    assert "Updated category 'Chores'" in run("category", "update", category.category_id, "--name", "Chores").output
    assert run("category", "delete", category.category_id).exit_code == 0
    assert "No categories found" in run("category", "list").output


def test_init_issues_token(run) -> None:
    result = run("init", "--token")
    assert result.exit_code == 0
    assert "account 'owner@example.com'" in result.output
    assert "API token:" in result.output
