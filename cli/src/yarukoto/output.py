"""Shared rendering and result handling for CLI commands."""

from typing import List

import click
from tabulate import tabulate

from storage import time_util
from storage.entity.dto import Task
from storage.service.result import ActionResult


def unwrap(result: ActionResult):
    """Return the payload of a successful result, or abort the command with its message."""
    if not result.success:
        raise click.ClickException(result.error)
    return result.data


def _when(task: Task) -> str:
    if task.completed_at:
        return time_util.format_date(task.completed_at)
    if task.skipped_at:
        return time_util.format_date(task.skipped_at)
    return "-"


def echo_tasks(tasks: List[Task], title: str = None, empty: str = "No tasks found"):
    if title:
        click.echo(click.style(f"{title} ({len(tasks)})", bold=True))
    if not tasks:
        click.echo(empty)
        return
    table = []
    for t in tasks:
        table.append([
            t.task_id,
            t.title,
            t.status.lower(),
            (t.priority or "-").lower(),
            t.scheduled_at or "-",
            _when(t),
            t.category.name if t.category else "-",
        ])
    click.echo(tabulate(table, headers=["ID", "Title", "Status", "Priority", "Scheduled", "Done/Skipped", "Category"], tablefmt="simple"))
