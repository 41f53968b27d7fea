import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('done')
@click.argument('task_id')
def task_done(task_id):
    """Mark a task as completed."""
    user_id = get_cli_user_id()
    task = unwrap(task_service.complete_task(user_id, task_id))
    click.echo(f"Completed task '{task.title}' ({task.task_id})")


@click.command('undone')
@click.argument('task_id')
def task_undone(task_id):
    """Move a completed task back to pending."""
    user_id = get_cli_user_id()
    task = unwrap(task_service.uncomplete_task(user_id, task_id))
    click.echo(f"Reopened task '{task.title}' ({task.task_id})")
