import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('skip')
@click.argument('task_id')
@click.option('--reason', '-r', default=None, help='Why the task was skipped')
def task_skip(task_id, reason):
    """Mark a task as skipped."""
    user_id = get_cli_user_id()
    task = unwrap(task_service.skip_task(user_id, task_id, reason=reason))
    click.echo(f"Skipped task '{task.title}' ({task.task_id})")


@click.command('unskip')
@click.argument('task_id')
def task_unskip(task_id):
    """Move a skipped task back to pending."""
    user_id = get_cli_user_id()
    task = unwrap(task_service.unskip_task(user_id, task_id))
    click.echo(f"Reopened task '{task.title}' ({task.task_id})")
