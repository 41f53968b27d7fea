import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('delete')
@click.argument('task_id')
def task_delete(task_id):
    """Delete a task permanently."""
    user_id = get_cli_user_id()
    unwrap(task_service.delete_task(user_id, task_id))
    click.echo(f"Deleted task {task_id}")
