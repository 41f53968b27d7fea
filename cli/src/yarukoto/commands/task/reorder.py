import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('reorder')
@click.argument('task_ids', nargs=-1, required=True)
def task_reorder(task_ids):
    """Set the display order to the given sequence of TASK_IDS."""
    user_id = get_cli_user_id()
    unwrap(task_service.reorder_tasks(user_id, list(task_ids)))
    click.echo(f"Reordered {len(task_ids)} tasks")
