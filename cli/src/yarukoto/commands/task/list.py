import click
from storage.entity.dto import UNSET
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import echo_tasks, unwrap


@click.command('list')
@click.option('--category', '-c', 'category_id', default=None, help="Category ID, or 'none' for uncategorized")
def task_list(category_id):
    """List all tasks in display order."""
    user_id = get_cli_user_id()
    if category_id is None:
        category_id = UNSET
    elif category_id == 'none':
        category_id = None
    echo_tasks(unwrap(task_service.get_all_tasks(user_id, category_id=category_id)))
