import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import echo_tasks, unwrap


@click.command('search')
@click.argument('keyword', required=False)
@click.option('--status', '-s', default=None, type=click.Choice(['all', 'pending', 'completed', 'skipped'], case_sensitive=False), help='Status')
@click.option('--priority', '-p', default=None, type=click.Choice(['all', 'high', 'medium', 'low'], case_sensitive=False), help='Priority')
@click.option('--category', '-c', 'category_id', default=None, help="Category ID, or 'none' for uncategorized")
@click.option('--from', 'date_from', default=None, help='Scheduled on or after (YYYY-MM-DD)')
@click.option('--to', 'date_to', default=None, help='Scheduled on or before (YYYY-MM-DD)')
def task_search(keyword, status, priority, category_id, date_from, date_to):
    """Search tasks by keyword in title or memo."""
    user_id = get_cli_user_id()
    filters = {k: v for k, v in dict(
        keyword=keyword, status=status, priority=priority,
        date_from=date_from, date_to=date_to,
    ).items() if v is not None}
    if category_id is not None:
        filters['category_id'] = None if category_id == 'none' else category_id
    result = unwrap(task_service.search_tasks(user_id, **filters))
    echo_tasks(result.tasks, f"Found {result.total}")
