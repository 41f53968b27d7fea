import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('add')
@click.argument('title')
@click.option('--date', '-d', 'scheduled_at', default=None, help='Scheduled date (YYYY-MM-DD)')
@click.option('--priority', '-p', default=None, type=click.Choice(['high', 'medium', 'low'], case_sensitive=False), help='Priority')
@click.option('--category', '-c', 'category_id', default=None, help='Category ID')
@click.option('--memo', '-m', default=None, help='Memo')
def task_add(title, scheduled_at, priority, category_id, memo):
    """Add a new task."""
    user_id = get_cli_user_id()
    task = unwrap(task_service.create_task(
        user_id, title, scheduled_at=scheduled_at, category_id=category_id,
        priority=priority, memo=memo,
    ))
    click.echo(f"Created task '{task.title}' ({task.task_id})")
