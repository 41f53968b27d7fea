import click
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('update')
@click.argument('task_id')
@click.option('--title', '-t', default=None, help='New title')
@click.option('--date', '-d', 'scheduled_at', default=None, help="Scheduled date (YYYY-MM-DD, or 'none' to clear)")
@click.option('--priority', '-p', default=None, type=click.Choice(['high', 'medium', 'low', 'none'], case_sensitive=False), help='Priority')
@click.option('--category', '-c', 'category_id', default=None, help="Category ID, or 'none' to clear")
@click.option('--memo', '-m', default=None, help="Memo ('' to clear)")
def task_update(task_id, title, scheduled_at, priority, category_id, memo):
    """Update fields of a task."""
    user_id = get_cli_user_id()
    fields = {}
    if title is not None:
        fields['title'] = title
    if scheduled_at is not None:
        fields['scheduled_at'] = None if scheduled_at == 'none' else scheduled_at
    if priority is not None:
        fields['priority'] = None if priority == 'none' else priority
    if category_id is not None:
        fields['category_id'] = None if category_id == 'none' else category_id
    if memo is not None:
        fields['memo'] = memo
    if not fields:
        click.echo("No fields to update")
        return
    task = unwrap(task_service.update_task(user_id, task_id, **fields))
    click.echo(f"Updated task '{task.title}' ({task.task_id})")
