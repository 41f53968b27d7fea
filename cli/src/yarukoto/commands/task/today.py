import click
from storage import time_util
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import echo_tasks, unwrap


def show_today(user_id: int):
    today = unwrap(task_service.get_today_tasks(user_id))
    click.echo(time_util.format_date_for_display(time_util.today()))
    echo_tasks(today.overdue, "Overdue", empty="-")
    echo_tasks(today.due_today, "Today", empty="-")
    echo_tasks(today.undated, "Undated", empty="-")
    echo_tasks(today.completed_today, "Completed", empty="-")
    echo_tasks(today.skipped_today, "Skipped", empty="-")


@click.command('today')
def task_today():
    """Show overdue, today's, undated, completed and skipped tasks."""
    show_today(get_cli_user_id())
