import click
from storage import time_util
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import echo_tasks, unwrap
from .today import show_today


@click.command('date')
@click.argument('date')
def task_date(date):
    """Show tasks for DATE (YYYY-MM-DD, or 'yesterday'/'tomorrow')."""
    user_id = get_cli_user_id()
    today = time_util.today()
    date = {"yesterday": time_util.add_days(today, -1), "tomorrow": time_util.add_days(today, 1)}.get(date, date)
    if date == today:
        show_today(user_id)
        return
    day = unwrap(task_service.get_tasks_by_date(user_id, date))
    click.echo(time_util.format_date_for_display(date))
    echo_tasks(day.scheduled, "Scheduled", empty="-")
    if day.is_past:
        echo_tasks(day.completed_on_date, "Completed", empty="-")
        echo_tasks(day.skipped_on_date, "Skipped", empty="-")
