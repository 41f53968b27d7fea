import click
from tabulate import tabulate
from storage import time_util
from storage.service import task as task_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('stats')
@click.argument('month', required=False)
def task_stats(month):
    """Per-day totals for MONTH (YYYY-MM, defaults to the current month)."""
    user_id = get_cli_user_id()
    month = month or time_util.today()[:7]
    stats = unwrap(task_service.get_monthly_stats(user_id, month))
    if not stats:
        click.echo(f"No tasks in {month}")
        return
    table = []
    for date, day in stats.items():
        table.append([
            date,
            day.total,
            day.completed,
            day.overdue,
            day.skipped,
            ",".join(c.name for c in day.completed_categories) or "-",
        ])
    click.echo(tabulate(table, headers=["Date", "Total", "Completed", "Overdue", "Skipped", "Categories"], tablefmt="simple"))
