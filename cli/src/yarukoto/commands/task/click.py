import click

from .add import task_add
from .list import task_list
from .today import task_today
from .date import task_date
from .search import task_search
from .stats import task_stats
from .update import task_update
from .done import task_done, task_undone
from .skip import task_skip, task_unskip
from .delete import task_delete
from .reorder import task_reorder

@click.group('task')
def task_group():
    """Manage tasks."""
    pass

task_group.add_command(task_add)
task_group.add_command(task_list)
task_group.add_command(task_today)
task_group.add_command(task_date)
task_group.add_command(task_search)
task_group.add_command(task_stats)
task_group.add_command(task_update)
task_group.add_command(task_done)
task_group.add_command(task_undone)
task_group.add_command(task_skip)
task_group.add_command(task_unskip)
task_group.add_command(task_delete)
task_group.add_command(task_reorder)
