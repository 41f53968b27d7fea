import click
from dotenv import load_dotenv

from storage.log import setup_logging
from yarukoto.config import get_log_level
from yarukoto.commands.init import init
from yarukoto.commands.task.click import task_group
from yarukoto.commands.category.click import category_group
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    """Personal task manager."""
    load_dotenv()
    setup_logging(get_log_level())


# Register commands
cli.add_command(init)
cli.add_command(task_group)
cli.add_command(category_group)
