import click

from .add import category_add
from .list import category_list
from .update import category_update
from .delete import category_delete

@click.group('category')
def category_group():
    """Manage categories."""
    pass

category_group.add_command(category_add)
category_group.add_command(category_list)
category_group.add_command(category_update)
category_group.add_command(category_delete)
