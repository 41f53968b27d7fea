import click
from storage.service import category as category_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('add')
@click.argument('name')
@click.option('--color', '-c', default=None, help='Color (#RRGGBB)')
def category_add(name, color):
    """Add a category."""
    user_id = get_cli_user_id()
    category = unwrap(category_service.create_category(user_id, name, color=color))
    click.echo(f"Created category '{category.name}' ({category.category_id})")
