import click
from storage.service import category as category_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('update')
@click.argument('category_id')
@click.option('--name', '-n', default=None, help='New name')
@click.option('--color', '-c', default=None, help="Color (#RRGGBB, or 'none' to clear)")
def category_update(category_id, name, color):
    """Rename or recolor a category."""
    user_id = get_cli_user_id()
    fields = {}
    if name is not None:
        fields['name'] = name
    if color is not None:
        fields['color'] = None if color == 'none' else color
    if not fields:
        click.echo("No fields to update")
        return
    category = unwrap(category_service.update_category(user_id, category_id, **fields))
    click.echo(f"Updated category '{category.name}' ({category.category_id})")
