import click
from storage.service import category as category_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('delete')
@click.argument('category_id')
def category_delete(category_id):
    """Delete a category; its tasks are kept without a category."""
    user_id = get_cli_user_id()
    unwrap(category_service.delete_category(user_id, category_id))
    click.echo(f"Deleted category {category_id}")
