import click
from tabulate import tabulate
from storage.service import category as category_service
from storage.service.user import get_cli_user_id
from yarukoto.output import unwrap


@click.command('list')
def category_list():
    """List categories."""
    user_id = get_cli_user_id()
    categories = unwrap(category_service.get_categories(user_id))
    if not categories:
        click.echo("No categories found")
        return
    table = [[c.category_id, c.name, c.color or "-"] for c in categories]
    click.echo(tabulate(table, headers=["ID", "Name", "Color"], tablefmt="simple"))
