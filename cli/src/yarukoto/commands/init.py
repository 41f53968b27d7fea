import click

from storage.service import user as user_service


@click.command('init')
@click.option('--email', '-e', default=None, help='Account email (defaults to YARUKOTO_USER)')
@click.option('--name', '-n', default=None, help='Display name')
@click.option('--token', 'with_token', is_flag=True, help='Issue an API bearer token')
def init(email, name, with_token):
    """Create the database and the local account."""
    user = user_service.get_or_create_user(email, name=name) if email else user_service.get_user(user_service.get_cli_user_id())
    click.echo(f"Database ready; account '{user.email}' (id {user.id})")
    if with_token:
        token = user_service.issue_token(user.id)
        click.echo(f"API token: {token}")
