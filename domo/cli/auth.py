"""Authentication commands for the Domo CLI."""

from __future__ import annotations

import click

from .common import pass_client
from .config import save_credentials


@click.group()
def auth() -> None:
    """Manage API credentials."""
    pass


@auth.command("set-credentials")
@click.argument("client_id")
@click.argument("client_secret")
@click.option("--host", type=str, default=None, help="API host to store alongside the credentials")
def set_credentials(client_id: str, client_secret: str, host: str | None) -> None:
    """Save client credentials to ~/.config/domo/credentials.json."""
    path = save_credentials(client_id, client_secret, host)
    click.echo(f"Credentials saved to {path}")


@auth.command("test")
@click.option("--scope", type=str, default="data", show_default=True, help="Scope to request a token for")
@pass_client
def test(client, scope: str) -> None:
    """Test API authentication by requesting an access token."""
    client.get_access_token(scope)
    click.echo(f"Authenticated against {client.config.host} (scope: {scope})")
