"""Account commands for the Domo CLI."""

from __future__ import annotations

import click

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def account() -> None:
    """Manage accounts (stored credentials for data providers)."""
    pass


@account.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_accounts(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List all accounts the client has permissions for."""
    ctx = click.get_current_context()
    data = client.get_accounts(limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)


@account.command("create")
@click.argument("account_type")
@output_options
@pass_client
def create_account(client, account_type: str, **kwargs) -> None:
    """Create an account of ACCOUNT_TYPE.

    The account type's properties differ per type, so the type is fetched
    first and its properties are pre-filled in the editor as TODO entries.
    """
    ctx = click.get_current_context()
    template = client.account_template(account_type)
    edited = edit_model(template, get_editor(ctx))
    data = client.create_account(edited)
    handle_output(ctx, data, **kwargs)


@account.command("retrieve")
@click.argument("account_id")
@output_options
@pass_client
def retrieve_account(client, account_id: str, **kwargs) -> None:
    """Retrieve an account by ID."""
    ctx = click.get_current_context()
    data = client.get_account(account_id)
    handle_output(ctx, data, **kwargs)


@account.command("update")
@click.argument("account_id")
@pass_client
def update_account(client, account_id: str) -> None:
    """Edit an account's metadata and type properties."""
    ctx = click.get_current_context()
    current = client.get_account(account_id)
    edited = edit_model(current, get_editor(ctx))
    client.update_account(account_id, edited)


@account.command("delete")
@click.argument("account_id")
@pass_client
def delete_account(client, account_id: str) -> None:
    """Delete an account."""
    client.delete_account(account_id)


@account.command("share")
@click.argument("account_id")
@click.argument("user_id", type=int)
@pass_client
def share_account(client, account_id: str, user_id: int) -> None:
    """Share an account with a user."""
    client.share_account(account_id, user_id)


@account.command("list-types")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_account_types(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List the account types the client has permissions for."""
    ctx = click.get_current_context()
    data = client.get_account_types(limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)


@account.command("retrieve-type")
@click.argument("account_type_id")
@output_options
@pass_client
def retrieve_account_type(client, account_type_id: str, **kwargs) -> None:
    """Retrieve an account type, including the properties it requires."""
    ctx = click.get_current_context()
    data = client.get_account_type(account_type_id)
    handle_output(ctx, data, **kwargs)
