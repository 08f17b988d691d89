"""User commands for the Domo CLI."""

from __future__ import annotations

import click

from domo.models import User

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def user() -> None:
    """Manage users."""
    pass


@user.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_users(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List one page of users."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_users(limit=limit, offset=offset), **kwargs)


@user.command("list-all")
@output_options
@pass_client
def list_all_users(client, **kwargs) -> None:
    """List every user, following pagination to the end."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_all_users(), **kwargs)


@user.command("find-by-email")
@click.argument("emails", nargs=-1, required=True)
@output_options
@pass_client
def find_by_email(client, emails: tuple[str, ...], **kwargs) -> None:
    """Look up users by one or more email addresses."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_users_by_email(list(emails)), **kwargs)


@user.command("create")
@output_options
@pass_client
def create_user(client, **kwargs) -> None:
    """Create a user from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(User.template(), get_editor(ctx))
    handle_output(ctx, client.create_user(new), **kwargs)


@user.command("retrieve")
@click.argument("user_id")
@output_options
@pass_client
def retrieve_user(client, user_id: str, **kwargs) -> None:
    """Retrieve a user by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_user(user_id), **kwargs)


@user.command("update")
@click.argument("user_id")
@output_options
@pass_client
def update_user(client, user_id: str, **kwargs) -> None:
    """Edit a user."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_user(user_id), get_editor(ctx))
    handle_output(ctx, client.update_user(user_id, edited), **kwargs)


@user.command("delete")
@click.argument("user_id")
@pass_client
def delete_user(client, user_id: str) -> None:
    """Delete a user."""
    client.delete_user(user_id)
