"""Group commands for the Domo CLI."""

from __future__ import annotations

import click

from domo.models import Group

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def group() -> None:
    """Manage user groups and their membership."""
    pass


@group.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_groups(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List groups."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_groups(limit=limit, offset=offset), **kwargs)


@group.command("create")
@output_options
@pass_client
def create_group(client, **kwargs) -> None:
    """Create a group from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Group.template(), get_editor(ctx))
    handle_output(ctx, client.create_group(new), **kwargs)


@group.command("retrieve")
@click.argument("group_id")
@output_options
@pass_client
def retrieve_group(client, group_id: str, **kwargs) -> None:
    """Retrieve a group by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_group(group_id), **kwargs)


@group.command("update")
@click.argument("group_id")
@output_options
@pass_client
def update_group(client, group_id: str, **kwargs) -> None:
    """Edit a group."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_group(group_id), get_editor(ctx))
    handle_output(ctx, client.update_group(group_id, edited), **kwargs)


@group.command("delete")
@click.argument("group_id")
@pass_client
def delete_group(client, group_id: str) -> None:
    """Delete a group."""
    client.delete_group(group_id)


@group.command("list-users")
@click.argument("group_id")
@output_options
@pass_client
def list_group_users(client, group_id: str, **kwargs) -> None:
    """List the IDs of the users in a group."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_group_users(group_id), **kwargs)


@group.command("add-user")
@click.argument("group_id")
@click.argument("user_id")
@pass_client
def add_group_user(client, group_id: str, user_id: str) -> None:
    """Add a user to a group."""
    client.add_group_user(group_id, user_id)


@group.command("remove-user")
@click.argument("group_id")
@click.argument("user_id")
@pass_client
def remove_group_user(client, group_id: str, user_id: str) -> None:
    """Remove a user from a group."""
    client.remove_group_user(group_id, user_id)
