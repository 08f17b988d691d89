"""Page commands for the Domo CLI."""

from __future__ import annotations

import click

from domo.models import Collection, Page

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def page() -> None:
    """Manage pages and their card collections."""
    pass


@page.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_pages(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List pages."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_pages(limit=limit, offset=offset), **kwargs)


@page.command("create")
@output_options
@pass_client
def create_page(client, **kwargs) -> None:
    """Create a page from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Page.template(), get_editor(ctx))
    handle_output(ctx, client.create_page(new), **kwargs)


@page.command("retrieve")
@click.argument("page_id", type=int)
@output_options
@pass_client
def retrieve_page(client, page_id: int, **kwargs) -> None:
    """Retrieve a page by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_page(page_id), **kwargs)


@page.command("update")
@click.argument("page_id", type=int)
@output_options
@pass_client
def update_page(client, page_id: int, **kwargs) -> None:
    """Edit a page. Collections can be reordered but not added or removed."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_page(page_id), get_editor(ctx))
    handle_output(ctx, client.update_page(page_id, edited), **kwargs)


@page.command("delete")
@click.argument("page_id", type=int)
@pass_client
def delete_page(client, page_id: int) -> None:
    """Delete a page."""
    client.delete_page(page_id)


@page.command("list-collections")
@click.argument("page_id", type=int)
@output_options
@pass_client
def list_collections(client, page_id: int, **kwargs) -> None:
    """List the collections on a page."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_page_collections(page_id), **kwargs)


@page.command("create-collection")
@click.argument("page_id", type=int)
@output_options
@pass_client
def create_collection(client, page_id: int, **kwargs) -> None:
    """Add a collection to a page from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Collection.template(), get_editor(ctx))
    handle_output(ctx, client.create_page_collection(page_id, new), **kwargs)


@page.command("update-collection")
@click.argument("page_id", type=int)
@click.argument("collection_id", type=int)
@pass_client
def update_collection(client, page_id: int, collection_id: int) -> None:
    """Edit one collection on a page.

    Fails before opening the editor when the page has no collection with
    COLLECTION_ID.
    """
    ctx = click.get_current_context()
    current = client.find_page_collection(page_id, collection_id)
    edited = edit_model(current, get_editor(ctx))
    client.update_page_collection(page_id, collection_id, edited)


@page.command("delete-collection")
@click.argument("page_id", type=int)
@click.argument("collection_id", type=int)
@pass_client
def delete_collection(client, page_id: int, collection_id: int) -> None:
    """Delete a collection from a page."""
    client.delete_page_collection(page_id, collection_id)
