"""Stream commands for the Domo CLI."""

from __future__ import annotations

from pathlib import Path

import click

from domo.models import Stream

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def stream() -> None:
    """Manage streams and upload data through executions."""
    pass


@stream.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return (server max 500)")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_streams(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List one page of streams."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_streams(limit=limit, offset=offset), **kwargs)


@stream.command("list-all")
@output_options
@pass_client
def list_all_streams(client, **kwargs) -> None:
    """List every stream, following pagination to the end."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_all_streams(), **kwargs)


@stream.command("create")
@output_options
@pass_client
def create_stream(client, **kwargs) -> None:
    """Create a stream and its DataSet from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Stream.template(), get_editor(ctx))
    handle_output(ctx, client.create_stream(new), **kwargs)


@stream.command("retrieve")
@click.argument("stream_id")
@output_options
@pass_client
def retrieve_stream(client, stream_id: str, **kwargs) -> None:
    """Retrieve a stream by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_stream(stream_id), **kwargs)


@stream.command("update")
@click.argument("stream_id")
@output_options
@pass_client
def update_stream(client, stream_id: str, **kwargs) -> None:
    """Edit a stream's metadata."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_stream(stream_id), get_editor(ctx))
    handle_output(ctx, client.update_stream(stream_id, edited), **kwargs)


@stream.command("delete")
@click.argument("stream_id")
@pass_client
def delete_stream(client, stream_id: str) -> None:
    """Delete a stream. Its DataSet is kept."""
    client.delete_stream(stream_id)


@stream.command("search-owners")
@click.argument("owner_id")
@output_options
@pass_client
def search_owners(client, owner_id: str, **kwargs) -> None:
    """Find the streams whose DataSet is owned by OWNER_ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.search_streams_by_owner(owner_id), **kwargs)


@stream.command("search-ids")
@click.argument("dataset_id")
@output_options
@pass_client
def search_ids(client, dataset_id: str, **kwargs) -> None:
    """Find the stream feeding DATASET_ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.search_streams_by_dataset(dataset_id), **kwargs)


@stream.command("list-executions")
@click.argument("stream_id")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_executions(client, stream_id: str, limit: int | None, offset: int | None, **kwargs) -> None:
    """List the executions of a stream."""
    ctx = click.get_current_context()
    data = client.get_stream_executions(stream_id, limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)


@stream.command("create-execution")
@click.argument("stream_id")
@output_options
@pass_client
def create_execution(client, stream_id: str, **kwargs) -> None:
    """Start an execution. Any other running execution is aborted."""
    ctx = click.get_current_context()
    handle_output(ctx, client.create_stream_execution(stream_id), **kwargs)


@stream.command("retrieve-execution")
@click.argument("stream_id")
@click.argument("execution_id")
@output_options
@pass_client
def retrieve_execution(client, stream_id: str, execution_id: str, **kwargs) -> None:
    """Retrieve an execution."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_stream_execution(stream_id, execution_id), **kwargs)


@stream.command("upload-part")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("stream_id")
@click.argument("execution_id")
@click.argument("part_id")
@output_options
@pass_client
def upload_part(
    client, file: Path, stream_id: str, execution_id: str, part_id: str, **kwargs
) -> None:
    """Upload FILE as part PART_ID of an execution.

    Number parts in increasing order. A failed part can be uploaded again
    under the same PART_ID; every part must be present before committing.
    """
    ctx = click.get_current_context()
    data = client.upload_stream_part(stream_id, execution_id, part_id, file.read_text())
    handle_output(ctx, data, **kwargs)


@stream.command("commit-execution")
@click.argument("stream_id")
@click.argument("execution_id")
@output_options
@pass_client
def commit_execution(client, stream_id: str, execution_id: str, **kwargs) -> None:
    """Commit an execution, importing every uploaded part."""
    ctx = click.get_current_context()
    handle_output(ctx, client.commit_stream_execution(stream_id, execution_id), **kwargs)


@stream.command("abort-execution")
@click.argument("stream_id")
@click.argument("execution_id")
@pass_client
def abort_execution(client, stream_id: str, execution_id: str) -> None:
    """Abort an execution."""
    client.abort_stream_execution(stream_id, execution_id)
