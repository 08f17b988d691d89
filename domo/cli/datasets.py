"""DataSet commands for the Domo CLI."""

from __future__ import annotations

from pathlib import Path

import click

from domo.models import DataSet, Policy

from .common import get_editor, get_output_format, handle_output, output_options, pass_client
from .editor import edit_model
from .output import render_csv_text, render_query_result, write_output


@click.group()
def dataset() -> None:
    """Manage DataSets, their data and their PDP policies."""
    pass


@dataset.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_datasets(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List one page of DataSets."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_datasets(limit=limit, offset=offset), **kwargs)


@dataset.command("list-all")
@output_options
@pass_client
def list_all_datasets(client, **kwargs) -> None:
    """List every DataSet, following pagination to the end."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_all_datasets(), **kwargs)


@dataset.command("create")
@output_options
@pass_client
def create_dataset(client, **kwargs) -> None:
    """Create a DataSet from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(DataSet.template(), get_editor(ctx))
    handle_output(ctx, client.create_dataset(new), **kwargs)


@dataset.command("retrieve")
@click.argument("dataset_id")
@output_options
@pass_client
def retrieve_dataset(client, dataset_id: str, **kwargs) -> None:
    """Retrieve a DataSet by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_dataset(dataset_id), **kwargs)


@dataset.command("update")
@click.argument("dataset_id")
@output_options
@pass_client
def update_dataset(client, dataset_id: str, **kwargs) -> None:
    """Edit a DataSet's metadata."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_dataset(dataset_id), get_editor(ctx))
    handle_output(ctx, client.update_dataset(dataset_id, edited), **kwargs)


@dataset.command("delete")
@click.argument("dataset_id")
@pass_client
def delete_dataset(client, dataset_id: str) -> None:
    """Permanently delete a DataSet."""
    client.delete_dataset(dataset_id)


@dataset.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("dataset_id")
@pass_client
def import_dataset(client, file: Path, dataset_id: str) -> None:
    """Replace all data in DATASET_ID with the rows of a CSV FILE."""
    client.import_dataset(dataset_id, file.read_text())


@dataset.command("export")
@click.argument("dataset_id")
@click.option("--output", "output_file", type=str, default=None, help="Write output to file")
@pass_client
def export_dataset(client, dataset_id: str, output_file: str | None) -> None:
    """Export a DataSet's data as CSV (or rows of strings with -t json/yaml)."""
    ctx = click.get_current_context()
    text = client.export_dataset(dataset_id)
    write_output(render_csv_text(text, get_output_format(ctx)), output_file)


@dataset.command("query")
@click.argument("dataset_id")
@click.argument("sql")
@click.option("--output", "output_file", type=str, default=None, help="Write output to file")
@pass_client
def query_dataset(client, dataset_id: str, sql: str, output_file: str | None) -> None:
    """Run a SQL query against a DataSet (the table is always named "table")."""
    ctx = click.get_current_context()
    result = client.query_dataset(dataset_id, sql)
    write_output(render_query_result(result, get_output_format(ctx)), output_file)


@dataset.command("list-policies")
@click.argument("dataset_id")
@output_options
@pass_client
def list_policies(client, dataset_id: str, **kwargs) -> None:
    """List the PDP policies of a DataSet."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_dataset_policies(dataset_id), **kwargs)


@dataset.command("create-policy")
@click.argument("dataset_id")
@output_options
@pass_client
def create_policy(client, dataset_id: str, **kwargs) -> None:
    """Create a PDP policy. Referenced users and groups must already exist."""
    ctx = click.get_current_context()
    policy = edit_model(Policy.template(), get_editor(ctx))
    handle_output(ctx, client.create_dataset_policy(dataset_id, policy), **kwargs)


@dataset.command("retrieve-policy")
@click.argument("dataset_id")
@click.argument("policy_id", type=int)
@output_options
@pass_client
def retrieve_policy(client, dataset_id: str, policy_id: int, **kwargs) -> None:
    """Retrieve a PDP policy."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_dataset_policy(dataset_id, policy_id), **kwargs)


@dataset.command("update-policy")
@click.argument("dataset_id")
@click.argument("policy_id", type=int)
@output_options
@pass_client
def update_policy(client, dataset_id: str, policy_id: int, **kwargs) -> None:
    """Edit a PDP policy."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_dataset_policy(dataset_id, policy_id), get_editor(ctx))
    handle_output(ctx, client.update_dataset_policy(dataset_id, policy_id, edited), **kwargs)


@dataset.command("delete-policy")
@click.argument("dataset_id")
@click.argument("policy_id", type=int)
@pass_client
def delete_policy(client, dataset_id: str, policy_id: int) -> None:
    """Permanently delete a PDP policy."""
    client.delete_dataset_policy(dataset_id, policy_id)
