"""Workflow commands for the Domo CLI."""

from __future__ import annotations

from pathlib import Path

import click

from domo.models import Project, ProjectList, Task

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model, edit_value
from .errors import EditorError


@click.group()
def workflow() -> None:
    """Manage workflow projects, lists, tasks and attachments."""
    pass


# Projects


@workflow.command("list")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_projects(client, limit: int | None, offset: int | None, **kwargs) -> None:
    """List projects."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_projects(limit=limit, offset=offset), **kwargs)


@workflow.command("create")
@output_options
@pass_client
def create_project(client, **kwargs) -> None:
    """Create a project from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Project.template(), get_editor(ctx))
    handle_output(ctx, client.create_project(new), **kwargs)


@workflow.command("retrieve")
@click.argument("project_id")
@output_options
@pass_client
def retrieve_project(client, project_id: str, **kwargs) -> None:
    """Retrieve a project by ID ("me" for your personal project)."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_project(project_id), **kwargs)


@workflow.command("update")
@click.argument("project_id")
@output_options
@pass_client
def update_project(client, project_id: str, **kwargs) -> None:
    """Edit a project."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_project(project_id), get_editor(ctx))
    handle_output(ctx, client.update_project(project_id, edited), **kwargs)


@workflow.command("delete")
@click.argument("project_id")
@pass_client
def delete_project(client, project_id: str) -> None:
    """Delete a project."""
    client.delete_project(project_id)


@workflow.command("list-members")
@click.argument("project_id")
@output_options
@pass_client
def list_members(client, project_id: str, **kwargs) -> None:
    """List the user IDs of a project's members."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_project_members(project_id), **kwargs)


@workflow.command("update-members")
@click.argument("project_id")
@pass_client
def update_members(client, project_id: str) -> None:
    """Edit the list of a project's member IDs."""
    ctx = click.get_current_context()
    members = edit_value(client.get_project_members(project_id), get_editor(ctx))
    if not isinstance(members, list) or not all(
        isinstance(m, int) and not isinstance(m, bool) for m in members
    ):
        raise EditorError("Edited members must be a YAML list of user IDs")
    client.update_project_members(project_id, members)


# Lists


@workflow.command("list-lists")
@click.argument("project_id")
@output_options
@pass_client
def list_lists(client, project_id: str, **kwargs) -> None:
    """List the lists of a project."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_project_lists(project_id), **kwargs)


@workflow.command("create-list")
@click.argument("project_id")
@output_options
@pass_client
def create_list(client, project_id: str, **kwargs) -> None:
    """Add a list to a project from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(ProjectList.template(), get_editor(ctx))
    handle_output(ctx, client.create_project_list(project_id, new), **kwargs)


@workflow.command("retrieve-list")
@click.argument("project_id")
@click.argument("list_id")
@output_options
@pass_client
def retrieve_list(client, project_id: str, list_id: str, **kwargs) -> None:
    """Retrieve a list."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_project_list(project_id, list_id), **kwargs)


@workflow.command("update-list")
@click.argument("project_id")
@click.argument("list_id")
@output_options
@pass_client
def update_list(client, project_id: str, list_id: str, **kwargs) -> None:
    """Edit a list."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_project_list(project_id, list_id), get_editor(ctx))
    handle_output(ctx, client.update_project_list(project_id, list_id, edited), **kwargs)


@workflow.command("delete-list")
@click.argument("project_id")
@click.argument("list_id")
@pass_client
def delete_list(client, project_id: str, list_id: str) -> None:
    """Delete a list."""
    client.delete_project_list(project_id, list_id)


# Tasks


@workflow.command("list-tasks")
@click.argument("project_id")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_project_tasks(client, project_id: str, limit: int | None, offset: int | None, **kwargs) -> None:
    """List every task in a project."""
    ctx = click.get_current_context()
    data = client.get_project_tasks(project_id, limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)


@workflow.command("list-list-tasks")
@click.argument("project_id")
@click.argument("list_id")
@click.option("-l", "--limit", type=int, default=None, help="Max records to return")
@click.option("-o", "--offset", type=int, default=None, help="Records to skip")
@output_options
@pass_client
def list_list_tasks(
    client, project_id: str, list_id: str, limit: int | None, offset: int | None, **kwargs
) -> None:
    """List the tasks in one list of a project."""
    ctx = click.get_current_context()
    data = client.get_list_tasks(project_id, list_id, limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)


@workflow.command("create-task")
@click.argument("project_id")
@click.argument("list_id")
@output_options
@pass_client
def create_task(client, project_id: str, list_id: str, **kwargs) -> None:
    """Add a task to a list from an edited template."""
    ctx = click.get_current_context()
    new = edit_model(Task.template(), get_editor(ctx))
    handle_output(ctx, client.create_task(project_id, list_id, new), **kwargs)


@workflow.command("retrieve-task")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@output_options
@pass_client
def retrieve_task(client, project_id: str, list_id: str, task_id: str, **kwargs) -> None:
    """Retrieve a task."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_task(project_id, list_id, task_id), **kwargs)


@workflow.command("update-task")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@output_options
@pass_client
def update_task(client, project_id: str, list_id: str, task_id: str, **kwargs) -> None:
    """Edit a task."""
    ctx = click.get_current_context()
    edited = edit_model(client.get_task(project_id, list_id, task_id), get_editor(ctx))
    handle_output(ctx, client.update_task(project_id, list_id, task_id, edited), **kwargs)


@workflow.command("delete-task")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@pass_client
def delete_task(client, project_id: str, list_id: str, task_id: str) -> None:
    """Delete a task."""
    client.delete_task(project_id, list_id, task_id)


# Attachments


@workflow.command("list-attachments")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@output_options
@pass_client
def list_attachments(client, project_id: str, list_id: str, task_id: str, **kwargs) -> None:
    """List the attachments of a task."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_task_attachments(project_id, list_id, task_id), **kwargs)


@workflow.command("download-attachment")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@click.argument("attachment_id")
@click.option("--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write the file here instead of stdout")
@pass_client
def download_attachment(
    client, project_id: str, list_id: str, task_id: str, attachment_id: str, output_file: Path | None
) -> None:
    """Download an attachment's raw bytes."""
    content = client.download_task_attachment(project_id, list_id, task_id, attachment_id)
    if output_file:
        output_file.write_bytes(content)
    else:
        click.get_binary_stream("stdout").write(content)


@workflow.command("upload-attachment")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@output_options
@pass_client
def upload_attachment(
    client, project_id: str, list_id: str, task_id: str, file: Path, **kwargs
) -> None:
    """Attach FILE to a task."""
    ctx = click.get_current_context()
    data = client.upload_task_attachment(project_id, list_id, task_id, file)
    handle_output(ctx, data, **kwargs)


@workflow.command("delete-attachment")
@click.argument("project_id")
@click.argument("list_id")
@click.argument("task_id")
@click.argument("attachment_id")
@pass_client
def delete_attachment(client, project_id: str, list_id: str, task_id: str, attachment_id: str) -> None:
    """Delete an attachment from a task."""
    client.delete_task_attachment(project_id, list_id, task_id, attachment_id)
