"""Activity log commands for the Domo CLI."""

from __future__ import annotations

import click

from .common import handle_output, output_options, pass_client


@click.group()
def activity() -> None:
    """Query the activity log."""
    pass


@activity.command("list")
@click.argument("start", type=int)
@click.option("-e", "--end", type=int, default=None, help="End of the window, epoch milliseconds")
@click.option("-l", "--limit", type=int, default=None, help="Max entries to return")
@click.option("-o", "--offset", type=int, default=None, help="Entries to skip")
@click.option("-u", "--user", "user_id", type=int, default=None, help="Only entries for this user")
@output_options
@pass_client
def list_activity(
    client,
    start: int,
    end: int | None,
    limit: int | None,
    offset: int | None,
    user_id: int | None,
    **kwargs,
) -> None:
    """List activity log entries since START (epoch milliseconds)."""
    ctx = click.get_current_context()
    data = client.get_activity_log(start, end=end, user_id=user_id, limit=limit, offset=offset)
    handle_output(ctx, data, **kwargs)
