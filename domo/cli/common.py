"""Shared decorators and utilities for the Domo CLI."""

from __future__ import annotations

import functools
from typing import Any, Callable

import click

from domo import Domo, WebhookClient

from .config import load_client_config
from .constants import DEFAULT_EDITOR
from .errors import handle_api_error
from .output import DEFAULT_FORMAT, OutputFormat
from .output import output as do_output


def get_output_format(ctx: click.Context) -> OutputFormat:
    obj = ctx.obj or {}
    return obj.get("template") or DEFAULT_FORMAT


def get_editor(ctx: click.Context) -> str:
    obj = ctx.obj or {}
    return obj.get("editor") or DEFAULT_EDITOR


def get_client(ctx: click.Context) -> Domo:
    """Return the context's client, building it from the resolved config once."""
    obj = ctx.ensure_object(dict)
    client = obj.get("client")
    if client is None:
        config = load_client_config(
            host=obj.get("host"),
            client_id=obj.get("client_id"),
            client_secret=obj.get("client_secret"),
        )
        client = Domo(config)
        obj["client"] = client
    return client


def _guarded(factory: Callable[[click.Context], Any]) -> Callable:
    def decorator(f: Callable) -> Callable:
        @click.pass_context
        @functools.wraps(f)
        def wrapper(ctx: click.Context, *args: Any, **kwargs: Any) -> Any:
            use_json = get_output_format(ctx) is OutputFormat.JSON
            try:
                client = factory(ctx)
                return ctx.invoke(f, client=client, *args, **kwargs)
            except (click.ClickException, click.exceptions.Exit, click.Abort):
                raise
            except Exception as exc:
                handle_api_error(exc, use_json=use_json)

        return wrapper
    return decorator


def pass_client(f: Callable) -> Callable:
    """Decorator that injects a Domo API client into the command.

    Any failure raised while building the client or running the command is
    reported through ``handle_api_error`` and ends the process.
    """
    return _guarded(get_client)(f)


def pass_webhook_client(f: Callable) -> Callable:
    """Decorator that injects a webhook client into the command."""
    return _guarded(lambda ctx: WebhookClient())(f)


def output_options(f: Callable) -> Callable:
    """Add standard output options to a command."""
    f = click.option("--fields", type=str, default=None, help="Comma-separated fields to include")(f)
    f = click.option("--head", type=int, default=None, help="Show only first N records")(f)
    f = click.option("--output", "output_file", type=str, default=None, help="Write output to file")(f)
    return f


def handle_output(
    ctx: click.Context,
    data: Any,
    *,
    fields: str | None = None,
    head: int | None = None,
    output_file: str | None = None,
) -> None:
    """Render ``data`` in the selected output format."""
    do_output(
        data,
        fmt=get_output_format(ctx),
        fields=fields,
        head=head,
        output_file=output_file,
    )
