"""Main Click application for the Domo CLI."""

from __future__ import annotations

import logging

import click

from domo import __version__

from .constants import DEFAULT_EDITOR, ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_EDITOR, ENV_HOST
from .output import DEFAULT_FORMAT, OutputFormat


def configure_logging(verbose: bool, debug: bool) -> None:
    """Send ``domo`` log records to stderr at the requested level."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logger = logging.getLogger("domo")
    logger.setLevel(level)
    # Rebind to the current stderr on every invocation
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__, prog_name="domo")
@click.option("--editor", envvar=ENV_EDITOR, default=DEFAULT_EDITOR, show_default=True, help="Editor used to edit records")
@click.option("--host", envvar=ENV_HOST, default=None, help="API host (default https://api.domo.com)")
@click.option("--clientid", "client_id", envvar=ENV_CLIENT_ID, default=None, help="API client id")
@click.option("--clientsecret", "client_secret", envvar=ENV_CLIENT_SECRET, default=None, help="API client secret")
@click.option(
    "--template",
    "-t",
    type=click.Choice([f.value for f in OutputFormat]),
    default=DEFAULT_FORMAT.value,
    show_default=True,
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--debug", is_flag=True, help="Log every request for debugging")
@click.pass_context
def cli(
    ctx: click.Context,
    editor: str,
    host: str | None,
    client_id: str | None,
    client_secret: str | None,
    template: str,
    verbose: bool,
    debug: bool,
) -> None:
    """Domo command line interface.

    Manage accounts, DataSets, groups, pages, streams, users, workflow
    projects and Buzz integrations through the Domo public API.

    \b
    Quick start:
      export DOMO_API_CLIENT_ID="your-client-id"
      export DOMO_API_CLIENT_SECRET="your-client-secret"
      domo dataset list --limit 5
      domo -t json user retrieve 12345
    """
    configure_logging(verbose, debug)
    ctx.ensure_object(dict)
    ctx.obj["editor"] = editor
    ctx.obj["host"] = host
    ctx.obj["client_id"] = client_id
    ctx.obj["client_secret"] = client_secret
    ctx.obj["template"] = OutputFormat(template)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


# Import and register command groups
from .accounts import account  # noqa: E402
from .activity import activity  # noqa: E402
from .auth import auth  # noqa: E402
from .buzz import buzz  # noqa: E402
from .datasets import dataset  # noqa: E402
from .groups import group  # noqa: E402
from .pages import page  # noqa: E402
from .streams import stream  # noqa: E402
from .users import user  # noqa: E402
from .webhooks import webhook  # noqa: E402
from .workflows import workflow  # noqa: E402

cli.add_command(auth)
cli.add_command(account)
cli.add_command(activity)
cli.add_command(buzz)
cli.add_command(dataset)
cli.add_command(group)
cli.add_command(page)
cli.add_command(stream)
cli.add_command(user)
cli.add_command(webhook)
cli.add_command(workflow)
