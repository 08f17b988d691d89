"""Entry point for python -m domo."""

from domo.cli.main import cli

cli()
