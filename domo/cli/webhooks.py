"""Webhook commands for the Domo CLI."""

from __future__ import annotations

import click

from domo.models import BuzzMessage

from .common import get_editor, pass_webhook_client
from .constants import (
    ENV_BUZZ_WH_URL,
    ENV_DATASET_WH_URL,
    ENV_INTEGRATION_WH_TOKEN,
    ENV_INTEGRATION_WH_URL,
)
from .editor import edit_markdown, edit_value
from .errors import EditorError

MESSAGE_PLACEHOLDER = "Your message here"

DATASET_ROW_TEMPLATE = {
    "a": "Column A Value",
    "b": 43,
    "c": "Column C Value",
}


@click.group()
def webhook() -> None:
    """Post to Buzz and DataSet incoming webhooks."""
    pass


@webhook.command("create-integration-message")
@click.option("--url", envvar=ENV_INTEGRATION_WH_URL, required=True, help="Integration webhook URL")
@click.option("--token", envvar=ENV_INTEGRATION_WH_TOKEN, required=True, help="Integration bot token")
@pass_webhook_client
def create_integration_message(client, url: str, token: str) -> None:
    """Write a Markdown message and post it as an integration bot."""
    ctx = click.get_current_context()
    text = edit_markdown(MESSAGE_PLACEHOLDER, get_editor(ctx))
    client.post_integration_message(url, token, text)


@webhook.command("create-buzz-message")
@click.argument("title", required=False)
@click.option("--url", envvar=ENV_BUZZ_WH_URL, required=True, help="Buzz webhook URL")
@pass_webhook_client
def create_buzz_message(client, title: str | None, url: str) -> None:
    """Write a Markdown message and post it to a Buzz channel."""
    ctx = click.get_current_context()
    text = edit_markdown(MESSAGE_PLACEHOLDER, get_editor(ctx))
    client.post_buzz_message(url, BuzzMessage(title=title, text=text))


@webhook.command("create-dataset-json")
@click.option("--url", envvar=ENV_DATASET_WH_URL, required=True, help="DataSet JSON webhook URL")
@pass_webhook_client
def create_dataset_json(client, url: str) -> None:
    """Edit a JSON row and post it to a DataSet webhook."""
    ctx = click.get_current_context()
    row = edit_value(DATASET_ROW_TEMPLATE, get_editor(ctx))
    if row is None:
        raise EditorError("Edited row is empty")
    client.post_dataset_json(url, row)
