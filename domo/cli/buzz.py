"""Buzz integration commands for the Domo CLI."""

from __future__ import annotations

import click

from domo.models import Integration, Subscription

from .common import get_editor, handle_output, output_options, pass_client
from .editor import edit_model


@click.group()
def buzz() -> None:
    """Manage Buzz integrations and their event subscriptions."""
    pass


@buzz.command("list")
@output_options
@pass_client
def list_integrations(client, **kwargs) -> None:
    """List Buzz integrations."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_integrations(), **kwargs)


@buzz.command("create")
@output_options
@pass_client
def create_integration(client, **kwargs) -> None:
    """Create an integration from an edited template."""
    ctx = click.get_current_context()
    integration = edit_model(Integration.template(), get_editor(ctx))
    handle_output(ctx, client.create_integration(integration), **kwargs)


@buzz.command("retrieve")
@click.argument("integration_id")
@output_options
@pass_client
def retrieve_integration(client, integration_id: str, **kwargs) -> None:
    """Retrieve an integration by ID."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_integration(integration_id), **kwargs)


@buzz.command("delete")
@click.argument("integration_id")
@pass_client
def delete_integration(client, integration_id: str) -> None:
    """Delete an integration."""
    client.delete_integration(integration_id)


@buzz.command("list-subscriptions")
@click.argument("integration_id")
@output_options
@pass_client
def list_subscriptions(client, integration_id: str, **kwargs) -> None:
    """List the event subscriptions of an integration."""
    ctx = click.get_current_context()
    handle_output(ctx, client.get_integration_subscriptions(integration_id), **kwargs)


@buzz.command("create-subscription")
@click.argument("integration_id")
@output_options
@pass_client
def create_subscription(client, integration_id: str, **kwargs) -> None:
    """Subscribe an integration to an event from an edited template."""
    ctx = click.get_current_context()
    subscription = edit_model(Subscription.template(), get_editor(ctx))
    data = client.create_integration_subscription(integration_id, subscription)
    handle_output(ctx, data, **kwargs)


@buzz.command("delete-subscription")
@click.argument("integration_id")
@click.argument("subscription_id")
@pass_client
def delete_subscription(client, integration_id: str, subscription_id: str) -> None:
    """Delete an event subscription."""
    client.delete_integration_subscription(integration_id, subscription_id)
