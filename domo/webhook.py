"""Posting to Buzz and DataSet incoming webhooks.

Webhook URLs carry their own secret, so no OAuth token is involved.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel

from .client import raise_for_api_error
from .models import BuzzMessage

logger = logging.getLogger(__name__)


class _MessageContent(BaseModel):
    text: str


class _IntegrationMessage(BaseModel):
    content: _MessageContent


class WebhookClient:
    """Sends JSON payloads to webhook URLs."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or requests.Session()

    def _post(self, url: str, body: Any, headers: dict[str, str] | None = None) -> requests.Response:
        logger.debug("POST webhook")
        response = self.session.post(url, json=body, headers=headers)
        logger.info("POST webhook -> %d", response.status_code)
        raise_for_api_error(response)
        return response

    def post_integration_message(self, url: str, token: str, text: str) -> None:
        """Post a message as a Buzz integration bot."""
        body = _IntegrationMessage(content=_MessageContent(text=text))
        self._post(url, body.model_dump(), headers={"x-buzz-bot-token": token})

    def post_buzz_message(self, url: str, message: BuzzMessage) -> None:
        self._post(url, message.to_wire())

    def post_dataset_json(self, url: str, payload: Any) -> None:
        """Post an arbitrary JSON document to a DataSet JSON webhook."""
        self._post(url, payload)
