"""Credential loading and configuration for the Domo CLI."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dotenv import dotenv_values

from domo.client import DEFAULT_HOST, ClientConfig

from .constants import ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_HOST
from .errors import MissingCredentialsError

logger = logging.getLogger(__name__)

# credentials.json key for each environment variable
_FILE_KEYS = {
    ENV_HOST: "host",
    ENV_CLIENT_ID: "client_id",
    ENV_CLIENT_SECRET: "client_secret",
}


def get_credentials_path() -> Path:
    """Get the path to the credentials file."""
    return Path.home() / ".config" / "domo" / "credentials.json"


def _load_credentials_file() -> dict:
    creds_path = get_credentials_path()
    if not creds_path.exists():
        return {}
    try:
        data = json.loads(creds_path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable credentials file %s: %s", creds_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_setting(name: str, explicit: str | None = None) -> str | None:
    """Resolve one setting.

    Resolution order:
    1. Explicit value (command line option or environment variable)
    2. .env file in current working directory
    3. ~/.config/domo/credentials.json
    """
    if explicit:
        return explicit

    value = os.environ.get(name)
    if value:
        return value

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        value = dotenv_values(env_path).get(name)
        if value:
            return value

    return _load_credentials_file().get(_FILE_KEYS.get(name, name.lower())) or None


def load_client_config(
    host: str | None = None,
    client_id: str | None = None,
    client_secret: str | None = None,
) -> ClientConfig:
    """Resolve host and client credentials into a frozen ``ClientConfig``.

    Raises:
        MissingCredentialsError: the client id or secret is not set anywhere.
    """
    client_id = load_setting(ENV_CLIENT_ID, client_id)
    client_secret = load_setting(ENV_CLIENT_SECRET, client_secret)
    if not client_id or not client_secret:
        raise MissingCredentialsError(
            f"No API credentials found. Set {ENV_CLIENT_ID} and {ENV_CLIENT_SECRET} "
            "or run: domo auth set-credentials <client-id> <client-secret>"
        )
    host = load_setting(ENV_HOST, host) or DEFAULT_HOST
    return ClientConfig(client_id=client_id, client_secret=client_secret, host=host.rstrip("/"))


def save_credentials(client_id: str, client_secret: str, host: str | None = None) -> Path:
    """Save credentials to the credentials file. Returns the path."""
    creds_path = get_credentials_path()
    creds_path.parent.mkdir(parents=True, exist_ok=True)
    data = {"client_id": client_id, "client_secret": client_secret}
    if host:
        data["host"] = host
    creds_path.write_text(json.dumps(data, indent=2))
    creds_path.chmod(0o600)
    return creds_path
