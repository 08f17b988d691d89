"""Domo - Python client and command line interface for the Domo public API."""

from .client import ClientConfig, Domo
from .errors import DomoAPIError, DomoError, DomoPreconditionError, DomoResponseError
from .webhook import WebhookClient

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "Domo",
    "DomoAPIError",
    "DomoError",
    "DomoPreconditionError",
    "DomoResponseError",
    "WebhookClient",
    "__version__",
]
