"""Structured error handling for the Domo CLI."""

from __future__ import annotations

import json
import logging
import sys

import click
import requests

from domo.errors import DomoAPIError, DomoPreconditionError, DomoResponseError

from .constants import ExitCode

logger = logging.getLogger(__name__)


class EditorError(Exception):
    """The editor round trip did not produce a usable record."""


class MissingCredentialsError(Exception):
    """No client id or secret could be resolved."""


def error_json(code: str, message: str, exit_code: ExitCode) -> dict:
    """Build a structured error dict."""
    return {
        "error": True,
        "code": code,
        "message": message,
        "exit_code": int(exit_code),
    }


def die(
    code: str,
    message: str,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    use_json: bool = False,
) -> None:
    """Print error and exit."""
    if use_json:
        click.echo(json.dumps(error_json(code, message, exit_code)), err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(int(exit_code))


def handle_api_error(exc: Exception, use_json: bool = False) -> None:
    """Map a failure raised by a command to a message and exit code."""
    logger.debug("Command failed", exc_info=exc)
    if isinstance(exc, MissingCredentialsError):
        die("AUTH_REQUIRED", str(exc), ExitCode.AUTH_ERROR, use_json)
    elif isinstance(exc, DomoAPIError):
        die("API_ERROR", str(exc), ExitCode.GENERAL_ERROR, use_json)
    elif isinstance(exc, DomoResponseError):
        die("RESPONSE_ERROR", str(exc), ExitCode.GENERAL_ERROR, use_json)
    elif isinstance(exc, DomoPreconditionError):
        die("PRECONDITION_FAILED", str(exc), ExitCode.PRECONDITION_FAILED, use_json)
    elif isinstance(exc, EditorError):
        die("EDITOR_ERROR", str(exc), ExitCode.EDITOR_ERROR, use_json)
    elif isinstance(exc, requests.RequestException):
        die("NETWORK_ERROR", str(exc), ExitCode.NETWORK_ERROR, use_json)
    elif isinstance(exc, OSError):
        die("IO_ERROR", str(exc), ExitCode.GENERAL_ERROR, use_json)
    else:
        die("UNKNOWN_ERROR", str(exc), ExitCode.GENERAL_ERROR, use_json)
