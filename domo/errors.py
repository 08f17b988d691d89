"""Exceptions raised by the Domo API client."""

from __future__ import annotations


class DomoError(Exception):
    """Base class for all client errors."""


class DomoAPIError(DomoError):
    """The API answered with a non-2xx status.

    The response body is decoded into the structured error the platform
    returns, so callers can inspect ``status`` and ``message`` directly.
    """

    def __init__(
        self,
        message: str,
        status: int,
        status_reason: str | None = None,
        path: str | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.status_reason = status_reason
        self.path = path
        self.error_type = error_type

    def __str__(self) -> str:
        parts = [f"HTTP {self.status}"]
        if self.status_reason:
            parts.append(self.status_reason)
        text = " ".join(parts) + f": {self.message}"
        if self.path:
            text += f" ({self.path})"
        return text

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "statusReason": self.status_reason,
            "message": self.message,
            "path": self.path,
            "toe": self.error_type,
        }


class DomoResponseError(DomoError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, response_text: str = "", status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response_text = response_text
        self.status = status


class DomoPreconditionError(DomoError):
    """A local check failed before any mutating request was sent."""
