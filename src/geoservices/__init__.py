"""Shared request layer for geoservices REST operations.

Errors raised by every operation live here so callers can catch a single
family regardless of which package issued the request.
"""

from __future__ import annotations


class RequestError(RuntimeError):
    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class InvalidArgumentError(RequestError, ValueError):
    """Caller input that cannot be turned into a request."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__("INVALID_ARGUMENT", message, details)


class AuthenticationRequiredError(RequestError):
    def __init__(self, message: str) -> None:
        super().__init__("AUTHENTICATION_REQUIRED", message)


class ServiceError(RequestError):
    """The service answered with an ``{"error": {...}}`` envelope."""


class TransportError(RequestError):
    """The request never produced a usable JSON payload."""
