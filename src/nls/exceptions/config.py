"""
Configuration-related exceptions.

Raised before a request is dispatched, when the client is not in a state
that can produce a well-formed request URL.
"""

from typing import Any

from .base import ExceptionContext, NLSError


class ConfigurationError(NLSError):
    """Base class for configuration-related errors."""
    pass


class MissingCredentialsError(ConfigurationError):
    """Raised when a request is attempted without an API key or app key."""

    def __init__(self, *fields: str):
        from ..constants import EnvironmentConstants

        self.fields = fields
        message = f"Missing required credentials: {', '.join(fields)}"
        help_text = (
            f"Pass the keys to Client.init() or set {EnvironmentConstants.API_KEY} "
            f"and {EnvironmentConstants.APP_KEY} before calling init()"
        )
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_MISSING_CREDENTIALS",
        )
        super().__init__(message, context)


class InvalidIndexKeyError(NLSError):
    """Raised when an index key cannot be placed in a request URL."""

    def __init__(self, index_key: Any):
        self.index_key = index_key
        message = f"Invalid index key: {index_key!r}"
        context = ExceptionContext(
            help_text="Index keys must be non-empty strings",
            error_code="INVALID_INDEX_KEY",
        )
        super().__init__(message, context)


class InvalidPayloadError(NLSError):
    """Raised when a save payload has no form encoding."""

    def __init__(self, payload: Any, reason: str):
        self.payload = payload
        message = f"Cannot encode payload of type {type(payload).__name__}: {reason}"
        context = ExceptionContext(
            help_text="Pass a mapping, a list of (key, value) pairs, str, bytes or a number",
            error_code="INVALID_PAYLOAD",
        )
        super().__init__(message, context)
