"""
NLS Exception Hierarchy

Exception Hierarchy:
    NLSError (base)
    ├── ConfigurationError
    │   └── MissingCredentialsError
    ├── InvalidIndexKeyError
    ├── InvalidPayloadError
    └── RequestFailedError
        ├── TransportError
        ├── ServiceError
        └── ResponseParseError

This package provides focused exception components:
- base: Core NLSError base class
- config: Errors raised before a request is dispatched
- transport: Errors a dispatched request fails with
"""

from .base import ExceptionContext, NLSError

from .config import (
    ConfigurationError,
    InvalidIndexKeyError,
    InvalidPayloadError,
    MissingCredentialsError,
)

from .transport import (
    RequestFailedError,
    ResponseParseError,
    ServiceError,
    TransportError,
)

__all__ = [
    # Base
    "NLSError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "MissingCredentialsError",
    "InvalidIndexKeyError",
    "InvalidPayloadError",
    # Requests
    "RequestFailedError",
    "TransportError",
    "ServiceError",
    "ResponseParseError",
]
