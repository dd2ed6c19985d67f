"""
NLS: NotLocalStorage client library

Stores and retrieves caller data in the remote NotLocalStorage key-value
service. One HTTP request per call, results delivered through a future and
optional success/failure continuations.

Note that the service takes credentials as URL path segments, not headers.
Anything that records request URLs (proxies, access logs) sees the keys.
"""

__version__ = "0.1.0"

from .client import Client, Failure, Load, Save, Success
from .config import ClientConfig
from .exceptions import (
    ConfigurationError,
    InvalidIndexKeyError,
    InvalidPayloadError,
    MissingCredentialsError,
    NLSError,
    RequestFailedError,
    ResponseParseError,
    ServiceError,
    TransportError,
)
from .logging import LoggingConfig, configure_logging

__all__ = [
    "Client",
    "ClientConfig",
    "Load",
    "Save",
    "Success",
    "Failure",
    "NLSError",
    "ConfigurationError",
    "MissingCredentialsError",
    "InvalidIndexKeyError",
    "InvalidPayloadError",
    "RequestFailedError",
    "TransportError",
    "ServiceError",
    "ResponseParseError",
    "LoggingConfig",
    "configure_logging",
]
