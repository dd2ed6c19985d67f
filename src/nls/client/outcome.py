"""
Operations and outcomes exchanged with the storage service.

An operation is built fresh for every call and dropped after dispatch. An
outcome is what the caller receives: Success for a 2xx response, Failure
for everything else.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
B = TypeVar("B")


@dataclass(frozen=True)
class Load:
    """Retrieve the value stored under ``index_key``."""

    index_key: str

    name = "load"


@dataclass(frozen=True)
class Save(Generic[T]):
    """Store ``payload`` under ``index_key``."""

    index_key: str
    payload: T

    name = "save"


@dataclass(frozen=True)
class Success(Generic[B]):
    """A 2xx response. ``body`` is passed through from the transport."""

    body: B


@dataclass(frozen=True)
class Failure:
    """Everything the transport reported about a failed request.

    Attributes:
        error: The raw transport object: the requests exception, or the
            requests.Response for a non-2xx status
        status_text: "error", "timeout", "parsererror" or "abort"
        description: HTTP reason phrase or exception message
        status_code: HTTP status, None when no response was received
    """

    error: Any
    status_text: str
    description: str
    status_code: Optional[int] = None
