"""
Request failure exceptions.

All exceptions a dispatched load or save can fail with. Each one carries the
Failure record that was delivered to the failure continuation, so callers
awaiting the future see the same transport error, status text and
description.
"""

from typing import TYPE_CHECKING, Optional

from .base import ExceptionContext, NLSError

if TYPE_CHECKING:
    from nls.client.outcome import Failure


class RequestFailedError(NLSError):
    """Base class for errors raised by a dispatched request."""

    error_code = "REQUEST_FAILED"

    def __init__(
        self,
        operation: str,
        index_key: str,
        failure: "Failure",
        correlation_id: Optional[str] = None,
    ):
        self.operation = operation
        self.index_key = index_key
        self.failure = failure

        message = f"{operation} '{index_key}' failed ({failure.status_text})"
        if failure.description:
            message += f": {failure.description}"

        context = ExceptionContext(
            help_text=self._help_text(),
            error_code=type(self).error_code,
            context={
                "operation": operation,
                "index_key": index_key,
                "status_code": failure.status_code,
            },
            technical_details=repr(failure.error),
            correlation_id=correlation_id,
        )
        super().__init__(message, context)

    @property
    def status_code(self) -> Optional[int]:
        return self.failure.status_code

    def _help_text(self) -> Optional[str]:
        return None


class TransportError(RequestFailedError):
    """Raised when the request never produced an HTTP response."""

    error_code = "TRANSPORT_FAILED"

    def _help_text(self) -> str:
        return "Check network connectivity and the NotLocalStorage service status"


class ServiceError(RequestFailedError):
    """Raised when the service answered with a non-2xx status."""

    error_code = "SERVICE_ERROR"

    def _help_text(self) -> str:
        if self.status_code in (401, 403):
            return "Verify the API key and app key passed to Client.init()"
        if self.status_code == 404:
            return "No value is stored under this index key"
        return "The service rejected the request"


class ResponseParseError(RequestFailedError):
    """Raised when a successful response declares JSON but cannot be decoded."""

    error_code = "RESPONSE_PARSE_ERROR"
