"""
NotLocalStorage URL generation.

Handles URL generation for the two operations the service supports. Index
keys are inserted verbatim: they are not escaped, so keys containing '/',
'?' or '#' produce URLs the service will route differently.
"""

from functools import singledispatchmethod

from nls.config import ClientConfig
from nls.constants import ServiceConstants

from .outcome import Load, Save


class NLSURLGenerator:
    """Builds request URLs from a config snapshot."""

    def __init__(self, config: ClientConfig):
        self.config = config

    def _build(self, path: str, index_key: str) -> str:
        return (
            f"{self.config.endpoint_base}{path}/"
            f"{self.config.api_key}/{self.config.app_key}/{index_key}"
        )

    @singledispatchmethod
    def url_for(self, operation) -> str:
        """Get the request URL for an operation."""
        raise TypeError(f"Unsupported operation: {operation!r}")

    @url_for.register
    def _(self, operation: Load) -> str:
        return self._build(ServiceConstants.LOAD_PATH, operation.index_key)

    @url_for.register
    def _(self, operation: Save) -> str:
        return self._build(ServiceConstants.SAVE_PATH, operation.index_key)
