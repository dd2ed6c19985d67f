"""
HTTP client abstraction for separating HTTP concerns from the storage client.

Wraps a requests.Session configured for one attempt per request. Callers get
the raw requests.Response back; status handling is up to them.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter


class HttpClient:
    """Thin synchronous HTTP client over a shared requests.Session."""

    def __init__(self, session: Optional[requests.Session] = None):
        """Initialize HTTP client.

        Args:
            session: Optional existing session to use
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session that never retries."""
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Perform GET request.

        Args:
            url: Absolute request URL
            headers: Additional headers
            timeout: Request timeout in seconds, None for no timeout

        Returns:
            Response object
        """
        response = self.session.get(url, headers=headers, timeout=timeout)

        self._log_response(response)
        return response

    def post(
        self,
        url: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Perform POST request.

        Args:
            url: Absolute request URL
            data: Request body, encoded by requests' default rules
            headers: Additional headers
            timeout: Request timeout in seconds, None for no timeout

        Returns:
            Response object
        """
        response = self.session.post(url, data=data, headers=headers, timeout=timeout)

        self._log_response(response)
        return response

    def _log_response(self, response: requests.Response) -> None:
        """Log response details."""
        self.logger.debug(
            f"Response: {response.status_code} - "
            f"{len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
