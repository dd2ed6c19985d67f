"""Shared test helpers for building transport responses and recording continuations."""

import threading
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

ENDPOINT = "https://stg001.notlocalstorage.io/api/data/"


def make_response(
    status_code: int = 200,
    body: bytes = b"",
    content_type: Optional[str] = "application/json",
    reason: str = "OK",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.reason = reason
    response.encoding = "utf-8"
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


class CallbackRecorder:
    """Collects continuation calls and lets a test wait for the first one."""

    def __init__(self):
        self.successes = []
        self.failures = []
        self._fired = threading.Event()

    def on_success(self, body):
        self.successes.append(body)
        self._fired.set()

    def on_failure(self, failure):
        self.failures.append(failure)
        self._fired.set()

    def wait(self, timeout: float = 5.0):
        assert self._fired.wait(timeout), "no continuation fired"

    @property
    def calls(self) -> int:
        return len(self.successes) + len(self.failures)


class RecordingAdapter(HTTPAdapter):
    """Transport adapter that keeps every prepared request and answers locally."""

    def __init__(self, body: bytes = b"{}"):
        super().__init__(max_retries=0)
        self.body = body
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = make_response(body=self.body)
        response.request = request
        response.url = request.url
        return response
