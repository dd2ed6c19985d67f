"""
Pytest configuration and shared fixtures for NLS client tests.
"""

from unittest.mock import Mock

import pytest
import requests

from helpers import CallbackRecorder, make_response
from nls import Client
from nls.http import HttpClient


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test without NLS_* variables and away from any .env file."""
    for name in ("NLS_API_KEY", "NLS_APP_KEY", "NLS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_session():
    """A requests.Session double; tests set get/post return values."""
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(body=b"{}")
    session.post.return_value = make_response(body=b"{}")
    return session


@pytest.fixture
def client(mock_session):
    """A client with credentials a1/b1 whose transport is mock_session."""
    nls_client = Client(http_client=HttpClient(session=mock_session))
    nls_client.init("a1", "b1")
    yield nls_client
    nls_client.close()


@pytest.fixture
def recorder():
    return CallbackRecorder()
