"""
Shared fixtures for the Mentortools MCP tests.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from mentortools_mcp.library.api_client import MentortoolsClient


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> requests.Response:
    """Build a real ``requests.Response`` carrying ``body`` as JSON (or raw ``text``)."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://app.mentortools.com/public_api/test"
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


def envelope(result: Any = None, done: bool = True, error: Optional[str] = None) -> dict:
    body = {"done": done, "result": result}
    if error is not None:
        body["error"] = error
    return body


@pytest.fixture
def client():
    """A client with a real session whose transport is never reached."""
    api_client = MentortoolsClient("test-key")
    yield api_client
    api_client.close()


@pytest.fixture
def mock_client():
    """A stand-in client for handler tests; set ``execute.return_value`` per test."""
    return MagicMock(spec=MentortoolsClient)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell and .env out of the tests."""
    for name in ("MENTORTOOLS_API_KEY", "MENTORTOOLS_BASE_URL", "TRANSPORT", "PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
