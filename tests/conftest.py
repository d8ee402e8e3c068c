"""Pytest fixtures for test suite."""

import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import requests

from kb_admin.core.client import ApiClient
from kb_admin.core.config import get_settings

BASE_URL = "http://api.test"


def build_response(status_code: int, body: Any = None) -> requests.Response:
    """A real ``requests.Response`` carrying ``body`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    response.reason = "OK" if status_code < 400 else "Error"
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Settings come from defaults only, re-read for every test."""
    for name in (
        "API_URL",
        "REQUEST_TIMEOUT",
        "ROWS_PER_PAGE",
        "SEARCH_DEBOUNCE_SECONDS",
        "LOG_LEVEL",
        "LOG_FILE",
        "JOB_POLL_INTERVAL",
        "JOB_POLL_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for canned HTTP responses."""
    return build_response


@pytest.fixture
def session() -> MagicMock:
    """Session double; set ``session.request`` return values per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> ApiClient:
    """Client with a bearer token over the fake session."""
    return ApiClient(base_url=BASE_URL, token="test-token", timeout=5, session=session)


@pytest.fixture
def respond(session: MagicMock) -> Callable[..., None]:
    """Queue responses: ``respond((200, {...}), (204, None))``."""

    def queue(*responses: tuple[int, Any]) -> None:
        session.request.side_effect = [build_response(status, body) for status, body in responses]

    return queue


@pytest.fixture
def last_request(session: MagicMock) -> Callable[[], tuple[str, str, dict]]:
    """Method, URL and keyword arguments of the most recent request."""

    def read() -> tuple[str, str, dict]:
        args, kwargs = session.request.call_args
        return args[0], args[1], kwargs

    return read
