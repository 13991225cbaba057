"""
Pytest configuration and shared fixtures for crawlclient tests.
"""

import threading
from pathlib import Path
import tempfile
from typing import Dict, List, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def build_response(
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    url: str = "https://example.com/",
    content: bytes = b"",
    next_request: Optional[requests.PreparedRequest] = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    response._content = content
    response.reason = {200: "OK", 301: "Moved Permanently", 302: "Found", 401: "Unauthorized"}.get(
        status_code, ""
    )
    response._next = next_request
    return response


class FakeExecutor:
    """Executor test double that replays canned outcomes and records requests.

    Each outcome is either a requests.Response to return or an exception to raise.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.sent: List[requests.PreparedRequest] = []
        self._lock = threading.Lock()

    def send(self, request, **kwargs):
        with self._lock:
            self.sent.append(request)
            outcome = self.outcomes[min(len(self.sent), len(self.outcomes)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class SettableExecutor(FakeExecutor):
    """Executor test double that also accepts a redirect policy."""

    def __init__(self, *outcomes):
        super().__init__(*outcomes)
        self.policy = None

    def set_check_redirect(self, policy):
        self.policy = policy


class CapturingSink:
    """Diagnostic sink that keeps every message it receives."""

    def __init__(self):
        self.messages: List[tuple] = []

    def info(self, msg):
        self.messages.append(("info", msg))

    def error(self, msg):
        self.messages.append(("error", msg))

    def levels(self) -> List[str]:
        return [level for level, _ in self.messages]


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def sink():
    return CapturingSink()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """Path for a temporary config file (not created)."""
    return temp_dir / "crawlclient" / "config.toml"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CRAWLCLIENT_* variables from the developer's shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("CRAWLCLIENT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tempfile.gettempdir())


@pytest.fixture
def fake_executor():
    """Factory for FakeExecutor instances."""
    return FakeExecutor


@pytest.fixture
def settable_executor():
    """Factory for executors that support redirect policies."""
    return SettableExecutor
