"""Shared pytest fixtures and test doubles for circlebox tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from circlebox.infrastructure.client import ContestClient

API_URL = "http://contest.test/api"
API_KEY = "test-key"


class FakeResponse:
    """Stand-in for ``requests.Response`` used as a context manager."""

    def __init__(self, body: bytes, status_code: int = 200) -> None:
        self.content = body
        self.status_code = status_code
        self.closed = False

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True


class FakeSession:
    """In-memory ``requests.Session`` replaying queued responses in order.

    Every ``post`` call is recorded in :attr:`calls` with the decoded
    request envelope.
    """

    def __init__(self) -> None:
        self._queue: list[FakeResponse | BaseException] = []
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse] = []
        self.closed = False

    def reply(self, result: Any = None, error: dict[str, Any] | None = None) -> FakeSession:
        return self.reply_raw(json.dumps({"result": result, "error": error}).encode())

    def reply_raw(self, body: bytes, status_code: int = 200) -> FakeSession:
        self._queue.append(FakeResponse(body, status_code))
        return self

    def fail(self, exc: BaseException) -> FakeSession:
        self._queue.append(exc)
        return self

    def post(self, url: str, json: Any = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if not self._queue:
            raise AssertionError(f"Unexpected POST to {url}: {json!r}")
        item = self._queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        self.responses.append(item)
        return item

    def close(self) -> None:
        self.closed = True

    @property
    def methods(self) -> list[str]:
        return [call["json"]["method"] for call in self.calls]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("circlebox")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> ContestClient:
    """ContestClient wired to the in-memory session."""
    return ContestClient(API_URL, API_KEY, session=session)  # type: ignore[arg-type]


@pytest.fixture
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no circlebox env overrides."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "CIRCLEBOX_CONFIG",
        "CIRCLEBOX_API__KEY",
        "CIRCLEBOX_API__URL",
        "CIRCLEBOX_API__TIMEOUT",
        "CIRCLEBOX_VERBOSE",
        "CIRCLEBOX_QUIET",
        "CIRCLEBOX_JSON_OUTPUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def api_session(_clean_env: None, monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    """Configure an API key and route the CLI's HTTP session to a FakeSession."""
    fake = FakeSession()
    monkeypatch.setenv("CIRCLEBOX_API__KEY", API_KEY)
    monkeypatch.setenv("CIRCLEBOX_API__URL", API_URL)
    monkeypatch.setattr("circlebox.infrastructure.client.requests.Session", lambda: fake)
    return fake
