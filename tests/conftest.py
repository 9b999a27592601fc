"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Network access is never needed: every HTTP exchange goes through
httpx.MockTransport, and the transport records each request it sees.
"""

import logging
from collections.abc import Callable

import httpx
import pytest
from click.testing import CliRunner

from httpreq.request.executor import HttpExecutor


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """
    Undo setup_logging() after each test.

    The CLI binds a stderr handler to whatever stream CliRunner provided;
    it must not outlive the test that created it.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


# =============================================================================
# Transport Fixtures
# =============================================================================


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """
    Build a RecordingTransport answering with a fixed response.

    Usage:
        def test_get(make_transport):
            transport = make_transport(status_code=201, content=b"created")
    """

    def _make(
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> RecordingTransport:
        return RecordingTransport(
            lambda request: httpx.Response(status_code, content=content, headers=headers),
        )

    return _make


@pytest.fixture
def recording_transport(make_transport) -> RecordingTransport:
    """Transport answering 200 with a small text body."""
    return make_transport(status_code=200, content=b"ok")


@pytest.fixture
def executor(recording_transport: RecordingTransport) -> HttpExecutor:
    """HttpExecutor wired to recording_transport."""
    return HttpExecutor(transport=recording_transport)


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def body_file(tmp_path):
    """
    Write a request body file and return its path.

    The bytes include a non-UTF-8 byte and CRLF so byte-exact handling is visible.
    """
    path = tmp_path / "body.bin"
    path.write_bytes(b'{"name": "caf\xe9"}\r\n\x00tail')
    return path
