"""
Shared pytest fixtures for CrawlKit tests.

Provides reusable fixtures for:
- Global state isolation (metrics and logging)
- Stub transports that record requests and return canned responses
- Ready-to-use clients wired to those transports
"""

import asyncio
import logging
import tempfile
from pathlib import Path
from typing import Any, Generator

import httpx
import pytest

from crawlkit.client import CrawlKit
from crawlkit.utils.logging import ROOT_LOGGER_NAME
from crawlkit.utils.metrics import Metrics

TEST_API_KEY = "ck_test_key_123"
TEST_BASE_URL = "https://api.test.example.sh"


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """
    Give each test fresh metrics and an unconfigured ``crawlkit`` logger.

    This ensures tests are isolated and don't share counters or handlers.
    """
    monkeypatch.setattr(Metrics, "_instance", None)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class StubTransport:
    """
    Transport returning a fixed response and recording every request.

    Example:
        >>> transport = StubTransport(200, {"success": True, "data": {}})
        >>> client = CrawlKit("ck_key", transport=transport)
    """

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, request=request)
        return httpx.Response(self.status_code, json=self.json_body, request=request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class HangingTransport:
    """Transport that never answers; records whether it was cancelled."""

    def __init__(self) -> None:
        self.started = False
        self.cancelled = False

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.started = True
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        raise AssertionError("unreachable")


def success_body(data: Any) -> dict[str, Any]:
    """Build a success envelope."""
    return {"success": True, "data": data}


def failure_body(
    code: str,
    message: str,
    credits_refunded: Any = None,
    credits_remaining: Any = None,
) -> dict[str, Any]:
    """Build a failure envelope, omitting credit fields that are None."""
    body: dict[str, Any] = {
        "success": False,
        "error": {"code": code, "message": message},
    }
    if credits_refunded is not None:
        body["creditsRefunded"] = credits_refunded
    if credits_remaining is not None:
        body["creditsRemaining"] = credits_remaining
    return body


@pytest.fixture
def ok_transport() -> StubTransport:
    """Transport answering every call with an empty success envelope."""
    return StubTransport(200, success_body({}))


@pytest.fixture
def client(ok_transport: StubTransport) -> CrawlKit:
    """Provide a client wired to ok_transport."""
    return CrawlKit(TEST_API_KEY, base_url=TEST_BASE_URL, transport=ok_transport)
