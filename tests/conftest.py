"""
Test configuration and fixtures for crawler tests
"""

import io
import os

# Set ENVIRONMENT before importing any modules that read configuration
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from unittest.mock import AsyncMock, MagicMock

from linkcrawl.core.config import CrawlConfig


def _make_response(
    body: bytes = b"",
    status: int = 200,
    content_type: str = "text/html",
    chunk_size: int = 0,
):
    """Build a mocked aiohttp response; chunk_size > 0 caps bytes per content read"""
    response = AsyncMock()
    response.status = status
    response.headers = {"Content-Type": content_type} if content_type else {}
    stream = io.BytesIO(body)

    def read(n=-1):
        if chunk_size and (n < 0 or n > chunk_size):
            n = chunk_size
        return stream.read(n)

    response.content = MagicMock()
    response.content.read = AsyncMock(side_effect=read)
    response.body_stream = stream
    return response


def _make_session(pages: dict):
    """
    Mock aiohttp ClientSession serving `pages`.

    Values may be a str/bytes body, a (status, body, content_type) tuple,
    or an exception instance raised when the request is entered.
    Unknown addresses answer 404.
    """
    session = MagicMock()

    def get(address, **kwargs):
        page = pages.get(address)
        ctx = MagicMock()
        if isinstance(page, BaseException):
            ctx.__aenter__.side_effect = page
        elif isinstance(page, tuple):
            status, body, content_type = page
            if isinstance(body, str):
                body = body.encode()
            ctx.__aenter__.return_value = _make_response(body, status, content_type)
        elif page is None:
            ctx.__aenter__.return_value = _make_response(b"", 404)
        else:
            if isinstance(page, str):
                page = page.encode()
            ctx.__aenter__.return_value = _make_response(page)
        ctx.__aexit__.return_value = False
        return ctx

    session.get.side_effect = get
    return session


@pytest.fixture
def crawl_config():
    """Crawl config independent of the environment"""
    return CrawlConfig(
        scheme="http",
        max_depth=5,
        timeout_sec=5.0,
        concurrency=4,
        user_agent="linkcrawl-test",
        max_response_bytes=1024 * 1024,
        follow_redirects=True,
    )


@pytest.fixture
def session_factory():
    """Factory for mocked aiohttp sessions (see _make_session)"""
    return _make_session


@pytest.fixture
def clean_env(monkeypatch):
    """Remove crawler environment variables to test defaults"""
    env_vars = [
        "CRAWL_SCHEME",
        "CRAWL_MAX_DEPTH",
        "CRAWL_TIMEOUT_SEC",
        "CRAWL_CONCURRENCY",
        "CRAWL_USER_AGENT",
        "CRAWL_MAX_RESPONSE_BYTES",
        "CRAWL_FOLLOW_REDIRECTS",
        "LOG_LEVEL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def response_factory():
    """Factory for mocked aiohttp responses (see _make_response)"""
    return _make_response
