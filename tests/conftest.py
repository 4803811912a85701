"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from forwarded.config import Config
from forwarded.lib.common.logging_config import setup_logging
from forwarded.web_app import create_app


RFC_EXAMPLE = "for=192.0.2.43,for=198.51.100.17;by=203.0.113.60;proto=http;host=example.com"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def rfc_headers():
    """Headers carrying the RFC 7239 example Forwarded value."""
    return {"Forwarded": RFC_EXAMPLE}


@pytest.fixture
def config():
    """Default test configuration."""
    return Config(_env_file=None)


@pytest.fixture
def app(config, logger):
    """Create test FastAPI app."""
    return create_app(config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
