"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from twitter.api import Client

# Skip all integration tests unless RUN_TWITTER_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TWITTER_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TWITTER_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def client():
    """Client authenticated with TWITTER_BEARER_TOKEN."""
    token = os.environ.get("TWITTER_BEARER_TOKEN")
    if not token:
        pytest.skip("TWITTER_BEARER_TOKEN is not set")
    async with Client(token) as api:
        yield api
