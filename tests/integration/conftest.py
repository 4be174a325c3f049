"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_TWIST_NETWORK_TESTS=1 and a token is set
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TWIST_NETWORK_TESTS") != "1" or not os.environ.get("TWIST_API_TOKEN"),
    reason="Requires network access. Set RUN_TWIST_NETWORK_TESTS=1 and TWIST_API_TOKEN to run",
)


@pytest.fixture
def api_token() -> str:
    return os.environ["TWIST_API_TOKEN"]
