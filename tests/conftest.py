# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def block_network() -> Generator[None, None, None]:
    """Fail any transport call a test forgot to mock."""
    with patch(
        "src.api.api_client.curl_requests.request",
        side_effect=RuntimeError("network access in tests"),
    ):
        yield


@pytest.fixture(autouse=True)
def reset_default_service() -> Generator[None, None, None]:
    """Drop the shared action-layer service between tests."""
    with patch("src.actions.product_actions._default_service", None):
        yield
