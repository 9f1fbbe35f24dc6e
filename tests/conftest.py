from __future__ import annotations

import pytest

from respec import StaticEndpoint


@pytest.fixture
def endpoint() -> StaticEndpoint:
    """Create an endpoint with a well-formed absolute URL."""
    return StaticEndpoint("https://api.example.com/items", "list items")


@pytest.fixture
def upload_endpoint() -> StaticEndpoint:
    """Create an endpoint used for binary uploads."""
    return StaticEndpoint("https://api.example.com/me/avatar", "upload avatar")
