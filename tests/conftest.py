"""Shared fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client bound to a fresh application holding the seed inventory."""
    with TestClient(create_app()) as test_client:
        yield test_client
