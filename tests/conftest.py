"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from calculator_service.main import app


@pytest.fixture
def client():
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
