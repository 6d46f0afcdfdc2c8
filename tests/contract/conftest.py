"""Test fixtures for contract testing."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from src.config.relay_settings import RelaySettings


@pytest.fixture
def test_client(relay_settings: RelaySettings) -> TestClient:
    """FastAPI test client for contract testing."""
    from src.app import create_app

    return TestClient(create_app(relay_settings))


@pytest.fixture
def openapi_schema(test_client: TestClient) -> Dict[str, Any]:
    """Fetch current OpenAPI schema from the API."""
    response = test_client.get("/openapi.json")
    assert response.status_code == 200, "Failed to fetch OpenAPI schema"
    return response.json()
