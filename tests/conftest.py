import uuid
from typing import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config.relay_settings import RelaySettings
from tests.helpers import MockWebhook, TEST_WEBHOOK_URL


@pytest.fixture
def relay_settings() -> RelaySettings:
    """Settings pointing at a webhook that only exists in the mock transport"""
    return RelaySettings(webhook_url=TEST_WEBHOOK_URL)


@pytest.fixture
def mock_webhook() -> MockWebhook:
    return MockWebhook()


@pytest.fixture
def relay_app(relay_settings: RelaySettings, mock_webhook: MockWebhook) -> FastAPI:
    """Relay app whose outbound client talks to the mock webhook"""
    from src.app import create_app
    from src.routers.command_relay import get_http_client

    app = create_app(relay_settings)

    async def mock_get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
        async with mock_webhook.client() as client:
            yield client

    app.dependency_overrides[get_http_client] = mock_get_http_client
    return app


@pytest.fixture
def client(relay_app: FastAPI) -> TestClient:
    return TestClient(relay_app)


@pytest.fixture
def unique_request_id() -> str:
    """Generate a unique request identifier for command tests"""
    return str(uuid.uuid4())
