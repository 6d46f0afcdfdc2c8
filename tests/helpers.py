"""Shared test doubles for the relay's outbound webhook."""

import json
from typing import Any, List, Optional

import httpx

TEST_WEBHOOK_URL = "https://script.example.test/macros/s/test-deployment/exec"


class MockWebhook:
    """Stand-in for the webhook, served through httpx.MockTransport"""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.response_json: Any = {"result": "ok"}
        self.raw_body: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.response_json)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def sent_json(self, index: int = 0) -> Any:
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
