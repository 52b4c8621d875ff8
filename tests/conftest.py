"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from kutt_client.client import KuttClient
from kutt_client.common.logging_config import setup_logging


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def link_payload():
    """Success body as returned by POST /api/v2/links."""
    return {
        "id": "b2d5e6f1-6c3f-4c5e-9a51-0f3a2f1c7a10",
        "target": "https://example.com/very/long/path",
        "password": False,
        "banned": False,
        "address": "abc123",
        "link": "https://kutt.it/abc123",
        "domain": None,
        "visit_count": 3,
        "created_at": "2024-01-01T12:00:00.000Z",
        "updated_at": "2024-01-02T08:30:15.500Z",
    }


class RecordingServer:
    """Fake Kutt server backed by httpx.MockTransport.

    Every request is recorded; responses are served from a queue (the last
    one is repeated when the queue runs dry).
    """

    def __init__(self):
        self.requests = []
        self.responses = []

    def respond(self, status_code: int, body) -> None:
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        self.responses.append((status_code, body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self.responses) > 1:
            status_code, body = self.responses.pop(0)
        else:
            status_code, body = self.responses[0]
        return httpx.Response(status_code, text=body)

    def sent_json(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def server():
    """Fake server recording requests."""
    return RecordingServer()


@pytest.fixture
async def transport(server):
    """httpx.AsyncClient wired to the fake server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(server.handler)) as client:
        yield client


@pytest.fixture
def kutt(transport, logger):
    """Client against the fake server."""
    return KuttClient(
        api_key="test-key",
        server="https://kutt.example.com",
        transport=transport,
        logger=logger,
    )
