"""
Pytest Configuration and Fixtures.
Shared test fixtures for all test modules.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from evernote_mcp.core.config import EvernoteSettings
from evernote_mcp.gateways.base import GatewayConfig
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway
from evernote_mcp.mcp_server.tools import ToolDispatcher

TEST_API_KEY = "test-api-key"
TEST_API_URL = "https://api.evernote.com"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the same JSON payload."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


@pytest.fixture
def settings():
    """Settings with a configured API key, independent of the environment."""
    return EvernoteSettings(
        _env_file=None,
        EVERNOTE_API_KEY=TEST_API_KEY,
        EVERNOTE_API_URL=TEST_API_URL,
    )


@pytest.fixture
def make_gateway():
    """Build a gateway bound to a recording transport."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        api_key: str = TEST_API_KEY,
    ) -> tuple[EvernoteGateway, RecordingTransport]:
        transport = RecordingTransport(handler)
        gateway = EvernoteGateway(
            config=GatewayConfig(base_url=TEST_API_URL, api_key=api_key),
            transport=transport,
        )
        return gateway, transport

    return _make


@pytest.fixture
def make_dispatcher(make_gateway):
    """Build a dispatcher over a recording transport."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response] = json_response({}),
        api_key: str = TEST_API_KEY,
    ) -> tuple[ToolDispatcher, RecordingTransport]:
        gateway, transport = make_gateway(handler, api_key=api_key)
        return ToolDispatcher(gateway), transport

    return _make


@pytest.fixture
def respond_json():
    """Factory for handlers answering with a fixed JSON payload."""
    return json_response


# Configure pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )