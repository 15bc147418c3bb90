"""
Pytest fixtures for Motley tests.
"""

import json
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Callable

import httpx
import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from motley_mcp.configs import BridgeConfig  # noqa: E402
from motley_mcp.controllers.bridge.forwarder import Forwarder  # noqa: E402

API_URL = "https://motley.example.test/mcp"
API_KEY = "test-key-123"


@pytest.fixture(autouse=True)
def reset_motley_logger():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("motley")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def config() -> BridgeConfig:
    """Bridge configuration pointing at a fake endpoint."""
    return BridgeConfig(api_url=API_URL, api_key=API_KEY)


@pytest.fixture
def forwarder_for(config: BridgeConfig) -> Callable:
    """
    Build a Forwarder whose remote endpoint is the given handler.

    Usage:
        async with forwarder_for(handler) as forwarder:
            await forwarder.forward("tools/list", {})
    """

    @asynccontextmanager
    async def _make(handler, cfg: BridgeConfig | None = None) -> AsyncIterator[Forwarder]:
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            yield Forwarder(cfg or config, http_client=client)

    return _make


def rpc_result(request: httpx.Request, result: Any) -> httpx.Response:
    """JSON-RPC success response correlated with the incoming request."""
    envelope = json.loads(request.content)
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": envelope["id"], "result": result})


def rpc_error(request: httpx.Request, error: Any, **extra: Any) -> httpx.Response:
    """JSON-RPC error response correlated with the incoming request."""
    envelope = json.loads(request.content)
    body = {"jsonrpc": "2.0", "id": envelope["id"], "error": error}
    body.update(extra)
    return httpx.Response(200, json=body)


class FakeForwarder:
    """Stand-in for Forwarder that records calls and returns or raises."""

    def __init__(self, result: Any = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    async def forward(self, method: str, params: dict | None = None) -> Any:
        self.calls.append((method, params))
        if self.error is not None:
            raise self.error
        return self.result
