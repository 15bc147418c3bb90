"""
JSON-RPC Forwarder

Sends one JSON-RPC 2.0 call per forward() to the remote Motley endpoint
and maps the outcome to a result or a ForwardError. Single attempt, no
retries; the caller decides how to degrade.
"""

import asyncio
import json
import uuid
from typing import Any, Optional

import httpx

from motley_mcp.configs import LOG_PREVIEW_CHARS, BridgeConfig, get_logger
from motley_mcp.exceptions import (
    ForwardTimeoutError,
    MalformedResponseError,
    RemoteError,
    RemoteHTTPStatusError,
    UnreachableError,
)

logger = get_logger("forwarder")


def _preview(value: Any) -> str:
    """Compact JSON rendering of value, truncated for the log."""
    try:
        text = json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        text = repr(value)
    return text[:LOG_PREVIEW_CHARS]


def build_envelope(method: str, params: dict) -> dict:
    """Build a JSON-RPC 2.0 request with a fresh correlation id."""
    return {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": str(uuid.uuid4()),
    }


def _error_message(error: Any) -> str:
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str):
        return error
    return json.dumps(error)


class Forwarder:
    """
    Async JSON-RPC client for the remote Motley endpoint.

    Usage:
        async with Forwarder(config) as forwarder:
            tools = await forwarder.forward("tools/list", {})
    """

    def __init__(self, config: BridgeConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout)

    async def __aenter__(self) -> "Forwarder":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this forwarder created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def forward(self, method: str, params: Optional[dict] = None) -> Any:
        """
        Forward a JSON-RPC call and return the remote result.

        Args:
            method: JSON-RPC method name (e.g. "tools/list")
            params: Method parameters

        Returns:
            The remote "result" value, unmodified.

        Raises:
            ForwardTimeoutError: No response within config.timeout
            RemoteHTTPStatusError: Non-2xx HTTP status
            MalformedResponseError: Body is not a JSON-RPC object
            RemoteError: Remote returned a JSON-RPC error
            UnreachableError: Connection-level failure
        """
        if params is None:
            params = {}
        envelope = build_envelope(method, params)

        logger.info(f"Forwarding request: {method} {_preview(params)}")

        try:
            response = await asyncio.wait_for(
                self._client.post(
                    self.config.api_url,
                    json=envelope,
                    headers=self.config.auth_headers,
                    follow_redirects=True,
                ),
                timeout=self.config.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"Timed out after {self.config.timeout:g}s: {method}")
            raise ForwardTimeoutError(method, self.config.timeout)
        except httpx.HTTPError as e:
            logger.warning(f"Remote unreachable for {method}: {e}")
            raise UnreachableError(f"Failed to reach remote endpoint: {e}", method=method)

        if not response.is_success:
            body = response.text
            logger.warning(f"HTTP {response.status_code} for {method}: {body[:LOG_PREVIEW_CHARS]}")
            raise RemoteHTTPStatusError(response.status_code, body, method=method)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON in response: {e}", method=method)

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON-RPC object, got {type(data).__name__}", method=method
            )

        error = data.get("error")
        if error:
            message = _error_message(error)
            logger.warning(f"Remote error for {method}: {message[:LOG_PREVIEW_CHARS]}")
            raise RemoteError(message, method=method, error=error)

        if "result" not in data:
            raise MalformedResponseError("Response has neither result nor error", method=method)

        result = data["result"]
        logger.info(f"Response received for {method}: {_preview(result)}")
        return result
