"""
Tool request handlers.

Each handler forwards one MCP request kind and owns its own policy for
forwarding failures:

- tools/list degrades to an empty tool list, so a remote outage leaves the
  agent with no tools instead of a broken session.
- tools/call reports the failure in-band as an error result.
"""

from typing import Any, Optional, Protocol

from motley_mcp.configs import get_logger
from motley_mcp.exceptions import ForwardError

logger = get_logger("handlers")


class SupportsForward(Protocol):
    async def forward(self, method: str, params: Optional[dict] = None) -> Any: ...


def empty_tool_list(error: ForwardError) -> dict:
    """Fallback for a failed tools/list."""
    logger.error(f"Error listing tools: {error.message}")
    return {"tools": []}


def tool_error_result(error: ForwardError) -> dict:
    """Fallback for a failed tools/call: a successful response flagged isError."""
    logger.error(f"Error calling tool: {error.message}")
    return {
        "content": [
            {
                "type": "text",
                "text": f"Error: {error.message}",
            }
        ],
        "isError": True,
    }


async def list_tools(forwarder: SupportsForward) -> Any:
    """Forward tools/list and return the remote result verbatim."""
    try:
        return await forwarder.forward("tools/list", {})
    except ForwardError as e:
        return empty_tool_list(e)


async def call_tool(
    forwarder: SupportsForward,
    name: str,
    arguments: Optional[dict] = None,
) -> Any:
    """Forward tools/call and return the remote result verbatim."""
    try:
        return await forwarder.forward(
            "tools/call",
            {
                "name": name,
                "arguments": arguments or {},
            },
        )
    except ForwardError as e:
        return tool_error_result(e)
