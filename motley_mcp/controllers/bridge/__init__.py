"""
MCP Stdio-to-HTTP Bridge

Serves MCP over stdin/stdout and forwards tool requests to the remote
Motley endpoint as JSON-RPC 2.0 calls.
"""

from motley_mcp.controllers.bridge.bridge import create_server, main, run
from motley_mcp.controllers.bridge.forwarder import Forwarder

__all__ = ["Forwarder", "create_server", "main", "run"]
