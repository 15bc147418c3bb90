"""
Motley MCP - local stdio passthrough to a remote Motley endpoint.

Exposes MCP tools/list and tools/call over stdin/stdout and forwards each
request as a JSON-RPC 2.0 call to a single HTTP endpoint.
"""

__version__ = "0.1.0"
