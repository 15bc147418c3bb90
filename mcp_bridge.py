#!/usr/bin/env python3
"""
Motley MCP Passthrough Server

Local stdio MCP server that forwards tools/list and tools/call to the
remote Motley HTTP endpoint using JSON-RPC 2.0.

Environment variables:
- MOTLEY_API_URL: The remote Motley MCP endpoint URL
- MOTLEY_API_KEY: The API key for Bearer token authentication
"""

from motley_mcp.controllers.bridge import main

if __name__ == "__main__":
    main()
