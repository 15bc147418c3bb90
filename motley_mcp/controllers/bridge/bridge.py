"""
MCP Stdio-to-HTTP Bridge

Serves MCP over stdin/stdout with the official SDK and relays tools/list
and tools/call to the remote Motley endpoint as JSON-RPC 2.0 calls.

Environment variables:
    MOTLEY_API_URL: The remote Motley MCP endpoint URL (required)
    MOTLEY_API_KEY: The API key for Bearer token authentication (required)
    MOTLEY_DEBUG: Enable debug logging (default: false)
    MOTLEY_LOG_FILE: Also log to this file (default: stderr only)
"""

import argparse
import asyncio
import logging
import os
import signal
import sys
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from motley_mcp.configs import (
    SERVER_NAME,
    SERVER_VERSION,
    BridgeConfig,
    get_logger,
    get_timeout,
    setup_logging,
)
from motley_mcp.controllers.bridge import handlers
from motley_mcp.controllers.bridge.forwarder import Forwarder
from motley_mcp.exceptions import MalformedResponseError, MissingConfigError

logger = get_logger("bridge")

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _as_list_tools_result(result: Any) -> types.ListToolsResult:
    # Some remotes answer tools/list with the bare tool array
    if isinstance(result, list):
        result = {"tools": result}
    try:
        return types.ListToolsResult.model_validate(result)
    except ValidationError as e:
        error = MalformedResponseError(f"Unexpected tools/list result: {e}", method="tools/list")
        return types.ListToolsResult.model_validate(handlers.empty_tool_list(error))


def _as_call_tool_result(result: Any) -> types.CallToolResult:
    try:
        return types.CallToolResult.model_validate(result)
    except ValidationError as e:
        error = MalformedResponseError(f"Unexpected tools/call result: {e}", method="tools/call")
        return types.CallToolResult.model_validate(handlers.tool_error_result(error))


def create_server(forwarder: handlers.SupportsForward) -> Server:
    """
    Create the MCP server and register the two forwarding handlers.

    Handlers are installed straight into request_handlers so the remote
    result reaches the client as-is, without the SDK decorators'
    content wrapping.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    async def handle_list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        result = await handlers.list_tools(forwarder)
        return types.ServerResult(_as_list_tools_result(result))

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await handlers.call_tool(
            forwarder,
            request.params.name,
            request.params.arguments,
        )
        return types.ServerResult(_as_call_tool_result(result))

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def serve_stdio(server: Server) -> None:
    """Run the MCP session over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server connected and ready")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def _force_exit() -> None:
    logger.warning("Transport did not close in time, exiting")
    logging.shutdown()
    os._exit(0)


async def run(config: BridgeConfig) -> None:
    """
    Serve until stdin closes or a shutdown signal arrives.

    On SIGINT/SIGTERM the serving task is cancelled, which closes the
    stdio transport. In-flight forwards are not awaited.
    """
    loop = asyncio.get_running_loop()
    stopping = asyncio.Event()
    timers: list[asyncio.TimerHandle] = []

    async with Forwarder(config) as forwarder:
        server = create_server(forwarder)
        serving = asyncio.create_task(serve_stdio(server))

        def request_shutdown() -> None:
            if stopping.is_set():
                return
            logger.info("Shutting down...")
            stopping.set()
            serving.cancel()
            # A blocked stdin read can hold up cancellation
            timers.append(loop.call_later(get_timeout("shutdown_grace"), _force_exit))

        installed = []
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(sig, request_shutdown)
                installed.append(sig)
            except (NotImplementedError, RuntimeError):
                # Windows: fall back to KeyboardInterrupt
                pass

        try:
            await serving
        except asyncio.CancelledError:
            if not stopping.is_set():
                raise
        finally:
            for timer in timers:
                timer.cancel()
            for sig in installed:
                loop.remove_signal_handler(sig)


def main(argv: Optional[list[str]] = None) -> None:
    """Main bridge entry point."""
    parser = argparse.ArgumentParser(description="Motley MCP passthrough server")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (overrides MOTLEY_DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file (overrides MOTLEY_LOG_FILE)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    args = parser.parse_args(argv)

    setup_logging(debug=True if args.debug else None, log_file=args.log_file)

    # Fail fast: never serve partially configured
    try:
        config = BridgeConfig.from_env()
    except MissingConfigError as e:
        logger.error(f"Error: {e.message}")
        sys.exit(1)

    logger.info("Starting Motley MCP passthrough server")
    logger.info(f"Remote endpoint: {config.api_url}")
    logger.info("API key configured: Yes (redacted)")

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.info("Bridge interrupted")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
