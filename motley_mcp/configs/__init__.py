"""
Motley Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from motley_mcp.configs.logging import get_logger, setup_logging

# Constants
from motley_mcp.configs.constants import (
    LOG_PREVIEW_CHARS,
    SERVER_NAME,
    SERVER_VERSION,
    TIMEOUTS,
    get_timeout,
)

# Settings
from motley_mcp.configs.settings import BridgeConfig

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "LOG_PREVIEW_CHARS",
    "SERVER_NAME",
    "SERVER_VERSION",
    "TIMEOUTS",
    "get_timeout",
    # Settings
    "BridgeConfig",
]
