"""
Motley Logging Configuration

Configures logging based on environment variables:
- MOTLEY_DEBUG: Enable debug logging (default: false)
- MOTLEY_LOG_FILE: Optional log file path (default: stderr only)

stdout carries the MCP protocol, so no handler ever writes there.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from motley_mcp.configs.constants import ENV_DEBUG, ENV_LOG_FILE


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for Motley.

    Args:
        debug: Enable debug level. Defaults to MOTLEY_DEBUG env var.
        log_file: Log file path. Defaults to MOTLEY_LOG_FILE env var;
                  when unset, logs only go to stderr.

    Returns:
        Root logger for motley
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get(ENV_DEBUG, "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get(ENV_LOG_FILE) or None

    # Set log level
    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Get root motley logger
    logger = logging.getLogger("motley")
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_path}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "bridge", "forwarder")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"motley.{component}")
