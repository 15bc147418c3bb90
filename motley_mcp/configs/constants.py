"""
Motley Constants

Static configuration values: server identity, environment variable
names, timeouts and log preview limits.
"""

# --- Server Identity ---

SERVER_NAME = "motley"
SERVER_VERSION = "0.1.0"

# --- Environment Variables ---

ENV_API_URL = "MOTLEY_API_URL"
ENV_API_KEY = "MOTLEY_API_KEY"
ENV_DEBUG = "MOTLEY_DEBUG"
ENV_LOG_FILE = "MOTLEY_LOG_FILE"

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    "forward_request": 30,  # Whole round trip: connect + transfer + remote processing
    "shutdown_grace": 5,  # Wait for the stdio transport to close after a signal
}

# --- Diagnostics ---

LOG_PREVIEW_CHARS = 200  # Max chars of params/result echoed to the log


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS["forward_request"]
    return TIMEOUTS.get(key, default)
