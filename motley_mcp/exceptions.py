"""
Motley Exception Hierarchy

Centralized exception classes for the passthrough server.
All Motley-specific exceptions inherit from MotleyError.

Usage:
    from motley_mcp.exceptions import ForwardError

    try:
        result = await forwarder.forward("tools/list", {})
    except ForwardError as e:
        logger.error(f"Forward failed: {e.message}")
"""

from enum import Enum
from typing import Any


class MotleyError(Exception):
    """Base exception for all Motley errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MotleyError):
    """Error in Motley configuration."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    def __init__(self, message: str, variable: str | None = None):
        details = {"variable": variable} if variable else {}
        super().__init__(message, details)
        self.variable = variable


# =============================================================================
# Forwarding Errors
# =============================================================================


class ForwardErrorKind(str, Enum):
    """Why a forwarded call failed."""

    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    REMOTE_ERROR = "remote_error"
    UNREACHABLE = "unreachable"


class ForwardError(MotleyError):
    """A forwarded JSON-RPC call did not produce a result."""

    kind: ForwardErrorKind = ForwardErrorKind.UNREACHABLE

    def __init__(self, message: str, method: str | None = None, details: dict | None = None):
        details = dict(details or {})
        if method:
            details["method"] = method
        super().__init__(message, details)
        self.method = method


class ForwardTimeoutError(ForwardError):
    """Remote did not respond within the request bound."""

    kind = ForwardErrorKind.TIMEOUT

    def __init__(self, method: str, timeout: float):
        super().__init__(
            f"Request timeout after {timeout:g} seconds for method: {method}",
            method=method,
        )
        self.timeout = timeout


class RemoteHTTPStatusError(ForwardError):
    """Remote answered with a non-success HTTP status."""

    kind = ForwardErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, body: str, method: str | None = None):
        super().__init__(f"HTTP {status_code}: {body}", method=method)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(ForwardError):
    """Response body was not a JSON-RPC object."""

    kind = ForwardErrorKind.MALFORMED_RESPONSE


class RemoteError(ForwardError):
    """Remote returned a JSON-RPC error object."""

    kind = ForwardErrorKind.REMOTE_ERROR

    def __init__(self, message: str, method: str | None = None, error: Any = None):
        super().__init__(message, method=method)
        self.error = error


class UnreachableError(ForwardError):
    """Network-level failure below HTTP (connection refused, DNS, ...)."""

    kind = ForwardErrorKind.UNREACHABLE
