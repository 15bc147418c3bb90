"""
Motley Bridge Settings

The remote endpoint and credential, read once at startup and passed
explicitly to the forwarder. Both values are required.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from motley_mcp.configs.constants import ENV_API_KEY, ENV_API_URL, get_timeout
from motley_mcp.exceptions import MissingConfigError


@dataclass(frozen=True)
class BridgeConfig:
    """Immutable configuration for one bridge process."""

    api_url: str
    api_key: str = field(repr=False)
    timeout: float = field(default_factory=lambda: float(get_timeout("forward_request")))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            MissingConfigError: MOTLEY_API_URL or MOTLEY_API_KEY is unset or empty
        """
        if environ is None:
            environ = os.environ

        api_url = environ.get(ENV_API_URL, "").strip()
        if not api_url:
            raise MissingConfigError(
                f"{ENV_API_URL} environment variable is required", variable=ENV_API_URL
            )

        api_key = environ.get(ENV_API_KEY, "").strip()
        if not api_key:
            raise MissingConfigError(
                f"{ENV_API_KEY} environment variable is required", variable=ENV_API_KEY
            )

        return cls(api_url=api_url, api_key=api_key)

    @property
    def auth_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
