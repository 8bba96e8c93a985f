"""
Configuration helpers for the Sia Central API clients.

This module centralizes base URL selection, API key loading, default timeouts,
and request limits. No secrets are stored in the repository; the API key is read
from environment or a file referenced by the environment if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

# Default connection settings
DEFAULT_BASE_URL = os.getenv("SIACENTRAL_BASE_URL", "https://api.siacentral.com/v2")
SCPRIME_BASE_URL = os.getenv("SIACENTRAL_SCPRIME_BASE_URL", "https://api.siacentral.com/v2/scprime")
LEGACY_BASE_URL = os.getenv("SIACENTRAL_LEGACY_BASE_URL", "https://api.siacentral.com/v1")
USER_AGENT = "siacentral-python"


def _load_timeout() -> float:
    raw_timeout = os.getenv("SIACENTRAL_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 30.0
    return 30.0


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "SIACENTRAL_API_KEY"
API_KEY_FILE_ENV_VAR = "SIACENTRAL_API_KEY_FILE"

# Server-side request limits
MAX_ADDRESSES = 10000
MAX_HOSTS_LIMIT = 500
LOG_LEVEL = os.getenv("SIACENTRAL_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("SIACENTRAL_LOG_FORMAT", "plain")  # json or plain


def load_api_key() -> Optional[str]:
    """
    Load the Sia Central API key from environment or a key file.

    Returns:
        The API key string if available, otherwise None. The key is never logged.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


@dataclass(slots=True)
class ClientConfig:
    """Runtime configuration shared by every Sia Central client."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = field(default_factory=load_api_key)
    user_agent: str = USER_AGENT
    max_addresses: int = MAX_ADDRESSES
    max_hosts_limit: int = MAX_HOSTS_LIMIT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    def with_base_url(self, base_url: str) -> "ClientConfig":
        """Return a copy of this config pointed at another API root."""
        return replace(self, base_url=base_url)


default_config = ClientConfig()
