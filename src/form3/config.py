# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the Form3 client."""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_USER_AGENT = "form3"
MEDIA_TYPE_JSON = "application/json"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ClientSettings:
    """Client defaults shared by the transport and the request builder."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10.0
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("FORM3_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            base_url=os.getenv("FORM3_BASE_URL") or cls.base_url,
            user_agent=os.getenv("FORM3_USER_AGENT") or cls.user_agent,
            timeout=timeout,
            verify_ssl=_bool_env("FORM3_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
