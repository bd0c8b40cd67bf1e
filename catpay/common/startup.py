"""Startup-time config logging for scripts that talk to Black Cat.

Logs which gateway variables are set without leaking key material, and which
slot the API key was resolved from, so a 401 from the gateway can be traced to
a missing or misnamed variable.
"""

import os

from catpay.common.config import GatewaySettings
from catpay.common.logging import logger

GATEWAY_ENV_KEYS = [
    "BLACKCAT_API_URL",
    "BLACKCAT_TIMEOUT_SECONDS",
    "BLACKCAT_API_KEY",
    "BLACKCAT_SECRET_KEY",
    "NEXT_PUBLIC_BLACKCAT_API_KEY",
    "NEXT_PUBLIC_BLACKCAT_SECRET_KEY",
    "BLACKCAT_PUBLIC_KEY",
    "NEXT_PUBLIC_BLACKCAT_PUBLIC_KEY",
]

_API_KEY_SLOTS = [
    "blackcat_api_key",
    "blackcat_secret_key",
    "next_public_blackcat_api_key",
    "next_public_blackcat_secret_key",
]


def _safe_env(name: str) -> str:
    """Return env value, redacting anything that looks like a credential."""

    value = os.getenv(name)
    if value is None:
        return "<unset>"
    if any(secret in name for secret in ["KEY", "SECRET", "PASSWORD", "TOKEN"]):
        return "<redacted>" if value else "<empty>"
    return value


def api_key_source(config: GatewaySettings) -> str:
    """Name of the env var the API key came from, or "<none>"."""

    for field in _API_KEY_SLOTS:
        if getattr(config, field):
            return field.upper()
    return "<none>"


def log_startup_config(
    service_name: str,
    keys: list[str] | None = None,
    config: GatewaySettings | None = None,
) -> dict[str, str]:
    """Log the selected gateway env vars (all of them by default)."""

    snapshot = {"service": service_name}
    for key in keys if keys is not None else GATEWAY_ENV_KEYS:
        snapshot[key] = _safe_env(key)
    if config is not None:
        snapshot["api_key_source"] = api_key_source(config)
    logger.info("startup_config=%s", snapshot)
    return snapshot
