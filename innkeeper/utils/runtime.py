"""Runtime environment helpers for guarding development-only flags."""

import os
from urllib.parse import urlparse
from typing import Optional, Set

_LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}


def _extract_hostname(url_value: str) -> Optional[str]:
    if not url_value or not url_value.strip():
        return None
    url_value = url_value.strip()
    candidate = url_value if "://" in url_value else f"http://{url_value}"
    return urlparse(candidate).hostname


def dev_mode_requested() -> bool:
    """Return True when DEV_MODE env var is set to a truthy value."""
    return os.getenv("DEV_MODE", "false").lower() == "true"


def dev_mode_active() -> bool:
    """Return True if dev mode is enabled and allowed; raise if misconfigured.

    DEV_MODE skips bearer-token checks on admin routes, so it is refused unless
    APP_BASE_URL points at a local host.
    """
    if not dev_mode_requested():
        return False

    hostname = _extract_hostname(os.getenv("APP_BASE_URL", ""))
    if hostname and hostname.lower() not in _LOCAL_HOSTS:
        raise RuntimeError(
            "DEV_MODE=true is not permitted when APP_BASE_URL points to "
            f"'{hostname}'. Allowed hosts: {sorted(_LOCAL_HOSTS)}"
        )
    return True
