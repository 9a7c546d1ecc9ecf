"""
app/backend/settings.py
Field Service Admin Dashboard
Backend Settings

Purpose:
- Centralised configuration for the remote actions endpoint.
- Keep deployment-specific values out of code via environment variables.

Notes:
- Optional:
  - ADMIN_API_URL (defaults to the production Apps Script deployment)
  - ADMIN_API_TIMEOUT_SECONDS (defaults to 30)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbyKeDJI-bLYcpnqo3-iTz0ZlA-Zg_EDPLSPFtGcNIRjkf1QZojGiwaxZZwzYo007nEaoQ/exec"
)
DEFAULT_TIMEOUT_SECONDS = 30.0


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(
            f"Invalid value for environment variable {name}: {raw!r}. "
            f"Expected a number of seconds."
        ) from None
    if value <= 0:
        raise RuntimeError(f"{name} must be greater than zero, got {raw!r}")
    return value


@dataclass(frozen=True)
class BackendSettings:
    api_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def load_backend_settings() -> BackendSettings:
    return BackendSettings(
        api_url=os.getenv("ADMIN_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL,
        timeout_seconds=_float_env("ADMIN_API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
    )
