"""
app/config.py
Dashboard configuration
Environment-driven (Render compatible)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_POLL_INTERVAL_SECONDS = 15.0
DEFAULT_LOCALE = "he-IL"
DEFAULT_TIMEZONE = "Asia/Jerusalem"


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def _positive_float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid value for {name}: {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be greater than zero, got {raw!r}")
    return value


@dataclass(frozen=True)
class DashboardSettings:
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    locale: str = DEFAULT_LOCALE
    timezone: str = DEFAULT_TIMEZONE
    polling_enabled: bool = True
    log_level: str = "INFO"


def load_dashboard_settings() -> DashboardSettings:
    return DashboardSettings(
        poll_interval_seconds=_positive_float_env(
            "DASHBOARD_POLL_INTERVAL_SECONDS", DEFAULT_POLL_INTERVAL_SECONDS
        ),
        locale=os.getenv("DASHBOARD_LOCALE", DEFAULT_LOCALE).strip() or DEFAULT_LOCALE,
        timezone=os.getenv("DASHBOARD_TIMEZONE", DEFAULT_TIMEZONE).strip() or DEFAULT_TIMEZONE,
        polling_enabled=_bool_env("DASHBOARD_POLLING_ENABLED", True),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
