"""
File: app/backend/factory.py
Path: app/backend/factory.py

Project: Field Service Admin Dashboard

Purpose:
- Provide a single place to construct the backend client
- Reuse a single AdminBackendClient instance (singleton-style)

Design rules:
- No business logic here
- Only construction / wiring
"""

from __future__ import annotations

from app.backend.client import AdminBackendClient
from app.backend.settings import load_backend_settings


# -------------------------------------------------
# Backend client singleton
# -------------------------------------------------
_backend_client: AdminBackendClient | None = None


def get_backend_client() -> AdminBackendClient:
    global _backend_client
    if _backend_client is None:
        settings = load_backend_settings()
        _backend_client = AdminBackendClient(settings=settings)
    return _backend_client


def reset_backend_client() -> None:
    """Close and drop the shared client (app shutdown, tests)."""
    global _backend_client
    if _backend_client is not None:
        _backend_client.close()
    _backend_client = None
