"""
File: app/admin/__init__.py

Project: Field Service Admin Dashboard

Purpose:
Admin dashboard package: the operator page and its form controls.

Design rules:
- Routes only; flows live in app.dashboard
- No direct backend calls
"""

from .routes import router as admin_router
