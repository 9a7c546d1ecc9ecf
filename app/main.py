"""
File: app/main.py

Project: Field Service Admin Dashboard

Purpose:
Application entry point.
Responsible only for:
- FastAPI app creation
- Logging setup
- Wiring settings, backend client, page context and controller
- Startup loads + requests poller lifecycle
- Router registration (admin dashboard, health)

Design principles:
- No business logic in this file
- No backend calls outside the controller
- This file must remain thin and declarative
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from app.admin.routes import router as admin_router
from app.backend.client import AdminBackendClient
from app.backend.factory import get_backend_client, reset_backend_client
from app.config import DashboardSettings, load_dashboard_settings
from app.dashboard.context import DashboardContext
from app.dashboard.controller import DashboardController
from app.dashboard.poller import RecentRequestsPoller
from app.health import router as health_router

logger = logging.getLogger("dashboard")


def create_app(
    settings: Optional[DashboardSettings] = None,
    backend_client: Optional[AdminBackendClient] = None,
) -> FastAPI:
    settings = settings or load_dashboard_settings()
    logging.basicConfig(level=settings.log_level)

    owns_client = backend_client is None
    client = backend_client or get_backend_client()

    controller = DashboardController(
        context=DashboardContext(),
        client=client,
        settings=settings,
    )
    poller = RecentRequestsPoller(
        refresh=controller.load_recent_requests,
        interval_seconds=settings.poll_interval_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initial data load
        await run_in_threadpool(controller.load_active_clients)
        await run_in_threadpool(poller.tick)
        if settings.polling_enabled:
            poller.start()
        yield
        poller.stop()
        if owns_client:
            reset_backend_client()

    app = FastAPI(title="Field Service Admin Dashboard", lifespan=lifespan)
    app.state.settings = settings
    app.state.controller = controller
    app.state.poller = poller

    # -------------------------------------------------------------------
    # Admin dashboard
    # -------------------------------------------------------------------
    app.include_router(admin_router)

    # -------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------
    app.include_router(health_router)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/admin")

    logger.info("Dashboard wired against %s", client.api_url)
    return app


app = create_app()
