"""
Health check endpoints
Used by Render + ops
"""

from fastapi import APIRouter, Depends

from app.admin.routes import get_controller, get_poller
from app.dashboard.controller import DashboardController
from app.dashboard.poller import RecentRequestsPoller

router = APIRouter(prefix="/health", tags=["health"])


def _iso(value):
    return value.isoformat() if value else None


@router.get("")
def health_check():
    return {"status": "ok"}


@router.get("/backend")
def backend_health_check(
    controller: DashboardController = Depends(get_controller),
    poller: RecentRequestsPoller = Depends(get_poller),
):
    ctx = controller.context
    return {
        "api_url": controller.api_url,
        "last_clients_refresh": _iso(ctx.last_clients_refresh),
        "last_requests_refresh": _iso(ctx.last_requests_refresh),
        "poller_running": poller.running,
        "poller_skipped_ticks": poller.skipped,
    }
