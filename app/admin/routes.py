"""
File: app/admin/routes.py

Project: Field Service Admin Dashboard

Purpose:
Admin dashboard pages and controls.

Endpoints:
- GET  /admin                       (dashboard page)
- GET  /admin/clients               (clients table as JSON)
- POST /admin/clients/refresh
- GET  /admin/requests              (requests log as JSON)
- GET  /admin/requests/fragment     (requests log HTML, polled by the page)
- POST /admin/requests/refresh
- POST /admin/modal/open
- POST /admin/modal/close
- POST /admin/notifications         (notification form submit)
- GET  /admin/alerts                (drain pending operator alerts)

Design rules:
- No backend calls here; everything goes through DashboardController
- Form posts redirect back to the page (POST/redirect/GET)
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.dashboard import context as page
from app.dashboard.controller import DashboardController, NotificationSubmission
from app.dashboard.poller import RecentRequestsPoller

router = APIRouter(prefix="/admin", tags=["admin"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

ELEMENT_IDS = {
    "clients_table_body": page.CLIENTS_TABLE_BODY_ID,
    "requests_log": page.REQUESTS_LOG_ID,
    "notification_modal": page.NOTIFICATION_MODAL_ID,
    "modal_close_btn": page.MODAL_CLOSE_BTN_ID,
    "notification_form": page.NOTIFICATION_FORM_ID,
    "modal_client_id": page.MODAL_CLIENT_ID_ID,
    "modal_client_name": page.MODAL_CLIENT_NAME_ID,
    "notification_title": page.NOTIFICATION_TITLE_ID,
    "notification_body": page.NOTIFICATION_BODY_ID,
    "alerts": page.ALERTS_ID,
}


def get_controller(request: Request) -> DashboardController:
    return request.app.state.controller


def get_poller(request: Request) -> RecentRequestsPoller:
    return request.app.state.poller


def _back_to_dashboard() -> RedirectResponse:
    return RedirectResponse(url="/admin", status_code=303)


# -------------------------------------------------------------------
# Page
# -------------------------------------------------------------------
@router.get("", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    controller: DashboardController = Depends(get_controller),
    poller: RecentRequestsPoller = Depends(get_poller),
):
    ctx = controller.context
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "ids": ELEMENT_IDS,
            "ctx": ctx,
            "alerts": ctx.alerts.drain(),
            "poll_interval_ms": int(poller.interval_seconds * 1000),
        },
    )


# -------------------------------------------------------------------
# Clients
# -------------------------------------------------------------------
@router.get("/clients")
def clients_table(controller: DashboardController = Depends(get_controller)):
    return controller.context.clients_table.to_dict()


@router.post("/clients/refresh")
def refresh_clients(controller: DashboardController = Depends(get_controller)):
    controller.load_active_clients()
    return _back_to_dashboard()


# -------------------------------------------------------------------
# Recent requests
# -------------------------------------------------------------------
@router.get("/requests")
def requests_log(controller: DashboardController = Depends(get_controller)):
    return controller.context.requests_log.to_dict()


@router.get("/requests/fragment", response_class=HTMLResponse)
def requests_log_fragment(
    request: Request,
    controller: DashboardController = Depends(get_controller),
):
    return templates.TemplateResponse(
        request,
        "_requests_log.html",
        {"log": controller.context.requests_log.snapshot},
    )


@router.post("/requests/refresh")
def refresh_requests(poller: RecentRequestsPoller = Depends(get_poller)):
    return {"refreshed": poller.tick()}


# -------------------------------------------------------------------
# Notification modal
# -------------------------------------------------------------------
@router.post("/modal/open")
def open_modal(
    client_id: str = Form(...),
    client_name: str = Form(""),
    controller: DashboardController = Depends(get_controller),
):
    controller.open_notification_modal(client_id, client_name)
    return _back_to_dashboard()


@router.post("/modal/close")
def close_modal(controller: DashboardController = Depends(get_controller)):
    controller.close_notification_modal()
    return _back_to_dashboard()


@router.post("/notifications")
def send_notification(
    client_id: str = Form(""),
    title: str = Form(""),
    body: str = Form(""),
    controller: DashboardController = Depends(get_controller),
):
    controller.handle_send_notification(
        NotificationSubmission(client_id=client_id, title=title, body=body)
    )
    return _back_to_dashboard()


# -------------------------------------------------------------------
# Operator alerts
# -------------------------------------------------------------------
@router.get("/alerts")
def drain_alerts(controller: DashboardController = Depends(get_controller)):
    return [
        {"level": a.level, "text": a.text}
        for a in controller.context.alerts.drain()
    ]
