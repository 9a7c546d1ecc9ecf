"""
File: app/dashboard/controller.py

Project: Field Service Admin Dashboard

Purpose:
Drives the three dashboard flows against the remote actions endpoint:
- Load active clients   -> clients table
- Load recent requests  -> requests log
- Send a notification   -> modal + form + operator alert

Design rules:
- Page state comes in through DashboardContext, never module globals
- Every backend failure is logged and surfaced as an operator alert
- No retries; the controller stays usable after any failure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.backend.client import AdminBackendClient, BackendError
from app.backend.models import Client, ClientRequest, NotificationDraft
from app.config import DashboardSettings
from app.dashboard import messages
from app.dashboard.context import (
    ClientRow,
    DashboardContext,
    NotifyControl,
    RequestItem,
)
from app.dashboard.formatting import format_timestamp

logger = logging.getLogger("dashboard")

ACTION_GET_ALL_CLIENTS = "getAllClients"
ACTION_GET_RECENT_REQUESTS = "getRecentRequests"


@dataclass(frozen=True)
class NotificationSubmission:
    """Values posted by the notification form."""
    client_id: str
    title: str
    body: str


def _records(data: Optional[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    if not data:
        return []
    records = data.get(key)
    if not isinstance(records, list):
        return []

    kept = []
    for record in records:
        if isinstance(record, dict):
            kept.append(record)
        else:
            logger.warning("Skipping malformed %s record: %r", key, record)
    return kept


class DashboardController:
    def __init__(
        self,
        context: DashboardContext,
        client: AdminBackendClient,
        settings: DashboardSettings,
    ) -> None:
        self._context = context
        self._client = client
        self._settings = settings

    @property
    def context(self) -> DashboardContext:
        return self._context

    @property
    def api_url(self) -> str:
        return self._client.api_url

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def fetch_data(self, action: str) -> Optional[Dict[str, Any]]:
        """
        Run a read action.
        Returns the payload, or None after logging and alerting on failure.
        """
        try:
            return self._client.get_action(action)
        except BackendError as e:
            logger.error("Failed to fetch %s: %s", action, e)
            self._context.alerts.push(messages.load_error(str(e)))
            return None

    def load_active_clients(self) -> int:
        data = self.fetch_data(ACTION_GET_ALL_CLIENTS)
        records = _records(data, "clients")
        table = self._context.clients_table

        if not records:
            table.show_placeholder(messages.NO_ACTIVE_CLIENTS)
        else:
            rows = []
            for record in records:
                client = Client.from_payload(record)
                rows.append(
                    ClientRow(
                        cells=(
                            client.client_id,
                            client.client_name,
                            client.address,
                            client.days_on_site,
                        ),
                        notify=NotifyControl(
                            label=messages.NOTIFY_BUTTON_LABEL,
                            data_id=client.client_id,
                            data_name=client.client_name,
                        ),
                    )
                )
            table.replace_rows(rows)

        if data is not None:
            self._context.last_clients_refresh = datetime.now(timezone.utc)
        logger.info("Clients table refreshed: %d rows", len(records))
        return len(records)

    def load_recent_requests(self) -> int:
        data = self.fetch_data(ACTION_GET_RECENT_REQUESTS)
        records = _records(data, "requests")
        log = self._context.requests_log

        if not records:
            log.show_placeholder(messages.NO_RECENT_REQUESTS)
        else:
            items = []
            for record in records:
                req = ClientRequest.from_payload(record)
                items.append(
                    RequestItem(
                        type=req.type,
                        client_name=req.client_name,
                        formatted_timestamp=format_timestamp(
                            req.timestamp,
                            self._settings.locale,
                            self._settings.timezone,
                        ),
                    )
                )
            log.replace_items(items)

        if data is not None:
            self._context.last_requests_refresh = datetime.now(timezone.utc)
        logger.debug("Requests log refreshed: %d items", len(records))
        return len(records)

    # ------------------------------------------------------------------
    # Modal
    # ------------------------------------------------------------------
    def open_notification_modal(self, client_id: str, client_name: str) -> None:
        self._context.modal.show(client_id, client_name)

    def close_notification_modal(self) -> None:
        self._context.modal.hide()

    # ------------------------------------------------------------------
    # Send notification
    # ------------------------------------------------------------------
    def handle_send_notification(self, submission: NotificationSubmission) -> bool:
        ctx = self._context
        with ctx.form_lock:
            ctx.form.title = submission.title
            ctx.form.body = submission.body
            ctx.submit_button.busy()

            draft = NotificationDraft(
                client_id=submission.client_id,
                title=submission.title,
                body=submission.body,
            )
            try:
                self._client.send_admin_notification(draft)
            except BackendError as e:
                logger.error("Failed to send notification: %s", e)
                ctx.alerts.push(messages.send_error(str(e)))
                return False
            else:
                ctx.alerts.push(messages.SEND_SUCCESS, level="success")
                ctx.modal.hide()
                ctx.form.reset()
                return True
            finally:
                ctx.submit_button.restore()
