"""
File: app/dashboard/context.py

Project: Field Service Admin Dashboard

Purpose:
Page state for the admin dashboard, passed explicitly into the controller.
Each handle owns one region of the page (clients table, requests log,
notification modal, form, submit control, operator alerts).

Element IDs below are the binding contract with app/templates/dashboard.html.

Design rules:
- No module-level page state; build one DashboardContext per app
- Region contents are replaced whole, never patched in place
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from app.dashboard import messages

# -------------------------------------------------------------------
# Element IDs (markup <-> state contract)
# -------------------------------------------------------------------
CLIENTS_TABLE_BODY_ID = "clients-table-body"
REQUESTS_LOG_ID = "requests-log"
NOTIFICATION_MODAL_ID = "notification-modal"
MODAL_CLOSE_BTN_ID = "modal-close-btn"
NOTIFICATION_FORM_ID = "notification-form"
MODAL_CLIENT_ID_ID = "modal-client-id"
MODAL_CLIENT_NAME_ID = "modal-client-name"
NOTIFICATION_TITLE_ID = "notification-title"
NOTIFICATION_BODY_ID = "notification-body"

ALERTS_ID = "alerts"

CLIENTS_TABLE_COLUMNS = 5
MAX_PENDING_ALERTS = 50


# -------------------------------------------------------------------
# Rendered rows
# -------------------------------------------------------------------
@dataclass(frozen=True)
class NotifyControl:
    label: str
    data_id: str
    data_name: str

    @property
    def data_attributes(self) -> Dict[str, str]:
        return {"data-id": self.data_id, "data-name": self.data_name}


@dataclass(frozen=True)
class ClientRow:
    cells: Tuple[str, ...]
    notify: NotifyControl


@dataclass(frozen=True)
class RequestItem:
    type: str
    client_name: str
    formatted_timestamp: str

    @property
    def text(self) -> str:
        return f"{self.type} - {self.client_name} ({self.formatted_timestamp})"


@dataclass(frozen=True)
class Placeholder:
    text: str
    colspan: Optional[int] = None


# -------------------------------------------------------------------
# Regions
# -------------------------------------------------------------------
@dataclass(frozen=True)
class ClientsTableState:
    rows: List[ClientRow] = field(default_factory=list)
    placeholder: Optional[Placeholder] = None


@dataclass(frozen=True)
class RequestsLogState:
    items: List[RequestItem] = field(default_factory=list)
    placeholder: Optional[Placeholder] = None


class ClientsTable:
    """
    Readers take `snapshot` once per render; writers swap it in one assignment.
    """
    element_id = CLIENTS_TABLE_BODY_ID

    def __init__(self) -> None:
        self.snapshot = ClientsTableState()

    @property
    def rows(self) -> List[ClientRow]:
        return self.snapshot.rows

    @property
    def placeholder(self) -> Optional[Placeholder]:
        return self.snapshot.placeholder

    def show_placeholder(self, text: str) -> None:
        self.snapshot = ClientsTableState(
            placeholder=Placeholder(text=text, colspan=CLIENTS_TABLE_COLUMNS)
        )

    def replace_rows(self, rows: List[ClientRow]) -> None:
        self.snapshot = ClientsTableState(rows=list(rows))

    def to_dict(self) -> Dict[str, Any]:
        state = self.snapshot
        return {
            "placeholder": state.placeholder.text if state.placeholder else None,
            "rows": [
                {"cells": list(r.cells), "notify": r.notify.data_attributes}
                for r in state.rows
            ],
        }


class RequestsLog:
    element_id = REQUESTS_LOG_ID

    def __init__(self) -> None:
        self.snapshot = RequestsLogState()

    @property
    def items(self) -> List[RequestItem]:
        return self.snapshot.items

    @property
    def placeholder(self) -> Optional[Placeholder]:
        return self.snapshot.placeholder

    def show_placeholder(self, text: str) -> None:
        self.snapshot = RequestsLogState(placeholder=Placeholder(text=text))

    def replace_items(self, items: List[RequestItem]) -> None:
        self.snapshot = RequestsLogState(items=list(items))

    def to_dict(self) -> Dict[str, Any]:
        state = self.snapshot
        return {
            "placeholder": state.placeholder.text if state.placeholder else None,
            "items": [
                {
                    "type": i.type,
                    "client_name": i.client_name,
                    "timestamp": i.formatted_timestamp,
                }
                for i in state.items
            ],
        }


@dataclass
class NotificationModal:
    visible: bool = False
    client_id: str = ""
    client_name: str = ""

    def show(self, client_id: str, client_name: str) -> None:
        self.client_id = client_id
        self.client_name = client_name
        self.visible = True

    def hide(self) -> None:
        self.visible = False


@dataclass
class NotificationForm:
    title: str = ""
    body: str = ""

    def reset(self) -> None:
        self.title = ""
        self.body = ""


@dataclass
class SubmitButton:
    label: str = messages.SUBMIT_IDLE_LABEL
    disabled: bool = False

    def busy(self) -> None:
        self.label = messages.SUBMIT_BUSY_LABEL
        self.disabled = True

    def restore(self) -> None:
        self.label = messages.SUBMIT_IDLE_LABEL
        self.disabled = False


@dataclass(frozen=True)
class Alert:
    level: str
    text: str


class AlertQueue:
    """
    Operator alerts waiting to be shown.
    Appended from request handlers and the poller thread; drained on render
    and by the page's polling script.

    Bounded: the oldest alerts are dropped past `maxlen`, and an alert equal
    to the newest pending one is not queued twice.
    """

    def __init__(self, maxlen: int = MAX_PENDING_ALERTS) -> None:
        self._pending: deque[Alert] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def push(self, text: str, level: str = "error") -> None:
        alert = Alert(level=level, text=text)
        with self._lock:
            if self._pending and self._pending[-1] == alert:
                return
            self._pending.append(alert)

    def drain(self) -> List[Alert]:
        with self._lock:
            drained = list(self._pending)
            self._pending.clear()
        return drained

    def __len__(self) -> int:
        return len(self._pending)


# -------------------------------------------------------------------
# Context
# -------------------------------------------------------------------
@dataclass
class DashboardContext:
    clients_table: ClientsTable = field(default_factory=ClientsTable)
    requests_log: RequestsLog = field(default_factory=RequestsLog)
    modal: NotificationModal = field(default_factory=NotificationModal)
    form: NotificationForm = field(default_factory=NotificationForm)
    submit_button: SubmitButton = field(default_factory=SubmitButton)
    alerts: AlertQueue = field(default_factory=AlertQueue)

    last_clients_refresh: Optional[datetime] = None
    last_requests_refresh: Optional[datetime] = None

    # Serialises the notification flow (modal, form and submit control)
    form_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
