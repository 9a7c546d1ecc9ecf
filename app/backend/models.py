"""
Field Service Admin Dashboard
Backend records

Typed views over the JSON records the actions endpoint returns.
Records are transient: built per response, never stored locally.

Guardrails:
- Presence-only policy: missing fields become empty strings, nothing is validated.
- Wire names (camelCase) stay at this boundary; the rest of the app uses snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

SEND_NOTIFICATION_ACTION = "sendAdminNotification"
STATUS_SUCCESS = "success"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Client:
    """
    An active client as listed by getAllClients.
    Identity is client_id.
    """
    client_id: str
    client_name: str
    address: str
    days_on_site: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Client":
        return cls(
            client_id=_text(payload.get("clientId")),
            client_name=_text(payload.get("clientName")),
            address=_text(payload.get("address")),
            days_on_site=_text(payload.get("daysOnSite")),
        )


@dataclass(frozen=True)
class ClientRequest:
    """
    One entry of getRecentRequests (backend order, most recent first).

    timestamp is kept as received (ISO string or epoch millis);
    formatting happens at render time.
    """
    type: str
    client_name: str
    timestamp: Any

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClientRequest":
        return cls(
            type=_text(payload.get("type")),
            client_name=_text(payload.get("clientName")),
            timestamp=payload.get("timestamp"),
        )


@dataclass(frozen=True)
class NotificationDraft:
    client_id: str
    title: str
    body: str

    def to_payload(self) -> Dict[str, str]:
        return {
            "action": SEND_NOTIFICATION_ACTION,
            "clientId": self.client_id,
            "title": self.title,
            "body": self.body,
        }


@dataclass(frozen=True)
class NotificationResult:
    status: str
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "NotificationResult":
        message = payload.get("message")
        return cls(
            status=_text(payload.get("status")),
            message=None if message is None else str(message),
        )
