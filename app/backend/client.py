"""
File: app/backend/client.py
Path: app/backend/client.py

Project: Field Service Admin Dashboard

Purpose:
Client for the remote admin actions endpoint.
Supports:
- Reads: GET ?action=<name>
- Writes: POST sendAdminNotification (JSON sent as text/plain)

Error taxonomy:
- BackendNetworkError: non-OK HTTP status
- BackendApiError: "error" field in the payload, or a non-success status
- BackendUnexpectedError: transport failure or undecodable response

No retries here. A failed call is terminal for that call.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from app.backend.models import NotificationDraft, NotificationResult
from app.backend.settings import BackendSettings

logger = logging.getLogger("backend")

# Plain-text body keeps the POST a "simple" cross-origin request for Apps Script.
POST_CONTENT_TYPE = "text/plain;charset=utf-8"


class BackendError(RuntimeError):
    pass


class BackendNetworkError(BackendError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Network error: {status_code}")
        self.status_code = status_code


class BackendApiError(BackendError):
    pass


class BackendUnexpectedError(BackendError):
    pass


class AdminBackendClient:
    def __init__(
        self,
        settings: BackendSettings,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings
        self._session = session or requests.Session()

    @property
    def api_url(self) -> str:
        return self._settings.api_url

    def close(self) -> None:
        self._session.close()

    # ---------------------------------------------------------
    # READ ACTIONS
    # ---------------------------------------------------------
    def get_action(self, action: str) -> Dict[str, Any]:
        """
        Run a named read action and return its JSON object.
        Raises a BackendError subclass on any failure.
        """
        try:
            resp = self._session.get(
                self._settings.api_url,
                params={"action": action},
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as e:
            raise BackendUnexpectedError(str(e)) from e

        if not resp.ok:
            raise BackendNetworkError(resp.status_code)

        data = self._decode(resp)
        if data.get("error"):
            raise BackendApiError(f"API error: {data['error']}")

        logger.debug("Action %s returned keys: %s", action, sorted(data))
        return data

    # ---------------------------------------------------------
    # WRITE ACTIONS
    # ---------------------------------------------------------
    def send_admin_notification(self, draft: NotificationDraft) -> NotificationResult:
        try:
            resp = self._session.post(
                self._settings.api_url,
                data=json.dumps(draft.to_payload()).encode("utf-8"),
                headers={"Content-Type": POST_CONTENT_TYPE},
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as e:
            raise BackendUnexpectedError(str(e)) from e

        if not resp.ok:
            raise BackendNetworkError(resp.status_code)

        result = NotificationResult.from_payload(self._decode(resp))
        if not result.ok:
            raise BackendApiError(result.message or f"Unexpected status: {result.status!r}")

        logger.info("Notification sent to client %s", draft.client_id)
        return result

    # ---------------------------------------------------------
    # Internal
    # ---------------------------------------------------------
    @staticmethod
    def _decode(resp: requests.Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as e:
            raise BackendUnexpectedError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise BackendUnexpectedError(
                f"Unexpected response payload: {type(data).__name__}"
            )
        return data
