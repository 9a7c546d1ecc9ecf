"""
Shared fixtures: an in-memory stand-in for requests.Session and a wired controller.
"""

import json

import pytest
import requests

from app.backend.client import AdminBackendClient
from app.backend.settings import BackendSettings
from app.config import DashboardSettings
from app.dashboard.context import DashboardContext
from app.dashboard.controller import DashboardController

API_URL = "https://backend.test/exec"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """
    Records calls and answers from queued responses.
    GET responses are keyed by action; POST responses are a FIFO queue.
    A queued exception instance is raised instead of returned.
    """

    def __init__(self):
        self.get_responses = {}
        self.post_responses = []
        self.get_calls = []
        self.post_calls = []
        self.closed = False
        self.on_post = None

    def get(self, url, params=None, timeout=None):
        self.get_calls.append({"url": url, "params": params, "timeout": timeout})
        result = self.get_responses[params["action"]]
        if isinstance(result, Exception):
            raise result
        return result

    def post(self, url, data=None, headers=None, timeout=None):
        self.post_calls.append(
            {"url": url, "data": data, "headers": headers, "timeout": timeout}
        )
        if self.on_post:
            self.on_post()
        result = self.post_responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def backend_client(session):
    return AdminBackendClient(
        settings=BackendSettings(api_url=API_URL, timeout_seconds=5),
        session=session,
    )


@pytest.fixture
def dashboard_settings():
    return DashboardSettings(
        poll_interval_seconds=15,
        locale="he-IL",
        timezone="Asia/Jerusalem",
        polling_enabled=False,
    )


@pytest.fixture
def context():
    return DashboardContext()


@pytest.fixture
def controller(context, backend_client, dashboard_settings):
    return DashboardController(
        context=context,
        client=backend_client,
        settings=dashboard_settings,
    )


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
