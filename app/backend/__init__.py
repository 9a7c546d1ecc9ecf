# app/backend/__init__.py
from .client import (
    AdminBackendClient,
    BackendError,
    BackendNetworkError,
    BackendApiError,
    BackendUnexpectedError,
)
from .models import Client, ClientRequest, NotificationDraft, NotificationResult
from .settings import BackendSettings, load_backend_settings
from .factory import get_backend_client, reset_backend_client
