"""
File: app/dashboard/__init__.py

Project: Field Service Admin Dashboard

Purpose:
Dashboard page state, controller and the requests poller.
"""

from .context import DashboardContext
from .controller import DashboardController, NotificationSubmission
from .poller import RecentRequestsPoller
