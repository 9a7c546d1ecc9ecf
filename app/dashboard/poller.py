"""
Recent requests poller.

Background thread that refreshes the requests log on a fixed cadence.
A tick that fires while the previous refresh is still running is skipped.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger("dashboard.poller")


class RecentRequestsPoller:
    """
    Calls `refresh` every `interval_seconds` until stopped.
    """

    def __init__(self, refresh: Callable[[], object], interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self.refresh = refresh
        self.interval_seconds = interval_seconds

        self._stop = threading.Event()
        self._in_flight = threading.Lock()
        self._thread: Optional[threading.Thread] = None

        self.ticks = 0
        self.skipped = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start the polling thread"""
        if self.running:
            if self._stop.is_set():
                logger.warning("Previous requests poller still finishing, not starting another")
            else:
                logger.warning("Requests poller already running")
            return

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="requests-poller", daemon=True
        )
        self._thread.start()
        logger.info("Requests poller started: interval=%ss", self.interval_seconds)

    def stop(self, timeout: float = 5.0):
        """Stop the polling thread"""
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                # Refresh still in flight; keep the handle so start() sees it
                logger.warning("Requests poller did not stop within %ss", timeout)
                return
        self._thread = None
        logger.info("Requests poller stopped")

    def tick(self) -> bool:
        """
        Run one refresh unless another is in flight.
        Returns False when skipped.
        """
        if not self._in_flight.acquire(blocking=False):
            self.skipped += 1
            logger.warning("Requests refresh still pending, skipping tick")
            return False

        self.ticks += 1
        try:
            self.refresh()
        except Exception as e:
            logger.error("Requests refresh failed: %s", e, exc_info=True)
        finally:
            self._in_flight.release()
        return True

    def _run(self):
        # Event.wait returns True once stop() is called
        while not self._stop.wait(self.interval_seconds):
            self.tick()
