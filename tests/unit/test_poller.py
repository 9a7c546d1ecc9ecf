"""
Unit tests for RecentRequestsPoller.

Timing is driven through tick(); the thread test uses a tiny interval.
"""

import threading

import pytest

from app.dashboard.poller import RecentRequestsPoller


@pytest.mark.unit
class TestTick:
    def test_tick_runs_refresh(self):
        calls = []
        poller = RecentRequestsPoller(lambda: calls.append(1), interval_seconds=15)

        assert poller.tick() is True
        assert poller.tick() is True
        assert calls == [1, 1]
        assert poller.ticks == 2

    def test_tick_skipped_while_refresh_in_flight(self):
        inner_results = []

        def refresh():
            inner_results.append(poller.tick())

        poller = RecentRequestsPoller(refresh, interval_seconds=15)

        assert poller.tick() is True
        assert inner_results == [False]
        assert poller.skipped == 1
        # Guard released afterwards
        assert poller.tick() is True

    def test_failing_refresh_does_not_break_polling(self):
        def refresh():
            raise RuntimeError("backend down")

        poller = RecentRequestsPoller(refresh, interval_seconds=15)

        assert poller.tick() is True
        assert poller.tick() is True
        assert poller.skipped == 0

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            RecentRequestsPoller(lambda: None, interval_seconds=0)


@pytest.mark.unit
class TestLifecycle:
    def test_start_polls_until_stopped(self):
        fired = threading.Event()
        poller = RecentRequestsPoller(fired.set, interval_seconds=0.01)

        poller.start()
        try:
            assert fired.wait(timeout=2)
            assert poller.running
        finally:
            poller.stop()

        assert not poller.running

    def test_does_not_tick_before_first_interval(self):
        calls = []
        poller = RecentRequestsPoller(lambda: calls.append(1), interval_seconds=60)

        poller.start()
        poller.stop()

        assert calls == []

    def test_stop_timeout_keeps_running_loop_tracked(self):
        entered = threading.Event()
        release = threading.Event()

        def slow_refresh():
            entered.set()
            release.wait(timeout=5)

        poller = RecentRequestsPoller(slow_refresh, interval_seconds=0.01)
        poller.start()
        first = poller._thread
        try:
            assert entered.wait(timeout=2)

            poller.stop(timeout=0.05)
            assert poller.running
            assert poller._thread is first

            poller.start()
            assert poller._thread is first
        finally:
            release.set()
            poller.stop()

        assert not poller.running
        assert not first.is_alive()

    def test_start_twice_keeps_single_thread(self):
        poller = RecentRequestsPoller(lambda: None, interval_seconds=60)
        poller.start()
        first = poller._thread
        try:
            poller.start()
            assert poller._thread is first
        finally:
            poller.stop()
