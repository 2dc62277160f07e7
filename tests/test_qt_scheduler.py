"""Tests for the Qt-backed scheduler on a running event loop."""
import pytest

from sentience.app.scheduler import QtScheduler


@pytest.fixture()
def qt_scheduler(qt_app):
    scheduler = QtScheduler(frame_interval_ms=10)
    yield scheduler
    scheduler.stop()


def test_cancelled_timer_never_fires(qt_scheduler, spin):
    fired = []
    handle = qt_scheduler.call_later(50, lambda: fired.append(1))
    qt_scheduler.call_later(50, lambda: fired.append(2))
    handle.cancel()

    spin(150)

    assert fired == [2]
    assert handle.cancelled is True
    assert len(qt_scheduler._pending) == 0


def test_fired_timer_is_released(qt_scheduler, spin):
    fired = []
    handle = qt_scheduler.call_later(20, lambda: fired.append(qt_scheduler.now()))
    assert len(qt_scheduler._pending) == 1

    spin(100)

    assert len(fired) == 1
    assert fired[0] >= 20
    assert handle.fired is True
    assert handle.active is False
    assert len(qt_scheduler._pending) == 0


def test_rearmed_quiet_timer_fires_once(qt_scheduler, spin):
    fired = []
    handle = None
    for _ in range(5):
        if handle is not None:
            handle.cancel()
        handle = qt_scheduler.call_later(40, lambda: fired.append(1))

    spin(150)

    assert fired == [1]
    assert len(qt_scheduler._pending) == 0


def test_stop_disposes_pending_timers(qt_scheduler, spin):
    fired = []
    qt_scheduler.call_later(30, lambda: fired.append(1))
    qt_scheduler.call_later(60, lambda: fired.append(2))

    qt_scheduler.stop()
    spin(120)

    assert fired == []
    assert len(qt_scheduler._pending) == 0


def test_frame_timer_drives_frame_ticker(qt_scheduler, spin):
    stamps = []
    qt_scheduler.frames.subscribe(stamps.append)

    qt_scheduler.start()
    spin(120)
    qt_scheduler.stop()
    count = len(stamps)
    spin(50)

    assert count >= 2
    assert stamps == sorted(stamps)
    assert len(stamps) == count


def test_clock_is_monotonic_milliseconds(qt_scheduler, spin):
    before = qt_scheduler.now()
    spin(30)

    assert qt_scheduler.now() - before >= 25
