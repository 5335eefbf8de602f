from datetime import date

from core.events.domain_events import domain_events
from core.events.signal import Signal


def test_signal_connect_emit_disconnect():
    sig: Signal[str] = Signal()
    seen = []

    sig.connect(seen.append)
    sig.connect(seen.append)
    sig.emit("p-1")
    sig.disconnect(seen.append)
    sig.emit("p-2")

    assert seen == ["p-1"]


def test_signal_prunes_dead_subscribers():
    sig: Signal[str] = Signal()
    calls = []

    def dead(_payload):
        raise ReferenceError("owner collected")

    sig.connect(dead)
    sig.connect(calls.append)
    sig.emit("first")
    sig.emit("second")

    assert calls == ["first", "second"]
    assert sig.subscriber_count == 1


def test_task_writes_emit_schedule_changed(services):
    ts = services["task_service"]
    wcs = services["work_calendar_service"]
    schedule_events = []
    exception_events = []
    domain_events.schedule_changed.connect(schedule_events.append)
    domain_events.exceptions_changed.connect(exception_events.append)
    try:
        a = ts.create_task("p-9", "Alpha", date(2024, 1, 1), 1)
        b = ts.create_task("p-9", "Bravo", date(2024, 1, 1), 1)
        ts.add_dependency("p-9", a.id, b.id)
        wcs.add_exception("p-9", "Shutdown", date(2024, 1, 2), date(2024, 1, 2))
    finally:
        domain_events.schedule_changed.disconnect(schedule_events.append)
        domain_events.exceptions_changed.disconnect(exception_events.append)

    assert schedule_events == ["p-9"] * 4
    assert exception_events == ["p-9"]


def test_connect_returns_disconnect_handle():
    sig: Signal[int] = Signal()
    seen = []

    unsubscribe = sig.connect(seen.append)
    sig.emit(1)
    unsubscribe()
    unsubscribe()
    sig.emit(2)

    assert seen == [1]
    assert sig.subscriber_count == 0
