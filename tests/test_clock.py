import threading
import time

import pytest

from procmux.clock import GlobalClock


@pytest.fixture
def clock():
    c = GlobalClock(interval=0.002)
    c.start()
    yield c
    c.stop()


def test_wait_advances_ticks(clock):
    before = clock.ticks
    clock.wait_for_tick(3)
    assert clock.ticks >= before + 3


def test_single_tick_default(clock):
    before = clock.ticks
    clock.wait_for_tick()
    assert clock.ticks > before


def test_stopped_clock_does_not_advance():
    c = GlobalClock(interval=0.002)
    c.start()
    c.wait_for_tick(2)
    c.stop()
    frozen = c.ticks
    time.sleep(0.02)
    assert c.ticks == frozen
    assert c.running is False


def test_wait_on_stopped_clock_raises():
    c = GlobalClock(interval=0.002)
    with pytest.raises(RuntimeError):
        c.wait_for_tick(1)


def test_wait_zero_ticks_returns_immediately():
    c = GlobalClock(interval=0.002)
    c.wait_for_tick(0)
    assert c.ticks == 0


def test_stop_wakes_waiter():
    c = GlobalClock(interval=10.0)
    c.start()
    errors = []

    def waiter():
        try:
            c.wait_for_tick(1)
        except RuntimeError as exc:
            errors.append(exc)

    t = threading.Thread(target=waiter)
    t.start()
    time.sleep(0.02)
    c.stop()
    t.join(timeout=2)
    assert not t.is_alive()
    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)
    assert c.running is False
    assert c.ticks == 0


def test_instance_is_shared():
    first = GlobalClock.instance()
    second = GlobalClock.instance()
    assert isinstance(first, GlobalClock)
    assert id(first) == id(second)


def test_invalid_interval():
    with pytest.raises(ValueError):
        GlobalClock(interval=0)


def test_context_manager_runs_and_stops():
    with GlobalClock(interval=0.002) as c:
        assert c.running is True
        c.wait_for_tick(1)
        assert c.ticks >= 1
    assert c.running is False