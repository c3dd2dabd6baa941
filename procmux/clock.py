"""A shared tick clock that threads can wait on."""

from __future__ import annotations

import threading
from typing import ClassVar, Optional


class GlobalClock:
    """Counts ticks on a background thread and wakes waiters on each tick."""

    _instance: ClassVar[Optional["GlobalClock"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, interval: float = 0.01) -> None:
        if interval <= 0:
            raise ValueError("clock interval must be positive")
        self._interval = interval
        self._ticks = 0
        self._running = False
        self._condition = threading.Condition()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def instance(cls) -> "GlobalClock":
        """Return the process-wide clock, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def start(self) -> None:
        """Start ticking; does nothing if the clock already runs."""
        with self._condition:
            if self._running:
                return
            self._running = True
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._run, name="global-clock", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wake every waiter."""
        with self._condition:
            if not self._running:
                return
            self._running = False
            self._stop_event.set()
            self._condition.notify_all()
            thread = self._thread
            self._thread = None
        if thread is not None:
            thread.join()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def ticks(self) -> int:
        """The number of ticks counted so far."""
        return self._ticks

    def wait_for_tick(self, num_ticks: int = 1) -> None:
        """Block until ``num_ticks`` further ticks have passed.

        Raises RuntimeError if the clock is not running, since no tick
        would ever arrive.
        """
        with self._condition:
            for _ in range(num_ticks):
                current = self._ticks
                self._condition.wait_for(
                    lambda: self._ticks != current or not self._running
                )
                if not self._running:
                    raise RuntimeError("clock is not running")

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            with self._condition:
                self._ticks += 1
                self._condition.notify_all()

    def __enter__(self) -> "GlobalClock":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()