from __future__ import annotations

import threading
import time
from typing import Callable


class FixedWindowRateLimiter:
    """Admit at most ``max_calls`` per window; the counter resets when a window ends.

    Local to one consumer process. Several worker processes each keep their own
    budget.
    """

    def __init__(
        self,
        max_calls: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_calls < 1:
            raise ValueError("max_calls must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_calls = max_calls
        self.window_seconds = window_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._window_started: float | None = None
        self._calls = 0

    def try_acquire(self) -> float:
        """Take a slot. Returns 0 when admitted, else the seconds left in the window."""
        with self._lock:
            now = self._clock()
            if self._window_started is None or now - self._window_started >= self.window_seconds:
                self._window_started = now
                self._calls = 0
            if self._calls < self.max_calls:
                self._calls += 1
                return 0.0
            return self.window_seconds - (now - self._window_started)

    def acquire(self) -> None:
        while True:
            wait = self.try_acquire()
            if wait <= 0:
                return
            self._sleep(wait)
