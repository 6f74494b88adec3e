"""A stopwatch that accumulates elapsed nanoseconds across runs."""

from __future__ import annotations

import time
from types import TracebackType


class TimerError(RuntimeError):
    """Raised when the timer is started twice or stopped while idle."""


class Timer:
    """Accumulating stopwatch measured in nanoseconds."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Stop the timer and clear the accumulated time."""
        self._running = False
        self._elapsed = 0
        self._start_time = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin a measurement."""
        if self._running:
            raise TimerError("timer is already running")
        self._running = True
        self._start_time = time.perf_counter_ns()

    def stop(self) -> None:
        """End a measurement and add its duration to the total."""
        if not self._running:
            raise TimerError("timer is not running")
        self._elapsed += time.perf_counter_ns() - self._start_time
        self._running = False

    def result(self) -> int:
        """Return the accumulated time in nanoseconds."""
        return self._elapsed

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.stop()
        return False