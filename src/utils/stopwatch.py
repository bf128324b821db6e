"""
Stopwatch for measuring elapsed time.

**Conceptual**: A StopWatch accumulates running time across start/stop
cycles, like a physical stopwatch with a pause button. It reads a monotonic
timer (time.perf_counter_ns by default), so wall-clock adjustments never make
elapsed time jump or go backwards.

**Usage**:
    sw = StopWatch.start_new()
    do_work()
    sw.stop()
    print(f"took {sw}")          # e.g. "took 1.234s"

    with StopWatch() as sw:      # starts on enter, stops on exit
        do_work()
    sw.elapsed_millis()

The timer is injectable (a zero-argument callable returning nanoseconds) so
tests can drive it deterministically, the same way date helpers accept a
FrozenClock.
"""

import logging
import time
from datetime import timedelta
from typing import Callable, Optional

logger = logging.getLogger(__name__)

NanosecondTimer = Callable[[], int]


class StopWatch:
    """
    Measures time intervals, with pause/resume and reset.

    Attributes:
        is_running: True between start() and stop().
    """

    def __init__(self, timer: Optional[NanosecondTimer] = None):
        """
        Create a stopped stopwatch with zero elapsed time.

        Args:
            timer: Monotonic nanosecond source; defaults to time.perf_counter_ns.
        """
        self._timer = timer or time.perf_counter_ns
        self._started_at: Optional[int] = None
        self._accumulated_ns = 0

    @classmethod
    def start_new(cls, timer: Optional[NanosecondTimer] = None) -> "StopWatch":
        """Create a stopwatch and start it immediately."""
        sw = cls(timer=timer)
        sw.start()
        return sw

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Start (or resume) timing. No effect if already running."""
        if self.is_running:
            return
        self._started_at = self._timer()
        logger.debug("Stopwatch started")

    def stop(self) -> None:
        """Stop timing and add the current run to the total. No effect if stopped."""
        if not self.is_running:
            return
        self._accumulated_ns += self._timer() - self._started_at
        self._started_at = None
        logger.debug("Stopwatch stopped after %d ns total", self._accumulated_ns)

    def reset(self) -> None:
        """Stop and clear all accumulated time."""
        self._started_at = None
        self._accumulated_ns = 0
        logger.debug("Stopwatch reset")

    def restart(self) -> None:
        """Clear accumulated time and start again."""
        self.reset()
        self.start()

    def elapsed_nanos(self) -> int:
        """
        Total elapsed nanoseconds.

        Includes the current run when the stopwatch is running, so it can be
        read without stopping.
        """
        if self.is_running:
            return self._accumulated_ns + (self._timer() - self._started_at)
        return self._accumulated_ns

    def elapsed(self) -> timedelta:
        """Total elapsed time as a timedelta (microsecond resolution)."""
        return timedelta(microseconds=self.elapsed_micros())

    def elapsed_micros(self) -> int:
        return self.elapsed_nanos() // 1_000

    def elapsed_millis(self) -> int:
        return self.elapsed_nanos() // 1_000_000

    def elapsed_seconds(self) -> float:
        return self.elapsed_nanos() / 1_000_000_000

    def __enter__(self) -> "StopWatch":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def __str__(self) -> str:
        seconds, millis = divmod(self.elapsed_millis(), 1000)
        return f"{seconds}.{millis:03d}s"

    def __repr__(self) -> str:
        return f"StopWatch(elapsed={self.elapsed()!r}, is_running={self.is_running})"
