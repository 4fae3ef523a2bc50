"""Elapsed wall-clock time since a fixed reference instant.

An application creates one :class:`ElapsedClock` at start-up and hands it
to the components that measure elapsed time.  The reference instant is
captured once at construction and never changes, so a clock can be read
from any number of threads.
"""

from __future__ import annotations

import time
from typing import Callable


class ElapsedClock:
    """Seconds elapsed since the clock was created.

    Args:
        time_source: Monotonic time function in seconds.
            Default: ``time.monotonic``
    """

    __slots__ = ("_time_source", "_started_at")

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._started_at = time_source()

    @property
    def started_at(self) -> float:
        """Reading of the time source when the clock was created."""
        return self._started_at

    def seconds_since_start(self) -> float:
        """Return the seconds elapsed since the clock was created."""
        return self._time_source() - self._started_at

    def __repr__(self) -> str:
        return f"ElapsedClock(started_at={self._started_at})"
