"""Time sources for the countdown timer.

Every wall-clock read the timer makes goes through a :class:`Clock`, so hosts
can supply ``time.monotonic()`` while tests drive time by hand.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current monotonic instant in seconds."""

    def now(self) -> float: ...


class SystemClock:
    """Clock backed by ``time.monotonic()``, immune to system clock changes."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """A clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        """Move the clock forward by *seconds* and return the new instant."""
        if seconds < 0:
            raise ValueError(f"cannot advance a clock backwards, got {seconds}")
        self._now += seconds
        return self._now

    def set(self, instant: float) -> None:
        self._now = float(instant)
