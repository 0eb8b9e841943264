"""Timer core -- a frame-driven countdown state machine for a visual display."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from visualtimer.core.clock import Clock, SystemClock
from visualtimer.core.frames import FrameSource, ManualFrameSource

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60.0

ChangeHandler = Callable[[], None]


@dataclass(frozen=True)
class Stopped:
    """Timer is halted with *remaining* seconds left."""

    remaining: float

    def __post_init__(self) -> None:
        if not self.remaining >= 0:
            raise ValueError(f"remaining must not be negative, got {self.remaining}")

    @property
    def is_running(self) -> bool:
        return False


@dataclass(frozen=True)
class Running:
    """Timer is counting down and will expire at the *expires_at* instant."""

    expires_at: float

    @property
    def is_running(self) -> bool:
        return True


@dataclass(frozen=True)
class Expired:
    """Timer has reached zero."""

    @property
    def is_running(self) -> bool:
        return False


Mode = Union[Stopped, Running, Expired]


class CountdownTimer:
    """A countdown timer that backs a visual display.

    The timer owns a single :data:`Mode`.  While it is running, a frame source
    calls :meth:`tick` once per display refresh.  Observers registered with
    :meth:`subscribe` are told *before* every change and re-read ``mode`` or
    ``interval`` once the notification has returned.

    All time reads go through *clock*, so the timer itself never looks at the
    system clock.
    """

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        *,
        clock: Clock | None = None,
        frame_source: FrameSource | None = None,
    ) -> None:
        if not interval >= 0:
            raise ValueError(f"interval must not be negative, got {interval}")
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._frames: FrameSource = frame_source if frame_source is not None else ManualFrameSource()
        self._observers: list[ChangeHandler] = []
        self._mode: Mode = Stopped(float(interval))
        self._closed = False

        self._frames.disable()
        self._frames.subscribe(self.tick)

    # -- observers -----------------------------------------------------------

    def subscribe(self, handler: ChangeHandler) -> None:
        """Call *handler* just before every observable change."""
        self._observers.append(handler)

    def unsubscribe(self, handler: ChangeHandler) -> None:
        try:
            self._observers.remove(handler)
        except ValueError:
            pass

    def _will_change(self) -> None:
        for handler in list(self._observers):
            handler()

    # -- state ---------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        self._will_change()
        logger.debug("mode: %r -> %r", self._mode, mode)
        self._mode = mode
        if mode.is_running and not self._frames.enabled and not self._closed:
            self._frames.enable()
            logger.debug("mode set: frame source enabled")
        elif not mode.is_running and self._frames.enabled:
            self._frames.disable()
            logger.debug("mode set: frame source disabled")

    @property
    def is_running(self) -> bool:
        return self._mode.is_running

    @property
    def interval(self) -> float:
        """Seconds left on the timer.

        Live while running, frozen while stopped and ``0.0`` once expired.
        """
        mode = self._mode
        if isinstance(mode, Stopped):
            return mode.remaining
        if isinstance(mode, Running):
            return mode.expires_at - self._clock.now()
        if isinstance(mode, Expired):
            return 0.0
        raise TypeError(f"unknown timer mode {mode!r}")

    @interval.setter
    def interval(self, value: float) -> None:
        # Observers are told even when the value turns out to be invalid.
        self._will_change()
        if not value >= 0:
            logger.error("interval: ignored invalid value %s, must be >= 0", value)
        elif value == 0:
            self.mode = Expired()
        elif not self.is_running:
            self.mode = Stopped(float(value))
        else:
            self.mode = Running(self._clock.now() + value)

    # -- control -------------------------------------------------------------

    def start(self) -> None:
        """Start counting down, if the timer is stopped.

        An expired timer must be given a new ``interval`` before it can start.
        """
        mode = self._mode
        if not isinstance(mode, Stopped):
            return
        self.mode = Running(self._clock.now() + mode.remaining)

    def pause(self) -> None:
        """Freeze the remaining time, if the timer is running.

        Pausing after the deadline passed but before the next frame leaves the
        timer stopped at zero rather than expired.
        """
        if not self.is_running:
            return
        self.mode = Stopped(max(self.interval, 0.0))

    def tick(self) -> None:
        """Advance one display frame."""
        self._will_change()
        if self.interval <= 0:
            self.mode = Expired()

    # -- lifecycle -----------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the frame subscription.  Safe to call more than once."""
        if self._closed:
            return
        self._frames.disable()
        self._frames.dispose()
        self._closed = True
        logger.debug("timer closed")

    def __enter__(self) -> CountdownTimer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
