"""Frame sources -- periodic callbacks paced to a display refresh.

A frame source holds a single subscriber and can be enabled and disabled any
number of times without resubscribing.  Once disposed it never calls back again.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60

FrameCallback = Callable[[], None]


class FrameSource(Protocol):
    @property
    def enabled(self) -> bool: ...

    @property
    def disposed(self) -> bool: ...

    def subscribe(self, callback: FrameCallback) -> None: ...

    def enable(self) -> None: ...

    def disable(self) -> None: ...

    def dispose(self) -> None: ...


class ManualFrameSource:
    """A frame source whose frames are delivered by calling :meth:`fire`.

    Starts disabled.  Useful for hosts that already own a render loop.
    """

    def __init__(self) -> None:
        self._callback: FrameCallback | None = None
        self._enabled = False
        self._disposed = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe(self, callback: FrameCallback) -> None:
        if self._disposed:
            raise RuntimeError("cannot subscribe to a disposed frame source")
        if self._callback is not None:
            raise RuntimeError("frame source already has a subscriber")
        self._callback = callback

    def enable(self) -> None:
        if self._disposed:
            return
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def dispose(self) -> None:
        if self._disposed:
            return
        self._enabled = False
        self._disposed = True
        self._callback = None
        logger.debug("frame source disposed")

    def fire(self) -> bool:
        """Deliver one frame.  Returns ``True`` if the subscriber was called."""
        if not self._enabled or self._disposed or self._callback is None:
            return False
        self._callback()
        return True


class PacedFrameSource(ManualFrameSource):
    """A frame source that runs its own loop at roughly *fps* frames per second."""

    def __init__(self, fps: int = DEFAULT_FPS) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        super().__init__()
        self._fps = fps
        self._frame_time = 1.0 / fps

    @property
    def fps(self) -> int:
        return self._fps

    def run(
        self,
        until: Callable[[], bool],
        after_frame: Callable[[], None] | None = None,
    ) -> int:
        """Drive frames on the calling thread until *until()* is true.

        *after_frame* runs after every delivered frame, which is where a view
        re-reads state.  Returns the number of frames delivered.
        """
        frames = 0
        while not self._disposed and not until():
            start = time.monotonic()
            if self.fire():
                frames += 1
                if after_frame is not None:
                    after_frame()
            elapsed = time.monotonic() - start
            sleep_time = self._frame_time - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        logger.debug("frame loop finished after %d frames", frames)
        return frames
