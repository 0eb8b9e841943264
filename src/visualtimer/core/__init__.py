from visualtimer.core.clock import Clock, ManualClock, SystemClock
from visualtimer.core.frames import FrameSource, ManualFrameSource, PacedFrameSource
from visualtimer.core.timer import CountdownTimer, Expired, Mode, Running, Stopped

__all__ = [
    "CountdownTimer",
    "Mode",
    "Stopped",
    "Running",
    "Expired",
    "Clock",
    "SystemClock",
    "ManualClock",
    "FrameSource",
    "ManualFrameSource",
    "PacedFrameSource",
]
