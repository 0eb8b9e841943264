"""Terminal rendering of a running countdown."""

from __future__ import annotations

from typing import Callable

import click

from visualtimer.core.timer import CountdownTimer


def format_remaining(seconds: float) -> str:
    """Format *seconds* as ``M:SS.t``, clamping negatives to zero."""
    tenths = int(max(seconds, 0.0) * 10)
    total, fraction = divmod(tenths, 10)
    return f"{total // 60}:{total % 60:02d}.{fraction}"


class TerminalView:
    """Redraws the timer on a single terminal line.

    Notifications arrive before the timer changes, so the view only marks
    itself dirty and reads the new state in :meth:`refresh`.
    """

    def __init__(
        self,
        timer: CountdownTimer,
        echo: Callable[..., None] = click.echo,
    ) -> None:
        self._timer = timer
        self._echo = echo
        self._dirty = True
        self._last: str | None = None
        timer.subscribe(self._mark_dirty)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def _mark_dirty(self) -> None:
        self._dirty = True

    def refresh(self) -> bool:
        """Redraw if anything changed.  Returns whether a line was written."""
        if not self._dirty:
            return False
        self._dirty = False
        text = format_remaining(self._timer.interval)
        if text == self._last:
            return False
        self._last = text
        self._echo(f"\r{text}", nl=False)
        return True

    def close(self) -> None:
        self._timer.unsubscribe(self._mark_dirty)
