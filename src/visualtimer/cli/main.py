"""CLI entry point for visualtimer.

Uses Click to expose the ``visualtimer`` command group.  The ``run`` command
hosts a :class:`CountdownTimer` on a paced frame source and draws it in the
terminal.
"""

from __future__ import annotations

import logging
import math
import sys

import click

import visualtimer
from visualtimer.cli.view import TerminalView, format_remaining
from visualtimer.core.clock import SystemClock
from visualtimer.core.frames import DEFAULT_FPS, PacedFrameSource
from visualtimer.core.timer import CountdownTimer

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _finite(ctx: click.Context, param: click.Parameter, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite number of seconds")
    return value


@click.group()
@click.version_option(version=visualtimer.__version__, prog_name="visualtimer")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """visualtimer: a countdown timer drawn once per frame."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command()
@click.argument("seconds", type=click.FloatRange(min=0), callback=_finite)
@click.option(
    "--fps",
    type=click.IntRange(1, 240),
    default=DEFAULT_FPS,
    show_default=True,
    help="Frames drawn per second.",
)
def run(seconds: float, fps: int) -> None:
    """Count down SECONDS seconds in the terminal."""
    frames = PacedFrameSource(fps)
    with CountdownTimer(seconds, clock=SystemClock(), frame_source=frames) as timer:
        view = TerminalView(timer)
        if seconds == 0:
            timer.interval = 0
        timer.start()
        try:
            frames.run(until=lambda: not timer.is_running, after_frame=view.refresh)
        except KeyboardInterrupt:
            timer.pause()
            click.echo(f"\nPaused at {format_remaining(timer.interval)} remaining", err=True)
            sys.exit(1)
        finally:
            view.close()
        view.refresh()
        click.echo("\nTimer expired")
