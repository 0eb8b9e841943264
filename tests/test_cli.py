"""Tests for the visualtimer CLI layer."""

from __future__ import annotations

import logging
from unittest.mock import patch

import click.testing
import pytest

from visualtimer.cli.main import cli
from visualtimer.core.clock import ManualClock
from visualtimer.core.frames import PacedFrameSource


@pytest.fixture()
def runner() -> click.testing.CliRunner:
    """Return a Click CliRunner for invoking CLI commands."""
    return click.testing.CliRunner()


class _InterruptedFrameSource(PacedFrameSource):
    """Behaves as if the user pressed Ctrl-C on the first frame."""

    def run(self, until, after_frame=None) -> int:
        raise KeyboardInterrupt


# ---------------------------------------------------------------------------
# visualtimer run
# ---------------------------------------------------------------------------


class TestRunCommand:
    """Tests for ``visualtimer run <seconds>``."""

    def test_run_counts_down_to_expiry(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "0.05", "--fps", "240"])
        assert result.exit_code == 0
        assert "0:00.0" in result.output
        assert "Timer expired" in result.output

    def test_run_zero_seconds_expires_immediately(
        self, runner: click.testing.CliRunner
    ) -> None:
        result = runner.invoke(cli, ["run", "0"])
        assert result.exit_code == 0
        assert "\r0:00.0" in result.output
        assert "Timer expired" in result.output

    def test_run_missing_argument(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run"])
        assert result.exit_code != 0

    def test_run_invalid_argument(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "abc"])
        assert result.exit_code != 0

    def test_run_negative_seconds_rejected(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "--", "-5"])
        assert result.exit_code != 0

    @pytest.mark.parametrize("seconds", ["nan", "inf"])
    def test_run_non_finite_seconds_rejected(
        self, runner: click.testing.CliRunner, seconds: str
    ) -> None:
        result = runner.invoke(cli, ["run", seconds])
        assert result.exit_code == 2
        assert "not a finite number of seconds" in result.output

    def test_run_fps_out_of_range(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "10", "--fps", "0"])
        assert result.exit_code != 0

    @patch("visualtimer.cli.main.SystemClock", ManualClock)
    @patch("visualtimer.cli.main.PacedFrameSource", _InterruptedFrameSource)
    def test_interrupt_pauses(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["run", "90"])
        assert result.exit_code == 1
        assert "Paused at 1:30.0 remaining" in result.output


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


class TestGlobalOptions:
    def test_version_output(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @patch("visualtimer.cli.main.logging.basicConfig")
    def test_log_level_configures_logging(
        self, mock_basic_config, runner: click.testing.CliRunner
    ) -> None:
        result = runner.invoke(cli, ["--log-level", "debug", "run", "0"])
        assert result.exit_code == 0
        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_invalid_log_level(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "loud", "run", "0"])
        assert result.exit_code != 0
