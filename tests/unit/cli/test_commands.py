# tests/unit/cli/test_commands.py
# CLI tests for stopwatch, countdown, format & config commands

import json
from datetime import datetime, timedelta
from functools import partial

import pytest
from typer.testing import CliRunner

from cork.cli.app import app
from cork.config.settings import settings_manager
from cork.core.ticker import ManualTicker
from cork.core.timer_engine import TimerEngine
from cork.ui import countdown_runner

runner = CliRunner()


# * Verify bare invocation prints quick usage
def test_no_subcommand_shows_usage():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "cork stopwatch" in result.stdout
    assert "cork countdown" in result.stdout


class TestFormatCommand:

    # * Verify each duration renders in display format
    def test_formats_durations(self):
        result = runner.invoke(app, ["format", "0.4", "12.3", "75.6", "3725", "1h2m5s"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["0.4", "12.3", "01:15.6", "01:02:05.0", "01:02:05.0"]

    # * Verify invalid input is a usage error
    def test_invalid_duration(self):
        result = runner.invoke(app, ["format", "soon"])
        assert result.exit_code == 2


class TestCountdownCommand:

    @pytest.fixture
    def manual_engine(self, monkeypatch):
        ticker = ManualTicker()
        engine = TimerEngine(ticker=ticker)
        monkeypatch.setattr(
            "cork.cli.commands.countdown.build_engine", lambda settings: engine
        )
        monkeypatch.setattr(
            "cork.cli.commands.countdown.run_countdown",
            partial(countdown_runner.run_countdown, sleep=lambda s: ticker.advance()),
        )
        return engine

    # * Verify a duration countdown runs to completion
    def test_duration_countdown(self, manual_engine):
        result = runner.invoke(app, ["countdown", "1.5"])
        assert result.exit_code == 0
        assert "Countdown finished" in result.stdout
        assert manual_engine.countdown_active is False

    # * Verify --until counts down to a future clock time
    def test_until_future_time(self, manual_engine, monkeypatch):
        now = datetime(2024, 2, 15, 9, 59, 59)
        monkeypatch.setattr(
            "cork.cli.commands.countdown.parse_clock_time",
            lambda text: datetime(2024, 2, 15, 10, 0),
        )
        monkeypatch.setattr(
            "cork.cli.commands.countdown.seconds_until",
            lambda target: (target - now).total_seconds(),
        )

        result = runner.invoke(app, ["countdown", "--until", "10:00"])

        assert result.exit_code == 0
        assert "Countdown finished" in result.stdout

    # * Verify a target time in the past is rejected
    def test_until_past_time(self, manual_engine):
        past = (datetime.now() - timedelta(minutes=5)).strftime("%H:%M")
        if past > datetime.now().strftime("%H:%M"):
            pytest.skip("Crossed midnight; past time would land on today's future")

        result = runner.invoke(app, ["countdown", "--until", past])

        assert result.exit_code == 1
        assert "already passed" in result.stdout
        assert manual_engine.countdown_active is False

    # * Verify exactly one of DURATION / --until is required
    @pytest.mark.parametrize("args", [["countdown"], ["countdown", "5", "--until", "10:00"]])
    def test_requires_one_source(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 2

    # * Verify zero & malformed durations are usage errors
    @pytest.mark.parametrize("args", [["countdown", "0"], ["countdown", "later"], ["countdown", "--until", "25:00"]])
    def test_bad_values(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 2


class TestStopwatchCommand:

    # * Verify the session runs from key input & prints a summary
    def test_session_summary(self, monkeypatch):
        keys = iter(["l", "l", "q"])
        monkeypatch.setattr("cork.ui.session.readkey", lambda: next(keys))
        monkeypatch.setattr(
            "cork.cli.commands.stopwatch.build_engine",
            lambda settings: TimerEngine(ticker=ManualTicker()),
        )

        result = runner.invoke(app, ["stopwatch"])

        assert result.exit_code == 0
        assert "Final time" in result.stdout
        assert "Lap" in result.stdout


class TestConfigCommand:

    # * Verify listing shows every setting & the config path
    def test_list(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "tick_interval" in result.stdout
        assert "clear_laps_resets_boundary" in result.stdout

    # * Verify get prints JSON
    def test_get(self):
        result = runner.invoke(app, ["config", "get", "tick_interval"])
        assert result.exit_code == 0
        assert json.loads(result.stdout.strip()) == 0.1

    # * Verify set coerces JSON & persists
    def test_set(self):
        result = runner.invoke(app, ["config", "set", "clear_laps_resets_boundary", "true"])
        assert result.exit_code == 0
        data = json.loads(settings_manager.config_path.read_text())
        assert data["clear_laps_resets_boundary"] is True

    # * Verify invalid values & unknown keys are rejected
    @pytest.mark.parametrize(
        "args",
        [
            ["config", "set", "tick_interval", "5"],
            ["config", "set", "theme", "rainbow"],
            ["config", "set", "nope", "1"],
            ["config", "get", "nope"],
        ],
    )
    def test_rejects_bad_input(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 2

    # * Verify set shows old & new values
    def test_set_shows_change(self):
        result = runner.invoke(app, ["config", "set", "refresh_per_second", "30"])
        assert result.exit_code == 0
        assert "refresh_per_second" in result.stdout
        assert "10" in result.stdout
        assert "30" in result.stdout

    # * Verify typos get a suggestion
    def test_unknown_key_suggestion(self):
        result = runner.invoke(app, ["config", "get", "tick_intervl"])
        assert result.exit_code == 2
        assert "tick_interval" in result.output

    # * Verify listing marks values changed from defaults
    def test_list_marks_changed(self):
        runner.invoke(app, ["config", "set", "theme", "mint"])
        result = runner.invoke(app, ["config"])
        assert "*" in result.stdout
        assert "\"mint\"" in result.stdout

    # * Verify reset restores defaults
    def test_reset(self):
        runner.invoke(app, ["config", "set", "theme", "mint"])
        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert settings_manager.load().theme == "deep_blue"

    # * Verify path prints the config location
    def test_path(self):
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert "config.json" in result.stdout

    # * Verify themes lists every palette
    def test_themes(self):
        result = runner.invoke(app, ["config", "themes"])
        assert result.exit_code == 0
        assert "cork_oak" in result.stdout
        assert "mono" in result.stdout


# * Verify --log-file writes a session log around the command
def test_log_file_option(tmp_path):
    log_file = tmp_path / "logs" / "cork.log"
    result = runner.invoke(app, ["--log-file", str(log_file), "format", "5"])
    assert result.exit_code == 0
    content = log_file.read_text(encoding="utf-8")
    assert "Session Started" in content
    assert "Level: VERBOSE" in content
    assert "Session Ended" in content
