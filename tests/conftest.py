# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from cork.core.ticker import ManualTicker
from cork.core.timer_engine import TimerEngine
from tests.test_support.fake_clock import FakeClock


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    cork_dir = fake_home / ".cork"
    cork_dir.mkdir(parents=True)

    # Create minimal config.json w/ test defaults
    config_data = {
        "tick_interval": 0.1,
        "refresh_per_second": 10,
        "theme": "deep_blue",
        "clear_laps_resets_boundary": False,
        "show_current_split": True,
        "bell_on_finish": False,
        "dev_mode": False,
    }
    config_file = cork_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("CORK_CONFIG_PATH", raising=False)
    monkeypatch.delenv("CORK_DEV_MODE", raising=False)

    # ! reset global settings_manager state & point it at the isolated config
    from cork.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset caches that read settings
    from cork.config.dev_mode import reset_dev_mode_cache
    from cork.ui.theming.theme_engine import reset_color_cache

    reset_dev_mode_cache()
    reset_color_cache()

    # ! reset output manager to NullOutputManager for test isolation
    from cork.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ticker():
    return ManualTicker()


# * Engine wired to a fake clock & manual ticker so tests control time explicitly
@pytest.fixture
def engine(clock, ticker):
    return TimerEngine(ticker=ticker, clock=clock)
