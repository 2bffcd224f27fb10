# cork/cli/helpers.py
# Shared CLI helpers: engine construction from settings & duration argument parsing

from __future__ import annotations

import typer

from ..config.settings import CorkSettings
from ..core.exceptions import InvalidDurationError
from ..core.formatting import parse_duration
from ..core.ticker import Ticker
from ..core.timer_engine import TimerEngine


# * Build a TimerEngine configured from settings (ticker injectable for tests & embedding)
def build_engine(settings: CorkSettings, ticker: Ticker | None = None) -> TimerEngine:
    return TimerEngine(
        ticker=ticker,
        interval=settings.tick_interval,
        clear_laps_resets_boundary=settings.clear_laps_resets_boundary,
    )


# * Parse a duration argument, reporting bad input as a Typer usage error
def parse_duration_arg(value: str, param_hint: str = "DURATION") -> float:
    try:
        return parse_duration(value)
    except InvalidDurationError as e:
        raise typer.BadParameter(str(e), param_hint=param_hint)
