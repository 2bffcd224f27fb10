# cork/ui/countdown_runner.py
# Live countdown display loop: polls the engine until the countdown clears or is interrupted

from __future__ import annotations

import time
from typing import Callable

from rich.console import Console
from rich.live import Live

from ..core.timer_engine import TimerEngine
from .timer_view import render_countdown


# * Start a countdown & block until it finishes (True) or Ctrl+C clears it (False)
def run_countdown(
    engine: TimerEngine,
    duration: float,
    console: Console,
    target_label: str | None = None,
    refresh_per_second: int = 10,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    if not engine.start_countdown(duration):
        return False

    poll = 1.0 / refresh_per_second
    with Live(
        render_countdown(engine.snapshot(), target_label),
        console=console,
        auto_refresh=False,
        transient=True,
    ) as live:
        try:
            while engine.countdown_active:
                sleep(poll)
                live.update(render_countdown(engine.snapshot(), target_label), refresh=True)
        except KeyboardInterrupt:
            engine.clear_countdown()
            return False
    return True
