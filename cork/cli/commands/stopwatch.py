# cork/cli/commands/stopwatch.py
# Interactive stopwatch command w/ laps, driven by single-key input

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...cork_io.console import console, get_console
from ...ui.session import StopwatchSession
from ...ui.timer_view import render_summary
from ..app import app
from ..helpers import build_engine


# * Run the interactive stopwatch until q/esc; prints final time & laps on exit
@app.command()
def stopwatch(
    ctx: typer.Context,
    autostart: bool = typer.Option(
        False, "--autostart", "-a", help="Start counting immediately"
    ),
) -> None:
    """Interactive stopwatch: [cork.accent2]space[/] start/stop, [cork.accent2]l[/] lap, [cork.accent2]q[/] quit."""
    settings = get_settings(ctx)
    engine = build_engine(settings)
    session = StopwatchSession(engine, show_current_split=settings.show_current_split)

    if autostart:
        engine.start()

    try:
        final = session.run(get_console(), refresh_per_second=settings.refresh_per_second)
    finally:
        engine.reset()

    console.print(render_summary(final))
