# cork/cli/commands/countdown.py
# Countdown command: count down a duration or until a wall-clock time

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.exceptions import InvalidDurationError
from ...core.formatting import describe_offset, format_duration, parse_clock_time, seconds_until
from ...core.output import get_output_manager
from ...cork_io.console import console, get_console
from ...cork_io.generics import exit_with_error
from ...ui.countdown_runner import run_countdown
from ...ui.theming.styled_helpers import styled_success_line
from ..app import app
from ..helpers import build_engine, parse_duration_arg


# * Count down DURATION (e.g. 90, 1:30, 5m) or until --until HH:MM
@app.command()
def countdown(
    ctx: typer.Context,
    duration: Optional[str] = typer.Argument(
        None, help="Duration: seconds, MM:SS, HH:MM:SS or units like 1h30m"
    ),
    until: Optional[str] = typer.Option(
        None, "--until", "-u", help="Count down to a 24h clock time today (HH:MM)"
    ),
) -> None:
    """Run a countdown; [cork.accent2]Ctrl+C[/] clears it."""
    if (duration is None) == (until is None):
        raise typer.BadParameter("Provide either DURATION or --until (not both)")

    target_label: str | None = None
    if until is not None:
        try:
            target = parse_clock_time(until)
        except InvalidDurationError as e:
            raise typer.BadParameter(str(e), param_hint="--until")
        seconds = seconds_until(target)
        if seconds <= 0:
            exit_with_error(
                f"Target time {until} has already passed ({describe_offset(seconds)})"
            )
        target_label = target.strftime("%H:%M")
    else:
        seconds = parse_duration_arg(duration)  # type: ignore[arg-type]
        if seconds <= 0:
            raise typer.BadParameter("Duration must be greater than zero", param_hint="DURATION")

    settings = get_settings(ctx)
    engine = build_engine(settings)

    get_output_manager().info(f"[dim]Counting down {format_duration(seconds)}[/]")
    finished = run_countdown(
        engine,
        seconds,
        get_console(),
        target_label=target_label,
        refresh_per_second=settings.refresh_per_second,
    )

    if finished:
        if settings.bell_on_finish:
            console.bell()
        console.print(*styled_success_line("Countdown finished"))
    else:
        console.print("[warning]Countdown cleared[/]")
