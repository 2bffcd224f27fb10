# cork/cli/commands/format.py
# Format command: render durations the way the stopwatch displays them

from __future__ import annotations

from typing import List

import typer

from ...core.formatting import format_duration
from ...cork_io.console import console
from ..app import app
from ..helpers import parse_duration_arg


# * Print each DURATION in display format, one per line
@app.command(name="format")
def format_cmd(
    durations: List[str] = typer.Argument(
        ..., help="Durations: seconds, MM:SS, HH:MM:SS or units like 1h30m"
    ),
) -> None:
    """Render durations as the stopwatch would (e.g. 75.6 -> 01:15.6)."""
    for raw in durations:
        seconds = parse_duration_arg(raw)
        console.print(format_duration(seconds), highlight=False)
