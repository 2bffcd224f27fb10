# cork/ui/timer_view.py
# Rich renderables for the stopwatch readout, lap table & countdown panel

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.formatting import format_duration
from ..core.timer_engine import TimerSnapshot

KEY_HINTS = (
    "[cork.accent2]space[/] start/stop  [cork.accent2]l[/] lap  "
    "[cork.accent2]r[/] reset  [cork.accent2]c[/] clear laps  "
    "[cork.accent2]↑/↓[/] select  [cork.accent2]x[/] remove  [cork.accent2]q[/] quit"
)


# * Big elapsed readout colored by running state
def render_readout(snapshot: TimerSnapshot) -> Text:
    style = "cork.running" if snapshot.running else "cork.stopped"
    return Text(format_duration(snapshot.elapsed_time), style=style, justify="center")


# * Lap table w/ split & running total per lap; `selected` row is highlighted
def render_laps_table(laps: tuple[float, ...], selected: int | None = None) -> Table:
    table = Table(box=None, expand=True, show_edge=False, pad_edge=False)
    table.add_column("Lap", style="dim", justify="right", width=4)
    table.add_column("Split", justify="right")
    table.add_column("Total", style="dim", justify="right")

    total = 0.0
    for i, lap in enumerate(laps):
        total += lap
        row_style = "cork.selected" if i == selected else None
        table.add_row(f"{i + 1}", format_duration(lap), format_duration(total), style=row_style)
    return table


# * Full stopwatch panel: readout, optional current split, laps, status & key hints
def render_stopwatch(
    snapshot: TimerSnapshot,
    selected: int | None = None,
    message: str | None = None,
    show_current_split: bool = True,
    show_hints: bool = True,
) -> Panel:
    parts: list[RenderableType] = [render_readout(snapshot)]

    if show_current_split and snapshot.laps:
        parts.append(
            Text(
                f"current split {format_duration(max(snapshot.current_split, 0.0))}",
                style="dim",
                justify="center",
            )
        )

    if snapshot.laps:
        parts.append(Text(""))
        parts.append(render_laps_table(snapshot.laps, selected))

    if message:
        parts.append(Text(""))
        parts.append(Text.from_markup(message, justify="center"))

    if show_hints:
        parts.append(Text(""))
        parts.append(Text.from_markup(KEY_HINTS, style="dim", justify="center"))

    state_label = "running" if snapshot.running else "stopped"
    return Panel(
        Group(*parts),
        title="[cork.accent]Stopwatch[/]",
        subtitle=f"[dim]{state_label}[/]",
        border_style="cork.accent2",
    )


# * Countdown panel: remaining time or a finished/cleared notice
def render_countdown(snapshot: TimerSnapshot, target_label: str | None = None) -> Panel:
    if snapshot.countdown_active:
        body = Group(
            Text("Time Remaining:", justify="center"),
            Text(
                format_duration(snapshot.countdown_time),
                style="cork.readout",
                justify="center",
            ),
        )
    else:
        body = Group(Text("No countdown running", style="dim", justify="center"))

    subtitle = f"[dim]until {target_label}[/]" if target_label else None
    return Panel(
        body,
        title="[cork.accent]Countdown[/]",
        subtitle=subtitle,
        border_style="cork.accent2",
    )


# * Final summary printed after a stopwatch session ends
def render_summary(snapshot: TimerSnapshot) -> RenderableType:
    header = Text.assemble(
        ("Final time ", "dim"), (format_duration(snapshot.elapsed_time), "cork.readout")
    )
    if not snapshot.laps:
        return header
    return Group(header, render_laps_table(snapshot.laps))
