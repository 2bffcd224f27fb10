# cork/ui/session.py
# Interactive stopwatch session: key handling, lap selection & live display loop

from __future__ import annotations

from typing import Callable

from readchar import key, readkey
from rich.console import Console
from rich.live import Live

from ..core.exceptions import LapIndexError
from ..core.formatting import format_duration
from ..core.timer_engine import TimerEngine, TimerSnapshot
from .timer_view import render_stopwatch

QUIT_KEYS = {"q", "Q", key.ESC, key.CTRL_C}
TOGGLE_KEYS = {" ", "s", "S"}
REMOVE_KEYS = {"x", "X", "d", "D", key.BACKSPACE, key.DELETE}


# * Maps key presses onto engine operations & tracks the selected lap
class StopwatchSession:
    def __init__(self, engine: TimerEngine, show_current_split: bool = True) -> None:
        self.engine = engine
        self.show_current_split = show_current_split
        self.selected: int | None = None
        self.message: str | None = None

    # returns False when the session should end
    def handle_key(self, k: str) -> bool:
        self.message = None
        if k in QUIT_KEYS:
            return False
        if k in TOGGLE_KEYS:
            self.toggle()
        elif k in ("l", "L"):
            split = self.engine.add_lap()
            self.selected = None
            self.message = f"[dim]Lap {len(self.engine.laps)}:[/] {format_duration(split)}"
        elif k in ("r", "R"):
            self.engine.reset()
            self.selected = None
        elif k in ("c", "C"):
            self.engine.clear_laps()
            self.selected = None
        elif k in (key.UP, "k"):
            self.move_selection(-1)
        elif k in (key.DOWN, "j"):
            self.move_selection(1)
        elif k in REMOVE_KEYS:
            self.remove_selected()
        return True

    def toggle(self) -> None:
        if self.engine.running:
            self.engine.stop()
        else:
            self.engine.start()

    # move selection through laps, wrapping; first press selects the newest lap
    def move_selection(self, step: int) -> None:
        count = len(self.engine.laps)
        if count == 0:
            self.selected = None
            return
        if self.selected is None:
            self.selected = count - 1
        else:
            self.selected = (self.selected + step) % count

    def remove_selected(self) -> None:
        if self.selected is None:
            self.message = "[warning]Select a lap with ↑/↓ first[/]"
            return
        try:
            removed = self.engine.remove_lap(self.selected)
        except LapIndexError as e:
            self.message = f"[error]{e}[/]"
            self.selected = None
            return
        self.message = f"[dim]Removed lap {self.selected + 1} ({format_duration(removed)})[/]"
        remaining = len(self.engine.laps)
        self.selected = min(self.selected, remaining - 1) if remaining else None

    def render(self):
        return render_stopwatch(
            self.engine.snapshot(),
            selected=self.selected,
            message=self.message,
            show_current_split=self.show_current_split,
        )

    # * Run until a quit key; Live redraws from render() while readkey blocks
    def run(
        self,
        console: Console,
        refresh_per_second: int = 10,
        read_key: Callable[[], str] | None = None,
    ) -> TimerSnapshot:
        if read_key is None:
            read_key = readkey
        with Live(
            console=console,
            get_renderable=self.render,
            refresh_per_second=refresh_per_second,
            transient=True,
        ):
            try:
                while self.handle_key(read_key()):
                    pass
            except KeyboardInterrupt:
                pass

        self.engine.stop()
        return self.engine.snapshot()
