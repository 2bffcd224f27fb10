# cork/core/timer_engine.py
# Stopwatch & countdown state machine w/ lap bookkeeping, tick-driven recomputation & change observers

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from .constants import COUNTDOWN_EPSILON, TICK_INTERVAL, TimerState
from .exceptions import LapIndexError
from .ticker import TickHandle, Ticker
from .verbose import dlog, vlog_countdown, vlog_lap, vlog_transition


# * Immutable view of engine state handed to observers & renderers
@dataclass(frozen=True)
class TimerSnapshot:
    state: TimerState
    start_time: float | None
    elapsed_time: float
    held_time: float
    laps: tuple[float, ...]
    previous_elapsed_time: float
    countdown_time: float
    countdown_active: bool

    @property
    def running(self) -> bool:
        return self.state is TimerState.RUNNING

    # in-progress split since the last lap boundary
    @property
    def current_split(self) -> float:
        return self.elapsed_time - self.previous_elapsed_time


Listener = Callable[[TimerSnapshot], None]


class TimerEngine:
    """Stopwatch w/ laps plus an independent countdown.

    Elapsed time is measured against ``clock`` (monotonic by default) and
    recomputed on each stopwatch tick; the countdown decrements by
    ``interval`` on each countdown tick & clears itself at zero. Both ticks
    come from ``ticker`` & may run at the same time.

    Every public operation & tick callback runs under one re-entrant lock, so
    a threaded ticker never races the caller. Listeners are called
    synchronously (under the lock) after each state change.
    """

    def __init__(
        self,
        ticker: Ticker | None = None,
        clock: Callable[[], float] = time.monotonic,
        interval: float = TICK_INTERVAL,
        clear_laps_resets_boundary: bool = False,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if ticker is None:
            from .ticker import ThreadTicker

            ticker = ThreadTicker()

        self._ticker = ticker
        self._clock = clock
        self.interval = interval
        self.clear_laps_resets_boundary = clear_laps_resets_boundary
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        self._state = TimerState.STOPPED
        self._start_time: float | None = None
        self._elapsed_time = 0.0
        self._held_time = 0.0
        self._laps: list[float] = []
        self._previous_elapsed_time = 0.0
        self._countdown_time = 0.0

        self._stopwatch_tick: TickHandle | None = None
        self._countdown_tick: TickHandle | None = None
        # bumped on every (re)schedule so ticks from released handles are ignored
        self._stopwatch_generation = 0
        self._countdown_generation = 0

    # read-only state

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is TimerState.RUNNING

    @property
    def start_time(self) -> float | None:
        return self._start_time

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def held_time(self) -> float:
        return self._held_time

    @property
    def laps(self) -> list[float]:
        with self._lock:
            return list(self._laps)

    @property
    def previous_elapsed_time(self) -> float:
        return self._previous_elapsed_time

    @property
    def current_split(self) -> float:
        with self._lock:
            return self._elapsed_time - self._previous_elapsed_time

    @property
    def countdown_time(self) -> float:
        return self._countdown_time

    @property
    def countdown_active(self) -> bool:
        return self._countdown_tick is not None

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return TimerSnapshot(
                state=self._state,
                start_time=self._start_time,
                elapsed_time=self._elapsed_time,
                held_time=self._held_time,
                laps=tuple(self._laps),
                previous_elapsed_time=self._previous_elapsed_time,
                countdown_time=self._countdown_time,
                countdown_active=self._countdown_tick is not None,
            )

    # observers

    # * Register a listener; returns a callable that unregisters it
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # stopwatch

    # * Start or resume counting from the current elapsed time (no-op while running)
    def start(self) -> None:
        with self._lock:
            if self._state is TimerState.RUNNING:
                return
            self._start_time = self._clock() - self._elapsed_time
            self._state = TimerState.RUNNING
            self._stopwatch_generation += 1
            generation = self._stopwatch_generation
            self._stopwatch_tick = self._ticker.schedule(
                self.interval, lambda: self._on_stopwatch_tick(generation)
            )
            vlog_transition("Started", self._elapsed_time)
            self._notify()

    # * Pause & freeze the held time (no-op while stopped)
    def stop(self) -> None:
        with self._lock:
            if self._state is not TimerState.RUNNING:
                return
            self._sync_elapsed()
            self._release_stopwatch_tick()
            self._held_time = self._elapsed_time
            self._start_time = None
            self._state = TimerState.STOPPED
            vlog_transition("Stopped", self._held_time)
            self._notify()

    # * Stop ticking & zero elapsed/held time & laps
    def reset(self) -> None:
        with self._lock:
            self._release_stopwatch_tick()
            self._state = TimerState.STOPPED
            self._start_time = None
            self._held_time = 0.0
            self._elapsed_time = 0.0
            self._previous_elapsed_time = 0.0
            self._laps = []
            vlog_transition("Reset", 0.0)
            self._notify()

    def _on_stopwatch_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._stopwatch_generation or self._state is not TimerState.RUNNING:
                return
            self._sync_elapsed()
            self._notify()

    def _sync_elapsed(self) -> None:
        if self._start_time is not None:
            self._elapsed_time = max(0.0, self._clock() - self._start_time)

    def _release_stopwatch_tick(self) -> None:
        if self._stopwatch_tick is not None:
            self._stopwatch_tick.cancel()
            self._stopwatch_tick = None
        self._stopwatch_generation += 1

    # laps

    # * Record the split since the previous lap (or since the start for the first lap)
    def add_lap(self) -> float:
        with self._lock:
            if self._state is TimerState.RUNNING:
                self._sync_elapsed()
            if not self._laps:
                split = self._elapsed_time
            else:
                split = self._elapsed_time - self._previous_elapsed_time
            self._laps.append(split)
            self._previous_elapsed_time = self._elapsed_time
            vlog_lap("Recorded", len(self._laps) - 1, split)
            self._notify()
            return split

    # * Remove a lap, merging its time into the next lap or back into the current split
    def remove_lap(self, index: int) -> float:
        with self._lock:
            if not 0 <= index < len(self._laps):
                raise LapIndexError(index, len(self._laps))
            removed = self._laps.pop(index)
            if index < len(self._laps):
                self._laps[index] += removed
                detail = f"merged into lap {index + 1}"
            else:
                self._previous_elapsed_time -= removed
                detail = "merged into current split"
            vlog_lap("Removed", index, removed, detail)
            self._notify()
            return removed

    # * Drop all laps; the split boundary is kept unless clear_laps_resets_boundary is set
    def clear_laps(self) -> None:
        with self._lock:
            self._laps = []
            if self.clear_laps_resets_boundary:
                self._previous_elapsed_time = 0.0
            self._notify()

    # countdown

    # * Begin a countdown of `duration` seconds; False if one is already running or duration is not a positive finite number
    def start_countdown(self, duration: float) -> bool:
        with self._lock:
            if self._countdown_tick is not None:
                return False
            if not math.isfinite(duration) or duration <= 0:
                vlog_countdown("Ignored invalid duration", duration)
                return False
            self._countdown_time = float(duration)
            self._countdown_generation += 1
            generation = self._countdown_generation
            self._countdown_tick = self._ticker.schedule(
                self.interval, lambda: self._on_countdown_tick(generation)
            )
            vlog_countdown("Started", self._countdown_time)
            self._notify()
            return True

    # * Stop the countdown & zero the remaining time (idempotent)
    def clear_countdown(self) -> None:
        with self._lock:
            was_active = self._countdown_tick is not None
            if self._countdown_tick is not None:
                self._countdown_tick.cancel()
                self._countdown_tick = None
            self._countdown_generation += 1
            changed = was_active or self._countdown_time != 0.0
            self._countdown_time = 0.0
            if changed:
                vlog_countdown("Cleared")
                self._notify()

    def _on_countdown_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._countdown_generation or self._countdown_tick is None:
                return
            self._countdown_time -= self.interval
            dlog("TICK", f"countdown remaining {self._countdown_time:.3f}s")
            if self._countdown_time <= COUNTDOWN_EPSILON:
                vlog_countdown("Finished")
                self.clear_countdown()
            else:
                self._notify()
