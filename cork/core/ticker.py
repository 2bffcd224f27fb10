# cork/core/ticker.py
# Periodic tick scheduling w/ cancellable handles (threaded & manually-driven)

from __future__ import annotations

import threading
import time
from typing import Callable, Protocol, runtime_checkable

TickCallback = Callable[[], None]


# * Handle for a scheduled periodic tick; cancel() releases it
@runtime_checkable
class TickHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


# * Scheduler that invokes a callback every `interval` seconds until cancelled
@runtime_checkable
class Ticker(Protocol):
    def schedule(self, interval: float, callback: TickCallback) -> TickHandle: ...


# periodic tick running on its own daemon thread
class _ThreadTick:
    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self.callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name="cork-tick", daemon=True)

    @property
    def active(self) -> bool:
        return not self._cancelled.is_set()

    def start(self) -> None:
        self._thread.start()

    # ticks are due on a fixed schedule; callback time & wait overshoot do not push later ticks back
    def _run(self) -> None:
        next_due = time.monotonic() + self.interval
        while not self._cancelled.wait(max(0.0, next_due - time.monotonic())):
            self.callback()
            next_due += self.interval

    # never joins: cancel may run on the tick thread itself or under the engine lock
    def cancel(self) -> None:
        self._cancelled.set()


# * Ticker backed by one daemon thread per handle
class ThreadTicker:
    def schedule(self, interval: float, callback: TickCallback) -> _ThreadTick:
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        tick = _ThreadTick(interval, callback)
        tick.start()
        return tick


# tick fired explicitly by ManualTicker.advance()
class _ManualTick:
    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self.callback = callback
        self.fired = 0
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def fire(self) -> None:
        if self._active:
            self.fired += 1
            self.callback()

    def cancel(self) -> None:
        self._active = False


# * Ticker driven by the caller (host event loop or tests); nothing fires on its own
class ManualTicker:
    def __init__(self) -> None:
        self._ticks: list[_ManualTick] = []

    def schedule(self, interval: float, callback: TickCallback) -> _ManualTick:
        tick = _ManualTick(interval, callback)
        self._ticks.append(tick)
        return tick

    @property
    def active_handles(self) -> list[_ManualTick]:
        return [t for t in self._ticks if t.active]

    # fire every active handle `ticks` times; handles cancelled mid-round are skipped
    def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            for tick in self.active_handles:
                tick.fire()
            self._ticks = [t for t in self._ticks if t.active]
