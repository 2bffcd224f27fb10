# cork/core/verbose.py
# Core logging helpers: stopwatch, lap & countdown events routed through the output registry

from __future__ import annotations

from pathlib import Path

from .output import LogRecord, OutputLevel, get_output_manager, set_output_manager


# * Map CLI flags onto the level to request; DEBUG only when dev mode allows it
def requested_level(enabled: bool, dev_mode: bool) -> OutputLevel:
    if not enabled:
        return OutputLevel.NORMAL
    return OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE


# * Register a console/file backed manager for this run
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level(enabled, dev_mode),
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


def _log(level: OutputLevel, category: str, message: str, detail: str | None = None) -> None:
    manager = get_output_manager()
    if manager.enabled(level):
        manager.emit(LogRecord(level, category, message, detail))


def vlog(category: str, message: str, detail: str | None = None) -> None:
    _log(OutputLevel.VERBOSE, category, message, detail)


# tick-level detail
def dlog(category: str, message: str) -> None:
    _log(OutputLevel.DEBUG, category, message)


def vlog_transition(action: str, elapsed: float) -> None:
    vlog("STOPWATCH", f"{action} at {elapsed:.1f}s")


def vlog_lap(action: str, index: int, split: float, detail: str | None = None) -> None:
    vlog("LAP", f"{action} lap {index + 1}: {split:.1f}s", detail)


def vlog_countdown(action: str, remaining: float | None = None) -> None:
    if remaining is None:
        vlog("COUNTDOWN", action)
    else:
        vlog("COUNTDOWN", f"{action} ({remaining:.1f}s)")
