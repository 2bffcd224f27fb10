# cork/cli/output_manager.py
# Rich console & log file backend for the core output registry
#
# * Registered via set_output_manager() from init_verbose() in the root callback

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console

from ..core.output import LogRecord, OutputLevel

CATEGORY_STYLES = {
    "STOPWATCH": "cork.accent",
    "LAP": "cork.accent2",
    "COUNTDOWN": "cork.accent2",
}
RULE = "=" * 60


# * Resolve the level actually used: --quiet wins, DEBUG is capped at VERBOSE w/o dev mode
def effective_level(requested: OutputLevel, dev_mode: bool, quiet: bool) -> OutputLevel:
    if quiet:
        return OutputLevel.QUIET
    ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
    return min(requested, ceiling)


# append-only plain text log, flushed per line
class _LogFile:
    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self._handle: TextIO | None = open(path, "a", encoding="utf-8")

    def write(self, line: str) -> None:
        if self._handle is not None:
            self._handle.write(f"{line}\n")
            self._handle.flush()

    def banner(self, *lines: str) -> None:
        self.write(f"\n{RULE}")
        for line in lines:
            self.write(line)
        self.write(f"{RULE}\n")

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


class OutputManager:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._started: float | None = None
        self._log: _LogFile | None = None

    @property
    def console(self) -> Console:
        if self._console is not None:
            return self._console
        from ..cork_io.console import get_console

        return get_console()

    @property
    def log_file_path(self) -> Path | None:
        return self._log.path if self._log is not None else None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = effective_level(requested_level, dev_mode, quiet)
        self._started = time.monotonic()
        self.cleanup()
        if log_file is not None:
            self._log = _LogFile(log_file)

    def get_level(self) -> OutputLevel:
        return self._level

    def enabled(self, level: OutputLevel) -> bool:
        return self._level >= level

    def emit(self, record: LogRecord) -> None:
        if not self.enabled(record.level):
            return
        stamp = self._stamp()
        if record.level >= OutputLevel.DEBUG:
            tag = f"[debug]\\[{record.category}][/]"
        else:
            style = CATEGORY_STYLES.get(record.category, "bold")
            tag = f"[dim]\\[{stamp}][/] [{style}]\\[{record.category}][/]"
        self.console.print(f"{tag} {record.message}", highlight=False)
        for line in record.detail_lines():
            self.console.print(f"  [dim]{line}[/]", highlight=False)

        if self._log is not None:
            self._log.write(f"[{stamp}] [{record.category}] {record.message}")
            for line in record.detail_lines():
                self._log.write(f"  {line}")

    def info(self, msg: str) -> None:
        if self.enabled(OutputLevel.NORMAL):
            self.console.print(msg)

    def start_session(self) -> None:
        self._started = time.monotonic()
        if self._log is not None:
            lines = [f"Session Started: {datetime.now().isoformat()}", f"Level: {self._level.name}"]
            if self._dev_mode:
                lines.append("Mode: Developer (dev_mode enabled)")
            self._log.banner(*lines)

    def end_session(self) -> None:
        if self._log is not None:
            self._log.banner(f"Session Ended: {datetime.now().isoformat()}")
        self.cleanup()

    def cleanup(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None

    def _stamp(self) -> str:
        if self._started is None:
            return "0.00s"
        return f"{time.monotonic() - self._started:.2f}s"
