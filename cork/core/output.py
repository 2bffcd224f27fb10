# cork/core/output.py
# Output levels, log records & the manager registry core modules log through
# * No console or file access here; cork/cli/output_manager.py provides the real backend

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * One structured log event: category tag, message & optional multi-line detail
@dataclass(frozen=True)
class LogRecord:
    level: OutputLevel
    category: str
    message: str
    detail: Optional[str] = None

    def detail_lines(self) -> list[str]:
        return self.detail.split("\n") if self.detail else []


@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def enabled(self, level: OutputLevel) -> bool: ...

    def emit(self, record: LogRecord) -> None: ...

    def info(self, msg: str) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Stand-in until the CLI registers a manager; drops every record
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def enabled(self, level: OutputLevel) -> bool:
        return False

    def emit(self, record: LogRecord) -> None:
        pass

    def info(self, msg: str) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# * Back to the null manager (test isolation)
def reset_output_manager() -> None:
    global _output_manager
    _output_manager = NullOutputManager()
