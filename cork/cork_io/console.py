# cork/cork_io/console.py
# Process-wide Rich console behind a swappable proxy
#
# Modules import `console` once; configure_console() & reset_console() replace the
# Console underneath so those references stay valid. The Cork theme is pushed by
# refresh_theme() from the root callback. Live displays take the real Console from get_console().

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console


class _ConsoleProxy:
    __slots__ = ("_target",)

    def __init__(self, target: Console) -> None:
        self._target = target

    def __getattr__(self, name: str) -> Any:
        return getattr(self._target, name)

    @property
    def target(self) -> Console:
        return self._target

    def swap(self, target: Console) -> Console:
        self._target = target
        return target


console = _ConsoleProxy(Console())


# * Underlying Console (tests may patch `console` w/ a plain Console)
def get_console() -> Console:
    target = getattr(console, "target", None)
    if isinstance(target, Console):
        return target
    return console  # type: ignore[return-value]


# * Swap in a Console built w/ the given options; no options keeps the current one
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    record: bool = False,
) -> Console:
    options: dict[str, Any] = {}
    if width is not None:
        options["width"] = width
    if force_terminal is not None:
        options["force_terminal"] = force_terminal
    if record:
        options["record"] = True
    if not options:
        return console.target
    return console.swap(Console(**options))


def reset_console() -> Console:
    return console.swap(Console())


__all__ = ["console", "get_console", "configure_console", "reset_console"]
