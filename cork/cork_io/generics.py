# cork/cork_io/generics.py
# JSON file helpers & CLI error exit

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn, Union

from ..core.exceptions import JSONParsingError
from ..core.verbose import vlog


def ensure_parent(path: Union[Path, str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    Path(path).write_text(content, encoding="utf-8")
    vlog("FILE", f"Write: {path} ({len(content):,} bytes)")


# numbered lines around the failure, failing line marked w/ >>>
def _error_context(text: str, err: json.JSONDecodeError, radius: int = 2) -> str:
    lines = text.split("\n")
    first = max(1, err.lineno - radius)
    last = min(len(lines), err.lineno + radius)
    return "\n".join(
        f"{'>>> ' if n == err.lineno else '    '}{n:3}: {lines[n - 1]}"
        for n in range(first, last + 1)
    )


# * Read a JSON object; malformed or non-object content raises JSONParsingError
def read_json_safe(path: Path) -> dict[str, Any]:
    text = Path(path).read_text(encoding="utf-8")
    vlog("FILE", f"Read: {path} ({len(text):,} bytes)")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JSONParsingError(
            f"Invalid JSON in {path}:\n{_error_context(text, e)}\nError: {e.msg}"
        ) from e
    if not isinstance(data, dict):
        raise JSONParsingError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


# * Print a red error line & exit the CLI w/ `code`
def exit_with_error(msg: str, code: int = 1) -> NoReturn:
    import typer

    from ..core.exceptions import format_error_message
    from .console import console

    console.print(format_error_message("Error", msg))
    raise typer.Exit(code)
