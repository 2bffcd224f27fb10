# cork/ui/theming/styled_helpers.py
# Pre-composed styling for config & status output

from __future__ import annotations

import json
from typing import Any, Mapping

from rich.table import Table

from .theme_engine import CorkColors, natural_gradient, styled_arrow, styled_checkmark


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + label [+ arrow + value], for ``console.print(*parts)``."""
    parts: list[Any] = [styled_checkmark(), natural_gradient(label, [CorkColors.SUCCESS])]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


# old -> new for a changed setting
def styled_change_line(key: str, old: Any, new: Any) -> list:
    return [
        styled_checkmark(),
        f"[bold]{key}[/]",
        f"[dim]{_plain(old)}[/]",
        styled_arrow(),
        format_setting_value(new),
    ]


def format_setting_value(value: Any) -> str:
    if isinstance(value, str):
        return f'[cork.accent2]"{value}"[/]'
    if isinstance(value, bool):
        return f"[cork.accent2]{str(value).lower()}[/]"
    if isinstance(value, (int, float)):
        return f"[cork.accent2]{value}[/]"
    return f"[cork.accent2]{json.dumps(value)}[/]"


def _plain(value: Any) -> str:
    return f'"{value}"' if isinstance(value, str) else json.dumps(value)


# * Settings table; values differing from defaults are marked w/ *
def settings_table(current: Mapping[str, Any], defaults: Mapping[str, Any]) -> Table:
    table = Table(box=None, pad_edge=False, show_header=True, header_style="dim")
    table.add_column("", width=1)
    table.add_column("Setting", style="bold", no_wrap=True)
    table.add_column("Value", no_wrap=True)
    table.add_column("Default", style="dim", no_wrap=True)
    for key, value in current.items():
        default = defaults.get(key)
        marker = "[cork.accent]*[/]" if value != default else ""
        table.add_row(marker, key, format_setting_value(value), _plain(default))
    return table
