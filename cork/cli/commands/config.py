# cork/cli/commands/config.py
# `cork config` sub-app: show, get, set & reset settings; list themes

from __future__ import annotations

import difflib
import json
from dataclasses import asdict, fields
from typing import Any

import typer

from ...config.settings import CorkSettings, settings_manager
from ...cork_io.console import console
from ...ui.theming.styled_helpers import (
    settings_table,
    styled_change_line,
    styled_success_line,
)
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import accent_gradient, natural_gradient
from ..app import app

config_app = typer.Typer(rich_markup_mode="rich", help="[cork.accent2]Manage Cork settings[/]")
app.add_typer(config_app, name="config")

SETTING_KEYS = tuple(f.name for f in fields(CorkSettings))


# * Reject unknown keys as usage errors, suggesting the closest known key
def _require_key(key: str) -> str:
    if key in SETTING_KEYS:
        return key
    message = f"Unknown setting: {key}"
    close = difflib.get_close_matches(key, SETTING_KEYS, n=1)
    if close:
        message += f" (did you mean '{close[0]}'?)"
    raise typer.BadParameter(message, param_hint="KEY")


# CLI values are JSON when they parse as JSON (numbers, true/false), raw strings otherwise
def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Show current settings when no subcommand is given."""
    if ctx.invoked_subcommand is not None:
        return
    console.print(accent_gradient("Cork settings"))
    console.print(f"[dim]{settings_manager.config_path}[/]", highlight=False, soft_wrap=True)
    console.print()
    console.print(settings_table(settings_manager.list_settings(), asdict(CorkSettings())))
    console.print()
    console.print("[dim]Change one w/ [/][cork.accent2]cork config set KEY VALUE[/]")


@config_app.command()
def get(key: str) -> None:
    """Print one setting as JSON."""
    console.print(json.dumps(settings_manager.get(_require_key(key))), highlight=False)


@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    """Set a setting; VALUE is parsed as JSON when possible."""
    key = _require_key(key)
    old = settings_manager.get(key)
    new = _parse_value(value)
    try:
        settings_manager.set(key, new)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="VALUE")

    if key == "theme":
        from ...ui.theming.console_theme import refresh_theme

        refresh_theme()
    console.print(*styled_change_line(key, old, new))


@config_app.command()
def reset() -> None:
    """Restore default settings."""
    settings_manager.reset()
    console.print(*styled_success_line("Settings reset to defaults"))


@config_app.command()
def path() -> None:
    """Show the config file path."""
    console.print(str(settings_manager.config_path), highlight=False, soft_wrap=True)


@config_app.command()
def themes() -> None:
    """List color themes w/ a gradient swatch; * marks the active one."""
    current = settings_manager.get("theme")
    for name, colors in THEMES.items():
        marker = "[cork.accent]*[/]" if name == current else " "
        console.print(marker, natural_gradient(f"{name:<10} ██████████", colors))
    console.print()
    console.print("[dim]Change w/ [/][cork.accent2]cork config set theme NAME[/]")
