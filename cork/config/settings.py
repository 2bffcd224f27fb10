# cork/config/settings.py
# Configuration management for Cork including tick rate, display & lap behavior settings

import os
from pathlib import Path
from typing import Any, Dict, Optional
import typer
from dataclasses import asdict, dataclass, fields, replace

from ..cork_io.generics import read_json_safe, write_json_safe
from ..core.constants import TICK_INTERVAL
from ..core.exceptions import JSONParsingError, SettingsValidationError

CONFIG_PATH_ENV = "CORK_CONFIG_PATH"


# * Default settings dataclass for Cork w/ tick, display & lap configuration
@dataclass
class CorkSettings:
    # seconds between stopwatch/countdown recomputations
    tick_interval: float = TICK_INTERVAL

    # live display redraw rate
    refresh_per_second: int = 10

    # theme setting
    theme: str = "deep_blue"

    # reset the split boundary when laps are cleared
    clear_laps_resets_boundary: bool = False

    # show the in-progress split under the main readout
    show_current_split: bool = True

    # ring the terminal bell when a countdown finishes
    bell_on_finish: bool = True

    # dev mode setting (enables debug-level output)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if isinstance(self.tick_interval, bool) or not isinstance(
            self.tick_interval, (int, float)
        ):
            raise SettingsValidationError(
                f"tick_interval must be a number, got {type(self.tick_interval).__name__}",
                "tick_interval",
                self.tick_interval,
            )
        if not 0.01 <= self.tick_interval <= 1.0:
            raise SettingsValidationError(
                f"tick_interval must be 0.01-1.0 seconds, got {self.tick_interval}",
                "tick_interval",
                self.tick_interval,
            )

        if (
            isinstance(self.refresh_per_second, bool)
            or not isinstance(self.refresh_per_second, int)
            or not 1 <= self.refresh_per_second <= 60
        ):
            raise SettingsValidationError(
                f"refresh_per_second must be an integer 1-60, got {self.refresh_per_second}",
                "refresh_per_second",
                self.refresh_per_second,
            )

        from ..ui.theming.theme_definitions import THEMES

        if self.theme not in THEMES:
            raise SettingsValidationError(
                f"theme must be one of {sorted(THEMES)}, got '{self.theme}'",
                "theme",
                self.theme,
            )

        # strict bool validation (no coercion)
        for name in (
            "clear_laps_resets_boundary",
            "show_current_split",
            "bell_on_finish",
            "dev_mode",
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )


# * Resolve config path: explicit arg, then CORK_CONFIG_PATH, then ~/.cork/config.json
def default_config_path() -> Path:
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".cork" / "config.json"


# * Loads, caches & persists CorkSettings as JSON; every change is re-validated
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[CorkSettings] = None

    def load(self) -> CorkSettings:
        if self._settings is None:
            self._settings = self._read()
        return self._settings

    # missing file means defaults; a broken one warns & falls back to defaults
    def _read(self) -> CorkSettings:
        if not self.config_path.exists():
            return CorkSettings()
        try:
            return CorkSettings(**read_json_safe(self.config_path))
        except (JSONParsingError, TypeError, ValueError) as e:
            typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
            typer.echo("Using default settings")
            return CorkSettings()

    def save(self, settings: CorkSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

        from .dev_mode import reset_dev_mode_cache
        from ..ui.theming.theme_engine import reset_color_cache

        reset_dev_mode_cache()
        reset_color_cache()

    def get(self, key: str) -> Any:
        return getattr(self.load(), key, None)

    def set(self, key: str, value: Any) -> None:
        if key not in {f.name for f in fields(CorkSettings)}:
            raise ValueError(f"Unknown setting: {key}")
        # replace() re-runs __post_init__ validation before anything is written
        self.save(replace(self.load(), **{key: value}))

    def reset(self) -> None:
        self.save(CorkSettings())

    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


settings_manager = SettingsManager()


# * Settings for a command: explicit arg, then ctx.obj, then the root ctx.obj, then disk
def get_settings(
    ctx: typer.Context, provided: Optional[CorkSettings] = None
) -> CorkSettings:
    if provided is not None:
        return provided

    if isinstance(getattr(ctx, "obj", None), CorkSettings):
        return ctx.obj
    root = ctx.find_root() if hasattr(ctx, "find_root") else None
    if root is not None and isinstance(getattr(root, "obj", None), CorkSettings):
        return root.obj
    return settings_manager.load()
