# cork/config/dev_mode.py
# Dev mode lookup: CORK_DEV_MODE env override, then ctx settings, then cached config

from __future__ import annotations

import os
from typing import Optional

import typer

DEV_MODE_ENV = "CORK_DEV_MODE"
_TRUTHY = {"1", "true", "yes", "on"}

_cached_dev_mode: Optional[bool] = None


def _env_override() -> Optional[bool]:
    raw = os.environ.get(DEV_MODE_ENV)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


# * Whether DEBUG output may be enabled for this run
def is_dev_mode_enabled(ctx: Optional[typer.Context] = None) -> bool:
    """Resolve dev mode for the current invocation.

    A non-empty ``CORK_DEV_MODE`` wins over any stored setting. With a
    context the injected settings are read directly; otherwise the config
    file is read once & cached until ``reset_dev_mode_cache()``.
    """
    global _cached_dev_mode

    override = _env_override()
    if override is not None:
        return override

    if ctx is not None:
        from .settings import get_settings

        return get_settings(ctx).dev_mode

    if _cached_dev_mode is None:
        from .settings import settings_manager

        _cached_dev_mode = settings_manager.load().dev_mode
    return _cached_dev_mode


def reset_dev_mode_cache() -> None:
    global _cached_dev_mode
    _cached_dev_mode = None
