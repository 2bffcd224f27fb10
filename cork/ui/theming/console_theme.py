# cork/ui/theming/console_theme.py
# Keeps the shared console's pushed theme in sync w/ the configured palette

from __future__ import annotations

from rich.theme import ThemeStackError

from ...cork_io.console import console


# * Re-read the theme setting & replace the pushed theme (first call just pushes)
def refresh_theme() -> None:
    from .theme_engine import get_cork_theme, reset_color_cache

    reset_color_cache()
    try:
        console.pop_theme()
    except ThemeStackError:
        pass
    console.push_theme(get_cork_theme())
