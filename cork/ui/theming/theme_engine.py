# cork/ui/theming/theme_engine.py
# Active palette lookup, gradient text & the Rich theme behind every cork.* style

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text
from rich.theme import Theme

from .theme_definitions import THEMES

DEFAULT_THEME = "deep_blue"


# * Status colors shared by every palette
class CorkColors:
    SUCCESS = "#10b981"
    WARNING = "#ffaa00"
    ERROR = "#ff4444"
    INFO = "#4488ff"
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"

    RUNNING = SUCCESS
    STOPPED = WARNING


# five accent stops of a theme, light to deep
@dataclass(frozen=True)
class Palette:
    name: str
    primary: str
    light: str
    secondary: str
    medium: str
    deep: str

    @classmethod
    def named(cls, name: str) -> "Palette":
        return cls(name, *THEMES.get(name, THEMES[DEFAULT_THEME]))

    def gradient(self) -> list[str]:
        return [self.primary, self.light, self.secondary, self.medium, self.deep]


_palette: Palette | None = None


def _configured_theme() -> str:
    # lazy import: settings imports this module to reset the cache
    from ...config.settings import settings_manager

    name = settings_manager.load().theme
    return name if name in THEMES else DEFAULT_THEME


# * Palette for the configured theme, cached until reset_color_cache()
def current_palette() -> Palette:
    global _palette
    if _palette is None:
        _palette = Palette.named(_configured_theme())
    return _palette


def reset_color_cache() -> None:
    global _palette
    _palette = None


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def _mix(a: str, b: str, t: float) -> str:
    ra, ga, ba = _hex_to_rgb(a)
    rb, gb, bb = _hex_to_rgb(b)
    r = round(ra + (rb - ra) * t)
    g = round(ga + (gb - ga) * t)
    bl = round(ba + (bb - ba) * t)
    return f"#{r:02x}{g:02x}{bl:02x}"


# * Color each character along the given stops (defaults to the active palette)
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    stops = colors if colors is not None else current_palette().gradient()
    if not text or not stops:
        return Text(text)
    if len(stops) == 1 or len(text) == 1:
        return Text(text, style=stops[0])

    result = Text()
    segments = len(stops) - 1
    last = len(text) - 1
    for i, char in enumerate(text):
        pos = i / last * segments
        seg = min(int(pos), segments - 1)
        result.append(char, style=_mix(stops[seg], stops[seg + 1], pos - seg))
    return result


def accent_gradient(text: str) -> Text:
    palette = current_palette()
    return natural_gradient(text, [palette.primary, palette.secondary, palette.deep])


# * Rich theme for the active palette; pushed on the shared console by refresh_theme()
def get_cork_theme() -> Theme:
    palette = current_palette()
    return Theme(
        {
            "success": CorkColors.SUCCESS,
            "warning": CorkColors.WARNING,
            "error": CorkColors.ERROR,
            "info": CorkColors.INFO,
            "dim": CorkColors.DIM,
            "debug": CorkColors.DEBUG,
            "cork.accent": palette.primary,
            "cork.accent2": palette.secondary,
            "cork.accent_deep": palette.deep,
            "cork.running": f"bold {CorkColors.RUNNING}",
            "cork.stopped": f"bold {CorkColors.STOPPED}",
            "cork.readout": f"bold {palette.primary}",
            "cork.selected": f"reverse bold {palette.primary}",
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=CorkColors.SUCCESS)


def styled_arrow() -> Text:
    return Text("->", style=current_palette().secondary)
