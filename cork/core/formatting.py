# cork/core/formatting.py
# Duration rendering & parsing helpers shared by the engine's consumers

from __future__ import annotations

import math
import re
from datetime import datetime

from .exceptions import InvalidDurationError

# absorbs float noise (e.g. 0.3 * 10 == 2.9999999999999996) before truncating to deciseconds
_TRUNCATION_SLACK = 1e-9

_UNIT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([hms])", re.IGNORECASE)
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


# * Render a duration as HH:MM:SS.F, MM:SS.F, SS.F or S.F (truncated, never rounded)
def format_duration(seconds: float) -> str:
    tenths = int(max(seconds, 0.0) * 10 + _TRUNCATION_SLACK)
    fraction = tenths % 10
    total = tenths // 10
    hours = total // 3600
    minutes = total // 60 % 60
    secs = total % 60

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}.{fraction}"
    elif minutes > 0:
        return f"{minutes:02d}:{secs:02d}.{fraction}"
    elif secs >= 10:
        return f"{secs:02d}.{fraction}"
    return f"{secs:d}.{fraction}"


# * Seconds from now until a wall-clock target (negative when target is in the past)
def seconds_until(target: datetime, now: datetime | None = None) -> float:
    if now is None:
        now = datetime.now(tz=target.tzinfo)
    return (target - now).total_seconds()


def _is_number(raw: str) -> bool:
    try:
        float(raw)
    except ValueError:
        return False
    return True


# * Parse "90", "1:30", "01:02:05", "1h30m" or "45s" into seconds
def parse_duration(text: str) -> float:
    raw = text.strip()
    if not raw:
        raise InvalidDurationError("Duration is empty", text)

    if ":" in raw:
        parts = raw.split(":")
        if len(parts) > 3:
            raise InvalidDurationError(f"Too many ':' fields in duration '{text}'", text)
        try:
            values = [float(p) for p in parts]
        except ValueError:
            raise InvalidDurationError(f"Invalid duration '{text}'", text)
        if not all(math.isfinite(v) and v >= 0 for v in values) or any(
            v >= 60 for v in values[1:]
        ):
            raise InvalidDurationError(
                f"Minutes & seconds must be 0-59 in duration '{text}'", text
            )
        total = 0.0
        for value in values:
            total = total * 60 + value
        return total

    if _is_number(raw):
        value = float(raw)
        if not math.isfinite(value) or value < 0:
            raise InvalidDurationError(
                f"Duration must be a finite, non-negative number: '{text}'", text
            )
        return value

    # unit form: every character must belong to a <number><unit> group
    compact = raw.replace(" ", "")
    matches = list(_UNIT_PATTERN.finditer(compact))
    if not matches or "".join(m.group(0) for m in matches) != compact:
        raise InvalidDurationError(f"Invalid duration '{text}'", text)
    units = [m.group(2).lower() for m in matches]
    if len(set(units)) != len(units):
        raise InvalidDurationError(f"Repeated unit in duration '{text}'", text)
    return sum(float(m.group(1)) * _UNIT_SECONDS[m.group(2).lower()] for m in matches)


# * Parse a 24h "HH:MM" clock time into a datetime on today's date
def parse_clock_time(text: str, now: datetime | None = None) -> datetime:
    match = _CLOCK_PATTERN.match(text.strip())
    if not match:
        raise InvalidDurationError(f"Invalid clock time '{text}' (expected HH:MM)", text)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidDurationError(f"Clock time out of range: '{text}'", text)
    if now is None:
        now = datetime.now()
    return now.replace(hour=hour, minute=minute, second=0, microsecond=0)


# * Format a signed offset from a target time for display (e.g. "in 01:15.0")
def describe_offset(seconds: float) -> str:
    if seconds < 0:
        return f"{format_duration(-seconds)} ago"
    return f"in {format_duration(seconds)}"


__all__ = [
    "format_duration",
    "seconds_until",
    "parse_duration",
    "parse_clock_time",
    "describe_offset",
]
