"""Parsing and formatting of the ``MM:SS`` time text used across the app."""

from __future__ import annotations

import math


def _to_int(field: str) -> int:
    digits = "".join(ch for ch in field if ch.isdigit())
    return int(digits) if digits else 0


def parse_time(text: str | None) -> int:
    """Turn ``"MM:SS"`` or bare ``"SS"`` into whole seconds.

    Anything unparseable counts as 0 rather than raising.
    """
    if text is None or not text.strip():
        return 0
    parts = text.strip().split(":")
    if len(parts) == 2:
        return _to_int(parts[0]) * 60 + _to_int(parts[1])
    if len(parts) == 1:
        return _to_int(parts[0])
    return 0


def format_seconds(seconds: float) -> str:
    """``MM:SS`` for a whole number of seconds (negative shows as 00:00)."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def format_countdown(remaining: float) -> str:
    """Countdown text, rounded up so ``00:00`` only shows at the very end."""
    return format_seconds(math.ceil(max(0.0, remaining)))


def format_elapsed(seconds: float) -> str:
    """Stopwatch text: ``HH:MM:SS.cc``."""
    centis = int(max(0.0, seconds) * 100)
    secs, cc = divmod(centis, 100)
    minutes, ss = divmod(secs, 60)
    hh, mm = divmod(minutes, 60)
    return f"{hh:02d}:{mm:02d}:{ss:02d}.{cc:02d}"


def sanitize_entry(text: str | None, previous: str | None = "") -> str:
    """Clean up a time entry as the user types.

    Keeps digits and ``:`` only, and inserts the colon automatically
    when the second digit is typed into an empty field.
    """
    clean = "".join(ch for ch in (text or "") if ch.isdigit() or ch == ":")
    if len(clean) == 2 and len(previous or "") == 1 and ":" not in clean:
        return clean + ":"
    return clean
