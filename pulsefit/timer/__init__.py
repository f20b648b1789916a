"""Timer package."""

from .engine import (
    IntervalTimerEngine,
    TimerConfig,
    TimerSnapshot,
    Phase,
    SignalStrength,
    DEFAULT_CONFIG,
    display_phase,
)
from .metronome import Metronome, TapTempo, MIN_BPM, MAX_BPM, DEFAULT_BPM
from .stopwatch import Stopwatch, Lap, MAX_LAPS
from .timefmt import (
    parse_time,
    format_seconds,
    format_countdown,
    format_elapsed,
    sanitize_entry,
)

__all__ = [
    "IntervalTimerEngine",
    "TimerConfig",
    "TimerSnapshot",
    "Phase",
    "SignalStrength",
    "DEFAULT_CONFIG",
    "display_phase",
    "Metronome",
    "TapTempo",
    "MIN_BPM",
    "MAX_BPM",
    "DEFAULT_BPM",
    "Stopwatch",
    "Lap",
    "MAX_LAPS",
    "parse_time",
    "format_seconds",
    "format_countdown",
    "format_elapsed",
    "sanitize_entry",
]
