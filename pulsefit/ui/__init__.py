"""UI package."""

from .interval_page import IntervalPage
from .metronome_page import MetronomePage
from .progress_ring import ProgressRing
from .stopwatch_page import StopwatchPage
from .styles import PhaseColors, DEFAULT_PHASE_COLORS, build_stylesheet

__all__ = [
    "IntervalPage",
    "MetronomePage",
    "ProgressRing",
    "StopwatchPage",
    "PhaseColors",
    "DEFAULT_PHASE_COLORS",
    "build_stylesheet",
]
