"""Phased interval timer for PulseFit.

Phases
------
PREP          Get-ready countdown before the workout.
WORKOUT       The workout countdown itself.
END           Display-only overlay on the tail of WORKOUT, active while
              ``remaining <= min(end, workout)``.  Never stored as the
              engine's phase; see :func:`display_phase`.

Transitions
-----------
PREP → WORKOUT        remaining reaches 0 (overflow carried into workout)
WORKOUT → finished    remaining reaches 0 (clamped to 0, run stops)
Any → PREP            reset

Timing
------
The engine never owns a timer.  A tick source (``QTimer`` in the UI,
a fake clock in tests) calls :meth:`IntervalTimerEngine.tick`, and each
tick subtracts the *measured* wall-clock delta since the previous tick.
Irregular tick delivery therefore costs no accuracy, only display
smoothness.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    PREP = "prep"
    WORKOUT = "workout"
    END = "end"


class SignalStrength(Enum):
    SMALL = "small"
    BIG = "big"


# ── value types ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerConfig:
    """Prep / workout / end durations in seconds."""

    prep: float = 10
    workout: float = 60
    end: float = 10

    @classmethod
    def clamped(cls, prep: float, workout: float, end: float) -> "TimerConfig":
        """Build a config with negative durations treated as zero."""
        return cls(max(0.0, prep), max(0.0, workout), max(0.0, end))

    @property
    def effective_end(self) -> float:
        """Length of the END overlay; never longer than the workout."""
        return min(self.end, self.workout)

    def duration_for(self, phase: Phase) -> float:
        if phase == Phase.PREP:
            return self.prep
        return self.workout

    @property
    def total(self) -> float:
        return self.prep + self.workout


@dataclass(frozen=True)
class TimerSnapshot:
    """What a view needs to render one frame of the timer."""

    phase: Phase
    remaining: float
    progress: float
    is_running: bool


DEFAULT_CONFIG = TimerConfig(prep=10, workout=60, end=10)


def display_phase(phase: Phase, remaining: float, config: TimerConfig) -> Phase:
    """Project the authoritative phase onto what the user should see.

    WORKOUT shows as END once ``remaining`` is inside the trailing
    ``effective_end`` window.  The boundary itself is inclusive.
    """
    if phase == Phase.WORKOUT and remaining <= config.effective_end:
        return Phase.END
    return phase


# ── engine ────────────────────────────────────────────────────────────────


class IntervalTimerEngine(QObject):
    """Prep → workout interval timer with a trailing END overlay.

    Signals
    -------
    updated(snapshot: TimerSnapshot)
        Emitted once per accepted tick, and after reset / configure.
    phase_signal(phase: Phase, strength: SignalStrength)
        BIG when a phase runs out, SMALL for each second counted down
        inside the END overlay.  Always emitted before the tick's
        ``updated``.
    running_changed(is_running: bool)
        Emitted on every start / pause / finish / reset edge.
    finished()
        Emitted once when the workout phase runs out.
    """

    updated = pyqtSignal(object)
    phase_signal = pyqtSignal(object, object)
    running_changed = pyqtSignal(bool)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        config: TimerConfig = DEFAULT_CONFIG,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._config: TimerConfig = config
        self._pending: TimerConfig | None = None
        self._clock = clock

        # ── run state ─────────────────────────────────────────────────
        self._phase: Phase = Phase.PREP
        self._remaining: float = config.prep
        self._progress: float = 1.0
        self._running: bool = False
        self._finished: bool = False
        self._last_tick: float | None = None
        self._last_cue: int | None = None

        self._restore_initial()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> TimerConfig:
        """The configuration driving the current run."""
        return self._config

    @property
    def pending_config(self) -> TimerConfig | None:
        """Configuration received mid-run, applied on the next reset."""
        return self._pending

    @property
    def phase(self) -> Phase:
        """Authoritative phase: PREP or WORKOUT, never END."""
        return self._phase

    @property
    def displayed_phase(self) -> Phase:
        return display_phase(self._phase, self._remaining, self._config)

    @property
    def remaining(self) -> float:
        """Seconds left in the current phase (never negative)."""
        return max(0.0, self._remaining)

    @property
    def progress(self) -> float:
        """Fraction of the current phase still remaining, 1.0 → 0.0."""
        return self._progress

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_finished(self) -> bool:
        return self._finished

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.displayed_phase,
            remaining=self.remaining,
            progress=self._progress,
            is_running=self._running,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def configure(self, prep: float, workout: float, end: float) -> None:
        """Set new durations.

        While a run is active the new values are held back and only
        applied by :meth:`reset`.  Otherwise they apply at once and the
        timer rewinds to the start of PREP.
        """
        config = TimerConfig.clamped(prep, workout, end)
        if self._running:
            logger.info("configure() while running; deferring %s until reset", config)
            self._pending = config
            return
        self._config = config
        self._pending = None
        self._restore_initial()
        self.updated.emit(self.snapshot())

    def start(self) -> None:
        """Begin (or resume) counting down.  No-op if already running."""
        if self._running:
            return
        if self._finished:
            self._apply_pending()
            self._restore_initial()
        self._running = True
        self._last_tick = self._clock()
        logger.debug("start: phase=%s remaining=%.3f", self._phase.value, self._remaining)
        self.running_changed.emit(True)

    def pause(self) -> None:
        """Freeze the countdown.  Phase and remaining are kept exactly."""
        if not self._running:
            return
        self._running = False
        self._last_tick = None
        logger.debug("pause: phase=%s remaining=%.3f", self._phase.value, self._remaining)
        self.running_changed.emit(False)

    def toggle(self) -> None:
        """The START / PAUSE button."""
        if self._running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and rewind to the start of PREP with the latest config."""
        was_running = self._running
        self._running = False
        self._last_tick = None
        self._apply_pending()
        self._restore_initial()
        if was_running:
            self.running_changed.emit(False)
        self.updated.emit(self.snapshot())

    def tick(self) -> None:
        """Advance by the wall-clock time since the previous tick."""
        if not self._running:
            logger.debug("tick() ignored: timer not running")
            return

        now = self._clock()
        elapsed = max(0.0, now - self._last_tick)
        self._last_tick = now

        self._remaining -= elapsed
        if self._remaining <= 0:
            self._complete_phase()
        else:
            self._cue_end_window()

        self._update_progress()
        self.updated.emit(self.snapshot())

        if self._finished:
            self.running_changed.emit(False)
            self.finished.emit()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_phase(self) -> None:
        # One transition per tick.  If the overflow also swallows the
        # workout, the deficit stays in _remaining and the next tick
        # finishes the run.
        if self._phase == Phase.PREP:
            self._phase = Phase.WORKOUT
            self._remaining += self._config.workout
            self._last_cue = math.ceil(max(0.0, self._remaining))
            logger.info("prep complete; workout %.1fs", self._config.workout)
        else:
            self._remaining = 0.0
            self._running = False
            self._finished = True
            self._last_tick = None
            self._apply_pending()
            logger.info("workout complete")
        self._emit_signal(SignalStrength.BIG)

    def _cue_end_window(self) -> None:
        if self.displayed_phase != Phase.END:
            return
        whole = math.ceil(self._remaining)
        if whole != self._last_cue:
            self._last_cue = whole
            self._emit_signal(SignalStrength.SMALL)

    def _emit_signal(self, strength: SignalStrength) -> None:
        phase = self.displayed_phase
        logger.debug("signal %s phase=%s remaining=%.3f", strength.value, phase.value, self.remaining)
        self.phase_signal.emit(phase, strength)

    def _update_progress(self) -> None:
        duration = self._config.duration_for(self._phase)
        if duration <= 0:
            self._progress = 0.0
            return
        self._progress = max(0.0, min(1.0, self._remaining / duration))

    def _apply_pending(self) -> None:
        if self._pending is not None:
            self._config = self._pending
            self._pending = None

    def _restore_initial(self) -> None:
        self._phase = Phase.PREP
        self._remaining = self._config.prep
        self._finished = False
        self._last_cue = None
        self._update_progress()
