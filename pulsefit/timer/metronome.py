"""Metronome with tap tempo.

The metronome owns its own ``QTimer`` beat source; unlike the interval
engine it has no drift to correct, since every beat is independent.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── constants ─────────────────────────────────────────────────────────────

MIN_BPM = 30
MAX_BPM = 240
DEFAULT_BPM = 120
TAP_TIMEOUT = 2.0  # seconds of silence before tap tempo starts over
TAP_WINDOW = 8     # most recent intervals averaged


def clamp_bpm(bpm: float) -> int:
    return max(MIN_BPM, min(MAX_BPM, int(round(bpm))))


def interval_ms(bpm: int) -> int:
    """Milliseconds between beats at *bpm*."""
    return int(round(60000.0 / max(1, bpm)))


# ── tap tempo ─────────────────────────────────────────────────────────────


class TapTempo:
    """Estimate BPM from a series of taps.

    The first tap only arms the measurement.  A BPM is reported once two
    intervals have been measured.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last_tap: float | None = None
        self._intervals: list[float] = []

    def reset(self) -> None:
        self._last_tap = None
        self._intervals.clear()

    def tap(self) -> int | None:
        """Register a tap; return the new BPM when one is available."""
        now = self._clock()
        if self._last_tap is None or now - self._last_tap > TAP_TIMEOUT:
            self._last_tap = now
            self._intervals.clear()
            return None

        self._intervals.append(now - self._last_tap)
        self._last_tap = now
        del self._intervals[:-TAP_WINDOW]

        if len(self._intervals) < 2:
            return None
        avg = sum(self._intervals) / len(self._intervals)
        if avg <= 0:
            return None
        return clamp_bpm(60.0 / avg)


# ── metronome ─────────────────────────────────────────────────────────────


class Metronome(QObject):
    """Fixed-tempo beat generator.

    Signals
    -------
    beat(count: int)
        1-based beat number since the last start.
    bpm_changed(bpm: int)
    running_changed(is_running: bool)
    """

    beat = pyqtSignal(int)
    bpm_changed = pyqtSignal(int)
    running_changed = pyqtSignal(bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        bpm: int = DEFAULT_BPM,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._bpm: int = clamp_bpm(bpm)
        self._beat_count: int = 0
        self._tap = TapTempo(clock)

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms(self._bpm))
        self._qt_timer.timeout.connect(self._on_beat)

    @property
    def bpm(self) -> int:
        return self._bpm

    @property
    def beat_count(self) -> int:
        return self._beat_count

    @property
    def is_running(self) -> bool:
        return self._qt_timer.isActive()

    def set_bpm(self, bpm: float) -> None:
        """Change tempo; a running metronome picks it up immediately."""
        new_bpm = clamp_bpm(bpm)
        if new_bpm == self._bpm:
            return
        self._bpm = new_bpm
        self._qt_timer.setInterval(interval_ms(new_bpm))
        logger.debug("bpm=%d", new_bpm)
        self.bpm_changed.emit(new_bpm)

    def start(self) -> None:
        if self.is_running:
            return
        self._beat_count = 0
        self._qt_timer.start()
        self.running_changed.emit(True)

    def stop(self) -> None:
        if not self.is_running:
            return
        self._qt_timer.stop()
        self.running_changed.emit(False)

    def toggle(self) -> None:
        if self.is_running:
            self.stop()
        else:
            self.start()

    def tap(self) -> None:
        """Feed the tap-tempo button."""
        bpm = self._tap.tap()
        if bpm is not None:
            self.set_bpm(bpm)

    def _on_beat(self) -> None:
        self._beat_count += 1
        self.beat.emit(self._beat_count)
