"""Lap stopwatch.

Pure bookkeeping over an injectable monotonic clock; the UI polls
:attr:`Stopwatch.elapsed` from its own refresh timer.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


MAX_LAPS = 200


@dataclass(frozen=True)
class Lap:
    number: int
    lap_time: float   # seconds since the previous lap
    elapsed: float    # seconds since start


class Stopwatch:
    """Start / pause / lap / reset stopwatch."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._accumulated: float = 0.0
        self._started_at: float | None = None
        self._laps: list[Lap] = []
        self._lap_counter: int = 0
        self._last_lap_elapsed: float = 0.0

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + (self._clock() - self._started_at)

    @property
    def current_lap(self) -> float:
        """Time on the lap in progress."""
        return self.elapsed - self._last_lap_elapsed

    @property
    def laps(self) -> list[Lap]:
        """Recorded laps, newest first."""
        return list(self._laps)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def pause(self) -> None:
        if self._started_at is None:
            return
        self._accumulated += self._clock() - self._started_at
        self._started_at = None

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None
        self._laps.clear()
        self._lap_counter = 0
        self._last_lap_elapsed = 0.0

    def lap(self) -> Lap | None:
        """Record a lap.  Only counts while running."""
        if not self.is_running:
            return None
        elapsed = self.elapsed
        self._lap_counter += 1
        lap = Lap(
            number=self._lap_counter,
            lap_time=elapsed - self._last_lap_elapsed,
            elapsed=elapsed,
        )
        self._last_lap_elapsed = elapsed
        self._laps.insert(0, lap)
        if len(self._laps) > MAX_LAPS:
            self._laps.pop()
        return lap

    def lap_or_reset(self) -> Lap | None:
        """LAP while running, RESET while paused."""
        if self.is_running:
            return self.lap()
        self.reset()
        return None

    @property
    def has_history(self) -> bool:
        """True when there is something for RESET to clear."""
        return self.elapsed > 0 or bool(self._laps)
