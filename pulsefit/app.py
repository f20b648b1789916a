"""Main application window for PulseFit."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QMainWindow, QTabWidget, QLineEdit, QApplication

from .timer.engine import IntervalTimerEngine, DEFAULT_CONFIG
from .timer.metronome import Metronome
from .timer.stopwatch import Stopwatch
from .ui.interval_page import IntervalPage
from .ui.stopwatch_page import StopwatchPage
from .ui.metronome_page import MetronomePage
from .ui.styles import build_stylesheet
from .settings import Settings, load_settings, save_settings
from .audio.sounds import SoundManager


logger = logging.getLogger(__name__)


class PulseFitApp(QMainWindow):
    """Main application window: Timer, Stopwatch and Metronome tabs."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("PulseFit")
        self.setMinimumSize(380, 640)

        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.window_x is not None and self._settings.window_y is not None:
            self.move(self._settings.window_x, self._settings.window_y)

        # ── models ────────────────────────────────────────────────────
        self._timer_engine = IntervalTimerEngine(self, config=DEFAULT_CONFIG)
        self._stopwatch = Stopwatch()
        self._metronome = Metronome(self, bpm=self._settings.metronome_bpm)

        # ── audio ─────────────────────────────────────────────────────
        self._sounds = sound_manager or SoundManager(parent=self)
        self._sounds.set_volume(self._settings.sound_volume)
        self._sounds.set_enabled(self._settings.sound_enabled)
        self._timer_engine.phase_signal.connect(self._sounds.on_phase_signal)
        self._metronome.beat.connect(self._sounds.on_beat)
        self._metronome.bpm_changed.connect(self._on_bpm_changed)

        # ── pages ─────────────────────────────────────────────────────
        self._tabs = QTabWidget(self)
        self._interval_page = IntervalPage(
            self._timer_engine, self,
            tick_interval_ms=self._settings.tick_interval_ms,
        )
        self._stopwatch_page = StopwatchPage(self._stopwatch, self)
        self._metronome_page = MetronomePage(self._metronome, self)
        self._tabs.addTab(self._interval_page, "Timer")
        self._tabs.addTab(self._stopwatch_page, "Stopwatch")
        self._tabs.addTab(self._metronome_page, "Metronome")
        self.setCentralWidget(self._tabs)

        self.setStyleSheet(build_stylesheet())

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Space:
            self._on_space()
            return
        if event.key() == Qt.Key.Key_Escape:
            self._on_escape()
            return
        super().keyPressEvent(event)

    def _on_space(self) -> None:
        """Start or pause the interval timer while its tab is shown."""
        if self._tabs.currentWidget() is not self._interval_page:
            return
        # No-op while the user is typing a duration
        if isinstance(QApplication.focusWidget(), QLineEdit):
            return
        self._timer_engine.toggle()

    def _on_escape(self) -> None:
        if self._tabs.currentWidget() is self._interval_page:
            self._timer_engine.reset()

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS / WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _on_bpm_changed(self, bpm: int) -> None:
        self._settings.metronome_bpm = bpm
        self._geometry_save_timer.start()

    def _save_geometry(self) -> None:
        """Persist current window geometry (and tempo) to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.pause()
        self._metronome.stop()
        self._save_geometry()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._geometry_save_timer.start()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._geometry_save_timer.start()

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def timer_engine(self) -> IntervalTimerEngine:
        return self._timer_engine

    @property
    def metronome(self) -> Metronome:
        return self._metronome

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch
