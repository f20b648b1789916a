"""Interval timer page (the Timer tab).

Layout (top → bottom):
    - Prep / Workout / End time entries (MM:SS)
    - ProgressRing (large, centred)
    - RESET and START/PAUSE buttons

The page owns the ``QTimer`` that drives :meth:`IntervalTimerEngine.tick`
and runs it only while the engine reports it is running.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QLineEdit, QSizePolicy,
)

from ..timer.engine import IntervalTimerEngine
from ..timer.timefmt import format_seconds, parse_time, sanitize_entry
from .progress_ring import ProgressRing
from .styles import DEFAULT_PHASE_COLORS, PhaseColors


DEFAULT_TICK_INTERVAL_MS = 16


class IntervalPage(QWidget):
    """Prep → workout interval timer with its configuration entries."""

    def __init__(
        self,
        engine: IntervalTimerEngine,
        parent: QWidget | None = None,
        *,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        colors: PhaseColors = DEFAULT_PHASE_COLORS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._colors = colors

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(max(1, tick_interval_ms))
        self._tick_timer.timeout.connect(self._engine.tick)

        self._build_ui()
        self._connect_signals()
        self._ring.show_snapshot(engine.snapshot())
        self._on_running_changed(engine.is_running)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── configuration entries ────────────────────────────────────
        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        config = self._engine.config
        self._entries: list[QLineEdit] = []
        for col, (title, seconds) in enumerate((
            ("PREP", config.prep),
            ("WORKOUT", config.workout),
            ("END", config.end),
        )):
            label = QLabel(title, self)
            label.setObjectName("mutedLabel")
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            entry = QLineEdit(format_seconds(seconds), self)
            entry.setAlignment(Qt.AlignmentFlag.AlignCenter)
            entry.setMaxLength(5)
            entry.setPlaceholderText("MM:SS")
            grid.addWidget(label, 0, col)
            grid.addWidget(entry, 1, col)
            self._entries.append(entry)
        self._prep_entry, self._workout_entry, self._end_entry = self._entries
        layout.addLayout(grid)

        # ── progress ring ────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self, colors=self._colors)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(300, 300)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("RESET", self)
        self._start_pause_btn = QPushButton("START", self)
        self._start_pause_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        for entry in self._entries:
            entry.textEdited.connect(
                lambda text, e=entry: self._on_entry_edited(e, text)
            )
            entry.editingFinished.connect(
                lambda e=entry: e.setText(format_seconds(parse_time(e.text())))
            )

        self._engine.updated.connect(self._ring.show_snapshot)
        self._engine.running_changed.connect(self._on_running_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_entry_edited(self, entry: QLineEdit, text: str) -> None:
        previous = entry.property("previousText") or ""
        clean = sanitize_entry(text, previous)
        if clean != text:
            entry.setText(clean)
            entry.setCursorPosition(len(clean))
        entry.setProperty("previousText", clean)
        self._push_config()

    def _push_config(self) -> None:
        self._engine.configure(
            parse_time(self._prep_entry.text()),
            parse_time(self._workout_entry.text()),
            parse_time(self._end_entry.text()),
        )

    def _on_running_changed(self, running: bool) -> None:
        if running:
            self._tick_timer.start()
            self._start_pause_btn.setText("PAUSE")
        else:
            self._tick_timer.stop()
            self._start_pause_btn.setText("START")
        # Re-polish so the [running="true"] stylesheet rule applies
        self._start_pause_btn.setProperty("running", running)
        self._start_pause_btn.style().unpolish(self._start_pause_btn)
        self._start_pause_btn.style().polish(self._start_pause_btn)

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def tick_timer(self) -> QTimer:
        return self._tick_timer
