"""Stopwatch page with a lap list."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
)

from ..timer.stopwatch import Lap, Stopwatch
from ..timer.timefmt import format_elapsed


REFRESH_INTERVAL_MS = 50


def lap_text(lap: Lap) -> str:
    return f"Lap {lap.number:>3}    {format_elapsed(lap.lap_time)}    {format_elapsed(lap.elapsed)}"


class StopwatchPage(QWidget):
    """START/PAUSE plus a LAP button that turns into RESET while paused."""

    def __init__(
        self,
        stopwatch: Stopwatch | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._stopwatch = stopwatch or Stopwatch()

        self._refresh_timer = QTimer(self)
        self._refresh_timer.setInterval(REFRESH_INTERVAL_MS)
        self._refresh_timer.timeout.connect(self._refresh)

        self._build_ui()
        self._start_stop_btn.clicked.connect(self._on_start_stop)
        self._lap_btn.clicked.connect(self._on_lap)
        self._refresh()
        self._update_buttons()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        self._main_label = QLabel(self)
        self._main_label.setObjectName("bigTime")
        self._main_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._main_label)

        self._lap_label = QLabel(self)
        self._lap_label.setObjectName("mutedLabel")
        self._lap_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._lap_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        self._lap_btn = QPushButton("LAP", self)
        self._start_stop_btn = QPushButton("START", self)
        self._start_stop_btn.setObjectName("primaryButton")
        btn_row.addWidget(self._lap_btn)
        btn_row.addWidget(self._start_stop_btn)
        layout.addLayout(btn_row)

        self._lap_list = QListWidget(self)
        layout.addWidget(self._lap_list, 1)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_stop(self) -> None:
        self._stopwatch.toggle()
        if self._stopwatch.is_running:
            self._refresh_timer.start()
        else:
            self._refresh_timer.stop()
            self._refresh()
        self._update_buttons()

    def _on_lap(self) -> None:
        self._stopwatch.lap_or_reset()
        self._lap_list.clear()
        self._lap_list.addItems([lap_text(lap) for lap in self._stopwatch.laps])
        self._refresh()
        self._update_buttons()

    def _refresh(self) -> None:
        self._main_label.setText(format_elapsed(self._stopwatch.elapsed))
        self._lap_label.setText(f"Lap: {format_elapsed(self._stopwatch.current_lap)}")

    def _update_buttons(self) -> None:
        running = self._stopwatch.is_running
        self._start_stop_btn.setText("PAUSE" if running else "START")
        if running or not self._stopwatch.has_history:
            self._lap_btn.setText("LAP")
        else:
            self._lap_btn.setText("RESET")

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch
