"""Metronome page: BPM slider, tap tempo, and a pulsing beat indicator."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QFrame,
)

from ..timer.metronome import Metronome, MIN_BPM, MAX_BPM


PULSE_MS = 120


class MetronomePage(QWidget):
    """View over a :class:`Metronome`."""

    def __init__(self, metronome: Metronome, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._metronome = metronome
        self._build_ui()

        self._slider.valueChanged.connect(self._metronome.set_bpm)
        self._start_stop_btn.clicked.connect(self._metronome.toggle)
        self._tap_btn.clicked.connect(self._metronome.tap)
        self._metronome.bpm_changed.connect(self._on_bpm_changed)
        self._metronome.running_changed.connect(self._on_running_changed)
        self._metronome.beat.connect(self._on_beat)

        self._pulse_off = QTimer(self)
        self._pulse_off.setSingleShot(True)
        self._pulse_off.setInterval(PULSE_MS)
        self._pulse_off.timeout.connect(lambda: self._set_pulse(False))

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._pulse = QFrame(self)
        self._pulse.setFixedSize(160, 160)
        self._set_pulse(False)
        pulse_row = QHBoxLayout()
        pulse_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pulse_row.addWidget(self._pulse)
        layout.addLayout(pulse_row)

        self._bpm_label = QLabel(str(self._metronome.bpm), self)
        self._bpm_label.setObjectName("bigTime")
        self._bpm_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._bpm_label)

        self._slider = QSlider(Qt.Orientation.Horizontal, self)
        self._slider.setRange(MIN_BPM, MAX_BPM)
        self._slider.setValue(self._metronome.bpm)
        layout.addWidget(self._slider)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        self._tap_btn = QPushButton("TAP", self)
        self._start_stop_btn = QPushButton("START", self)
        self._start_stop_btn.setObjectName("primaryButton")
        btn_row.addWidget(self._tap_btn)
        btn_row.addWidget(self._start_stop_btn)
        layout.addLayout(btn_row)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_bpm_changed(self, bpm: int) -> None:
        self._bpm_label.setText(str(bpm))
        if self._slider.value() != bpm:
            self._slider.blockSignals(True)
            self._slider.setValue(bpm)
            self._slider.blockSignals(False)

    def _on_running_changed(self, running: bool) -> None:
        self._start_stop_btn.setText("STOP" if running else "START")
        if not running:
            self._pulse_off.stop()
            self._set_pulse(False)

    def _on_beat(self, count: int) -> None:
        self._set_pulse(True)
        self._pulse_off.start()

    def _set_pulse(self, on: bool) -> None:
        alpha = 0.18 if on else 0.08
        self._pulse.setStyleSheet(
            f"background-color: rgba(255, 152, 0, {alpha}); border-radius: 80px;"
        )

    @property
    def bpm_label(self) -> QLabel:
        return self._bpm_label

    @property
    def slider(self) -> QSlider:
        return self._slider
