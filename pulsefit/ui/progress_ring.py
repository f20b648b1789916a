"""Circular progress ring widget rendered with QPainter.

- Arc starts at 12 o'clock and covers ``progress`` of the circle,
  so it shrinks clockwise as the phase counts down.
- Colour-coded by displayed phase (prep, workout, end overlay).
- Shows MM:SS in bold text at the centre plus a phase label.

The ring only renders :class:`~pulsefit.timer.engine.TimerSnapshot`
values pushed to it; it never reads engine state itself.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Phase, TimerSnapshot
from ..timer.timefmt import format_countdown
from .styles import DEFAULT_PHASE_COLORS, PHASE_LABELS, PhaseColors


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    # Ring geometry constants
    RING_DIAMETER = 260
    RING_THICKNESS = 10

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        colors: PhaseColors = DEFAULT_PHASE_COLORS,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 20, self.RING_DIAMETER + 20)

        self._colors = colors
        self._progress: float = 1.0
        self._phase: Phase = Phase.PREP
        self._time_text: str = "00:00"
        self._text_color = QColor("#F5F5F5")

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def arc_color(self) -> str:
        return self._colors.for_phase(self._phase)

    def show_snapshot(self, snapshot: TimerSnapshot) -> None:
        """Slot for ``IntervalTimerEngine.updated``."""
        self._progress = max(0.0, min(1.0, snapshot.progress))
        self._phase = snapshot.phase
        self._time_text = format_countdown(snapshot.remaining)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 20)
        radius = diameter / 2
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── base ring ────────────────────────────────────────────────
        track_pen = QPen(QColor(self._colors.track), thickness, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        color = QColor(self.arc_color)
        if self._progress > 0.001:
            arc_pen = QPen(color, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            start_angle = 90 * 16
            span_angle = -int(self._progress * 360 * 16)
            painter.drawArc(ring_rect, start_angle, span_angle)

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(48)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 14)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: phase label ─────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(14)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)
        painter.setPen(color)

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 32)
        painter.drawText(
            label_rect, Qt.AlignmentFlag.AlignCenter, PHASE_LABELS[self._phase],
        )

        painter.end()
