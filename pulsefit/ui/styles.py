"""QSS stylesheet, palette, and phase colours for PulseFit."""

from __future__ import annotations

from dataclasses import dataclass

from ..timer.engine import Phase


# ── phase colours (ring arc + label) ─────────────────────────────────────


@dataclass(frozen=True)
class PhaseColors:
    """Ring colours per displayed phase.  Immutable; pass a new one to
    the ring to re-theme it."""

    prep: str = "#9ACD32"      # yellow-green
    workout: str = "#2EA043"   # green
    end: str = "#FF9800"       # orange
    track: str = "#D3D3D3"     # light gray base ring

    def for_phase(self, phase: Phase) -> str:
        if phase == Phase.PREP:
            return self.prep
        if phase == Phase.END:
            return self.end
        return self.workout


DEFAULT_PHASE_COLORS = PhaseColors()

PHASE_LABELS: dict[Phase, str] = {
    Phase.PREP:    "PREP",
    Phase.WORKOUT: "WORKOUT",
    Phase.END:     "END",
}


# ── palette ──────────────────────────────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#121212",
    "bg_secondary": "#1E1E1E",
    "text":         "#F5F5F5",
    "text_muted":   "#9E9E9E",
    "accent":       "#FF9800",  # START button
    "accent_active": "#FFD600", # PAUSE / STOP button while running
    "border":       "#333333",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    /* ── buttons ────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-weight: 600;
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton[running="true"] {{
        background-color: {p['accent_active']};
    }}

    /* ── time entries ───────────────────────────── */
    QLineEdit {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 6px 10px;
        font-size: 18px;
    }}

    QLineEdit:disabled {{
        color: {p['text_muted']};
    }}

    QLabel#mutedLabel {{
        color: {p['text_muted']};
        font-size: 12px;
    }}

    QLabel#bigTime {{
        font-size: 44px;
        font-weight: 700;
    }}

    /* ── tabs ───────────────────────────────────── */
    QTabBar::tab {{
        background: {p['bg_secondary']};
        color: {p['text_muted']};
        padding: 10px 20px;
    }}

    QTabBar::tab:selected {{
        color: {p['text']};
        border-bottom: 2px solid {p['accent']};
    }}
    """
