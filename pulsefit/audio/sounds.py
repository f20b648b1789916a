"""Sound synthesis and playback using numpy + QSoundEffect.

All cues are generated programmatically as WAV files using sine-wave
synthesis with ADSR envelopes.  Files are cached to disk so subsequent
app launches are instant.

Sound names
-----------
- ``beep_small``        — short tick for each second of the END countdown
- ``beep_big``          — long two-tone beep when a phase runs out
- ``metronome_click``   — regular metronome beat
- ``metronome_accent``  — first beat of each bar
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..settings import APP_SUPPORT_DIR
from ..timer.engine import Phase, SignalStrength


logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = (
    "beep_small",
    "beep_big",
    "metronome_click",
    "metronome_accent",
)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    # Attack
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    # Decay
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    # Sustain
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    # Release
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_beep_small() -> bytes:
    """Countdown tick: 120 ms at 880 Hz, crisp attack."""
    tone = _sine(880.0, 0.12) * 0.5
    env = _make_envelope(len(tone), attack=60, decay=600, sustain_level=0.5, release=1500)
    return _to_wav_bytes(np.concatenate([tone * env, _silence(0.03)]))


def _generate_beep_big() -> bytes:
    """Phase over: 600 ms at 1320 Hz with an octave-down body."""
    duration = 0.6
    tone = _sine(1320.0, duration) * 0.45 + _sine(660.0, duration) * 0.2
    env = _make_envelope(
        len(tone),
        attack=120,
        decay=int(SAMPLE_RATE * 0.05),
        sustain_level=0.8,
        release=int(SAMPLE_RATE * 0.2),
    )
    return _to_wav_bytes(np.concatenate([tone * env, _silence(0.05)]))


def _generate_click(freq: float = 1500.0, level: float = 0.35) -> bytes:
    """Metronome click, very short and percussive."""
    duration = 0.02
    n_samples = int(SAMPLE_RATE * duration)
    tick = _sine(freq, duration) * level
    env = _make_envelope(n_samples, attack=20, decay=80, sustain_level=0.0, release=n_samples - 100)
    # Pad with silence so QSoundEffect doesn't clip
    return _to_wav_bytes(np.concatenate([tick * env, _silence(0.03)]))


def _generate_accent() -> bytes:
    """Accented metronome click, higher and louder."""
    return _generate_click(freq=2200.0, level=0.55)


# Map sound names to generator functions
_GENERATORS: dict[str, callable] = {
    "beep_small": _generate_beep_small,
    "beep_big": _generate_beep_big,
    "metronome_click": _generate_click,
    "metronome_accent": _generate_accent,
}

_STRENGTH_TO_SOUND: dict[SignalStrength, str] = {
    SignalStrength.SMALL: "beep_small",
    SignalStrength.BIG: "beep_big",
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Manages sound synthesis, caching, and playback.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        engine.phase_signal.connect(mgr.on_phase_signal)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    def on_phase_signal(self, phase: Phase, strength: SignalStrength) -> None:
        """Slot for ``IntervalTimerEngine.phase_signal``."""
        logger.debug("cue %s for %s", strength.value, phase.value)
        self.play(_STRENGTH_TO_SOUND[strength])

    def on_beat(self, count: int, beats_per_bar: int = 4) -> None:
        """Slot for ``Metronome.beat``; accents the first beat of a bar."""
        if beats_per_bar > 0 and (count - 1) % beats_per_bar == 0:
            self.play("metronome_accent")
        else:
            self.play("metronome_click")

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory.

        An unwritable cache only costs the affected cues; they stay silent.
        """
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create sound cache %s: %s", self._sounds_dir, exc)
            return
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                continue
            try:
                path.write_bytes(gen_fn())
            except OSError as exc:
                logger.warning("Could not write sound cue %s: %s", path, exc)

    def _load_effects(self) -> None:
        """Create QSoundEffect instances from cached WAV files."""
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                logger.warning("Missing sound cue %s", path)
                continue
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[name] = effect
