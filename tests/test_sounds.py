"""Tests for settings and sound cues.

Covers:
- Settings dataclass defaults and JSON round-trip
- WAV synthesis for every cue
- SoundManager playback API and its phase-signal / beat slots
"""

from __future__ import annotations

import io
import json
import wave

import pytest

from pulsefit.settings import Settings, load_settings, save_settings
from pulsefit.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    _generate_beep_small,
    _generate_beep_big,
    _generate_click,
    _generate_accent,
)
from pulsefit.timer.engine import Phase, SignalStrength


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_tick_interval(self):
        assert Settings().tick_interval_ms == 16

    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_metronome_bpm(self):
        assert Settings().metronome_bpm == 120

    def test_no_timer_durations(self):
        s = Settings()
        assert not hasattr(s, "prep")
        assert not hasattr(s, "workout_duration")


class TestSettingsPersistence:
    def test_round_trip(self, app_home):
        save_settings(Settings(sound_volume=30, window_x=100, metronome_bpm=90))
        loaded = load_settings()
        assert loaded.sound_volume == 30
        assert loaded.window_x == 100
        assert loaded.window_y is None
        assert loaded.metronome_bpm == 90

    def test_missing_file_returns_defaults(self, app_home):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self, app_home):
        (app_home / "settings.json").write_text("{nope", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self, app_home):
        (app_home / "settings.json").write_text(
            json.dumps({"sound_volume": 40, "prep": 99}), encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.sound_volume == 40

    def test_legacy_window_keys_ignored(self, app_home):
        (app_home / "settings.json").write_text(
            json.dumps({"always_on_top": True, "window_width": 500}), encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.window_width == 500
        assert not hasattr(loaded, "always_on_top")

    def test_non_object_returns_defaults(self, app_home):
        (app_home / "settings.json").write_text("[1, 2]", encoding="utf-8")
        assert load_settings() == Settings()


# ═══════════════════════════════════════════════════════════════════════
#  SOUND GENERATION
# ═══════════════════════════════════════════════════════════════════════


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", [
        _generate_beep_small,
        _generate_beep_big,
        _generate_click,
        _generate_accent,
    ])
    def test_wav_is_parseable(self, gen_fn):
        data = gen_fn()
        assert data[:4] == b"RIFF"
        with wave.open(io.BytesIO(data), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 44100
            assert wf.getnframes() > 0

    def test_big_beep_is_longer_than_small(self):
        with wave.open(io.BytesIO(_generate_beep_small()), "rb") as small, \
                wave.open(io.BytesIO(_generate_beep_big()), "rb") as big:
            assert big.getnframes() > small.getnframes()


# ═══════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSoundManager:
    def test_wav_files_generated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_default_dir_under_app_home(self, app_home):
        SoundManager(parent=None)
        assert (app_home / "sounds" / "beep_big.wav").exists()

    def test_set_volume_clamps(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_volume(30)
        assert mgr.volume == 30
        mgr.set_volume(200)
        assert mgr.volume == 100
        mgr.set_volume(-10)
        assert mgr.volume == 0

    def test_all_sounds_loaded(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            assert name in mgr._effects

    def test_play_invalid_name_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.play("nonexistent_sound")

    @pytest.mark.parametrize("strength, expected", [
        (SignalStrength.SMALL, "beep_small"),
        (SignalStrength.BIG, "beep_big"),
    ])
    def test_phase_signal_maps_to_cue(self, tmp_path, monkeypatch, strength, expected):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        played: list[str] = []
        monkeypatch.setattr(mgr, "play", played.append)
        mgr.on_phase_signal(Phase.END, strength)
        assert played == [expected]

    def test_beat_accents_first_of_bar(self, tmp_path, monkeypatch):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        played: list[str] = []
        monkeypatch.setattr(mgr, "play", played.append)
        for count in range(1, 6):
            mgr.on_beat(count)
        assert played == [
            "metronome_accent",
            "metronome_click",
            "metronome_click",
            "metronome_click",
            "metronome_accent",
        ]

    def test_disabled_plays_nothing(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False
        mgr.play("beep_big")

    def test_blocked_cache_dir_plays_nothing(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        mgr = SoundManager(parent=None, sounds_dir=blocker / "sounds")
        assert mgr._effects == {}
        mgr.play("beep_big")
        mgr.on_phase_signal(Phase.END, SignalStrength.BIG)
