"""Tests for the metronome and tap tempo."""

import pytest

from pulsefit.timer.metronome import (
    Metronome, TapTempo, MIN_BPM, MAX_BPM, DEFAULT_BPM, clamp_bpm, interval_ms,
)

from helpers import SignalCollector


def _tap_every(tapper, clock, seconds, count):
    results = []
    for i in range(count):
        if i:
            clock.advance(seconds)
        results.append(tapper.tap())
    return results


class TestHelpers:

    def test_clamp(self):
        assert clamp_bpm(10) == MIN_BPM
        assert clamp_bpm(999) == MAX_BPM
        assert clamp_bpm(99.6) == 100

    def test_interval(self):
        assert interval_ms(120) == 500
        assert interval_ms(60) == 1000


class TestTapTempo:

    def test_needs_two_intervals(self, clock):
        tapper = TapTempo(clock)
        assert _tap_every(tapper, clock, 0.5, 3) == [None, None, 120]

    def test_average_of_intervals(self, clock):
        tapper = TapTempo(clock)
        tapper.tap()
        clock.advance(0.5)
        tapper.tap()
        clock.advance(1.0)
        assert tapper.tap() == 80

    def test_long_pause_restarts(self, clock):
        tapper = TapTempo(clock)
        _tap_every(tapper, clock, 0.5, 3)
        clock.advance(5)
        assert tapper.tap() is None
        clock.advance(1.0)
        assert tapper.tap() is None
        clock.advance(1.0)
        assert tapper.tap() == 60

    def test_clamped_to_range(self, clock):
        tapper = TapTempo(clock)
        assert _tap_every(tapper, clock, 0.1, 3)[-1] == MAX_BPM

    def test_slow_taps(self, clock):
        tapper = TapTempo(clock)
        assert _tap_every(tapper, clock, 1.9, 3)[-1] == 32


@pytest.mark.usefixtures("qapp")
class TestMetronome:

    def test_defaults(self):
        m = Metronome()
        assert m.bpm == DEFAULT_BPM
        assert m.is_running is False

    def test_initial_bpm_clamped(self):
        assert Metronome(bpm=500).bpm == MAX_BPM

    def test_set_bpm_emits(self):
        m = Metronome()
        c = SignalCollector()
        m.bpm_changed.connect(c)
        m.set_bpm(90)
        m.set_bpm(90)
        assert c.items == [90]
        assert m._qt_timer.interval() == interval_ms(90)

    def test_start_stop(self):
        m = Metronome()
        c = SignalCollector()
        m.running_changed.connect(c)
        m.start()
        m.start()
        assert m.is_running is True
        m.stop()
        m.stop()
        assert m.is_running is False
        assert c.items == [True, False]

    def test_toggle(self):
        m = Metronome()
        m.toggle()
        assert m.is_running is True
        m.toggle()
        assert m.is_running is False

    def test_beats_count_from_one_after_start(self):
        m = Metronome()
        c = SignalCollector()
        m.beat.connect(c)
        m.start()
        m._on_beat()
        m._on_beat()
        m.stop()
        m.start()
        m._on_beat()
        m.stop()
        assert c.items == [1, 2, 1]

    def test_tap_updates_bpm(self, clock):
        m = Metronome(clock=clock)
        for i in range(3):
            if i:
                clock.advance(0.4)
            m.tap()
        assert m.bpm == 150
