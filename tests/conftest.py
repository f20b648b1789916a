"""Shared pytest fixtures for PulseFit tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pulsefit.timer.engine import IntervalTimerEngine, TimerConfig

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def app_home(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real home directory."""
    monkeypatch.setattr("pulsefit.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("pulsefit.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("pulsefit.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield tmp_path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(qapp, clock):
    """Engine with the default 10 / 60 / 10 configuration."""
    return IntervalTimerEngine(parent=None, clock=clock)


@pytest.fixture
def short_engine(qapp, clock):
    """Engine configured 2 / 5 / 2, small enough to walk tick by tick."""
    return IntervalTimerEngine(
        parent=None, config=TimerConfig(prep=2, workout=5, end=2), clock=clock,
    )
