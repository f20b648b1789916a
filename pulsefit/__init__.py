"""PulseFit: interval timer, stopwatch and metronome for workouts."""

__version__ = "0.1.0"
