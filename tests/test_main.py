"""Tests for the entry point's log-level handling."""

from __future__ import annotations

import logging

import pytest

from pulsefit.__main__ import log_level


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    (" error ", logging.ERROR),
    (None, logging.WARNING),
    ("", logging.WARNING),
    ("verbose", logging.WARNING),
    ("Level 5", logging.WARNING),
])
def test_log_level(name, expected):
    assert log_level(name) == expected
