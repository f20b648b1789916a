"""Tests for MM:SS parsing and formatting."""

import pytest

from pulsefit.timer.timefmt import (
    parse_time, format_seconds, format_countdown, format_elapsed, sanitize_entry,
)


class TestParseTime:

    @pytest.mark.parametrize("text, expected", [
        ("01:30", 90),
        ("1:05", 65),
        ("00:10", 10),
        ("45", 45),
        ("90", 90),
        ("10:", 600),
        (":15", 15),
        (" 02:00 ", 120),
    ])
    def test_valid(self, text, expected):
        assert parse_time(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "1:2:3"])
    def test_unparseable_is_zero(self, text):
        assert parse_time(text) == 0

    def test_non_digits_ignored_within_fields(self):
        assert parse_time("0a1:3b0") == 90


class TestFormat:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00"),
        (9, "00:09"),
        (60, "01:00"),
        (605, "10:05"),
        (3600, "60:00"),
        (-4, "00:00"),
    ])
    def test_format_seconds(self, seconds, expected):
        assert format_seconds(seconds) == expected

    def test_countdown_rounds_up(self):
        assert format_countdown(9.2) == "00:10"
        assert format_countdown(0.01) == "00:01"
        assert format_countdown(0.0) == "00:00"
        assert format_countdown(-1.0) == "00:00"

    def test_format_elapsed(self):
        assert format_elapsed(0) == "00:00:00.00"
        assert format_elapsed(61.257) == "00:01:01.25"
        assert format_elapsed(3725.5) == "01:02:05.50"


class TestSanitizeEntry:

    def test_strips_non_digits(self):
        assert sanitize_entry("1a:2b", "1:2") == "1:2"

    def test_auto_colon_after_two_digits(self):
        assert sanitize_entry("12", "1") == "12:"

    def test_no_auto_colon_when_deleting(self):
        assert sanitize_entry("12", "12:") == "12"

    def test_none_is_empty(self):
        assert sanitize_entry(None) == ""
