"""Tests for the arithmetic UTC formatter."""

import re
from datetime import datetime, timezone

import pytest

from clippy_ai.timefmt import format_utc, is_leap_year, utc_now

FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


class TestFormatUtc:
    def test_epoch(self):
        assert format_utc(0) == "1970-01-01 00:00:00"

    def test_leap_day(self):
        assert format_utc(1709208000) == "2024-02-29 12:00:00"

    def test_day_after_leap_day(self):
        assert format_utc(1709208000 + 86400) == "2024-03-01 12:00:00"

    def test_end_of_year(self):
        assert format_utc(1704067199) == "2023-12-31 23:59:59"

    def test_century_non_leap_year(self):
        # 2100-03-01 00:00:00 UTC; 2100 has no Feb 29
        assert format_utc(4107542400) == "2100-03-01 00:00:00"

    @pytest.mark.parametrize(
        "seconds",
        [0, 59, 951782400, 1234567890, 1709208000, 2147483647, 4102444800, 4107542400],
    )
    def test_matches_datetime(self, seconds):
        expected = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S"
        )
        assert format_utc(seconds) == expected

    def test_fixed_width(self):
        for seconds in (0, 86399, 1000000000, 1709208000):
            result = format_utc(seconds)
            assert len(result) == 19
            assert FORMAT.match(result)


class TestLeapYear:
    @pytest.mark.parametrize("year,leap", [
        (1970, False), (1972, True), (1900, False), (2000, True), (2024, True), (2100, False),
    ])
    def test_rule(self, year, leap):
        assert is_leap_year(year) is leap


def test_utc_now_uses_clock(fixed_clock):
    assert utc_now(fixed_clock) == "2024-02-29 12:00:00"


def test_utc_now_default_clock():
    assert FORMAT.match(utc_now())
