"""Unit tests for decompose_duration and format_duration_as_timestamp."""

from __future__ import annotations

import math

import pytest

from dhm_timestamp.errors import InvalidDurationError
from dhm_timestamp.formatting import decompose_duration, format_duration_as_timestamp
from dhm_timestamp.models import DurationParts


class TestFormatDurationAsTimestamp:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0h 0m"),
            (90, "0h 1m"),
            (3661, "1h 1m"),
            (90000, "1d 1h 0m"),
            (172800, "2d 0h 0m"),
        ],
    )
    def test_known_values(self, seconds: float, expected: str) -> None:
        """Reference values format exactly."""
        assert format_duration_as_timestamp(seconds) == expected

    def test_under_one_minute_is_truncated(self) -> None:
        """Seconds below a full minute are dropped, never rounded up."""
        assert format_duration_as_timestamp(59) == "0h 0m"
        assert format_duration_as_timestamp(59.999) == "0h 0m"
        assert format_duration_as_timestamp(119.5) == "0h 1m"

    def test_under_one_hour(self) -> None:
        """Durations under an hour are '0h Mm'."""
        for s in (1, 60, 61, 600, 1234.5, 3599):
            assert format_duration_as_timestamp(s) == f"0h {math.floor(s / 60)}m"

    def test_under_one_day_has_no_day_prefix(self) -> None:
        """Between one hour and one day the day prefix is omitted."""
        for s in (3600, 7325, 43200, 86399):
            h = s // 3600
            m = (s % 3600) // 60
            assert format_duration_as_timestamp(s) == f"{h}h {m}m"

    def test_day_prefix_from_one_day(self) -> None:
        """At 86400 seconds and beyond the day count is prepended."""
        assert format_duration_as_timestamp(86400) == "1d 0h 0m"
        assert format_duration_as_timestamp(86399.9) == "23h 59m"
        assert format_duration_as_timestamp(10 * 86400 + 23 * 3600 + 59 * 60 + 59) == "10d 23h 59m"

    def test_no_zero_padding(self) -> None:
        """Numbers are printed without leading zeros."""
        assert format_duration_as_timestamp(5 * 60) == "0h 5m"

    def test_deterministic(self) -> None:
        """Same input always yields the same output."""
        assert format_duration_as_timestamp(123456.7) == format_duration_as_timestamp(123456.7)

    def test_negative_zero(self) -> None:
        """-0.0 is treated as zero."""
        assert format_duration_as_timestamp(-0.0) == "0h 0m"


class TestDecomposeDuration:
    def test_parts(self) -> None:
        """Days, hours and minutes are split with fixed unit ratios."""
        assert decompose_duration(90061) == DurationParts(days=1, hours=1, minutes=1)

    def test_ranges(self) -> None:
        """Hours stay under 24 and minutes under 60."""
        parts = decompose_duration(3 * 86400 - 1)
        assert parts == DurationParts(days=2, hours=23, minutes=59)
        assert parts.has_days()

    def test_no_days(self) -> None:
        """has_days() is False below one day."""
        assert not decompose_duration(86399).has_days()

    def test_huge_finite_value(self) -> None:
        """Values whose milliseconds overflow a float still decompose and format."""
        parts = decompose_duration(1e306)
        assert parts.days == int(1e306 / 60) // 1440
        assert 0 <= parts.hours < 24
        assert 0 <= parts.minutes < 60
        assert format_duration_as_timestamp(1e306).startswith(f"{parts.days}d ")


class TestInvalidDurations:
    @pytest.mark.parametrize("value", [-1, -0.5, float("nan"), float("inf"), float("-inf")])
    def test_rejects_negative_and_non_finite(self, value: float) -> None:
        """Negative and non-finite values raise InvalidDurationError."""
        with pytest.raises(InvalidDurationError):
            format_duration_as_timestamp(value)

    @pytest.mark.parametrize("value", [True, "60", None])
    def test_rejects_non_numbers(self, value: object) -> None:
        """Booleans, strings and None are not durations."""
        with pytest.raises(InvalidDurationError, match="not a number"):
            format_duration_as_timestamp(value)  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        """InvalidDurationError can be caught as ValueError and keeps the value."""
        with pytest.raises(ValueError) as exc_info:
            decompose_duration(-60)
        assert exc_info.value.value == -60
        assert exc_info.value.reason == "negative"
