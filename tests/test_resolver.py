"""Tests for the date component resolver."""

from datetime import datetime

from structlog.testing import capture_logs

from dtext import (
    MAX_YEAR,
    MIN_YEAR,
    beginning_of_day,
    end_of_day,
    resolve,
    set_date,
    set_time,
)


class TestSetDate:
    """Test set_date overrides and rollover."""

    def test_leap_day_into_non_leap_year_rolls_forward(self):
        """2024-02-29 moved to 2023 resolves to 2023-03-01."""
        assert set_date(datetime(2024, 2, 29), 2023) == datetime(2023, 3, 1)

    def test_leap_day_rollover_keeps_time(self):
        """Time of day survives a year change."""
        base = datetime(2024, 2, 29, 13, 45, 10, 250000)
        assert set_date(base, 2023) == datetime(2023, 3, 1, 13, 45, 10, 250000)

    def test_day_past_month_end_carries(self):
        """Feb 30 carries into March, by one day in leap years and two otherwise."""
        base = datetime(2024, 5, 17)
        assert set_date(base, 2024, 2, 30) == datetime(2024, 3, 1)
        assert set_date(base, 2023, 2, 30) == datetime(2023, 3, 2)

    def test_zero_keeps_base_date_fields(self):
        """0 for year, month or day keeps the base value."""
        base = datetime(2024, 5, 17, 9, 30)
        assert set_date(base, 2020, 0, 0) == datetime(2020, 5, 17, 9, 30)
        assert set_date(base, 0) == base
        assert resolve(base, month=0, day=3) == datetime(2024, 5, 3, 9, 30)

    def test_negative_month_steps_back(self):
        """A negative month rolls back into the previous year."""
        # Jan 1 2024 - 2 months = Nov 1 2023, + 16 days
        assert set_date(datetime(2024, 5, 17), 2024, -1) == datetime(2023, 11, 17)

    def test_month_overflow_carries_into_year(self):
        assert set_date(datetime(2024, 5, 17), 2024, 14, 1) == datetime(2025, 2, 1)


class TestYearRange:
    """Test the year range policy.

    Years above the maximum resolve to the minimum and years below the
    minimum resolve to the maximum.
    """

    def test_year_above_max_resolves_to_min(self):
        result = set_date(datetime(2024, 5, 17), MAX_YEAR + 1)
        assert result == datetime(MIN_YEAR, 5, 17)

    def test_year_below_min_resolves_to_max(self):
        result = set_date(datetime(2024, 5, 17), -5)
        assert result == datetime(MAX_YEAR, 5, 17)

    def test_boundary_years_are_kept(self):
        assert set_date(datetime(2024, 5, 17), MAX_YEAR).year == MAX_YEAR
        assert set_date(datetime(2024, 5, 17), MIN_YEAR).year == MIN_YEAR

    def test_clamp_is_logged(self):
        """Clamping emits a year_clamped debug event."""
        with capture_logs() as logs:
            set_date(datetime(2024, 5, 17), 12000)

        events = [log for log in logs if log["event"] == "year_clamped"]
        assert len(events) == 1
        assert events[0]["requested"] == 12000
        assert events[0]["resolved"] == MIN_YEAR


class TestSetTime:
    """Test set_time overrides."""

    def test_hour_only_keeps_minutes(self):
        base = datetime(2024, 5, 17, 15, 30, 20)
        assert set_time(base, 8) == datetime(2024, 5, 17, 8, 30, 20)

    def test_zero_is_a_real_time_value(self):
        """Unlike date fields, 0 replaces the base time field."""
        base = datetime(2024, 5, 17, 15, 30)
        assert set_time(base, 0) == datetime(2024, 5, 17, 0, 30)
        assert set_time(base, 15, 0) == datetime(2024, 5, 17, 15, 0)

    def test_all_four_fields(self):
        base = datetime(2024, 5, 17, 15, 30, 20, 500000)
        assert set_time(base, 1, 2, 3, 4) == datetime(2024, 5, 17, 1, 2, 3, 4000)

    def test_overflow_rolls_over(self):
        """Values past their range carry into the next field."""
        base = datetime(2024, 5, 17)
        assert set_time(base, 25) == datetime(2024, 5, 18, 1, 0)
        assert set_time(base, 10, 75) == datetime(2024, 5, 17, 11, 15)
        assert set_time(base, 10, 0, 0, 1500) == datetime(2024, 5, 17, 10, 0, 1, 500000)

    def test_negative_hour_steps_back(self):
        base = datetime(2024, 5, 17, 8, 0)
        assert set_time(base, -1) == datetime(2024, 5, 16, 23, 0)

    def test_sub_millisecond_precision_is_dropped(self):
        """Milliseconds are kept from the base, microseconds below that are not."""
        base = datetime(2024, 5, 17, 8, 0, 0, 123456)
        assert set_time(base, 9) == datetime(2024, 5, 17, 9, 0, 0, 123000)

    def test_base_is_not_mutated(self):
        base = datetime(2024, 5, 17, 8, 0)
        set_time(base, 9)
        assert base == datetime(2024, 5, 17, 8, 0)


class TestDayBounds:
    """Test beginning_of_day and end_of_day."""

    def test_beginning_of_day(self):
        base = datetime(2024, 5, 17, 15, 30, 20, 999999)
        assert beginning_of_day(base) == datetime(2024, 5, 17)

    def test_end_of_day(self):
        base = datetime(2024, 5, 17, 8, 0)
        assert end_of_day(base) == datetime(2024, 5, 17, 23, 59, 59, 999000)
