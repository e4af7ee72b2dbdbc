"""Tests for business (financial) day arithmetic."""

from datetime import datetime

import pytest
from structlog.testing import capture_logs

from dtext import add_financial_days, configure_dtext, count_financial_days, is_weekend


class TestAddFinancialDays:
    """Test add_financial_days."""

    def test_friday_plus_one_is_monday(self):
        assert add_financial_days(datetime(2024, 1, 5), 1) == datetime(2024, 1, 8)

    def test_monday_minus_one_is_friday(self):
        assert add_financial_days(datetime(2024, 1, 8), -1) == datetime(2024, 1, 5)

    def test_two_weeks(self):
        assert add_financial_days(datetime(2024, 1, 1), 10) == datetime(2024, 1, 15)

    def test_from_weekend(self):
        """Starting on a weekend steps to the nearest business day in the direction."""
        assert add_financial_days(datetime(2024, 1, 6), 1) == datetime(2024, 1, 8)
        assert add_financial_days(datetime(2024, 1, 6), -1) == datetime(2024, 1, 5)

    def test_zero_is_no_op_even_on_weekend(self):
        saturday = datetime(2024, 1, 6, 9, 15)
        assert add_financial_days(saturday, 0) == saturday

    def test_time_of_day_preserved(self):
        assert add_financial_days(datetime(2024, 1, 5, 17, 30), 1) == datetime(2024, 1, 8, 17, 30)

    def test_result_is_business_day(self, two_weeks):
        for dt in two_weeks:
            for days in (-3, -1, 1, 4):
                assert not is_weekend(add_financial_days(dt, days))


class TestCountFinancialDays:
    """Test count_financial_days."""

    def test_one_week(self):
        """Start excluded, end included: Tue-Fri plus Monday."""
        assert count_financial_days(datetime(2024, 1, 1), datetime(2024, 1, 8)) == 5

    def test_reversed_is_non_negative(self):
        assert count_financial_days(datetime(2024, 1, 8), datetime(2024, 1, 1)) == 5

    def test_same_day(self):
        assert count_financial_days(datetime(2024, 1, 3), datetime(2024, 1, 3)) == 0

    def test_over_weekend(self):
        assert count_financial_days(datetime(2024, 1, 5), datetime(2024, 1, 6)) == 0
        assert count_financial_days(datetime(2024, 1, 5), datetime(2024, 1, 8)) == 1

    def test_partial_days_truncate_toward_zero(self):
        """23 hours is zero whole days in either direction."""
        earlier = datetime(2024, 1, 1, 12, 0)
        later = datetime(2024, 1, 2, 11, 0)
        assert count_financial_days(earlier, later) == 0
        assert count_financial_days(later, earlier) == 0

    @pytest.mark.parametrize("days", [1, 2, 5, 7, 15])
    def test_inverse_of_add(self, days, two_weeks):
        for dt in two_weeks:
            assert count_financial_days(dt, add_financial_days(dt, days)) == days


class TestScanWarning:
    """Test the large-scan warning."""

    def test_large_scan_logs_warning(self):
        configure_dtext(scan_warning_days=10)
        with capture_logs() as logs:
            add_financial_days(datetime(2024, 1, 1), 20)

        events = [log for log in logs if log["event"] == "financial_day_scan_large"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert events[0]["operation"] == "add_financial_days"

    def test_count_logs_warning(self):
        configure_dtext(scan_warning_days=10)
        with capture_logs() as logs:
            result = count_financial_days(datetime(2024, 1, 1), datetime(2024, 2, 1))

        assert result == 23
        assert any(log["event"] == "financial_day_scan_large" for log in logs)

    def test_small_scan_is_quiet(self):
        with capture_logs() as logs:
            add_financial_days(datetime(2024, 1, 1), 20)
        assert logs == []
