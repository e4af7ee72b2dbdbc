"""Tests for small date predicates and conversions."""

from datetime import date, datetime, timedelta

from dtext import (
    age,
    intersects,
    is_future,
    is_past,
    quarter,
    to_microsoft_number,
    to_oracle_sql_date,
)


class TestFuturePast:
    """Test is_future and is_past (date-level comparison)."""

    def test_compares_dates_not_times(self):
        reference = datetime(2024, 1, 1, 23, 59)
        assert is_future(datetime(2024, 1, 2, 0, 0), reference)
        assert not is_future(datetime(2024, 1, 1, 23, 59, 59), reference)
        assert is_past(datetime(2023, 12, 31, 23, 59), reference)
        assert not is_past(datetime(2024, 1, 1, 0, 0), reference)

    def test_defaults_to_now(self):
        assert is_future(datetime.now() + timedelta(days=2))
        assert is_past(datetime.now() - timedelta(days=2))


def test_quarter():
    assert [quarter(datetime(2024, m, 1)) for m in range(1, 13)] == [
        1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4,
    ]


def test_intersects():
    start, end = datetime(2024, 1, 10), datetime(2024, 1, 20)
    assert intersects(start, end, datetime(2024, 1, 15), datetime(2024, 1, 25))
    assert intersects(start, end, datetime(2024, 1, 20), datetime(2024, 1, 25))
    assert not intersects(start, end, datetime(2024, 1, 21), datetime(2024, 1, 25))
    assert not intersects(start, end, datetime(2024, 1, 1), datetime(2024, 1, 9))


class TestAge:
    def test_before_birthday(self):
        assert age(date(1990, 6, 15), today=date(2024, 6, 14)) == 33

    def test_on_birthday(self):
        assert age(date(1990, 6, 15), today=date(2024, 6, 15)) == 34


def test_to_microsoft_number():
    assert to_microsoft_number(datetime(1972, 1, 2)) == 86400.0
    assert to_microsoft_number(datetime(1971, 12, 31, 23, 59)) == -60.0


def test_to_oracle_sql_date():
    assert to_oracle_sql_date(datetime(2024, 3, 5, 7, 8, 9)) == (
        "to_date('05.03.2024 07:08:09','dd.mm.yyyy hh24.mi.ss')"
    )
