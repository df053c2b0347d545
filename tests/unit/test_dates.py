from datetime import date

import pytest

from src.domain.dates import (
    cutoff_in_year,
    first_day_of_month,
    is_before_april,
    is_before_cutoff,
    last_day_of_month,
)


def test_first_day_of_month():
    assert first_day_of_month(2024, 1) == date(2024, 1, 1)


@pytest.mark.parametrize(
    "year,month,expected",
    [
        (2024, 3, date(2024, 3, 31)),
        (2024, 2, date(2024, 2, 29)),
        (2023, 2, date(2023, 2, 28)),
        (2024, 12, date(2024, 12, 31)),
        (2024, 4, date(2024, 4, 30)),
    ],
)
def test_last_day_of_month(year, month, expected):
    assert last_day_of_month(year, month) == expected


def test_is_before_april():
    assert is_before_april(date(2024, 3, 31)) is True
    assert is_before_april(date(2024, 4, 1)) is False
    assert is_before_april(date(2024, 12, 31)) is False
    assert is_before_april(date(2025, 1, 1)) is True


def test_is_before_cutoff_uses_year_of_day():
    # Same month/day in different years gives the same answer
    assert is_before_cutoff(date(1999, 2, 1)) is True
    assert is_before_cutoff(date(2031, 2, 1)) is True
    assert is_before_cutoff(date(2031, 5, 1)) is False


def test_custom_cutoff():
    assert is_before_cutoff(date(2024, 6, 30), month=7, day_of_month=1) is True
    assert is_before_cutoff(date(2024, 7, 1), month=7, day_of_month=1) is False


def test_cutoff_on_feb_29_outside_leap_years():
    assert cutoff_in_year(2024, 2, 29) == date(2024, 2, 29)
    assert cutoff_in_year(2023, 2, 29) == date(2023, 2, 28)
    assert is_before_cutoff(date(2023, 2, 28), month=2, day_of_month=29) is False
