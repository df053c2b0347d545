"""
Calendar helpers for entitlement windows.

All dates are plain `datetime.date` values; no timezone is involved.
"""

from __future__ import annotations

import calendar
from datetime import date

JANUARY = 1
APRIL = 4
DECEMBER = 12


def first_day_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def last_day_of_month(year: int, month: int) -> date:
    _, days_in_month = calendar.monthrange(year, month)
    return date(year, month, days_in_month)


def cutoff_in_year(year: int, month: int = APRIL, day_of_month: int = 1) -> date:
    """
    Resolve the cutoff for a given year.

    A day past the end of the month (Feb 29 outside leap years) falls back
    to the month's last day.
    """
    last = last_day_of_month(year, month)
    return date(year, month, min(day_of_month, last.day))


def is_before_cutoff(day: date, month: int = APRIL, day_of_month: int = 1) -> bool:
    """
    Check whether `day` lies before the cutoff of its own year.

    The cutoff year is always taken from `day` itself.
    """
    return day < cutoff_in_year(day.year, month, day_of_month)


def is_before_april(day: date) -> bool:
    return is_before_cutoff(day, APRIL, 1)
