"""
Entitlement component port definitions.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.entities import Application, DayLength, Person


class ApplicationQueryPort(Protocol):
    """Read access to applications for leave."""

    def find_for_person_in_period(
        self,
        person: Person,
        start_date: date,
        end_date: date,
    ) -> list[Application]:
        """
        List the person's applications whose date range intersects
        the closed interval [start_date, end_date].
        """
        ...


class WorkDaysPort(Protocol):
    """Working-day calendar."""

    def work_days(
        self,
        day_length: DayLength,
        start_date: date,
        end_date: date,
        person: Person,
    ) -> Decimal:
        """
        Count working days in [start_date, end_date] for the person.

        Half days count 0.5. Returns 0 for an empty or fully excluded range.
        """
        ...


class ClockPort(Protocol):
    """Source of the evaluation date."""

    def today(self) -> date:
        """Get current local date."""
        ...
