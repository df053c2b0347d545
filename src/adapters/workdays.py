"""
Weekday calendar adapter.

Implements WorkDaysPort by counting working weekdays that are not configured
public holidays. Holidays are taken from configuration as given; this adapter
does not derive them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.entities import DayLength, Person
from src.rules.models import CalendarRules

logger = logging.getLogger(__name__)

DAY_LENGTH_FACTORS: dict[DayLength, Decimal] = {
    "full": Decimal("1"),
    "morning": Decimal("0.5"),
    "noon": Decimal("0.5"),
}


class WeekdayCalendar:
    """
    Working days between two dates, inclusive.

    Every counted date weighs 1 for full days and 0.5 for half days.
    """

    def __init__(
        self,
        public_holidays: Iterable[date] = (),
        working_weekdays: Iterable[int] = (1, 2, 3, 4, 5),
    ) -> None:
        self._public_holidays = frozenset(public_holidays)
        self._working_weekdays = frozenset(working_weekdays)

    @classmethod
    def from_rules(cls, rules: CalendarRules) -> WeekdayCalendar:
        return cls(
            public_holidays=rules.public_holidays,
            working_weekdays=rules.working_weekdays,
        )

    def is_work_day(self, day: date) -> bool:
        return day.isoweekday() in self._working_weekdays and day not in self._public_holidays

    def work_days(
        self,
        day_length: DayLength,
        start_date: date,
        end_date: date,
        person: Person,
    ) -> Decimal:
        if end_date < start_date:
            return Decimal("0")

        count = 0
        day = start_date
        while day <= end_date:
            if self.is_work_day(day):
                count += 1
            day += timedelta(days=1)

        days = DAY_LENGTH_FACTORS[day_length] * count
        logger.debug(
            "Work days for %s from %s to %s (%s): %s",
            person.login_name,
            start_date,
            end_date,
            day_length,
            days,
        )
        return days
