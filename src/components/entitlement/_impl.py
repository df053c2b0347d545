"""
VacationDaysService - Used and left vacation days per account.

Splits the account year at the cutoff (April 1st by default), sums the working
days consumed by counted applications in each half, and reports what is left.

Functional Core - pure business logic. Applications and working days are read
through ports; nothing is cached or written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from src.domain.dates import (
    APRIL,
    DECEMBER,
    JANUARY,
    cutoff_in_year,
    first_day_of_month,
    is_before_cutoff,
    last_day_of_month,
)
from src.domain.entities import Account, Application, ApplicationStatus, Person, VacationType

from .models import (
    AccountValidationError,
    EntitlementBreakdown,
    InvalidAccountError,
    create_breakdown,
)
from .ports import ApplicationQueryPort, ClockPort, WorkDaysPort

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class EntitlementConfig:
    """Entitlement policy from rules."""

    cutoff_month: int = APRIL
    cutoff_day: int = 1
    counted_vacation_types: frozenset[VacationType] = frozenset({"holiday"})
    counted_statuses: frozenset[ApplicationStatus] = frozenset({"waiting", "allowed"})

    # Legacy behavior computes on unchecked accounts when disabled
    validate_accounts: bool = True


DEFAULT_CONFIG = EntitlementConfig()

MIN_YEAR = 1900
MAX_YEAR = 9999

# --- Validation Functions ---


def validate_account(account: Account) -> list[AccountValidationError]:
    """Validate account fields used by the calculation."""
    errors: list[AccountValidationError] = []

    if account.year is None:
        errors.append(
            AccountValidationError(
                code="year_required",
                message="Account year is required",
                field="year",
            )
        )
    elif not MIN_YEAR <= account.year <= MAX_YEAR:
        errors.append(
            AccountValidationError(
                code="year_invalid",
                message=f"Account year must be between {MIN_YEAR} and {MAX_YEAR}",
                field="year",
            )
        )

    for field_name in (
        "annual_vacation_days",
        "remaining_vacation_days",
        "remaining_vacation_days_not_expiring",
    ):
        if getattr(account, field_name) < 0:
            errors.append(
                AccountValidationError(
                    code=f"{field_name}_negative",
                    message=f"{field_name} must not be negative",
                    field=field_name,
                )
            )

    if account.remaining_vacation_days_not_expiring > account.remaining_vacation_days:
        errors.append(
            AccountValidationError(
                code="not_expiring_exceeds_remaining",
                message="Not expiring remaining days exceed remaining days",
                field="remaining_vacation_days_not_expiring",
            )
        )

    return errors


def is_counted(application: Application, config: EntitlementConfig = DEFAULT_CONFIG) -> bool:
    """Only waiting and allowed applications of type holiday use up vacation days."""
    return (
        application.vacation_type in config.counted_vacation_types
        and application.status in config.counted_statuses
    )


# --- Vacation Days Service ---


class VacationDaysService:
    """
    Calculation of used and left vacation days.

    Stateless: every call queries the ports again.
    """

    def __init__(
        self,
        applications: ApplicationQueryPort,
        calendar: WorkDaysPort,
        clock: ClockPort | None = None,
        config: EntitlementConfig = DEFAULT_CONFIG,
    ) -> None:
        """Initialize service."""
        self._applications = applications
        self._calendar = calendar
        self._clock = clock
        self._config = config

    def compute_total_days_left(
        self,
        account: Account,
        today: date | None = None,
    ) -> Decimal:
        """
        Total number of days that are left to be used for applying for leave.

        Before the cutoff the whole remaining pool is added to the annual days,
        afterwards only the not expiring part. The cutoff is taken in the year
        of `today`, not in the account's year.
        """
        breakdown = self.compute_breakdown(account)
        if today is None:
            today = self._today()

        if is_before_cutoff(today, self._config.cutoff_month, self._config.cutoff_day):
            remaining = breakdown.remaining_vacation_days
            pool = "remaining"
        else:
            remaining = breakdown.remaining_vacation_days_not_expiring
            pool = "remaining_not_expiring"

        logger.debug(
            "Total left for %s/%s on %s uses %s pool",
            account.person.login_name,
            account.year,
            today,
            pool,
        )
        return breakdown.annual_vacation_days + remaining

    def compute_breakdown(self, account: Account) -> EntitlementBreakdown:
        """Annual and remaining pools with days used before and after the cutoff."""
        self._check_account(account)

        return create_breakdown(
            annual_vacation_days=account.annual_vacation_days,
            remaining_vacation_days=account.remaining_vacation_days,
            remaining_vacation_days_not_expiring=account.remaining_vacation_days_not_expiring,
            used_days_before_cutoff=self.get_used_days_before_cutoff(account),
            used_days_after_cutoff=self.get_used_days_after_cutoff(account),
        )

    def get_used_days_before_cutoff(self, account: Account) -> Decimal:
        year = self._year_of(account)
        first = first_day_of_month(year, JANUARY)
        last = self._cutoff(year) - timedelta(days=1)

        return self.get_used_days_between(account.person, first, last)

    def get_used_days_after_cutoff(self, account: Account) -> Decimal:
        year = self._year_of(account)
        first = self._cutoff(year)
        last = last_day_of_month(year, DECEMBER)

        return self.get_used_days_between(account.person, first, last)

    def get_used_days_between(
        self,
        person: Person,
        first_milestone: date,
        last_milestone: date,
    ) -> Decimal:
        """
        Working days used by counted applications inside [first, last].

        Applications reaching over a milestone only count the part inside.
        """
        used_days = Decimal("0")

        # Cutoff on January 1st leaves nothing before it
        if last_milestone < first_milestone:
            return used_days

        applications = self._applications.find_for_person_in_period(
            person, first_milestone, last_milestone
        )

        for application in applications:
            if not is_counted(application, self._config):
                continue

            start_date = max(application.start_date, first_milestone)
            end_date = min(application.end_date, last_milestone)

            used_days += self._calendar.work_days(
                application.day_length, start_date, end_date, person
            )

        logger.debug(
            "Used days for %s between %s and %s: %s",
            person.login_name,
            first_milestone,
            last_milestone,
            used_days,
        )
        return used_days

    # --- Helpers ---

    def _check_account(self, account: Account) -> None:
        if not self._config.validate_accounts:
            return

        errors = validate_account(account)
        if errors:
            logger.warning(
                "Rejected account %s: %s",
                account.id,
                ", ".join(error.code for error in errors),
            )
            raise InvalidAccountError(errors)

    def _cutoff(self, year: int) -> date:
        return cutoff_in_year(year, self._config.cutoff_month, self._config.cutoff_day)

    def _today(self) -> date:
        if self._clock is None:
            return date.today()
        return self._clock.today()

    @staticmethod
    def _year_of(account: Account) -> int:
        if account.year is None:
            raise InvalidAccountError(
                [
                    AccountValidationError(
                        code="year_required",
                        message="Account year is required",
                        field="year",
                    )
                ]
            )
        return account.year
