"""
Entitlement component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.entities import Account

# --- Validation Errors ---


@dataclass(frozen=True)
class AccountValidationError:
    """Account validation error."""

    code: str
    message: str
    field: str | None = None


class InvalidAccountError(ValueError):
    """Raised when an account cannot be used for entitlement calculation."""

    def __init__(self, errors: list[AccountValidationError]) -> None:
        self.errors = tuple(errors)
        summary = "; ".join(error.message for error in self.errors)
        super().__init__(f"Invalid account: {summary}")


# --- Value Objects ---


@dataclass(frozen=True)
class EntitlementBreakdown:
    """
    Snapshot of an account's vacation pools and the days used in each
    half of the account year.

    Recomputed on every request and never stored.
    """

    annual_vacation_days: Decimal
    remaining_vacation_days: Decimal
    remaining_vacation_days_not_expiring: Decimal
    used_days_before_cutoff: Decimal
    used_days_after_cutoff: Decimal


def create_breakdown(
    *,
    annual_vacation_days: Decimal,
    remaining_vacation_days: Decimal,
    remaining_vacation_days_not_expiring: Decimal,
    used_days_before_cutoff: Decimal,
    used_days_after_cutoff: Decimal,
) -> EntitlementBreakdown:
    return EntitlementBreakdown(
        annual_vacation_days=annual_vacation_days,
        remaining_vacation_days=remaining_vacation_days,
        remaining_vacation_days_not_expiring=remaining_vacation_days_not_expiring,
        used_days_before_cutoff=used_days_before_cutoff,
        used_days_after_cutoff=used_days_after_cutoff,
    )


# --- Input Models ---


@dataclass(frozen=True)
class BreakdownInput:
    """Input for computing an entitlement breakdown."""

    account: Account


@dataclass(frozen=True)
class TotalDaysLeftInput:
    """Input for computing the total days left."""

    account: Account
    today: date | None = None


# --- Output Models ---


@dataclass(frozen=True)
class BreakdownOutput:
    """Output from breakdown computation."""

    breakdown: EntitlementBreakdown | None
    errors: tuple[AccountValidationError, ...]
    success: bool


@dataclass(frozen=True)
class TotalDaysLeftOutput:
    """Output from total-days-left computation."""

    total_days_left: Decimal | None
    errors: tuple[AccountValidationError, ...]
    success: bool
