"""
Entitlement component - Used and left vacation days.

Shell Layer - converts account rejections into outputs. Failures raised by
the application store or the calendar are not converted and reach the caller.
"""

from __future__ import annotations

from ._impl import VacationDaysService
from .models import (
    BreakdownInput,
    BreakdownOutput,
    InvalidAccountError,
    TotalDaysLeftInput,
    TotalDaysLeftOutput,
)

# --- Shell Layer Functions ---


def run_breakdown(
    input_data: BreakdownInput,
    service: VacationDaysService,
) -> BreakdownOutput:
    """Compute the entitlement breakdown of an account."""
    try:
        breakdown = service.compute_breakdown(input_data.account)
    except InvalidAccountError as e:
        return BreakdownOutput(breakdown=None, errors=e.errors, success=False)

    return BreakdownOutput(breakdown=breakdown, errors=(), success=True)


def run_total_days_left(
    input_data: TotalDaysLeftInput,
    service: VacationDaysService,
) -> TotalDaysLeftOutput:
    """Compute the total vacation days left on an account."""
    try:
        total = service.compute_total_days_left(input_data.account, input_data.today)
    except InvalidAccountError as e:
        return TotalDaysLeftOutput(total_days_left=None, errors=e.errors, success=False)

    return TotalDaysLeftOutput(total_days_left=total, errors=(), success=True)
