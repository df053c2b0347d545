"""
Entitlement component - Used and left vacation days per account.
"""

from ._impl import (
    DEFAULT_CONFIG,
    EntitlementConfig,
    VacationDaysService,
    is_counted,
    validate_account,
)
from .component import run_breakdown, run_total_days_left
from .models import (
    AccountValidationError,
    BreakdownInput,
    BreakdownOutput,
    EntitlementBreakdown,
    InvalidAccountError,
    TotalDaysLeftInput,
    TotalDaysLeftOutput,
    create_breakdown,
)
from .ports import ApplicationQueryPort, ClockPort, WorkDaysPort

__all__ = [
    # Entry points
    "run_breakdown",
    "run_total_days_left",
    # Input models
    "BreakdownInput",
    "TotalDaysLeftInput",
    # Output models
    "BreakdownOutput",
    "TotalDaysLeftOutput",
    "EntitlementBreakdown",
    "create_breakdown",
    "AccountValidationError",
    "InvalidAccountError",
    # Ports
    "ApplicationQueryPort",
    "WorkDaysPort",
    "ClockPort",
    # Core
    "DEFAULT_CONFIG",
    "EntitlementConfig",
    "VacationDaysService",
    "is_counted",
    "validate_account",
]
