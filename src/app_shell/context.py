from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from src.adapters.clock import SystemClock
from src.adapters.workdays import WeekdayCalendar
from src.components.entitlement import (
    ApplicationQueryPort,
    ClockPort,
    EntitlementConfig,
    VacationDaysService,
    WorkDaysPort,
)
from src.rules.loader import load_rules
from src.rules.models import EntitlementRules, LoggingRules, Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path("rules.yaml")


def configure_logging(rules: LoggingRules) -> None:
    level = logging.getLevelName(rules.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {rules.level}")
    logging.basicConfig(level=level, format=rules.format)


def entitlement_config(rules: EntitlementRules) -> EntitlementConfig:
    return EntitlementConfig(
        cutoff_month=rules.cutoff.month,
        cutoff_day=rules.cutoff.day,
        counted_vacation_types=frozenset(rules.counted_vacation_types),
        counted_statuses=frozenset(rules.counted_statuses),
        validate_accounts=rules.validate_accounts,
    )


@dataclass
class EntitlementContext:
    vacation_days_service: VacationDaysService
    applications: ApplicationQueryPort
    calendar: WorkDaysPort
    clock: ClockPort
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        applications: ApplicationQueryPort,
        calendar: WorkDaysPort | None = None,
        clock: ClockPort | None = None,
    ) -> EntitlementContext:
        # Adapters
        if calendar is None:
            calendar = WeekdayCalendar.from_rules(rules.calendar)
        if clock is None:
            clock = SystemClock()

        # Services
        service = VacationDaysService(
            applications=applications,
            calendar=calendar,
            clock=clock,
            config=entitlement_config(rules.entitlement),
        )

        return cls(
            vacation_days_service=service,
            applications=applications,
            calendar=calendar,
            clock=clock,
            rules=rules,
        )

    @classmethod
    def from_rules_file(
        cls,
        applications: ApplicationQueryPort,
        path: Path = DEFAULT_RULES_PATH,
    ) -> EntitlementContext:
        """Load rules, set up logging and build the context."""
        rules = load_rules(path)
        configure_logging(rules.logging)
        cutoff = rules.entitlement.cutoff
        logger.info("Entitlement cutoff: %02d-%02d", cutoff.month, cutoff.day)
        return cls.create(rules=rules, applications=applications)
