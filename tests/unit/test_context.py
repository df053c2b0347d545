import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.adapters.clock import FixedClock, SystemClock
from src.adapters.workdays import WeekdayCalendar
from src.app_shell.context import (
    EntitlementContext,
    configure_logging,
    entitlement_config,
)
from src.rules.models import EntitlementRules, LoggingRules


def test_entitlement_config_from_rules():
    config = entitlement_config(
        EntitlementRules.model_validate(
            {
                "cutoff": {"month": 7, "day": 15},
                "counted_statuses": ["allowed"],
                "validate_accounts": False,
            }
        )
    )

    assert config.cutoff_month == 7
    assert config.cutoff_day == 15
    assert config.counted_vacation_types == frozenset({"holiday"})
    assert config.counted_statuses == frozenset({"allowed"})
    assert config.validate_accounts is False


def test_create_uses_default_adapters(rules, application_repo):
    ctx = EntitlementContext.create(rules=rules, applications=application_repo)

    assert isinstance(ctx.calendar, WeekdayCalendar)
    assert isinstance(ctx.clock, SystemClock)
    assert ctx.applications is application_repo


def test_create_with_injected_clock(rules, application_repo, account):
    clock = FixedClock(datetime(2024, 2, 1, 9, 0))
    ctx = EntitlementContext.create(rules=rules, applications=application_repo, clock=clock)

    total = ctx.vacation_days_service.compute_total_days_left(account)

    assert total == Decimal("33")


def test_from_rules_file(tmp_path, application_repo):
    path = tmp_path / "rules.yaml"
    path.write_text(
        "project:\n  slug: t\n  rules_version: '1'\n"
        "calendar:\n  public_holidays: [2024-01-10]\n"
        "logging:\n  level: debug\n"
    )

    ctx = EntitlementContext.from_rules_file(application_repo, path=path)

    assert ctx.rules.logging.level == "debug"
    assert isinstance(ctx.calendar, WeekdayCalendar)
    assert ctx.calendar.is_work_day(date(2024, 1, 10)) is False


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(LoggingRules(level="chatty"))


def test_configure_logging_accepts_level_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(LoggingRules(level="warning"))

    assert calls[0]["level"] == logging.WARNING
