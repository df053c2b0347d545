from decimal import Decimal
from pathlib import Path

import pytest

from src.adapters.memory_applications import InMemoryApplicationRepo
from src.domain.entities import Account, Person
from src.rules.loader import load_rules
from src.rules.models import Rules

RULES_PATH = Path(__file__).parent.parent / "rules.yaml"


@pytest.fixture
def rules() -> Rules:
    """The real rules shipped with the project."""
    return load_rules(RULES_PATH)


@pytest.fixture
def person() -> Person:
    return Person(login_name="mmuster", display_name="Max Muster")


@pytest.fixture
def account(person: Person) -> Account:
    return Account(
        person=person,
        year=2024,
        annual_vacation_days=Decimal("28"),
        remaining_vacation_days=Decimal("5"),
        remaining_vacation_days_not_expiring=Decimal("2"),
    )


@pytest.fixture
def application_repo() -> InMemoryApplicationRepo:
    return InMemoryApplicationRepo()
