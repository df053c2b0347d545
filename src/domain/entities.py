from datetime import date
from decimal import Decimal
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
VacationType = Literal["holiday", "special_leave", "unpaid_leave", "overtime"]
ApplicationStatus = Literal["waiting", "allowed", "rejected", "cancelled", "revoked"]
DayLength = Literal["full", "morning", "noon"]

# --- People ---

class Person(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    login_name: str
    display_name: str = ""

    model_config = ConfigDict(frozen=True)

# --- Accounts ---

class Account(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    person: Person
    year: int | None
    annual_vacation_days: Decimal = Decimal("0")
    remaining_vacation_days: Decimal = Decimal("0")
    # Subset of remaining_vacation_days that survives the cutoff
    remaining_vacation_days_not_expiring: Decimal = Decimal("0")

# --- Applications for leave ---

class Application(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    person: Person
    start_date: date
    end_date: date
    vacation_type: VacationType = "holiday"
    status: ApplicationStatus = "waiting"
    day_length: DayLength = "full"
