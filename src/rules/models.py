from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import ApplicationStatus, VacationType


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class CutoffRules(BaseModel):
    month: int = Field(default=4, ge=1, le=12)
    day: int = Field(default=1, ge=1, le=31)

    @model_validator(mode="after")
    def _check_real_date(self) -> "CutoffRules":
        # Leap year so that Feb 29 stays expressible
        date(2000, self.month, self.day)
        return self

class EntitlementRules(BaseModel):
    cutoff: CutoffRules = Field(default_factory=CutoffRules)
    counted_vacation_types: list[VacationType] = Field(default_factory=lambda: ["holiday"])
    counted_statuses: list[ApplicationStatus] = Field(
        default_factory=lambda: ["waiting", "allowed"]
    )
    validate_accounts: bool = True

class CalendarRules(BaseModel):
    public_holidays: list[date] = Field(default_factory=list)
    # ISO weekday numbers, Monday == 1
    working_weekdays: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5])

class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class Rules(BaseModel):
    project: ProjectRules
    entitlement: EntitlementRules = Field(default_factory=EntitlementRules)
    calendar: CalendarRules = Field(default_factory=CalendarRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
