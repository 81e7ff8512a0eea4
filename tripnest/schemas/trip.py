from pydantic import BaseModel, Field, computed_field, field_validator, model_validator
from typing import Optional, List
from datetime import date, datetime
from ..utils.date_helpers import DateHelpers
from ..utils.validation import ValidationHelpers
from ..utils.service_helpers import summarize_expenses
from .expense import ExpenseResponse, ExpenseSummary
from .checklist import ChecklistResponse


class TripBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    destination: str = Field(..., min_length=1, max_length=200)
    start_date: date
    end_date: date
    notes: Optional[str] = Field(None, max_length=2000)


class TripCreate(TripBase):
    @field_validator("name", "destination")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def check_date_range(self):
        error = ValidationHelpers.validate_date_range(self.start_date, self.end_date)
        if error:
            raise ValueError(error)
        return self


class TripUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    destination: Optional[str] = Field(None, min_length=1, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=2000)


class TripResponse(TripBase):
    id: int
    household_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def duration_days(self) -> int:
        return DateHelpers.trip_duration_days(self.start_date, self.end_date)

    @computed_field
    @property
    def status(self) -> str:
        return DateHelpers.get_trip_status(self.start_date, self.end_date)["status"]

    @computed_field
    @property
    def days_until(self) -> Optional[int]:
        return DateHelpers.get_trip_status(self.start_date, self.end_date)[
            "days_until"
        ]


class TripDetailResponse(TripResponse):
    expenses: List[ExpenseResponse] = []
    checklists: List[ChecklistResponse] = []

    @computed_field
    @property
    def expense_summary(self) -> ExpenseSummary:
        return ExpenseSummary(**summarize_expenses(self.expenses))
