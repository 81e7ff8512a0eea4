from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
import datetime as dt
from decimal import Decimal
from ..models.enums import Currency, ExpenseCategory
from ..utils.constants import AppConstants


class ExpenseBase(BaseModel):
    amount: Decimal = Field(
        ...,
        ge=0,
        le=AppConstants.MAX_EXPENSE_AMOUNT,
        description="Amount must not be negative",
    )
    currency: Currency = Currency(AppConstants.DEFAULT_EXPENSE_CURRENCY)
    category: ExpenseCategory = ExpenseCategory.OTHER
    description: Optional[str] = Field(None, max_length=200)
    date: dt.date
    paid_by: Optional[int] = None


class ExpenseCreate(ExpenseBase):
    @field_validator("description")
    @classmethod
    def strip_description(cls, v):
        if v is None:
            return v
        return v.strip() or None


class ExpenseUpdate(BaseModel):
    amount: Optional[Decimal] = Field(None, ge=0, le=AppConstants.MAX_EXPENSE_AMOUNT)
    currency: Optional[Currency] = None
    category: Optional[ExpenseCategory] = None
    description: Optional[str] = Field(None, max_length=200)
    date: Optional[dt.date] = None
    paid_by: Optional[int] = None

    @field_validator("description")
    @classmethod
    def strip_description(cls, v):
        if v is None:
            return v
        return v.strip() or None


class ExpenseResponse(BaseModel):
    id: int
    trip_id: int
    amount: float
    currency: str
    category: ExpenseCategory
    description: Optional[str] = None
    date: dt.date
    paid_by: Optional[int] = None
    created_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class ExpenseSummary(BaseModel):
    count: int
    total: float
    currency: str


class ExpenseDateGroup(BaseModel):
    date: str
    expenses: List[ExpenseResponse]
    total: float

    class Config:
        from_attributes = True
