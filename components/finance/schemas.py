"""Pydantic schemas for income and expense entries."""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

HouseExpenseCategory = Literal["general", "bills", "groceries", "entertainment", "transport", "other"]
AirbnbExpenseCategory = Literal[
    "general", "bills", "groceries", "entertainment", "transport", "other", "supplies", "cleaning"
]


class EntryBase(BaseModel):
    """Base ledger entry schema."""
    amount: float
    description: str
    date: date
    is_recurring: bool = False
    recurring_day: Optional[int] = None


class EntryCreate(EntryBase):
    """Ledger entry as sent by the client."""
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    recurring_day: Optional[int] = Field(None, ge=1, le=31)

    @model_validator(mode="after")
    def drop_recurring_day(self):
        if not self.is_recurring:
            self.recurring_day = None
        return self


class IncomeCreate(EntryCreate):
    """Schema for income creation."""
    pass


class ExpenseCreate(EntryCreate):
    """Schema for expense creation."""
    category: str = "general"


class HouseExpenseCreate(ExpenseCreate):
    category: HouseExpenseCategory = "general"


class AirbnbExpenseCreate(ExpenseCreate):
    category: AirbnbExpenseCategory = "general"


class Income(EntryBase):
    """Schema for income response."""
    id: str

    model_config = ConfigDict(from_attributes=True)


class Expense(Income):
    """Schema for expense response."""
    category: str


class IncomeList(BaseModel):
    """Income entries with their total."""
    total: float
    entries: List[Income]


class ExpenseList(BaseModel):
    """Expense entries with their total."""
    total: float
    entries: List[Expense]


class Balance(BaseModel):
    """Income minus expenses for one property."""
    total_income: float
    total_expenses: float
    balance: float
