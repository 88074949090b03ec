"""Pydantic schemas for house budgets."""

from datetime import date, datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemType = Literal["income", "expense"]


class BudgetCreate(BaseModel):
    """Schema for budget creation."""
    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a budget name")
        return value


class Budget(BudgetCreate):
    """Schema for budget response."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BudgetItemCreate(BaseModel):
    """Schema for budget item creation."""
    type: ItemType = "expense"
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    date: date


class BudgetItem(BudgetItemCreate):
    """Schema for budget item response."""
    id: str
    budget_id: str

    model_config = ConfigDict(from_attributes=True)


class BudgetSummary(BaseModel):
    """Projected house balance after the budget's items."""
    budget_id: str
    income: float
    expenses: float
    current_balance: float
    projected_balance: float


class BudgetDetail(BaseModel):
    """Budget with its items and summary."""
    budget: Budget
    items: List[BudgetItem]
    summary: BudgetSummary
