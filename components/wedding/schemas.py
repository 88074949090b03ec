"""Pydantic schemas for wedding planning."""

import datetime as dt
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNCATEGORIZED = "Uncategorized"


def strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("This field is required")
    return value


class NamedCreate(BaseModel):
    """Base schema for things created from a single name."""
    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return strip_required(value)


# Categories

class CategoryCreate(NamedCreate):
    """Schema for category creation."""
    name: str = Field(..., max_length=100)


class Category(CategoryCreate):
    """Schema for category response."""
    id: str

    model_config = ConfigDict(from_attributes=True)


# Expenses

class ExpenseCreate(BaseModel):
    """Schema for wedding expense creation."""
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    category_id: Optional[str] = None
    date: date


class Expense(ExpenseCreate):
    """Schema for wedding expense response."""
    id: str
    category_name: str = UNCATEGORIZED


class ExpenseList(BaseModel):
    total: float
    expenses: List[Expense]


# Budgets

class BudgetCreate(NamedCreate):
    """Schema for wedding budget creation."""
    initial_balance: float = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class Budget(BudgetCreate):
    """Schema for wedding budget response."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BudgetItemCreate(BaseModel):
    """Schema for wedding budget item creation."""
    type: Literal["income", "expense"] = "expense"
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    category_id: Optional[str] = None
    is_real: bool = False
    date: Optional[dt.date] = None


class BudgetItem(BudgetItemCreate):
    """Schema for wedding budget item response."""
    id: str
    budget_id: str
    category_name: str = UNCATEGORIZED


class BudgetSummary(BaseModel):
    """Projected balance of a wedding budget."""
    budget_id: str
    initial_balance: float
    income: float
    expenses: float
    projected_balance: float
    real_income: float
    real_expenses: float
    real_balance: float


# Quotes

class QuoteCreate(BaseModel):
    """Schema for vendor quote creation."""
    person_name: str = Field(..., max_length=255)
    contact_info: Optional[str] = None
    category_id: Optional[str] = None
    concept: str = Field(..., max_length=255)
    price: float = Field(..., ge=0)
    details: Optional[str] = None

    @field_validator("person_name", "concept")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return strip_required(value)


class Quote(QuoteCreate):
    """Schema for vendor quote response."""
    id: str
    category_name: str = UNCATEGORIZED
    created_at: datetime


class QuoteGroup(BaseModel):
    """Quotes of one category."""
    category_id: Optional[str] = None
    category_name: str
    quotes: List[Quote]


# Folders & notes

class FolderCreate(NamedCreate):
    """Schema for folder creation."""
    pass


class Folder(FolderCreate):
    """Schema for folder response."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteCreate(BaseModel):
    """Schema for note creation."""
    title: str = Field(..., max_length=255)
    content: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return strip_required(value)


class NoteUpdate(BaseModel):
    """Schema for note update; missing fields are left unchanged."""
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value) if value is not None else None


class Note(NoteCreate):
    """Schema for note response."""
    id: str
    folder_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
