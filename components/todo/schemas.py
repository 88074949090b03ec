"""Pydantic schemas for to-dos."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Priority = Literal["low", "mid", "high"]
RecurrenceType = Literal["daily", "weekly", "monthly", "custom_days"]
StatusFilter = Literal["all", "active", "completed"]
PriorityFilter = Literal["all", "high", "mid", "low"]
RecurringFilter = Literal["all", "recurring", "non-recurring"]


class TodoBase(BaseModel):
    """Base todo schema."""
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    priority: Priority = "mid"
    is_recurring: bool = False
    recurrence_type: Optional[RecurrenceType] = None
    recurrence_value: Optional[int] = Field(None, ge=1)
    recurrence_day_of_month: Optional[int] = Field(None, ge=1, le=31)
    due_date: Optional[date] = None


class TodoCreate(TodoBase):
    """
    Schema for todo creation.

    Only the fields relevant to the chosen rule are kept: the interval for
    custom_days, the day of month for monthly, nothing for plain todos.
    """

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("description")
    @classmethod
    def empty_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def normalize_rule(self):
        if not self.is_recurring:
            self.recurrence_type = None
        elif self.recurrence_type is None:
            self.recurrence_type = "custom_days"

        if self.recurrence_type != "custom_days":
            self.recurrence_value = None
        if self.recurrence_type != "monthly":
            self.recurrence_day_of_month = None
        return self


class Todo(TodoBase):
    """Schema for todo response."""
    id: str
    completed: bool
    completed_at: Optional[datetime] = None
    last_occurrence_date: Optional[date] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
