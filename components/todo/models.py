"""Todo model for the database."""

from sqlalchemy import Boolean, Column, Date, DateTime, Enum, Integer, String, Text

from components.core.database import Base, UserOwnedMixin

PRIORITIES = ("low", "mid", "high")
RECURRENCE_TYPES = ("daily", "weekly", "monthly", "custom_days")


class Todo(UserOwnedMixin, Base):
    """To-do item, optionally regenerated on a schedule."""
    __tablename__ = "todos"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(Enum(*PRIORITIES, name="todo_priority"), nullable=False, default="mid")
    is_recurring = Column(Boolean, nullable=False, default=False)
    recurrence_type = Column(Enum(*RECURRENCE_TYPES, name="recurrence_type"), nullable=True)
    recurrence_value = Column(Integer, nullable=True)  # Interval in days for custom_days
    recurrence_day_of_month = Column(Integer, nullable=True)  # Day for monthly
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime, nullable=True)
    last_occurrence_date = Column(Date, nullable=True)
