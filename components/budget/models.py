"""House budget models for the database."""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from components.core.database import Base, IdMixin, UserOwnedMixin

ITEM_TYPES = ("income", "expense")


class Budget(UserOwnedMixin, Base):
    """Named plan of future house income and expenses."""
    __tablename__ = "budgets"

    name = Column(String(255), nullable=False)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship with BudgetItems
    items = relationship("BudgetItem", back_populates="budget", cascade="all, delete-orphan")


class BudgetItem(IdMixin, Base):
    """Planned income or expense of a house budget."""
    __tablename__ = "budget_items"

    budget_id = Column(String(36), ForeignKey("budgets.id", ondelete="CASCADE"), nullable=False)
    type = Column(Enum(*ITEM_TYPES, name="budget_item_type"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)

    budget = relationship("Budget", back_populates="items")
