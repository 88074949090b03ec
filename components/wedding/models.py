"""Wedding planning models for the database."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from components.core.database import Base, IdMixin, UserOwnedMixin


class TimestampMixin:
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class WeddingCategory(UserOwnedMixin, Base):
    """Category shared by wedding expenses, budget items and quotes."""
    __tablename__ = "wedding_categories"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_wedding_category_name"),)

    name = Column(String(100), nullable=False)


class WeddingExpense(UserOwnedMixin, Base):
    """Money already spent on the wedding."""
    __tablename__ = "wedding_expenses"

    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(255), nullable=False)
    category_id = Column(String(36), ForeignKey("wedding_categories.id", ondelete="SET NULL"), nullable=True)
    date = Column(Date, nullable=False)


class WeddingBudget(UserOwnedMixin, TimestampMixin, Base):
    """Wedding budget with an opening balance."""
    __tablename__ = "wedding_budgets"

    name = Column(String(255), nullable=False)
    initial_balance = Column(Numeric(10, 2), nullable=False, default=0)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    # Relationship with WeddingBudgetItems
    items = relationship("WeddingBudgetItem", back_populates="budget", cascade="all, delete-orphan")


class WeddingBudgetItem(IdMixin, Base):
    """Planned or actual (``is_real``) income or expense of a wedding budget."""
    __tablename__ = "wedding_budget_items"

    budget_id = Column(String(36), ForeignKey("wedding_budgets.id", ondelete="CASCADE"), nullable=False)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(Enum("income", "expense", name="wedding_item_type"), nullable=False)
    category_id = Column(String(36), ForeignKey("wedding_categories.id", ondelete="SET NULL"), nullable=True)
    is_real = Column(Boolean, nullable=False, default=False)
    date = Column(Date, nullable=True)

    budget = relationship("WeddingBudget", back_populates="items")


class WeddingQuote(UserOwnedMixin, TimestampMixin, Base):
    """Vendor quote for a wedding service."""
    __tablename__ = "wedding_quotes"

    person_name = Column(String(255), nullable=False)
    contact_info = Column(String(255), nullable=True)
    category_id = Column(String(36), ForeignKey("wedding_categories.id", ondelete="SET NULL"), nullable=True)
    concept = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    details = Column(Text, nullable=True)


class WeddingFolder(UserOwnedMixin, TimestampMixin, Base):
    """Folder grouping wedding notes."""
    __tablename__ = "wedding_folders"

    name = Column(String(255), nullable=False)

    # Relationship with WeddingNotes
    notes = relationship("WeddingNote", back_populates="folder", cascade="all, delete-orphan")


class WeddingNote(UserOwnedMixin, TimestampMixin, Base):
    """Free-text note inside a folder."""
    __tablename__ = "wedding_notes"

    folder_id = Column(String(36), ForeignKey("wedding_folders.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)

    folder = relationship("WeddingFolder", back_populates="notes")
