"""Income and expense models for the house and the airbnb property."""

from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String

from components.core.database import Base, UserOwnedMixin


class LedgerEntryMixin(UserOwnedMixin):
    """Columns shared by every income and expense table."""
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(255), nullable=False)
    is_recurring = Column(Boolean, nullable=False, default=False)
    recurring_day = Column(Integer, nullable=True)  # Day of month for recurring entries
    date = Column(Date, nullable=False, index=True)


class Income(LedgerEntryMixin, Base):
    """House income entry."""
    __tablename__ = "income"


class Expense(LedgerEntryMixin, Base):
    """House expense entry."""
    __tablename__ = "expenses"

    category = Column(String(50), nullable=False, default="general")


class AirbnbIncome(LedgerEntryMixin, Base):
    """Airbnb property income entry."""
    __tablename__ = "airbnb_income"


class AirbnbExpense(LedgerEntryMixin, Base):
    """Airbnb property expense entry."""
    __tablename__ = "airbnb_expenses"

    category = Column(String(50), nullable=False, default="general")
