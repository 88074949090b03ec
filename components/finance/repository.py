"""Repository for income and expense operations."""

from typing import List, Type, Union

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.finance.models import AirbnbExpense, AirbnbIncome, Expense, Income
from components.finance import schemas

logger = structlog.get_logger(__name__)

LedgerModel = Union[Type[Income], Type[Expense], Type[AirbnbIncome], Type[AirbnbExpense]]

LEDGERS = {
    "house": (Income, Expense),
    "airbnb": (AirbnbIncome, AirbnbExpense),
}


class LedgerRepository:
    """Repository for one income or expense table."""

    def __init__(self, session: AsyncSession, model: LedgerModel, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.model = model
        self.user_id = user_id

    async def get_all(self) -> List:
        """Get all entries for the user, most recent first."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == self.user_id)
            .order_by(self.model.date.desc(), self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, entry_id: str):
        """Get entry by ID."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == entry_id,
                self.model.user_id == self.user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(self, entry: Union[schemas.IncomeCreate, schemas.ExpenseCreate]):
        """Create a new entry."""
        db_entry = self.model(user_id=self.user_id, **entry.model_dump())
        self.session.add(db_entry)
        await self.session.commit()
        await self.session.refresh(db_entry)
        logger.info(
            "ledger_entry_created",
            table=self.model.__tablename__,
            entry_id=db_entry.id,
            amount=float(db_entry.amount),
        )
        return db_entry

    async def delete(self, entry_id: str) -> bool:
        """Delete entry by ID."""
        db_entry = await self.get_by_id(entry_id)
        if not db_entry:
            return False

        await self.session.delete(db_entry)
        await self.session.commit()
        logger.info("ledger_entry_deleted", table=self.model.__tablename__, entry_id=entry_id)
        return True

    async def total(self) -> float:
        """Sum of all amounts for the user."""
        result = await self.session.execute(
            select(func.sum(self.model.amount)).where(self.model.user_id == self.user_id)
        )
        return float(result.scalar() or 0)


async def get_balance(session: AsyncSession, user_id: str, property_name: str) -> schemas.Balance:
    """Income minus expenses for the house or the airbnb property."""
    income_model, expense_model = LEDGERS[property_name]
    total_income = await LedgerRepository(session, income_model, user_id).total()
    total_expenses = await LedgerRepository(session, expense_model, user_id).total()
    return schemas.Balance(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )
