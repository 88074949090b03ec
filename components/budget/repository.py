"""Repository for house budget operations."""

from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.models import Budget, BudgetItem
from components.budget import schemas
from components.finance.repository import get_balance

logger = structlog.get_logger(__name__)


def split_totals(items: List) -> tuple:
    """(income, expenses) of a list of budget items."""
    income = sum(float(item.amount) for item in items if item.type == "income")
    expenses = sum(float(item.amount) for item in items if item.type == "expense")
    return income, expenses


class BudgetRepository:
    """Repository for house budgets and their items."""

    def __init__(self, session: AsyncSession, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.user_id = user_id

    async def get_all(self) -> List[Budget]:
        """Get all budgets, newest first."""
        result = await self.session.execute(
            select(Budget)
            .where(Budget.user_id == self.user_id)
            .order_by(Budget.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        """Get budget by ID."""
        result = await self.session.execute(
            select(Budget).where(Budget.id == budget_id, Budget.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def create(self, budget: schemas.BudgetCreate) -> Budget:
        """Create a new budget."""
        db_budget = Budget(user_id=self.user_id, name=budget.name)
        self.session.add(db_budget)
        await self.session.commit()
        await self.session.refresh(db_budget)
        logger.info("budget_created", budget_id=db_budget.id)
        return db_budget

    async def delete(self, budget_id: str) -> bool:
        """Delete budget and its items."""
        db_budget = await self.get_by_id(budget_id)
        if not db_budget:
            return False

        await self.session.delete(db_budget)
        await self.session.commit()
        logger.info("budget_deleted", budget_id=budget_id)
        return True

    async def get_items(self, budget_id: str) -> List[BudgetItem]:
        """Get the items of a budget by date."""
        result = await self.session.execute(
            select(BudgetItem)
            .where(BudgetItem.budget_id == budget_id)
            .order_by(BudgetItem.date, BudgetItem.created_at)
        )
        return list(result.scalars().all())

    async def add_item(self, budget_id: str, item: schemas.BudgetItemCreate) -> Optional[BudgetItem]:
        """Add an item to a budget."""
        if not await self.get_by_id(budget_id):
            return None

        db_item = BudgetItem(budget_id=budget_id, **item.model_dump())
        self.session.add(db_item)
        await self.session.commit()
        await self.session.refresh(db_item)
        logger.info("budget_item_added", budget_id=budget_id, item_id=db_item.id, type=db_item.type)
        return db_item

    async def delete_item(self, budget_id: str, item_id: str) -> bool:
        """Delete an item of a budget."""
        if not await self.get_by_id(budget_id):
            return False

        result = await self.session.execute(
            select(BudgetItem).where(BudgetItem.id == item_id, BudgetItem.budget_id == budget_id)
        )
        db_item = result.scalar_one_or_none()
        if not db_item:
            return False

        await self.session.delete(db_item)
        await self.session.commit()
        return True

    async def get_summary(self, budget_id: str) -> Optional[schemas.BudgetSummary]:
        """
        Project the house balance after the budget.

        The starting point is the current house balance (all income minus
        all expenses), not a balance stored on the budget.
        """
        if not await self.get_by_id(budget_id):
            return None

        income, expenses = split_totals(await self.get_items(budget_id))
        current = (await get_balance(self.session, self.user_id, "house")).balance
        return schemas.BudgetSummary(
            budget_id=budget_id,
            income=income,
            expenses=expenses,
            current_balance=current,
            projected_balance=current + income - expenses,
        )
