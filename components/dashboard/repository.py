"""Repository for dashboard aggregates."""

from datetime import date
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from components.dashboard import rollup, schemas
from components.finance.models import AirbnbExpense, AirbnbIncome, Expense, Income
from components.finance.repository import LedgerRepository


class DashboardRepository:
    """Loads the four ledgers and hands them to the rollup functions."""

    def __init__(self, session: AsyncSession, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.user_id = user_id

    async def _entries(self, model) -> List:
        return await LedgerRepository(self.session, model, self.user_id).get_all()

    async def get_ledgers(self) -> Dict[str, List]:
        """Fetch every income and expense row of the user."""
        return {
            rollup.HOUSE_INCOME: await self._entries(Income),
            rollup.AIRBNB_INCOME: await self._entries(AirbnbIncome),
            rollup.HOUSE_EXPENSES: await self._entries(Expense),
            rollup.AIRBNB_EXPENSES: await self._entries(AirbnbExpense),
        }

    async def get_overview(self, as_of: date) -> schemas.Overview:
        return rollup.overview(await self.get_ledgers(), as_of)

    async def get_airbnb_dashboard(self, as_of: date) -> schemas.AirbnbDashboard:
        incomes = await self._entries(AirbnbIncome)
        expenses = await self._entries(AirbnbExpense)
        return rollup.airbnb_dashboard(incomes, expenses, as_of)

    async def get_history(self, year: int, today: date) -> schemas.History:
        """
        Get the monthly history for a given year.

        All entries are loaded, not just the selected year, so the
        accumulated balance includes every earlier month.
        """
        return rollup.history(await self.get_ledgers(), year, today)
