"""Income and expense endpoints for the house and the airbnb property."""

from typing import Type

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.core.schemas import Message
from components.finance.models import AirbnbExpense, AirbnbIncome, Expense, Income
from components.finance.repository import LedgerRepository
from components.finance import schemas


def ledger_router(
    prefix: str, model, create_schema: Type, entry_schema: Type, list_schema: Type, tag: str
) -> APIRouter:
    """
    Router for one ledger table.

    Every ledger exposes the same operations: list with total, create and
    delete. ``create_schema`` decides which expense categories are valid.
    """
    router = APIRouter(
        prefix=prefix,
        tags=[tag],
        responses={404: {"description": "Not found"}},
    )

    @router.get("/", response_model=list_schema)
    async def list_entries(
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Get all entries, most recent first, with their total."""
        repo = LedgerRepository(db, model, user_id)
        entries = await repo.get_all()
        return list_schema(
            total=sum(float(entry.amount) for entry in entries),
            entries=[entry_schema.model_validate(entry) for entry in entries],
        )

    @router.post("/", response_model=entry_schema, status_code=201)
    async def create_entry(
        entry: create_schema,
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Add an entry."""
        return await LedgerRepository(db, model, user_id).create(entry)

    @router.delete("/{entry_id}", response_model=Message)
    async def delete_entry(
        entry_id: str,
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Delete an entry."""
        if not await LedgerRepository(db, model, user_id).delete(entry_id):
            raise HTTPException(status_code=404, detail="Entry not found")
        return Message(message="Entry deleted")

    return router


house_income = ledger_router(
    "/house/income", Income, schemas.IncomeCreate, schemas.Income, schemas.IncomeList, "house"
)
house_expenses = ledger_router(
    "/house/expenses", Expense, schemas.HouseExpenseCreate, schemas.Expense, schemas.ExpenseList, "house"
)
airbnb_income = ledger_router(
    "/airbnb/income", AirbnbIncome, schemas.IncomeCreate, schemas.Income, schemas.IncomeList, "airbnb"
)
airbnb_expenses = ledger_router(
    "/airbnb/expenses", AirbnbExpense, schemas.AirbnbExpenseCreate, schemas.Expense, schemas.ExpenseList, "airbnb"
)

routers = [house_income, house_expenses, airbnb_income, airbnb_expenses]
