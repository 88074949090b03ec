"""House budget endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.repository import BudgetRepository
from components.budget import schemas
from components.core.init_db import get_db, get_user_id
from components.core.schemas import Message

router = APIRouter(
    prefix="/house/budgets",
    tags=["budgets"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Budget])
async def read_budgets(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get all budgets, newest first."""
    return await BudgetRepository(db, user_id).get_all()


@router.post("/", response_model=schemas.Budget, status_code=201)
async def create_budget(
    budget: schemas.BudgetCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Create a new budget."""
    return await BudgetRepository(db, user_id).create(budget)


@router.get("/{budget_id}", response_model=schemas.BudgetDetail)
async def read_budget(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get a budget with its items and projected balance."""
    repo = BudgetRepository(db, user_id)
    budget = await repo.get_by_id(budget_id)
    if budget is None:
        raise HTTPException(status_code=404, detail="Budget not found")

    return schemas.BudgetDetail(
        budget=schemas.Budget.model_validate(budget),
        items=[schemas.BudgetItem.model_validate(item) for item in await repo.get_items(budget_id)],
        summary=await repo.get_summary(budget_id),
    )


@router.delete("/{budget_id}", response_model=Message)
async def delete_budget(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a budget and all of its items."""
    if not await BudgetRepository(db, user_id).delete(budget_id):
        raise HTTPException(status_code=404, detail="Budget not found")
    return Message(message="Budget deleted")


@router.get("/{budget_id}/items", response_model=List[schemas.BudgetItem])
async def read_budget_items(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get the items of a budget by date."""
    repo = BudgetRepository(db, user_id)
    if await repo.get_by_id(budget_id) is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return await repo.get_items(budget_id)


@router.post("/{budget_id}/items", response_model=schemas.BudgetItem, status_code=201)
async def add_budget_item(
    budget_id: str,
    item: schemas.BudgetItemCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Add an income or expense to a budget."""
    db_item = await BudgetRepository(db, user_id).add_item(budget_id, item)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return db_item


@router.delete("/{budget_id}/items/{item_id}", response_model=Message)
async def delete_budget_item(
    budget_id: str,
    item_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Remove an item from a budget."""
    if not await BudgetRepository(db, user_id).delete_item(budget_id, item_id):
        raise HTTPException(status_code=404, detail="Budget item not found")
    return Message(message="Budget item deleted")


@router.get("/{budget_id}/summary", response_model=schemas.BudgetSummary)
async def read_budget_summary(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get the projected house balance after the budget.

    The projection starts from the current house balance (all house income
    minus all house expenses) and applies the budget's items.
    """
    summary = await BudgetRepository(db, user_id).get_summary(budget_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return summary
