"""Dashboard endpoints: balances, monthly figures and history."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.dashboard.repository import DashboardRepository
from components.dashboard import schemas
from components.finance.repository import get_balance
from components.finance.schemas import Balance

router = APIRouter(
    tags=["dashboard"],
    responses={404: {"description": "Not found"}},
)


@router.get("/dashboard", response_model=schemas.Overview)
async def get_overview(
    as_of: Optional[date] = Query(None, description="Reference date for the monthly figures (defaults to today)"),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get the main dashboard.

    Returns, for the house and the airbnb property:
    - Total income, total expenses and balance
    - Income, expenses and cash flow of the month of ``as_of``

    plus the combined balance and combined monthly figures.
    """
    return await DashboardRepository(db, user_id).get_overview(as_of or date.today())


@router.get("/dashboard/history", response_model=schemas.History)
async def get_history(
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Year to show (defaults to the current year)"),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get the monthly history of a year.

    Every month with entries shows income and expenses per property, the
    cash flow, the balance carried over from the previous month and the
    accumulated balance. Months are listed most recent first.
    """
    today = date.today()
    return await DashboardRepository(db, user_id).get_history(year or today.year, today)


@router.get("/airbnb/dashboard", response_model=schemas.AirbnbDashboard)
async def get_airbnb_dashboard(
    as_of: Optional[date] = Query(None, description="Reference date for the monthly figures (defaults to today)"),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get this month's airbnb income, expenses, recurring costs and cash flow."""
    return await DashboardRepository(db, user_id).get_airbnb_dashboard(as_of or date.today())


@router.get("/house/balance", response_model=Balance)
async def get_house_balance(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get house income minus house expenses."""
    return await get_balance(db, user_id, "house")


@router.get("/airbnb/balance", response_model=Balance)
async def get_airbnb_balance(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get airbnb income minus airbnb expenses."""
    return await get_balance(db, user_id, "airbnb")
