"""Pydantic schemas for dashboard data."""

from datetime import date
from typing import List

from pydantic import BaseModel


class PropertyTotals(BaseModel):
    """All-time and current-month figures for one property."""
    total_income: float
    total_expenses: float
    balance: float
    month_income: float
    month_expenses: float
    month_cash_flow: float


class Overview(BaseModel):
    """Schema for the main dashboard."""
    as_of: date
    house: PropertyTotals
    airbnb: PropertyTotals
    total_balance: float
    month_income: float
    month_expenses: float
    month_cash_flow: float


class AirbnbDashboard(BaseModel):
    """Schema for the airbnb dashboard."""
    as_of: date
    month_income: float
    month_expenses: float
    monthly_recurring_expenses: float
    month_cash_flow: float


class MonthData(BaseModel):
    """Schema for one calendar month of the history."""
    month: date  # First day of the month
    house_income: float
    airbnb_income: float
    total_income: float
    house_expenses: float
    airbnb_expenses: float
    total_expenses: float
    cash_flow: float
    carried_over_from_previous: float
    accumulated_balance: float


class History(BaseModel):
    """Schema for the monthly history of one year."""
    year: int
    available_years: List[int]
    months: List[MonthData]
