"""
Monthly cash-flow rollup.

Entries from the four ledgers (house/airbnb income and expenses) are
bucketed by calendar month. Every month between the earliest and the latest
entry is present, so the accumulated balance carries across empty months.
"""

from datetime import date
from typing import Dict, Iterable, List

import pandas as pd

from components.dashboard import schemas

HOUSE_INCOME = "house_income"
AIRBNB_INCOME = "airbnb_income"
HOUSE_EXPENSES = "house_expenses"
AIRBNB_EXPENSES = "airbnb_expenses"
SOURCES = [HOUSE_INCOME, AIRBNB_INCOME, HOUSE_EXPENSES, AIRBNB_EXPENSES]


def entries_frame(ledgers: Dict[str, Iterable]) -> pd.DataFrame:
    """Flatten ledger rows into a (source, date, amount) frame."""
    rows = [
        {"source": source, "date": entry.date, "amount": float(entry.amount)}
        for source, entries in ledgers.items()
        for entry in entries
    ]
    return pd.DataFrame(rows, columns=["source", "date", "amount"])


def in_month(entry_date: date, as_of: date) -> bool:
    return entry_date.year == as_of.year and entry_date.month == as_of.month


def sum_amounts(entries: Iterable) -> float:
    return sum(float(entry.amount) for entry in entries)


def sum_month(entries: Iterable, as_of: date) -> float:
    return sum_amounts(entry for entry in entries if in_month(entry.date, as_of))


def property_totals(incomes: List, expenses: List, as_of: date) -> schemas.PropertyTotals:
    """All-time balance and current-month cash flow for one property."""
    total_income = sum_amounts(incomes)
    total_expenses = sum_amounts(expenses)
    month_income = sum_month(incomes, as_of)
    month_expenses = sum_month(expenses, as_of)
    return schemas.PropertyTotals(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        month_income=month_income,
        month_expenses=month_expenses,
        month_cash_flow=month_income - month_expenses,
    )


def overview(ledgers: Dict[str, List], as_of: date) -> schemas.Overview:
    house = property_totals(ledgers[HOUSE_INCOME], ledgers[HOUSE_EXPENSES], as_of)
    airbnb = property_totals(ledgers[AIRBNB_INCOME], ledgers[AIRBNB_EXPENSES], as_of)
    month_income = house.month_income + airbnb.month_income
    month_expenses = house.month_expenses + airbnb.month_expenses
    return schemas.Overview(
        as_of=as_of,
        house=house,
        airbnb=airbnb,
        total_balance=house.balance + airbnb.balance,
        month_income=month_income,
        month_expenses=month_expenses,
        month_cash_flow=month_income - month_expenses,
    )


def airbnb_dashboard(incomes: List, expenses: List, as_of: date) -> schemas.AirbnbDashboard:
    month_income = sum_month(incomes, as_of)
    month_expenses = sum_month(expenses, as_of)
    return schemas.AirbnbDashboard(
        as_of=as_of,
        month_income=month_income,
        month_expenses=month_expenses,
        # Recurring expenses count once per month regardless of their date
        monthly_recurring_expenses=sum_amounts(e for e in expenses if e.is_recurring),
        month_cash_flow=month_income - month_expenses,
    )


def monthly_rollup(ledgers: Dict[str, Iterable]) -> List[schemas.MonthData]:
    """
    Bucket every entry into its calendar month, oldest month first.

    Months without entries inside the covered range are kept with zero
    figures. ``accumulated_balance`` is the running sum of ``cash_flow``;
    ``carried_over_from_previous`` is the previous month's accumulated
    balance.
    """
    frame = entries_frame(ledgers)
    if frame.empty:
        return []

    frame["month"] = pd.to_datetime(frame["date"]).dt.to_period("M")
    table = frame.pivot_table(
        index="month", columns="source", values="amount", aggfunc="sum", fill_value=0.0
    )
    months = pd.period_range(table.index.min(), table.index.max(), freq="M")
    table = table.reindex(index=months, columns=SOURCES, fill_value=0.0).astype(float)

    table["total_income"] = table[HOUSE_INCOME] + table[AIRBNB_INCOME]
    table["total_expenses"] = table[HOUSE_EXPENSES] + table[AIRBNB_EXPENSES]
    table["cash_flow"] = table["total_income"] - table["total_expenses"]
    table["accumulated_balance"] = table["cash_flow"].cumsum()
    table["carried_over_from_previous"] = table["accumulated_balance"].shift(1, fill_value=0.0)

    return [
        schemas.MonthData(
            month=date(period.year, period.month, 1),
            house_income=float(row[HOUSE_INCOME]),
            airbnb_income=float(row[AIRBNB_INCOME]),
            total_income=float(row["total_income"]),
            house_expenses=float(row[HOUSE_EXPENSES]),
            airbnb_expenses=float(row[AIRBNB_EXPENSES]),
            total_expenses=float(row["total_expenses"]),
            cash_flow=float(row["cash_flow"]),
            carried_over_from_previous=float(row["carried_over_from_previous"]),
            accumulated_balance=float(row["accumulated_balance"]),
        )
        for period, row in table.iterrows()
    ]


def history(ledgers: Dict[str, Iterable], year: int, today: date) -> schemas.History:
    """Months of ``year`` that have entries, most recent first."""
    months = [
        month for month in monthly_rollup(ledgers)
        if month.total_income > 0 or month.total_expenses > 0
    ]
    years = sorted({month.month.year for month in months}, reverse=True)
    return schemas.History(
        year=year,
        available_years=years or [today.year],
        months=[month for month in reversed(months) if month.month.year == year],
    )
