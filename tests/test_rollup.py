from datetime import date
from types import SimpleNamespace

import pytest

from components.dashboard import rollup


def entry(day, amount, is_recurring=False):
    return SimpleNamespace(date=day, amount=amount, is_recurring=is_recurring)


@pytest.fixture
def ledgers():
    return {
        rollup.HOUSE_INCOME: [entry(date(2024, 1, 15), 1000), entry(date(2024, 3, 1), 500)],
        rollup.AIRBNB_INCOME: [entry(date(2023, 12, 10), 200)],
        rollup.HOUSE_EXPENSES: [entry(date(2024, 1, 31), 300)],
        rollup.AIRBNB_EXPENSES: [entry(date(2024, 3, 20), 100)],
    }


def test_every_month_in_range_is_present(ledgers):
    months = rollup.monthly_rollup(ledgers)

    assert [m.month for m in months] == [
        date(2023, 12, 1), date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1)
    ]
    february = months[2]
    assert february.total_income == 0
    assert february.total_expenses == 0
    assert february.accumulated_balance == 900


def test_accumulated_balance_advances_by_cash_flow(ledgers):
    months = rollup.monthly_rollup(ledgers)

    carried = 0.0
    for month in months:
        assert month.carried_over_from_previous == carried
        assert month.cash_flow == month.total_income - month.total_expenses
        assert month.accumulated_balance == carried + month.cash_flow
        carried = month.accumulated_balance
    assert carried == 1300


def test_month_end_entry_stays_in_its_month(ledgers):
    january = rollup.monthly_rollup(ledgers)[1]

    assert january.month == date(2024, 1, 1)
    assert january.house_income == 1000
    assert january.house_expenses == 300
    assert january.cash_flow == 700
    assert january.carried_over_from_previous == 200


def test_history_of_a_year(ledgers):
    history = rollup.history(ledgers, 2024, today=date(2024, 4, 1))

    assert history.available_years == [2024, 2023]
    assert [m.month for m in history.months] == [date(2024, 3, 1), date(2024, 1, 1)]
    assert history.months[0].carried_over_from_previous == 900
    assert history.months[0].accumulated_balance == 1300


def test_history_of_an_earlier_year(ledgers):
    history = rollup.history(ledgers, 2023, today=date(2024, 4, 1))

    assert [m.month for m in history.months] == [date(2023, 12, 1)]
    assert history.months[0].airbnb_income == 200


def test_history_without_entries():
    empty = {source: [] for source in rollup.SOURCES}
    history = rollup.history(empty, 2024, today=date(2024, 4, 1))

    assert history.months == []
    assert history.available_years == [2024]


def test_overview(ledgers):
    overview = rollup.overview(ledgers, date(2024, 3, 25))

    assert overview.house.balance == 1200
    assert overview.house.month_income == 500
    assert overview.airbnb.balance == 100
    assert overview.airbnb.month_expenses == 100
    assert overview.total_balance == 1300
    assert overview.month_income == 500
    assert overview.month_expenses == 100
    assert overview.month_cash_flow == 400


def test_airbnb_dashboard_counts_recurring_expenses_regardless_of_date():
    incomes = [entry(date(2024, 3, 5), 800), entry(date(2024, 2, 5), 700)]
    expenses = [
        entry(date(2024, 3, 15), 120, is_recurring=True),
        entry(date(2023, 6, 1), 50, is_recurring=True),
        entry(date(2024, 3, 2), 30),
    ]

    dashboard = rollup.airbnb_dashboard(incomes, expenses, date(2024, 3, 31))

    assert dashboard.month_income == 800
    assert dashboard.month_expenses == 150
    assert dashboard.monthly_recurring_expenses == 170
    assert dashboard.month_cash_flow == 650
