"""Script to seed sample household data into the database."""

from datetime import date, timedelta
import asyncio

import structlog
from sqlalchemy import delete

from components.core.config import get_settings
from components.core.init_db import db_manager, get_db
from components.core.log import configure_logging
from components.budget.models import Budget, BudgetItem
from components.finance.models import AirbnbExpense, AirbnbIncome, Expense, Income
from components.inventory.models import AirbnbProduct, Product
from components.shopping.models import AirbnbCart, AirbnbCartItem, Cart, CartItem
from components.todo.models import Todo
from components.wedding.models import (
    WeddingBudget,
    WeddingBudgetItem,
    WeddingCategory,
    WeddingExpense,
    WeddingFolder,
    WeddingNote,
    WeddingQuote,
)

logger = structlog.get_logger(__name__)

USER_TABLES = [
    Income, Expense, AirbnbIncome, AirbnbExpense,
    Product, AirbnbProduct, Cart, AirbnbCart,
    Todo, Budget,
    WeddingExpense, WeddingQuote, WeddingBudget, WeddingNote, WeddingFolder, WeddingCategory,
]
# Rows without a user_id column, cleared first
CHILD_TABLES = [CartItem, AirbnbCartItem, BudgetItem, WeddingBudgetItem]


def month_start(months_ago: int) -> date:
    today = date.today().replace(day=1)
    year, month = divmod(today.year * 12 + today.month - 1 - months_ago, 12)
    return date(year, month + 1, 1)


async def seed_data():
    """Clear the configured user's rows and seed sample data."""
    user_id = get_settings().USER_ID
    await db_manager.create_all()

    async for db in get_db():
        # Clear existing data
        for model in CHILD_TABLES:
            await db.execute(delete(model))
        for model in USER_TABLES:
            await db.execute(delete(model).where(model.user_id == user_id))
        await db.commit()

        # Six months of house and airbnb entries
        for months_ago in range(6):
            start = month_start(months_ago)
            db.add(Income(user_id=user_id, amount=2500, description="Salary", date=start,
                          is_recurring=True, recurring_day=1))
            db.add(Expense(user_id=user_id, amount=650, description="Rent", category="bills",
                           date=start + timedelta(days=4), is_recurring=True, recurring_day=5))
            db.add(Expense(user_id=user_id, amount=180 + months_ago * 10, description="Groceries - Walmart",
                           category="groceries", date=start + timedelta(days=10)))
            db.add(AirbnbIncome(user_id=user_id, amount=900 + months_ago * 50, description="Bookings",
                                date=start + timedelta(days=14)))
            db.add(AirbnbExpense(user_id=user_id, amount=120, description="Cleaning service",
                                 category="cleaning", date=start + timedelta(days=15),
                                 is_recurring=True, recurring_day=15))

        # Inventory
        for name, brand, supermarket, price, level in [
            ("Milk", "Dos Pinos", "Walmart", 1.85, "medium"),
            ("Rice", "San Francisco", "Super Selectos", 2.40, "full"),
            ("Coffee", "Coscafe", "Pricesmart", 8.99, "low"),
            ("Eggs", None, "Agromercado", 3.75, "none"),
        ]:
            db.add(Product(user_id=user_id, name=name, brand=brand, supermarket=supermarket,
                           last_price=price, inventory_level=level))
        for name, supplier, price in [("Towels", "Hotel Supply Co", 24.50), ("Soap", "CleanPro", 6.20)]:
            db.add(AirbnbProduct(user_id=user_id, name=name, supplier=supplier,
                                 last_price=price, inventory_level="full"))

        # Todos
        db.add(Todo(user_id=user_id, title="Pay electricity bill", priority="high",
                    is_recurring=True, recurrence_type="monthly", recurrence_day_of_month=10))
        db.add(Todo(user_id=user_id, title="Water the plants", priority="low",
                    is_recurring=True, recurrence_type="custom_days", recurrence_value=3))
        db.add(Todo(user_id=user_id, title="Fix the airbnb door lock",
                    due_date=date.today() + timedelta(days=2)))

        # House budget
        budget = Budget(user_id=user_id, name="Kitchen renovation")
        db.add(budget)
        await db.flush()
        db.add(BudgetItem(budget_id=budget.id, type="expense", amount=1200,
                          description="Countertops", date=date.today() + timedelta(days=30)))
        db.add(BudgetItem(budget_id=budget.id, type="income", amount=300,
                          description="Sell old appliances", date=date.today() + timedelta(days=20)))

        # Wedding
        categories = {name: WeddingCategory(user_id=user_id, name=name)
                      for name in ["Venue", "Catering", "Photography", "Music"]}
        db.add_all(categories.values())
        await db.flush()

        db.add(WeddingExpense(user_id=user_id, amount=1500, description="Venue deposit",
                              category_id=categories["Venue"].id, date=month_start(1)))
        for person, category, price in [
            ("Ana Lopez", "Photography", 1200),
            ("Studio Luz", "Photography", 950),
            ("DJ Carlos", "Music", 600),
        ]:
            db.add(WeddingQuote(user_id=user_id, person_name=person, concept=f"{category} package",
                                category_id=categories[category].id, price=price))

        wedding_budget = WeddingBudget(user_id=user_id, name="Wedding", initial_balance=10000)
        db.add(wedding_budget)
        await db.flush()
        db.add(WeddingBudgetItem(budget_id=wedding_budget.id, type="expense", amount=1500,
                                 description="Venue deposit", category_id=categories["Venue"].id,
                                 is_real=True, date=month_start(1)))
        db.add(WeddingBudgetItem(budget_id=wedding_budget.id, type="expense", amount=3000,
                                 description="Catering for 80 guests", category_id=categories["Catering"].id))

        folder = WeddingFolder(user_id=user_id, name="Ideas")
        db.add(folder)
        await db.flush()
        db.add(WeddingNote(user_id=user_id, folder_id=folder.id, title="Colors",
                           content="Sage green and ivory"))

        await db.commit()
        logger.info("seed_data_created", user_id=user_id)

if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed_data())
