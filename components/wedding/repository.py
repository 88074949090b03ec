"""Repositories for wedding planning operations."""

from datetime import datetime
from typing import Dict, List, Optional

import structlog
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.wedding.models import (
    WeddingBudget,
    WeddingBudgetItem,
    WeddingCategory,
    WeddingExpense,
    WeddingFolder,
    WeddingNote,
    WeddingQuote,
)
from components.wedding import schemas

logger = structlog.get_logger(__name__)


class DuplicateCategoryError(ValueError):
    """A category with the same name already exists for the user."""


class WeddingRepository:
    """Shared session handling and category lookup."""

    def __init__(self, session: AsyncSession, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.user_id = user_id

    async def category_names(self) -> Dict[str, str]:
        """Map of category id to name."""
        result = await self.session.execute(
            select(WeddingCategory).where(WeddingCategory.user_id == self.user_id)
        )
        return {category.id: category.name for category in result.scalars().all()}

    async def _get_owned(self, model, row_id: str):
        result = await self.session.execute(
            select(model).where(model.id == row_id, model.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def _delete_owned(self, model, row_id: str) -> bool:
        row = await self._get_owned(model, row_id)
        if not row:
            return False

        await self.session.delete(row)
        await self.session.commit()
        logger.info("wedding_row_deleted", table=model.__tablename__, row_id=row_id)
        return True

    async def _add(self, row):
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        logger.info("wedding_row_created", table=row.__tablename__, row_id=row.id)
        return row


class CategoryRepository(WeddingRepository):
    """Repository for wedding categories."""

    async def get_all(self) -> List[WeddingCategory]:
        """Get categories ordered by name."""
        result = await self.session.execute(
            select(WeddingCategory)
            .where(WeddingCategory.user_id == self.user_id)
            .order_by(WeddingCategory.name)
        )
        return list(result.scalars().all())

    async def create(self, category: schemas.CategoryCreate) -> WeddingCategory:
        """
        Create a new category.

        Raises:
            DuplicateCategoryError: the name is already used
        """
        try:
            return await self._add(WeddingCategory(user_id=self.user_id, name=category.name))
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning("duplicate_wedding_category", name=category.name)
            raise DuplicateCategoryError(category.name) from exc

    async def delete(self, category_id: str) -> bool:
        """Delete a category; rows using it become uncategorized."""
        if not await self._get_owned(WeddingCategory, category_id):
            return False

        for model in (WeddingExpense, WeddingBudgetItem, WeddingQuote):
            await self.session.execute(
                update(model).where(model.category_id == category_id).values(category_id=None)
            )
        return await self._delete_owned(WeddingCategory, category_id)


class ExpenseRepository(WeddingRepository):
    """Repository for wedding expenses."""

    async def get_all(self) -> schemas.ExpenseList:
        """Get expenses, most recent first, with their total."""
        names = await self.category_names()
        result = await self.session.execute(
            select(WeddingExpense)
            .where(WeddingExpense.user_id == self.user_id)
            .order_by(WeddingExpense.date.desc(), WeddingExpense.created_at.desc())
        )
        expenses = [self._to_schema(expense, names) for expense in result.scalars().all()]
        return schemas.ExpenseList(
            total=sum(expense.amount for expense in expenses),
            expenses=expenses,
        )

    async def create(self, expense: schemas.ExpenseCreate) -> schemas.Expense:
        """Create a new expense."""
        db_expense = await self._add(WeddingExpense(user_id=self.user_id, **expense.model_dump()))
        return self._to_schema(db_expense, await self.category_names())

    async def delete(self, expense_id: str) -> bool:
        """Delete expense by ID."""
        return await self._delete_owned(WeddingExpense, expense_id)

    @staticmethod
    def _to_schema(expense: WeddingExpense, names: Dict[str, str]) -> schemas.Expense:
        return schemas.Expense(
            id=expense.id,
            amount=float(expense.amount),
            description=expense.description,
            category_id=expense.category_id,
            category_name=names.get(expense.category_id, schemas.UNCATEGORIZED),
            date=expense.date,
        )


class BudgetRepository(WeddingRepository):
    """Repository for wedding budgets and their items."""

    async def get_all(self) -> List[WeddingBudget]:
        """Get budgets, newest first."""
        result = await self.session.execute(
            select(WeddingBudget)
            .where(WeddingBudget.user_id == self.user_id)
            .order_by(WeddingBudget.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, budget_id: str) -> Optional[WeddingBudget]:
        """Get budget by ID."""
        return await self._get_owned(WeddingBudget, budget_id)

    async def create(self, budget: schemas.BudgetCreate) -> WeddingBudget:
        """Create a new budget."""
        return await self._add(WeddingBudget(user_id=self.user_id, **budget.model_dump()))

    async def delete(self, budget_id: str) -> bool:
        """Delete budget and its items."""
        return await self._delete_owned(WeddingBudget, budget_id)

    async def get_items(self, budget_id: str) -> List[schemas.BudgetItem]:
        """Get the items of a budget by date, undated items last."""
        names = await self.category_names()
        result = await self.session.execute(
            select(WeddingBudgetItem)
            .where(WeddingBudgetItem.budget_id == budget_id)
            .order_by(WeddingBudgetItem.date.is_(None), WeddingBudgetItem.date, WeddingBudgetItem.created_at)
        )
        return [self._item_schema(item, names) for item in result.scalars().all()]

    async def add_item(self, budget_id: str, item: schemas.BudgetItemCreate) -> Optional[schemas.BudgetItem]:
        """Add an item to a budget."""
        if not await self.get_by_id(budget_id):
            return None

        db_item = WeddingBudgetItem(budget_id=budget_id, **item.model_dump())
        self.session.add(db_item)
        await self.session.commit()
        await self.session.refresh(db_item)
        logger.info("wedding_budget_item_added", budget_id=budget_id, item_id=db_item.id)
        return self._item_schema(db_item, await self.category_names())

    async def delete_item(self, budget_id: str, item_id: str) -> bool:
        """Delete an item of a budget."""
        if not await self.get_by_id(budget_id):
            return False

        result = await self.session.execute(
            select(WeddingBudgetItem).where(
                WeddingBudgetItem.id == item_id,
                WeddingBudgetItem.budget_id == budget_id,
            )
        )
        db_item = result.scalar_one_or_none()
        if not db_item:
            return False

        await self.session.delete(db_item)
        await self.session.commit()
        return True

    async def get_summary(self, budget_id: str) -> Optional[schemas.BudgetSummary]:
        """
        Balance of a budget after its items.

        ``projected_balance`` counts every item; the ``real_*`` figures only
        count items marked as actually paid or received.
        """
        budget = await self.get_by_id(budget_id)
        if not budget:
            return None

        items = await self.get_items(budget_id)
        initial = float(budget.initial_balance or 0)

        def total(kind: str, real_only: bool = False) -> float:
            return sum(
                item.amount for item in items
                if item.type == kind and (item.is_real or not real_only)
            )

        income, expenses = total("income"), total("expense")
        real_income, real_expenses = total("income", True), total("expense", True)
        return schemas.BudgetSummary(
            budget_id=budget_id,
            initial_balance=initial,
            income=income,
            expenses=expenses,
            projected_balance=initial + income - expenses,
            real_income=real_income,
            real_expenses=real_expenses,
            real_balance=initial + real_income - real_expenses,
        )

    @staticmethod
    def _item_schema(item: WeddingBudgetItem, names: Dict[str, str]) -> schemas.BudgetItem:
        return schemas.BudgetItem(
            id=item.id,
            budget_id=item.budget_id,
            type=item.type,
            amount=float(item.amount),
            description=item.description,
            category_id=item.category_id,
            category_name=names.get(item.category_id, schemas.UNCATEGORIZED),
            is_real=item.is_real,
            date=item.date,
        )


class QuoteRepository(WeddingRepository):
    """Repository for vendor quotes."""

    async def get_all(self) -> List[schemas.Quote]:
        """Get quotes, newest first."""
        names = await self.category_names()
        result = await self.session.execute(
            select(WeddingQuote)
            .where(WeddingQuote.user_id == self.user_id)
            .order_by(WeddingQuote.created_at.desc())
        )
        return [self._to_schema(quote, names) for quote in result.scalars().all()]

    async def create(self, quote: schemas.QuoteCreate) -> schemas.Quote:
        """Create a new quote."""
        db_quote = await self._add(WeddingQuote(user_id=self.user_id, **quote.model_dump()))
        return self._to_schema(db_quote, await self.category_names())

    async def delete(self, quote_id: str) -> bool:
        """Delete quote by ID."""
        return await self._delete_owned(WeddingQuote, quote_id)

    async def get_grouped(self) -> List[schemas.QuoteGroup]:
        """Quotes grouped by category, categories by name, uncategorized last."""
        groups: Dict[Optional[str], schemas.QuoteGroup] = {}
        for quote in await self.get_all():
            group = groups.setdefault(
                quote.category_id,
                schemas.QuoteGroup(
                    category_id=quote.category_id,
                    category_name=quote.category_name,
                    quotes=[],
                ),
            )
            group.quotes.append(quote)
        return sorted(groups.values(), key=lambda g: (g.category_id is None, g.category_name.lower()))

    async def compare(self, category_id: str) -> List[schemas.Quote]:
        """Quotes of one category, cheapest first."""
        quotes = [quote for quote in await self.get_all() if quote.category_id == category_id]
        return sorted(quotes, key=lambda quote: quote.price)

    @staticmethod
    def _to_schema(quote: WeddingQuote, names: Dict[str, str]) -> schemas.Quote:
        return schemas.Quote(
            id=quote.id,
            person_name=quote.person_name,
            contact_info=quote.contact_info,
            category_id=quote.category_id,
            category_name=names.get(quote.category_id, schemas.UNCATEGORIZED),
            concept=quote.concept,
            price=float(quote.price),
            details=quote.details,
            created_at=quote.created_at,
        )


class NoteRepository(WeddingRepository):
    """Repository for folders and notes."""

    async def get_folders(self) -> List[WeddingFolder]:
        """Get folders ordered by name."""
        result = await self.session.execute(
            select(WeddingFolder)
            .where(WeddingFolder.user_id == self.user_id)
            .order_by(WeddingFolder.name)
        )
        return list(result.scalars().all())

    async def get_folder(self, folder_id: str) -> Optional[WeddingFolder]:
        """Get folder by ID."""
        return await self._get_owned(WeddingFolder, folder_id)

    async def create_folder(self, folder: schemas.FolderCreate) -> WeddingFolder:
        """Create a new folder."""
        return await self._add(WeddingFolder(user_id=self.user_id, name=folder.name))

    async def delete_folder(self, folder_id: str) -> bool:
        """Delete folder and every note inside it."""
        return await self._delete_owned(WeddingFolder, folder_id)

    async def get_notes(self, folder_id: str) -> List[WeddingNote]:
        """Get the notes of a folder, last edited first."""
        result = await self.session.execute(
            select(WeddingNote)
            .where(WeddingNote.folder_id == folder_id, WeddingNote.user_id == self.user_id)
            .order_by(WeddingNote.updated_at.desc())
        )
        return list(result.scalars().all())

    async def create_note(self, folder_id: str, note: schemas.NoteCreate) -> Optional[WeddingNote]:
        """Create a note inside a folder."""
        if not await self.get_folder(folder_id):
            return None
        return await self._add(WeddingNote(user_id=self.user_id, folder_id=folder_id, **note.model_dump()))

    async def update_note(self, note_id: str, note: schemas.NoteUpdate) -> Optional[WeddingNote]:
        """Update title and/or content of a note."""
        db_note = await self._get_owned(WeddingNote, note_id)
        if not db_note:
            return None

        for name, value in note.model_dump(exclude_unset=True).items():
            if name == "title" and value is None:
                continue
            setattr(db_note, name, value)
        db_note.updated_at = datetime.utcnow()

        await self.session.commit()
        await self.session.refresh(db_note)
        logger.info("wedding_note_updated", note_id=note_id)
        return db_note

    async def delete_note(self, note_id: str) -> bool:
        """Delete note by ID."""
        return await self._delete_owned(WeddingNote, note_id)
