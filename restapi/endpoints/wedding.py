"""Wedding planning endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.core.schemas import Message
from components.wedding.repository import (
    BudgetRepository,
    CategoryRepository,
    DuplicateCategoryError,
    ExpenseRepository,
    NoteRepository,
    QuoteRepository,
)
from components.wedding import schemas

router = APIRouter(
    prefix="/wedding",
    tags=["wedding"],
    responses={404: {"description": "Not found"}},
)


# Categories

@router.get("/categories", response_model=List[schemas.Category])
async def read_categories(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get all categories by name."""
    return await CategoryRepository(db, user_id).get_all()


@router.post("/categories", response_model=schemas.Category, status_code=201)
async def create_category(
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Create a new category."""
    try:
        return await CategoryRepository(db, user_id).create(category)
    except DuplicateCategoryError:
        raise HTTPException(status_code=400, detail="Category already exists")


@router.delete("/categories/{category_id}", response_model=Message)
async def delete_category(
    category_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a category; expenses, items and quotes using it become uncategorized."""
    if not await CategoryRepository(db, user_id).delete(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Message(message="Category deleted")


# Expenses

@router.get("/expenses", response_model=schemas.ExpenseList)
async def read_expenses(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get wedding expenses, most recent first, with their total."""
    return await ExpenseRepository(db, user_id).get_all()


@router.post("/expenses", response_model=schemas.Expense, status_code=201)
async def create_expense(
    expense: schemas.ExpenseCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Add a wedding expense."""
    return await ExpenseRepository(db, user_id).create(expense)


@router.delete("/expenses/{expense_id}", response_model=Message)
async def delete_expense(
    expense_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a wedding expense."""
    if not await ExpenseRepository(db, user_id).delete(expense_id):
        raise HTTPException(status_code=404, detail="Expense not found")
    return Message(message="Expense deleted")


# Budgets

@router.get("/budgets", response_model=List[schemas.Budget])
async def read_budgets(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get wedding budgets, newest first."""
    return await BudgetRepository(db, user_id).get_all()


@router.post("/budgets", response_model=schemas.Budget, status_code=201)
async def create_budget(
    budget: schemas.BudgetCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Create a wedding budget."""
    return await BudgetRepository(db, user_id).create(budget)


@router.delete("/budgets/{budget_id}", response_model=Message)
async def delete_budget(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a wedding budget and its items."""
    if not await BudgetRepository(db, user_id).delete(budget_id):
        raise HTTPException(status_code=404, detail="Budget not found")
    return Message(message="Budget deleted")


@router.get("/budgets/{budget_id}/items", response_model=List[schemas.BudgetItem])
async def read_budget_items(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get the items of a wedding budget by date, undated last."""
    repo = BudgetRepository(db, user_id)
    if await repo.get_by_id(budget_id) is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return await repo.get_items(budget_id)


@router.post("/budgets/{budget_id}/items", response_model=schemas.BudgetItem, status_code=201)
async def add_budget_item(
    budget_id: str,
    item: schemas.BudgetItemCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Add a planned or real income or expense to a wedding budget."""
    db_item = await BudgetRepository(db, user_id).add_item(budget_id, item)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return db_item


@router.delete("/budgets/{budget_id}/items/{item_id}", response_model=Message)
async def delete_budget_item(
    budget_id: str,
    item_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Remove an item from a wedding budget."""
    if not await BudgetRepository(db, user_id).delete_item(budget_id, item_id):
        raise HTTPException(status_code=404, detail="Budget item not found")
    return Message(message="Budget item deleted")


@router.get("/budgets/{budget_id}/summary", response_model=schemas.BudgetSummary)
async def read_budget_summary(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get the balance of a wedding budget.

    Returns:
    - Projected balance: initial balance plus all income minus all expenses
    - Real balance: the same, counting only items marked as real
    """
    summary = await BudgetRepository(db, user_id).get_summary(budget_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    return summary


# Quotes

@router.get("/quotes", response_model=List[schemas.Quote])
async def read_quotes(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get vendor quotes, newest first."""
    return await QuoteRepository(db, user_id).get_all()


@router.get("/quotes/grouped", response_model=List[schemas.QuoteGroup])
async def read_grouped_quotes(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get vendor quotes grouped by category."""
    return await QuoteRepository(db, user_id).get_grouped()


@router.get("/quotes/compare/{category_id}", response_model=List[schemas.Quote])
async def compare_quotes(
    category_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get the quotes of one category, cheapest first."""
    return await QuoteRepository(db, user_id).compare(category_id)


@router.post("/quotes", response_model=schemas.Quote, status_code=201)
async def create_quote(
    quote: schemas.QuoteCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Add a vendor quote."""
    return await QuoteRepository(db, user_id).create(quote)


@router.delete("/quotes/{quote_id}", response_model=Message)
async def delete_quote(
    quote_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a vendor quote."""
    if not await QuoteRepository(db, user_id).delete(quote_id):
        raise HTTPException(status_code=404, detail="Quote not found")
    return Message(message="Quote deleted")


# Folders & notes

@router.get("/folders", response_model=List[schemas.Folder])
async def read_folders(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get note folders by name."""
    return await NoteRepository(db, user_id).get_folders()


@router.post("/folders", response_model=schemas.Folder, status_code=201)
async def create_folder(
    folder: schemas.FolderCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Create a note folder."""
    return await NoteRepository(db, user_id).create_folder(folder)


@router.delete("/folders/{folder_id}", response_model=Message)
async def delete_folder(
    folder_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a folder and every note inside it."""
    if not await NoteRepository(db, user_id).delete_folder(folder_id):
        raise HTTPException(status_code=404, detail="Folder not found")
    return Message(message="Folder deleted")


@router.get("/folders/{folder_id}/notes", response_model=List[schemas.Note])
async def read_notes(
    folder_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get the notes of a folder, last edited first."""
    repo = NoteRepository(db, user_id)
    if await repo.get_folder(folder_id) is None:
        raise HTTPException(status_code=404, detail="Folder not found")
    return await repo.get_notes(folder_id)


@router.post("/folders/{folder_id}/notes", response_model=schemas.Note, status_code=201)
async def create_note(
    folder_id: str,
    note: schemas.NoteCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Add a note to a folder."""
    db_note = await NoteRepository(db, user_id).create_note(folder_id, note)
    if db_note is None:
        raise HTTPException(status_code=404, detail="Folder not found")
    return db_note


@router.patch("/notes/{note_id}", response_model=schemas.Note)
async def update_note(
    note_id: str,
    note: schemas.NoteUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Change the title and/or content of a note."""
    db_note = await NoteRepository(db, user_id).update_note(note_id, note)
    if db_note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return db_note


@router.delete("/notes/{note_id}", response_model=Message)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a note."""
    if not await NoteRepository(db, user_id).delete_note(note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return Message(message="Note deleted")
