"""To-do endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.core.schemas import Message
from components.todo.repository import TodoRepository
from components.todo import schemas

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Todo])
async def read_todos(
    status: schemas.StatusFilter = Query("all"),
    priority: schemas.PriorityFilter = Query("all"),
    recurring: schemas.RecurringFilter = Query("all"),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get todos with optional filtering.

    Open todos come first, then higher priority, then earlier due date.
    Open recurring todos show the due date of their current occurrence.
    """
    repo = TodoRepository(db, user_id)
    return await repo.get_all(
        today=date.today(),
        status=status,
        priority=priority,
        recurring=recurring
    )


@router.post("/", response_model=schemas.Todo, status_code=201)
async def create_todo(
    todo: schemas.TodoCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Create a new todo."""
    return await TodoRepository(db, user_id).create(todo)


@router.get("/{todo_id}", response_model=schemas.Todo)
async def read_todo(
    todo_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get a specific todo by ID."""
    todo = await TodoRepository(db, user_id).get_by_id(todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.post("/{todo_id}/toggle", response_model=schemas.Todo)
async def toggle_todo(
    todo_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Mark a todo as done or reopen it.

    Completing a recurring todo schedules its next occurrence as a new todo.
    """
    todo = await TodoRepository(db, user_id).toggle(todo_id, date.today())
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.delete("/{todo_id}", response_model=Message)
async def delete_todo(
    todo_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Delete a todo."""
    if not await TodoRepository(db, user_id).delete(todo_id):
        raise HTTPException(status_code=404, detail="Todo not found")
    return Message(message="Todo deleted")
