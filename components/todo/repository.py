"""Repository for todo operations."""

from datetime import date, datetime
from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.todo.models import Todo
from components.todo.recurrence import RecurrenceRule, next_occurrence, projected_due_date
from components.todo import schemas

logger = structlog.get_logger(__name__)

PRIORITY_ORDER = {"high": 3, "mid": 2, "low": 1}


def sort_key(todo: schemas.Todo):
    """Open first, then by priority, then by due date with undated last."""
    return (
        todo.completed,
        -PRIORITY_ORDER[todo.priority],
        todo.due_date is None,
        todo.due_date or date.min,
    )


class TodoRepository:
    """Repository for todo operations."""

    def __init__(self, session: AsyncSession, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.user_id = user_id

    async def get_all(
        self,
        today: date,
        status: str = "all",
        priority: str = "all",
        recurring: str = "all",
    ) -> List[schemas.Todo]:
        """
        Get todos with optional filtering, sorted for display.

        Open recurring todos carry the due date of their current
        occurrence. The projection is not written back.
        """
        query = select(Todo).where(Todo.user_id == self.user_id)

        if status == "active":
            query = query.where(Todo.completed.is_(False))
        elif status == "completed":
            query = query.where(Todo.completed.is_(True))
        if priority != "all":
            query = query.where(Todo.priority == priority)
        if recurring == "recurring":
            query = query.where(Todo.is_recurring.is_(True))
        elif recurring == "non-recurring":
            query = query.where(Todo.is_recurring.is_(False))

        query = query.order_by(Todo.created_at.desc())
        result = await self.session.execute(query)

        todos = [
            schemas.Todo.model_validate(todo).model_copy(
                update={"due_date": projected_due_date(todo, today)}
            )
            for todo in result.scalars().all()
        ]
        return sorted(todos, key=sort_key)

    async def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get todo by ID."""
        result = await self.session.execute(
            select(Todo).where(Todo.id == todo_id, Todo.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def create(self, todo: schemas.TodoCreate) -> Todo:
        """Create a new todo."""
        db_todo = Todo(user_id=self.user_id, completed=False, **todo.model_dump())
        self.session.add(db_todo)
        await self.session.commit()
        await self.session.refresh(db_todo)
        logger.info("todo_created", todo_id=db_todo.id, is_recurring=db_todo.is_recurring)
        return db_todo

    async def toggle(self, todo_id: str, today: date) -> Optional[Todo]:
        """
        Flip the completed state of a todo.

        Completing a recurring todo also records the occurrence date and
        inserts an open copy due on the next occurrence.
        """
        db_todo = await self.get_by_id(todo_id)
        if not db_todo:
            return None

        rule = RecurrenceRule.of(db_todo)
        if not db_todo.completed and rule is not None:
            occurrence = db_todo.due_date or today
            db_todo.completed = True
            db_todo.completed_at = datetime.utcnow()
            db_todo.last_occurrence_date = occurrence

            next_due = next_occurrence(rule, occurrence)
            if next_due:
                self.session.add(Todo(
                    user_id=self.user_id,
                    title=db_todo.title,
                    description=db_todo.description,
                    priority=db_todo.priority,
                    is_recurring=True,
                    recurrence_type=db_todo.recurrence_type,
                    recurrence_value=db_todo.recurrence_value,
                    recurrence_day_of_month=db_todo.recurrence_day_of_month,
                    due_date=next_due,
                    completed=False,
                ))
            logger.info("recurring_todo_completed", todo_id=todo_id, next_due=str(next_due))
        else:
            db_todo.completed = not db_todo.completed
            db_todo.completed_at = datetime.utcnow() if db_todo.completed else None
            logger.info("todo_toggled", todo_id=todo_id, completed=db_todo.completed)

        await self.session.commit()
        await self.session.refresh(db_todo)
        return db_todo

    async def delete(self, todo_id: str) -> bool:
        """Delete todo by ID."""
        db_todo = await self.get_by_id(todo_id)
        if not db_todo:
            return False

        await self.session.delete(db_todo)
        await self.session.commit()
        logger.info("todo_deleted", todo_id=todo_id)
        return True
