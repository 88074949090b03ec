"""
Recurrence rules for to-dos.

A rule is the triple (recurrence_type, recurrence_value,
recurrence_day_of_month) stored on a todo:

- daily: every day
- weekly: every 7 days
- custom_days: every ``recurrence_value`` days
- monthly: on ``recurrence_day_of_month``; days past the end of a month
  fall on that month's last day
"""

from datetime import date, timedelta
from typing import NamedTuple, Optional

from dateutil.relativedelta import relativedelta


class RecurrenceRule(NamedTuple):
    recurrence_type: str
    recurrence_value: Optional[int] = None
    recurrence_day_of_month: Optional[int] = None

    @classmethod
    def of(cls, todo) -> Optional["RecurrenceRule"]:
        """Rule of a todo row, None when it does not recur."""
        if not todo.is_recurring or not todo.recurrence_type:
            return None
        return cls(todo.recurrence_type, todo.recurrence_value, todo.recurrence_day_of_month)


def day_in_month(year: int, month: int, day: int) -> date:
    """``day`` of the given month, clamped to the month's last day."""
    return date(year, month, 1) + relativedelta(day=day)


def next_monthly(anchor: date, day: int) -> date:
    """First date strictly after ``anchor`` falling on ``day`` of a month."""
    candidate = day_in_month(anchor.year, anchor.month, day)
    if candidate <= anchor:
        following = anchor + relativedelta(months=1, day=1)
        candidate = day_in_month(following.year, following.month, day)
    return candidate


def next_occurrence(rule: RecurrenceRule, anchor: date) -> Optional[date]:
    """
    Due date of the occurrence following ``anchor``.

    Returns None when the rule is incomplete (custom_days without an
    interval, monthly without a day).
    """
    if rule.recurrence_type == "daily":
        return anchor + timedelta(days=1)
    if rule.recurrence_type == "weekly":
        return anchor + timedelta(days=7)
    if rule.recurrence_type == "custom_days":
        if not rule.recurrence_value or rule.recurrence_value < 1:
            return None
        return anchor + timedelta(days=rule.recurrence_value)
    if rule.recurrence_type == "monthly":
        if not rule.recurrence_day_of_month:
            return None
        return next_monthly(anchor, rule.recurrence_day_of_month)
    return None


def upcoming_monthly(today: date, day: int) -> date:
    """``day`` of this month, or of next month once it has passed."""
    candidate = day_in_month(today.year, today.month, day)
    if candidate < today:
        following = today + relativedelta(months=1, day=1)
        candidate = day_in_month(following.year, following.month, day)
    return candidate


def projected_due_date(todo, today: date) -> Optional[date]:
    """
    Due date shown for a todo when the list is loaded.

    Open recurring todos get the date of their current occurrence; every
    other todo keeps its stored due date.
    """
    rule = RecurrenceRule.of(todo)
    if todo.completed or rule is None:
        return todo.due_date

    if todo.last_occurrence_date is None:
        if rule.recurrence_type == "monthly":
            if not rule.recurrence_day_of_month:
                return todo.due_date
            return upcoming_monthly(today, rule.recurrence_day_of_month)
        return today

    if rule.recurrence_type == "monthly":
        if rule.recurrence_day_of_month and today == day_in_month(
            today.year, today.month, rule.recurrence_day_of_month
        ):
            return today
        return todo.due_date

    if today < todo.last_occurrence_date:
        return todo.due_date
    return next_occurrence(rule, todo.last_occurrence_date) or todo.due_date
