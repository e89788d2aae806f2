# TODO/ordering.py
"""Listing order for todos.

The comparator walks a fixed chain of keys; each step either returns a
definite order or falls through to the next one:

1. open and due, then open and not due, then completed
2. priority, A first, no priority last
3. deadline variant (see DEADLINE_RANK), then day or instant within a variant
4. creation date, dated records before undated ones
5. rendered description text

Every step compares a total preorder on its own key, so the whole chain is
a lexicographic order and stays transitive.
"""
from datetime import datetime
from functools import cmp_to_key
from typing import Iterable, List, Optional

from todocli.TODO.model import (
    AlwaysDeadline, DailyDeadline, DayDeadline, Deadline, InstantDeadline,
    NoDeadline, Todo, priority_cmp,
)

DEADLINE_RANK = {
    AlwaysDeadline: 0,
    DayDeadline: 1,
    InstantDeadline: 2,
    DailyDeadline: 3,
    NoDeadline: 4,
}


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _state(todo: Todo, now: datetime) -> int:
    if todo.completed:
        return 2
    return 0 if todo.due(now) else 1


def deadline_cmp(a: Deadline, b: Deadline) -> int:
    rank = _cmp(DEADLINE_RANK[type(a)], DEADLINE_RANK[type(b)])
    if rank:
        return rank
    if isinstance(a, DayDeadline):
        return _cmp(a.day, b.day)
    if isinstance(a, InstantDeadline):
        return _cmp(a.at, b.at)
    return 0


def creation_cmp(a: Todo, b: Todo) -> int:
    if a.creation is None and b.creation is None:
        return 0
    if a.creation is None:
        return 1
    if b.creation is None:
        return -1
    return _cmp(a.creation, b.creation)


def compare(a: Todo, b: Todo, now: Optional[datetime] = None) -> int:
    now = now or datetime.now()

    order = _cmp(_state(a, now), _state(b, now))
    if order:
        return order

    order = priority_cmp(a.priority, b.priority)
    if order:
        return order

    order = deadline_cmp(a.deadline, b.deadline)
    if order:
        return order

    order = creation_cmp(a, b)
    if order:
        return order

    return _cmp(a.description, b.description)


def sort_todos(todos: Iterable[Todo], now: Optional[datetime] = None) -> List[Todo]:
    """Return a sorted copy; the input sequence is left in its own order."""
    # One clock reading per sort keeps due-ness consistent across comparisons.
    now = now or datetime.now()
    return sorted(todos, key=cmp_to_key(lambda a, b: compare(a, b, now)))
