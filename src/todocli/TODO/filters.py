# TODO/filters.py
from typing import Callable, Iterable, Iterator, List, Optional

from todocli.TODO.model import Priority, Todo, at_least, at_most

Predicate = Callable[[Todo], bool]


def by_project(project: str) -> Predicate:
    return lambda todo: todo.has_project_tag(project)


def by_context(context: str) -> Predicate:
    return lambda todo: todo.has_context_tag(context)


def by_min_priority(bound: Priority) -> Predicate:
    return lambda todo: at_least(todo.priority, bound)


def by_max_priority(bound: Priority) -> Predicate:
    return lambda todo: at_most(todo.priority, bound)


def build_filters(
    project: Optional[str] = None,
    context: Optional[str] = None,
    min_priority: Optional[Priority] = None,
    max_priority: Optional[Priority] = None,
) -> List[Predicate]:
    """Predicates in the order they are applied; absent options are skipped."""
    predicates = []
    if project:
        predicates.append(by_project(project))
    if context:
        predicates.append(by_context(context))
    if min_priority is not None:
        predicates.append(by_min_priority(min_priority))
    if max_priority is not None:
        predicates.append(by_max_priority(max_priority))
    return predicates


def filter_todos(
    todos: Iterable[Todo],
    project: Optional[str] = None,
    context: Optional[str] = None,
    min_priority: Optional[Priority] = None,
    max_priority: Optional[Priority] = None,
) -> Iterator[Todo]:
    predicates = build_filters(project, context, min_priority, max_priority)
    for todo in todos:
        if all(predicate(todo) for predicate in predicates):
            yield todo
