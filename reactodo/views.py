"""
Derived views over a todo snapshot.

The plain functions are pure and never touch the containers. The factories
wrap them in ComputedObservables so each result is cached until the snapshot
or the filter is swapped, and subscribers only hear about values that changed:
editing a description leaves the uncompleted count alone, so nobody watching
only the count is notified.
"""

from typing import Sequence, Tuple

from .filters import FilterState, FilterValue, TodoListFilter
from .observable import ComputedObservable
from .store import Store
from .todo import Todo
from .todo_list import TodoList


def active_count(todos: Sequence[Todo]) -> int:
    """Number of todos that are not completed."""
    return sum(1 for todo in todos if not todo.completed)


def completed_count(todos: Sequence[Todo]) -> int:
    return sum(1 for todo in todos if todo.completed)


def filtered_list(todos: Tuple[Todo, ...], todo_filter: FilterValue) -> Tuple[Todo, ...]:
    """
    Apply a filter to a snapshot.

    ALL returns ``todos`` itself, unchanged. ACTIVE and COMPLETED return the
    matching todos in their original order.
    """
    todo_filter = TodoListFilter(todo_filter)
    if todo_filter is TodoListFilter.ACTIVE:
        return tuple(todo for todo in todos if not todo.completed)
    if todo_filter is TodoListFilter.COMPLETED:
        return tuple(todo for todo in todos if todo.completed)
    return todos


def uncompleted_todos_count(
    store: Store, todo_list: TodoList, key: str = "uncompleted_todos_count"
) -> ComputedObservable:
    return store.computed(active_count, todo_list.observable, key=key)


def completed_todos_count(
    store: Store, todo_list: TodoList, key: str = "completed_todos_count"
) -> ComputedObservable:
    return store.computed(completed_count, todo_list.observable, key=key)


def filtered_todos(
    store: Store,
    todo_list: TodoList,
    filter_state: FilterState,
    key: str = "filtered_todos",
) -> ComputedObservable:
    """The todo list after applying the current filter."""
    return store.computed(
        filtered_list, todo_list.observable, filter_state.observable, key=key
    )
