"""
reactodo - Reactive Todo List State

An observable, immutable todo store with memoized derived views, built to be
driven by an external view layer.
"""

from .app import TodoApp, seed_todos
from .config import TodoConfig, configure_logging
from .errors import (
    CircularDependencyError,
    ComputationError,
    DuplicateTodoError,
    ReactiveFunctionError,
    ReactodoError,
)
from .filters import FilterState, TodoListFilter
from .observable import ComputedObservable, Observable, reactive
from .store import Store
from .todo import Todo
from .todo_list import TodoList
from .views import active_count, completed_count, filtered_list

__version__ = "0.1.0"

__all__ = [
    # Reactive core
    "Observable",
    "ComputedObservable",
    "Store",
    "reactive",
    # Todo domain
    "Todo",
    "TodoList",
    "TodoListFilter",
    "FilterState",
    "TodoApp",
    "seed_todos",
    # Derived views
    "active_count",
    "completed_count",
    "filtered_list",
    # Configuration
    "TodoConfig",
    "configure_logging",
    # Exceptions
    "ReactodoError",
    "DuplicateTodoError",
    "ComputationError",
    "CircularDependencyError",
    "ReactiveFunctionError",
]
