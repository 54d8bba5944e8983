"""
TodoApp - Application Root Scope
================================

TodoApp builds the whole reactive graph for one application instance: a Store,
the TodoList, the FilterState and the derived views. The view layer receives
the app (or any of its parts) explicitly; there is no global state, and
closing the app tears the graph down.

Example:
    ```python
    with TodoApp() as app:
        app.uncompleted_count.subscribe(lambda n: print(f"{n} items left"))

        app.todos.toggle("todo-0")         # prints "2 items left"
        app.filter.set_filter("completed")
        print(app.filtered_todos.value)     # (Todo(id='todo-0', ...),)
    ```
"""

import logging
from typing import Iterable, List, Optional

from . import views
from .config import SEED_TODOS, TodoConfig
from .filters import FilterState
from .store import Store
from .todo import Todo
from .todo_list import TodoList

logger = logging.getLogger(__name__)


def seed_todos() -> List[Todo]:
    """The todos a fresh app starts with."""
    return [
        Todo(id=todo_id, description=description, completed=False)
        for todo_id, description in SEED_TODOS
    ]


class TodoApp:
    """
    Explicit context wiring the todo state together.

    Attributes:
        store: Store owning every observable below.
        todos: The TodoList.
        filter: The FilterState.
        uncompleted_count: Derived number of active todos.
        completed_count: Derived number of completed todos.
        filtered_todos: Derived todos matching the current filter.

    Args:
        config: Settings; defaults to ``TodoConfig()``.
        todos: Starting todos. Overrides ``config.seed`` when given.
    """

    def __init__(
        self, config: Optional[TodoConfig] = None, todos: Optional[Iterable[Todo]] = None
    ):
        self.config = config or TodoConfig()

        if todos is None:
            todos = seed_todos() if self.config.seed else ()

        self.store = Store()
        self.todos = TodoList(
            self.store, todos, completed_by_default=self.config.completed_by_default
        )
        self.filter = FilterState(self.store)

        self.uncompleted_count = views.uncompleted_todos_count(self.store, self.todos)
        self.completed_count = views.completed_todos_count(self.store, self.todos)
        self.filtered_todos = views.filtered_todos(self.store, self.todos, self.filter)

        logger.debug("Started todo app with %d todo(s)", len(self.todos))

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> "TodoApp":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return (
            f"TodoApp(todos={len(self.todos)}, filter={self.filter.value.value}, "
            f"store={self.store!r})"
        )
