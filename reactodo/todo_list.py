"""
TodoList - The Authoritative Todo Collection
============================================

TodoList owns the ordered tuple of Todo values for an application. Its state is
never exposed for mutation: callers read snapshots and change them only through
the methods below, each of which builds a new tuple and swaps it in with a
single ``set`` on the underlying observable. A subscriber therefore sees either
the snapshot from before a call or the one after it, never a half-applied one.

Operations on an id that is not in the list are silent no-ops. They still
publish a (new, equal) snapshot, exactly like a successful call.

Example:
    ```python
    store = Store()
    todos = TodoList(store)

    todos.add("Buy groceries", completed=False)
    todo_id = todos.read()[0].id

    todos.toggle(todo_id)
    todos.edit(todo_id, "Buy more groceries")
    todos.remove(todo_id)
    ```
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from .config import COMPLETED_BY_DEFAULT
from .errors import DuplicateTodoError
from .observable import Observable
from .store import Store
from .todo import Todo

logger = logging.getLogger(__name__)

Snapshot = Tuple[Todo, ...]


def _check_unique_ids(todos: Iterable[Todo]) -> None:
    seen = set()
    for todo in todos:
        if todo.id in seen:
            raise DuplicateTodoError(todo.id)
        seen.add(todo.id)


class TodoList:
    """
    Reactive list of todos.

    Args:
        store: Store that owns the underlying observable.
        initial_todos: Optional starting todos; ids must be unique.
        completed_by_default: Completion flag for ``add`` calls that don't pass one.
        key: Observable key inside ``store``.

    Raises:
        DuplicateTodoError: ``initial_todos`` contains an id twice.
    """

    def __init__(
        self,
        store: Store,
        initial_todos: Optional[Iterable[Todo]] = None,
        completed_by_default: bool = COMPLETED_BY_DEFAULT,
        key: str = "todo_list",
    ):
        snapshot: Snapshot = tuple(initial_todos or ())
        _check_unique_ids(snapshot)

        self.completed_by_default = completed_by_default
        self._observable = store.observable(snapshot, key=key)

    # ==============================================================================================
    # Reading
    # ==============================================================================================

    @property
    def observable(self) -> Observable:
        return self._observable

    @property
    def state(self) -> Snapshot:
        return self._observable.value

    def read(self) -> Snapshot:
        """Return the current snapshot."""
        return self._observable.value

    def get(self, todo_id: str) -> Optional[Todo]:
        for todo in self.state:
            if todo.id == todo_id:
                return todo
        return None

    def subscribe(
        self, listener: Callable[[Snapshot], Any], call_immediately: bool = False
    ) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot; returns an unsubscribe function."""
        return self._observable.subscribe(listener, call_immediately=call_immediately)

    def __len__(self) -> int:
        return len(self.state)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.state)

    def __contains__(self, todo_id: object) -> bool:
        return any(todo.id == todo_id for todo in self.state)

    # ==============================================================================================
    # Mutations
    # ==============================================================================================

    def _publish(self, snapshot: Snapshot) -> None:
        self._observable.set(snapshot)

    def add(self, description: str, completed: Optional[bool] = None) -> Todo:
        """
        Append a new todo with a fresh id.

        Empty descriptions are accepted. When ``completed`` is omitted the
        list's ``completed_by_default`` is used.

        Returns:
            The created Todo.
        """
        if completed is None:
            completed = self.completed_by_default

        todo = Todo.create(description, completed=completed)
        logger.debug("Adding todo %s", todo.id)
        self._publish(self.state + (todo,))
        return todo

    def add_todo(self, todo: Todo) -> None:
        """
        Append an already built todo.

        Raises:
            DuplicateTodoError: a todo with the same id is already in the list.
        """
        if todo.id in self:
            raise DuplicateTodoError(todo.id)
        self._publish(self.state + (todo,))

    def toggle(self, todo_id: str) -> None:
        """Flip the completion status of the todo with ``todo_id``."""
        self._publish(
            tuple(todo.toggled() if todo.id == todo_id else todo for todo in self.state)
        )

    def edit(self, todo_id: str, description: str) -> None:
        """Replace the description of the todo with ``todo_id``."""
        self._publish(
            tuple(
                todo.with_description(description) if todo.id == todo_id else todo
                for todo in self.state
            )
        )

    def remove(self, target: Union[str, Todo]) -> None:
        """Remove a todo, given either its id or the Todo itself."""
        todo_id = target.id if isinstance(target, Todo) else target
        logger.debug("Removing todo %s", todo_id)
        self._publish(tuple(todo for todo in self.state if todo.id != todo_id))

    def clear_completed(self) -> None:
        """Remove every completed todo."""
        self._publish(tuple(todo for todo in self.state if not todo.completed))

    def __repr__(self) -> str:
        return f"TodoList({len(self)} todos)"
