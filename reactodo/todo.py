"""
Todo - Immutable Todo Value Record
==================================

This module defines the Todo data structure held by a TodoList. A Todo is a
frozen value: toggling or editing one never changes it, the copy-update
methods below return a new instance with a single field replaced.

Example:
    ```python
    from reactodo.todo import Todo

    todo = Todo.create("Buy groceries")
    done = todo.toggled()

    assert not todo.completed
    assert done.completed and done.id == todo.id
    ```
"""

import uuid
from dataclasses import dataclass, replace

# UUID configuration
UUID_STRING_LENGTH = 36


@dataclass(frozen=True)
class Todo:
    """
    An immutable todo item.

    Attributes:
        id: Unique identifier, assigned once and never reused.
        description: Free text, may be empty.
        completed: Whether the todo is done.
    """

    id: str
    description: str
    completed: bool = False

    @classmethod
    def create(cls, description: str, completed: bool = False) -> "Todo":
        """
        Create a new Todo with a freshly generated uuid4 id.

        Two todos created with identical text still get different ids.
        """
        return cls(id=str(uuid.uuid4()), description=description, completed=completed)

    def with_completed(self, completed: bool) -> "Todo":
        """Return a copy with ``completed`` replaced."""
        return replace(self, completed=completed)

    def with_description(self, description: str) -> "Todo":
        """Return a copy with ``description`` replaced."""
        return replace(self, description=description)

    def toggled(self) -> "Todo":
        """Return a copy with the opposite completion status."""
        return self.with_completed(not self.completed)
