"""
Exceptions raised by reactodo.

Missing todo ids are never an error: toggle, edit and remove on an unknown id
leave the collection as it was and raise nothing. The exceptions below cover
the remaining failure modes of the reactive layer and the todo invariants.
"""


class ReactodoError(Exception):
    """Base class for every reactodo exception."""

    pass


class DuplicateTodoError(ReactodoError, ValueError):
    """Raised when a todo would share its id with one already in the list."""

    def __init__(self, todo_id: str):
        super().__init__(f"A todo with id '{todo_id}' already exists")
        self.todo_id = todo_id


class ComputationError(ReactodoError):
    """Raised when a derived value fails to evaluate."""

    pass


class CircularDependencyError(ReactodoError):
    """Raised when an observable is set from within its own notification."""

    pass


class ReactiveFunctionError(ReactodoError):
    """Reactive function called manually."""

    pass
