"""The currently selected todo filter."""

import logging
from enum import Enum
from typing import Any, Callable, Union

from .observable import Observable
from .store import Store

logger = logging.getLogger(__name__)


class TodoListFilter(str, Enum):
    """The different ways a todo list can be filtered."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


FilterValue = Union[TodoListFilter, str]


class FilterState:
    """
    Holds exactly one TodoListFilter.

    ``set_filter`` always publishes, even when the new value equals the old one.
    """

    def __init__(
        self,
        store: Store,
        initial: FilterValue = TodoListFilter.ALL,
        key: str = "todo_list_filter",
    ):
        self._observable = store.observable(TodoListFilter(initial), key=key)

    @property
    def observable(self) -> Observable:
        return self._observable

    @property
    def value(self) -> TodoListFilter:
        return self._observable.value

    def read(self) -> TodoListFilter:
        return self._observable.value

    def set_filter(self, value: FilterValue) -> None:
        """
        Select a filter.

        Raises:
            ValueError: ``value`` is not a TodoListFilter or one of its values.
        """
        new_filter = TodoListFilter(value)
        logger.debug("Filter set to %s", new_filter.value)
        self._observable.set(new_filter)

    def subscribe(
        self, listener: Callable[[TodoListFilter], Any], call_immediately: bool = False
    ) -> Callable[[], None]:
        return self._observable.subscribe(listener, call_immediately=call_immediately)

    def __repr__(self) -> str:
        return f"FilterState({self.value.value})"
