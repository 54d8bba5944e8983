"""
Shared pytest fixtures and configuration for reactodo tests.
"""

import pytest

from reactodo import FilterState, Store, TodoApp, TodoList, seed_todos


@pytest.fixture
def store():
    """Provide a fresh Store instance, closed after the test."""
    store = Store()
    yield store
    store.close()


@pytest.fixture
def seeded_todos():
    """The three seed todos: todo-0 "hi", todo-1 "hello", todo-2 "bonjour"."""
    return seed_todos()


@pytest.fixture
def todo_list(store, seeded_todos):
    """A TodoList holding the seed todos."""
    return TodoList(store, seeded_todos)


@pytest.fixture
def empty_todo_list(store):
    return TodoList(store, key="empty_todo_list")


@pytest.fixture
def filter_state(store):
    return FilterState(store)


@pytest.fixture
def app():
    """A seeded TodoApp, closed after the test."""
    with TodoApp() as app:
        yield app


@pytest.fixture
def recorder():
    """A listener that records every value it is called with."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, value):
            self.calls.append(value)

        @property
        def count(self):
            return len(self.calls)

        @property
        def last(self):
            return self.calls[-1]

    return Recorder()
