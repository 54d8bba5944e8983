"""
Observable - Snapshot Containers with Ordered Subscribers
=========================================================

An Observable holds one value and a list of subscribers. Setting it swaps the
whole value and then calls every subscriber synchronously, in registration
order, with the new value. Nothing is mutated in place, so a reader holding
the previous value keeps a consistent snapshot.

A ComputedObservable derives its value from one or more sources with a pure
function. It is virtual until someone subscribes to it: reads recompute on
demand, and the result is memoized on the identity of the source values, so
reading twice without an intervening swap calls the function once. Once
subscribed it attaches to its sources and only notifies when the derived value
actually changed. It detaches again when its last subscriber leaves.

Example:
    ```python
    todos = Observable("todos", ())
    count = todos >> len

    count.subscribe(lambda n: print(f"{n} items"))
    todos.set(("a", "b"))  # prints "2 items"
    todos.set(("c", "d"))  # count unchanged, nothing printed
    ```
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .errors import (
    CircularDependencyError,
    ComputationError,
    ReactiveFunctionError,
    ReactodoError,
)

logger = logging.getLogger(__name__)


class _Unset:
    """Sentinel for 'no value computed yet'."""

    def __repr__(self):
        return "UNSET"


UNSET = _Unset()


def _values_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    try:
        return bool(a == b)
    except (ValueError, TypeError):
        return False


# ============================================================================
# OBSERVABLE - Source Container
# ============================================================================


class Observable:
    """
    A mutable reference to an immutable value, with subscribers.

    Subscription contract:
    - subscribe() returns an unsubscribe function; calling it more than once is
      a no-op
    - subscribers run once per set(), after the new value is installed
    - subscribers run in registration order
    - setting an observable from inside one of its own subscribers raises
      CircularDependencyError
    """

    __slots__ = ("_key", "_value", "_callbacks", "_notifying")

    def __init__(self, key: str, initial_value: Any = None):
        self._key = key
        self._value = initial_value
        self._callbacks: List[Callable[[Any], None]] = []
        self._notifying = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._notifying:
            raise CircularDependencyError(
                f"Cannot modify '{self._key}' from within its own notification"
            )
        self._value = new_value
        self._emit(new_value)

    def set(self, new_value: Any) -> None:
        """Explicit setter (alias for value property)."""
        self.value = new_value

    def get(self) -> Any:
        """Explicit getter (alias for value property)."""
        return self.value

    def read(self) -> Any:
        """Return the current value without side effects."""
        return self.value

    def subscribe(
        self, callback: Callable[[Any], None], call_immediately: bool = False
    ) -> Callable[[], None]:
        """
        Register ``callback`` to receive every new value.

        Args:
            callback: Called with the new value after each change.
            call_immediately: Also call it once now with the current value.

        Returns:
            Unsubscribe function. Safe to call repeatedly.
        """
        self._track()
        self._callbacks.append(callback)
        active = True

        def unsubscribe():
            nonlocal active
            if active:
                active = False
                self._remove_callback(callback)

        if call_immediately:
            callback(self.value)

        return unsubscribe

    def unsubscribe(self, callback: Callable) -> None:
        """Remove one registration of ``callback``; unknown callbacks are ignored."""
        self._remove_callback(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def _remove_callback(self, callback: Callable) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _track(self) -> None:
        """Hook for derived observables that attach lazily."""
        pass

    def _emit(self, value: Any) -> None:
        if not self._callbacks:
            return

        logger.debug(
            "Notifying %d subscriber(s) of '%s'", len(self._callbacks), self._key
        )
        self._notifying = True
        try:
            for callback in list(self._callbacks):
                # Skip callbacks removed by an earlier subscriber in this round
                if callback not in self._callbacks:
                    continue
                try:
                    callback(value)
                except CircularDependencyError:
                    raise
                except Exception:
                    logger.exception(
                        "Subscriber %r of '%s' raised; continuing", callback, self._key
                    )
        finally:
            self._notifying = False

    def _close(self) -> None:
        self._callbacks.clear()

    # ========================================================================
    # OPERATORS
    # ========================================================================

    def __rshift__(self, transform: Callable[[Any], Any]) -> "ComputedObservable":
        """Map operator: obs >> f creates a derived observable of f(obs.value)."""
        return ComputedObservable(f"{self._key}>>", transform, self)

    def then(self, transform: Callable[[Any], Any]) -> "ComputedObservable":
        """Alias for >> operator."""
        return self >> transform

    def __repr__(self) -> str:
        return f"Observable({self._key}={self._value!r})"


# ============================================================================
# COMPUTED OBSERVABLE - Derived Values Memoized on Input Identity
# ============================================================================


class ComputedObservable(Observable):
    """
    Read-only observable whose value is ``func(*source values)``.

    States:
    - virtual: no subscribers, value computed on read
    - tracked: subscribed to its sources, recomputes when one of them emits;
      back to virtual when the last subscriber leaves

    In both states the function is skipped when every source value is the
    same object as in the previous computation.
    """

    __slots__ = (
        "_func",
        "_sources",
        "_inputs",
        "_last_emitted",
        "_is_tracked",
        "_source_unsubscribers",
        "compute_count",
    )

    def __init__(self, key: str, func: Callable[..., Any], *sources: Observable):
        if not sources:
            raise ValueError(f"Computed observable '{key}' needs at least one source")

        super().__init__(key, UNSET)
        self._func = func
        self._sources: Tuple[Observable, ...] = sources
        self._inputs: Optional[Tuple[Any, ...]] = None
        self._last_emitted: Any = UNSET
        self._is_tracked = False
        self._source_unsubscribers: List[Callable[[], None]] = []
        self.compute_count = 0

    @property
    def sources(self) -> Sequence[Observable]:
        return self._sources

    @property
    def value(self) -> Any:
        return self._compute()

    @value.setter
    def value(self, new_value: Any) -> None:
        raise TypeError(f"'{self._key}' is derived and cannot be set directly")

    def _compute(self) -> Any:
        inputs = tuple(src.value for src in self._sources)

        if self._inputs is not None and all(
            new is old for new, old in zip(inputs, self._inputs)
        ):
            return self._value

        try:
            result = self._func(*inputs)
        except ReactodoError:
            raise
        except Exception as e:
            raise ComputationError(f"Error in '{self._key}': {e}") from e

        self._inputs = inputs
        self._value = result
        self.compute_count += 1
        logger.debug("Recomputed '%s'", self._key)
        return result

    def _track(self) -> None:
        """Attach to the sources so changes are pushed to subscribers."""
        if self._is_tracked:
            return

        self._last_emitted = self._compute()
        self._is_tracked = True
        for source in self._sources:
            self._source_unsubscribers.append(source.subscribe(self._on_source_change))

    def _untrack(self) -> None:
        for unsubscribe in self._source_unsubscribers:
            unsubscribe()
        self._source_unsubscribers.clear()
        self._is_tracked = False
        self._last_emitted = UNSET

    def _remove_callback(self, callback: Callable) -> None:
        super()._remove_callback(callback)
        # Back to virtual once the last subscriber leaves
        if self._is_tracked and not self._callbacks:
            self._untrack()

    def _on_source_change(self, _new_value: Any) -> None:
        if not self._callbacks:
            return

        new_value = self._compute()
        if _values_equal(new_value, self._last_emitted):
            return

        self._last_emitted = new_value
        self._emit(new_value)

    def _close(self) -> None:
        super()._close()
        self._untrack()

    def __repr__(self) -> str:
        state = "tracked" if self._is_tracked else "virtual"
        value = self._value if self._inputs is not None else UNSET
        return f"ComputedObservable({self._key}={value!r}, {state})"


# ============================================================================
# @reactive DECORATOR
# ============================================================================


def reactive(*dependencies: Observable, call_immediately: bool = False):
    """
    Decorator for reactive functions.

    The decorated function runs whenever any dependency changes and receives
    the current value of every dependency, in the order they were given.

    By default it does NOT fire on decoration; pass call_immediately=True to
    run it once with the current values.

    Example:
        @reactive(todo_list.observable, todo_filter.observable)
        def render(todos, current_filter):
            print(len(todos), current_filter)
    """

    def decorator(func: Callable) -> Callable:
        def run(_changed: Any = None) -> None:
            func(*(dep.value for dep in dependencies))

        unsubscribers = [dep.subscribe(run) for dep in dependencies]
        unsubscribed = False

        def wrapper(*args, **kwargs):
            if not unsubscribed:
                raise ReactiveFunctionError(
                    "Reactive functions cannot be called manually. "
                    "They run automatically when dependencies change. "
                    "Call .unsubscribe() first to restore normal function behavior."
                )
            return func(*args, **kwargs)

        def unsubscribe():
            nonlocal unsubscribed
            for unsub in unsubscribers:
                unsub()
            unsubscribed = True

        wrapper.unsubscribe = unsubscribe
        wrapper.__wrapped__ = func
        wrapper.__name__ = getattr(func, "__name__", "reactive")
        wrapper.__doc__ = func.__doc__

        if call_immediately:
            run()

        return wrapper

    return decorator


__all__ = [
    "Observable",
    "ComputedObservable",
    "reactive",
    "UNSET",
]
