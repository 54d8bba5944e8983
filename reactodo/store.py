"""
Store - Explicit Scope for Reactive State
=========================================

A Store groups the observables of one application instance. It is created by
the application root and passed to whatever needs to create state, instead of
living as a process-wide singleton. Closing the store detaches every
subscription it knows about, which ties the lifetime of the reactive graph to
the scope that built it.

Example:
    ```python
    store = Store()
    todos = store.observable((), key="todos")
    count = store.computed(len, todos, key="count")

    count.subscribe(print)
    todos.set(("a",))  # prints 1

    store.close()
    ```
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional

from .observable import ComputedObservable, Observable

logger = logging.getLogger(__name__)


class Store:
    """
    Namespace that creates, names and owns observables.

    Keys are generated as ``obs$N`` and ``computed$N`` unless one is given.
    Explicit keys must be unique within the store.
    """

    def __init__(self):
        self._observables: Dict[str, Observable] = {}
        self._key_counter = 0
        self._closed = False

    def observable(self, initial_value: Any = None, key: Optional[str] = None) -> Observable:
        """Create a source observable owned by this store."""
        obs = Observable(self._claim_key(key, "obs"), initial_value)
        self._observables[obs.key] = obs
        return obs

    def computed(
        self, func: Callable[..., Any], *sources: Observable, key: Optional[str] = None
    ) -> ComputedObservable:
        """Create a derived observable of ``func(*source values)`` owned by this store."""
        obs = ComputedObservable(self._claim_key(key, "computed"), func, *sources)
        self._observables[obs.key] = obs
        return obs

    def _claim_key(self, key: Optional[str], prefix: str) -> str:
        if self._closed:
            raise RuntimeError("Store is closed")

        if key is None:
            self._key_counter += 1
            key = f"{prefix}${self._key_counter}"

        if key in self._observables:
            raise ValueError(f"Key '{key}' is already used in this store")
        return key

    def __getitem__(self, key: str) -> Observable:
        return self._observables[key]

    def __contains__(self, key: str) -> bool:
        return key in self._observables

    def __iter__(self) -> Iterator[str]:
        return iter(self._observables)

    def __len__(self) -> int:
        return len(self._observables)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Detach all subscriptions and forget every observable."""
        if self._closed:
            return

        logger.debug("Closing store with %d observable(s)", len(self._observables))
        for obs in self._observables.values():
            obs._close()
        self._observables.clear()
        self._closed = True

    def stats(self) -> dict:
        computed = [
            obs for obs in self._observables.values() if isinstance(obs, ComputedObservable)
        ]
        return {
            "observable_count": len(self._observables),
            "source_count": len(self._observables) - len(computed),
            "computed_count": len(computed),
            "subscribers": sum(
                obs.subscriber_count for obs in self._observables.values()
            ),
            "computations": sum(obs.compute_count for obs in computed),
        }

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"observables={len(self._observables)}"
        return f"Store({state})"
