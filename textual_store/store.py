"""Store - a single state value, a reducer, and the subscribers watching it."""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from itertools import count
from typing import Any, Generic, TypeVar

from .config import DEFAULT_CONFIG, StoreConfig
from .errors import ReentrantDispatchError, SubscriberError
from .types import Disposer, Reducer, Subscriber, Thunk

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")

_logger = logging.getLogger(__name__)


class Store(Generic[T, A]):
    """
    Holds the current state and applies actions to it through a reducer.

    Every dispatch replaces the state with ``reducer(state, action)`` and then
    calls each subscriber with the new state, in subscription order.

    Usage:
        ```python
        store = Store(TodoState(), todo_reducer, name="todos")

        dispose = store.subscribe(lambda state: print(state.todos))
        store.dispatch(AddTodo("Hello"))  # prints the new list
        dispose()
        ```
    """

    __slots__ = (
        "_state",
        "_reducer",
        "_name",
        "_config",
        "_subscribers",
        "_ids",
        "_lock",
        "_dispatching",
    )

    def __init__(
        self,
        state: T,
        reducer: Reducer[T, A],
        *,
        name: str | None = None,
        config: StoreConfig | None = None,
    ) -> None:
        """
        Initialize a new store.

        Args:
            state: The initial state, stored as-is.
            reducer: Function (state, action) -> new_state.
            name: Optional name for debugging.
            config: Behaviour switches, see StoreConfig.
        """
        self._state = state
        self._reducer = reducer
        self._name = name
        self._config = config or DEFAULT_CONFIG
        self._subscribers: dict[int, Subscriber[T]] = {}
        self._ids = count()
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._config.thread_safe else nullcontext()
        )
        self._dispatching = False

    @property
    def state(self) -> T:
        """Get the current state. Callers must not mutate it."""
        return self._state

    @property
    def reducer(self) -> Reducer[T, A]:
        """Get the reducer."""
        return self._reducer

    @property
    def name(self) -> str | None:
        """Get store name."""
        return self._name

    @property
    def config(self) -> StoreConfig:
        """Get store configuration."""
        return self._config

    def get_state(self) -> T:
        """Get the current state. Callers must not mutate it."""
        return self._state

    def dispatch(self, action: A) -> None:
        """
        Apply an action and notify subscribers.

        The new state is committed only once the reducer returns, so a failing
        reducer leaves the store untouched.

        Args:
            action: The action to pass to the reducer.

        Raises:
            ReentrantDispatchError: If called from a reducer or subscriber of
                this store while it is dispatching.
            SubscriberError: If subscribers raised and the store isolates
                subscribers. The new state stays committed.
        """
        with self._lock:
            if self._dispatching:
                raise ReentrantDispatchError(self._name, action)

            self._dispatching = True
            try:
                _logger.debug("Dispatching %r to store %r", action, self._name)
                new_state = self._reducer(self._state, action)
                self._state = new_state
                self._notify(new_state)
            finally:
                self._dispatching = False

    def _notify(self, state: T) -> None:
        errors: list[tuple[int, BaseException]] = []

        # Subscribers added during the pass wait for the next dispatch.
        for subscription_id in list(self._subscribers):
            callback = self._subscribers.get(subscription_id)
            if callback is None:
                continue

            if not self._config.isolate_subscribers:
                callback(state)
                continue

            try:
                callback(state)
            except Exception as error:
                _logger.warning(
                    "Subscriber %d of store %r failed",
                    subscription_id,
                    self._name,
                    exc_info=error,
                )
                errors.append((subscription_id, error))

        if errors:
            raise SubscriberError(errors) from errors[0][1]

    def subscribe(self, callback: Subscriber[T]) -> Disposer:
        """
        Register a callback for state changes.

        The callback is not called with the current state; it first runs on
        the next dispatch.

        Args:
            callback: A function that receives the new state.

        Returns:
            A function that removes the callback. Calling it again does nothing.
        """
        with self._lock:
            subscription_id = next(self._ids)
            self._subscribers[subscription_id] = callback

        _logger.debug(
            "Subscriber %d added to store %r", subscription_id, self._name
        )

        def dispose() -> None:
            with self._lock:
                removed = self._subscribers.pop(subscription_id, None)

            if removed is not None:
                _logger.debug(
                    "Subscriber %d removed from store %r",
                    subscription_id,
                    self._name,
                )

        return dispose

    def run(self, thunk: Thunk[T, A, R]) -> R:
        """
        Run an action creator against this store.

        Args:
            thunk: Function (dispatch, get_state) -> result.

        Returns:
            Whatever the thunk returns.

        Example:
            ```python
            def load_remote(dispatch, get_state):
                if get_state().is_loading:
                    return
                dispatch(StartLoading())

            store.run(load_remote)
            ```
        """
        return thunk(self.dispatch, self.get_state)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __bool__(self) -> bool:
        # A store without subscribers is still a store.
        return True

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"Store({self._state!r}{name})"


def create_store(
    reducer: Reducer[T, A],
    initial: T,
    *,
    name: str | None = None,
    config: StoreConfig | None = None,
) -> Store[T, A]:
    """
    Create a new store.

    Args:
        reducer: Function (state, action) -> new_state.
        initial: Initial state value.
        name: Optional name for debugging.
        config: Behaviour switches, see StoreConfig.

    Returns:
        A Store instance.

    Example:
        ```python
        from dataclasses import dataclass
        from pydantic import BaseModel

        class Counter(BaseModel):
            count: int = 0

        @dataclass(frozen=True)
        class Increment:
            amount: int = 1

        def reducer(state: Counter, action) -> Counter:
            match action:
                case Increment(amount):
                    return state.model_copy(update={"count": state.count + amount})
            return state

        counter = create_store(reducer, Counter())
        ```
    """
    return Store(initial, reducer, name=name, config=config)
