"""React-like hooks binding Textual widgets to a store."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from textual.message import Message

from .effects import find_effects
from .provider import find_store
from .store import Store
from .types import Disposer, Thunk

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


class StoreChanged(Message):
    """Message posted to subscribed widgets after a store dispatch."""

    def __init__(self, store: Store[Any, Any], old_value: Any, new_value: Any) -> None:
        super().__init__()
        self.store = store
        self.old_value = old_value
        self.new_value = new_value


class StoreHandle(Generic[T, A]):
    """
    Handle returned by use_store() - provides access to state and dispatch.

    With a selector, ``value`` is the selected part of the state.
    """

    __slots__ = ("_store", "_selector", "_last", "_dispose")

    def __init__(
        self,
        store: Store[Any, A],
        selector: Callable[[Any], T] | None = None,
    ) -> None:
        self._store = store
        self._selector = selector
        self._last: T = self._select(store.state)
        self._dispose: Disposer | None = None

    def _select(self, state: Any) -> T:
        if self._selector is None:
            return state
        return self._selector(state)

    @property
    def value(self) -> T:
        """Get the current (selected) state value."""
        return self._select(self._store.state)

    @property
    def store(self) -> Store[Any, A]:
        """Get the store this handle belongs to."""
        return self._store

    @property
    def closed(self) -> bool:
        """Whether the handle no longer receives changes."""
        return self._dispose is None

    def dispatch(self, action: A) -> None:
        """Dispatch an action to the store."""
        self._store.dispatch(action)

    def run(self, thunk: Thunk[Any, A, R]) -> R:
        """Run an action creator against the store."""
        return self._store.run(thunk)

    def close(self) -> None:
        """Stop receiving changes. Safe to call more than once."""
        dispose, self._dispose = self._dispose, None
        if dispose is not None:
            dispose()

    def __call__(self) -> T:
        """Shorthand to get current value."""
        return self.value


def use_store(
    widget: Any,
    store: Store[Any, A] | None = None,
    *,
    selector: Callable[[Any], T] | None = None,
    subscribe: bool = True,
) -> StoreHandle[Any, A]:
    """
    Consume a store from a widget.

    Every dispatch posts a StoreChanged message to the widget and calls its
    @effect methods targeting the store with (old, new). With a selector,
    both only happen when the selected value changes.

    Args:
        widget: The widget consuming the store.
        store: The store to use. Defaults to the nearest StoreProvider's.
        selector: Optional function deriving the value the widget cares about.
        subscribe: Whether to post StoreChanged messages (default True).
            Effects run either way.

    Returns:
        A StoreHandle with .value, .dispatch() and .close().

    Raises:
        StoreNotFoundError: If no store is given and no provider is found.

    Example:
        ```python
        class TodoList(Widget):
            def on_mount(self):
                self.visible = use_store(self, selector=visible_todos)

            def on_store_changed(self, event: StoreChanged) -> None:
                self.rebuild(event.new_value)

            def on_unmount(self):
                self.visible.close()
        ```
    """
    if store is None:
        store = find_store(widget)

    handle: StoreHandle[Any, A] = StoreHandle(store, selector)
    effects = find_effects(widget, store)

    def on_change(state: Any) -> None:
        old_value = handle._last
        new_value = handle._select(state)
        handle._last = new_value

        if selector is not None and new_value == old_value:
            return

        if subscribe:
            widget.post_message(StoreChanged(store, old_value, new_value))

        for method in effects:
            method(old_value, new_value)

    handle._dispose = store.subscribe(on_change)

    return handle
