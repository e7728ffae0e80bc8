"""Provider widget that hands a store to its descendants."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from textual.containers import Container
from textual.dom import DOMNode
from textual.widget import Widget

from .errors import StoreNotFoundError
from .store import Store

T = TypeVar("T")
A = TypeVar("A")


class StoreProvider(Container, Generic[T, A]):
    """
    Widget that provides a store to its descendants.

    The store is created by the app and passed in, so every consumer below
    the provider shares the same instance.

    Example:
        ```python
        class TodoApp(App):
            def __init__(self) -> None:
                super().__init__()
                self.store = create_store(app_reducer, TodoState(), name="todos")

            def compose(self):
                yield StoreProvider(self.store, TodoInput(), TodoList())
        ```
    """

    DEFAULT_CSS = """
    StoreProvider {
        width: 100%;
        height: auto;
    }
    """

    def __init__(
        self,
        store: Store[T, A],
        *children: Widget,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._store = store
        self._compose_children = children

    @property
    def store(self) -> Store[T, A]:
        """Get the provided store."""
        return self._store

    @property
    def value(self) -> T:
        """Get current state value."""
        return self._store.state

    def dispatch(self, action: A) -> None:
        """Dispatch an action."""
        self._store.dispatch(action)

    def compose(self):
        yield from self._compose_children


def find_store(widget: Any, name: str | None = None) -> Store[Any, Any]:
    """
    Find the store of the nearest StoreProvider above a widget.

    Args:
        widget: The widget to start from (included in the search).
        name: Only accept a provider whose store has this name.

    Raises:
        StoreNotFoundError: If no matching provider is mounted above the widget.
    """
    current = widget

    while current is not None:
        if isinstance(current, StoreProvider):
            if name is None or current.store.name == name:
                return current.store

        parent = getattr(current, "parent", None)
        current = parent if isinstance(parent, DOMNode) else None

    raise StoreNotFoundError(
        f"Store '{name or 'any'}' not found in widget tree. "
        f"Make sure a StoreProvider is mounted above {widget.__class__.__name__}."
    )
