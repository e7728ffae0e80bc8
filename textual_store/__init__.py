"""
Textual Store - a Redux-style store with composable reducers for Textual.

A Store holds one immutable state value and one reducer. Dispatching an
action runs the reducer, commits the new state, and calls every subscriber
with it. Reducers over separate concerns are folded into one with
compose_reducers / combine_reducers.

Key Features:
- Store: dispatch / get_state / subscribe with idempotent disposers
- compose_reducers: left-to-right reducer folding
- combine_reducers / map_reducer: lift field and item reducers
- StoreProvider + use_store: share a store across a widget tree
- @effect: Decorator to react to store changes

Example:
    ```python
    from dataclasses import dataclass
    from pydantic import BaseModel
    from textual.app import App, ComposeResult
    from textual.widgets import Button, Static
    from textual_store import StoreProvider, create_store, effect, use_store

    class CounterState(BaseModel):
        count: int = 0

    @dataclass(frozen=True)
    class Increment:
        pass

    def reducer(state: CounterState, action) -> CounterState:
        match action:
            case Increment():
                return state.model_copy(update={"count": state.count + 1})
        return state

    class Counter(App):
        def __init__(self) -> None:
            super().__init__()
            self.store = create_store(reducer, CounterState(), name="counter")

        def compose(self) -> ComposeResult:
            yield StoreProvider(self.store, Static(id="count"), Button("+1"))

        def on_mount(self) -> None:
            self.counter = use_store(self, self.store)

        @effect("counter")
        def on_count_change(self, old: CounterState, new: CounterState):
            self.query_one("#count", Static).update(f"Count: {new.count}")

        def on_button_pressed(self, event: Button.Pressed) -> None:
            self.counter.dispatch(Increment())
    ```
"""

# Core
from .store import (
    Store,
    create_store,
)

from .config import (
    StoreConfig,
)

from .reducers import (
    compose_reducers,
    combine_reducers,
    map_reducer,
)

# Errors
from .errors import (
    StoreError,
    ReentrantDispatchError,
    SubscriberError,
    StoreNotFoundError,
)

# Textual binding
from .provider import (
    StoreProvider,
    find_store,
)

from .hooks import (
    StoreChanged,
    StoreHandle,
    use_store,
)

from .effects import (
    effect,
)

# Types
from .types import (
    Reducer,
    Subscriber,
    Disposer,
    DispatchFunc,
    Thunk,
)

__version__ = "0.1.0a1"

__all__ = [
    # Core
    "Store",
    "create_store",
    "StoreConfig",
    "compose_reducers",
    "combine_reducers",
    "map_reducer",
    # Errors
    "StoreError",
    "ReentrantDispatchError",
    "SubscriberError",
    "StoreNotFoundError",
    # Textual binding
    "StoreProvider",
    "find_store",
    "StoreChanged",
    "StoreHandle",
    "use_store",
    "effect",
    # Types
    "Reducer",
    "Subscriber",
    "Disposer",
    "DispatchFunc",
    "Thunk",
]
