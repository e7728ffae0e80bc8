"""Tests for StoreProvider and find_store inside a running Textual app."""

import asyncio
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel
from textual.app import App, ComposeResult
from textual.widgets import Static

from textual_store import (
    StoreChanged,
    StoreNotFoundError,
    StoreProvider,
    create_store,
    find_store,
    use_store,
)


class CounterState(BaseModel):
    count: int = 0


@dataclass(frozen=True)
class Increment:
    pass


def counter_reducer(state: CounterState, action) -> CounterState:
    match action:
        case Increment():
            return state.model_copy(update={"count": state.count + 1})
    return state


class CountLabel(Static):
    def on_mount(self) -> None:
        self.counter = use_store(self, selector=lambda s: s.count)
        self._show_count(self.counter.value)

    def on_store_changed(self, event: StoreChanged) -> None:
        self._show_count(event.new_value)

    def _show_count(self, count: int) -> None:
        self.shown = f"Count: {count}"
        self.update(self.shown)


class ProviderApp(App):
    def __init__(self, store) -> None:
        super().__init__()
        self.store = store

    def compose(self) -> ComposeResult:
        yield StoreProvider(self.store, CountLabel(id="count"))
        yield Static(id="outside")


class TestFindStore:
    """Tests for find_store."""

    def test_raises_without_provider(self):
        with pytest.raises(StoreNotFoundError, match="StoreProvider"):
            find_store(Static())

    def test_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            find_store(MagicMock())

    def test_finds_provider_itself(self):
        store = create_store(counter_reducer, CounterState(), name="counter")
        provider = StoreProvider(store)

        assert find_store(provider) is store
        assert find_store(provider, name="counter") is store

    def test_name_mismatch(self):
        store = create_store(counter_reducer, CounterState(), name="counter")

        with pytest.raises(StoreNotFoundError, match="todos"):
            find_store(StoreProvider(store), name="todos")


class TestProviderInApp:
    """Tests with a mounted widget tree."""

    def test_descendant_finds_store(self):
        store = create_store(counter_reducer, CounterState(), name="counter")

        async def run() -> None:
            app = ProviderApp(store)
            async with app.run_test() as pilot:
                label = app.query_one("#count", CountLabel)
                assert find_store(label) is store

                with pytest.raises(StoreNotFoundError):
                    find_store(app.query_one("#outside", Static))

        asyncio.run(run())

    def test_widget_receives_changes(self):
        store = create_store(counter_reducer, CounterState(), name="counter")

        async def run() -> None:
            app = ProviderApp(store)
            async with app.run_test() as pilot:
                label = app.query_one("#count", CountLabel)
                assert label.counter.value == 0
                assert label.shown == "Count: 0"

                store.dispatch(Increment())
                store.dispatch(Increment())
                await pilot.pause()

                assert label.shown == "Count: 2"
                assert label.counter.value == 2
                assert store.get_state().count == 2

        asyncio.run(run())

    def test_provider_dispatch(self):
        store = create_store(counter_reducer, CounterState())
        provider = StoreProvider(store)

        provider.dispatch(Increment())

        assert provider.value.count == 1
        assert provider.store is store
