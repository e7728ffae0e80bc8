"""
Simple counter example - a store passed straight to use_store.

Run with: python examples/counter.py
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from textual_store import StoreChanged, create_store, use_store


class CounterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0


@dataclass(frozen=True)
class Increment:
    amount: int = 1


@dataclass(frozen=True)
class Reset:
    pass


def counter_reducer(state: CounterState, action) -> CounterState:
    match action:
        case Increment(amount):
            return state.model_copy(update={"count": state.count + amount})
        case Reset():
            return CounterState()
    return state


class CounterApp(App):
    """Counter app wired to an explicitly constructed store."""

    CSS = """
    Screen {
        align: center middle;
    }

    #count {
        width: auto;
        padding: 1 2;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.store = create_store(counter_reducer, CounterState(), name="counter")

    def compose(self) -> ComposeResult:
        yield Static("Count: 0", id="count")
        yield Button("+1", id="increment", variant="primary")
        yield Button("Reset", id="reset")

    def on_mount(self) -> None:
        self.counter = use_store(self, self.store, selector=lambda s: s.count)

    def on_store_changed(self, event: StoreChanged) -> None:
        self.query_one("#count", Static).update(f"Count: {event.new_value}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "increment":
            self.counter.dispatch(Increment())
        else:
            self.counter.dispatch(Reset())


if __name__ == "__main__":
    CounterApp().run()
