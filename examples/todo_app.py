"""
Todo App - a store built from composed slice reducers.

Demonstrates:
- combine_reducers / compose_reducers / map_reducer: slice reducers folded
  into one app reducer
- StoreProvider + use_store: the app owns the store, widgets consume it
- selector: a list that only rebuilds when the visible todos change
- Store.run: a thunk simulating a remote load with a timer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, ConfigDict
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Input, Label, Static

from textual_store import (
    StoreChanged,
    StoreProvider,
    combine_reducers,
    compose_reducers,
    create_store,
    effect,
    map_reducer,
    use_store,
)


# --- Models ---


class Visibility(IntEnum):
    ACTIVE = 0
    COMPLETED = 1
    ALL = 2

    @classmethod
    def from_index(cls, raw: object) -> Visibility:
        """Map a segment index to a filter, falling back to ACTIVE."""
        try:
            return cls(int(raw))  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return cls.ACTIVE


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    completed: bool = False


class TodoState(BaseModel):
    model_config = ConfigDict(frozen=True)

    todos: tuple[Todo, ...] = ()
    visibility: Visibility = Visibility.ACTIVE
    is_loading: bool = False


# --- Actions ---


@dataclass(frozen=True)
class AddTodo:
    name: str


@dataclass(frozen=True)
class ToggleTodo:
    id: int


@dataclass(frozen=True)
class SetVisibility:
    visibility: Visibility


@dataclass(frozen=True)
class StartLoading:
    pass


@dataclass(frozen=True)
class Loaded:
    todos: tuple[Todo, ...]


Action = AddTodo | ToggleTodo | SetVisibility | StartLoading | Loaded


# --- Reducers ---


def add_todo(todos: tuple[Todo, ...], action: Action) -> tuple[Todo, ...]:
    match action:
        case AddTodo(name):
            return (*todos, Todo(id=len(todos), name=name))
    return todos


def toggle_one(todo: Todo, action: Action) -> Todo:
    match action:
        case ToggleTodo(id) if id == todo.id:
            return todo.model_copy(update={"completed": not todo.completed})
    return todo


def set_visibility(visibility: Visibility, action: Action) -> Visibility:
    match action:
        case SetVisibility(new):
            return new
    return visibility


def start_loading(state: TodoState, action: Action) -> TodoState:
    match action:
        case StartLoading():
            return state.model_copy(update={"is_loading": True})
    return state


def loaded(state: TodoState, action: Action) -> TodoState:
    match action:
        case Loaded(todos):
            return state.model_copy(update={"todos": todos, "is_loading": False})
    return state


todos_reducer = compose_reducers(add_todo, map_reducer(toggle_one))

app_reducer = compose_reducers(
    combine_reducers(
        todos=todos_reducer,
        visibility=set_visibility,
    ),
    start_loading,
    loaded,
)


def visible_todos(state: TodoState) -> tuple[Todo, ...]:
    match state.visibility:
        case Visibility.ALL:
            return state.todos
        case Visibility.COMPLETED:
            return tuple(t for t in state.todos if t.completed)
    return tuple(t for t in state.todos if not t.completed)


# --- Thunks ---

REMOTE_DELAY = 2.0


def load_remote_todos(app: App):
    """Build a thunk that fakes a remote fetch using an app timer."""

    def thunk(dispatch, get_state) -> None:
        if get_state().is_loading:
            return
        dispatch(StartLoading())
        app.set_timer(
            REMOTE_DELAY,
            lambda: dispatch(Loaded((Todo(id=0, name="Async todo"),))),
        )

    return thunk


# --- Components ---


class TodoInput(Static):
    """Input for adding new todos."""

    DEFAULT_CSS = """
    TodoInput {
        height: 3;
        margin: 1;
    }
    TodoInput Input {
        width: 1fr;
    }
    """

    def on_mount(self) -> None:
        self.todos = use_store(self, subscribe=False)

    def compose(self) -> ComposeResult:
        yield Input(placeholder="What needs to be done?", id="new-todo")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        name = event.value.strip()
        if name:
            self.todos.dispatch(AddTodo(name))
            event.input.value = ""

    def on_unmount(self) -> None:
        self.todos.close()


class TodoRow(Button):
    """One todo; pressing it toggles completion."""

    def __init__(self, todo: Todo) -> None:
        mark = "✓" if todo.completed else "○"
        super().__init__(f"{mark} {todo.name}", variant="default")
        self.todo_id = todo.id


class TodoList(Static):
    """Visible todos; rebuilt only when the visible list changes."""

    DEFAULT_CSS = """
    TodoList {
        height: auto;
        max-height: 15;
        margin: 1;
        border: solid $primary;
        padding: 1;
    }
    TodoList TodoRow {
        width: 100%;
    }
    """

    def on_mount(self) -> None:
        self.visible = use_store(self, selector=visible_todos)
        self._rebuild(self.visible.value)

    def on_store_changed(self, event: StoreChanged) -> None:
        self._rebuild(event.new_value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, TodoRow):
            self.visible.dispatch(ToggleTodo(event.button.todo_id))

    def _rebuild(self, todos: tuple[Todo, ...]) -> None:
        for child in list(self.children):
            child.remove()

        if not todos:
            self.mount(Label("No items to show"))
        else:
            for todo in todos:
                self.mount(TodoRow(todo))

    def on_unmount(self) -> None:
        self.visible.close()


class FilterBar(Static):
    """Segmented filter control plus the remote-load button."""

    DEFAULT_CSS = """
    FilterBar {
        height: 3;
        margin: 1;
    }
    FilterBar Horizontal {
        width: 100%;
    }
    FilterBar Button {
        margin: 0 1;
    }
    FilterBar #status {
        width: 1fr;
    }
    """

    def on_mount(self) -> None:
        self.todos = use_store(self, subscribe=False)
        self._show(self.todos.value)

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Label("", id="status")
            yield Button("Active", id="segment-0")
            yield Button("Completed", id="segment-1")
            yield Button("All", id="segment-2")
            yield Button("Load", id="load", variant="primary")

    @effect("todos")
    def on_todos_change(self, old: TodoState, new: TodoState) -> None:
        self._show(new)

    def _show(self, state: TodoState) -> None:
        status = "loading..." if state.is_loading else f"{len(state.todos)} total"
        self.query_one("#status", Label).update(status)
        for visibility in Visibility:
            button = self.query_one(f"#segment-{visibility.value}", Button)
            button.variant = "success" if visibility == state.visibility else "default"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "load":
            self.todos.run(load_remote_todos(self.app))
        elif button_id.startswith("segment-"):
            raw = button_id.removeprefix("segment-")
            self.todos.dispatch(SetVisibility(Visibility.from_index(raw)))

    def on_unmount(self) -> None:
        self.todos.close()


class TodoApp(App):
    """Main todo application."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.store = create_store(app_reducer, TodoState(), name="todos")

    def compose(self) -> ComposeResult:
        yield Header()
        yield StoreProvider(
            self.store,
            TodoInput(),
            FilterBar(),
            TodoList(),
        )
        yield Footer()


if __name__ == "__main__":
    TodoApp().run()
