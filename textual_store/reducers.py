"""Reducer composition helpers."""

from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from pydantic import BaseModel

from .types import Reducer

T = TypeVar("T")
Item = TypeVar("Item")
A = TypeVar("A")


def compose_reducers(*reducers: Reducer[T, A]) -> Reducer[T, A]:
    """
    Combine reducers into one that applies them left to right.

    Each reducer receives the state returned by the previous one, so a reducer
    that reads a field another one sets must come after it.

    Args:
        *reducers: Functions (state, action) -> new_state over the same state.

    Returns:
        A reducer equivalent to ``rn(...r2(r1(state, action), action)..., action)``.

    Example:
        ```python
        app_reducer = compose_reducers(sync_reducer, start_loading, loaded)
        ```
    """
    chain = tuple(reducers)

    def composed(state: T, action: A) -> T:
        for reducer in chain:
            state = reducer(state, action)
        return state

    return composed


def combine_reducers(**slices: Reducer[Any, A]) -> Reducer[T, A]:
    """
    Build a reducer over a model from reducers over its fields.

    Works with Pydantic models and dataclasses. Each keyword names a field and
    the reducer (field_value, action) -> new_field_value that owns it. Fields
    without a reducer are carried over.

    Returns:
        A reducer that returns the same state object when no slice changed,
        otherwise a copy with the changed fields replaced.

    Example:
        ```python
        sync_reducer = combine_reducers(
            todos=compose_reducers(add_todo, toggle_todo),
            visibility=visibility_reducer,
        )
        ```
    """
    if not slices:
        raise ValueError("combine_reducers requires at least one slice")

    def combined(state: T, action: A) -> T:
        changes = {}
        for field, reducer in slices.items():
            current = getattr(state, field)
            updated = reducer(current, action)
            if updated is not current:
                changes[field] = updated

        if not changes:
            return state
        return _replace_fields(state, changes)

    return combined


def map_reducer(
    item_reducer: Reducer[Item, A],
) -> Reducer[Sequence[Item], A]:
    """
    Lift a reducer over one item to a reducer over a sequence of items.

    Returns:
        A reducer that keeps the input sequence when no item changed and
        otherwise returns a new sequence of the same type (list or tuple).
    """

    def mapped(items: Sequence[Item], action: A) -> Sequence[Item]:
        updated = [item_reducer(item, action) for item in items]
        if all(new is old for new, old in zip(updated, items)):
            return items
        if isinstance(items, tuple):
            return tuple(updated)
        return updated

    return mapped


def _replace_fields(state: Any, changes: dict[str, Any]) -> Any:
    if isinstance(state, BaseModel):
        return state.model_copy(update=changes)
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return dataclasses.replace(state, **changes)
    raise TypeError(
        f"combine_reducers needs a Pydantic model or dataclass state, "
        f"got {type(state).__name__}"
    )
