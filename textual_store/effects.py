"""Effect decorator for reacting to store changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from .store import Store

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect metadata on methods
EFFECT_ATTR = "__textual_store_effects__"


class EffectRegistration:
    """Stores effect registration info on a method."""

    __slots__ = ("targets",)

    def __init__(self) -> None:
        self.targets: list[str | Store[Any, Any]] = []

    def add(self, target: str | Store[Any, Any]) -> None:
        self.targets.append(target)

    def matches(self, store: Store[Any, Any]) -> bool:
        """Whether this effect targets the store, by identity or by name."""
        for target in self.targets:
            if target is store:
                return True
            if isinstance(target, str) and target == store.name:
                return True
        return False


def get_effect_registration(method: Callable[..., Any]) -> EffectRegistration | None:
    """Get effect registration from a method, if any."""
    return getattr(method, EFFECT_ATTR, None)


def effect(*targets: str | Store[Any, Any]) -> Callable[[F], F]:
    """
    Decorator to mark a method as an effect that responds to store changes.

    Args:
        *targets: Store references or store names to watch.

    Example:
        ```python
        class TodoList(Widget):
            def on_mount(self):
                self.todos = use_store(self)

            @effect("todos")
            def on_todos_change(self, old: TodoState, new: TodoState):
                self.refresh()
        ```
    """
    if not targets:
        raise ValueError("@effect requires at least one target")

    def decorator(method: F) -> F:
        registration = get_effect_registration(method)
        if registration is None:
            registration = EffectRegistration()
            setattr(method, EFFECT_ATTR, registration)

        for target in targets:
            registration.add(target)

        return method

    return decorator


def find_effects(widget: Any, store: Store[Any, Any]) -> list[Callable[[Any, Any], None]]:
    """
    Collect the bound @effect methods of a widget that target a store.

    Called internally by use_store().

    Args:
        widget: The widget instance.
        store: The Store being used.

    Returns:
        Bound methods taking (old, new).
    """
    effects: list[Callable[[Any, Any], None]] = []

    # Only public attributes defined on the widget's class are considered
    for attr_name in dir(type(widget)):
        if attr_name.startswith("_"):
            continue

        try:
            class_attr = getattr(type(widget), attr_name, None)
            if class_attr is None:
                continue

            registration = get_effect_registration(class_attr)
            if not isinstance(registration, EffectRegistration):
                continue
            if not registration.matches(store):
                continue

            method = getattr(widget, attr_name)
            if callable(method):
                effects.append(method)
        except (AttributeError, AssertionError, TypeError):
            continue

    return effects
