"""Type definitions for textual-store."""

from typing import Callable, Protocol, TypeVar

# Type variables
T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
A = TypeVar("A")  # Action type
A_contra = TypeVar("A_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class Reducer(Protocol[T, A_contra]):
    """Protocol for reducer functions."""

    def __call__(self, state: T, action: A_contra) -> T:
        """Process an action and return new state."""
        ...


class Subscriber(Protocol[T_contra]):
    """Protocol for store subscribers."""

    def __call__(self, state: T_contra) -> None:
        """Called with the new state after every dispatch."""
        ...


class DispatchFunc(Protocol[A_contra]):
    """Protocol for dispatch functions."""

    def __call__(self, action: A_contra) -> None:
        """Dispatch an action to the reducer."""
        ...


class Thunk(Protocol[T, A, R_co]):
    """Protocol for action creators run against a store."""

    def __call__(
        self, dispatch: DispatchFunc[A], get_state: Callable[[], T]
    ) -> R_co:
        """Dispatch zero or more actions, reading state as needed."""
        ...


# Removes a subscription; calling it more than once is a no-op.
Disposer = Callable[[], None]
