"""Exceptions raised by textual-store."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for store errors."""


class ReentrantDispatchError(StoreError):
    """Raised when dispatch is called while the same store is dispatching."""

    def __init__(self, store_name: str | None, action: object) -> None:
        super().__init__(
            f"Store '{store_name or 'unnamed'}' is already dispatching; "
            f"cannot dispatch {action!r} from a reducer or subscriber."
        )
        self.action = action


class SubscriberError(StoreError):
    """
    Raised after a notification pass in which one or more subscribers failed.

    The new state is committed and every subscriber was notified.

    Attributes:
        errors: (subscription id, exception) pairs in notification order.
    """

    def __init__(self, errors: list[tuple[int, BaseException]]) -> None:
        count = len(errors)
        noun = "subscriber" if count == 1 else "subscribers"
        super().__init__(f"{count} {noun} failed during notification")
        self.errors = errors


class StoreNotFoundError(StoreError, LookupError):
    """Raised when no StoreProvider is mounted above a widget."""
