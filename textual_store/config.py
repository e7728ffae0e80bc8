"""Store configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StoreConfig(BaseModel):
    """
    Behaviour switches for a Store.

    Attributes:
        isolate_subscribers: Keep notifying the remaining subscribers when one
            raises, then raise SubscriberError with every failure. When False
            the first failure propagates and the rest are not notified.
        thread_safe: Serialise dispatch and subscription changes with a lock,
            for stores shared between threads.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    isolate_subscribers: bool = True
    thread_safe: bool = False


DEFAULT_CONFIG = StoreConfig()
