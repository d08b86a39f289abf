"""
Observable state containers.

Stores publish a snapshot of their state to subscribers after every effective
mutation. Subscribers are plain callables; how a view marshals the snapshot
onto its own rendering context is up to the view.

Stores are meant to be driven from a single execution context (one event loop
or one UI thread). There is no internal locking.
"""
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, TypeVar

from nettbutikk.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Observable(ABC, Generic[T]):
    """Base for stores with subscribe/unsubscribe and snapshot reads."""

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    @abstractmethod
    def snapshot(self) -> T:
        """Current state as handed to subscribers."""

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the new snapshot after each change.

        Returns:
            A function that removes the subscription when called.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _publish(self) -> None:
        snapshot = self.snapshot()
        # Copy: a subscriber may unsubscribe itself while being notified
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception(f"Subscriber {callback!r} of {type(self).__name__} failed")
