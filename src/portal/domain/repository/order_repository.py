"""Abstract repository for Order records.

Besides plain lookups the repository is the portal's only refresh path: a
consumer subscribes with ``observe()`` and receives a full snapshot of all
orders immediately and again after every change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from portal.domain.model.order import Order, OrderDraft

Snapshot = tuple[Order, ...]
SnapshotCallback = Callable[[Snapshot], None]
ErrorCallback = Callable[[Exception], None]


class Subscription(ABC):
    """Handle for an active ``observe()`` registration."""

    @abstractmethod
    def close(self) -> None:
        """Stop delivering snapshots. Closing twice is a no-op."""

    @property
    @abstractmethod
    def closed(self) -> bool:
        ...

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> Snapshot:
        """Return every stored order."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_number(self, order_number: str) -> Order | None:
        """Return the first order with the given order number, or None."""

    @abstractmethod
    def create(self, draft: OrderDraft) -> Order:
        """Insert a new order, assigning its ID, and notify observers."""

    @abstractmethod
    def observe(
        self,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        """Subscribe to full snapshots of the order list."""
