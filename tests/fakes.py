"""In-memory fakes for testing.

These implement the same abstract interfaces as the file-backed adapters
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import date

from portal.domain.model.order import LineItem, Order, OrderDraft, serialize_items
from portal.domain.repository.document_ports import (
    DocumentRenderer,
    DocumentSink,
    RenderedDocument,
)
from portal.domain.repository.order_repository import (
    ErrorCallback,
    OrderRepository,
    Snapshot,
    SnapshotCallback,
    Subscription,
)
from portal.infrastructure.persistence.snapshot_feed import SnapshotFeed


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {o.id: o for o in orders or []}
        self._next_id = 1
        self.fail_with: Exception | None = None
        self._feed = SnapshotFeed(self._snapshot)

    def _snapshot(self) -> Snapshot:
        if self.fail_with is not None:
            raise self.fail_with
        return tuple(self._store.values())

    def list_all(self) -> Snapshot:
        return self._snapshot()

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def get_by_number(self, order_number: str) -> Order | None:
        for order in self._store.values():
            if order.order_number == order_number:
                return order
        return None

    def create(self, draft: OrderDraft) -> Order:
        while f"order-{self._next_id}" in self._store:
            self._next_id += 1
        order = draft.with_id(f"order-{self._next_id}")
        self._next_id += 1
        self._store[order.id] = order
        self._feed.publish()
        return order

    def observe(
        self,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        return self._feed.subscribe(on_snapshot, on_error)

    @property
    def subscriber_count(self) -> int:
        return self._feed.subscriber_count


class FakeDocumentSink(DocumentSink):

    def __init__(self) -> None:
        self.saved: dict[str, bytes] = {}

    def save(self, content: bytes, filename: str) -> None:
        self.saved[filename] = content


class StubRenderer(DocumentRenderer):
    """Records calls; produces a tiny fake document."""

    def __init__(self) -> None:
        self.calls: list[tuple[Order, date | None]] = []

    def render(self, order: Order, generated_on: date | None = None) -> RenderedDocument:
        order.line_items()  # fail fast like the real renderer
        self.calls.append((order, generated_on))
        return RenderedDocument(
            filename=f"Order_{order.order_number}.pdf",
            content=b"%PDF-stub",
            page_count=1,
        )


def make_draft(
    order_number: str = "ORD-2024-001",
    status: str = "Confirmed",
    items: list[LineItem] | str | None = None,
    total_amount: float = 15750.50,
) -> OrderDraft:
    if items is None:
        items = [
            LineItem("Organic Apples", 200, "lbs", 2.50),
            LineItem("Fresh Milk", 100, "gallons", 4.25),
            LineItem("Whole Wheat Bread", 150, "loaves", 3.50),
        ]
    blob = items if isinstance(items, str) else serialize_items(items)
    return OrderDraft(
        order_number=order_number,
        distributor_name="Metro Grocery Supply",
        order_date="2024-12-01",
        delivery_date="2024-12-08",
        status=status,
        total_amount=total_amount,
        items=blob,
    )


def make_order(order_id: str = "order-1", **kwargs) -> Order:
    return make_draft(**kwargs).with_id(order_id)
