"""JSON-file-backed implementation of OrderRepository.

The file holds a JSON array of order records in the wire shape
(``orderNumber``, ``totalAmount``, ``items`` as a JSON string, ...), so it can
be exchanged with the hosted data store unchanged.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Callable

from portal.domain.exceptions import StorageError, ValidationError
from portal.domain.model.order import Order, OrderDraft
from portal.domain.repository.order_repository import (
    ErrorCallback,
    OrderRepository,
    Snapshot,
    SnapshotCallback,
    Subscription,
)
from portal.infrastructure.persistence.snapshot_feed import SnapshotFeed

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        file_path: Path,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._file_path = file_path
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._feed = SnapshotFeed(self.list_all)
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> Snapshot:
        return tuple(self._to_domain(raw) for raw in self._load_raw())

    def get_by_id(self, order_id: str) -> Order | None:
        for order in self.list_all():
            if order.id == order_id:
                return order
        return None

    def get_by_number(self, order_number: str) -> Order | None:
        for order in self.list_all():
            if order.order_number == order_number:
                return order
        return None

    def create(self, draft: OrderDraft) -> Order:
        orders = self._load_raw()
        order = draft.with_id(self._id_factory())
        orders.append(order.to_record())
        self._persist_raw(orders)
        logger.info("Created order %s (id=%s)", order.order_number, order.id)

        self._feed.publish()
        return order

    def observe(
        self,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        return self._feed.subscribe(on_snapshot, on_error)

    def close(self) -> None:
        """End every open subscription."""
        self._feed.close_all()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        if not isinstance(raw, dict):
            raise StorageError(f"Order record must be an object, got {type(raw).__name__}")
        try:
            return Order.from_record(raw)
        except ValidationError as exc:
            raise StorageError(str(exc)) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise StorageError(f"Corrupt order file {self._file_path}: {exc.msg}") from exc
        if not isinstance(data, list):
            raise StorageError(f"Order file {self._file_path} must hold a JSON array")
        return data

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
