"""Headless state for the order-management dashboard.

The dashboard owns the list/detail view state: the latest order snapshot,
the loading flag and the selected order. It holds a subscription on the
repository between ``start()`` and ``stop()``; every snapshot replaces the
list wholesale.

Failures stay local: a subscription error empties the view instead of
crashing it, and an order with unreadable items only affects that order's
detail and download.
"""

from __future__ import annotations

import logging
from datetime import date

from portal.application.dto import OrderDTO, OrderSummaryDTO
from portal.application.export_order_pdf import ExportOrderPdfHandler
from portal.application.mapping import to_order_dto, to_summary_dto
from portal.application.seed_orders import SeedSampleOrdersHandler
from portal.domain.exceptions import EntityNotFoundError, MalformedItemsError
from portal.domain.model.order import Order
from portal.domain.repository.order_repository import (
    OrderRepository,
    Snapshot,
    Subscription,
)

logger = logging.getLogger(__name__)


class OrderDashboard:

    def __init__(
        self,
        order_repo: OrderRepository,
        exporter: ExportOrderPdfHandler,
    ) -> None:
        self._order_repo = order_repo
        self._exporter = exporter
        self._subscription: Subscription | None = None
        self._orders: Snapshot = ()
        self._selected: Order | None = None
        self.loading = False
        self.error: Exception | None = None
        self.last_error: str | None = None

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        if self._subscription is not None:
            return
        self.loading = True
        self.error = None
        self._subscription = self._order_repo.observe(
            self._on_snapshot, self._on_error
        )

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    @property
    def running(self) -> bool:
        return self._subscription is not None

    def __enter__(self) -> OrderDashboard:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # --- Subscription callbacks -----------------------------------------------

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._orders = tuple(snapshot)
        self.loading = False
        self.error = None
        if self._selected is not None:
            self._selected = self._find(self._selected.id)

    def _on_error(self, exc: Exception) -> None:
        logger.error("Error loading orders: %s", exc)
        self._orders = ()
        self.loading = False
        self.error = exc

    # --- List view ------------------------------------------------------------

    @property
    def orders(self) -> Snapshot:
        return self._orders

    @property
    def is_empty(self) -> bool:
        return not self.loading and not self._orders

    def cards(self) -> list[OrderSummaryDTO]:
        return [to_summary_dto(order) for order in self._orders]

    def seed_sample_orders(self) -> list[OrderSummaryDTO]:
        return SeedSampleOrdersHandler(self._order_repo).handle()

    # --- Selection & detail ---------------------------------------------------

    @property
    def selected(self) -> Order | None:
        return self._selected

    def select(self, order_id: str) -> Order:
        order = self._find(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order id {order_id} is not in the current list")
        self._selected = order
        self.last_error = None
        return order

    def clear_selection(self) -> None:
        self._selected = None

    def detail(self) -> OrderDTO | None:
        """Detail view of the selection; None when nothing (usable) is selected."""
        if self._selected is None:
            return None
        try:
            return to_order_dto(self._selected)
        except MalformedItemsError as exc:
            self._report(self._selected, exc)
            return None

    def download_selected(self, generated_on: date | None = None) -> str | None:
        """Export the selected order; returns the filename, or None on failure."""
        if self._selected is None:
            return None
        try:
            filename = self._exporter.export(self._selected, generated_on)
        except MalformedItemsError as exc:
            self._report(self._selected, exc)
            return None
        self.last_error = None
        return filename

    # --- Internal helpers -----------------------------------------------------

    def _find(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def _report(self, order: Order, exc: MalformedItemsError) -> None:
        logger.warning("Order %s has unreadable items: %s", order.order_number, exc)
        self.last_error = f"Order {order.order_number}: {exc}"
