"""Application service: Export Order PDF use case.

Renders one order and hands the finished document to the sink. Rendering
completes (or fails) before the sink is called, so a failed export never
leaves a partial file behind.
"""

from __future__ import annotations

import logging
from datetime import date

from portal.domain.exceptions import EntityNotFoundError
from portal.domain.model.order import Order
from portal.domain.repository.document_ports import DocumentRenderer, DocumentSink
from portal.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ExportOrderPdfHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        renderer: DocumentRenderer,
        sink: DocumentSink,
    ) -> None:
        self._order_repo = order_repo
        self._renderer = renderer
        self._sink = sink

    def handle(self, order_number: str, generated_on: date | None = None) -> str:
        """Export the order with ``order_number``; returns the filename."""
        order = self._order_repo.get_by_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order {order_number} not found")
        return self.export(order, generated_on)

    def export(self, order: Order, generated_on: date | None = None) -> str:
        """Export an order the caller already holds (e.g. the selection)."""
        document = self._renderer.render(order, generated_on)
        self._sink.save(document.content, document.filename)
        logger.info(
            "Exported %s as %s (%d page(s))",
            order.order_number, document.filename, document.page_count,
        )
        return document.filename
