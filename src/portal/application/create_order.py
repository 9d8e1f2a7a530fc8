"""Application service: Create Order use case."""

from __future__ import annotations

from portal.application.dto import OrderSummaryDTO
from portal.application.mapping import to_summary_dto
from portal.domain.model.order import OrderDraft
from portal.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, draft: OrderDraft) -> OrderSummaryDTO:
        """Insert one order.

        The items blob is stored as given; it is only parsed when the order
        is viewed or exported.
        """
        order = self._order_repo.create(draft)
        return to_summary_dto(order)
