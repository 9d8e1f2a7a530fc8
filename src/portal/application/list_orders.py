"""Application service: List Orders use case (query)."""

from __future__ import annotations

from portal.application.dto import OrderSummaryDTO
from portal.application.mapping import to_summary_dto
from portal.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        return [to_summary_dto(order) for order in self._order_repo.list_all()]
