"""Application service: Show Order use case (query)."""

from __future__ import annotations

from portal.application.dto import OrderDTO
from portal.application.mapping import to_order_dto
from portal.domain.exceptions import EntityNotFoundError
from portal.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: str) -> OrderDTO:
        order = self._order_repo.get_by_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order {order_number} not found")
        return to_order_dto(order)
