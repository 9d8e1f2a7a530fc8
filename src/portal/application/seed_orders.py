"""Application service: Seed Sample Orders use case.

Populates the store with the demonstration orders. Each insert completes
before the next one starts, so the store sees ORD-2024-001..004 in order.
"""

from __future__ import annotations

import logging

from portal.application.dto import OrderSummaryDTO
from portal.application.mapping import to_summary_dto
from portal.application.sample_orders import sample_order_drafts
from portal.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class SeedSampleOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        created: list[OrderSummaryDTO] = []
        for draft in sample_order_drafts():
            order = self._order_repo.create(draft)
            created.append(to_summary_dto(order))
        logger.info("Seeded %d sample orders", len(created))
        return created
