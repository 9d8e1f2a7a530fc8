"""Order -> DTO mapping shared by the query handlers."""

from __future__ import annotations

from portal.application.dto import OrderDTO, OrderLineItemDTO, OrderSummaryDTO
from portal.domain.model.order import Order
from portal.domain.service.formatting import (
    format_currency,
    format_date,
    format_quantity,
    status_color,
)


def to_summary_dto(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,
        order_number=order.order_number,
        status=order.status,
        status_color=status_color(order.status).hex,
        distributor_name=order.distributor_name,
        order_date=format_date(order.order_date),
        total_amount=format_currency(order.total_amount),
    )


def to_order_dto(order: Order) -> OrderDTO:
    """Full detail view; raises MalformedItemsError for a bad items blob."""
    return OrderDTO(
        id=order.id,
        order_number=order.order_number,
        distributor_name=order.distributor_name,
        status=order.status,
        status_color=status_color(order.status).hex,
        order_date=format_date(order.order_date),
        delivery_date=format_date(order.delivery_date),
        total_amount=format_currency(order.total_amount),
        items=[
            OrderLineItemDTO(
                product=item.product,
                quantity=format_quantity(item.quantity),
                unit=item.unit,
                price=format_currency(item.price),
                subtotal=format_currency(item.subtotal),
            )
            for item in order.line_items()
        ],
    )
