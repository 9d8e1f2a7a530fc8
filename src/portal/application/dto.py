"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready values (formatted currency and dates) from the
application layer to the CLI and the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product: str
    quantity: str
    unit: str
    price: str  # formatted, e.g. "$2.50"
    subtotal: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one order card in the list view."""

    id: str
    order_number: str
    status: str
    status_color: str  # hex, e.g. "#3b82f6"
    distributor_name: str
    order_date: str
    total_amount: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    order_number: str
    distributor_name: str
    status: str
    status_color: str
    order_date: str
    delivery_date: str
    total_amount: str
    items: list[OrderLineItemDTO]
