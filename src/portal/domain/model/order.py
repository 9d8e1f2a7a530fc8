"""Order record and its embedded line items.

An Order is stored exactly as the data source transmits it: the line items
live inside a single text field as a serialized JSON array.  Parsing that
blob is the only place where an order can turn out to be unusable, so it is
done lazily via ``Order.line_items()`` and fails loudly.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from portal.domain.exceptions import MalformedItemsError, ValidationError


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


Number = int | float

_ITEM_FIELDS = ("product", "quantity", "unit", "price")


def is_finite_number(value: object) -> bool:
    """True for ints and finite floats; bools, NaN and infinities are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


@dataclass(frozen=True)
class LineItem:
    """One product entry within an order's items list."""

    product: str
    quantity: Number
    unit: str
    price: Number  # per unit, USD

    @property
    def subtotal(self) -> Number:
        """Derived at display time, never persisted."""
        return self.quantity * self.price

    def to_record(self) -> dict[str, Any]:
        return {
            "product": self.product,
            "quantity": self.quantity,
            "unit": self.unit,
            "price": self.price,
        }


def serialize_items(items: Iterable[LineItem]) -> str:
    """Encode line items into the text blob stored on an order."""
    return json.dumps([item.to_record() for item in items])


def parse_items(blob: str) -> list[LineItem]:
    """Decode an order's items blob.

    Raises MalformedItemsError for anything that is not a JSON array of
    ``{product, quantity, unit, price}`` objects.  There is no partial
    recovery: one bad element rejects the whole list.
    """
    if not isinstance(blob, str):
        raise MalformedItemsError(
            f"Items must be a JSON string, got {type(blob).__name__}"
        )
    try:
        raw = json.loads(blob, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedItemsError(f"Items are not valid JSON: {exc.msg}") from exc

    if not isinstance(raw, list):
        raise MalformedItemsError(
            f"Items must be a JSON array, got {type(raw).__name__}"
        )
    return [_item_from_record(entry, index) for index, entry in enumerate(raw)]


def _reject_constant(name: str) -> None:
    raise MalformedItemsError(f"Items are not valid JSON: {name} is not a number")


def _item_from_record(entry: object, index: int) -> LineItem:
    if not isinstance(entry, dict):
        raise MalformedItemsError(f"Item #{index + 1} is not an object")

    missing = [name for name in _ITEM_FIELDS if name not in entry]
    if missing:
        raise MalformedItemsError(
            f"Item #{index + 1} is missing {', '.join(missing)}"
        )

    for name in ("product", "unit"):
        if not isinstance(entry[name], str):
            raise MalformedItemsError(f"Item #{index + 1}: {name} must be a string")
    for name in ("quantity", "price"):
        value = entry[name]
        if not is_finite_number(value):
            raise MalformedItemsError(f"Item #{index + 1}: {name} must be a finite number")

    return LineItem(
        product=entry["product"],
        quantity=entry["quantity"],
        unit=entry["unit"],
        price=entry["price"],
    )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderDraft:
    """An order that has not been stored yet (no id)."""

    order_number: str
    distributor_name: str
    order_date: str
    delivery_date: str
    status: str
    total_amount: float
    items: str

    def __post_init__(self) -> None:
        if not self.order_number or not self.order_number.strip():
            raise ValidationError("Order number is required")
        if not is_finite_number(self.total_amount):
            raise ValidationError("Total amount must be a finite number")
        if self.total_amount < 0:
            raise ValidationError(
                f"Total amount cannot be negative, got {self.total_amount}"
            )

    def with_id(self, order_id: str) -> Order:
        return Order(
            id=order_id,
            order_number=self.order_number,
            distributor_name=self.distributor_name,
            order_date=self.order_date,
            delivery_date=self.delivery_date,
            status=self.status,
            total_amount=self.total_amount,
            items=self.items,
        )


@dataclass(frozen=True)
class Order:
    """A distributor purchase order as held by the data store.

    Records are immutable snapshots; the store replaces them wholesale and
    nothing in the portal edits one in place.
    """

    id: str
    order_number: str
    distributor_name: str
    order_date: str  # ISO YYYY-MM-DD
    delivery_date: str  # ISO YYYY-MM-DD
    status: str  # open enum, see OrderStatus
    total_amount: float
    items: str  # serialized JSON array of line items

    # --- Line items -----------------------------------------------------------

    def line_items(self) -> list[LineItem]:
        return parse_items(self.items)

    def items_total(self) -> Number:
        """Sum of line subtotals.

        Not checked against ``total_amount``; the two are authored
        independently.
        """
        return sum(item.subtotal for item in self.line_items())

    @property
    def known_status(self) -> OrderStatus | None:
        try:
            return OrderStatus(self.status)
        except ValueError:
            return None

    # --- Wire format ----------------------------------------------------------

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "orderNumber": self.order_number,
            "distributorName": self.distributor_name,
            "orderDate": self.order_date,
            "deliveryDate": self.delivery_date,
            "status": self.status,
            "totalAmount": self.total_amount,
            "items": self.items,
        }

    @staticmethod
    def from_record(raw: Mapping[str, Any]) -> Order:
        try:
            total_amount = raw["totalAmount"]
            if not is_finite_number(total_amount):
                raise ValidationError(
                    f"Order record has a non-numeric totalAmount: {total_amount!r}"
                )
            return Order(
                id=str(raw["id"]),
                order_number=str(raw["orderNumber"]),
                distributor_name=str(raw["distributorName"]),
                order_date=str(raw["orderDate"]),
                delivery_date=str(raw["deliveryDate"]),
                status=str(raw["status"]),
                total_amount=total_amount,
                items=raw["items"],
            )
        except KeyError as exc:
            raise ValidationError(f"Order record is missing {exc.args[0]!r}") from exc
