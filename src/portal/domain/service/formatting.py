"""Display formatting shared by the dashboard and the PDF document.

Everything here is locale-fixed (US English) so that generated documents
are reproducible on any host, whatever its locale settings.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Context, Decimal

from portal.domain.model.order import OrderStatus
from portal.domain.model.value_objects import Color

INVALID_DATE = "Invalid Date"

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_STATUS_COLORS: dict[str, Color] = {
    OrderStatus.PENDING.value: Color.from_hex("#f59e0b"),
    OrderStatus.CONFIRMED.value: Color.from_hex("#3b82f6"),
    OrderStatus.SHIPPED.value: Color.from_hex("#8b5cf6"),
    OrderStatus.DELIVERED.value: Color.from_hex("#10b981"),
}
NEUTRAL_STATUS_COLOR = Color.from_hex("#6b7280")

_CENT = Decimal("0.01")


def format_currency(amount: int | float | Decimal) -> str:
    """Render an amount as US dollars, e.g. ``$15,750.50``."""
    value = Decimal(str(amount))
    # quantize needs room for every integer digit plus the cents
    context = Context(prec=max(28, value.adjusted() + 3))
    value = value.quantize(_CENT, rounding=ROUND_HALF_UP, context=context)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date(value: str) -> str:
    """Render an ISO date as ``Dec 1, 2024``.

    Input that does not parse comes back as ``Invalid Date``.
    """
    parsed = _parse_iso_date(value)
    if parsed is None:
        return INVALID_DATE
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_generated_on(day: date) -> str:
    """US short date, e.g. ``12/1/2024``."""
    return f"{day.month}/{day.day}/{day.year}"


def format_quantity(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def status_color(status: str) -> Color:
    """Badge colour for a status; unknown values get a neutral grey."""
    return _STATUS_COLORS.get(status, NEUTRAL_STATUS_COLOR)


def _parse_iso_date(value: str) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None

