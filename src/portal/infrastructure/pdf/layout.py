"""Fixed-coordinate page layout for an order document.

``layout_order`` turns one order into pages of primitive drawing operations.
It never touches a PDF library, so the placement rules (pagination
included) can be inspected directly; ``renderer.py`` paints the result.

Coordinates are millimetres on an A4 portrait page, measured from the
top-left corner. Text ``y`` values are baselines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union

from portal.domain.model.order import LineItem, Order
from portal.domain.model.value_objects import BLACK, WHITE, Color
from portal.domain.service.formatting import (
    format_currency,
    format_date,
    format_generated_on,
    format_quantity,
    status_color,
)

PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0

MARGIN_LEFT = 20.0
CONTENT_WIDTH = 170.0
TOP_MARGIN = 20.0
VALUE_COLUMN = 70.0

INFO_ROW_STEP = 8.0
ITEM_ROW_STEP = 7.0
# A row whose baseline would fall below this starts a new page.
PAGE_BREAK_THRESHOLD = 270.0
FOOTER_Y = 285.0

# Item table columns: (header, x)
ITEM_COLUMNS = (
    ("Product", 25.0),
    ("Quantity", 100.0),
    ("Unit", 120.0),
    ("Price", 140.0),
    ("Subtotal", 165.0),
)

BRAND_BLUE = Color(30, 64, 175)
MUTED = Color(100, 100, 100)
ACCENT_GREEN = Color(16, 185, 129)
SEPARATOR = Color(229, 231, 235)
FOOTER_GREY = Color(150, 150, 150)


# ---------------------------------------------------------------------------
# Drawing primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    size: float
    color: Color = BLACK
    align: str = "left"  # "left" or "center"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float  # top edge
    width: float
    height: float
    fill: Color
    radius: float = 0.0


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color


Operation = Union[Text, Rect, Line]


@dataclass
class Page:
    operations: list[Operation] = field(default_factory=list)

    def texts(self) -> list[str]:
        return [op.text for op in self.operations if isinstance(op, Text)]


@dataclass(frozen=True)
class PlacedRow:
    """Where an item row landed: page index (0-based) and baseline."""

    page: int
    y: float
    cells: tuple[str, ...]


@dataclass
class DocumentLayout:
    title: str
    pages: list[Page]
    rows: list[PlacedRow]

    @property
    def page_count(self) -> int:
        return len(self.pages)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class _Cursor:
    """Per-render page and vertical position state."""

    def __init__(self) -> None:
        self.pages: list[Page] = [Page()]
        self.y = 0.0

    @property
    def page(self) -> Page:
        return self.pages[-1]

    @property
    def page_index(self) -> int:
        return len(self.pages) - 1

    def draw(self, operation: Operation) -> None:
        self.page.operations.append(operation)

    def new_page(self) -> None:
        self.pages.append(Page())
        self.y = TOP_MARGIN


def item_cells(item: LineItem) -> tuple[str, ...]:
    return (
        item.product,
        format_quantity(item.quantity),
        item.unit,
        format_currency(item.price),
        format_currency(item.subtotal),
    )


def layout_order(order: Order, generated_on: date) -> DocumentLayout:
    """Lay out the document for ``order``.

    The items are parsed before anything is placed, so a malformed blob
    raises MalformedItemsError without producing a partial layout.
    """
    items = order.line_items()

    cursor = _Cursor()
    _draw_header(cursor, order)
    _draw_general_information(cursor, order)
    _draw_items_header(cursor)
    rows = _draw_item_rows(cursor, items)
    _draw_footers(cursor, generated_on)

    return DocumentLayout(
        title=f"Order {order.order_number}",
        pages=cursor.pages,
        rows=rows,
    )


def _draw_header(cursor: _Cursor, order: Order) -> None:
    cursor.draw(Text(MARGIN_LEFT, 20, "Food Retailer", 20, BRAND_BLUE))
    cursor.draw(Text(MARGIN_LEFT, 28, "Distributor Portal", 12, MUTED))
    cursor.draw(Text(MARGIN_LEFT, 45, f"Order {order.order_number}", 16))

    badge = status_color(order.status)
    cursor.draw(Rect(150, 38, 40, 8, fill=badge, radius=2))
    cursor.draw(Text(170, 43, order.status, 10, badge.contrasting_text(), align="center"))


def _draw_general_information(cursor: _Cursor, order: Order) -> None:
    cursor.draw(Text(MARGIN_LEFT, 60, "General Information", 14))

    rows = (
        ("Order Number:", order.order_number),
        ("Distributor:", order.distributor_name),
        ("Order Date:", format_date(order.order_date)),
        ("Delivery Date:", format_date(order.delivery_date)),
    )
    cursor.y = 70.0
    for label, value in rows:
        cursor.draw(Text(MARGIN_LEFT, cursor.y, label, 10, MUTED))
        cursor.draw(Text(VALUE_COLUMN, cursor.y, value, 10))
        cursor.y += INFO_ROW_STEP

    cursor.draw(Text(MARGIN_LEFT, cursor.y, "Total Amount:", 10, MUTED))
    cursor.draw(
        Text(VALUE_COLUMN, cursor.y, format_currency(order.total_amount), 12, ACCENT_GREEN)
    )


def _draw_items_header(cursor: _Cursor) -> None:
    cursor.y += 15
    cursor.draw(Text(MARGIN_LEFT, cursor.y, "Order Items", 14))

    cursor.y += 10
    cursor.draw(Rect(MARGIN_LEFT, cursor.y - 5, CONTENT_WIDTH, 8, fill=BRAND_BLUE))
    for header, x in ITEM_COLUMNS:
        cursor.draw(Text(x, cursor.y, header, 10, WHITE))
    cursor.y += 8


def _draw_item_rows(cursor: _Cursor, items: list[LineItem]) -> list[PlacedRow]:
    placed: list[PlacedRow] = []
    for index, item in enumerate(items):
        # Continuation pages carry no column header bar.
        if cursor.y > PAGE_BREAK_THRESHOLD:
            cursor.new_page()

        cells = item_cells(item)
        for (_, x), cell in zip(ITEM_COLUMNS, cells):
            cursor.draw(Text(x, cursor.y, cell, 10))
        placed.append(PlacedRow(page=cursor.page_index, y=cursor.y, cells=cells))

        cursor.y += ITEM_ROW_STEP
        if index < len(items) - 1:
            separator_y = cursor.y - 2
            cursor.draw(
                Line(MARGIN_LEFT, separator_y, MARGIN_LEFT + CONTENT_WIDTH, separator_y, SEPARATOR)
            )
    return placed


def _draw_footers(cursor: _Cursor, generated_on: date) -> None:
    footer = f"Generated on {format_generated_on(generated_on)}"
    for page in cursor.pages:
        page.operations.append(Text(MARGIN_LEFT, FOOTER_Y, footer, 8, FOOTER_GREY))
