"""PDF rendering of order documents with reportlab."""

from __future__ import annotations

import io
import logging
from datetime import date
from typing import Callable

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from portal.domain.model.order import Order
from portal.domain.repository.document_ports import DocumentRenderer, RenderedDocument
from portal.infrastructure.pdf.layout import (
    PAGE_HEIGHT,
    DocumentLayout,
    Line,
    Operation,
    Rect,
    Text,
    layout_order,
)

logger = logging.getLogger(__name__)

FONT = "Helvetica"
LINE_WIDTH = 0.2 * mm


def document_filename(order: Order) -> str:
    return f"Order_{order.order_number}.pdf"


class ReportlabOrderRenderer(DocumentRenderer):
    """Render an order onto A4 pages.

    The canvas runs in reportlab's invariant mode, which pins the creation
    timestamp and document ID, so the same order and ``generated_on`` always
    give the same bytes.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def render(self, order: Order, generated_on: date | None = None) -> RenderedDocument:
        layout = layout_order(order, generated_on or self._today())
        content = self.paint(layout)
        logger.debug(
            "Rendered %s: %d page(s), %d item row(s)",
            order.order_number, layout.page_count, len(layout.rows),
        )
        return RenderedDocument(
            filename=document_filename(order),
            content=content,
            page_count=layout.page_count,
        )

    def paint(self, layout: DocumentLayout) -> bytes:
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4, invariant=1)
        pdf.setTitle(layout.title)
        pdf.setAuthor("Food Retailer")

        for page in layout.pages:
            pdf.setLineWidth(LINE_WIDTH)
            for operation in page.operations:
                _paint(pdf, operation)
            pdf.showPage()

        pdf.save()
        return buffer.getvalue()


def _y(top_offset: float) -> float:
    """Layout y (mm from the top) to PDF y (points from the bottom)."""
    return (PAGE_HEIGHT - top_offset) * mm


def _paint(pdf: canvas.Canvas, operation: Operation) -> None:
    if isinstance(operation, Text):
        pdf.setFont(FONT, operation.size)
        pdf.setFillColorRGB(*operation.color.as_fractions())
        if operation.align == "center":
            pdf.drawCentredString(operation.x * mm, _y(operation.y), operation.text)
        else:
            pdf.drawString(operation.x * mm, _y(operation.y), operation.text)
    elif isinstance(operation, Rect):
        pdf.setFillColorRGB(*operation.fill.as_fractions())
        x = operation.x * mm
        y = _y(operation.y + operation.height)
        width = operation.width * mm
        height = operation.height * mm
        if operation.radius:
            pdf.roundRect(x, y, width, height, operation.radius * mm, stroke=0, fill=1)
        else:
            pdf.rect(x, y, width, height, stroke=0, fill=1)
    elif isinstance(operation, Line):
        pdf.setStrokeColorRGB(*operation.color.as_fractions())
        pdf.line(operation.x1 * mm, _y(operation.y1), operation.x2 * mm, _y(operation.y2))
    else:
        raise TypeError(f"Unsupported drawing operation: {operation!r}")
