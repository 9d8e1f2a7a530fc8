"""Tests for the reportlab PDF renderer."""

import re
from datetime import date

import pytest

from portal.domain.exceptions import MalformedItemsError
from portal.domain.model.order import LineItem
from portal.infrastructure.pdf.renderer import ReportlabOrderRenderer, document_filename
from tests.fakes import make_order

GENERATED_ON = date(2024, 12, 15)


def _page_objects(content: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", content))


def _page_tree_count(content: bytes) -> int:
    return int(re.search(rb"/Count (\d+)\s*/Kids", content).group(1))


class TestReportlabOrderRenderer:

    def test_produces_pdf(self):
        document = ReportlabOrderRenderer().render(make_order(), GENERATED_ON)
        assert document.content.startswith(b"%PDF-")
        assert document.filename == "Order_ORD-2024-001.pdf"
        assert document.page_count == 1

    def test_byte_identical_for_same_input(self):
        renderer = ReportlabOrderRenderer()
        first = renderer.render(make_order(), GENERATED_ON)
        second = renderer.render(make_order(), GENERATED_ON)
        assert first.content == second.content

    def test_generation_date_changes_output(self):
        renderer = ReportlabOrderRenderer()
        first = renderer.render(make_order(), date(2024, 12, 15))
        second = renderer.render(make_order(), date(2024, 12, 16))
        assert first.content != second.content

    def test_injected_clock_used_when_no_date_given(self):
        renderer = ReportlabOrderRenderer(today=lambda: GENERATED_ON)
        implicit = renderer.render(make_order())
        explicit = ReportlabOrderRenderer().render(make_order(), GENERATED_ON)
        assert implicit.content == explicit.content

    def test_multi_page_document(self):
        items = [LineItem(f"Product {n}", 1, "units", 2.0) for n in range(25)]
        document = ReportlabOrderRenderer().render(make_order(items=items), GENERATED_ON)
        assert document.page_count == 2
        assert _page_objects(document.content) == 2

    def test_malformed_items_raise(self):
        with pytest.raises(MalformedItemsError):
            ReportlabOrderRenderer().render(make_order(items="not valid json"), GENERATED_ON)


class TestDocumentFilename:

    def test_derived_from_order_number(self):
        assert document_filename(make_order(order_number="ORD-2024-003")) == "Order_ORD-2024-003.pdf"


class TestPageTree:

    @pytest.mark.parametrize("item_count, pages", [(0, 1), (3, 1), (25, 2), (57, 3)])
    def test_page_count_matches_layout(self, item_count, pages):
        items = [LineItem(f"Product {n}", 1, "units", 2.0) for n in range(item_count)]
        document = ReportlabOrderRenderer().render(make_order(items=items), GENERATED_ON)
        assert document.page_count == pages
        assert _page_tree_count(document.content) == pages
        assert _page_objects(document.content) == pages
