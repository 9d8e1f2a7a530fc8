"""Integration tests for the Export Order PDF use case."""

from datetime import date

import pytest

from portal.application.export_order_pdf import ExportOrderPdfHandler
from portal.domain.exceptions import EntityNotFoundError, MalformedItemsError
from tests.fakes import FakeDocumentSink, FakeOrderRepository, StubRenderer, make_order


def _setup(*orders):
    repo = FakeOrderRepository(list(orders))
    renderer = StubRenderer()
    sink = FakeDocumentSink()
    return ExportOrderPdfHandler(repo, renderer, sink), renderer, sink


class TestExportOrderPdf:

    def test_saves_under_derived_filename(self):
        handler, _, sink = _setup(make_order())
        filename = handler.handle("ORD-2024-001")
        assert filename == "Order_ORD-2024-001.pdf"
        assert sink.saved == {"Order_ORD-2024-001.pdf": b"%PDF-stub"}

    def test_passes_generation_date(self):
        handler, renderer, _ = _setup(make_order())
        handler.handle("ORD-2024-001", generated_on=date(2024, 12, 5))
        assert renderer.calls[0][1] == date(2024, 12, 5)

    def test_unknown_order(self):
        handler, _, sink = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("ORD-404")
        assert sink.saved == {}

    def test_malformed_items_saves_nothing(self):
        handler, _, sink = _setup(make_order(items="not valid json"))
        with pytest.raises(MalformedItemsError):
            handler.handle("ORD-2024-001")
        assert sink.saved == {}
