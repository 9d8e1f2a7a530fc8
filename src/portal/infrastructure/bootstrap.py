"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions and receives its
collaborators explicitly.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from portal.application.export_order_pdf import ExportOrderPdfHandler
from portal.application.order_dashboard import OrderDashboard
from portal.infrastructure.pdf.renderer import ReportlabOrderRenderer
from portal.infrastructure.persistence.file_document_sink import FileDocumentSink
from portal.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# Resolve default directories relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DATA_DIR = _PROJECT_ROOT / "data"
DEFAULT_EXPORT_DIR = _PROJECT_ROOT / "exports"

ORDERS_FILE = "orders.json"


@dataclass
class Portal:
    """The wired application: one instance per process run."""

    order_repo: JsonOrderRepository
    renderer: ReportlabOrderRenderer
    sink: FileDocumentSink

    def exporter(self) -> ExportOrderPdfHandler:
        return ExportOrderPdfHandler(self.order_repo, self.renderer, self.sink)

    def dashboard(self) -> OrderDashboard:
        return OrderDashboard(self.order_repo, self.exporter())

    def close(self) -> None:
        self.order_repo.close()


def build_portal(
    data_dir: Path | None = None,
    export_dir: Path | None = None,
) -> Portal:
    data_dir = data_dir or DEFAULT_DATA_DIR
    export_dir = export_dir or DEFAULT_EXPORT_DIR
    return Portal(
        order_repo=JsonOrderRepository(data_dir / ORDERS_FILE),
        renderer=ReportlabOrderRenderer(),
        sink=FileDocumentSink(export_dir),
    )


@contextmanager
def open_portal(
    data_dir: Path | None = None,
    export_dir: Path | None = None,
) -> Iterator[Portal]:
    """Build a portal and close its subscriptions on exit."""
    portal = build_portal(data_dir, export_dir)
    try:
        yield portal
    finally:
        portal.close()
