"""Abstract collaborators for producing and delivering order documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from portal.domain.model.order import Order


@dataclass(frozen=True)
class RenderedDocument:
    filename: str
    content: bytes
    page_count: int


class DocumentRenderer(ABC):

    @abstractmethod
    def render(self, order: Order, generated_on: date | None = None) -> RenderedDocument:
        """Produce the document for one order.

        Must raise before producing any output when the order's items
        cannot be parsed.
        """


class DocumentSink(ABC):

    @abstractmethod
    def save(self, content: bytes, filename: str) -> None:
        """Hand a finished document to the host for storage or download."""
