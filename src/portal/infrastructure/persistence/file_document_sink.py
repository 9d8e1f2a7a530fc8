"""DocumentSink that writes finished documents into a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from portal.domain.exceptions import StorageError, ValidationError
from portal.domain.repository.document_ports import DocumentSink

logger = logging.getLogger(__name__)


class FileDocumentSink(DocumentSink):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    def save(self, content: bytes, filename: str) -> None:
        if not filename or "/" in filename or "\\" in filename or filename in (".", ".."):
            raise ValidationError(f"Invalid document filename: {filename!r}")

        target = self._directory / filename
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise StorageError(f"Cannot write {target}: {exc}") from exc
        logger.info("Saved %s (%d bytes)", target, len(content))
