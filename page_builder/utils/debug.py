"""Helpers to persist the in-memory document for debugging."""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from page_builder.model.document_model import DocumentModel

DEBUG_FILENAME = "document_model.json"


class DebugDumper:
    """Writes a snapshot of the document onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, document: DocumentModel) -> Path:
        """Persist elements and selection as JSON; the file is never read back."""
        self.directory.mkdir(parents=True, exist_ok=True)
        payload = {
            "elements": [self._serialize(element) for element in document.snapshot()],
            "selected_id": document.selected_id,
        }
        path = self.directory / DEBUG_FILENAME
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value) and not isinstance(value, type):
            return {k: self._serialize(v) for k, v in asdict(value).items()}
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
