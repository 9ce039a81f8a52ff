"""Package the exported page as a downloadable file."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from page_builder.model.document_model import DocumentModel
from page_builder.renderer.html_renderer import HtmlRenderer, RenderMode
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

EXPORT_FILENAME = "my-website.html"
EXPORT_MIME_TYPE = "text/html"


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """Rendered page plus the metadata a download needs."""

    content: str
    filename: str = EXPORT_FILENAME
    mime_type: str = EXPORT_MIME_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")

    def write_to(self, directory: Path) -> Path:
        """Write the artifact into ``directory`` and return the file path."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_text(self.content, encoding="utf-8")
        LOGGER.info("Wrote %s (%d bytes)", path, len(self.to_bytes()))
        return path


def build_export(document: DocumentModel) -> ExportArtifact:
    """Render ``document`` in export mode and wrap it as a download."""
    return ExportArtifact(content=HtmlRenderer(RenderMode.EXPORT).render(document))
