"""Builder session: the entry points a UI collaborator calls into."""
from __future__ import annotations

from typing import Optional, Union

from page_builder.editor.property_bridge import PropertyEditorBridge, PropertyPanel
from page_builder.model.document_model import DocumentModel
from page_builder.model.elements import Element, ElementKind
from page_builder.renderer.export import ExportArtifact, build_export
from page_builder.renderer.html_renderer import HtmlRenderer, RenderMode
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)


class BuilderSession:
    """Owns one document for the lifetime of an editing session."""

    def __init__(self, document: Optional[DocumentModel] = None) -> None:
        self.document = document if document is not None else DocumentModel()
        self.bridge = PropertyEditorBridge(self.document)

    @property
    def is_empty(self) -> bool:
        """True when the canvas would show its drop placeholder."""
        return len(self.document) == 0

    def panel(self) -> PropertyPanel:
        return self.bridge.panel()

    def on_element_dropped(self, kind: Union[ElementKind, str]) -> Element:
        """Append a new element and select it."""
        element = self.document.append(kind)
        self.document.select(element.id)
        return element

    def on_element_clicked(self, element_id: Optional[str]) -> Optional[Element]:
        return self.document.select(element_id)

    def on_delete_requested(self, element_id: str) -> bool:
        return self.document.delete(element_id)

    def on_field_input(self, name: str, value: str) -> bool:
        return self.bridge.on_input(name, value)

    def on_field_changed(self, name: str, value: str) -> Element:
        return self.bridge.on_change(name, value)

    def on_panel_delete(self) -> PropertyPanel:
        return self.bridge.delete_selected()

    def on_preview_requested(self) -> str:
        return HtmlRenderer(RenderMode.PREVIEW).render(self.document)

    def on_export_requested(self) -> ExportArtifact:
        artifact = build_export(self.document)
        LOGGER.debug("Prepared %s for download", artifact.filename)
        return artifact
