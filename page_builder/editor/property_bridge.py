"""Keep the property panel and the selected element in sync."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from page_builder.model.document_model import DocumentModel
from page_builder.model.elements import Element, ElementKind, PropertySpec, ValueType, property_spec
from page_builder.model.errors import ElementNotFoundError
from page_builder.utils.colors import normalize_color
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

NO_SELECTION_MESSAGE = "Select an element to edit its properties"
LINK_PLACEHOLDER = "https://example.com"


class Cadence(str, Enum):
    """When a field edit is forwarded to the document."""

    LIVE = "input"
    COMMIT = "change"


class Widget(str, Enum):
    TEXT = "text"
    URL = "url"
    SELECT = "select"
    COLOR = "color"


_WIDGETS: Mapping[ValueType, Widget] = {
    ValueType.TEXT: Widget.TEXT,
    ValueType.URL: Widget.URL,
    ValueType.ENUM: Widget.SELECT,
    ValueType.COLOR: Widget.COLOR,
}

_CADENCES: Mapping[ValueType, Cadence] = {
    ValueType.TEXT: Cadence.LIVE,
    ValueType.URL: Cadence.LIVE,
    ValueType.ENUM: Cadence.COMMIT,
    ValueType.COLOR: Cadence.COMMIT,
}

FIELD_LABELS: Mapping[ElementKind, Mapping[str, str]] = {
    ElementKind.HEADING: {
        "text": "Text Content",
        "fontSize": "Font Size",
        "color": "Text Color",
        "align": "Text Alignment",
    },
    ElementKind.IMAGE: {
        "src": "Image URL",
        "alt": "Alt Text",
        "align": "Image Alignment",
        "width": "Width",
    },
    ElementKind.BUTTON: {
        "text": "Button Text",
        "backgroundColor": "Background Color",
        "textColor": "Text Color",
        "size": "Button Size",
        "align": "Button Alignment",
        "link": "Link URL",
    },
}

# Panel order differs from schema order for images: alignment comes before width.
FIELD_ORDER: Mapping[ElementKind, Tuple[str, ...]] = {
    kind: tuple(labels) for kind, labels in FIELD_LABELS.items()
}

OPTION_LABELS: Mapping[str, str] = {
    "small": "Small",
    "medium": "Medium",
    "large": "Large",
    "left": "Left",
    "center": "Center",
    "right": "Right",
    "100%": "Full Width",
    "50%": "Half Width",
    "25%": "Quarter Width",
}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One editable field of the property panel, with its current value."""

    name: str
    label: str
    widget: Widget
    cadence: Cadence
    value: str
    options: Tuple[Tuple[str, str], ...] = ()
    placeholder: str = ""


@dataclass(frozen=True, slots=True)
class PropertyPanel:
    """Panel contents for the current selection."""

    element_id: Optional[str] = None
    kind: Optional[ElementKind] = None
    fields: Tuple[FieldSpec, ...] = ()
    message: str = NO_SELECTION_MESSAGE
    deletable: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.fields

    def field(self, name: str) -> Optional[FieldSpec]:
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def values(self) -> Dict[str, str]:
        return {item.name: item.value for item in self.fields}


class PropertyEditorBridge:
    """Translate panel edits into document mutations and back.

    Text-like fields apply on every keystroke (``on_input``); enum and color
    fields only apply when committed (``on_change``).
    """

    def __init__(self, document: DocumentModel) -> None:
        self._document = document

    def panel(self) -> PropertyPanel:
        """Describe the panel for the currently selected element."""
        element = self._document.selected
        if element is None:
            return PropertyPanel()
        fields = tuple(self._field_for(element, name) for name in FIELD_ORDER.get(element.kind, ()))
        return PropertyPanel(
            element_id=element.id,
            kind=element.kind,
            fields=fields,
            message="",
            deletable=True,
        )

    def on_input(self, name: str, value: str) -> bool:
        """Handle a keystroke; only live fields are applied."""
        spec = self._selected_spec(name)
        if _CADENCES[spec.value_type] is not Cadence.LIVE:
            LOGGER.debug("Ignoring keystroke on commit field %s", name)
            return False
        self._document.set_property(self._document.selected_id, name, value)
        return True

    def on_change(self, name: str, value: str) -> Element:
        """Handle a committed edit for any field."""
        return self._document.set_property(self._document.selected_id, name, value)

    def delete_selected(self) -> PropertyPanel:
        """Delete the selected element from within the panel and re-query it."""
        selected_id = self._document.selected_id
        if selected_id is not None:
            self._document.delete(selected_id)
        return self.panel()

    def link_hint(self) -> str:
        """Tooltip for a linked button, empty when there is no link."""
        element = self._document.selected
        if element is None or element.kind is not ElementKind.BUTTON:
            return ""
        link = element.get("link") or ""
        return f"Links to: {link}" if link.strip() else ""

    def _selected_spec(self, name: str) -> PropertySpec:
        element = self._document.selected
        if element is None:
            raise ElementNotFoundError(None)
        return property_spec(element.kind, name)

    def _field_for(self, element: Element, name: str) -> FieldSpec:
        spec = property_spec(element.kind, name)
        value = element.get(name)
        if spec.value_type is ValueType.COLOR:
            value = normalize_color(value)
        return FieldSpec(
            name=name,
            label=FIELD_LABELS[element.kind][name],
            widget=_WIDGETS[spec.value_type],
            cadence=_CADENCES[spec.value_type],
            value=value,
            options=tuple((option, OPTION_LABELS.get(option, option)) for option in spec.options),
            placeholder=LINK_PLACEHOLDER if name == "link" else "",
        )
