"""In-memory representation of placed blocks and their editable properties."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Sequence, Tuple, Union

from page_builder.model.errors import InvalidPropertyError, UnknownElementKindError


class ElementKind(str, Enum):
    """Closed set of block types a page can contain."""

    HEADING = "heading"
    IMAGE = "image"
    BUTTON = "button"

    @classmethod
    def parse(cls, value: Union["ElementKind", str]) -> "ElementKind":
        """Accept either an enum member or its string tag."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownElementKindError(value) from None


class ValueType(str, Enum):
    """How a property value is entered and interpreted."""

    TEXT = "text"
    URL = "url"
    COLOR = "color"
    ENUM = "enum"


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """Schema entry for one property of an element kind."""

    name: str
    value_type: ValueType
    default: str
    options: Tuple[str, ...] = ()


ALIGN_OPTIONS = ("left", "center", "right")
SIZE_OPTIONS = ("small", "medium", "large")
WIDTH_OPTIONS = ("100%", "50%", "25%")

PLACEHOLDER_IMAGE_SRC = "https://via.placeholder.com/300x200/667eea/white?text=Your+Image"

PROPERTY_SCHEMAS: Mapping[ElementKind, Sequence[PropertySpec]] = {
    ElementKind.HEADING: (
        PropertySpec("text", ValueType.TEXT, "Your Heading Here"),
        PropertySpec("fontSize", ValueType.ENUM, "medium", SIZE_OPTIONS),
        PropertySpec("color", ValueType.COLOR, "#333333"),
        PropertySpec("align", ValueType.ENUM, "left", ALIGN_OPTIONS),
    ),
    ElementKind.IMAGE: (
        PropertySpec("src", ValueType.URL, PLACEHOLDER_IMAGE_SRC),
        PropertySpec("alt", ValueType.TEXT, "Placeholder"),
        PropertySpec("width", ValueType.ENUM, "100%", WIDTH_OPTIONS),
        PropertySpec("align", ValueType.ENUM, "left", ALIGN_OPTIONS),
    ),
    ElementKind.BUTTON: (
        PropertySpec("text", ValueType.TEXT, "Click Me"),
        PropertySpec("backgroundColor", ValueType.COLOR, "#2196f3"),
        PropertySpec("textColor", ValueType.COLOR, "#ffffff"),
        PropertySpec("size", ValueType.ENUM, "medium", SIZE_OPTIONS),
        PropertySpec("align", ValueType.ENUM, "left", ALIGN_OPTIONS),
        PropertySpec("link", ValueType.URL, ""),
    ),
}


@dataclass(slots=True)
class Element:
    """One placed block with its raw, user-facing property values."""

    id: str
    kind: ElementKind
    properties: Dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str:
        """Return the stored value, falling back to the schema default."""
        if name in self.properties:
            return self.properties[name]
        return property_spec(self.kind, name).default


def schema_for(kind: ElementKind) -> Sequence[PropertySpec]:
    """Return the ordered property schema for ``kind``."""
    return PROPERTY_SCHEMAS.get(kind, ())


def property_names(kind: ElementKind) -> Tuple[str, ...]:
    return tuple(spec.name for spec in schema_for(kind))


def property_spec(kind: ElementKind, name: str) -> PropertySpec:
    """Look up a single schema entry, raising if ``name`` is not legal for ``kind``."""
    for spec in schema_for(kind):
        if spec.name == name:
            return spec
    raise InvalidPropertyError(_kind_label(kind), name)


def create(kind: Union[ElementKind, str], element_id: str) -> Element:
    """Build a new element with every property seeded to its default."""
    element_kind = ElementKind.parse(kind)
    defaults = {spec.name: spec.default for spec in schema_for(element_kind)}
    return Element(id=element_id, kind=element_kind, properties=defaults)


def set_property(element: Element, name: str, value: str) -> Element:
    """Store ``value`` verbatim under ``name``; rendering resolves it later."""
    property_spec(element.kind, name)
    element.properties[name] = value
    return element


def _kind_label(kind: object) -> str:
    return kind.value if isinstance(kind, ElementKind) else str(kind)
