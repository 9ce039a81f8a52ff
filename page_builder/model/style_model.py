"""Style tables and the resolver that turns stored property values into CSS."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple

from page_builder.model.elements import Element, ElementKind, PropertySpec, property_spec, schema_for
from page_builder.utils.colors import normalize_color

HEADING_FONT_SIZES: Mapping[str, str] = {
    "small": "1.5rem",
    "medium": "2rem",
    "large": "3rem",
}

# (padding, font-size); the pair is always applied together.
BUTTON_SIZES: Mapping[str, Tuple[str, str]] = {
    "small": ("0.5rem 1rem", "0.875rem"),
    "medium": ("0.75rem 1.5rem", "1rem"),
    "large": ("1rem 2rem", "1.125rem"),
}

IMAGE_WIDTHS: Mapping[str, str] = {
    "100%": "100%",
    "50%": "50%",
    "25%": "25%",
}

IMAGE_ALIGN_MARGINS: Mapping[str, str] = {
    "left": "0 auto 0 0",
    "center": "0 auto",
    "right": "0 0 0 auto",
}

COLOR_TARGETS: Mapping[str, str] = {
    "color": "color",
    "backgroundColor": "background-color",
    "textColor": "color",
}


@dataclass(slots=True)
class StyleFragment:
    """CSS declarations split between the inner tag and its wrapping block."""

    element: Dict[str, str] = field(default_factory=dict)
    container: Dict[str, str] = field(default_factory=dict)

    def merge(self, other: "StyleFragment") -> "StyleFragment":
        self.element.update(other.element)
        self.container.update(other.container)
        return self


Handler = Callable[[PropertySpec, Optional[str]], StyleFragment]


class StyleResolver:
    """Map (kind, property, raw value) onto concrete style declarations.

    Absent or unrecognized enum tags fall back to the schema default, and
    colors go through :func:`normalize_color`. The resolver never touches a
    document and has no side effects.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Tuple[ElementKind, str], Handler] = {
            (ElementKind.HEADING, "fontSize"): self._heading_font_size,
            (ElementKind.HEADING, "color"): self._color,
            (ElementKind.HEADING, "align"): self._heading_align,
            (ElementKind.IMAGE, "width"): self._image_width,
            (ElementKind.IMAGE, "align"): self._image_align,
            (ElementKind.BUTTON, "backgroundColor"): self._color,
            (ElementKind.BUTTON, "textColor"): self._color,
            (ElementKind.BUTTON, "size"): self._button_size,
            (ElementKind.BUTTON, "align"): self._button_align,
        }

    def resolve(self, kind: ElementKind, property_name: str, raw_value: Optional[str]) -> StyleFragment:
        """Return the style fragment for a single property value."""
        spec = property_spec(kind, property_name)
        handler = self._handlers.get((kind, property_name))
        if handler is None:
            return StyleFragment()
        return handler(spec, raw_value)

    def resolve_element(self, element: Element) -> StyleFragment:
        """Merge the fragments of every property in schema order."""
        fragment = StyleFragment()
        for spec in schema_for(element.kind):
            fragment.merge(self.resolve(element.kind, spec.name, element.get(spec.name)))
        return fragment

    # ------------------------------------------------------------------
    # Handlers
    def _color(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        return StyleFragment(element={COLOR_TARGETS[spec.name]: normalize_color(raw_value)})

    def _heading_font_size(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        tag = self._enum_tag(spec, raw_value)
        return StyleFragment(element={"font-size": HEADING_FONT_SIZES[tag]})

    def _heading_align(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        return StyleFragment(element={"text-align": self._enum_tag(spec, raw_value)})

    def _image_width(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        return StyleFragment(element={"width": IMAGE_WIDTHS[self._enum_tag(spec, raw_value)]})

    def _image_align(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        align = self._enum_tag(spec, raw_value)
        return StyleFragment(
            element={"display": "block", "margin": IMAGE_ALIGN_MARGINS[align]},
            container={"text-align": align},
        )

    def _button_size(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        padding, font_size = BUTTON_SIZES[self._enum_tag(spec, raw_value)]
        return StyleFragment(element={"padding": padding, "font-size": font_size})

    def _button_align(self, spec: PropertySpec, raw_value: Optional[str]) -> StyleFragment:
        return StyleFragment(
            element={"display": "inline-block"},
            container={"text-align": self._enum_tag(spec, raw_value)},
        )

    @staticmethod
    def _enum_tag(spec: PropertySpec, raw_value: Optional[str]) -> str:
        if raw_value in spec.options:
            return raw_value  # type: ignore[return-value]
        return spec.default
