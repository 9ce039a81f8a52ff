"""Render the document model into a standalone HTML page."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List

from page_builder.model.document_model import DocumentModel
from page_builder.model.elements import Element, ElementKind
from page_builder.model.style_model import StyleResolver
from page_builder.renderer.utils import attr, style_attr, text
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

INDENT = "  "
BUTTON_CONTAINER_MARGIN = "1rem 0"

_HEAD_META = [
    '<meta charset="UTF-8">',
    '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
]

_PREVIEW_STYLESHEET = [
    "body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; padding: 20px; margin: 0; line-height: 1.6; }",
    "@media (max-width: 768px) { body { padding: 10px; } }",
    "h2 { margin: 0.5rem 0; word-wrap: break-word; }",
    "img { max-width: 100%; height: auto; display: block; }",
    "button { padding: 0.75rem 1.5rem; border: none; border-radius: 6px; cursor: pointer; font-size: 1rem; font-weight: 500; margin: 0.5rem 0; transition: background-color 0.2s ease; max-width: 100%; word-wrap: break-word; }",
    "@media (max-width: 768px) { button { padding: 0.6rem 1.2rem; font-size: 0.9rem; } }",
    "button:hover { opacity: 0.9; }",
    "@media (max-width: 768px) { h2 { font-size: 1.5rem !important; } }",
]

_EXPORT_STYLESHEET = [
    'body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; line-height: 1.6; margin: 0; padding: 20px; }',
    "@media (max-width: 768px) { body { padding: 10px; } }",
    ".container { max-width: 1200px; margin: 0 auto; padding: 20px; background-color: #fff; border-radius: 8px; box-shadow: 0 4px 10px rgba(0,0,0,0.05); }",
    "@media (max-width: 768px) { .container { padding: 15px; } }",
    "h1, h2, h3 { margin: 0.5rem 0; word-wrap: break-word; }",
    "@media (max-width: 768px) { h1, h2, h3 { font-size: 1.5rem; } }",
    "img { max-width: 100%; height: auto; border-radius: 4px; margin: 0.5rem 0; display: block; }",
    "button { padding: 0.75rem 1.5rem; border: none; border-radius: 6px; cursor: pointer; font-size: 1rem; font-weight: 500; margin: 0.5rem 0; transition: background-color 0.2s ease; max-width: 100%; word-wrap: break-word; }",
    "@media (max-width: 768px) { button { padding: 0.6rem 1.2rem; font-size: 0.9rem; } }",
    "button:hover { opacity: 0.9; }",
]


class RenderMode(str, Enum):
    """Rendering target; only the page wrapper differs between modes."""

    PREVIEW = "preview"
    EXPORT = "export"


class HtmlRenderer:
    """Produce standalone HTML for a document, one block per element in order."""

    def __init__(self, mode: RenderMode = RenderMode.EXPORT, resolver: StyleResolver | None = None) -> None:
        self._mode = RenderMode(mode)
        self._resolver = resolver or StyleResolver()
        self._body_renderers: Dict[ElementKind, Callable[[Element], List[str]]] = {
            ElementKind.HEADING: self._heading_lines,
            ElementKind.IMAGE: self._image_lines,
            ElementKind.BUTTON: self._button_lines,
        }

    @property
    def mode(self) -> RenderMode:
        return self._mode

    def supports(self, kind: object) -> bool:
        return kind in self._body_renderers

    def render(self, document: DocumentModel) -> str:
        elements = document.snapshot()
        LOGGER.debug("Rendering %d element(s) in %s mode", len(elements), self._mode.value)
        return self._build_html(elements)

    def _build_html(self, elements: Iterable[Element]) -> str:
        body_lines: List[str] = []
        for element in elements:
            body_lines.extend(self._element_lines(element))

        if self._mode is RenderMode.EXPORT:
            title, stylesheet = "My Website", _EXPORT_STYLESHEET
            body = [f'{INDENT}<div class="container">']
            body.extend(_indent(body_lines, 2))
            body.append(f"{INDENT}</div>")
        else:
            title, stylesheet = "Preview", _PREVIEW_STYLESHEET
            body = _indent(body_lines, 1)

        lines = ["<!DOCTYPE html>", '<html lang="en">', "<head>"]
        lines.extend(_indent(_HEAD_META, 1))
        lines.append(f"{INDENT}<title>{title}</title>")
        lines.append(f"{INDENT}<style>")
        lines.extend(_indent(stylesheet, 2))
        lines.append(f"{INDENT}</style>")
        lines.append("</head>")
        lines.append("<body>")
        lines.extend(body)
        lines.append("</body>")
        lines.append("</html>")
        return "\n".join(lines) + "\n"

    def _element_lines(self, element: Element) -> List[str]:
        renderer = self._body_renderers.get(element.kind)
        if renderer is None:
            LOGGER.warning("No renderer for element %s of kind %r", element.id, element.kind)
            kind = element.kind.value if isinstance(element.kind, Enum) else str(element.kind)
            return [f"<p>Unknown element type: {text(kind)}</p>"]
        return renderer(element)

    # ------------------------------------------------------------------
    # Per-kind bodies, shared by both modes
    def _heading_lines(self, element: Element) -> List[str]:
        style = self._resolver.resolve_element(element)
        return [f"<h2{style_attr(style.element)}>{text(_value(element, 'text'))}</h2>"]

    def _image_lines(self, element: Element) -> List[str]:
        style = self._resolver.resolve_element(element)
        img = (
            f'<img src="{attr(_value(element, "src"))}" alt="{attr(_value(element, "alt"))}"'
            f"{style_attr(style.element)}>"
        )
        return [f"<div{style_attr(style.container)}>", f"{INDENT}{img}", "</div>"]

    def _button_lines(self, element: Element) -> List[str]:
        style = self._resolver.resolve_element(element)
        container = dict(style.container)
        container["margin"] = BUTTON_CONTAINER_MARGIN
        button = f"<button{style_attr(style.element)}>{text(_value(element, 'text'))}</button>"

        link = _value(element, "link")
        if link.strip():
            inner = [
                f'<a href="{attr(link)}" target="_blank" style="text-decoration: none;">',
                f"{INDENT}{button}",
                "</a>",
            ]
        else:
            inner = [button]
        return [f"<div{style_attr(container)}>", *_indent(inner, 1), "</div>"]


def render_markup(document: DocumentModel, mode: RenderMode | str) -> str:
    """Render ``document`` in the given mode."""
    return HtmlRenderer(RenderMode(mode)).render(document)


def _value(element: Element, name: str) -> str:
    value = element.get(name)
    return "" if value is None else str(value)


def _indent(lines: Iterable[str], depth: int) -> List[str]:
    prefix = INDENT * depth
    return [f"{prefix}{line}" for line in lines]
