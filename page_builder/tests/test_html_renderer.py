"""Tests for HTML rendering of the document model."""
import unittest

from page_builder.model.document_model import DocumentModel
from page_builder.model.elements import Element, ElementKind
from page_builder.renderer.html_renderer import HtmlRenderer, RenderMode, render_markup


def _body(html: str) -> str:
    return html.split("<body>", 1)[1].split("</body>", 1)[0]


class HtmlRendererTest(unittest.TestCase):
    """Per-element markup is identical across modes; wrappers differ."""

    def setUp(self) -> None:
        self.document = DocumentModel()

    def test_every_kind_has_a_body_renderer(self) -> None:
        renderer = HtmlRenderer()
        for kind in ElementKind:
            self.assertTrue(renderer.supports(kind), kind)

    def test_heading_defaults(self) -> None:
        self.document.append(ElementKind.HEADING)
        html = render_markup(self.document, RenderMode.EXPORT)
        self.assertIn(
            '<h2 style="font-size: 2rem; color: #333333; text-align: left;">Your Heading Here</h2>',
            html,
        )

    def test_heading_scenario(self) -> None:
        element = self.document.append(ElementKind.HEADING)
        self.document.set_property(element.id, "text", "Hi")
        self.document.set_property(element.id, "fontSize", "large")
        html = render_markup(self.document, "export")
        self.assertIn('<h2 style="font-size: 3rem; color: #333333; text-align: left;">Hi</h2>', html)

    def test_image_alignment_goes_on_container(self) -> None:
        element = self.document.append(ElementKind.IMAGE)
        self.document.set_property(element.id, "align", "center")
        self.document.set_property(element.id, "src", "cat.png")
        self.document.set_property(element.id, "alt", "A cat")
        body = _body(render_markup(self.document, RenderMode.EXPORT))

        self.assertIn('<div style="text-align: center;">', body)
        self.assertIn(
            '<img src="cat.png" alt="A cat" style="width: 100%; display: block; margin: 0 auto;">',
            body,
        )
        img_tag = body[body.index("<img"):]
        self.assertNotIn("text-align", img_tag.split(">", 1)[0])

    def test_image_width_always_emitted(self) -> None:
        element = self.document.append(ElementKind.IMAGE)
        self.assertIn("width: 100%;", render_markup(self.document, RenderMode.PREVIEW))
        self.document.set_property(element.id, "width", "25%")
        self.assertIn("width: 25%;", render_markup(self.document, RenderMode.PREVIEW))

    def test_button_link_wraps_and_unwraps(self) -> None:
        element = self.document.append(ElementKind.BUTTON)
        self.document.set_property(element.id, "link", "https://example.com")
        linked = render_markup(self.document, RenderMode.EXPORT)
        self.assertIn('<a href="https://example.com" target="_blank" style="text-decoration: none;">', linked)

        self.document.set_property(element.id, "link", "")
        plain = render_markup(self.document, RenderMode.EXPORT)
        self.assertNotIn("<a ", plain)
        button_style = (
            '<button style="background-color: #2196f3; color: #ffffff; '
            'padding: 0.75rem 1.5rem; font-size: 1rem; display: inline-block;">Click Me</button>'
        )
        self.assertIn(button_style, linked)
        self.assertIn(button_style, plain)

    def test_whitespace_link_is_treated_as_empty(self) -> None:
        element = self.document.append(ElementKind.BUTTON)
        self.document.set_property(element.id, "link", "   ")
        self.assertNotIn("<a ", render_markup(self.document, RenderMode.PREVIEW))

    def test_button_container_alignment_and_size(self) -> None:
        element = self.document.append(ElementKind.BUTTON)
        self.document.set_property(element.id, "size", "small")
        self.document.set_property(element.id, "align", "right")
        html = render_markup(self.document, RenderMode.PREVIEW)
        self.assertIn('<div style="text-align: right; margin: 1rem 0;">', html)
        self.assertIn("padding: 0.5rem 1rem; font-size: 0.875rem;", html)

    def test_button_colors_normalized(self) -> None:
        element = self.document.append(ElementKind.BUTTON)
        self.document.set_property(element.id, "backgroundColor", "rgb(255, 0, 0)")
        self.document.set_property(element.id, "textColor", "not-a-color")
        html = render_markup(self.document, RenderMode.EXPORT)
        self.assertIn("background-color: #ff0000; color: #333333;", html)

    def test_modes_share_element_markup(self) -> None:
        heading = self.document.append(ElementKind.HEADING)
        self.document.append(ElementKind.IMAGE)
        self.document.append(ElementKind.BUTTON)
        self.document.set_property(heading.id, "align", "center")

        preview = _body(render_markup(self.document, RenderMode.PREVIEW))
        export = _body(render_markup(self.document, RenderMode.EXPORT))
        preview_lines = [line.strip() for line in preview.splitlines() if line.strip()]
        export_lines = [line.strip() for line in export.splitlines() if line.strip()]
        self.assertEqual(export_lines[0], '<div class="container">')
        self.assertEqual(export_lines[-1], "</div>")
        self.assertEqual(preview_lines, export_lines[1:-1])

    def test_wrappers(self) -> None:
        preview = render_markup(self.document, RenderMode.PREVIEW)
        export = render_markup(self.document, RenderMode.EXPORT)
        for html in (preview, export):
            self.assertTrue(html.startswith("<!DOCTYPE html>"))
            self.assertIn('<meta charset="UTF-8">', html)
            self.assertIn('name="viewport"', html)
        self.assertIn("<title>Preview</title>", preview)
        self.assertIn("<title>My Website</title>", export)
        self.assertIn(".container {", export)
        self.assertNotIn(".container", preview)

    def test_empty_document_renders_empty_body(self) -> None:
        self.assertEqual(_body(render_markup(self.document, RenderMode.PREVIEW)).strip(), "")
        export_body = _body(render_markup(self.document, RenderMode.EXPORT))
        for tag in ("<h2", "<img", "<button", "<p"):
            self.assertNotIn(tag, export_body)

    def test_render_is_idempotent_and_order_preserving(self) -> None:
        first = self.document.append(ElementKind.BUTTON)
        second = self.document.append(ElementKind.HEADING)
        self.document.set_property(first.id, "text", "One")
        self.document.set_property(second.id, "text", "Two")
        renderer = HtmlRenderer(RenderMode.EXPORT)
        html = renderer.render(self.document)
        self.assertEqual(html, renderer.render(self.document))
        self.assertLess(html.index("One"), html.index("Two"))

    def test_render_does_not_mutate_document(self) -> None:
        element = self.document.append(ElementKind.HEADING)
        del element.properties["color"]
        render_markup(self.document, RenderMode.EXPORT)
        self.assertNotIn("color", element.properties)

    def test_text_and_attributes_are_escaped(self) -> None:
        heading = self.document.append(ElementKind.HEADING)
        image = self.document.append(ElementKind.IMAGE)
        self.document.set_property(heading.id, "text", "Fish & <Chips>")
        self.document.set_property(image.id, "alt", 'say "hi"')
        html = render_markup(self.document, RenderMode.EXPORT)
        self.assertIn(">Fish &amp; &lt;Chips&gt;</h2>", html)
        self.assertIn('alt="say &quot;hi&quot;"', html)

    def test_empty_text_renders_empty_content(self) -> None:
        element = self.document.append(ElementKind.HEADING)
        self.document.set_property(element.id, "text", "")
        self.assertIn('text-align: left;"></h2>', render_markup(self.document, RenderMode.EXPORT))

    def test_unknown_kind_renders_placeholder(self) -> None:
        renderer = HtmlRenderer(RenderMode.PREVIEW)
        lines = renderer._element_lines(Element(id="element-9", kind="video", properties={}))  # type: ignore[arg-type]
        self.assertEqual(lines, ["<p>Unknown element type: video</p>"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
