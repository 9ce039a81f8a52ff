"""Unit tests for element creation and property updates."""
import unittest

from page_builder.model import elements
from page_builder.model.elements import ElementKind, property_names
from page_builder.model.errors import InvalidPropertyError, UnknownElementKindError


class ElementModelTest(unittest.TestCase):
    """Elements start from defaults and store raw values."""

    def test_create_seeds_defaults(self) -> None:
        heading = elements.create(ElementKind.HEADING, "element-1")
        self.assertEqual(
            heading.properties,
            {"text": "Your Heading Here", "fontSize": "medium", "color": "#333333", "align": "left"},
        )

        button = elements.create("button", "element-2")
        self.assertEqual(button.kind, ElementKind.BUTTON)
        self.assertEqual(button.properties["text"], "Click Me")
        self.assertEqual(button.properties["backgroundColor"], "#2196f3")
        self.assertEqual(button.properties["textColor"], "#ffffff")
        self.assertEqual(button.properties["size"], "medium")
        self.assertEqual(button.properties["link"], "")

        image = elements.create(ElementKind.IMAGE, "element-3")
        self.assertEqual(image.properties["width"], "100%")
        self.assertEqual(image.properties["align"], "left")
        self.assertTrue(image.properties["src"].startswith("https://"))

    def test_every_kind_has_a_schema(self) -> None:
        for kind in ElementKind:
            self.assertTrue(property_names(kind), kind)

    def test_set_property_stores_raw_value(self) -> None:
        heading = elements.create(ElementKind.HEADING, "element-1")
        returned = elements.set_property(heading, "fontSize", "large")
        self.assertIs(returned, heading)
        self.assertEqual(heading.properties["fontSize"], "large")

        elements.set_property(heading, "color", "rgb(1, 2, 3)")
        self.assertEqual(heading.properties["color"], "rgb(1, 2, 3)")

    def test_set_property_rejects_foreign_names(self) -> None:
        image = elements.create(ElementKind.IMAGE, "element-1")
        before = dict(image.properties)
        with self.assertRaises(InvalidPropertyError) as ctx:
            elements.set_property(image, "text", "hello")
        self.assertEqual(ctx.exception.property_name, "text")
        self.assertEqual(ctx.exception.kind, "image")
        self.assertEqual(image.properties, before)

    def test_unknown_kind_tag(self) -> None:
        with self.assertRaises(UnknownElementKindError):
            elements.create("video", "element-1")
        with self.assertRaises(ValueError):
            ElementKind.parse("paragraph")

    def test_empty_strings_are_valid_values(self) -> None:
        button = elements.create(ElementKind.BUTTON, "element-1")
        elements.set_property(button, "text", "")
        self.assertEqual(button.get("text"), "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
