"""Exceptions raised by the page builder core."""
from __future__ import annotations

from typing import Optional


class PageBuilderError(Exception):
    """Base class for every error raised by the page builder."""


class InvalidPropertyError(PageBuilderError, ValueError):
    """Property name is not defined for the element's kind."""

    def __init__(self, kind: str, property_name: str) -> None:
        super().__init__(f"Property {property_name!r} is not valid for {kind} elements")
        self.kind = kind
        self.property_name = property_name


class ElementNotFoundError(PageBuilderError, LookupError):
    """Operation referenced an element id absent from the document."""

    def __init__(self, element_id: Optional[str]) -> None:
        super().__init__(f"No element with id {element_id!r}")
        self.element_id = element_id


class UnknownElementKindError(PageBuilderError, ValueError):
    """Element kind tag is not one of the supported block types."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown element type: {kind}")
        self.kind = kind


class EventScriptError(PageBuilderError, ValueError):
    """Event script could not be parsed into session events."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        if index is not None:
            message = f"event #{index}: {message}"
        super().__init__(message)
        self.index = index
