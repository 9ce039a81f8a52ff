"""Ordered collection of placed elements plus the current selection."""
from __future__ import annotations

from copy import deepcopy
from typing import Iterator, List, Optional, Tuple, Union

from page_builder.model import elements as element_model
from page_builder.model.elements import Element, ElementKind
from page_builder.model.errors import ElementNotFoundError
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

ELEMENT_ID_PREFIX = "element-"


class DocumentModel:
    """The page being built: elements in insertion order and at most one selection.

    Elements are only ever appended or deleted; their relative order never
    changes. Ids are handed out from a counter that is never rewound, so an id
    is not reused after its element is deleted.
    """

    def __init__(self) -> None:
        self._elements: List[Element] = []
        self._selected_id: Optional[str] = None
        self._counter = 0

    # ------------------------------------------------------------------
    # Read access
    @property
    def elements(self) -> Tuple[Element, ...]:
        return tuple(self._elements)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Element]:
        """Return the selected element, if any."""
        return self.get(self._selected_id)

    def get(self, element_id: Optional[str]) -> Optional[Element]:
        if element_id is None:
            return None
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def snapshot(self) -> Tuple[Element, ...]:
        """Return detached copies of the elements for read-only consumers."""
        return tuple(deepcopy(element) for element in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    # ------------------------------------------------------------------
    # Mutations
    def append(self, kind: Union[ElementKind, str]) -> Element:
        """Create an element of ``kind`` at the end of the document."""
        element_kind = ElementKind.parse(kind)
        self._counter += 1
        element = element_model.create(element_kind, f"{ELEMENT_ID_PREFIX}{self._counter}")
        self._elements.append(element)
        LOGGER.debug("Appended %s as %s", element_kind.value, element.id)
        return element

    def select(self, element_id: Optional[str]) -> Optional[Element]:
        """Select ``element_id``; an unknown id clears the selection."""
        element = self.get(element_id)
        self._selected_id = element.id if element is not None else None
        if element is None and element_id is not None:
            LOGGER.debug("Cannot select missing element %s; selection cleared", element_id)
        return element

    def delete(self, element_id: Optional[str]) -> bool:
        """Remove ``element_id`` and drop the selection if it pointed there."""
        element = self.get(element_id)
        if element is None:
            return False
        self._elements.remove(element)
        if self._selected_id == element.id:
            self._selected_id = None
        LOGGER.debug("Deleted %s", element.id)
        return True

    def set_property(self, element_id: Optional[str], name: str, value: str) -> Element:
        """Update one property of an existing element."""
        element = self.get(element_id)
        if element is None:
            raise ElementNotFoundError(element_id)
        element_model.set_property(element, name, value)
        LOGGER.debug("Set %s.%s = %r", element.id, name, value)
        return element
