"""Reference builder over ``xml.dom.minidom``.

Generated construction functions only call the builder contract:

- ``create_element(tag, class_name=None)``
- ``create_element_ns(namespace_uri, tag, class_name=None)``
- ``document()``, whose ``createTextNode()`` / ``createDocumentFragment()``
  are used directly

plus ``setAttribute()`` / ``appendChild()`` on the nodes it returns. Any
object honoring that contract can build components; ``DOM`` is the one
dumact ships, backed by the standard library DOM.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.dom import minidom

from dumact.exceptions import UnknownComponentError
from dumact.utils.nodes import class_list

if TYPE_CHECKING:
    from xml.dom.minidom import Document, DocumentFragment, Element

    from dumact.library import ComponentLibrary


class DOM:
    """Build DOM nodes into one minidom document.

    Attributes:
        _document: Owner document of every node created
        _components: Optional ComponentLibrary behind ``create_component()``

    Example:
            >>> dom = DOM()
            >>> el = dom.create_element("div", " lh-audit  lh-audit--pass\\n")
            >>> el.getAttribute("class")
            'lh-audit lh-audit--pass'
    """

    __slots__ = ("_components", "_document")

    def __init__(
        self,
        document: Document | None = None,
        components: ComponentLibrary | None = None,
    ):
        if document is None:
            document = minidom.getDOMImplementation().createDocument(None, None, None)
        self._document = document
        self._components = components

    def document(self) -> Document:
        return self._document

    def create_element(self, tag: str, class_name: str | None = None) -> Element:
        element = self._document.createElement(tag)
        self._set_class(element, class_name)
        return element

    def create_element_ns(
        self,
        namespace_uri: str,
        tag: str,
        class_name: str | None = None,
    ) -> Element:
        element = self._document.createElementNS(namespace_uri, tag)
        self._set_class(element, class_name)
        return element

    def create_fragment(self) -> DocumentFragment:
        return self._document.createDocumentFragment()

    def create_component(self, component_name: str) -> DocumentFragment:
        """Build a compiled component by identifier.

        Raises:
            UnknownComponentError: If no library is attached or it has no
                component with that identifier.
        """
        if self._components is None:
            raise UnknownComponentError(component_name)
        return self._components.create(self, component_name)

    @staticmethod
    def _set_class(element: Element, class_name: str | None) -> None:
        if class_name:
            normalized = class_list(class_name)
            if normalized:
                element.setAttribute("class", normalized)
