"""Read-only accessors over DOM elements."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from dumact.utils.constants import SVG_NAMESPACE_SUFFIX

if TYPE_CHECKING:
    from xml.dom.minidom import Element


def element_namespace(element: Element, suffix: str = SVG_NAMESPACE_SUFFIX) -> str:
    """Namespace URI the element must be created in, or '' for plain HTML."""
    namespace = element.namespaceURI
    if namespace and namespace.endswith(suffix):
        return namespace
    return ""


def class_list(value: str) -> str:
    """Normalize a class attribute value the way a DOM class list does.

    Tokens are split on whitespace and re-joined with single spaces;
    repeated tokens keep their first position.

        >>> class_list("  lh-audit  lh-audit--pass lh-audit\\n")
        'lh-audit lh-audit--pass'
    """
    return " ".join(dict.fromkeys(value.split()))


def iter_attributes(element: Element) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` pairs in declaration order."""
    attributes = element.attributes
    for index in range(attributes.length):
        attr = attributes.item(index)
        yield attr.name, attr.value
