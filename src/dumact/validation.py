"""Structural comparison of a source template and a built component.

Generated code is not a byte-for-byte copy of the source: formatting
whitespace is gone, class lists are normalized and text runs are collapsed.
``normalize()`` reduces both sides to the same canonical form so that only
real differences remain:

- comments and insignificant (whitespace-only) text are dropped
- significant text is normalized by ``significant_text()``; adjacent text
  pieces are merged
- attributes are sorted by name, the class attribute is normalized like a
  class list and dropped when empty
- an element's namespace counts only when the compiler would emit it

Canonical element form::

    (namespace, tag, ((name, value), ...), (child, ...))

with text children as plain strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.dom import Node

from dumact.config import CompilerConfig
from dumact.utils.nodes import class_list, element_namespace, iter_attributes
from dumact.utils.whitespace import significant_text

if TYPE_CHECKING:
    from xml.dom.minidom import DocumentFragment, Element

    from dumact.nodes import Template

NormalizedNode = tuple[Any, ...] | str


def normalize_element(element: Element, config: CompilerConfig | None = None) -> tuple:
    config = config or CompilerConfig()
    attributes = []
    for name, value in iter_attributes(element):
        if name == "class":
            value = class_list(value)
            if not value:
                continue
        attributes.append((name, value))
    return (
        element_namespace(element, config.namespace_suffix),
        element.localName,
        tuple(sorted(attributes)),
        normalize_children(element, config),
    )


def normalize_children(node: Node, config: CompilerConfig | None = None) -> tuple:
    """Canonical children of an element or fragment."""
    config = config or CompilerConfig()
    children: list[NormalizedNode] = []
    for child in node.childNodes:
        if child.nodeType == Node.TEXT_NODE:
            text = significant_text(child, config.preserve_whitespace_tags)
            if text is None:
                continue
            if children and isinstance(children[-1], str):
                children[-1] += text
            else:
                children.append(text)
        elif child.nodeType == Node.ELEMENT_NODE:
            children.append(normalize_element(child, config))
    return tuple(children)


def normalize(node: Template | Node, config: CompilerConfig | None = None) -> tuple:
    """Canonical form of a template's content, a fragment, or an element.

    Templates and fragments normalize to the tuple of their children;
    elements normalize to their own canonical form.
    """
    config = config or CompilerConfig()
    if isinstance(node, Node):
        if node.nodeType == Node.ELEMENT_NODE:
            return normalize_element(node, config)
        return normalize_children(node, config)
    return tuple(normalize_element(element, config) for element in node.content)


def diff_trees(expected: tuple, actual: tuple, path: str = "") -> list[str]:
    """Describe every difference between two normalized child tuples.

    Returns an empty list when the trees are equivalent.
    """
    problems: list[str] = []
    if len(expected) != len(actual):
        problems.append(
            f"{path or '/'}: expected {len(expected)} children, got {len(actual)}"
        )

    for index, (want, got) in enumerate(zip(expected, actual)):
        here = f"{path}/{index}"
        if isinstance(want, str) or isinstance(got, str):
            if want != got:
                problems.append(f"{here}: expected {want!r}, got {got!r}")
            continue

        want_ns, want_tag, want_attrs, want_children = want
        got_ns, got_tag, got_attrs, got_children = got
        here = f"{here}<{want_tag}>"
        if (want_ns, want_tag) != (got_ns, got_tag):
            problems.append(
                f"{here}: expected element {want_ns}:{want_tag}, got {got_ns}:{got_tag}"
            )
            continue
        if want_attrs != got_attrs:
            problems.append(f"{here}: attributes {dict(want_attrs)} != {dict(got_attrs)}")
        problems.extend(diff_trees(want_children, got_children, here))
    return problems


def assert_equivalent(
    template: Template,
    fragment: DocumentFragment,
    config: CompilerConfig | None = None,
) -> None:
    """Assert a built fragment matches its source template.

    Raises:
        AssertionError: Listing every difference found.
    """
    problems = diff_trees(normalize(template, config), normalize(fragment, config))
    if problems:
        details = "\n  ".join(problems)
        raise AssertionError(f"Component {template.name!r} differs from its source:\n  {details}")
