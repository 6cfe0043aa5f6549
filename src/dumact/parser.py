"""Source documents → templates.

Parsing is html5lib's job; its ``dom`` tree builder produces an
``xml.dom.minidom`` document whose elements carry namespace URIs (XHTML for
ordinary markup, SVG inside ``<svg>``), which is what the compiler needs.
This module only finds the ``<template>`` elements in that tree and checks
that each one can become a component.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from xml.dom import Node

import html5lib

from dumact.compiler.assembler import function_name
from dumact.exceptions import ErrorCode, TemplateDefinitionError
from dumact.nodes import Template
from dumact.utils.constants import XHTML_NAMESPACE

if TYPE_CHECKING:
    from xml.dom.minidom import Document, Element

logger = logging.getLogger(__name__)

_TABLE_PARTS = frozenset({"caption", "col", "colgroup", "tbody", "td", "tfoot", "th", "thead", "tr"})


class _TemplateParser(html5lib.HTMLParser):
    """HTMLParser that records start tags it ignored inside a ``<template>``.

    html5lib treats template content as ordinary body content, so table
    parts (``<tr>``, ``<td>``, ...) outside a ``<table>`` are discarded
    with only a parse error to show for it. Each such error raised while a
    template is open is kept as ``(template id, tag name)``.
    """

    def __init__(self) -> None:
        super().__init__(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        self.ignored_in_templates: list[tuple[str, str]] = []

    def parseError(self, errorcode="XXX-undefined-error", datavars=None):
        super().parseError(errorcode, datavars)
        if errorcode != "unexpected-start-tag-ignored":
            return
        for node in reversed(self.tree.openElements):
            if node.name == "template" and node.namespace == XHTML_NAMESPACE:
                tag = (datavars or {}).get("name", "?")
                self.ignored_in_templates.append((node.element.getAttribute("id"), tag))
                break


def parse_document(source: str, source_name: str | None = None) -> Document:
    """Parse HTML source into a minidom document.

    The dom tree builder adds one text node per tokenizer run (whitespace,
    characters and each character reference separately); the document is
    normalized so that every run of text is a single node, as in a browser.

    Raises:
        TemplateDefinitionError: If the parser dropped a start tag inside a
            ``<template>``, which would silently lose part of a component.
    """
    parser = _TemplateParser()
    document = parser.parse(source)
    if parser.errors:
        logger.debug(f"html5lib reported {len(parser.errors)} parse errors (recovered)")
    if parser.ignored_in_templates:
        name, tag = parser.ignored_in_templates[0]
        raise TemplateDefinitionError(
            f"<{tag}> in template {name!r} is dropped by the HTML parser",
            code=ErrorCode.DROPPED_CONTENT,
            template=name or None,
            source=source_name,
            suggestion=(
                "Wrap table rows and cells in the <table> they belong to"
                if tag in _TABLE_PARTS
                else f"Remove the <{tag}> element"
            ),
        )
    document.normalize()
    return document


def _inside_template(element: Element) -> bool:
    parent = element.parentNode
    while parent is not None:
        if parent.nodeType == Node.ELEMENT_NODE and parent.localName == "template":
            return True
        parent = parent.parentNode
    return False


def discover_templates(document: Document, source_name: str | None = None) -> list[Template]:
    """Every top-level ``<template>`` element of ``document``, in document order.

    Templates nested in another template are not components of their own;
    they are compiled as part of the enclosing template.

    Args:
        document: Parsed source document
        source_name: Name used in error messages

    Raises:
        TemplateDefinitionError: If a template has no ``id``, repeats an
            ``id`` already seen, or has an ``id`` that cannot name a Python
            function or names the same function as an earlier one.
    """
    templates: list[Template] = []
    seen: set[str] = set()
    functions: dict[str, str] = {}

    for element in document.getElementsByTagName("template"):
        if _inside_template(element):
            continue
        name = element.getAttribute("id")
        if not name:
            raise TemplateDefinitionError(
                "<template> element without an id",
                code=ErrorCode.MISSING_TEMPLATE_ID,
                source=source_name,
                suggestion="Add an id attribute; it names the generated component",
            )
        if name in seen:
            raise TemplateDefinitionError(
                f"Duplicate template id {name!r}",
                code=ErrorCode.DUPLICATE_TEMPLATE_ID,
                template=name,
                source=source_name,
                suggestion="Template ids name generated functions and must be unique",
            )
        func = function_name(name)
        if not func.isidentifier():
            raise TemplateDefinitionError(
                f"Template id {name!r} does not form a valid function name ({func!r})",
                code=ErrorCode.INVALID_TEMPLATE_ID,
                template=name,
                source=source_name,
                suggestion="Use letters, digits and underscores only, e.g. camelCase ids",
            )
        # 'audit' and 'Audit' both become createAuditComponent.
        if func in functions:
            raise TemplateDefinitionError(
                f"Template ids {functions[func]!r} and {name!r} both compile to {func}()",
                code=ErrorCode.DUPLICATE_TEMPLATE_ID,
                template=name,
                source=source_name,
                suggestion="Rename one of them",
            )
        seen.add(name)
        functions[func] = name
        templates.append(Template(name=name, element=element))

    logger.debug(f"Discovered {len(templates)} templates in {source_name or '<string>'}")
    return templates
