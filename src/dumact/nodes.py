"""Value types passed between discovery, compilation and emission."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import TYPE_CHECKING
from xml.dom import Node

if TYPE_CHECKING:
    from xml.dom.minidom import Element


@dataclass(frozen=True, slots=True)
class Template:
    """A named ``<template>`` element found in a source document.

    The element belongs to the parsed document and is only ever read.
    """

    name: str
    element: Element

    @property
    def content(self) -> tuple[Element, ...]:
        """Top-level element children, in document order.

        Text and comments directly under ``<template>`` are not part of the
        component.
        """
        return tuple(
            child for child in self.element.childNodes if child.nodeType == Node.ELEMENT_NODE
        )


@dataclass(frozen=True, slots=True)
class CompiledUnit:
    """One template compiled to a flat list of construction statements."""

    name: str
    function_name: str
    statements: tuple[ast.stmt, ...]

    @property
    def lines(self) -> tuple[str, ...]:
        """Each statement rendered as Python source."""
        return tuple(ast.unparse(stmt) for stmt in self.statements)
