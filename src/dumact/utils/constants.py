"""Shared constants for dumact."""

from __future__ import annotations

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Namespace URIs ending with this suffix are emitted with create_element_ns().
SVG_NAMESPACE_SUFFIX = "/svg"

# Text children of these elements keep their whitespace runs verbatim.
WHITESPACE_PRESERVING_TAGS: frozenset[str] = frozenset({"pre", "style"})
