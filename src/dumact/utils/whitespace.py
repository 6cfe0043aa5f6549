"""Text significance rules.

Decides whether a text node carries meaning or is only the formatting
whitespace that sits between tags in hand-written markup, and normalizes
the text that does carry meaning.

The same rules serve two callers:

- the tree compiler, which decides what text ends up in generated code
- ``dumact.validation``, which compares a generated tree against its source
  with formatting differences ignored

Example:
    >>> collapse_whitespace("Total\\n    size")
    'Total size'
    >>> is_whitespace_only("\\n   ")
    True

"""

from __future__ import annotations

import re
from collections.abc import Set
from typing import TYPE_CHECKING
from xml.dom import Node

from dumact.utils.constants import WHITESPACE_PRESERVING_TAGS

if TYPE_CHECKING:
    from xml.dom.minidom import Text

_WHITESPACE_RUN = re.compile(r"\s+")


def is_whitespace_only(text: str) -> bool:
    """True when ``text`` is empty after trimming leading/trailing whitespace."""
    return not text.strip()


def collapse_whitespace(text: str) -> str:
    """Replace every maximal run of whitespace with a single ASCII space."""
    return _WHITESPACE_RUN.sub(" ", text)


def preserves_whitespace(
    node: Node | None,
    preserve_tags: Set[str] = WHITESPACE_PRESERVING_TAGS,
) -> bool:
    """True when text directly inside ``node`` keeps its whitespace runs.

    Tag names are compared lower-cased, so ``<PRE>`` and ``<pre>`` behave the
    same. Anything that is not an element (a fragment, a document) never
    preserves whitespace.
    """
    if node is None or node.nodeType != Node.ELEMENT_NODE:
        return False
    return node.localName.lower() in preserve_tags


def normalize_text(
    text: str,
    parent: Node | None,
    preserve_tags: Set[str] = WHITESPACE_PRESERVING_TAGS,
) -> str:
    """Collapse whitespace runs in ``text`` unless ``parent`` preserves them."""
    if preserves_whitespace(parent, preserve_tags):
        return text
    return collapse_whitespace(text)


def significant_text(
    node: Text,
    preserve_tags: Set[str] = WHITESPACE_PRESERVING_TAGS,
) -> str | None:
    """Return the meaningful content of a text node, or None.

    Whitespace-only text is insignificant wherever it appears. Significant
    text is returned verbatim inside whitespace-preserving parents and with
    its whitespace runs collapsed everywhere else.
    """
    text = node.data
    if is_whitespace_only(text):
        return None
    return normalize_text(text, node.parentNode, preserve_tags)
