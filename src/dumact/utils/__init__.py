"""Helpers shared by the compiler, validation and the reference builder."""

from dumact.utils.nodes import class_list, element_namespace, iter_attributes
from dumact.utils.whitespace import (
    collapse_whitespace,
    is_whitespace_only,
    normalize_text,
    preserves_whitespace,
    significant_text,
)

__all__ = [
    "class_list",
    "collapse_whitespace",
    "element_namespace",
    "is_whitespace_only",
    "iter_attributes",
    "normalize_text",
    "preserves_whitespace",
    "significant_text",
]
