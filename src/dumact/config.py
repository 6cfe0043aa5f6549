"""Compiler configuration."""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass, field

from dumact.utils.constants import SVG_NAMESPACE_SUFFIX, WHITESPACE_PRESERVING_TAGS

_RESERVED_NAME = re.compile(r"v\d+|factory|component_name|COMPONENTS|UnknownComponentError")


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Options shared by every stage of a compile pass.

    Attributes:
        preserve_whitespace_tags: Parents whose text children keep their
            whitespace runs instead of collapsing them to one space.
        namespace_suffix: Elements whose namespace URI ends with this suffix
            are created with ``create_element_ns()``.
        builder_name: Parameter name of every generated function.
        dispatcher_name: Name of the generated by-identifier dispatcher.
        strip_interior_whitespace: Also drop whitespace-only text between
            two sibling nodes. Off by default: only the first and last
            child positions are trimmed.
        header: First comment line of the emitted module.

    Example:
        >>> config = CompilerConfig(preserve_whitespace_tags=frozenset({"pre", "code"}))
        >>> "code" in config.preserve_whitespace_tags
        True
    """

    preserve_whitespace_tags: frozenset[str] = field(
        default_factory=lambda: WHITESPACE_PRESERVING_TAGS
    )
    namespace_suffix: str = SVG_NAMESPACE_SUFFIX
    builder_name: str = "dom"
    dispatcher_name: str = "create_component"
    strip_interior_whitespace: bool = False
    header: str = "auto-generated by dumact"

    def __post_init__(self) -> None:
        for attr in ("builder_name", "dispatcher_name"):
            value = getattr(self, attr)
            if not value.isidentifier() or keyword.iskeyword(value):
                raise ValueError(f"{attr} must be a Python identifier, got {value!r}")
            # Generated code binds v0, v1, ... and its own dispatcher locals.
            if _RESERVED_NAME.fullmatch(value):
                raise ValueError(f"{attr} {value!r} clashes with a generated name")
        # Accept any iterable of tag names; compare lower-cased.
        tags = frozenset(tag.lower() for tag in self.preserve_whitespace_tags)
        object.__setattr__(self, "preserve_whitespace_tags", tags)
