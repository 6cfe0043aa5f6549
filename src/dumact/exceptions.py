"""Exceptions for dumact.

Exception Hierarchy:
DumactError (base)
├── SourceNotFoundError       # Loader could not find a source document
├── TemplateDefinitionError   # A <template> cannot become a component
└── UnknownComponentError     # Dispatch on an identifier that was not compiled

Compilation itself never fails: the tree compiler is total over any tree the
HTML parser produces. Errors come from the edges, either while locating and
discovering templates or when a caller asks for a component by name.

Every error carries an ``ErrorCode`` so it can be searched for and matched
on without parsing the message:

    ```
    D-RUN-001: Unknown component 'audti'. Did you mean 'audit'?
    ```

"""

from __future__ import annotations

from collections.abc import Iterable
from difflib import get_close_matches
from enum import Enum

from dumact import terminal


class ErrorCode(Enum):
    """Searchable error codes.

    Format: D-{CATEGORY}-{NUMBER}
    Categories: SRC (source loading), TPL (template discovery), RUN (dispatch)
    """

    SOURCE_NOT_FOUND = "D-SRC-001"

    MISSING_TEMPLATE_ID = "D-TPL-001"
    DUPLICATE_TEMPLATE_ID = "D-TPL-002"
    INVALID_TEMPLATE_ID = "D-TPL-003"
    DROPPED_CONTENT = "D-TPL-004"

    UNKNOWN_COMPONENT = "D-RUN-001"

    @property
    def category(self) -> str:
        """Error category (e.g. 'source', 'template', 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "SRC": "source",
            "TPL": "template",
            "RUN": "runtime",
        }.get(prefix, "unknown")


def did_you_mean(name: str, candidates: Iterable[str]) -> str | None:
    """Closest candidate to ``name``, if one is reasonably close."""
    matches = get_close_matches(name, list(candidates), n=1, cutoff=0.6)
    return matches[0] if matches else None


class DumactError(Exception):
    """Base exception for all dumact errors.

    Attributes:
        message: Error description without code or hint.
        suggestion: Optional actionable hint shown under the message.
        code: ErrorCode identifying the failure.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, *, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_compact(self) -> str:
        """Format the error as a short diagnostic for terminal display.

        Format::

            D-TPL-002: Duplicate template id 'audit' in templates.html
              Hint: Template ids name generated functions and must be unique
        """
        parts = [
            terminal.format_error_header(self.code.value if self.code else None, self.message)
        ]
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class SourceNotFoundError(DumactError):
    """No loader could provide the requested source document.

    Example:
            >>> env.get_document("templtes.html")
        SourceNotFoundError: Source 'templtes.html' not found. Did you mean 'templates.html'?
    """

    code: ErrorCode | None = ErrorCode.SOURCE_NOT_FOUND


class TemplateDefinitionError(DumactError):
    """A ``<template>`` element cannot be turned into a component.

    Raised during discovery for a missing or empty ``id``, an ``id`` used
    twice in one document, or an ``id`` that does not yield a valid Python
    function name. Raised while parsing when the HTML parser drops a start
    tag inside a template (a ``<tr>`` outside a ``<table>``).
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        template: str | None = None,
        source: str | None = None,
        suggestion: str | None = None,
    ):
        self.code = code
        self.template = template
        self.source = source
        if source:
            message = f"{message} in {terminal.location(source)}"
        super().__init__(message, suggestion=suggestion)


class UnknownComponentError(DumactError):
    """A component was requested by an identifier that was never compiled.

    Terminal: the request is not retried and nothing is built.

    Example:
            >>> library.create(dom, "audti")
        UnknownComponentError: Unknown component 'audti'. Did you mean 'audit'?
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_COMPONENT

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = tuple(sorted(available))
        message = f"Unknown component {name!r}"
        close = did_you_mean(name, self.available)
        if close:
            message += f". Did you mean '{terminal.suggestion(close)}'?"
        suggestion = None
        if self.available:
            listed = ", ".join(self.available[:10])
            if len(self.available) > 10:
                listed += f" ... ({len(self.available)} total)"
            suggestion = f"Available components: {listed}"
        super().__init__(message, suggestion=suggestion)
