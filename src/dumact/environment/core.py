"""dumact Environment: configuration, loading and caching.

The Environment is the entry point for compiling source documents:

    >>> from dumact import Environment, FileSystemLoader
    >>> env = Environment(loader=FileSystemLoader("report/assets/"))
    >>> document = env.get_document("templates.html")
    >>> Path("report/renderer/components.py").write_text(document.source)

Compiled documents are cached per source name. Compilation is deterministic,
so a cache hit is indistinguishable from a recompile.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from dumact.compiler.emitter import CompiledDocument, Emitter
from dumact.config import CompilerConfig
from dumact.environment.loaders import Loader
from dumact.exceptions import SourceNotFoundError
from dumact.library import ComponentLibrary
from dumact.parser import discover_templates, parse_document

logger = logging.getLogger(__name__)


class Environment:
    """Holds a CompilerConfig and a loader; compiles source documents.

    Args:
        loader: Where ``get_document()`` reads sources from
        config: Base configuration (defaults to ``CompilerConfig()``)
        **overrides: Replace individual config fields, e.g.
            ``Environment(strip_interior_whitespace=True)``

    Example:
            >>> env = Environment()
            >>> document = env.from_string(
            ...     '<template id="badge"><span class="lh-badge">New</span></template>'
            ... )
            >>> document.unit("badge").function_name
            'createBadgeComponent'
    """

    __slots__ = ("_cache", "config", "loader")

    def __init__(
        self,
        loader: Loader | None = None,
        config: CompilerConfig | None = None,
        **overrides: Any,
    ):
        config = config or CompilerConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config
        self.loader = loader
        self._cache: dict[str, CompiledDocument] = {}

    def from_string(self, source: str, name: str | None = None) -> CompiledDocument:
        """Compile every template in an HTML string. Not cached."""
        document = parse_document(source, source_name=name)
        templates = discover_templates(document, source_name=name)
        return Emitter(self.config).emit(templates, name=name)

    def get_document(self, name: str) -> CompiledDocument:
        """Load a source through the loader and compile it (cached by name).

        Raises:
            SourceNotFoundError: If there is no loader or it cannot find ``name``
            TemplateDefinitionError: If a template cannot become a component
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        if self.loader is None:
            raise SourceNotFoundError(
                f"Source '{name}' cannot be loaded: no loader configured",
                suggestion="Pass loader=FileSystemLoader(...) or use from_string()",
            )
        source, filename = self.loader.get_source(name)
        logger.debug(f"Loaded {name} from {filename or '<memory>'}")

        document = self.from_string(source, name=filename or name)
        self._cache[name] = document
        return document

    def load_components(self, name: str) -> ComponentLibrary:
        """Compile a source through the loader and execute it in-process."""
        return ComponentLibrary(self.get_document(name))

    def clear_cache(self) -> None:
        self._cache.clear()


def compile_source(
    source: str,
    name: str | None = None,
    config: CompilerConfig | None = None,
) -> CompiledDocument:
    """Compile every template in ``source`` with a one-off Environment."""
    return Environment(config=config).from_string(source, name=name)
