"""In-process access to compiled components.

A ``ComponentLibrary`` executes a ``CompiledDocument``'s module once, in a
namespace of its own, and hands out its construction functions. It is what
``DOM.create_component()`` and the test suite use; code shipped elsewhere
imports the emitted module instead.

Thread-Safety:
The library is immutable after construction. Each ``create()`` call builds a
new fragment through the builder it is given.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from dumact.compiler.assembler import COMPONENTS_NAME
from dumact.exceptions import UnknownComponentError

if TYPE_CHECKING:
    from xml.dom.minidom import DocumentFragment

    from dumact.compiler.emitter import CompiledDocument

ComponentFactory = Callable[[Any], "DocumentFragment"]


class ComponentLibrary:
    """Construction functions of one compiled document, by identifier.

    Example:
            >>> library = ComponentLibrary(env.from_string(html))
            >>> library.names
            ('audit', 'crc')
            >>> fragment = library.create(DOM(), "audit")
    """

    __slots__ = ("_components", "_document", "_namespace")

    def __init__(self, document: CompiledDocument):
        self._document = document
        self._namespace: dict[str, Any] = {"__name__": f"dumact.components.{id(document):x}"}
        exec(document.code, self._namespace)
        self._components: dict[str, ComponentFactory] = dict(self._namespace[COMPONENTS_NAME])

    @property
    def document(self) -> CompiledDocument:
        return self._document

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._components)

    @property
    def dispatcher(self) -> Callable[[Any, str], DocumentFragment]:
        """The generated dispatcher function itself."""
        return self._namespace[self._document.config.dispatcher_name]

    def get(self, name: str) -> ComponentFactory | None:
        return self._components.get(name)

    def create(self, dom: Any, name: str) -> DocumentFragment:
        """Build component ``name`` through ``dom`` and return its fragment.

        Raises:
            UnknownComponentError: If ``name`` was not compiled. Nothing is
                built in that case.
        """
        factory = self._components.get(name)
        if factory is None:
            raise UnknownComponentError(name, available=self._components)
        return factory(dom)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        source = self._document.name or "<string>"
        return f"<ComponentLibrary {source!r} components={len(self)}>"
