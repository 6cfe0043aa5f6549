"""Variable names for nodes referenced by generated code."""

from __future__ import annotations

from typing import Any


class VariableNamer:
    """Assign ``v0, v1, v2, ...`` to nodes in first-request order.

    Names depend only on the order of ``name_for()`` calls, never on node
    content, so two identical templates compiled separately both start at
    ``v0``. One namer serves exactly one compile pass.

    Nodes are keyed by identity; the namer holds a reference to every bound
    node for as long as it lives.

    Example:
        >>> namer = VariableNamer()
        >>> a, b = object(), object()
        >>> namer.name_for(a), namer.name_for(b), namer.name_for(a)
        ('v0', 'v1', 'v0')
    """

    __slots__ = ("_names", "_prefix")

    def __init__(self, prefix: str = "v"):
        self._prefix = prefix
        self._names: dict[int, tuple[Any, str]] = {}

    def name_for(self, node: Any) -> str:
        """Return the node's name, binding the next free one on first use."""
        bound = self._names.get(id(node))
        if bound is not None:
            return bound[1]
        name = f"{self._prefix}{len(self._names)}"
        self._names[id(node)] = (node, name)
        return name
