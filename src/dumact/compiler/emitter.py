"""Emission: compile every template of a document into one Python module.

Module layout (functions sorted by component identifier):

    ```python
    # auto-generated by dumact from templates.html; do not edit.
    '''Component construction functions.'''

    class UnknownComponentError(LookupError):
        ...

    def createAuditComponent(dom):
        ...

    def createCrcComponent(dom):
        ...

    COMPONENTS = {'audit': createAuditComponent, 'crc': createCrcComponent}

    def create_component(dom, component_name):
        ...
    ```

The module is kept as an ``ast.Module``: ``CompiledDocument.source`` renders
it with ``ast.unparse`` for writing to disk, ``CompiledDocument.code`` is the
same module compiled for in-process use.

"""

from __future__ import annotations

import ast
import logging
import types
from collections.abc import Iterable
from dataclasses import dataclass

from dumact.compiler.assembler import FunctionAssembler
from dumact.compiler.core import Compiler
from dumact.config import CompilerConfig
from dumact.nodes import CompiledUnit, Template

logger = logging.getLogger(__name__)

MODULE_DOCSTRING = "Component construction functions."


@dataclass(frozen=True, slots=True)
class CompiledDocument:
    """All templates of one source document, compiled.

    Attributes:
        name: Source name (for the header comment and code filename)
        units: Compiled units sorted by component identifier
        module: The generated module as Python AST
        code: ``module`` compiled, ready for ``exec()``
        config: Configuration the document was compiled with
    """

    name: str | None
    units: tuple[CompiledUnit, ...]
    module: ast.Module
    code: types.CodeType
    config: CompilerConfig

    @property
    def names(self) -> tuple[str, ...]:
        """Component identifiers, sorted."""
        return tuple(unit.name for unit in self.units)

    @property
    def source(self) -> str:
        """Generated module source, ending with a newline."""
        header = f"# {self.config.header}"
        if self.name:
            header += f" from {self.name}"
        return f"{header}; do not edit.\n\n{ast.unparse(self.module)}\n"

    def unit(self, name: str) -> CompiledUnit:
        """Compiled unit for a component identifier.

        Raises:
            KeyError: If no template with that identifier was compiled.
        """
        for unit in self.units:
            if unit.name == name:
                return unit
        raise KeyError(name)


class Emitter:
    """Drive a compile pass over a set of templates.

    Example:
        >>> from dumact.parser import discover_templates, parse_document
        >>> templates = discover_templates(parse_document(html))
        >>> document = Emitter().emit(templates, name="templates.html")
        >>> document.names
        ('audit', 'crc', 'snippet')
        >>> Path("components.py").write_text(document.source)
    """

    __slots__ = ("_assembler", "_compiler", "_config")

    def __init__(self, config: CompilerConfig | None = None):
        self._config = config or CompilerConfig()
        self._compiler = Compiler(self._config)
        self._assembler = FunctionAssembler(self._config)

    def emit(self, templates: Iterable[Template], name: str | None = None) -> CompiledDocument:
        """Compile ``templates`` and assemble them into one module."""
        units = []
        for template in templates:
            unit = self._compiler.compile_template(template)
            logger.debug(
                f"Compiled template '{template.name}' to {unit.function_name}() "
                f"({len(unit.statements)} statements)"
            )
            units.append(unit)
        units.sort(key=lambda unit: unit.name)

        body: list[ast.stmt] = [
            ast.Expr(value=ast.Constant(value=MODULE_DOCSTRING)),
            self._assembler.make_error_class(),
        ]
        body.extend(self._assembler.make_component_function(unit) for unit in units)
        body.extend(self._assembler.make_dispatcher(units))

        module = ast.Module(body=body, type_ignores=[])
        ast.fix_missing_locations(module)
        code = compile(module, name or "<components>", "exec")

        logger.debug(f"Emitted {len(units)} components from {name or '<string>'}")
        return CompiledDocument(
            name=name,
            units=tuple(units),
            module=module,
            code=code,
            config=self._config,
        )
