"""Function assembly: wrap compiled units into callables and a dispatcher.

Each compiled unit becomes one module-level function taking the builder as
its only argument. The dispatcher is a static mapping from component
identifier to function, built once, plus a lookup function over it:

    ```python
    COMPONENTS = {'audit': createAuditComponent, 'crc': createCrcComponent}

    def create_component(dom, component_name):
        factory = COMPONENTS.get(component_name)
        if factory is None:
            raise UnknownComponentError(f'unknown component: {component_name!r}')
        return factory(dom)
    ```

``UnknownComponentError`` is declared inside the generated module (as a
``LookupError``) so that the output runs without dumact installed.

"""

from __future__ import annotations

import ast
from collections.abc import Sequence
from typing import TYPE_CHECKING

from dumact.config import CompilerConfig

if TYPE_CHECKING:
    from dumact.nodes import CompiledUnit

# Names the generated module always defines.
COMPONENTS_NAME = "COMPONENTS"
ERROR_CLASS_NAME = "UnknownComponentError"

_COMPONENT_NAME_ARG = "component_name"
_FACTORY_VAR = "factory"


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def function_name(component_name: str) -> str:
    """Generated function name for a component identifier.

        >>> function_name("crcChain")
        'createCrcChainComponent'
    """
    return f"create{upper_first(component_name)}Component"


def _arguments(*names: str) -> ast.arguments:
    return ast.arguments(
        posonlyargs=[],
        args=[ast.arg(arg=name) for name in names],
        vararg=None,
        kwonlyargs=[],
        kw_defaults=[],
        kwarg=None,
        defaults=[],
    )


def _function(name: str, params: Sequence[str], body: list[ast.stmt]) -> ast.FunctionDef:
    return ast.FunctionDef(
        name=name,
        args=_arguments(*params),
        body=body,
        decorator_list=[],
        returns=None,
        type_params=[],
    )


class FunctionAssembler:
    """Build the function and dispatcher definitions of the output module."""

    __slots__ = ("_config",)

    def __init__(self, config: CompilerConfig | None = None):
        self._config = config or CompilerConfig()

    def make_component_function(self, unit: CompiledUnit) -> ast.FunctionDef:
        """``def create<Name>Component(dom): <statements>``"""
        return _function(unit.function_name, [self._config.builder_name], list(unit.statements))

    def make_error_class(self) -> ast.ClassDef:
        """``class UnknownComponentError(LookupError)`` for the dispatcher."""
        return ast.ClassDef(
            name=ERROR_CLASS_NAME,
            bases=[ast.Name(id="LookupError", ctx=ast.Load())],
            keywords=[],
            body=[
                ast.Expr(
                    value=ast.Constant(
                        value=f"Raised by {self._config.dispatcher_name}() "
                        "for an identifier that was not compiled."
                    )
                )
            ],
            decorator_list=[],
            type_params=[],
        )

    def make_dispatcher(self, units: Sequence[CompiledUnit]) -> list[ast.stmt]:
        """Mapping of identifier → function, and the lookup function over it."""
        builder = self._config.builder_name
        mapping = ast.Assign(
            targets=[ast.Name(id=COMPONENTS_NAME, ctx=ast.Store())],
            value=ast.Dict(
                keys=[ast.Constant(value=unit.name) for unit in units],
                values=[ast.Name(id=unit.function_name, ctx=ast.Load()) for unit in units],
            ),
        )

        # factory = COMPONENTS.get(component_name)
        lookup = ast.Assign(
            targets=[ast.Name(id=_FACTORY_VAR, ctx=ast.Store())],
            value=ast.Call(
                func=ast.Attribute(
                    value=ast.Name(id=COMPONENTS_NAME, ctx=ast.Load()),
                    attr="get",
                    ctx=ast.Load(),
                ),
                args=[ast.Name(id=_COMPONENT_NAME_ARG, ctx=ast.Load())],
                keywords=[],
            ),
        )

        # if factory is None: raise UnknownComponentError(f'unknown component: {component_name!r}')
        missing = ast.If(
            test=ast.Compare(
                left=ast.Name(id=_FACTORY_VAR, ctx=ast.Load()),
                ops=[ast.Is()],
                comparators=[ast.Constant(value=None)],
            ),
            body=[
                ast.Raise(
                    exc=ast.Call(
                        func=ast.Name(id=ERROR_CLASS_NAME, ctx=ast.Load()),
                        args=[
                            ast.JoinedStr(
                                values=[
                                    ast.Constant(value="unknown component: "),
                                    ast.FormattedValue(
                                        value=ast.Name(id=_COMPONENT_NAME_ARG, ctx=ast.Load()),
                                        conversion=ord("r"),
                                        format_spec=None,
                                    ),
                                ]
                            )
                        ],
                        keywords=[],
                    ),
                    cause=None,
                )
            ],
            orelse=[],
        )

        # return factory(dom)
        dispatch = ast.Return(
            value=ast.Call(
                func=ast.Name(id=_FACTORY_VAR, ctx=ast.Load()),
                args=[ast.Name(id=builder, ctx=ast.Load())],
                keywords=[],
            )
        )

        dispatcher = _function(
            self._config.dispatcher_name,
            [builder, _COMPONENT_NAME_ARG],
            [lookup, missing, dispatch],
        )
        return [mapping, dispatcher]
