"""Template compiler.

Pipeline for one source document:

    templates → Compiler (per template) → FunctionAssembler → Emitter → module

- ``Compiler``: walks one template's element tree, emits construction statements
- ``VariableNamer``: binds ``v0, v1, ...`` to nodes the statements reference
- ``FunctionAssembler``: wraps units into functions, builds the dispatcher
- ``Emitter``: sorts units by identifier and produces the final module
"""

from dumact.compiler.assembler import FunctionAssembler, function_name
from dumact.compiler.core import Compiler
from dumact.compiler.emitter import CompiledDocument, Emitter
from dumact.compiler.naming import VariableNamer

__all__ = [
    "CompiledDocument",
    "Compiler",
    "Emitter",
    "FunctionAssembler",
    "VariableNamer",
    "function_name",
]
