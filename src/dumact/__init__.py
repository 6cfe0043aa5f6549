"""dumact: compile HTML <template> elements into DOM construction code.

Static markup written as ``<template id="...">`` fragments is compiled ahead
of time into plain Python functions that rebuild the same DOM subtree
through a small builder object, so the runtime needs neither an HTML parser
nor the original markup.

Quickstart:
    >>> from dumact import Environment
    >>> env = Environment()
    >>> document = env.from_string(
    ...     '<template id="badge"><span class="lh-badge">New</span></template>'
    ... )
    >>> print(document.source)
    # auto-generated by dumact; do not edit.
    ...
    def createBadgeComponent(dom):
        v0 = dom.create_element('span', 'lh-badge')
        v0.appendChild(dom.document().createTextNode('New'))
        v1 = dom.document().createDocumentFragment()
        v1.appendChild(v0)
        return v1
    ...

In-process use:
    >>> from dumact import DOM, ComponentLibrary
    >>> library = ComponentLibrary(document)
    >>> fragment = DOM(components=library).create_component("badge")

Architecture:
HTML source → html5lib (minidom tree) → template discovery → Compiler →
FunctionAssembler → Emitter → ``ast.Module`` → source text / code object

No code is produced by string templating: the compiler builds ``ast`` nodes,
literals are ``ast.Constant`` and ``ast.unparse`` takes care of quoting.

"""

from dumact.compiler import (
    CompiledDocument,
    Compiler,
    Emitter,
    FunctionAssembler,
    VariableNamer,
    function_name,
)
from dumact.config import CompilerConfig
from dumact.dom import DOM
from dumact.environment import (
    DictLoader,
    Environment,
    FileSystemLoader,
    FunctionLoader,
    compile_source,
)
from dumact.exceptions import (
    DumactError,
    ErrorCode,
    SourceNotFoundError,
    TemplateDefinitionError,
    UnknownComponentError,
)
from dumact.library import ComponentLibrary
from dumact.nodes import CompiledUnit, Template
from dumact.parser import discover_templates, parse_document
from dumact.utils.whitespace import significant_text
from dumact.validation import assert_equivalent, normalize

__version__ = "0.1.0"

__all__ = [
    "DOM",
    "CompiledDocument",
    "CompiledUnit",
    "Compiler",
    "CompilerConfig",
    "ComponentLibrary",
    "DictLoader",
    "DumactError",
    "Emitter",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "FunctionAssembler",
    "FunctionLoader",
    "SourceNotFoundError",
    "Template",
    "TemplateDefinitionError",
    "UnknownComponentError",
    "VariableNamer",
    "__version__",
    "assert_equivalent",
    "compile_source",
    "discover_templates",
    "function_name",
    "normalize",
    "parse_document",
    "significant_text",
]
