"""dumact Compiler Core: template element trees to construction statements.

The Compiler walks the element tree of one ``<template>`` and emits the
Python statements that rebuild it through a builder object (``dom``):

    ```html
    <template id="chevron">
      <div class="lh-chevron  open" title="Expand">
        <svg viewBox="0 0 100 100"><g class="lh-chevron__lines"></g></svg>
        Show <b>more</b>
      </div>
    </template>
    ```

compiles to

    ```python
    v0 = dom.create_element('div', 'lh-chevron open')
    v0.setAttribute('title', 'Expand')
    v1 = dom.create_element_ns('http://www.w3.org/2000/svg', 'svg')
    v1.setAttribute('viewBox', '0 0 100 100')
    v2 = dom.create_element_ns('http://www.w3.org/2000/svg', 'g', 'lh-chevron__lines')
    v1.appendChild(v2)
    v0.appendChild(v1)
    v0.appendChild(dom.document().createTextNode(' Show '))
    v3 = dom.create_element('b')
    v3.appendChild(dom.document().createTextNode('more'))
    v0.appendChild(v3)
    v4 = dom.document().createDocumentFragment()
    v4.appendChild(v0)
    return v4
    ```

Design Principles:
1. **AST, not strings**: statements are ``ast.stmt`` nodes; literals are
   ``ast.Constant`` so quoting and escaping are ``ast.unparse``'s job
2. **Definition before use**: a node's creation statement is emitted before
   any statement that appends to it or appends it somewhere
3. **Deterministic**: attributes in declaration order, children in document
   order, variable names in first-encounter order

Whitespace:
Formatting whitespace between tags is not content. The first and last
children of an element are dropped when they are whitespace-only text;
comments are dropped everywhere. Other text has its whitespace runs
collapsed to one space, except inside ``<pre>`` and ``<style>``. Interior
whitespace-only text therefore survives as a single space unless
``CompilerConfig.strip_interior_whitespace`` is set.

"""

from __future__ import annotations

import ast
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING
from xml.dom import Node

from dumact.compiler.assembler import function_name
from dumact.compiler.naming import VariableNamer
from dumact.config import CompilerConfig
from dumact.nodes import CompiledUnit
from dumact.utils.nodes import class_list, element_namespace, iter_attributes
from dumact.utils.whitespace import is_whitespace_only, normalize_text, significant_text

if TYPE_CHECKING:
    from xml.dom.minidom import Element, Text

    from dumact.nodes import Template


def _is_blank_text(node: Node) -> bool:
    return node.nodeType == Node.TEXT_NODE and is_whitespace_only(node.data)


class Compiler:
    """Compile one template at a time into a ``CompiledUnit``.

    A Compiler can be reused; every ``compile_template()`` call starts a
    fresh pass with its own ``VariableNamer`` and statement list, so names
    always start at ``v0``.

    Attributes:
        _config: CompilerConfig with whitespace and naming options
        _namer: VariableNamer of the current pass
        _body: Statements emitted so far in the current pass

    Example:
        >>> from dumact.parser import discover_templates, parse_document
        >>> [template] = discover_templates(parse_document(
        ...     '<template id="badge"><span class="lh-badge">New</span></template>'
        ... ))
        >>> Compiler().compile_template(template).lines
        ("v0 = dom.create_element('span', 'lh-badge')",
         "v0.appendChild(dom.document().createTextNode('New'))",
         'v1 = dom.document().createDocumentFragment()',
         'v1.appendChild(v0)',
         'return v1')

    """

    __slots__ = ("_body", "_config", "_namer")

    def __init__(self, config: CompilerConfig | None = None):
        self._config = config or CompilerConfig()
        self._namer = VariableNamer()
        self._body: list[ast.stmt] = []

    def compile_template(self, template: Template) -> CompiledUnit:
        """Compile a template's content into construction statements.

        Top-level elements are compiled in document order; the fragment that
        collects them is created last and returned.
        """
        self._namer = VariableNamer()
        self._body = []

        top_level = [self._compile_element(element) for element in template.content]

        # The <template> element itself stands for the returned fragment.
        fragment = self._namer.name_for(template.element)
        self._body.append(
            self._assign(fragment, self._document_call("createDocumentFragment", []))
        )
        for name in top_level:
            self._body.append(self._append(fragment, self._load(name)))
        self._body.append(ast.Return(value=self._load(fragment)))
        # ast.unparse() needs line numbers on every statement.
        ast.fix_missing_locations(ast.Module(body=self._body, type_ignores=[]))

        return CompiledUnit(
            name=template.name,
            function_name=function_name(template.name),
            statements=tuple(self._body),
        )

    def _compile_element(self, element: Element) -> str:
        """Emit statements building ``element`` and its subtree.

        Returns the variable bound to the element.
        """
        namespace = element_namespace(element, self._config.namespace_suffix)
        class_name = class_list(element.getAttribute("class"))

        factory = "create_element"
        args = [element.localName]
        if class_name:
            args.append(class_name)
        if namespace:
            factory = "create_element_ns"
            args.insert(0, namespace)

        var = self._namer.name_for(element)
        self._body.append(
            self._assign(var, self._builder_call(factory, [ast.Constant(value=a) for a in args]))
        )

        for name, value in iter_attributes(element):
            if name == "class":
                continue
            self._body.append(
                ast.Expr(
                    value=self._method_call(
                        var, "setAttribute", [ast.Constant(value=name), ast.Constant(value=value)]
                    )
                )
            )

        for child in self._content_children(element):
            if child.nodeType == Node.ELEMENT_NODE:
                child_var = self._compile_element(child)
                self._body.append(self._append(var, self._load(child_var)))
            elif child.nodeType == Node.TEXT_NODE:
                text = self._text_content(child)
                if text is None:
                    continue
                self._body.append(
                    self._append(
                        var,
                        self._document_call("createTextNode", [ast.Constant(value=text)]),
                    )
                )

        return var

    def _content_children(self, element: Element) -> Iterator[Node]:
        """Children worth compiling: boundary whitespace and comments removed.

        Only the first and the last positions are trimmed. Comments are never
        content, wherever they sit.
        """
        children: Sequence[Node] = element.childNodes
        lower, upper = 0, len(children)
        if children and _is_blank_text(children[0]):
            lower += 1
        if len(children) > 1 and _is_blank_text(children[-1]):
            upper -= 1

        for child in children[lower:upper]:
            if child.nodeType == Node.COMMENT_NODE:
                continue
            yield child

    def _text_content(self, node: Text) -> str | None:
        """Text to emit for a text child, or None to emit nothing."""
        preserve = self._config.preserve_whitespace_tags
        if self._config.strip_interior_whitespace:
            return significant_text(node, preserve)
        if not node.data:
            return None
        return normalize_text(node.data, node.parentNode, preserve)

    # ─────────────────────────────────────────────────────────────────────
    # Statement builders
    # ─────────────────────────────────────────────────────────────────────

    @staticmethod
    def _load(name: str) -> ast.Name:
        return ast.Name(id=name, ctx=ast.Load())

    def _assign(self, name: str, value: ast.expr) -> ast.Assign:
        return ast.Assign(targets=[ast.Name(id=name, ctx=ast.Store())], value=value)

    def _method_call(self, var: str | ast.expr, method: str, args: list[ast.expr]) -> ast.Call:
        target = self._load(var) if isinstance(var, str) else var
        return ast.Call(
            func=ast.Attribute(value=target, attr=method, ctx=ast.Load()),
            args=args,
            keywords=[],
        )

    def _builder_call(self, method: str, args: list[ast.expr]) -> ast.Call:
        """``dom.<method>(*args)``"""
        return self._method_call(self._config.builder_name, method, args)

    def _document_call(self, method: str, args: list[ast.expr]) -> ast.Call:
        """``dom.document().<method>(*args)``"""
        return self._method_call(self._builder_call("document", []), method, args)

    def _append(self, parent: str, child: ast.expr) -> ast.Expr:
        """``<parent>.appendChild(<child>)``"""
        return ast.Expr(value=self._method_call(parent, "appendChild", [child]))
