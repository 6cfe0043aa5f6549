"""Tests for module emission: function assembly, dispatcher and source text."""

import ast

import pytest

from dumact import DOM, CompilerConfig, Emitter, Environment, FunctionAssembler
from dumact.compiler.assembler import COMPONENTS_NAME, ERROR_CLASS_NAME
from dumact.nodes import CompiledUnit


def _exec(source: str) -> dict:
    namespace: dict = {}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


class TestDocument:
    """CompiledDocument contents."""

    def test_units_sorted_by_identifier(self, report_document):
        assert report_document.names == ("audit", "chevron", "crc", "snippet")

    def test_sorting_is_by_code_point(self, env):
        document = env.from_string(
            '<template id="b2"></template><template id="B1"></template>'
            '<template id="a"></template>'
        )
        assert document.names == ("B1", "a", "b2")

    def test_unit_lookup(self, report_document):
        unit = report_document.unit("crc")
        assert unit.function_name == "createCrcComponent"
        with pytest.raises(KeyError):
            report_document.unit("missing")

    def test_empty_document(self, env):
        document = env.from_string("<p>no templates here</p>")
        assert document.names == ()
        namespace = _exec(document.source)
        assert namespace[COMPONENTS_NAME] == {}

    def test_identical_sources_emit_identical_modules(self, env, report_source):
        first = env.from_string(report_source, name="templates.html")
        second = env.from_string(report_source, name="templates.html")
        assert first.source == second.source


class TestSource:
    """Rendered module source."""

    def test_header_names_the_source(self, report_document):
        first_line = report_document.source.splitlines()[0]
        assert first_line == "# auto-generated by dumact from templates.html; do not edit."

    def test_header_without_name(self, env):
        document = env.from_string('<template id="a"></template>')
        assert document.source.startswith("# auto-generated by dumact; do not edit.\n\n")

    def test_custom_header(self):
        document = Environment(header="generated").from_string('<template id="a"></template>')
        assert document.source.startswith("# generated; do not edit.")

    def test_source_ends_with_newline(self, report_document):
        assert report_document.source.endswith("\n")

    def test_source_parses(self, report_document):
        tree = ast.parse(report_document.source)
        defined = [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]
        assert defined == [
            "createAuditComponent",
            "createChevronComponent",
            "createCrcComponent",
            "createSnippetComponent",
            "create_component",
        ]

    def test_module_layout(self, report_document):
        body = report_document.module.body
        assert ast.get_docstring(report_document.module) == "Component construction functions."
        assert isinstance(body[1], ast.ClassDef)
        assert body[1].name == ERROR_CLASS_NAME
        mapping = body[-2]
        assert isinstance(mapping, ast.Assign)
        assert mapping.targets[0].id == COMPONENTS_NAME

    def test_functions_take_only_the_builder(self, report_document):
        tree = ast.parse(report_document.source)
        for node in tree.body:
            if isinstance(node, ast.FunctionDef) and node.name.endswith("Component"):
                assert [arg.arg for arg in node.args.args] == ["dom"]


class TestGeneratedModule:
    """The emitted source executed standalone."""

    def test_dispatch_by_identifier(self, report_document):
        namespace = _exec(report_document.source)
        fragment = namespace["create_component"](DOM(), "chevron")
        assert fragment.firstChild.localName == "svg"

    def test_mapping_covers_every_component(self, report_document):
        namespace = _exec(report_document.source)
        assert sorted(namespace[COMPONENTS_NAME]) == list(report_document.names)
        assert namespace[COMPONENTS_NAME]["audit"] is namespace["createAuditComponent"]

    def test_unknown_identifier_raises_lookup_error(self, report_document):
        namespace = _exec(report_document.source)
        with pytest.raises(LookupError, match="unknown component: 'missing'"):
            namespace["create_component"](DOM(), "missing")

    def test_unknown_identifier_error_class(self, report_document):
        namespace = _exec(report_document.source)
        with pytest.raises(namespace[ERROR_CLASS_NAME]):
            namespace["create_component"](DOM(), "")

    def test_functions_return_fresh_fragments(self, report_document):
        namespace = _exec(report_document.source)
        dom = DOM()
        first = namespace["createAuditComponent"](dom)
        second = namespace["createAuditComponent"](dom)
        assert first is not second
        assert first.firstChild is not second.firstChild

    def test_text_with_quotes_and_backslashes(self, env):
        document = env.from_string(
            """<template id="q"><span>It's "quoted" \\ here</span></template>"""
        )
        fragment = _exec(document.source)["createQComponent"](DOM())
        assert fragment.firstChild.firstChild.data == """It's "quoted" \\ here"""

    def test_custom_names(self):
        env = Environment(builder_name="builder", dispatcher_name="build")
        document = env.from_string('<template id="x"><i></i></template>')
        assert "def createXComponent(builder):" in document.source
        assert "def build(builder, component_name):" in document.source
        namespace = _exec(document.source)
        assert namespace["build"](DOM(), "x").firstChild.localName == "i"


class TestAssembler:
    """FunctionAssembler used directly."""

    def test_component_function(self):
        unit = CompiledUnit(
            name="empty",
            function_name="createEmptyComponent",
            statements=(ast.Return(value=ast.Constant(value=None)),),
        )
        function = FunctionAssembler().make_component_function(unit)
        ast.fix_missing_locations(function)
        assert ast.unparse(function) == "def createEmptyComponent(dom):\n    return None"

    def test_dispatcher_source(self):
        unit = CompiledUnit(name="a", function_name="createAComponent", statements=())
        statements = FunctionAssembler(CompilerConfig()).make_dispatcher([unit])
        module = ast.Module(body=statements, type_ignores=[])
        ast.fix_missing_locations(module)
        assert ast.unparse(module) == (
            "COMPONENTS = {'a': createAComponent}\n\n"
            "def create_component(dom, component_name):\n"
            "    factory = COMPONENTS.get(component_name)\n"
            "    if factory is None:\n"
            "        raise UnknownComponentError(f'unknown component: {component_name!r}')\n"
            "    return factory(dom)"
        )

    def test_emitter_accepts_any_iterable(self, report_templates):
        document = Emitter().emit(iter(report_templates.values()), name="templates.html")
        assert document.names == ("audit", "chevron", "crc", "snippet")
