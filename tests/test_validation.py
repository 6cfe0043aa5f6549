"""Tests for the structural comparison of templates and built fragments."""

import pytest

from dumact import DOM, assert_equivalent, discover_templates, normalize, parse_document
from dumact.utils.constants import SVG_NAMESPACE
from dumact.validation import diff_trees


def template_of(body: str):
    [template] = discover_templates(parse_document(f'<template id="t">{body}</template>'))
    return template


class TestNormalize:
    def test_formatting_is_ignored(self):
        spaced = template_of('\n  <div  class=" a  b ">\n    <b>x</b>\n  </div>\n')
        tight = template_of('<div class="a b"><b>x</b></div>')
        assert normalize(spaced) == normalize(tight)

    def test_canonical_form(self):
        assert normalize(template_of('<p title="t" class="c">Hi <b>there</b></p>')) == (
            (
                "",
                "p",
                (("class", "c"), ("title", "t")),
                ("Hi ", ("", "b", (), ("there",))),
            ),
        )

    def test_svg_namespace_counts(self):
        [(namespace, tag, _, _)] = normalize(template_of("<svg></svg>"))
        assert (namespace, tag) == (SVG_NAMESPACE, "svg")

    def test_comments_are_ignored(self):
        assert normalize(template_of("<p>a<!-- x -->b</p>")) == (("", "p", (), ("ab",)),)

    def test_empty_class_is_dropped(self):
        assert normalize(template_of('<p class="  "></p>')) == (("", "p", (), ()),)

    def test_element_and_fragment(self):
        dom = DOM()
        fragment = dom.create_fragment()
        element = dom.create_element("i", "x")
        fragment.appendChild(element)
        assert normalize(element) == ("", "i", (("class", "x"),), ())
        assert normalize(fragment) == (("", "i", (("class", "x"),), ()),)


class TestDiffTrees:
    def test_equal(self):
        tree = normalize(template_of("<p>x</p>"))
        assert diff_trees(tree, tree) == []

    def test_child_count(self):
        problems = diff_trees(
            normalize(template_of("<p></p><p></p>")), normalize(template_of("<p></p>"))
        )
        assert problems == ["/: expected 2 children, got 1"]

    def test_text(self):
        problems = diff_trees(normalize(template_of("<p>a</p>")), normalize(template_of("<p>b</p>")))
        assert problems == ["/0<p>/0: expected 'a', got 'b'"]

    def test_tag(self):
        problems = diff_trees(
            normalize(template_of("<p></p>")), normalize(template_of("<div></div>"))
        )
        assert len(problems) == 1
        assert "expected element :p, got :div" in problems[0]

    def test_attributes(self):
        problems = diff_trees(
            normalize(template_of('<p title="a"></p>')),
            normalize(template_of('<p title="b"></p>')),
        )
        assert problems == ["/0<p>: attributes {'title': 'a'} != {'title': 'b'}"]


class TestAssertEquivalent:
    def test_matching_fragment(self):
        template = template_of('<div class="lh-x" role="note">Hello   world</div>')
        dom = DOM()
        fragment = dom.create_fragment()
        div = dom.create_element("div", "lh-x")
        div.setAttribute("role", "note")
        div.appendChild(dom.document().createTextNode("Hello world"))
        fragment.appendChild(div)
        assert_equivalent(template, fragment)

    def test_mismatch_lists_problems(self):
        template = template_of("<div>Hello</div>")
        dom = DOM()
        fragment = dom.create_fragment()
        fragment.appendChild(dom.create_element("div"))
        with pytest.raises(AssertionError, match="Component 't' differs from its source"):
            assert_equivalent(template, fragment)
