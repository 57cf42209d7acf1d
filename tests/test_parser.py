"""Tests for parsing markup into IR."""

from xml.dom import minidom

import pytest

from litmarkup import (
    MarkupSyntaxError,
    NameResolutionError,
    Settings,
    UnsupportedNodeError,
    parse_markup_text,
    parse_template,
)
from litmarkup.ir.nodes import ComponentRef, Element, MarkerRef, TagName, Text, dump_json
from litmarkup.ir.parser import MinidomParser, error_document, find_parser_error


def Greeting(props):
    return f"Hello, {props['name']}"


def test_parse_simple_template():
    ir = parse_template(["<div>Hello ", "!</div>"])
    assert ir == Element(
        name=TagName("div"),
        attributes={},
        children=(Text("Hello "), MarkerRef(0), Text("!")),
    )


def test_parse_is_deterministic():
    """Same fragments and components always give equal IR."""
    fragments = ['<ul class="', '"><li>', "</li><Greeting name=\"x\"/></ul>"]
    first = parse_template(fragments, {"Greeting": Greeting})
    second = parse_template(list(fragments), {"Greeting": Greeting})
    assert first == second
    assert first is not second


def test_text_parts_splice_into_children():
    """Marker-split text sits at the same level as sibling elements."""
    ir = parse_template(["<p>a ", " <b>x</b> c</p>"])
    assert ir.children == (
        Text("a "),
        MarkerRef(0),
        Text(" "),
        Element(name=TagName("b"), attributes={}, children=(Text("x"),)),
        Text(" c"),
    )


def test_sole_marker_child_is_bare():
    ir = parse_template(["<ul>", "</ul>"])
    assert ir.children == (MarkerRef(0),)


def test_whitespace_between_elements_collapses():
    ir = parse_markup_text("<ul>\n    <li>a</li>\n</ul>")
    assert ir.children[0] == Text(" ")
    assert ir.children[2] == Text(" ")


def test_attributes_split_markers():
    ir = parse_template(['<a href="/users/', '" class="link">go</a>'])
    assert ir.attributes == {
        "href": (Text("/users/"), MarkerRef(0)),
        "class": Text("link"),
    }


def test_attribute_with_sole_marker():
    ir = parse_template(['<input value="', '"/>'])
    assert ir.attributes == {"value": MarkerRef(0)}
    assert ir.children == ()


def test_attribute_order_is_document_order():
    ir = parse_markup_text('<p z="1" a="2" m="3"/>')
    assert list(ir.attributes) == ["z", "a", "m"]


def test_attributes_are_read_only():
    """Parsed IR is shared between renders and can't be modified."""
    ir = parse_markup_text('<p class="x"/>')
    with pytest.raises(TypeError):
        ir.attributes["class"] = Text("y")
    with pytest.raises(TypeError):
        del ir.attributes["class"]
    assert ir.attributes == {"class": Text("x")}


def test_cdata_is_text():
    ir = parse_markup_text("<p><![CDATA[a < b]]></p>")
    assert ir.children == (Text("a < b"),)


class TestComponents:
    def test_component_from_map(self):
        ir = parse_template(['<div><Greeting name="', '"/></div>'], {"Greeting": Greeting})
        child = ir.children[0]
        assert child.is_component
        assert child.name == ComponentRef(name="Greeting", component=Greeting)
        assert child.attributes == {"name": MarkerRef(0)}

    def test_component_from_ambient_resolver(self, registry):
        registry.register(Greeting)
        ir = parse_markup_text("<Greeting/>", resolver=registry)
        assert ir.name.component is Greeting

    def test_map_wins_over_resolver(self, registry):
        def Other(props):
            return "other"

        registry.register(Other, name="Greeting")
        ir = parse_markup_text("<Greeting/>", {"Greeting": Greeting}, resolver=registry)
        assert ir.name.component is Greeting

    def test_unknown_component_raises(self, registry):
        with pytest.raises(NameResolutionError) as exc_info:
            parse_markup_text("<Greeting/>", resolver=registry)
        assert exc_info.value.name == "Greeting"
        assert '"Greeting"' in str(exc_info.value)

    def test_unknown_component_raises_even_when_nested(self, registry):
        """Resolution happens at parse time for the whole tree."""
        with pytest.raises(NameResolutionError, match="Missing"):
            parse_markup_text("<div><p><Missing/></p></div>", resolver=registry)

    def test_lowercase_tags_are_not_resolved(self, registry):
        ir = parse_markup_text("<greeting/>", resolver=registry)
        assert ir.name == TagName("greeting")


class TestSyntaxErrors:
    def test_unclosed_tag(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse_markup_text("<div>")
        assert "line 1" in exc_info.value.diagnostic

    def test_mismatched_tag(self):
        with pytest.raises(MarkupSyntaxError, match="mismatched tag"):
            parse_template(["<div>", "</span>"])

    def test_error_node_as_first_child(self):
        doc = error_document("broken")
        assert find_parser_error(doc) == "broken"

    def test_error_node_as_first_grandchild(self):
        doc = minidom.parseString("<html><parsererror>bad <b>input</b></parsererror></html>")
        assert find_parser_error(doc) == "bad input"

    def test_no_error_node(self):
        doc = MinidomParser().parse("<div><p>fine</p></div>")
        assert find_parser_error(doc) is None


class TestUnsupportedNodes:
    def test_comments_dropped_by_default(self):
        ir = parse_markup_text("<div><!-- note -->Hi</div>", settings=Settings())
        assert ir.children == (Text("Hi"),)

    def test_comments_raise_when_configured(self):
        with pytest.raises(UnsupportedNodeError, match="comment"):
            parse_markup_text("<div><!-- note --></div>", settings=Settings(comments="error"))

    def test_processing_instruction_follows_comment_policy(self):
        ir = parse_markup_text("<div><?tool run?>x</div>", settings=Settings())
        assert ir.children == (Text("x"),)


def test_dump_json_names_components():
    ir = parse_template(["<div><Greeting/>", "</div>"], {"Greeting": Greeting})
    dumped = dump_json(ir).decode("utf-8")
    assert '"element"' in dumped
    assert "Greeting" in dumped
    assert '"marker"' in dumped


def test_non_ascii_digit_marker_stays_literal():
    ir = parse_markup_text("<p>[[[١]]]</p>")
    assert ir.children == (Text("[[[١]]]"),)
