"""Tests for converting lxml element trees into converted nodes."""

import pytest
from lxml import etree

from xml_tree_converter.tree.converter import (
    child_elements,
    collect_statistics,
    convert_element,
    convert_node,
    node_name,
    own_text,
)
from xml_tree_converter.tree.model import ConvertedDocument, ConvertedNode


def _build_chain(depth: int) -> etree._Element:
    """Build a single chain of nested elements without going through the parser."""
    root = etree.Element("root")
    current = root
    for _ in range(depth):
        current = etree.SubElement(current, "level")
    current.text = "bottom"
    return root


class TestOwnText:
    """Test extraction of an element's own text."""

    def test_simple_text(self):
        """Test text of a leaf element."""
        assert own_text(etree.fromstring("<a>value</a>")) == "value"

    def test_excludes_descendant_text(self):
        """Test that text inside child elements is not included."""
        element = etree.fromstring("<a>bar<child>Junior</child></a>")
        assert own_text(element) == "bar"

    def test_mixed_content_joined(self):
        """Test text around child elements is concatenated."""
        element = etree.fromstring("<a> before <b>inner</b> after </a>")
        assert own_text(element) == "before  after"

    def test_comment_and_pi_tails_included(self):
        """Test text following comments and processing instructions."""
        element = etree.fromstring("<a>x<!-- note -->y<?target data?>z</a>")
        assert own_text(element) == "xyz"

    def test_trims_xml_whitespace_only(self):
        """Test that non-breaking spaces are kept while blanks are trimmed."""
        element = etree.fromstring("<a>\n\t \u00a0text\u00a0 \n</a>")
        assert own_text(element) == "\u00a0text\u00a0"

    def test_empty_element(self):
        """Test element without any text."""
        assert own_text(etree.fromstring("<a/>")) == ""


class TestNodeName:
    """Test tag and attribute naming."""

    def test_plain_name_unchanged(self):
        assert node_name("item") == "item"

    def test_clark_notation_stripped(self):
        assert node_name("{urn:example}item") == "item"

    def test_clark_notation_kept(self):
        assert node_name("{urn:example}item", strip_namespaces=False) == "{urn:example}item"


class TestChildElements:
    """Test selection of child elements."""

    def test_skips_comments_and_pis(self):
        """Test that only real elements are returned."""
        element = etree.fromstring("<a><!-- c --><b/><?pi x?><c/></a>")
        assert [child.tag for child in child_elements(element)] == ["b", "c"]


class TestConvertNode:
    """Test conversion of single elements and their subtrees."""

    def test_leaf_node(self):
        """Test a leaf element converts to value with empty groups."""
        node = convert_node(etree.fromstring("<foo>bar</foo>"))
        assert node == ConvertedNode(value="bar", children={}, attributes={})

    def test_repeated_siblings_keep_order(self):
        """Test same-named children are grouped in document order."""
        element = etree.fromstring(
            '<foo><child rank="1">Junior</child><child rank="2">Baby</child></foo>'
        )
        node = convert_node(element)

        children = node.children["child"]
        assert [child.value for child in children] == ["Junior", "Baby"]
        assert [child.attributes["rank"] for child in children] == ["1", "2"]

    def test_attribute_only_element(self):
        """Test element with attributes and no text or children."""
        node = convert_node(etree.fromstring('<img src="a.png" alt="" width="10"/>'))
        assert node.value == ""
        assert node.children == {}
        assert node.attributes == {"src": "a.png", "alt": "", "width": "10"}

    def test_attribute_values_not_coerced(self):
        """Test attribute values stay strings."""
        node = convert_node(etree.fromstring('<a count="007" flag="true"/>'))
        assert node.attributes == {"count": "007", "flag": "true"}

    def test_differently_named_siblings_grouped(self):
        """Test grouping by tag name across interleaved siblings."""
        node = convert_node(etree.fromstring("<r><a>1</a><b>2</b><a>3</a></r>"))
        assert list(node.children) == ["a", "b"]
        assert [child.value for child in node.children["a"]] == ["1", "3"]
        assert [child.value for child in node.children["b"]] == ["2"]

    def test_nested_structure(self):
        """Test conversion several levels deep."""
        node = convert_node(etree.fromstring(
            "<library><shelf id='s1'><book>One</book><book>Two</book></shelf></library>"
        ))
        shelf = node.children["shelf"][0]
        assert shelf.attributes == {"id": "s1"}
        assert [book.value for book in shelf.children["book"]] == ["One", "Two"]
        assert shelf.children["book"][0].is_leaf

    def test_no_top_level_child_keys(self):
        """Test child groupings only live under children."""
        node = convert_node(etree.fromstring("<foo><value>x</value><children/></foo>"))
        assert node.value == ""
        assert set(node.children) == {"value", "children"}
        assert node.to_dict()["value"] == ""

    def test_namespaced_names(self):
        """Test namespaced children and attributes with and without stripping."""
        element = etree.fromstring(
            '<r xmlns:n="urn:x"><n:item n:id="1" plain="p">v</n:item></r>'
        )

        stripped = convert_node(element)
        assert stripped.children["item"][0].attributes == {"id": "1", "plain": "p"}

        kept = convert_node(element, strip_namespaces=False)
        item = kept.children["{urn:x}item"][0]
        assert item.attributes == {"{urn:x}id": "1", "plain": "p"}

    def test_colliding_namespaced_attributes_kept(self):
        """Test attributes sharing a local name never replace each other."""
        node = convert_node(etree.fromstring('<a xmlns:n="urn:x" x="1" n:x="2"/>'))
        assert node.attributes == {"x": "1", "{urn:x}x": "2"}

    def test_plain_attribute_keeps_its_name_when_declared_later(self):
        """Test a plain attribute wins its name over an earlier namespaced one."""
        node = convert_node(etree.fromstring('<a xml:lang="en" lang="de"/>'))
        assert node.attributes == {
            "{http://www.w3.org/XML/1998/namespace}lang": "en",
            "lang": "de",
        }

    def test_namespaced_attributes_sharing_local_name(self):
        """Test only the first of several namespaced attributes gets the local name."""
        node = convert_node(etree.fromstring(
            '<a xmlns:p="urn:p" xmlns:q="urn:q" p:id="1" q:id="2"/>'
        ))
        assert node.attributes == {"id": "1", "{urn:q}id": "2"}

    def test_input_tree_not_modified(self):
        """Test conversion leaves the element tree untouched."""
        source = b'<r a="1">text<b c="2">x</b><!-- c --><b/>tail</r>'
        element = etree.fromstring(source)
        before = etree.tostring(element)

        node = convert_node(element)
        node.attributes["a"] = "changed"
        node.children["b"].append(ConvertedNode("extra"))

        assert etree.tostring(element) == before

    def test_deep_tree_beyond_recursion_limit(self):
        """Test very deep trees convert without hitting the recursion limit."""
        depth = 5000
        node = convert_node(_build_chain(depth))

        levels = 0
        while node.children:
            node = node.children["level"][0]
            levels += 1

        assert levels == depth
        assert node.value == "bottom"


class TestConvertElement:
    """Test conversion of whole documents from their root."""

    def test_root_discarded(self):
        """Test root tag, text and attributes are not in the mapping."""
        root = etree.fromstring('<test kind="x">ignored<foo>bar</foo></test>')
        document = convert_element(root)

        assert isinstance(document, ConvertedDocument)
        assert document == {"foo": [ConvertedNode("bar")]}
        assert document.root_tag == "test"

    def test_accepts_element_tree(self):
        """Test an ElementTree is converted from its root."""
        tree = etree.ElementTree(etree.fromstring("<r><a>1</a></r>"))
        assert convert_element(tree)["a"][0].value == "1"

    def test_empty_root(self):
        """Test a root without children yields an empty document."""
        document = convert_element(etree.fromstring("<r>only text</r>"))
        assert document == {}
        assert document.root_tag == "r"

    def test_namespaced_root_tag(self):
        """Test root tag naming follows the namespace setting."""
        root = etree.fromstring('<r xmlns="urn:d"><a/></r>')
        assert convert_element(root).root_tag == "r"
        assert convert_element(root, strip_namespaces=False).root_tag == "{urn:d}r"
        assert list(convert_element(root, strip_namespaces=False)) == ["{urn:d}a"]


class TestCollectStatistics:
    """Test statistics over converted documents."""

    def test_counts(self):
        """Test element, attribute and depth counts."""
        document = convert_element(etree.fromstring(
            '<r><a x="1" y="2"><b z="3"/></a><a/><c/></r>'
        ))
        statistics = collect_statistics(document, input_length=42, processing_time_ms=2.0)

        assert statistics.element_count == 4
        assert statistics.attribute_count == 3
        assert statistics.max_depth == 2
        assert statistics.input_length == 42
        assert statistics.elements_per_second == pytest.approx(2000.0)

    def test_empty_document(self):
        """Test statistics of a document without elements."""
        statistics = collect_statistics(ConvertedDocument("r"))
        assert statistics.element_count == 0
        assert statistics.max_depth == 0
        assert statistics.elements_per_second == 0.0
