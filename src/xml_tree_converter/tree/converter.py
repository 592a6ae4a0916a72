"""Conversion of parsed lxml element trees into converted nodes.

The traversal keeps its own work stack instead of recursing, so the depth of
a document is limited by memory and by the parser, never by the Python call
stack.
"""

from typing import Dict, List, Tuple, Union

from lxml import etree

from xml_tree_converter.shared.result import ConversionStatistics
from xml_tree_converter.tree.model import ConvertedDocument, ConvertedNode

# Characters stripped from both ends of an element's own text
TRIM_CHARACTERS = " \t\n\r\x00\x0b"

ElementLike = Union[etree._Element, etree._ElementTree]


def node_name(name: str, strip_namespaces: bool = True) -> str:
    """Get the key used for a tag or attribute name.

    Args:
        name: Name as reported by lxml, possibly in ``{uri}local`` notation
        strip_namespaces: Reduce the name to its local part

    Returns:
        The local name when stripping, otherwise the name unchanged
    """
    if strip_namespaces and name.startswith("{"):
        return etree.QName(name).localname
    return name


def own_text(element: etree._Element) -> str:
    """Get the text directly inside an element, excluding its descendants.

    This is the element's leading text plus the tail text following each of
    its direct children, including comments and processing instructions,
    joined and trimmed.
    """
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip(TRIM_CHARACTERS)


def child_elements(element: etree._Element) -> List[etree._Element]:
    """Get direct child elements, skipping comments, PIs and entity references."""
    return [child for child in element if isinstance(child.tag, str)]


def attribute_map(element: etree._Element, strip_namespaces: bool = True) -> Dict[str, str]:
    """Copy an element's attributes as strings, in document order.

    When stripping, a namespaced attribute is keyed by its local name only if
    no other attribute already uses that name; otherwise it keeps its
    ``{uri}local`` form. Attributes without a namespace always keep their
    plain name, so no attribute ever replaces another.
    """
    attributes: Dict[str, str] = {}
    if not strip_namespaces:
        for name, value in element.attrib.items():
            attributes[name] = str(value)
        return attributes

    plain_names = {name for name in element.attrib.keys() if not name.startswith("{")}
    for name, value in element.attrib.items():
        key = node_name(name)
        if key != name and (key in plain_names or key in attributes):
            key = name
        attributes[key] = str(value)
    return attributes


def _shallow_node(element: etree._Element, strip_namespaces: bool) -> ConvertedNode:
    return ConvertedNode(
        value=own_text(element),
        attributes=attribute_map(element, strip_namespaces),
    )


def convert_node(element: etree._Element, strip_namespaces: bool = True) -> ConvertedNode:
    """Convert one element and its whole subtree.

    Args:
        element: Parsed lxml element
        strip_namespaces: Key children and attributes by local name

    Returns:
        Freshly built ConvertedNode; the element tree is left untouched
    """
    root = _shallow_node(element, strip_namespaces)
    stack: List[Tuple[etree._Element, ConvertedNode]] = [(element, root)]

    while stack:
        current, node = stack.pop()
        for child in child_elements(current):
            converted = _shallow_node(child, strip_namespaces)
            node.add_child(node_name(child.tag, strip_namespaces), converted)
            stack.append((child, converted))

    return root


def convert_element(root: ElementLike, strip_namespaces: bool = True) -> ConvertedDocument:
    """Convert a parsed document root into a ConvertedDocument.

    Only the root's children appear in the result; the root element's own
    text and attributes are dropped and its tag name is kept as
    ``root_tag``.

    Args:
        root: Root element, or an ElementTree whose root is used
        strip_namespaces: Key elements and attributes by local name

    Returns:
        ConvertedDocument keyed by the tag names of the root's children
    """
    if isinstance(root, etree._ElementTree):
        root = root.getroot()

    document = ConvertedDocument(root_tag=node_name(root.tag, strip_namespaces))
    for child in child_elements(root):
        document.add(node_name(child.tag, strip_namespaces), convert_node(child, strip_namespaces))
    return document


def collect_statistics(
    document: ConvertedDocument,
    input_length: int = 0,
    processing_time_ms: float = 0.0
) -> ConversionStatistics:
    """Gather element, attribute and depth counts for a converted document."""
    statistics = ConversionStatistics(
        input_length=input_length,
        processing_time_ms=processing_time_ms,
    )
    for depth, _tag, node in document.iter_nodes():
        statistics.element_count += 1
        statistics.attribute_count += len(node.attributes)
        statistics.max_depth = max(statistics.max_depth, depth)
    return statistics
