"""Tree conversion engine for XML documents.

Key Components:
    ConvertedNode: One element's own text, attributes and grouped children
    ConvertedDocument: Mapping of top-level tag names to converted elements
    convert_node: Converts a single lxml element and its subtree
    convert_element: Converts a parsed document root
"""

from .converter import (
    attribute_map,
    child_elements,
    collect_statistics,
    convert_element,
    convert_node,
    node_name,
    own_text,
)
from .model import ConvertedDocument, ConvertedNode

__all__ = [
    "ConvertedDocument",
    "ConvertedNode",
    "attribute_map",
    "child_elements",
    "collect_statistics",
    "convert_element",
    "convert_node",
    "node_name",
    "own_text",
]
