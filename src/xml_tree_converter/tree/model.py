"""Output data model for converted XML documents.

A converted element keeps three things: its own trimmed text, its attributes
and its child elements grouped by tag name. Same-named siblings stay in
document order inside their group; the relative order of differently named
siblings is not recorded.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass
class ConvertedNode:
    """A single XML element converted into plain values.

    Attributes:
        value: The element's own text with surrounding whitespace trimmed
        children: Child tag name mapped to the converted children carrying it
        attributes: Attribute name mapped to its string value
    """

    value: str = ""
    children: Dict[str, List["ConvertedNode"]] = field(default_factory=dict)
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        """Check whether this node has no child elements."""
        return not self.children

    def add_child(self, tag: str, child: "ConvertedNode") -> None:
        """Append a converted child under its tag name."""
        self.children.setdefault(tag, []).append(child)

    def find_children(self, tag: str) -> List["ConvertedNode"]:
        """Get all direct children with the given tag name."""
        return list(self.children.get(tag, []))

    def find_child(self, tag: str) -> Optional["ConvertedNode"]:
        """Get the first direct child with the given tag name."""
        group = self.children.get(tag)
        return group[0] if group else None

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value by name."""
        return self.attributes.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert node and its subtree to nested dictionaries.

        Built with an explicit stack so that deeply nested documents do not
        run into the interpreter's recursion limit.
        """
        result = _shallow_dict(self)
        stack: List[Tuple[ConvertedNode, Dict[str, Any]]] = [(self, result)]

        while stack:
            node, target = stack.pop()
            for tag, group in node.children.items():
                converted = []
                for child in group:
                    child_dict = _shallow_dict(child)
                    converted.append(child_dict)
                    stack.append((child, child_dict))
                target["children"][tag] = converted

        return result


def _shallow_dict(node: ConvertedNode) -> Dict[str, Any]:
    return {"value": node.value, "children": {}, "attributes": dict(node.attributes)}


class ConvertedDocument(Dict[str, List[ConvertedNode]]):
    """Converted XML document keyed by the tag names of the root's children.

    The root element itself is not represented in the mapping; its tag name
    is kept in ``root_tag`` for reference.
    """

    def __init__(self, root_tag: Optional[str] = None) -> None:
        super().__init__()
        self.root_tag = root_tag

    def add(self, tag: str, node: ConvertedNode) -> None:
        """Append a converted top-level element under its tag name."""
        self.setdefault(tag, []).append(node)

    def iter_nodes(self) -> Iterator[Tuple[int, str, ConvertedNode]]:
        """Iterate over every node depth-first.

        Yields:
            Tuples of (depth, tag, node); top-level elements have depth 1
        """
        stack: List[Tuple[int, str, ConvertedNode]] = []
        for tag, group in reversed(list(self.items())):
            stack.extend((1, tag, node) for node in reversed(group))

        while stack:
            depth, tag, node = stack.pop()
            yield depth, tag, node
            for child_tag, group in reversed(list(node.children.items())):
                stack.extend((depth + 1, child_tag, child) for child in reversed(group))

    @property
    def element_count(self) -> int:
        """Count all converted elements in the document."""
        return sum(1 for _ in self.iter_nodes())

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Convert document to plain nested dictionaries."""
        return {tag: [node.to_dict() for node in group] for tag, group in self.items()}
