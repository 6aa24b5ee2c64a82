"""
Core document model: an ordered tree of text and element nodes.

The tree mirrors the parts of the DOM node model the inline tools rely on.
Offsets inside a text node count characters; offsets inside any other node
count children.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .exceptions import HierarchyRequestError, IndexSizeError


class NodeType(Enum):
    """Kinds of node that can appear in a document tree."""
    TEXT = "#text"
    ELEMENT = "element"
    FRAGMENT = "#document-fragment"
    DOCUMENT = "#document"


Snapshot = Union[str, Tuple[str, List[Any]], List[Any]]


class Node:
    """
    Base class for all tree nodes.

    Nodes compare by identity. A node has at most one parent, and only
    container nodes (elements, fragments, documents) hold children.
    """

    node_type: NodeType

    def __init__(self) -> None:
        self.parent: Optional[Node] = None
        self.children: List[Node] = []

    # Navigation

    @property
    def index(self) -> int:
        """Position of this node among its parent's children (0 if detached)."""
        if self.parent is None:
            return 0
        for position, sibling in enumerate(self.parent.children):
            if sibling is self:
                return position
        raise HierarchyRequestError("Node is not listed among its parent's children", self)

    @property
    def length(self) -> int:
        """Largest boundary offset inside this node."""
        return len(self.children)

    @property
    def next_sibling(self) -> Optional[Node]:
        if self.parent is None:
            return None
        position = self.index + 1
        siblings = self.parent.children
        return siblings[position] if position < len(siblings) else None

    @property
    def previous_sibling(self) -> Optional[Node]:
        if self.parent is None or self.index == 0:
            return None
        return self.parent.children[self.index - 1]

    def root(self) -> Node:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def is_inclusive_ancestor_of(self, other: Node) -> bool:
        node: Optional[Node] = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def tree_path(self) -> List[int]:
        """Child indices leading from the root down to this node."""
        path = []
        node = self
        while node.parent is not None:
            path.append(node.index)
            node = node.parent
        path.reverse()
        return path

    def precedes(self, other: Node) -> bool:
        """True if this node comes before ``other`` in tree order."""
        return self.tree_path() < other.tree_path()

    def iter_descendants(self) -> Iterator[Node]:
        """Yield all descendants in tree order."""
        for child in list(self.children):
            yield child
            yield from child.iter_descendants()

    def child_at(self, offset: int) -> Optional[Node]:
        return self.children[offset] if 0 <= offset < len(self.children) else None

    # Content

    @property
    def text_content(self) -> str:
        return "".join(
            node.data for node in self.iter_descendants() if isinstance(node, TextNode)
        )

    # Mutation

    def _ensure_insertable(self, node: Node, reference: Optional[Node]) -> None:
        if isinstance(self, TextNode):
            raise HierarchyRequestError("Text nodes cannot have children", self)
        if isinstance(node, Document):
            raise HierarchyRequestError("A document cannot be inserted into a tree", node)
        if node.is_inclusive_ancestor_of(self):
            raise HierarchyRequestError("Cannot insert a node into itself or its descendant", node)
        if reference is not None and reference.parent is not self:
            raise HierarchyRequestError("Reference node is not a child of this node", reference)

    def insert_before(self, node: Node, reference: Optional[Node]) -> Node:
        """
        Insert ``node`` before ``reference`` (or append when it is None).

        Inserting a fragment moves all of its children, leaving it empty.
        A node that already has a parent is detached first.
        """
        self._ensure_insertable(node, reference)

        if reference is node:
            reference = node.next_sibling

        if isinstance(node, DocumentFragment):
            nodes = list(node.children)
            for child in nodes:
                child.parent = None
            node.children.clear()
        else:
            if node.parent is not None:
                node.parent.remove_child(node)
            nodes = [node]

        position = len(self.children) if reference is None else reference.index
        self.children[position:position] = nodes
        for child in nodes:
            child.parent = self
        return node

    def append_child(self, node: Node) -> Node:
        return self.insert_before(node, None)

    def remove_child(self, child: Node) -> Node:
        if child.parent is not self:
            raise HierarchyRequestError("Node is not a child of this node", child)
        del self.children[child.index]
        child.parent = None
        return child

    def remove(self) -> None:
        """Detach this node from its parent; a no-op when already detached."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def clone(self, deep: bool = False) -> Node:
        copy = self._shallow_clone()
        if deep:
            for child in self.children:
                copy.append_child(child.clone(deep=True))
        return copy

    def _shallow_clone(self) -> Node:
        raise NotImplementedError

    def normalize(self) -> None:
        """Drop empty text nodes and merge runs of adjacent text nodes."""
        position = 0
        while position < len(self.children):
            child = self.children[position]
            if isinstance(child, TextNode):
                if not child.data:
                    self.remove_child(child)
                    continue
                following = child.next_sibling
                while isinstance(following, TextNode):
                    child.data += following.data
                    self.remove_child(following)
                    following = child.next_sibling
            else:
                child.normalize()
            position += 1

    def snapshot(self) -> Snapshot:
        """Plain-data view of the subtree, for deep equality checks."""
        return [child.snapshot() for child in self.children]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.snapshot()!r}>"


class TextNode(Node):
    """A leaf node holding a run of characters."""

    node_type = NodeType.TEXT

    def __init__(self, data: str = "") -> None:
        super().__init__()
        self.data = data

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def text_content(self) -> str:
        return self.data

    def _check_offset(self, offset: int) -> None:
        if offset < 0 or offset > len(self.data):
            raise IndexSizeError(
                f"Offset {offset} is outside text of length {len(self.data)}", self, offset
            )

    def substring(self, offset: int, count: Optional[int] = None) -> str:
        self._check_offset(offset)
        if count is None:
            return self.data[offset:]
        return self.data[offset:offset + count]

    def replace_data(self, offset: int, count: int, data: str = "") -> None:
        self._check_offset(offset)
        self.data = self.data[:offset] + data + self.data[offset + count:]

    def split_text(self, offset: int) -> TextNode:
        """
        Split this node at ``offset``.

        This node keeps the leading characters; a new node holding the rest
        is inserted right after it (when attached) and returned.
        """
        self._check_offset(offset)
        tail = TextNode(self.data[offset:])
        self.data = self.data[:offset]
        if self.parent is not None:
            self.parent.insert_before(tail, self.next_sibling)
        return tail

    def _shallow_clone(self) -> TextNode:
        return TextNode(self.data)

    def normalize(self) -> None:
        return None

    def snapshot(self) -> Snapshot:
        return self.data

    def __repr__(self) -> str:
        return f"<TextNode {self.data!r}>"


class ElementNode(Node):
    """An element with a tag name, attributes and ordered children."""

    node_type = NodeType.ELEMENT

    def __init__(
        self,
        tag: str,
        children: Optional[List[Node]] = None,
        attributes: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__()
        self.tag = tag.lower()
        self.attributes: Dict[str, str] = dict(attributes or {})
        for child in children or []:
            self.append_child(child)

    def matches_tag(self, tag: str) -> bool:
        return self.tag == tag.lower()

    def _shallow_clone(self) -> ElementNode:
        return ElementNode(self.tag, attributes=self.attributes)

    def snapshot(self) -> Snapshot:
        return (self.tag, [child.snapshot() for child in self.children])

    def __repr__(self) -> str:
        return f"<ElementNode {self.tag} {self.snapshot()[1]!r}>"


class DocumentFragment(Node):
    """A detached container produced by extraction and consumed by insertion."""

    node_type = NodeType.FRAGMENT

    def __init__(self, children: Optional[List[Node]] = None) -> None:
        super().__init__()
        for child in children or []:
            self.append_child(child)

    def _shallow_clone(self) -> DocumentFragment:
        return DocumentFragment()


class Document(Node):
    """
    Root of a document tree.

    Offers node factories and helpers that translate flat character offsets
    into boundary points, which is how callers outside the tree usually
    describe a selection.
    """

    node_type = NodeType.DOCUMENT

    def __init__(self, children: Optional[List[Node]] = None) -> None:
        super().__init__()
        for child in children or []:
            self.append_child(child)

    def create_element(self, tag: str, attributes: Optional[Dict[str, str]] = None) -> ElementNode:
        return ElementNode(tag, attributes=attributes)

    def contains(self, node: Optional[Node]) -> bool:
        """True if ``node`` is attached to this document."""
        return node is not None and self.is_inclusive_ancestor_of(node)

    def text_nodes(self, within: Optional[Node] = None) -> List[TextNode]:
        scope = within if within is not None else self
        return [node for node in scope.iter_descendants() if isinstance(node, TextNode)]

    def point_at(
        self,
        offset: int,
        within: Optional[Node] = None,
        prefer_next: bool = False,
    ) -> Tuple[Node, int]:
        """
        Map a character offset to a boundary point inside a text node.

        At a junction between two text nodes the end of the earlier node is
        returned, or the start of the later one when ``prefer_next`` is set.
        """
        scope = within if within is not None else self
        nodes = self.text_nodes(scope)
        total = sum(node.length for node in nodes)
        if offset < 0 or offset > total:
            raise IndexSizeError(f"Offset {offset} is outside text of length {total}", scope, offset)
        if not nodes:
            return scope, 0

        consumed = 0
        for position, node in enumerate(nodes):
            end = consumed + node.length
            at_junction = offset == end and position + 1 < len(nodes)
            if offset < end or (offset == end and not (prefer_next and at_junction)):
                return node, offset - consumed
            consumed = end
        return nodes[-1], nodes[-1].length

    def _shallow_clone(self) -> Document:
        return Document()
