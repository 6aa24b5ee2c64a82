"""
Ranges over a document tree.

A range is a pair of boundary points in document order. Extraction and
insertion follow the DOM Range algorithms so that partially selected text
nodes are split and partially selected elements are shallow-cloned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .document_model import DocumentFragment, Node, TextNode
from .exceptions import HierarchyRequestError, IndexSizeError, RangeContractError


@dataclass(frozen=True)
class BoundaryPoint:
    """A (node, offset) position inside a document tree."""

    node: Node
    offset: int

    def __str__(self) -> str:
        return f"{type(self.node).__name__}@{self.node.tree_path()}:{self.offset}"


def compare_points(node_a: Node, offset_a: int, node_b: Node, offset_b: int) -> int:
    """
    Compare two boundary points sharing a root.

    Returns -1 if the first point is before the second, 0 if they are equal
    and 1 if it is after.
    """
    if node_a is node_b:
        return (offset_a > offset_b) - (offset_a < offset_b)

    if node_b.precedes(node_a):
        return -compare_points(node_b, offset_b, node_a, offset_a)

    if node_a.is_inclusive_ancestor_of(node_b):
        child = node_b
        while child.parent is not node_a:
            child = child.parent
        if child.index < offset_a:
            return 1

    return -1


class Range:
    """
    A contiguous span of a document tree.

    The start boundary never follows the end boundary. A range whose
    boundaries coincide is collapsed and represents a caret.
    """

    def __init__(
        self,
        start_node: Node,
        start_offset: int = 0,
        end_node: Optional[Node] = None,
        end_offset: Optional[int] = None,
    ):
        _check_offset(start_node, start_offset)
        self._start = BoundaryPoint(start_node, start_offset)
        self._end = self._start
        self._extracted = False
        if end_node is not None:
            self.set_end(end_node, start_offset if end_offset is None else end_offset)

    # Boundaries

    @property
    def start(self) -> BoundaryPoint:
        return self._start

    @property
    def end(self) -> BoundaryPoint:
        return self._end

    @property
    def start_container(self) -> Node:
        return self._start.node

    @property
    def start_offset(self) -> int:
        return self._start.offset

    @property
    def end_container(self) -> Node:
        return self._end.node

    @property
    def end_offset(self) -> int:
        return self._end.offset

    @property
    def collapsed(self) -> bool:
        return self._start == self._end

    @property
    def root(self) -> Node:
        return self._start.node.root()

    @property
    def common_ancestor(self) -> Node:
        """Deepest node that is an inclusive ancestor of both boundaries."""
        node = self._start.node
        while not node.is_inclusive_ancestor_of(self._end.node):
            node = node.parent
        return node

    def set_start(self, node: Node, offset: int) -> None:
        _check_offset(node, offset)
        self._start = BoundaryPoint(node, offset)
        if node.root() is not self._end.node.root() or self._compare_to_end(node, offset) > 0:
            self._end = self._start
        self._extracted = False

    def set_end(self, node: Node, offset: int) -> None:
        _check_offset(node, offset)
        self._end = BoundaryPoint(node, offset)
        if node.root() is not self._start.node.root() or self._compare_to_start(node, offset) < 0:
            self._start = self._end
        self._extracted = False

    def select_node(self, node: Node) -> None:
        """Place the boundaries just before and just after ``node``."""
        parent = node.parent
        if parent is None:
            raise HierarchyRequestError("Cannot select a node without a parent", node)
        position = node.index
        self._start = BoundaryPoint(parent, position)
        self._end = BoundaryPoint(parent, position + 1)
        self._extracted = False

    def select_node_contents(self, node: Node) -> None:
        """Place the boundaries on the inner edges of ``node``."""
        self._start = BoundaryPoint(node, 0)
        self._end = BoundaryPoint(node, node.length)
        self._extracted = False

    def collapse(self, to_start: bool = False) -> None:
        if to_start:
            self._end = self._start
        else:
            self._start = self._end

    def is_attached_to(self, root: Node) -> bool:
        """True if both boundary nodes belong to the tree rooted at ``root``."""
        return root.is_inclusive_ancestor_of(self._start.node) and root.is_inclusive_ancestor_of(
            self._end.node
        )

    def _compare_to_start(self, node: Node, offset: int) -> int:
        return compare_points(node, offset, self._start.node, self._start.offset)

    def _compare_to_end(self, node: Node, offset: int) -> int:
        return compare_points(node, offset, self._end.node, self._end.offset)

    # Containment

    def contains_node(self, node: Node) -> bool:
        """True if the whole of ``node`` lies strictly between the boundaries."""
        if node.root() is not self.root:
            return False
        return self._compare_to_start(node, 0) > 0 and self._compare_to_end(node, node.length) < 0

    def partially_contains(self, node: Node) -> bool:
        """True if ``node`` holds exactly one of the two boundaries."""
        holds_start = node.is_inclusive_ancestor_of(self._start.node)
        holds_end = node.is_inclusive_ancestor_of(self._end.node)
        return holds_start != holds_end

    def contained_nodes(self) -> List[Node]:
        """All nodes fully inside the range, in tree order."""
        return [node for node in self.common_ancestor.iter_descendants() if self.contains_node(node)]

    def to_string(self) -> str:
        """Text covered by the range."""
        start_node, start_offset = self._start.node, self._start.offset
        end_node, end_offset = self._end.node, self._end.offset

        if start_node is end_node and isinstance(start_node, TextNode):
            return start_node.data[start_offset:end_offset]

        parts = []
        if isinstance(start_node, TextNode):
            parts.append(start_node.data[start_offset:])
        parts.extend(node.data for node in self.contained_nodes() if isinstance(node, TextNode))
        if isinstance(end_node, TextNode):
            parts.append(end_node.data[:end_offset])
        return "".join(parts)

    # Mutation

    def extract_contents(self) -> DocumentFragment:
        """
        Move the range's content into a new detached fragment.

        Text nodes cut by a boundary keep their outside part in place and
        contribute a clone holding the inside part. Elements cut by a
        boundary are shallow-cloned into the fragment. Afterwards the range
        is collapsed where the content used to be.
        """
        if self._extracted:
            raise RangeContractError("Range contents were already extracted", self._start.node)
        fragment = _extract(self)
        self._extracted = True
        return fragment

    def insert_node(self, node: Node) -> None:
        """
        Insert ``node`` at the start of the range.

        A text node holding the start boundary is split first. When the range
        is collapsed its end moves past the inserted content, so that the
        range then spans it.
        """
        start_node, start_offset = self._start.node, self._start.offset

        if start_node is node:
            raise HierarchyRequestError("Cannot insert a node at a boundary inside itself", node)
        if isinstance(start_node, TextNode):
            if start_node.parent is None:
                raise RangeContractError("Start boundary lies in a detached text node", start_node)
            reference: Optional[Node] = start_node
            parent = start_node.parent
        else:
            reference = start_node.child_at(start_offset)
            parent = start_node
        parent._ensure_insertable(node, reference)

        was_collapsed = self.collapsed

        if isinstance(start_node, TextNode):
            reference = start_node.split_text(start_offset)
            self._shift_after_split(start_node, start_offset, reference)

        if node is reference:
            reference = node.next_sibling
        if node.parent is not None:
            node.parent.remove_child(node)

        new_offset = parent.length if reference is None else reference.index
        count = node.length if isinstance(node, DocumentFragment) else 1
        parent.insert_before(node, reference)

        if was_collapsed:
            self._end = BoundaryPoint(parent, new_offset + count)
        elif self._end.node is parent and self._end.offset > new_offset:
            self._end = BoundaryPoint(parent, self._end.offset + count)
        self._extracted = False

    def _shift_after_split(self, node: TextNode, offset: int, tail: TextNode) -> None:
        end = self._end
        if end.node is node and end.offset > offset:
            self._end = BoundaryPoint(tail, end.offset - offset)
        elif end.node is node.parent and end.offset > node.index:
            self._end = BoundaryPoint(end.node, end.offset + 1)

    def _collapse_to(self, node: Node, offset: int) -> None:
        self._start = BoundaryPoint(node, offset)
        self._end = self._start

    def __repr__(self) -> str:
        return f"<Range {self._start} -> {self._end}>"


def _check_offset(node: Node, offset: int) -> None:
    if offset < 0 or offset > node.length:
        raise IndexSizeError(
            f"Offset {offset} is outside node of length {node.length}", node, offset
        )


def _split_partials(range_: Range, common: Node) -> Tuple[Optional[Node], Optional[Node]]:
    start_node, end_node = range_.start_container, range_.end_container
    first_partial = None
    if not start_node.is_inclusive_ancestor_of(end_node):
        first_partial = next(child for child in common.children if range_.partially_contains(child))
    last_partial = None
    if not end_node.is_inclusive_ancestor_of(start_node):
        last_partial = next(
            child for child in reversed(common.children) if range_.partially_contains(child)
        )
    return first_partial, last_partial


def _extract(range_: Range) -> DocumentFragment:
    fragment = DocumentFragment()
    if range_.collapsed:
        return fragment

    start_node, start_offset = range_.start_container, range_.start_offset
    end_node, end_offset = range_.end_container, range_.end_offset

    if start_node is end_node and isinstance(start_node, TextNode):
        count = end_offset - start_offset
        clone = start_node.clone()
        clone.data = start_node.substring(start_offset, count)
        fragment.append_child(clone)
        start_node.replace_data(start_offset, count)
        range_._collapse_to(start_node, start_offset)
        return fragment

    common = range_.common_ancestor
    first_partial, last_partial = _split_partials(range_, common)
    contained = [child for child in common.children if range_.contains_node(child)]

    if start_node.is_inclusive_ancestor_of(end_node):
        new_node, new_offset = start_node, start_offset
    else:
        reference = start_node
        while reference.parent is not None and not reference.parent.is_inclusive_ancestor_of(end_node):
            reference = reference.parent
        new_node, new_offset = reference.parent, reference.index + 1

    if isinstance(first_partial, TextNode):
        clone = start_node.clone()
        clone.data = start_node.substring(start_offset)
        fragment.append_child(clone)
        start_node.replace_data(start_offset, start_node.length - start_offset)
    elif first_partial is not None:
        clone = first_partial.clone()
        fragment.append_child(clone)
        subrange = Range(start_node, start_offset, first_partial, first_partial.length)
        clone.append_child(_extract(subrange))

    for child in contained:
        fragment.append_child(child)

    if isinstance(last_partial, TextNode):
        clone = end_node.clone()
        clone.data = end_node.substring(0, end_offset)
        fragment.append_child(clone)
        end_node.replace_data(0, end_offset)
    elif last_partial is not None:
        clone = last_partial.clone()
        fragment.append_child(clone)
        subrange = Range(last_partial, 0, end_node, end_offset)
        clone.append_child(_extract(subrange))

    range_._collapse_to(new_node, new_offset)
    return fragment
