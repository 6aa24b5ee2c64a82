"""
Selection adapter over a document tree.

Holds at most one range, the user's current selection, and exposes the
four operations inline tools need: read the range, grow it around a node,
extract its content and insert a node where the content was.
"""

from __future__ import annotations

from typing import Optional

from .document_model import Document, DocumentFragment, Node
from .ranges import BoundaryPoint, Range


class Selection:
    """
    The active selection of a document.

    Only one contiguous range is tracked. Ranges whose boundaries are no
    longer attached to the document are reported as no selection.
    """

    def __init__(self, document: Document, range_: Optional[Range] = None):
        self.document = document
        self._range: Optional[Range] = range_

    # Reading

    def current_range(self) -> Optional[Range]:
        """The active range, or None when nothing usable is selected."""
        if self._range is None or not self._range.is_attached_to(self.document):
            return None
        return self._range

    @property
    def range_count(self) -> int:
        return 0 if self.current_range() is None else 1

    @property
    def is_collapsed(self) -> bool:
        current = self.current_range()
        return current is None or current.collapsed

    @property
    def anchor(self) -> Optional[BoundaryPoint]:
        current = self.current_range()
        return current.start if current is not None else None

    @property
    def focus(self) -> Optional[BoundaryPoint]:
        current = self.current_range()
        return current.end if current is not None else None

    @property
    def anchor_node(self) -> Optional[Node]:
        return self.anchor.node if self.anchor is not None else None

    @property
    def focus_node(self) -> Optional[Node]:
        return self.focus.node if self.focus is not None else None

    def to_string(self) -> str:
        current = self.current_range()
        return current.to_string() if current is not None else ""

    # Replacing the range

    def add_range(self, range_: Range) -> None:
        self._range = range_

    def remove_all_ranges(self) -> None:
        self._range = None

    def select(
        self,
        start_node: Node,
        start_offset: int,
        end_node: Optional[Node] = None,
        end_offset: Optional[int] = None,
    ) -> Range:
        range_ = Range(start_node, start_offset, end_node, end_offset)
        self.add_range(range_)
        return range_

    def select_text(self, start: int, end: int, within: Optional[Node] = None) -> Range:
        """Select the characters in ``[start, end)`` counted over the text of ``within``."""
        start_node, start_offset = self.document.point_at(start, within, prefer_next=start < end)
        end_node, end_offset = self.document.point_at(end, within)
        return self.select(start_node, start_offset, end_node, end_offset)

    def expand_to_node(self, node: Node) -> Range:
        """
        Make the selection enclose the whole content of ``node``.

        Calling it again for the same node leaves the selection untouched.
        """
        current = self.current_range()
        if (
            current is not None
            and current.start == BoundaryPoint(node, 0)
            and current.end == BoundaryPoint(node, node.length)
        ):
            return current

        range_ = Range(node)
        range_.select_node_contents(node)
        self.remove_all_ranges()
        self.add_range(range_)
        return range_

    # Mutation

    def extract_range_contents(self, range_: Range) -> DocumentFragment:
        return range_.extract_contents()

    def insert_node(self, range_: Range, node: Node) -> None:
        range_.insert_node(node)
