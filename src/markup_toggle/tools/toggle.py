"""
Toggle controller: wraps a selection in a markup tag or removes the tag.

The selection is passed into every operation and handed back, so the
controller never reaches for ambient editor state.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.document_model import ElementNode
from ..core.ranges import Range
from ..core.selection import Selection
from .locator import DEFAULT_SEARCH_DEPTH, find_parent_tag


class ToggleController:
    """
    Decides between wrapping and unwrapping for one markup tag.

    Whether the selection is currently wrapped is derived from the tree on
    every call; nothing is cached between calls.
    """

    def __init__(self, tag: str, search_depth: int = DEFAULT_SEARCH_DEPTH):
        self.tag = tag.lower()
        self.search_depth = search_depth
        self.logger = logging.getLogger(__name__)

    def find_wrapper(self, selection: Selection) -> Optional[ElementNode]:
        return find_parent_tag(selection, self.tag, self.search_depth)

    def is_active(self, selection: Selection) -> bool:
        return self.find_wrapper(selection) is not None

    def surround(self, selection: Selection, range_: Optional[Range]) -> Selection:
        """Wrap ``range_`` in the tag, or unwrap the tag enclosing the selection."""
        if range_ is None:
            self.logger.debug("No active selection, nothing to toggle")
            return selection
        if range_.collapsed:
            self.logger.debug("Selection is collapsed, nothing to toggle")
            return selection
        if not range_.is_attached_to(selection.document):
            self.logger.debug("Selection is detached from the document, nothing to toggle")
            return selection

        wrapper = self.find_wrapper(selection)
        if wrapper is not None:
            self.logger.debug(f"Unwrapping <{self.tag}> around {range_}")
            return self.unwrap(selection, wrapper)

        self.logger.debug(f"Wrapping {range_} in <{self.tag}>")
        return self.wrap(selection, range_)

    def wrap(self, selection: Selection, range_: Range) -> Selection:
        """Move the range's content into a new tag element inserted in its place."""
        wrapper = selection.document.create_element(self.tag)
        wrapper.append_child(selection.extract_range_contents(range_))
        selection.insert_node(range_, wrapper)

        selection.expand_to_node(wrapper)
        return selection

    def unwrap(self, selection: Selection, wrapper: ElementNode) -> Selection:
        """Replace ``wrapper`` by its children and select them."""
        parent = wrapper.parent
        if parent is None:
            self.logger.debug(f"<{self.tag}> is already detached, nothing to unwrap")
            return selection
        position = wrapper.index

        range_ = selection.expand_to_node(wrapper)
        content = selection.extract_range_contents(range_)

        # Extraction empties the wrapper; the shell itself still has to go.
        if wrapper.parent is parent:
            parent.remove_child(wrapper)
        range_.set_start(parent, position)
        range_.collapse(to_start=True)

        selection.insert_node(range_, content)

        selection.remove_all_ranges()
        selection.add_range(range_)
        return selection
