"""
Locates markup tags enclosing the current selection.
"""

from __future__ import annotations

from typing import Optional

from ..core.document_model import ElementNode, Node
from ..core.selection import Selection

DEFAULT_SEARCH_DEPTH = 10


def _climb(node: Optional[Node], tag: str, search_depth: int) -> Optional[ElementNode]:
    depth = search_depth
    while node is not None and depth > 0 and node.parent is not None:
        if isinstance(node, ElementNode) and node.matches_tag(tag):
            return node
        node = node.parent
        depth -= 1
    return None


def find_parent_tag(
    selection: Selection,
    tag: str,
    search_depth: int = DEFAULT_SEARCH_DEPTH,
) -> Optional[ElementNode]:
    """
    Find an element named ``tag`` holding either selection boundary.

    The climb starts at the boundary node itself and stops after
    ``search_depth`` steps or at the root, which is never a match. When
    both boundaries sit in different matching elements the one around the
    start boundary is returned.
    """
    anchor, focus = selection.anchor_node, selection.focus_node
    if anchor is None:
        return None

    found = _climb(anchor, tag, search_depth)
    if found is None and focus is not anchor:
        found = _climb(focus, tag, search_depth)
    return found
