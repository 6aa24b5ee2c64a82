"""
Core document tree, range and selection modules.
"""

from .document_model import Document, DocumentFragment, ElementNode, Node, NodeType, TextNode
from .ranges import BoundaryPoint, Range, compare_points
from .selection import Selection
from .exceptions import HierarchyRequestError, IndexSizeError, MarkupToggleError, RangeContractError

__all__ = [
    "Document",
    "DocumentFragment",
    "ElementNode",
    "Node",
    "NodeType",
    "TextNode",
    "BoundaryPoint",
    "Range",
    "compare_points",
    "Selection",
    "MarkupToggleError",
    "HierarchyRequestError",
    "IndexSizeError",
    "RangeContractError",
]
