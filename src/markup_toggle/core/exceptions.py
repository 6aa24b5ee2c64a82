"""
Exception classes for document tree and range operations.

Tree and range primitives raise these when a caller breaks their contract.
The toggle controller is written so that it never triggers them for the
benign cases (absent, collapsed or detached selections).
"""

from __future__ import annotations

from typing import Any, Optional


class MarkupToggleError(Exception):
    """Base exception for all markup-toggle errors."""

    def __init__(self, message: str, node: Optional[Any] = None) -> None:
        super().__init__(message)
        self.node = node


class HierarchyRequestError(MarkupToggleError):
    """Raised when an insertion would produce a malformed tree.

    This includes inserting a node into itself or one of its descendants,
    inserting into a text node, and removing a node from something that
    is not its parent.
    """
    pass


class IndexSizeError(MarkupToggleError):
    """Raised when a boundary offset is negative or beyond a node's length."""

    def __init__(self, message: str, node: Optional[Any] = None, offset: Optional[int] = None) -> None:
        super().__init__(message, node)
        self.offset = offset


class RangeContractError(MarkupToggleError):
    """Raised when a range is used in a way its lifecycle forbids.

    Extracting the same range twice without re-deriving it is the main
    case; it indicates a programming error, not a runtime condition.
    """
    pass
