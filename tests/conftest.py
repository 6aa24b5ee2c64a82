"""Shared fixtures for markup-toggle tests.

Documents are built from a single paragraph whose text nodes are given as
segments, which keeps node boundaries explicit in each test.
"""

import logging

import pytest

from markup_toggle.core.document_model import Document, ElementNode, TextNode
from markup_toggle.core.selection import Selection
from markup_toggle.tools.base import EditorAPI

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def make_paragraph():
    """Factory returning (document, paragraph, selection) for the given segments."""
    def _make(*segments):
        paragraph = ElementNode("p", [TextNode(segment) for segment in segments])
        document = Document([paragraph])
        return document, paragraph, Selection(document)
    return _make


@pytest.fixture
def two_segments(make_paragraph):
    """Paragraph holding text nodes "ab" and "cd"."""
    return make_paragraph("ab", "cd")


@pytest.fixture
def api(two_segments):
    _, _, selection = two_segments
    return EditorAPI(selection=selection)
