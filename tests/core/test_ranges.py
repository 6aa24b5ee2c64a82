import pytest

from markup_toggle.core.document_model import Document, DocumentFragment, ElementNode, TextNode
from markup_toggle.core.exceptions import IndexSizeError, RangeContractError
from markup_toggle.core.ranges import BoundaryPoint, Range, compare_points


def _paragraph(*children):
    paragraph = ElementNode("p", list(children))
    Document([paragraph])
    return paragraph


def test_compare_points_in_same_node():
    text = TextNode("abc")
    assert compare_points(text, 1, text, 2) == -1
    assert compare_points(text, 2, text, 2) == 0
    assert compare_points(text, 3, text, 2) == 1


def test_compare_points_between_ancestor_and_descendant():
    first, second = TextNode("a"), TextNode("b")
    paragraph = _paragraph(first, second)

    assert compare_points(paragraph, 1, first, 0) == 1
    assert compare_points(first, 0, paragraph, 1) == -1
    assert compare_points(paragraph, 1, second, 0) == -1
    assert compare_points(second, 1, paragraph, 2) == -1


def test_range_rejects_offsets_beyond_length():
    with pytest.raises(IndexSizeError):
        Range(TextNode("ab"), 3)


def test_set_end_before_start_collapses():
    text = TextNode("abcd")
    _paragraph(text)
    range_ = Range(text, 3)

    range_.set_end(text, 1)

    assert range_.collapsed
    assert range_.start == BoundaryPoint(text, 1)


def test_select_node_and_node_contents():
    inner = ElementNode("sup", [TextNode("x"), TextNode("y")])
    paragraph = _paragraph(TextNode("a"), inner)
    range_ = Range(paragraph)

    range_.select_node(inner)
    assert (range_.start, range_.end) == (BoundaryPoint(paragraph, 1), BoundaryPoint(paragraph, 2))

    range_.select_node_contents(inner)
    assert (range_.start, range_.end) == (BoundaryPoint(inner, 0), BoundaryPoint(inner, 2))


def test_to_string_spans_text_nodes():
    first, second = TextNode("ab"), TextNode("cd")
    _paragraph(first, second)

    assert Range(first, 1, second, 1).to_string() == "bc"


def test_extract_within_one_text_node():
    text = TextNode("hello")
    paragraph = _paragraph(text)
    range_ = Range(text, 1, text, 4)

    fragment = range_.extract_contents()

    assert fragment.snapshot() == ["ell"]
    assert paragraph.snapshot() == ("p", ["ho"])
    assert range_.collapsed
    assert range_.start == BoundaryPoint(text, 1)


def test_extract_across_text_nodes_splits_both_ends():
    first, second = TextNode("ab"), TextNode("cd")
    paragraph = _paragraph(first, second)
    range_ = Range(first, 1, second, 1)

    fragment = range_.extract_contents()

    assert fragment.snapshot() == ["b", "c"]
    assert paragraph.snapshot() == ("p", ["a", "d"])
    assert paragraph.children[0] is first
    assert paragraph.children[1] is second
    assert range_.start == BoundaryPoint(paragraph, 1)
    assert range_.collapsed


def test_extract_moves_fully_contained_elements():
    inner = ElementNode("sup", [TextNode("x")])
    paragraph = _paragraph(TextNode("a"), inner, TextNode("b"))
    range_ = Range(paragraph, 1, paragraph, 2)

    fragment = range_.extract_contents()

    assert fragment.children == [inner]
    assert paragraph.snapshot() == ("p", ["a", "b"])


def test_extract_clones_partially_selected_element():
    emphasis = ElementNode("em", [TextNode("cd")])
    first = TextNode("ab")
    paragraph = _paragraph(first, emphasis, TextNode("ef"))
    range_ = Range(first, 1, emphasis.children[0], 1)

    fragment = range_.extract_contents()

    assert fragment.snapshot() == ["b", ("em", ["c"])]
    assert fragment.children[1] is not emphasis
    assert paragraph.snapshot() == ("p", ["a", ("em", ["d"]), "ef"])
    assert range_.start == BoundaryPoint(paragraph, 1)


def test_extracting_twice_is_a_contract_violation():
    text = TextNode("hello")
    _paragraph(text)
    range_ = Range(text, 1, text, 3)
    range_.extract_contents()

    with pytest.raises(RangeContractError):
        range_.extract_contents()


def test_rederived_range_can_be_extracted_again():
    text = TextNode("hello")
    _paragraph(text)
    range_ = Range(text, 1, text, 3)
    range_.extract_contents()

    range_.set_end(text, 2)

    assert range_.extract_contents().snapshot() == ["l"]


def test_collapsed_range_extracts_empty_fragment():
    text = TextNode("abc")
    paragraph = _paragraph(text)

    fragment = Range(text, 1).extract_contents()

    assert fragment.children == []
    assert paragraph.snapshot() == ("p", ["abc"])


def test_insert_node_splits_text_at_collapsed_start():
    text = TextNode("hlo")
    paragraph = _paragraph(text)
    range_ = Range(text, 1)

    range_.insert_node(ElementNode("sup", [TextNode("el")]))

    assert paragraph.snapshot() == ("p", ["h", ("sup", ["el"]), "lo"])
    assert range_.start == BoundaryPoint(text, 1)
    assert range_.end == BoundaryPoint(paragraph, 2)
    assert range_.to_string() == "el"


def test_insert_fragment_into_collapsed_range_spans_its_children():
    paragraph = _paragraph(TextNode("a"), TextNode("d"))
    range_ = Range(paragraph, 1)

    range_.insert_node(DocumentFragment([TextNode("b"), TextNode("c")]))

    assert paragraph.snapshot() == ("p", ["a", "b", "c", "d"])
    assert range_.end == BoundaryPoint(paragraph, 3)
    assert range_.to_string() == "bc"


def test_insert_node_keeps_end_of_wider_range_in_place():
    first, second = TextNode("abc"), TextNode("de")
    paragraph = _paragraph(first, second)
    range_ = Range(first, 1, paragraph, 2)

    range_.insert_node(ElementNode("br"))

    assert paragraph.snapshot() == ("p", ["a", ("br", []), "bc", "de"])
    assert range_.end == BoundaryPoint(paragraph, 4)


def test_insert_node_allows_a_further_extraction():
    first, second = TextNode("ab"), TextNode("cd")
    _paragraph(first, second)
    range_ = Range(first, 1, second, 1)
    range_.insert_node(range_.extract_contents())

    assert range_.extract_contents().snapshot() == ["b", "c"]


def test_is_attached_to():
    text = TextNode("ab")
    paragraph = ElementNode("p", [text])
    document = Document([paragraph])
    range_ = Range(text, 0, text, 1)

    assert range_.is_attached_to(document)
    paragraph.remove()
    assert not range_.is_attached_to(document)
