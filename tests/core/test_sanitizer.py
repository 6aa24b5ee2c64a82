from markup_toggle.core.document_model import ElementNode, TextNode
from markup_toggle.core.sanitizer import sanitize


def _paragraph():
    return ElementNode("p", [
        TextNode("a"),
        ElementNode("sup", [TextNode("b")], {"class": "x", "title": "t"}),
        ElementNode("font", [TextNode("c"), ElementNode("sup", [TextNode("d")])]),
    ])


def test_empty_rule_keeps_tag_without_attributes():
    paragraph = sanitize(_paragraph(), {"sup": {}})

    assert paragraph.snapshot() == ("p", ["a", ("sup", ["b"]), "c", ("sup", ["d"])])
    assert paragraph.children[1].attributes == {}


def test_true_rule_keeps_every_attribute():
    paragraph = sanitize(_paragraph(), {"sup": True})

    assert paragraph.children[1].attributes == {"class": "x", "title": "t"}


def test_attribute_rule_keeps_listed_attributes():
    paragraph = sanitize(_paragraph(), {"SUP": {"title": True, "class": False}})

    assert paragraph.children[1].attributes == {"title": "t"}


def test_root_is_never_removed():
    paragraph = sanitize(_paragraph(), {})

    assert paragraph.snapshot() == ("p", ["a", "b", "c", "d"])
