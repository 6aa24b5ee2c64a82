from markup_toggle.tools.base import EditorAPI, ToolButton, ToolStyles
from markup_toggle.tools.superscript import SUPERSCRIPT_ICON, MarkupToggleTool, SuperscriptTool


def test_superscript_is_an_inline_tool():
    assert SuperscriptTool.is_inline is True
    assert SuperscriptTool.sanitize() == {"sup": {}}


def test_render_creates_button_with_base_class_and_icon(api):
    tool = SuperscriptTool(api)

    button = tool.render()

    assert isinstance(button, ToolButton)
    assert tool.button is button
    assert button.type == "button"
    assert button.has_class("ce-inline-tool")
    assert button.inner_html == SUPERSCRIPT_ICON


def test_surround_uses_host_selection(api, two_segments):
    _, paragraph, selection = two_segments
    tool = SuperscriptTool(api)
    selection.select_text(1, 3)

    tool.surround(selection.current_range())
    assert paragraph.snapshot() == ("p", ["a", ("sup", ["b", "c"]), "d"])

    tool.surround(selection.current_range())
    assert paragraph.snapshot() == ("p", ["a", "b", "c", "d"])


def test_surround_without_range_is_a_noop(api, two_segments):
    _, paragraph, _ = two_segments

    SuperscriptTool(api).surround(None)

    assert paragraph.snapshot() == ("p", ["ab", "cd"])


def test_check_state_toggles_active_class(api, two_segments):
    _, paragraph, selection = two_segments
    tool = SuperscriptTool(api)
    button = tool.render()
    selection.select_text(1, 3)
    tool.surround(selection.current_range())

    assert tool.check_state() is True
    assert button.has_class("ce-inline-tool--active")

    selection.select(paragraph.children[0], 0, paragraph.children[0], 1)
    assert tool.check_state() is False
    assert not button.has_class("ce-inline-tool--active")
    assert button.has_class("ce-inline-tool")


def test_check_state_before_render_only_reports(api, two_segments):
    _, _, selection = two_segments
    selection.select_text(0, 1)

    assert SuperscriptTool(api).check_state() is False


def test_custom_styles_are_used(two_segments):
    _, _, selection = two_segments
    styles = ToolStyles(inline_tool_button="btn", inline_tool_button_active="btn--on")
    tool = SuperscriptTool(EditorAPI(selection=selection, styles=styles))

    assert tool.render().classes == {"btn"}


def test_tag_is_fixed_at_construction(api, two_segments):
    _, paragraph, selection = two_segments
    tool = MarkupToggleTool(api, tag="SUB")
    selection.select_text(0, 2)

    tool.surround(selection.current_range())

    assert tool.sanitize_rules() == {"sub": {}}
    assert paragraph.snapshot() == ("p", ["", ("sub", ["ab"]), "", "cd"])
    assert tool.describe() == {
        "name": "markup",
        "title": "Markup",
        "is_inline": True,
        "sanitize": {"sub": {}},
    }


def test_toggle_class_force():
    button = ToolButton()

    assert button.toggle_class("on") is True
    assert button.toggle_class("on") is False
    assert button.toggle_class("on", force=False) is False
    assert button.toggle_class("on", force=True) is True
    assert button.classes == {"on"}
