"""
Markup toggle tools: wrap the selected fragment in an inline tag, or unwrap it.
"""

from __future__ import annotations

from typing import Optional

from ..core.ranges import Range
from ..core.sanitizer import SanitizeConfig
from .base import EditorAPI, InlineTool, ToolButton
from .locator import DEFAULT_SEARCH_DEPTH
from .toggle import ToggleController

SUPERSCRIPT_ICON = (
    '<svg width="20" height="20"><path d="M13.606 6.94l-5.143 5.143 5.143 5.143-1.58 1.58-5.143-5.143'
    '-5.143 5.143-1.58-1.58 5.143-5.143-5.143-5.143 1.58-1.58 5.143 5.143 5.143-5.143 1.58 1.58z'
    'M20.16 8.722h-5.468v-1.12l0.997-0.919c0.852-0.717 1.479-1.322 1.905-1.826 0.415-0.493 0.627-0.952'
    ' 0.639-1.378 0.011-0.314-0.090-0.583-0.303-0.784-0.202-0.213-0.527-0.314-0.964-0.325-0.347 0.011'
    '-0.65 0.078-0.941 0.19l-0.739 0.437-0.504-1.311c0.303-0.247 0.661-0.437 1.098-0.594s0.919-0.213'
    ' 1.445-0.213c0.874 0 1.546 0.224 1.994 0.683 0.448 0.437 0.695 1.042 0.695 1.759-0.011 0.627'
    '-0.213 1.21-0.605 1.737-0.381 0.538-0.852 1.042-1.423 1.524l-0.717 0.583v0.022h2.891v1.535z">'
    '</path></svg>'
)


class MarkupToggleTool(InlineTool):
    """
    Inline tool toggling one markup tag around the selection.

    The tag is fixed when the tool is constructed. Several instances with
    different tags can live side by side.
    """

    name = "markup"
    title = "Markup"
    tag = "span"
    icon = ""

    def __init__(
        self,
        api: EditorAPI,
        tag: Optional[str] = None,
        search_depth: int = DEFAULT_SEARCH_DEPTH,
    ):
        super().__init__(api)
        self.tag = (tag or self.tag).lower()
        self.controller = ToggleController(self.tag, search_depth)
        self.icon_classes = {
            "base": api.styles.inline_tool_button,
            "active": api.styles.inline_tool_button_active,
        }

    def render(self) -> ToolButton:
        self.button = ToolButton(type="button", inner_html=self.toolbox_icon)
        self.button.add_class(self.icon_classes["base"])
        return self.button

    def surround(self, range_: Optional[Range]) -> None:
        self.controller.surround(self.api.selection, range_)

    def check_state(self) -> bool:
        active = self.controller.is_active(self.api.selection)
        if self.button is not None:
            self.button.toggle_class(self.icon_classes["active"], active)
        return active

    @property
    def toolbox_icon(self) -> str:
        return self.icon

    def sanitize_rules(self) -> SanitizeConfig:
        return {self.tag: {}}

    @classmethod
    def sanitize(cls) -> SanitizeConfig:
        """Rule for the class's default tag, for hosts that register classes."""
        return {cls.tag: {}}


class SuperscriptTool(MarkupToggleTool):
    """Wraps the selection in ``<sup>``."""

    name = "superscript"
    title = "Superscript"
    tag = "sup"
    icon = SUPERSCRIPT_ICON
