"""
Inline tools toggling markup tags around the selection.
"""

from .base import EditorAPI, InlineTool, ToolButton, ToolStyles
from .locator import find_parent_tag
from .toggle import ToggleController
from .superscript import MarkupToggleTool, SuperscriptTool
from .registry import build_sanitize_config, get_all_tools

__all__ = [
    "EditorAPI",
    "InlineTool",
    "ToolButton",
    "ToolStyles",
    "find_parent_tag",
    "ToggleController",
    "MarkupToggleTool",
    "SuperscriptTool",
    "build_sanitize_config",
    "get_all_tools",
]
