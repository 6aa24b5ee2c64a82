"""
Catalogue of available inline tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Type

from ..core.sanitizer import SanitizeConfig
from .base import EditorAPI, InlineTool
from .superscript import MarkupToggleTool, SuperscriptTool

if TYPE_CHECKING:
    from ..config import MarkupToggleConfig


BUILTIN_TOOLS: Dict[str, Type[MarkupToggleTool]] = {
    SuperscriptTool.name: SuperscriptTool,
}


def get_tool_class(name: str) -> Optional[Type[MarkupToggleTool]]:
    return BUILTIN_TOOLS.get(name)


def get_all_tools(api: EditorAPI, config: Optional[MarkupToggleConfig] = None) -> List[InlineTool]:
    """Instantiate the built-in tools plus any tools declared in ``config``."""
    search_depth = config.search_depth if config is not None else None
    tools: List[InlineTool] = []

    for tool_class in BUILTIN_TOOLS.values():
        if search_depth is None:
            tools.append(tool_class(api))
        else:
            tools.append(tool_class(api, search_depth=search_depth))

    if config is not None:
        for name, settings in config.tools.items():
            tool = MarkupToggleTool(api, tag=settings.tag, search_depth=settings.search_depth)
            tool.name = name
            tool.title = settings.title or name.title()
            tools.append(tool)

    return tools


def find_tool_for_tag(tools: Iterable[InlineTool], tag: str) -> Optional[InlineTool]:
    tag = tag.lower()
    for tool in tools:
        if isinstance(tool, MarkupToggleTool) and tool.tag == tag:
            return tool
    return None


def build_sanitize_config(tools: Iterable[InlineTool]) -> SanitizeConfig:
    """Merge the sanitize rules declared by ``tools``."""
    rules: SanitizeConfig = {}
    for tool in tools:
        rules.update(tool.sanitize_rules())
    return rules
