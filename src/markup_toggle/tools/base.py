"""
Host-facing surface for inline tools.

An editing host hands each tool an ``EditorAPI`` and then calls ``render``
once, ``surround`` on activation and ``check_state`` on every selection
change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set

from ..core.ranges import Range
from ..core.sanitizer import SanitizeConfig
from ..core.selection import Selection


@dataclass
class ToolStyles:
    """CSS class names the host uses for inline toolbar buttons."""
    inline_tool_button: str = "ce-inline-tool"
    inline_tool_button_active: str = "ce-inline-tool--active"


@dataclass
class ToolButton:
    """Handle for a toolbar button created by ``render``."""

    type: str = "button"
    classes: Set[str] = field(default_factory=set)
    inner_html: str = ""

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def toggle_class(self, name: str, force: Optional[bool] = None) -> bool:
        """Add or remove ``name``; ``force`` pins the outcome. Returns presence."""
        present = (name not in self.classes) if force is None else force
        if present:
            self.classes.add(name)
        else:
            self.classes.discard(name)
        return present


@dataclass
class EditorAPI:
    """What the host exposes to a tool: the selection and button styles."""
    selection: Selection
    styles: ToolStyles = field(default_factory=ToolStyles)


class InlineTool(ABC):
    """Base class for all inline toolbar tools."""

    name: str
    title: str
    is_inline: bool = True

    def __init__(self, api: EditorAPI):
        self.api = api
        self.button: Optional[ToolButton] = None

    @abstractmethod
    def render(self) -> ToolButton:
        """Create the toolbar button."""
        pass

    @abstractmethod
    def surround(self, range_: Optional[Range]) -> None:
        """Apply the tool to the selected range."""
        pass

    @abstractmethod
    def check_state(self) -> bool:
        """Reflect whether the tool is active for the current selection."""
        pass

    @abstractmethod
    def sanitize_rules(self) -> SanitizeConfig:
        """Tags and attributes this tool's output may keep."""
        pass

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "is_inline": self.is_inline,
            "sanitize": self.sanitize_rules(),
        }
