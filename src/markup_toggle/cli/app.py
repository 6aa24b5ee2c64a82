"""
Main CLI application for markup-toggle.

Provides a Typer-based command-line interface for trying inline markup
toggles on small in-memory paragraphs.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..config import get_config_manager, load_config
from ..core.document_model import Document, ElementNode, Node, TextNode
from ..core.exceptions import IndexSizeError
from ..core.sanitizer import sanitize
from ..core.selection import Selection
from ..tools.base import EditorAPI
from ..tools.registry import build_sanitize_config, find_tool_for_tag, get_all_tools
from ..tools.superscript import MarkupToggleTool

# Initialize Typer app
app = typer.Typer(
    name="markup-toggle",
    help="Toggle inline markup tags around a selection",
    add_completion=False,
    rich_markup_mode="rich"
)

# Global console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log toggle decisions"),
) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else load_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


SEGMENT_TAG = re.compile(r"^<([A-Za-z][A-Za-z0-9]*)>(.*)$", re.DOTALL)


def _build_segment(segment: str) -> Node:
    """``<tag>text`` becomes an element holding one text node."""
    match = SEGMENT_TAG.match(segment)
    if match:
        return ElementNode(match.group(1), [TextNode(match.group(2))])
    return TextNode(segment)


def _build_paragraph(segments: List[str]) -> Tuple[Document, ElementNode]:
    paragraph = ElementNode("p", [_build_segment(segment) for segment in segments])
    return Document([paragraph]), paragraph


def _build_tree(node: Node, tree: Optional[Tree] = None) -> Tree:
    if isinstance(node, TextNode):
        label = f"[green]{escape(repr(node.data))}[/green]"
    elif isinstance(node, ElementNode):
        label = f"[cyan]<{node.tag}>[/cyan]"
    else:
        label = f"[dim]{node.node_type.value}[/dim]"

    branch = Tree(label) if tree is None else tree.add(label)
    for child in node.children:
        _build_tree(child, branch)
    return branch


def _open(
    segments: List[str], start: int, end: int, tag: Optional[str], clean: bool = False
) -> Tuple[Selection, ElementNode, MarkupToggleTool]:
    if start > end:
        console.print(f"[red]Error: start ({start}) is after end ({end})[/red]")
        raise typer.Exit(1)

    config = load_config()
    document, paragraph = _build_paragraph(segments)
    selection = Selection(document)

    api = EditorAPI(selection=selection, styles=config.styles)
    tag = (tag or config.default_tag).lower()
    available = get_all_tools(api, config)
    tool = find_tool_for_tag(available, tag)
    if tool is None:
        tool = MarkupToggleTool(api, tag=tag, search_depth=config.search_depth)
        available.append(tool)

    if clean:
        sanitize(paragraph, build_sanitize_config(available))

    try:
        selection.select_text(start, end, within=paragraph)
    except IndexSizeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    tool.render()
    return selection, paragraph, tool


@app.command()
def toggle(
    segments: List[str] = typer.Argument(..., help="Text of each text node in the paragraph"),
    start: int = typer.Option(..., "--start", "-s", help="First selected character"),
    end: int = typer.Option(..., "--end", "-e", help="Character after the selection"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Markup tag (default from config)"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="How many times to toggle"),
    clean: bool = typer.Option(
        False, "--sanitize", help="Drop tags the registered tools do not allow before selecting"
    ),
) -> None:
    """
    Toggle a markup tag around a character range of a paragraph.

    Each SEGMENT becomes its own text node, so selections can span node
    boundaries. A segment written as <tag>text becomes an element.
    """
    selection, paragraph, tool = _open(segments, start, end, tag, clean)

    for _ in range(times):
        tool.surround(selection.current_range())

    console.print(_build_tree(paragraph))
    console.print(f"Selection: {escape(repr(selection.to_string()))}")
    console.print(f"Active: {'yes' if tool.check_state() else 'no'}")


@app.command()
def state(
    segments: List[str] = typer.Argument(..., help="Text of each text node in the paragraph"),
    start: int = typer.Option(..., "--start", "-s", help="First selected character"),
    end: int = typer.Option(..., "--end", "-e", help="Character after the selection"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Markup tag (default from config)"),
) -> None:
    """Report whether the toggle is active for a selection."""
    _, _, tool = _open(segments, start, end, tag)
    console.print(f"Active: {'yes' if tool.check_state() else 'no'}")


@app.command()
def tools() -> None:
    """List the available inline tools."""
    config = load_config()
    api = EditorAPI(selection=Selection(Document()), styles=config.styles)
    available = get_all_tools(api, config)

    tools_table = Table(title="Inline Tools")
    tools_table.add_column("Name", style="cyan")
    tools_table.add_column("Title")
    tools_table.add_column("Tag", style="green")
    tools_table.add_column("Sanitize")

    for tool in available:
        info = tool.describe()
        tag = getattr(tool, "tag", "")
        tools_table.add_row(info["name"], info["title"], tag, escape(str(info["sanitize"])))

    console.print(tools_table)
    console.print(f"Merged sanitize rules: {escape(str(build_sanitize_config(available)))}")


@app.command("config")
def show_config(
    create_default: bool = typer.Option(False, "--create-default", help="Create default config file"),
) -> None:
    """Show the effective configuration."""
    config_manager = get_config_manager()

    if create_default:
        config_manager.create_default_config()
        console.print(f"[green]Created {escape(str(config_manager.config_file))}[/green]")
        return

    info = config_manager.get_config_info()

    config_table = Table(title="Configuration", show_header=False)
    config_table.add_column("Setting", style="cyan")
    config_table.add_column("Value", style="green")

    for key, value in info.items():
        config_table.add_row(key, escape(str(value)))

    console.print(config_table)


if __name__ == "__main__":
    app()
