from typing import Iterable, Mapping, Optional

from rich.markup import escape
from rich.tree import Tree

from ..config import EditorConfig
from ..format_parser.core.config_value import ConfigValue
from .value_editor import EditorNode, ValueEditor, WidgetKind

WIDGET_STYLES = {
    WidgetKind.NULL_BADGE: "dim",
    WidgetKind.TOGGLE: "magenta",
    WidgetKind.NUMBER_INPUT: "cyan",
    WidgetKind.TEXT_INPUT: "green",
    WidgetKind.TEXT_AREA: "green",
    WidgetKind.ARRAY_LIST: "yellow",
    WidgetKind.MAP_GROUP: "blue",
}

def describe_node(node: EditorNode) -> str:
    """One line rich markup label for a node"""
    style = WIDGET_STYLES[node.widget]
    label = f"[bold]{escape(node.label)}[/bold]"

    if node.widget == WidgetKind.NULL_BADGE:
        text = f"{label} [{style}]null[/{style}]"
    elif node.widget == WidgetKind.TOGGLE:
        text = f"{label} [{style}]{'on' if node.value.value else 'off'}[/{style}]"
    elif node.widget == WidgetKind.NUMBER_INPUT:
        text = f"{label} [{style}]{node.value.value}[/{style}]"
        if node.slider:
            text += f" [dim](0..{node.slider.maximum}, step {node.slider.step})[/dim]"
    elif node.widget == WidgetKind.TEXT_INPUT:
        text = f"{label} [{style}]{escape(repr(node.value.value))}[/{style}]"
    elif node.widget == WidgetKind.TEXT_AREA:
        first_line = node.value.value.split('\n', 1)[0]
        text = f"{label} [{style}]{escape(repr(first_line[:40]))}...[/{style}]"
    elif node.widget == WidgetKind.ARRAY_LIST:
        text = f"{label} [{style}]{node.item_count} items[/{style}]"
    else:
        text = f"{label} [{style}]{node.item_count} props[/{style}]"

    if node.tooltip:
        text += f"  [italic dim]# {escape(node.tooltip)}[/italic dim]"
    return text

def _add_nodes(branch: Tree, nodes: Iterable[EditorNode]) -> None:
    for node in nodes:
        child = branch.add(describe_node(node))
        if node.children and node.expanded:
            _add_nodes(child, node.children)

def render_nodes(nodes: Iterable[EditorNode], title: str = "config") -> Tree:
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    _add_nodes(tree, nodes)
    return tree

def render_tree(values: ConfigValue, comments: Optional[Mapping[str, str]] = None,
                title: str = "config", config: Optional[EditorConfig] = None) -> Tree:
    """Render a value tree as a rich Tree, collapsed past the expand depth"""
    return render_nodes(ValueEditor(config).build(values, comments), title)
