from .tree_edit import (
    AddItem, DeleteKey, Edit, EditError, InsertKey, RemoveItem, SetNumber,
    SetString, SetValue, ToggleBool, apply_edit, default_item, get_node,
)
from .tree_filter import filter_tree
from .value_editor import EditAction, EditorNode, SliderSpec, ValueEditor, WidgetKind
from .render import render_nodes, render_tree

__all__ = [
    'AddItem', 'DeleteKey', 'Edit', 'EditError', 'InsertKey', 'RemoveItem', 'SetNumber',
    'SetString', 'SetValue', 'ToggleBool', 'apply_edit', 'default_item', 'get_node',
    'filter_tree',
    'EditAction', 'EditorNode', 'SliderSpec', 'ValueEditor', 'WidgetKind',
    'render_nodes', 'render_tree'
]
