import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from ..config import EditorConfig
from ..format_parser.core.config_path import join_index, join_key
from ..format_parser.core.config_value import ConfigValue, ValueType
from .tree_edit import is_integer_value

class WidgetKind(Enum):
    NULL_BADGE = "null"
    TOGGLE = "toggle"
    NUMBER_INPUT = "number"
    TEXT_INPUT = "text"
    TEXT_AREA = "textarea"
    ARRAY_LIST = "array"
    MAP_GROUP = "map"

class EditAction(Enum):
    DELETE = "delete"
    TOGGLE = "toggle"
    SET_NUMBER = "set_number"
    SET_STRING = "set_string"
    ADD_ITEM = "add_item"
    REMOVE_ITEM = "remove_item"

@dataclass(frozen=True)
class SliderSpec:
    minimum: float
    maximum: float
    step: float

@dataclass(frozen=True, eq=False)
class EditorNode:
    """Format independent description of how one value is edited"""
    key: str
    path: str
    label: str
    value: ConfigValue
    widget: WidgetKind
    depth: int
    actions: FrozenSet[EditAction]
    tooltip: Optional[str] = None
    expanded: bool = False
    children: Tuple['EditorNode', ...] = ()
    integer: bool = False
    step: Optional[float] = None
    slider: Optional[SliderSpec] = None

    @property
    def value_type(self) -> ValueType:
        return self.value.type

    @property
    def deletable(self) -> bool:
        return EditAction.DELETE in self.actions

    @property
    def item_count(self) -> int:
        return len(self.children)

    def find(self, path: str) -> Optional['EditorNode']:
        if self.path == path:
            return self
        for child in self.children:
            found = child.find(path)
            if found:
                return found
        return None

def display_name(key: str) -> str:
    """'maxPlayers' -> 'Max Players'"""
    spaced = re.sub(r'([A-Z])', r' \1', key)
    return spaced[:1].upper() + spaced[1:]


NodeBuilder = Callable[[str, str, ConfigValue, int, Mapping[str, str]], EditorNode]

class ValueEditor:
    """Builds editor nodes for a value tree, one builder per value type"""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()
        self._builders: Dict[ValueType, NodeBuilder] = {
            ValueType.NULL: self._null_node,
            ValueType.BOOLEAN: self._bool_node,
            ValueType.NUMBER: self._number_node,
            ValueType.STRING: self._string_node,
            ValueType.ARRAY: self._array_node,
            ValueType.MAP: self._map_node,
        }
        missing = set(ValueType) - set(self._builders)
        if missing:
            raise TypeError(f"No editor for value types: {sorted(t.value for t in missing)}")

    def build(self, tree: ConfigValue, comments: Optional[Mapping[str, str]] = None) -> Tuple[EditorNode, ...]:
        """Editor nodes for the top-level entries of a map tree"""
        if tree.type != ValueType.MAP:
            raise TypeError(f"Structural editing needs a map at the root, got {tree.type.value}")
        return tuple(
            self.build_node(key, key, value, 0, comments or {})
            for key, value in tree.entries.items()
        )

    def build_node(self, key: str, path: str, value: ConfigValue, depth: int,
                   comments: Mapping[str, str]) -> EditorNode:
        return self._builders[value.type](key, path, value, depth, comments)

    def _base(self, key: str, path: str, value: ConfigValue, depth: int,
              comments: Mapping[str, str]) -> dict:
        return {
            'key': key,
            'path': path,
            'label': display_name(key),
            'value': value,
            'depth': depth,
            'tooltip': comments.get(path),
        }

    def _null_node(self, key, path, value, depth, comments) -> EditorNode:
        return EditorNode(
            widget=WidgetKind.NULL_BADGE,
            actions=frozenset({EditAction.DELETE}),
            **self._base(key, path, value, depth, comments)
        )

    def _bool_node(self, key, path, value, depth, comments) -> EditorNode:
        return EditorNode(
            widget=WidgetKind.TOGGLE,
            actions=frozenset({EditAction.TOGGLE, EditAction.DELETE}),
            **self._base(key, path, value, depth, comments)
        )

    def _number_node(self, key, path, value, depth, comments) -> EditorNode:
        integer = is_integer_value(value)
        step = 1 if integer else 0.1
        slider = None
        if 0 <= value.value <= self.config.slider_limit:
            slider = SliderSpec(
                minimum=0,
                maximum=max(self.config.min_slider_max, value.value * 2),
                step=step
            )
        return EditorNode(
            widget=WidgetKind.NUMBER_INPUT,
            actions=frozenset({EditAction.SET_NUMBER, EditAction.DELETE}),
            integer=integer,
            step=step,
            slider=slider,
            **self._base(key, path, value, depth, comments)
        )

    def _string_node(self, key, path, value, depth, comments) -> EditorNode:
        text = value.value
        long_text = len(text) > self.config.long_text_threshold or '\n' in text
        return EditorNode(
            widget=WidgetKind.TEXT_AREA if long_text else WidgetKind.TEXT_INPUT,
            actions=frozenset({EditAction.SET_STRING, EditAction.DELETE}),
            **self._base(key, path, value, depth, comments)
        )

    def _array_node(self, key, path, value, depth, comments) -> EditorNode:
        children = tuple(
            self.build_node(str(index), join_index(path, index), item, depth + 1, comments)
            for index, item in enumerate(value.items)
        )
        return EditorNode(
            widget=WidgetKind.ARRAY_LIST,
            actions=frozenset({EditAction.ADD_ITEM, EditAction.REMOVE_ITEM, EditAction.DELETE}),
            expanded=depth < self.config.expand_depth,
            children=children,
            **self._base(key, path, value, depth, comments)
        )

    def _map_node(self, key, path, value, depth, comments) -> EditorNode:
        children = tuple(
            self.build_node(child_key, join_key(path, child_key), child, depth + 1, comments)
            for child_key, child in value.entries.items()
        )
        return EditorNode(
            widget=WidgetKind.MAP_GROUP,
            actions=frozenset({EditAction.DELETE}),
            expanded=depth < self.config.expand_depth,
            children=children,
            **self._base(key, path, value, depth, comments)
        )
