"""Pure edits over a ConfigValue tree.

Every edit returns a new root. Only the ancestors of the edited node are
copied; all other subtrees are shared with the previous root.
"""
import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Union

from ..format_parser.core.config_path import PathLike, PathSegment, format_path, split_path
from ..format_parser.core.config_value import ConfigValue, ValueType

logger = logging.getLogger(__name__)

class EditError(Exception):
    """Error for edits that do not fit the addressed node"""
    pass


@dataclass(frozen=True)
class SetValue:
    value: ConfigValue

@dataclass(frozen=True)
class ToggleBool:
    pass

@dataclass(frozen=True)
class SetNumber:
    """Number typed into a text field"""
    text: str

@dataclass(frozen=True)
class SetString:
    text: str

@dataclass(frozen=True)
class DeleteKey:
    """Remove the addressed map key or array item from its parent"""
    pass

@dataclass(frozen=True)
class InsertKey:
    key: str
    value: ConfigValue

@dataclass(frozen=True)
class AddItem:
    pass

@dataclass(frozen=True)
class RemoveItem:
    index: int

Edit = Union[SetValue, ToggleBool, SetNumber, SetString, DeleteKey, InsertKey, AddItem, RemoveItem]


def get_node(tree: ConfigValue, path: PathLike) -> ConfigValue:
    """Resolve a path to the node it addresses"""
    node = tree
    for segment in split_path(path):
        node = _child(node, segment, path)
    return node

def _child(node: ConfigValue, segment: PathSegment, path: PathLike) -> ConfigValue:
    if node.type == ValueType.MAP and isinstance(segment, str):
        if segment in node.entries:
            return node.entries[segment]
    elif node.type == ValueType.ARRAY and isinstance(segment, int):
        if 0 <= segment < len(node.items):
            return node.items[segment]
    raise EditError(f"Path not found: {_describe(path)}")

def _describe(path: PathLike) -> str:
    return path if isinstance(path, str) else format_path(list(path))

def _replace(node: ConfigValue, segments: List[PathSegment],
             update: Callable[[ConfigValue], ConfigValue], path: PathLike) -> ConfigValue:
    """Rebuild the ancestor chain down to segments, applying update at the end"""
    if not segments:
        return update(node)

    segment, rest = segments[0], segments[1:]
    child = _child(node, segment, path)
    new_child = _replace(child, rest, update, path)
    if new_child is child:
        return node

    if node.type == ValueType.MAP:
        entries = dict(node.entries)
        entries[segment] = new_child  # type: ignore[index]
        return ConfigValue.mapping(entries)

    items = list(node.items)
    items[segment] = new_child  # type: ignore[index]
    return ConfigValue.array(items)

def default_item(items: tuple) -> ConfigValue:
    """Value appended by 'add item', typed after the first element"""
    if items:
        first = items[0]
        if first.type == ValueType.BOOLEAN:
            return ConfigValue.boolean(False)
        if first.type == ValueType.NUMBER:
            return ConfigValue.number(0)
    return ConfigValue.string("")

def parse_number_text(text: str, integer: bool) -> Union[int, float, None]:
    """Read a number field; None when the text is not a finite number"""
    try:
        number = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if integer else number

def is_integer_value(node: ConfigValue) -> bool:
    return node.type == ValueType.NUMBER and float(node.value).is_integer()  # type: ignore[arg-type]

def _expect(node: ConfigValue, value_type: ValueType, edit: Edit, path: PathLike) -> None:
    if node.type != value_type:
        raise EditError(
            f"{type(edit).__name__} needs a {value_type.value} at {_describe(path)}, "
            f"found {node.type.value}"
        )

def apply_edit(tree: ConfigValue, path: PathLike, edit: Edit) -> ConfigValue:
    """Apply one edit at path, returning the new root"""
    segments = split_path(path)

    if isinstance(edit, DeleteKey):
        if not segments:
            raise EditError("Cannot delete the document root")
        return _replace(tree, segments[:-1], lambda parent: _remove(parent, segments[-1], path), path)

    def update(node: ConfigValue) -> ConfigValue:
        if isinstance(edit, SetValue):
            return edit.value
        if isinstance(edit, ToggleBool):
            _expect(node, ValueType.BOOLEAN, edit, path)
            return ConfigValue.boolean(not node.value)
        if isinstance(edit, SetNumber):
            _expect(node, ValueType.NUMBER, edit, path)
            number = parse_number_text(edit.text, is_integer_value(node))
            if number is None:
                logger.debug(f"Ignoring invalid number '{edit.text}' for {_describe(path)}")
                return node
            return ConfigValue.number(number)
        if isinstance(edit, SetString):
            _expect(node, ValueType.STRING, edit, path)
            return ConfigValue.string(edit.text)
        if isinstance(edit, InsertKey):
            _expect(node, ValueType.MAP, edit, path)
            if edit.key in node.entries:
                raise EditError(f"Key already exists: {edit.key}")
            return ConfigValue.mapping({**node.entries, edit.key: edit.value})
        if isinstance(edit, AddItem):
            _expect(node, ValueType.ARRAY, edit, path)
            return ConfigValue.array(node.items + (default_item(node.items),))
        if isinstance(edit, RemoveItem):
            _expect(node, ValueType.ARRAY, edit, path)
            return _remove(node, edit.index, path)
        raise EditError(f"Unknown edit: {edit!r}")

    return _replace(tree, segments, update, path)

def _remove(parent: ConfigValue, segment: PathSegment, path: PathLike) -> ConfigValue:
    _child(parent, segment, path)
    if parent.type == ValueType.MAP:
        return ConfigValue.mapping({k: v for k, v in parent.entries.items() if k != segment})
    return ConfigValue.array(item for i, item in enumerate(parent.items) if i != segment)
