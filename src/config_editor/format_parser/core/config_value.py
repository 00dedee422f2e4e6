from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

class ValueType(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    MAP = "map"

Scalar = Union[None, bool, int, float, str]

@dataclass(frozen=True, eq=False)
class ConfigValue:
    """Represents one node of a parsed configuration document.

    Arrays carry a tuple of child nodes, maps an insertion ordered dict of
    child nodes. Nodes are never mutated; edits build new ancestors and
    reuse untouched children.
    """
    type: ValueType
    value: Union[Scalar, Tuple['ConfigValue', ...], Dict[str, 'ConfigValue']]

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigValue):
            return NotImplemented
        if self.type != other.type:
            return False
        return self.value == other.value

    def __repr__(self) -> str:
        return f"ConfigValue({self.type.value}, {self.value!r})"

    @staticmethod
    def null() -> 'ConfigValue':
        return ConfigValue(ValueType.NULL, None)

    @staticmethod
    def boolean(value: bool) -> 'ConfigValue':
        return ConfigValue(ValueType.BOOLEAN, bool(value))

    @staticmethod
    def number(value: Union[int, float]) -> 'ConfigValue':
        if isinstance(value, bool):
            raise TypeError("Booleans are not numbers")
        return ConfigValue(ValueType.NUMBER, value)

    @staticmethod
    def string(value: str) -> 'ConfigValue':
        return ConfigValue(ValueType.STRING, value)

    @staticmethod
    def array(items: Iterable['ConfigValue'] = ()) -> 'ConfigValue':
        return ConfigValue(ValueType.ARRAY, tuple(items))

    @staticmethod
    def mapping(entries: Optional[Mapping[str, 'ConfigValue']] = None) -> 'ConfigValue':
        return ConfigValue(ValueType.MAP, dict(entries or {}))

    @property
    def is_container(self) -> bool:
        return self.type in (ValueType.ARRAY, ValueType.MAP)

    @property
    def items(self) -> Tuple['ConfigValue', ...]:
        """Children of an array node"""
        if self.type != ValueType.ARRAY:
            raise TypeError(f"{self.type.value} node has no items")
        return self.value  # type: ignore[return-value]

    @property
    def entries(self) -> Dict[str, 'ConfigValue']:
        """Children of a map node. Treat as read-only."""
        if self.type != ValueType.MAP:
            raise TypeError(f"{self.type.value} node has no entries")
        return self.value  # type: ignore[return-value]

    @classmethod
    def from_python(cls, data: Any) -> 'ConfigValue':
        """Build a tree from plain dict/list/scalar data"""
        if isinstance(data, ConfigValue):
            return data
        if data is None:
            return cls.null()
        if isinstance(data, bool):
            return cls.boolean(data)
        if isinstance(data, (int, float)):
            return cls.number(data)
        if isinstance(data, str):
            return cls.string(data)
        if isinstance(data, (list, tuple)):
            return cls.array(cls.from_python(item) for item in data)
        if isinstance(data, Mapping):
            return cls.mapping({str(k): cls.from_python(v) for k, v in data.items()})
        raise TypeError(f"Unsupported config value: {type(data).__name__}")

    def to_python(self) -> Any:
        """Convert back to plain dict/list/scalar data"""
        if self.type == ValueType.ARRAY:
            return [item.to_python() for item in self.items]
        if self.type == ValueType.MAP:
            return {key: child.to_python() for key, child in self.entries.items()}
        return self.value
