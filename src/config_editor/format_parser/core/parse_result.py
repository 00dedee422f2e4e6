from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .config_value import ConfigValue

CommentMap = Mapping[str, str]

@dataclass(frozen=True)
class ParseResult:
    """Tree and comments produced by one parse of a document"""
    values: ConfigValue
    comments: CommentMap = field(default_factory=dict)
    format: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, 'comments', MappingProxyType(dict(self.comments)))
