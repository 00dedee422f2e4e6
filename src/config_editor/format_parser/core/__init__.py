from .config_value import ConfigValue, ValueType
from .config_path import PathLike, PathSegment, format_path, join_index, join_key, split_path
from .parse_result import CommentMap, ParseResult

__all__ = [
    'ConfigValue', 'ValueType',
    'PathLike', 'PathSegment', 'format_path', 'join_index', 'join_key', 'split_path',
    'CommentMap', 'ParseResult'
]
