from .core import ConfigValue, ValueType, ParseResult, CommentMap
from .parsing import CommentAccumulator, CommentState, ValueParser
from .format_detector import ConfigFormat, detect_format, supports_structural_editing
from .format_parser import FormatParser
from .errors import ParsingError, SerializationError

__all__ = [
    'ConfigValue', 'ValueType', 'ParseResult', 'CommentMap',
    'CommentAccumulator', 'CommentState', 'ValueParser',
    'ConfigFormat', 'detect_format', 'supports_structural_editing',
    'FormatParser', 'ParsingError', 'SerializationError'
]
