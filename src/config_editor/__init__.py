"""Multi-format configuration document engine."""

from .format_parser import (
    ConfigFormat, ConfigValue, FormatParser, ParseResult, ValueType, detect_format,
)
from .editor import ValueEditor, apply_edit, filter_tree, render_tree
from .config import EditorConfig
from .models import ConfigFile
from .cache import ParseCache
from .session import (
    ConfigReadError, ConfigSession, ConfigSessionError, ConfigWriteError,
    StructuralEditingUnavailable,
)

__all__ = [
    'ConfigFormat',
    'ConfigValue',
    'FormatParser',
    'ParseResult',
    'ValueType',
    'detect_format',
    'ValueEditor',
    'apply_edit',
    'filter_tree',
    'render_tree',
    'EditorConfig',
    'ConfigFile',
    'ParseCache',
    'ConfigSession',
    'ConfigSessionError',
    'ConfigReadError',
    'ConfigWriteError',
    'StructuralEditingUnavailable'
]
