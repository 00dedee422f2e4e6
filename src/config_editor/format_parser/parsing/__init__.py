from .comment_state import CommentAccumulator, CommentState
from .value_parser import ScalarDialect, ValueParser
from .json_format import JsonFormat
from .toml_format import TomlFormat
from .yaml_format import YamlFormat
from .properties_format import PropertiesFormat

__all__ = [
    'CommentAccumulator', 'CommentState', 'ScalarDialect', 'ValueParser',
    'JsonFormat', 'TomlFormat', 'YamlFormat', 'PropertiesFormat'
]
