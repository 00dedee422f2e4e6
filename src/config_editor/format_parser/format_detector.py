from enum import Enum
from pathlib import PurePath
from typing import Union

class ConfigFormat(str, Enum):
    JSON = "json"
    TOML = "toml"
    YAML = "yaml"
    PROPERTIES = "properties"
    TEXT = "text"

EXTENSION_FORMATS = {
    'json': ConfigFormat.JSON,
    'json5': ConfigFormat.JSON,
    'toml': ConfigFormat.TOML,
    'yml': ConfigFormat.YAML,
    'yaml': ConfigFormat.YAML,
    'properties': ConfigFormat.PROPERTIES,
    'cfg': ConfigFormat.PROPERTIES,
}

STRUCTURED_FORMATS = frozenset({
    ConfigFormat.JSON,
    ConfigFormat.TOML,
    ConfigFormat.YAML,
    ConfigFormat.PROPERTIES,
})

def detect_format(filename: Union[str, PurePath]) -> ConfigFormat:
    """Map a filename to the format used to parse it"""
    name = PurePath(filename).name
    if '.' not in name:
        return ConfigFormat.TEXT
    extension = name.rsplit('.', 1)[1].lower()
    return EXTENSION_FORMATS.get(extension, ConfigFormat.TEXT)

def supports_structural_editing(fmt: ConfigFormat) -> bool:
    return fmt in STRUCTURED_FORMATS
