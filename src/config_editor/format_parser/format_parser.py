import logging
from typing import Dict, Optional, Protocol, Union

from .core.config_value import ConfigValue
from .core.parse_result import ParseResult
from .errors import ParsingError, UnsupportedFormatError
from .format_detector import ConfigFormat
from .parsing.json_format import JsonFormat
from .parsing.properties_format import PropertiesFormat
from .parsing.toml_format import TomlFormat
from .parsing.yaml_format import YamlFormat

logger = logging.getLogger(__name__)

class DocumentFormat(Protocol):
    """A parser/serializer pair for one format"""
    name: str

    def parse(self, content: str) -> ParseResult: ...

    def serialize(self, tree: ConfigValue) -> str: ...


class FormatParser:
    def __init__(self) -> None:
        self.formats: Dict[ConfigFormat, DocumentFormat] = {
            ConfigFormat.JSON: JsonFormat(),
            ConfigFormat.TOML: TomlFormat(),
            ConfigFormat.YAML: YamlFormat(),
            ConfigFormat.PROPERTIES: PropertiesFormat(),
        }

    def get_format(self, fmt: Union[ConfigFormat, str]) -> DocumentFormat:
        try:
            return self.formats[ConfigFormat(fmt)]
        except (KeyError, ValueError):
            raise UnsupportedFormatError(f"No structural parser for format: {fmt}")

    def parse(self, content: str, fmt: Union[ConfigFormat, str]) -> ParseResult:
        """Parse content into a value tree and comment map"""
        document_format = self.get_format(fmt)
        content = content.replace('\r\n', '\n').replace('\r', '\n')
        try:
            return document_format.parse(content)
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(f"Failed to parse {document_format.name} content: {str(e)}") from e

    def try_parse(self, content: str, fmt: Union[ConfigFormat, str]) -> Optional[ParseResult]:
        """Parse content, returning None instead of raising"""
        try:
            return self.parse(content, fmt)
        except ParsingError as e:
            logger.warning(f"Structural parse unavailable ({fmt}): {str(e)}")
            return None

    def serialize(self, tree: ConfigValue, fmt: Union[ConfigFormat, str]) -> str:
        """Render a value tree as text in the given format"""
        return self.get_format(fmt).serialize(tree)
