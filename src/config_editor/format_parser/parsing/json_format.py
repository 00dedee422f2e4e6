import json
import logging

from ..core.config_value import ConfigValue
from ..core.parse_result import ParseResult
from ..errors import JsonSyntaxError
from .patterns import JSON_CLOSING_BRACKET_PATTERN, JSON_LINE_COMMENT_PATTERN
from .value_parser import ValueParser

logger = logging.getLogger(__name__)

class JsonFormat:
    """Tolerant JSON: whole-line // comments and trailing commas are accepted.

    Comments are stripped and discarded, so the comment map is always empty.
    """
    name = "json"

    def clean(self, content: str) -> str:
        """Remove // comment lines and trailing commas"""
        content = JSON_LINE_COMMENT_PATTERN.sub('', content)
        return self._strip_trailing_commas(content)

    def _strip_trailing_commas(self, content: str) -> str:
        """Drop commas directly before a closing bracket, outside string literals"""
        pieces = []
        position = 0
        while True:
            index = ValueParser.find_unquoted(content, ',', position)
            if index == -1:
                pieces.append(content[position:])
                return ''.join(pieces)
            trailing = JSON_CLOSING_BRACKET_PATTERN.match(content, index + 1)
            pieces.append(content[position:index] if trailing else content[position:index + 1])
            position = index + 1

    def parse(self, content: str) -> ParseResult:
        try:
            data = json.loads(self.clean(content))
        except json.JSONDecodeError:
            logger.debug("Cleaned JSON did not parse, retrying strict parse")
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise JsonSyntaxError(f"Invalid JSON at line {e.lineno}: {e.msg}") from e

        return ParseResult(values=ConfigValue.from_python(data), comments={}, format=self.name)

    def serialize(self, tree: ConfigValue) -> str:
        return json.dumps(tree.to_python(), indent=2, ensure_ascii=False)
