import logging
from typing import Any, Dict

from ..core.config_value import ConfigValue, ValueType
from ..core.parse_result import ParseResult
from ..errors import SerializationError
from .comment_state import CommentAccumulator
from .value_parser import ScalarDialect, ValueParser

logger = logging.getLogger(__name__)

# Properties values are flat scalars: no quoting, no inline collections
PROPERTIES_DIALECT = ScalarDialect(quoted=False, arrays=False)

class PropertiesFormat:
    """Flat key=value / key:value files (.properties, .cfg)"""
    name = "properties"

    def parse(self, content: str) -> ParseResult:
        result: Dict[str, Any] = {}
        comments: Dict[str, str] = {}
        pending = CommentAccumulator()

        for line_number, line in enumerate(content.split('\n'), 1):
            stripped = line.strip()

            if stripped.startswith(('#', '!')):
                pending.add(stripped[1:])
                continue

            if not stripped:
                pending.clear()
                continue

            separator = self._find_separator(stripped)
            if separator == -1:
                logger.debug(f"Ignoring properties line {line_number}: {stripped}")
                continue

            key = stripped[:separator].strip()
            result[key] = ValueParser.decode(stripped[separator + 1:], PROPERTIES_DIALECT)

            comment = pending.take()
            if comment:
                comments[key] = comment

        return ParseResult(values=ConfigValue.from_python(result), comments=comments, format=self.name)

    def _find_separator(self, line: str) -> int:
        """Index of whichever of '=' or ':' comes first"""
        positions = [index for index in (line.find('='), line.find(':')) if index != -1]
        return min(positions) if positions else -1

    def serialize(self, tree: ConfigValue) -> str:
        if tree.type != ValueType.MAP:
            raise SerializationError("A properties document must be a flat mapping")
        return '\n'.join(f"{key}={self._format_value(key, value)}" for key, value in tree.entries.items())

    def _format_value(self, key: str, value: ConfigValue) -> str:
        if value.type == ValueType.BOOLEAN:
            return 'true' if value.value else 'false'
        if value.type == ValueType.NUMBER:
            return ValueParser.format_number(value.value)  # type: ignore[arg-type]
        if value.type == ValueType.STRING:
            return value.value  # type: ignore[return-value]
        if value.type == ValueType.NULL:
            return ''
        raise SerializationError(f"Properties value for '{key}' must be a scalar, got {value.type.value}")
