import logging
from typing import Any, Dict, List, Tuple

from ..core.config_path import join_key
from ..core.config_value import ConfigValue, ValueType
from ..core.parse_result import ParseResult
from ..errors import SerializationError, TomlSyntaxError
from .comment_state import CommentAccumulator
from .patterns import BARE_KEY_PATTERN, TOML_SECTION_PATTERN, TOML_TABLE_ARRAY_PATTERN
from .value_parser import ScalarDialect, ValueParser

logger = logging.getLogger(__name__)

TOML_DIALECT = ScalarDialect(inline_maps=True, map_separator='=')

class TomlFormat:
    """Line oriented TOML subset: tables, key/value pairs, inline arrays/tables"""
    name = "toml"

    def parse(self, content: str) -> ParseResult:
        root: Dict[str, Any] = {}
        comments: Dict[str, str] = {}
        section = root
        section_path = ""
        pending = CommentAccumulator()

        for line_number, line in enumerate(content.split('\n'), 1):
            stripped = line.strip()

            if stripped.startswith('#'):
                pending.add(stripped[1:])
                continue

            if not stripped:
                pending.clear()
                continue

            if stripped.startswith('['):
                header, trailing = ValueParser.split_comment(stripped)
                if TOML_TABLE_ARRAY_PATTERN.match(header):
                    raise TomlSyntaxError(f"Line {line_number}: arrays of tables are not supported")
                match = TOML_SECTION_PATTERN.match(header)
                if match:
                    segments = self._split_dotted(match.group(1))
                    section = self._open_section(root, segments, line_number)
                    section_path = '.'.join(segments)
                    if trailing:
                        pending.replace(trailing)
                    comment = pending.take()
                    if comment:
                        comments[section_path] = comment
                    continue

            separator = ValueParser.find_unquoted(stripped, '=')
            if separator == -1:
                logger.debug(f"Ignoring TOML line {line_number}: {stripped}")
                continue

            key = ValueParser.decode_key(stripped[:separator])
            raw_value, trailing = ValueParser.split_comment(stripped[separator + 1:])
            self._check_single_line(raw_value, line_number)
            if trailing:
                pending.replace(trailing)

            section[key] = ValueParser.decode(raw_value, TOML_DIALECT)

            comment = pending.take()
            if comment:
                comments[join_key(section_path, key)] = comment

        return ParseResult(values=ConfigValue.from_python(root), comments=comments, format=self.name)

    def _split_dotted(self, header: str) -> List[str]:
        """Split a table header on dots outside quotes"""
        segments = []
        start = 0
        while True:
            index = ValueParser.find_unquoted(header, '.', start)
            if index == -1:
                segments.append(ValueParser.decode_key(header[start:]))
                return segments
            segments.append(ValueParser.decode_key(header[start:index]))
            start = index + 1

    def _open_section(self, root: Dict[str, Any], segments: List[str], line_number: int) -> Dict[str, Any]:
        """Walk to the table named by the header, creating tables on the way"""
        table = root
        for segment in segments:
            existing = table.get(segment)
            if existing is None:
                existing = table[segment] = {}
            elif not isinstance(existing, dict):
                raise TomlSyntaxError(
                    f"Line {line_number}: table '{segment}' collides with an existing value"
                )
            table = existing
        return table

    def _check_single_line(self, raw_value: str, line_number: int) -> None:
        if raw_value.startswith(('"""', "'''")):
            raise TomlSyntaxError(f"Line {line_number}: multi-line strings are not supported")
        if raw_value.startswith('[') and not raw_value.endswith(']'):
            raise TomlSyntaxError(f"Line {line_number}: multi-line arrays are not supported")

    def serialize(self, tree: ConfigValue) -> str:
        if tree.type != ValueType.MAP:
            raise SerializationError("A TOML document must be a table")
        return self._serialize_table(tree, "")

    def _serialize_table(self, table: ConfigValue, prefix: str) -> str:
        result = ""
        sections: List[Tuple[str, ConfigValue]] = []

        for key, value in table.entries.items():
            if value.type == ValueType.MAP:
                sections.append((join_key(prefix, self._format_key(key)), value))
            else:
                result += f"{self._format_key(key)} = {self._format_value(value)}\n"

        for section_key, section in sections:
            result += f"\n[{section_key}]\n"
            result += self._serialize_table(section, section_key)

        return result

    def _format_key(self, key: str) -> str:
        return key if BARE_KEY_PATTERN.match(key) else ValueParser.quote(key)

    def _format_value(self, value: ConfigValue) -> str:
        if value.type == ValueType.BOOLEAN:
            return 'true' if value.value else 'false'
        if value.type == ValueType.NUMBER:
            return ValueParser.format_number(value.value)  # type: ignore[arg-type]
        if value.type == ValueType.STRING:
            return ValueParser.quote(value.value)  # type: ignore[arg-type]
        if value.type == ValueType.ARRAY:
            return '[' + ', '.join(self._format_value(item) for item in value.items) + ']'
        if value.type == ValueType.MAP:
            pairs = (f"{self._format_key(k)} = {self._format_value(v)}" for k, v in value.entries.items())
            return '{' + ', '.join(pairs) + '}'
        # TOML has no null
        return '""'
