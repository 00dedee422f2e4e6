import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..core.config_path import join_index, join_key
from ..core.config_value import ConfigValue, ValueType
from ..core.parse_result import ParseResult
from ..errors import SerializationError, YamlSyntaxError
from .comment_state import CommentAccumulator
from .patterns import (
    INDENT_PATTERN,
    YAML_COMMENT_PATTERN,
    YAML_DOCUMENT_MARKER_PATTERN,
    YAML_INLINE_COMMENT_PATTERN,
    YAML_LIST_ITEM_PATTERN,
)
from .value_parser import QUOTES, ScalarDialect, ValueParser

logger = logging.getLogger(__name__)

TRUE_WORDS = frozenset({'true', 'yes', 'on'})
FALSE_WORDS = frozenset({'false', 'no', 'off'})
NULL_WORDS = frozenset({'', 'null', '~'})
BLOCK_MARKERS = ('', '|', '>')

YAML_DIALECT = ScalarDialect(
    true_words=TRUE_WORDS,
    false_words=FALSE_WORDS,
    null_words=NULL_WORDS,
    inline_maps=True,
    map_separator=':',
)

# Strings equal to these would come back as another type or a nested block
RESERVED_SCALARS = TRUE_WORDS | FALSE_WORDS | NULL_WORDS | frozenset(BLOCK_MARKERS)
SPECIAL_CHARACTERS = frozenset(':#,[]{}\\\n\r\t')

# "- name: value" items would need mappings inside sequences
SEQUENCE_MAPPING_PATTERN = re.compile(r'^[^\'"\[{][^:#]*:(?:\s|$)')


@dataclass
class _Frame:
    """One open mapping on the indentation stack"""
    indent: int
    target: Dict[str, Any]
    key: str = ""
    path: str = ""
    parent: Optional[Dict[str, Any]] = None
    sequence: Optional[List[Any]] = None


class YamlFormat:
    """Indentation based YAML subset: nested mappings, block and flow sequences"""
    name = "yaml"

    def parse(self, content: str) -> ParseResult:
        root: Dict[str, Any] = {}
        comments: Dict[str, str] = {}
        pending = CommentAccumulator()
        stack = [_Frame(indent=-1, target=root)]

        for line_number, line in enumerate(content.split('\n'), 1):
            if not line.strip():
                pending.clear()
                continue

            comment_match = YAML_COMMENT_PATTERN.match(line)
            if comment_match:
                pending.add(comment_match.group(1))
                continue

            if YAML_DOCUMENT_MARKER_PATTERN.match(line):
                continue

            indent = len(INDENT_PATTERN.match(line).group(1))  # type: ignore[union-attr]

            item_match = YAML_LIST_ITEM_PATTERN.match(line)
            if item_match:
                while len(stack) > 1 and stack[-1].indent > indent:
                    stack.pop()
                self._add_item(stack[-1], item_match.group(2) or '', comments, pending, line_number)
                continue

            while len(stack) > 1 and stack[-1].indent >= indent:
                stack.pop()
            frame = stack[-1]

            entry = self._split_entry(line.strip())
            if entry is None:
                logger.debug(f"Ignoring YAML line {line_number}: {line.strip()}")
                continue
            if frame.sequence is not None:
                raise YamlSyntaxError(
                    f"Line {line_number}: mapping entries inside a sequence are not supported"
                )

            key, raw_value = entry
            raw_value, trailing = self._split_comment(raw_value)
            if trailing:
                pending.replace(trailing)

            path = join_key(frame.path, key)
            comment = pending.take()
            if comment:
                comments[path] = comment

            if raw_value in BLOCK_MARKERS:
                # Block scalar bodies after | and > are not captured
                child: Dict[str, Any] = {}
                frame.target[key] = child
                stack.append(_Frame(indent=indent, target=child, key=key, path=path, parent=frame.target))
            else:
                frame.target[key] = ValueParser.decode(raw_value, YAML_DIALECT)

        return ParseResult(values=ConfigValue.from_python(root), comments=comments, format=self.name)

    def _split_entry(self, text: str) -> Optional[Tuple[str, str]]:
        """Split 'key: value' on the first unquoted colon"""
        separator = ValueParser.find_unquoted(text, ':')
        if separator <= 0:
            return None
        raw_key = text[:separator]
        if ValueParser.unquote(raw_key.strip()) is None and '#' in raw_key:
            return None
        return ValueParser.decode_key(raw_key), text[separator + 1:].strip()

    def _split_comment(self, raw_value: str) -> Tuple[str, Optional[str]]:
        """Separate a trailing '# comment' from a value"""
        if raw_value.startswith('#'):
            return '', raw_value[1:].strip()
        if raw_value.startswith(QUOTES):
            return ValueParser.split_comment(raw_value)
        match = YAML_INLINE_COMMENT_PATTERN.match(raw_value)
        if match:
            return match.group(1).strip(), match.group(2).strip()
        return raw_value, None

    def _add_item(self, frame: _Frame, raw_item: str, comments: Dict[str, str],
                  pending: CommentAccumulator, line_number: int) -> None:
        """Append a '- item' line to the sequence owned by frame"""
        if frame.parent is None:
            raise YamlSyntaxError(f"Line {line_number}: top-level sequences are not supported")

        if frame.sequence is None:
            if frame.target:
                raise YamlSyntaxError(
                    f"Line {line_number}: '{frame.key}' mixes mapping entries and sequence items"
                )
            frame.sequence = []
            frame.parent[frame.key] = frame.sequence

        raw_item, trailing = self._split_comment(raw_item.strip())
        if SEQUENCE_MAPPING_PATTERN.match(raw_item):
            raise YamlSyntaxError(f"Line {line_number}: mappings inside sequences are not supported")
        if trailing:
            pending.replace(trailing)

        comment = pending.take()
        if comment:
            comments[join_index(frame.path, len(frame.sequence))] = comment
        frame.sequence.append(ValueParser.decode(raw_item, YAML_DIALECT))

    def serialize(self, tree: ConfigValue) -> str:
        if tree.type != ValueType.MAP:
            raise SerializationError("A YAML document must be a mapping")
        return self._serialize_map(tree, 0)

    def _serialize_map(self, node: ConfigValue, indent: int) -> str:
        result = ""
        prefix = "  " * indent

        for key, value in node.entries.items():
            key_text = self._format_key(key)
            if value.type == ValueType.MAP:
                result += f"{prefix}{key_text}:\n"
                result += self._serialize_map(value, indent + 1)
            elif value.type == ValueType.ARRAY and value.items:
                result += f"{prefix}{key_text}:\n"
                for item in value.items:
                    result += f"{prefix}  - {self._format_flow(item)}\n"
            else:
                result += f"{prefix}{key_text}: {self._format_flow(value)}\n"

        return result

    def _format_flow(self, value: ConfigValue) -> str:
        if value.type == ValueType.NULL:
            return 'null'
        if value.type == ValueType.BOOLEAN:
            return 'true' if value.value else 'false'
        if value.type == ValueType.NUMBER:
            return ValueParser.format_number(value.value)  # type: ignore[arg-type]
        if value.type == ValueType.STRING:
            text: str = value.value  # type: ignore[assignment]
            return ValueParser.quote(text) if self.needs_quotes(text) else text
        if value.type == ValueType.ARRAY:
            return '[' + ', '.join(self._format_flow(item) for item in value.items) + ']'
        pairs = (f"{self._format_key(k)}: {self._format_flow(v)}" for k, v in value.entries.items())
        return '{' + ', '.join(pairs) + '}'

    @staticmethod
    def needs_quotes(text: str) -> bool:
        """True when a plain scalar would read back as something else"""
        return (
            text in RESERVED_SCALARS
            or ValueParser.is_number(text)
            or text != text.strip()
            or text[0] in QUOTES
            or text[0] == '-'
            or any(char in SPECIAL_CHARACTERS for char in text)
        )

    def _format_key(self, key: str) -> str:
        if not key or key != key.strip() or key[0] in '-?&*!%@`' or self.needs_quotes(key):
            return ValueParser.quote(key)
        return key
