from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from ..errors import ValueParsingError
from .patterns import INTEGER_PATTERN, NUMBER_PATTERN

ESCAPES = {'\\': '\\', '"': '"', 'n': '\n', 't': '\t', 'r': '\r'}
REVERSE_ESCAPES = {'\\': '\\\\', '"': '\\"', '\n': '\\n', '\t': '\\t', '\r': '\\r'}
QUOTES = ('"', "'")
# A quote only opens a string at the start of a token
QUOTE_OPENERS = frozenset('[{,:=')

@dataclass(frozen=True)
class ScalarDialect:
    """Keyword and syntax rules a format uses when decoding a raw value"""
    true_words: FrozenSet[str] = frozenset({'true'})
    false_words: FrozenSet[str] = frozenset({'false'})
    null_words: FrozenSet[str] = frozenset()
    quoted: bool = True
    arrays: bool = True
    inline_maps: bool = False
    map_separator: str = '='


class ValueParser:
    @staticmethod
    def decode(raw_value: str, dialect: ScalarDialect) -> Any:
        """Decode a raw value with the dialect's type heuristics"""
        raw_value = raw_value.strip()

        if raw_value in dialect.null_words:
            return None
        if raw_value in dialect.true_words:
            return True
        if raw_value in dialect.false_words:
            return False

        if dialect.quoted:
            unquoted = ValueParser.unquote(raw_value)
            if unquoted is not None:
                return unquoted

        if dialect.arrays and raw_value.startswith('[') and raw_value.endswith(']'):
            return [
                ValueParser.decode(item, dialect)
                for item in ValueParser.split_items(raw_value[1:-1])
            ]

        if dialect.inline_maps and raw_value.startswith('{') and raw_value.endswith('}'):
            try:
                return ValueParser.decode_inline_map(raw_value[1:-1], dialect)
            except ValueParsingError:
                # Placeholders like {player} stay raw strings
                pass

        if ValueParser.is_number(raw_value):
            return ValueParser.parse_number(raw_value)

        return raw_value

    @staticmethod
    def decode_inline_map(content: str, dialect: ScalarDialect) -> Dict[str, Any]:
        """Decode the inside of an inline table / flow mapping"""
        result: Dict[str, Any] = {}
        for entry in ValueParser.split_items(content):
            index = ValueParser.find_unquoted(entry, dialect.map_separator)
            if index == -1:
                raise ValueParsingError(f"Inline map entry without separator: {entry}")
            key = ValueParser.decode_key(entry[:index])
            result[key] = ValueParser.decode(entry[index + 1:], dialect)
        return result

    @staticmethod
    def decode_key(raw_key: str) -> str:
        raw_key = raw_key.strip()
        unquoted = ValueParser.unquote(raw_key)
        return raw_key if unquoted is None else unquoted

    @staticmethod
    def is_number(raw_value: str) -> bool:
        return bool(NUMBER_PATTERN.match(raw_value))

    @staticmethod
    def parse_number(raw_value: str) -> Union[int, float]:
        if INTEGER_PATTERN.match(raw_value):
            return int(raw_value)
        return float(raw_value)

    @staticmethod
    def format_number(value: Union[int, float]) -> str:
        """Render a number the way it reads back: 32.0 becomes 32"""
        if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value) if isinstance(value, float) else str(value)

    @staticmethod
    def unquote(raw_value: str) -> Optional[str]:
        """Strip matching quotes; None when the value is not quoted.

        Double-quoted values have their backslash escapes resolved, single
        quoted values are taken literally.
        """
        if len(raw_value) < 2 or raw_value[0] not in QUOTES or raw_value[-1] != raw_value[0]:
            return None
        inner = raw_value[1:-1]
        if raw_value[0] == "'":
            return inner

        result = []
        escape_next = False
        for char in inner:
            if escape_next:
                result.append(ESCAPES.get(char, '\\' + char))
                escape_next = False
            elif char == '\\':
                escape_next = True
            else:
                result.append(char)
        if escape_next:
            result.append('\\')
        return ''.join(result)

    @staticmethod
    def quote(value: str) -> str:
        """Double-quote a string, escaping what unquote resolves"""
        return '"' + ''.join(REVERSE_ESCAPES.get(c, c) for c in value) + '"'

    @staticmethod
    def find_unquoted(text: str, targets: str, start: int = 0) -> int:
        """Index of the first target character outside quotes, or -1"""
        quote_char: Optional[str] = None
        escape_next = False
        previous = ''

        for index in range(start, len(text)):
            char = text[index]
            if escape_next:
                escape_next = False
            elif quote_char:
                if char == '\\' and quote_char == '"':
                    escape_next = True
                elif char == quote_char:
                    quote_char = None
            elif char in QUOTES and (not previous or previous in QUOTE_OPENERS):
                quote_char = char
            elif char in targets:
                return index
            if not char.isspace():
                previous = char
        return -1

    @staticmethod
    def split_comment(text: str) -> Tuple[str, Optional[str]]:
        """Split 'value # comment' on the first unquoted '#'"""
        index = ValueParser.find_unquoted(text, '#')
        if index == -1:
            return text.strip(), None
        return text[:index].strip(), text[index + 1:].strip()

    @staticmethod
    def split_items(content: str) -> List[str]:
        """Split on top-level commas, respecting quotes and nesting"""
        items = []
        current: List[str] = []
        depth = 0
        quote_char: Optional[str] = None
        escape_next = False
        previous = ''

        for char in content:
            if not quote_char and not escape_next and char in QUOTES:
                opens = not previous or previous in QUOTE_OPENERS
            else:
                opens = False
            if not char.isspace():
                previous = char
            if escape_next:
                current.append(char)
                escape_next = False
                continue

            if quote_char:
                if char == '\\' and quote_char == '"':
                    escape_next = True
                elif char == quote_char:
                    quote_char = None
                current.append(char)
            elif opens:
                quote_char = char
                current.append(char)
            elif char in '[{':
                depth += 1
                current.append(char)
            elif char in ']}':
                depth -= 1
                current.append(char)
            elif char == ',' and depth == 0:
                item = ''.join(current).strip()
                if item:
                    items.append(item)
                current = []
            else:
                current.append(char)

        # Add final item
        item = ''.join(current).strip()
        if item:
            items.append(item)

        return items
