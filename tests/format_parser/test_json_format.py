import json
import pytest

from config_editor.format_parser.core.config_value import ConfigValue
from config_editor.format_parser.errors import ParsingError
from config_editor.format_parser.format_parser import FormatParser
from tests.conftest import JSON_EXPECTED, JSON_SAMPLE

def test_tolerant_parsing(parser: FormatParser) -> None:
    """Test // comment lines and trailing commas are accepted"""
    result = parser.parse(JSON_SAMPLE, "json")
    assert result.values.to_python() == JSON_EXPECTED

def test_comments_are_discarded(parser: FormatParser) -> None:
    assert dict(parser.parse(JSON_SAMPLE, "json").comments) == {}

def test_slashes_inside_strings_are_kept(parser: FormatParser) -> None:
    content = '{\n"url":\n  "//cdn.example.com"\n}'
    assert parser.parse(content, "json").values.to_python() == {"url": "//cdn.example.com"}

def test_commas_inside_strings_are_kept(parser: FormatParser) -> None:
    """Trailing comma cleanup only touches commas outside string literals"""
    content = '{"pattern": "[^,]", "list": "a, }", "escaped": "q\\", ]",}'
    assert parser.parse(content, "json").values.to_python() == {
        "pattern": "[^,]",
        "list": "a, }",
        "escaped": 'q", ]',
    }

def test_invalid_json(parser: FormatParser) -> None:
    with pytest.raises(ParsingError):
        parser.parse('{"a": ', "json")
    assert parser.try_parse('{"a": ', "json") is None

def test_serialize_pretty_prints(parser: FormatParser) -> None:
    tree = ConfigValue.from_python({"b": 1, "a": [True, None], "ü": "é"})
    text = parser.serialize(tree, "json")
    assert text == '{\n  "b": 1,\n  "a": [\n    true,\n    null\n  ],\n  "ü": "é"\n}'
    assert json.loads(text) == tree.to_python()
