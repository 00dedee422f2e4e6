import pytest
from unittest.mock import Mock

from config_editor.cache import ParseCache
from config_editor.format_parser.core.config_value import ConfigValue
from config_editor.format_parser.core.parse_result import ParseResult
from config_editor.format_parser.errors import ConfigSyntaxError
from config_editor.format_parser.format_detector import ConfigFormat

@pytest.fixture
def mock_parser() -> Mock:
    parser = Mock()
    parser.parse.return_value = ParseResult(values=ConfigValue.mapping(), format="toml")
    return parser

def test_identical_input_parses_once(mock_parser: Mock) -> None:
    """Test repeated (text, format) pairs are served from the cache"""
    cache = ParseCache(mock_parser)
    first = cache.parse("a = 1", ConfigFormat.TOML)
    second = cache.parse("a = 1", "toml")

    assert first is second
    assert first.ok
    assert mock_parser.parse.call_count == 1
    assert cache.hits == 1
    assert cache.misses == 1

def test_format_is_part_of_key(mock_parser: Mock) -> None:
    cache = ParseCache(mock_parser)
    cache.parse("a: 1", ConfigFormat.TOML)
    cache.parse("a: 1", ConfigFormat.YAML)
    assert mock_parser.parse.call_count == 2

def test_failures_are_cached(mock_parser: Mock) -> None:
    mock_parser.parse.side_effect = ConfigSyntaxError("bad document")
    cache = ParseCache(mock_parser)

    outcome = cache.parse("[[x]]", ConfigFormat.TOML)
    assert not outcome.ok
    assert outcome.error == "bad document"

    cache.parse("[[x]]", ConfigFormat.TOML)
    assert mock_parser.parse.call_count == 1

def test_least_recently_used_is_evicted(mock_parser: Mock) -> None:
    cache = ParseCache(mock_parser, max_size=2)
    cache.parse("a", ConfigFormat.TOML)
    cache.parse("b", ConfigFormat.TOML)
    cache.parse("a", ConfigFormat.TOML)
    cache.parse("c", ConfigFormat.TOML)

    assert len(cache) == 2
    cache.parse("a", ConfigFormat.TOML)
    assert mock_parser.parse.call_count == 3
    cache.parse("b", ConfigFormat.TOML)
    assert mock_parser.parse.call_count == 4

def test_clear(mock_parser: Mock) -> None:
    cache = ParseCache(mock_parser)
    cache.parse("a", ConfigFormat.TOML)
    cache.clear()
    assert len(cache) == 0

def test_real_parser_by_default() -> None:
    outcome = ParseCache().parse("key = 1\n", ConfigFormat.TOML)
    assert outcome.result is not None
    assert outcome.result.values.to_python() == {"key": 1}
