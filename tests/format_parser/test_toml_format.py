import pytest

from config_editor.format_parser.core.config_value import ConfigValue
from config_editor.format_parser.errors import ParsingError, SerializationError, TomlSyntaxError
from config_editor.format_parser.format_parser import FormatParser
from tests.conftest import TOML_EXPECTED, TOML_SAMPLE

def test_basic_parsing(parser: FormatParser) -> None:
    """Test sections, scalars and inline arrays"""
    result = parser.parse(TOML_SAMPLE, "toml")
    assert result.values.to_python() == TOML_EXPECTED
    assert result.format == "toml"

def test_comment_attachment(parser: FormatParser) -> None:
    result = parser.parse("# hello\nkey = 1", "toml")
    assert result.comments["key"] == "hello"

def test_section_and_trailing_comments(parser: FormatParser) -> None:
    """Test comments attach to sections, keys and trailing positions"""
    result = parser.parse(TOML_SAMPLE, "toml")
    assert result.comments["server"] == "Server settings"
    assert result.comments["server.max-players"] == "max players allowed"
    assert result.comments["server.pvp"] == "allow pvp"
    assert "server.motd" not in result.comments

def test_blank_line_drops_pending_comment(parser: FormatParser) -> None:
    result = parser.parse("# orphaned\n\nkey = 1\n", "toml")
    assert dict(result.comments) == {}

def test_multi_line_comment(parser: FormatParser) -> None:
    result = parser.parse("# first\n# second\nkey = true\n", "toml")
    assert result.comments["key"] == "first second"

def test_end_to_end_document(parser: FormatParser) -> None:
    result = parser.parse("[server]\n# max players allowed\nmax-players = 20\n", "toml")
    assert result.values == ConfigValue.from_python({"server": {"max-players": 20}})
    assert result.comments["server.max-players"] == "max players allowed"

def test_value_heuristics(parser: FormatParser) -> None:
    content = "\n".join([
        "a = 'single'",
        'b = "esc\\"aped"',
        "c = [1, 2.5, \"x\"]",
        "d = bare words",
        "e = {x = 1, y = false}",
        "f = []",
    ])
    values = parser.parse(content, "toml").values.to_python()
    assert values == {
        "a": "single",
        "b": 'esc"aped',
        "c": [1, 2.5, "x"],
        "d": "bare words",
        "e": {"x": 1, "y": False},
        "f": [],
    }

def test_quoted_keys_and_headers(parser: FormatParser) -> None:
    content = '["my mod".options]\n"key with space" = 1\n'
    assert parser.parse(content, "toml").values.to_python() == {
        "my mod": {"options": {"key with space": 1}}
    }

def test_unsupported_constructs_raise(parser: FormatParser) -> None:
    """Test constructs the line parser cannot represent fail instead of losing data"""
    with pytest.raises(TomlSyntaxError):
        parser.parse("[[servers]]\nname = 'a'\n", "toml")
    with pytest.raises(TomlSyntaxError):
        parser.parse("values = [\n  1,\n]\n", "toml")
    with pytest.raises(TomlSyntaxError):
        parser.parse('text = """\nlong\n"""\n', "toml")
    with pytest.raises(ParsingError):
        parser.parse("a = 1\n[a]\nb = 2\n", "toml")

def test_serialize_end_to_end(parser: FormatParser) -> None:
    tree = ConfigValue.from_python({"server": {"max-players": 32}})
    assert parser.serialize(tree, "toml") == "\n[server]\nmax-players = 32\n"

def test_serialize_scalars_before_tables(parser: FormatParser) -> None:
    """Test key order within a level and table blocks after scalars"""
    tree = ConfigValue.from_python({
        "nested": {"flag": False},
        "name": 'quote "me"',
        "ratio": 0.5,
        "list": [True, 2, "three"],
        "empty": None,
    })
    assert parser.serialize(tree, "toml") == (
        'name = "quote \\"me\\""\n'
        'ratio = 0.5\n'
        'list = [true, 2, "three"]\n'
        'empty = ""\n'
        '\n[nested]\n'
        'flag = false\n'
    )

def test_serialize_does_not_emit_comments(parser: FormatParser) -> None:
    result = parser.parse(TOML_SAMPLE, "toml")
    text = parser.serialize(result.values, "toml")
    assert "Server settings" not in text
    assert "allow pvp" not in text

def test_serialize_requires_table(parser: FormatParser) -> None:
    with pytest.raises(SerializationError):
        parser.serialize(ConfigValue.array([]), "toml")
