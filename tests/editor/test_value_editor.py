import pytest
from rich.console import Console

from config_editor.config import EditorConfig
from config_editor.editor.render import describe_node, render_tree
from config_editor.editor.value_editor import EditAction, ValueEditor, WidgetKind, display_name
from config_editor.format_parser.core.config_value import ConfigValue, ValueType

@pytest.fixture
def editor() -> ValueEditor:
    return ValueEditor(EditorConfig())

@pytest.fixture
def tree() -> ConfigValue:
    return ConfigValue.from_python({
        "maxPlayers": 20,
        "ratio": 0.5,
        "huge": 5000,
        "negative": -5,
        "enabled": True,
        "motd": "short",
        "description": "x" * 51,
        "lines": "one\ntwo",
        "unset": None,
        "tags": ["a", "b"],
        "level1": {"level2": {"level3": {"deep": 1}}},
    })

def test_display_name() -> None:
    assert display_name("maxPlayers") == "Max Players"
    assert display_name("max-players") == "Max-players"

def test_widget_per_value_type(editor: ValueEditor, tree: ConfigValue) -> None:
    nodes = {node.key: node for node in editor.build(tree)}
    assert nodes["maxPlayers"].widget == WidgetKind.NUMBER_INPUT
    assert nodes["enabled"].widget == WidgetKind.TOGGLE
    assert nodes["motd"].widget == WidgetKind.TEXT_INPUT
    assert nodes["description"].widget == WidgetKind.TEXT_AREA
    assert nodes["lines"].widget == WidgetKind.TEXT_AREA
    assert nodes["unset"].widget == WidgetKind.NULL_BADGE
    assert nodes["tags"].widget == WidgetKind.ARRAY_LIST
    assert nodes["level1"].widget == WidgetKind.MAP_GROUP

def test_actions(editor: ValueEditor, tree: ConfigValue) -> None:
    nodes = {node.key: node for node in editor.build(tree)}
    assert nodes["unset"].actions == frozenset({EditAction.DELETE})
    assert EditAction.TOGGLE in nodes["enabled"].actions
    assert EditAction.ADD_ITEM in nodes["tags"].actions
    assert nodes["tags"].value_type == ValueType.ARRAY
    assert all(node.deletable for node in nodes.values())

def test_number_steps_and_sliders(editor: ValueEditor, tree: ConfigValue) -> None:
    """Test integer detection, step size and slider bounds"""
    nodes = {node.key: node for node in editor.build(tree)}

    players = nodes["maxPlayers"]
    assert players.integer and players.step == 1
    assert players.slider is not None and players.slider.maximum == 100

    ratio = nodes["ratio"]
    assert not ratio.integer and ratio.step == 0.1

    assert nodes["huge"].slider is None
    assert nodes["negative"].slider is None

    big = editor.build(ConfigValue.from_python({"view": 600}))[0]
    assert big.slider is not None and big.slider.maximum == 1200

def test_children_paths_and_tooltips(editor: ValueEditor, tree: ConfigValue) -> None:
    comments = {"tags[1]": "second tag", "level1.level2": "nested"}
    nodes = {node.key: node for node in editor.build(tree, comments)}

    tags = nodes["tags"]
    assert [child.path for child in tags.children] == ["tags[0]", "tags[1]"]
    assert tags.item_count == 2
    assert tags.children[1].tooltip == "second tag"
    assert nodes["level1"].find("level1.level2").tooltip == "nested"  # type: ignore[union-attr]

def test_expand_depth(editor: ValueEditor, tree: ConfigValue) -> None:
    level1 = {node.key: node for node in editor.build(tree)}["level1"]
    level2 = level1.children[0]
    level3 = level2.children[0]
    assert level1.expanded and level2.expanded
    assert not level3.expanded

def test_root_must_be_map(editor: ValueEditor) -> None:
    with pytest.raises(TypeError):
        editor.build(ConfigValue.from_python([1, 2]))

def test_render_tree(tree: ConfigValue) -> None:
    console = Console(record=True, width=120)
    console.print(render_tree(tree, {"maxPlayers": "player limit"}, title="server.toml"))
    text = console.export_text()

    assert "server.toml" in text
    assert "Max Players" in text
    assert "player limit" in text
    assert "2 items" in text
    assert "Level2" in text
    assert "Deep" not in text

def test_describe_node_escapes_markup(editor: ValueEditor) -> None:
    node = editor.build(ConfigValue.from_python({"[bold]": "x"}))[0]
    assert "\\[bold]" in describe_node(node)
