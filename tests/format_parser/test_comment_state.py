from config_editor.format_parser.parsing.comment_state import CommentAccumulator, CommentState

def test_starts_in_default_state() -> None:
    pending = CommentAccumulator()
    assert pending.state == CommentState.DEFAULT
    assert pending.take() is None

def test_consecutive_lines_are_space_joined() -> None:
    """Test multi-line comments collapse into one string"""
    pending = CommentAccumulator()
    pending.add(" first line ")
    pending.add("second line")

    assert pending.state == CommentState.ACCUMULATING_COMMENT
    assert pending.take() == "first line second line"
    assert pending.state == CommentState.DEFAULT
    assert pending.take() is None

def test_clear_drops_collected_comment() -> None:
    pending = CommentAccumulator()
    pending.add("orphaned")
    pending.clear()

    assert pending.state == CommentState.DEFAULT
    assert pending.pending is None

def test_replace_with_trailing_comment() -> None:
    pending = CommentAccumulator()
    pending.add("above the key")
    pending.replace("after the value")

    assert pending.take() == "after the value"

def test_empty_comment_lines_are_ignored() -> None:
    pending = CommentAccumulator()
    pending.add("")
    pending.add("text")
    pending.add("")

    assert pending.take() == "text"
