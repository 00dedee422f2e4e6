from enum import Enum, auto
from typing import List, Optional

class CommentState(Enum):
    DEFAULT = auto()
    ACCUMULATING_COMMENT = auto()

class CommentAccumulator:
    """Collects comment lines until the key they describe is parsed.

    Consecutive comment lines are space-joined. A blank line drops whatever
    has been collected so far.
    """

    def __init__(self) -> None:
        self.state = CommentState.DEFAULT
        self._parts: List[str] = []

    @property
    def pending(self) -> Optional[str]:
        text = ' '.join(self._parts)
        return text or None

    def add(self, text: str) -> None:
        """Append one comment line"""
        self.state = CommentState.ACCUMULATING_COMMENT
        text = text.strip()
        if text:
            self._parts.append(text)

    def replace(self, text: str) -> None:
        """Replace the buffer with a trailing comment"""
        self._parts = []
        self.add(text)

    def clear(self) -> None:
        self.state = CommentState.DEFAULT
        self._parts = []

    def take(self) -> Optional[str]:
        """Return the collected comment and reset"""
        comment = self.pending
        self.clear()
        return comment
