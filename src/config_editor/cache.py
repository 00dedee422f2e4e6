import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Tuple

from .format_parser.core.parse_result import ParseResult
from .format_parser.errors import ParsingError
from .format_parser.format_detector import ConfigFormat
from .format_parser.format_parser import FormatParser

@dataclass(frozen=True)
class CachedParse:
    """Outcome of parsing one (text, format) pair"""
    result: Optional[ParseResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

class ParseCache:
    """Memoizes parse outcomes per (text, format), least recently used first out."""

    def __init__(self, parser: Optional[FormatParser] = None, max_size: int = 64) -> None:
        self._parser = parser or FormatParser()
        self._entries: "OrderedDict[Tuple[str, ConfigFormat], CachedParse]" = OrderedDict()
        self._max_size = max_size
        self._logger = logging.getLogger(__name__)
        self.hits = 0
        self.misses = 0

    def parse(self, text: str, fmt: ConfigFormat) -> CachedParse:
        """Parse text, reusing the previous outcome for identical input"""
        fmt = ConfigFormat(fmt)
        key = (text, fmt)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            self._logger.debug(f"Parse cache hit ({fmt.value})")
            self._entries.move_to_end(key)
            return cached

        self.misses += 1
        try:
            outcome = CachedParse(result=self._parser.parse(text, fmt))
        except ParsingError as e:
            self._logger.warning(f"Failed to parse {fmt.value} content: {str(e)}")
            outcome = CachedParse(error=str(e))

        self._entries[key] = outcome
        if len(self._entries) > self._max_size:
            self._entries.popitem(last=False)
        self._logger.debug(f"Parse cache miss ({fmt.value}), {len(self._entries)} entries")
        return outcome

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
