from typing import Optional, Callable

class EditorConfig:
    def __init__(
        self,
        max_cache_size: int = 64,
        expand_depth: int = 2,
        long_text_threshold: int = 50,
        slider_limit: float = 1000,
        min_slider_max: float = 100,
        error_handler: Optional[Callable[[Exception], None]] = None
    ):
        self.max_cache_size = max_cache_size
        self.expand_depth = expand_depth
        self.long_text_threshold = long_text_threshold
        self.slider_limit = slider_limit
        self.min_slider_max = min_slider_max
        self.error_handler = error_handler
