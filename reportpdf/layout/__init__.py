"""Layout: page geometry, cursor and line breaking."""

from .cursor import Cursor, PageGeometry
from .line_breaker import LineBreaker, LineBreakResult, estimate_max_chars, wrap_text

__all__ = [
    "Cursor",
    "PageGeometry",
    "LineBreaker",
    "LineBreakResult",
    "estimate_max_chars",
    "wrap_text",
]
