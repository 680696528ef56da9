"""Greedy line breaking driven by a per-font character-width estimate.

Real glyph metrics are not consulted. A line holds at most
``floor(max_width / (width_factor * font_size))`` characters, where the width
factor is an average advance for the font (0.52 for Helvetica, 0.60 for
Courier). Proportional text with many wide glyphs can therefore overrun the
requested width slightly.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List

from ..pdfcompiler.resources import COURIER, HELVETICA, PdfFont

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r\n|\r")


def estimate_max_chars(max_width_pt: float, font_size_pt: float, mono: bool = False) -> int:
    """Estimate how many characters fit on one line.

    Args:
        max_width_pt: Available width in points
        font_size_pt: Font size in points
        mono: Use the monospace width factor

    Returns:
        Character budget, never less than 1
    """
    width_factor = COURIER.width_factor if mono else HELVETICA.width_factor
    return max(1, math.floor(max_width_pt / (width_factor * font_size_pt)))


def wrap_text(text: str, max_chars: int) -> List[str]:
    """Wrap text into lines of at most ``max_chars`` characters.

    Input lines are kept apart; blank lines come back as "". A line that
    already fits is kept as written, minus trailing whitespace. Longer lines
    are refilled word by word; words are never split, so a word longer than
    ``max_chars`` gets a line of its own.
    """
    normalized = _NEWLINES.sub("\n", "" if text is None else str(text))
    lines: List[str] = []
    for raw_line in normalized.split("\n"):
        line = raw_line.rstrip()
        if not line:
            lines.append("")
            continue
        if len(line) <= max_chars:
            lines.append(line)
            continue
        words = line.split()
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if len(candidate) <= max_chars:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines


@dataclass(slots=True)
class LineBreakResult:
    text: str
    max_chars: int

    @property
    def overflows(self) -> bool:
        return len(self.text) > self.max_chars


class LineBreaker:
    """Simple greedy line breaker for one font and size."""

    def __init__(self, font: PdfFont, font_size: float) -> None:
        self.font = font
        self.font_size = font_size

    def max_chars(self, max_width: float) -> int:
        return estimate_max_chars(max_width, self.font_size, mono=self.font.monospace)

    def break_text(self, text: str, max_width: float) -> List[LineBreakResult]:
        max_chars = self.max_chars(max_width)
        results = [LineBreakResult(text=line, max_chars=max_chars) for line in wrap_text(text, max_chars)]
        for result in results:
            if result.overflows:
                logger.debug(
                    f"Word wider than line: {len(result.text)} chars > {max_chars} "
                    f"at {self.font_size}pt {self.font.base_font}"
                )
        return results
