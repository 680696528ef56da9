"""Configuration: page geometry defaults and safe numeric ranges.

Every numeric input accepted by the builder goes through a ``NumericRange``.
Values outside the range are pulled to the nearest bound; values that are not
finite numbers are replaced by the range fallback.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


A4_WIDTH_PT = 595.28
A4_HEIGHT_PT = 841.89
DEFAULT_MARGIN_PT = 40.0

DEFAULT_CREATOR = "reportpdf"
DEFAULT_PRODUCER = "reportpdf"

# Leading added to the font size when checking room for a line of text
TEXT_LEADING_PT = 2.0
# Room required before drawing a rule, and the gap left below it
RULE_SPACE_PT = 10.0
RULE_SPACING_PT = 12.0
# Default wrapped line height is font size times this factor
LINE_HEIGHT_FACTOR = 1.25


def to_finite_float(value: Any) -> Optional[float]:
    """Convert ``value`` to a finite float, or return None.

    Booleans are not treated as numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def finite_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float if it is a finite int or float, else None.

    Unlike ``to_finite_float`` this does not parse strings; it is used for
    coordinates, where only real numbers are accepted.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class NumericRange:
    """Inclusive range with a fallback for missing or non-finite input."""

    minimum: float
    maximum: float
    fallback: float

    def clamp(self, value: Any) -> float:
        """Clamp ``value`` into the range.

        Args:
            value: Any input; numbers and numeric strings are accepted

        Returns:
            The clamped value, or ``fallback`` when ``value`` is not a finite number
        """
        number = to_finite_float(value)
        if number is None:
            return self.fallback
        if number < self.minimum:
            return self.minimum
        if number > self.maximum:
            return self.maximum
        return number


PAGE_WIDTH_RANGE = NumericRange(200.0, 2000.0, A4_WIDTH_PT)
PAGE_HEIGHT_RANGE = NumericRange(200.0, 2000.0, A4_HEIGHT_PT)
MARGIN_RANGE = NumericRange(10.0, 200.0, DEFAULT_MARGIN_PT)
FONT_SIZE_RANGE = NumericRange(6.0, 28.0, 11.0)
LINE_BREAK_RANGE = NumericRange(6.0, 60.0, 12.0)
LINE_HEIGHT_RANGE = NumericRange(8.0, 60.0, 14.0)
RULE_THICKNESS_RANGE = NumericRange(0.5, 4.0, 1.0)
MIN_WRAP_WIDTH_PT = 50.0


@dataclass
class PdfDocOptions:
    """Options accepted by ``PdfDoc.from_options``.

    Geometry values are clamped by the builder, not here.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    page_width_pt: Any = A4_WIDTH_PT
    page_height_pt: Any = A4_HEIGHT_PT
    margin_pt: Any = DEFAULT_MARGIN_PT
    creator: str = DEFAULT_CREATOR
    producer: str = DEFAULT_PRODUCER
    creation_date: Optional[datetime] = None
    compress: bool = False
