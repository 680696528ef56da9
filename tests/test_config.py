"""Tests for numeric ranges and option defaults."""

import pytest

from reportpdf.config import (
    FONT_SIZE_RANGE,
    LINE_BREAK_RANGE,
    LINE_HEIGHT_RANGE,
    MARGIN_RANGE,
    PAGE_HEIGHT_RANGE,
    PAGE_WIDTH_RANGE,
    RULE_THICKNESS_RANGE,
    NumericRange,
    PdfDocOptions,
    finite_number,
    to_finite_float,
)


class TestNumericRange:
    @pytest.mark.parametrize(
        "value, expected",
        [(5, 10), (10, 10), (15, 15), (20, 20), (25, 20), ("12.5", 12.5), (None, 14), ("x", 14),
         (float("nan"), 14), (float("-inf"), 14), (True, 14)],
    )
    def test_clamp(self, value, expected):
        assert NumericRange(10, 20, 14).clamp(value) == expected

    @pytest.mark.parametrize(
        "number_range, bounds",
        [
            (PAGE_WIDTH_RANGE, (200, 2000, 595.28)),
            (PAGE_HEIGHT_RANGE, (200, 2000, 841.89)),
            (MARGIN_RANGE, (10, 200, 40)),
            (FONT_SIZE_RANGE, (6, 28, 11)),
            (LINE_BREAK_RANGE, (6, 60, 12)),
            (LINE_HEIGHT_RANGE, (8, 60, 14)),
            (RULE_THICKNESS_RANGE, (0.5, 4, 1)),
        ],
    )
    def test_builder_ranges(self, number_range, bounds):
        assert (number_range.minimum, number_range.maximum, number_range.fallback) == bounds


class TestNumberConversion:
    def test_to_finite_float(self):
        assert to_finite_float("3.5") == 3.5
        assert to_finite_float(False) is None
        assert to_finite_float([1]) is None

    def test_finite_number_rejects_strings(self):
        assert finite_number(3) == 3.0
        assert finite_number("3") is None
        assert finite_number(True) is None
        assert finite_number(float("inf")) is None

    def test_huge_ints_are_not_numbers(self):
        assert to_finite_float(10**400) is None
        assert finite_number(10**400) is None
        assert NumericRange(10, 20, 14).clamp(10**400) == 14
        assert NumericRange(10, 20, 14).clamp(-(10**400)) == 14


def test_options_defaults():
    options = PdfDocOptions()
    assert (options.page_width_pt, options.page_height_pt, options.margin_pt) == (595.28, 841.89, 40)
    assert options.compress is False
    assert options.title is None
