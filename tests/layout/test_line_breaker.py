"""Tests for heuristic line breaking."""

import pytest

from reportpdf.layout.cursor import Cursor, PageGeometry
from reportpdf.layout.line_breaker import LineBreaker, estimate_max_chars, wrap_text
from reportpdf.pdfcompiler.resources import COURIER, HELVETICA


class TestEstimateMaxChars:
    def test_proportional_font(self):
        # 100 / (0.52 * 12) = 16.03
        assert estimate_max_chars(100, 12) == 16

    def test_monospace_font(self):
        # 100 / (0.60 * 12) = 13.9
        assert estimate_max_chars(100, 12, mono=True) == 13

    def test_never_below_one(self):
        assert estimate_max_chars(1, 28) == 1

    def test_content_width_a4(self):
        # 515.28 / (0.52 * 10) = 99.09
        assert estimate_max_chars(515.28, 10) == 99


class TestWrapText:
    def test_greedy_wrap(self):
        lines = wrap_text("The quick brown fox jumps over the lazy dog", 16)
        assert lines == ["The quick brown", "fox jumps over", "the lazy dog"]

    def test_fits_exactly(self):
        assert wrap_text("abcd efgh", 9) == ["abcd efgh"]
        assert wrap_text("abcd efgh", 8) == ["abcd", "efgh"]

    def test_blank_lines_preserved(self):
        assert wrap_text("first\n\nsecond", 80) == ["first", "", "second"]

    def test_whitespace_only_line_is_blank(self):
        assert wrap_text("a\n   \t\nb", 80) == ["a", "", "b"]

    def test_crlf_and_cr_normalized(self):
        assert wrap_text("one\r\ntwo\rthree", 80) == ["one", "two", "three"]

    def test_long_word_kept_whole(self):
        assert wrap_text("a supercalifragilistic word", 10) == ["a", "supercalifragilistic", "word"]

    def test_line_that_fits_is_kept_as_written(self):
        assert wrap_text(" 1. [Done]  aligned\t ", 80) == [" 1. [Done]  aligned"]

    def test_refilled_lines_collapse_whitespace(self):
        assert wrap_text("  spaced   out\twords  ", 10) == ["spaced out", "words"]

    def test_empty_and_none(self):
        assert wrap_text("", 10) == [""]
        assert wrap_text(None, 10) == [""]

    def test_trailing_newline_gives_blank_line(self):
        assert wrap_text("end\n", 10) == ["end", ""]

    @pytest.mark.parametrize("max_chars", [1, 5, 12, 30, 200])
    def test_wrapping_preserves_words(self, max_chars):
        text = (
            "Risk owners must review mitigation plans quarterly and record evidence "
            "of completion, including links to tickets, approvals and test results."
        )
        lines = wrap_text(text, max_chars)
        assert " ".join(lines).split(" ") == text.split()

    @pytest.mark.parametrize("max_chars", [5, 12, 30])
    def test_lines_respect_budget_unless_single_word(self, max_chars):
        text = "alpha beta gamma delta epsilon zeta eta theta iota kappa lambda"
        for line in wrap_text(text, max_chars):
            assert len(line) <= max_chars or " " not in line


class TestLineBreaker:
    def test_uses_font_width_factor(self):
        assert LineBreaker(HELVETICA, 12).max_chars(100) == 16
        assert LineBreaker(COURIER, 12).max_chars(100) == 13

    def test_break_text_results(self):
        results = LineBreaker(HELVETICA, 12).break_text("The quick brown fox jumps over the lazy dog", 100)
        assert [r.text for r in results] == ["The quick brown", "fox jumps over", "the lazy dog"]
        assert all(r.max_chars == 16 for r in results)
        assert not any(r.overflows for r in results)

    def test_overflow_flagged(self):
        results = LineBreaker(COURIER, 28).break_text("incomprehensibilities", 50)
        assert results[0].overflows


class TestGeometryAndCursor:
    def test_geometry_clamped(self):
        geometry = PageGeometry.create(50, 5000, 1)
        assert (geometry.width, geometry.height, geometry.margin) == (200, 2000, 10)

    def test_geometry_fallbacks(self):
        geometry = PageGeometry.create(float("nan"), "tall", None)
        assert (geometry.width, geometry.height, geometry.margin) == (595.28, 841.89, 40)

    def test_cursor_at_top(self):
        geometry = PageGeometry.create(300, 200, 40)
        cursor = Cursor.at_top(geometry)
        assert (cursor.x, cursor.y) == (40, 160)
        assert cursor.fits(120, geometry)
        assert not cursor.fits(120.5, geometry)
