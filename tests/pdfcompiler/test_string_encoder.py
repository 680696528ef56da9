"""Tests for PDF string encoding."""

import re

import pytest

from reportpdf.pdfcompiler.utils import (
    escape_pdf_string,
    format_pdf_date,
    format_pdf_number,
    is_pdfdoc_compatible,
    pdf_string_literal,
    to_utf16be_hex,
)


HEX_STRING = re.compile(r"^<FEFF(?:[0-9A-F]{4})*>$")


def _unescape(literal: str) -> str:
    """Undo the literal escaping (inverse of escape_pdf_string)."""
    return re.sub(r"\\(.)", r"\1", literal, flags=re.DOTALL)


class TestLiteralStrings:
    """Printable ASCII goes out as (...) literals."""

    def test_plain_ascii(self):
        assert pdf_string_literal("Hello, World!") == "(Hello, World!)"

    def test_empty_string(self):
        assert pdf_string_literal("") == "()"

    def test_backslash_and_parentheses_escaped(self):
        assert pdf_string_literal(r"a\b(c)d") == r"(a\\b\(c\)d)"

    def test_already_escaped_input_is_escaped_again(self):
        """Existing backslashes are data, so they are doubled, not trusted."""
        assert pdf_string_literal(r"\(") == r"(\\\()"

    def test_tab_cr_lf_kept_raw(self):
        assert pdf_string_literal("a\tb\rc\nd") == "(a\tb\rc\nd)"

    @pytest.mark.parametrize(
        "text",
        [
            "Risk (high)",
            "C:\\temp\\report",
            "((nested))",
            "\\)",
            "".join(chr(c) for c in range(0x20, 0x7F)),
        ],
    )
    def test_escapes_each_special_character_once(self, text):
        encoded = pdf_string_literal(text)
        assert encoded.startswith("(") and encoded.endswith(")")
        body = encoded[1:-1]
        assert _unescape(body) == text
        expected_length = len(text) + sum(text.count(c) for c in "\\()")
        assert len(body) == expected_length

    def test_none_becomes_empty_literal(self):
        assert pdf_string_literal(None) == "()"

    def test_non_string_converted(self):
        assert pdf_string_literal(42) == "(42)"
        assert pdf_string_literal(3.5) == "(3.5)"


class TestHexStrings:
    """Anything outside printable ASCII goes out as UTF-16BE hex."""

    def test_latin1_character(self):
        assert pdf_string_literal("é") == "<FEFF00E9>"

    def test_mixed_text(self):
        assert pdf_string_literal("Zażółć") == "<FEFF005A0061017C00F301420107>"

    def test_non_latin_script(self):
        encoded = pdf_string_literal("Привет")
        assert encoded.startswith("<FEFF")
        assert HEX_STRING.match(encoded)
        assert bytes.fromhex(encoded[5:-1]).decode("utf-16-be") == "Привет"

    def test_astral_plane_uses_surrogate_pair(self):
        assert pdf_string_literal("\U0001F600") == "<FEFFD83DDE00>"

    @pytest.mark.parametrize("char", ["\x00", "\x07", "\x1b", "\x7f", "\x85", "\u00a0"])
    def test_control_and_non_ascii_characters(self, char):
        encoded = pdf_string_literal(f"a{char}b")
        assert HEX_STRING.match(encoded)

    def test_lone_surrogate_still_encodes(self):
        assert pdf_string_literal("\ud800") == "<FEFFD800>"

    def test_parentheses_not_escaped_in_hex(self):
        encoded = to_utf16be_hex("(é)")
        assert encoded == "<FEFF002800E90029>"

    def test_hex_is_uppercase(self):
        assert to_utf16be_hex("ÿ") == "<FEFF00FF>"


class TestHelpers:
    def test_is_pdfdoc_compatible(self):
        assert is_pdfdoc_compatible("plain text\twith\ttabs\r\n")
        assert not is_pdfdoc_compatible("naïve")
        assert not is_pdfdoc_compatible("bell\x07")
        assert is_pdfdoc_compatible(None)

    def test_escape_pdf_string_has_no_delimiters(self):
        assert escape_pdf_string("(x)") == r"\(x\)"

    def test_format_pdf_number(self):
        assert format_pdf_number(12.0) == "12"
        assert format_pdf_number(10.5) == "10.5"
        assert format_pdf_number(0.1234) == "0.123"
        assert format_pdf_number(-0.0001) == "0"

    def test_format_pdf_date_naive_is_utc(self):
        from datetime import datetime

        assert format_pdf_date(datetime(2024, 5, 1, 12, 30, 5)) == "D:20240501123005Z"

    def test_format_pdf_date_converts_to_utc(self):
        from datetime import datetime, timedelta, timezone

        moment = datetime(2024, 5, 1, 14, 30, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_pdf_date(moment) == "D:20240501123005Z"
