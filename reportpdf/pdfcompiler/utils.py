"""Utility functions for PDF generation: string encoding and number formatting."""

from datetime import datetime, timezone
from typing import Any, Optional


_LITERAL_WHITESPACE = {0x09, 0x0A, 0x0D}


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        return str(value)
    return value


def is_pdfdoc_compatible(text: Any) -> bool:
    """Check whether text can be written as a single-byte literal string.

    Args:
        text: Input text (converted with ``str`` if needed)

    Returns:
        True if every character is printable ASCII (0x20-0x7E) or tab/CR/LF
    """
    for char in _to_text(text):
        code = ord(char)
        if code in _LITERAL_WHITESPACE:
            continue
        if code < 0x20 or code > 0x7E:
            return False
    return True


def escape_pdf_string(text: Any) -> str:
    """Escape backslash and parentheses for a PDF literal string.

    Args:
        text: Input string (will be converted to str if not already)

    Returns:
        Escaped string for PDF, without the surrounding parentheses
    """
    # Backslash first so the escapes added for parentheses are not doubled
    return (
        _to_text(text)
        .replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
    )


def to_utf16be_hex(text: Any) -> str:
    """Encode text as a UTF-16BE hex string with a byte-order mark.

    Args:
        text: Input text

    Returns:
        String of the form ``<FEFF...>`` with uppercase hex digits
    """
    # surrogatepass keeps lone surrogates encodable
    encoded = _to_text(text).encode("utf-16-be", "surrogatepass")
    return f"<FEFF{encoded.hex().upper()}>"


def pdf_string_literal(text: Any) -> str:
    """Encode text as a PDF string object.

    Printable ASCII goes out as an escaped ``(...)`` literal; anything else
    as a UTF-16BE hex string so that readers decode it as Unicode.
    """
    if is_pdfdoc_compatible(text):
        return f"({escape_pdf_string(text)})"
    return to_utf16be_hex(text)


def format_pdf_number(value: float) -> str:
    """Format number for PDF (limit decimal places).

    Args:
        value: Numeric value

    Returns:
        Formatted string without trailing zeros
    """
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def format_pdf_coordinate(value: float) -> str:
    """Format a coordinate with exactly two decimals."""
    return f"{value:.2f}"


def format_pdf_date(moment: Optional[datetime] = None) -> str:
    """Format a timestamp as a PDF date string (``D:YYYYMMDDHHmmSSZ``).

    Naive datetimes are taken as UTC; aware ones are converted to UTC.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("D:%Y%m%d%H%M%SZ")
