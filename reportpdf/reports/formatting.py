"""Text helpers shared by the report builders."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def safe_string(value: Any, fallback: str = "", max_len: int = 5000) -> str:
    """Trimmed string value, ``fallback`` for non-strings and blanks, cut to ``max_len``."""
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    if not trimmed:
        return fallback
    return trimmed[:max_len]


def to_iso(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a ``Z`` suffix, e.g. 2024-05-01T12:30:00.000Z."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def format_datetime(value: Any) -> str:
    """Render a timestamp for the report; "-" when missing, unparseable strings as-is."""
    if not value:
        return "-"
    if isinstance(value, datetime):
        return to_iso(value)
    text = str(value)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    return to_iso(parsed)


def export_filename(*parts: str, generated_at: Optional[datetime] = None) -> str:
    """File name for a download, e.g. ``risk-register-2024-05-01T12-30-00-000Z.pdf``."""
    stamp = to_iso(generated_at or datetime.now(timezone.utc)).replace(":", "-").replace(".", "-")
    return "-".join([*parts, stamp]) + ".pdf"


def content_disposition(filename: str) -> str:
    """Content-Disposition header value that makes browsers download the file."""
    return f'attachment; filename="{filename}"'
