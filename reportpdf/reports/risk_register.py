"""Risk register export: a fixed-width table of risks on monospace lines."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Union

from ..document import PdfDoc
from .formatting import to_iso
from .models import RiskFilters, RiskRow, RiskThresholds

logger = logging.getLogger(__name__)

REPORT_TITLE = "Risk register export"
REPORT_AUTHOR = "Easy Risk Register"

TABLE_HEADER = (
    "Title                                   Category        Status    P I  Sc  Sev    Threat       Checklist"
)
TABLE_RULE = "-" * 106


def format_filters(filters: Optional[RiskFilters]) -> str:
    """One-line summary of the applied filters."""
    if filters is None:
        return "None (all risks)"
    parts = []
    if filters.q:
        parts.append(f"Search: {filters.q}")
    if filters.category:
        parts.append(f"Category: {filters.category}")
    if filters.status:
        parts.append(f"Status: {filters.status}")
    if filters.threat_type:
        parts.append(f"Threat: {filters.threat_type}")
    if filters.checklist_status:
        parts.append(f"Checklist: {filters.checklist_status}")
    for label, value in (
        ("Probability", filters.probability),
        ("Impact", filters.impact),
        ("Min score", filters.min_score),
        ("Max score", filters.max_score),
    ):
        if value is not None:
            parts.append(f"{label}: {value}")
    return " | ".join(parts) if parts else "None (all risks)"


def _cell(value: Any, width: int) -> str:
    return ("" if value is None else str(value))[:width].ljust(width)


def _number(value: Any, digits: int, width: int) -> str:
    return ("" if value is None else str(value)).rjust(digits).ljust(width)


def make_risk_row_line(risk: RiskRow) -> str:
    """Format a risk as one table line aligned with ``TABLE_HEADER``."""
    return " ".join(
        [
            _cell(risk.title, 38),
            _cell(risk.category, 14),
            _cell(risk.status, 9),
            _number(risk.probability, 1, 2),
            _number(risk.impact, 1, 2),
            _number(risk.risk_score, 2, 4),
            _cell(risk.severity, 6),
            _cell(risk.threat_type, 12),
            _cell(risk.checklist_status, 11),
        ]
    )


def build_risk_register_pdf(
    risks: Iterable[Union[RiskRow, Mapping[str, Any]]],
    filters: Optional[RiskFilters] = None,
    generated_at: Optional[datetime] = None,
    thresholds: Optional[RiskThresholds] = None,
) -> bytes:
    """Render the risk register export.

    Args:
        risks: Rows, as ``RiskRow`` or database-style mappings
        filters: Filters applied when selecting the rows
        generated_at: Timestamp printed in the header (default: now)
        thresholds: Severity bands for mappings without a severity

    Returns:
        PDF bytes
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    rows = [risk if isinstance(risk, RiskRow) else RiskRow.from_mapping(risk, thresholds) for risk in risks]

    doc = PdfDoc(title=REPORT_TITLE, author=REPORT_AUTHOR, creation_date=generated_at)
    doc.add_text(REPORT_TITLE, font="F1", font_size_pt=18)
    doc.add_line_break(18)
    doc.add_text(f"Generated: {to_iso(generated_at)}", font="F1", font_size_pt=10)
    doc.add_line_break(12)
    doc.add_text(f"Applied filters: {format_filters(filters)}", font="F1", font_size_pt=10)
    doc.add_line_break(14)
    doc.add_text(f"Total risks: {len(rows)}", font="F1", font_size_pt=10)
    doc.add_line_break(10)
    doc.add_hr()

    doc.add_text(TABLE_HEADER, font="F2", font_size_pt=9)
    doc.add_line_break(11)
    doc.add_text(TABLE_RULE, font="F2", font_size_pt=9)
    doc.add_line_break(11)

    for row in rows:
        doc.add_text(make_risk_row_line(row), font="F2", font_size_pt=9)
        doc.add_line_break(11)

    logger.info(f"Risk register export: {len(rows)} risks on {doc.page_count} pages")
    return doc.to_buffer()
