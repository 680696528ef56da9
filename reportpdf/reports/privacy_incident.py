"""Privacy incident / checklist report for a single risk."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ..document import PdfDoc
from .formatting import format_datetime, safe_string, to_iso
from .models import Checklist, IncidentRisk, Playbook

logger = logging.getLogger(__name__)

REPORT_TITLE = "Privacy incident / checklist report"
REPORT_AUTHOR = "Easy Risk Register"

BODY_WIDTH_PT = 520
BODY_FONT_SIZE_PT = 10
BODY_LINE_HEIGHT_PT = 12


def _status(completed_at) -> str:
    return "Done" if completed_at else "Open"


def build_privacy_incident_pdf(
    risk: IncidentRisk,
    checklist: Optional[Checklist] = None,
    playbook: Optional[Playbook] = None,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the incident report.

    Args:
        risk: The risk the incident is recorded against
        checklist: Attached checklist, if any
        playbook: Latest incident response playbook, if any
        generated_at: Timestamp printed in the header (default: now)

    Returns:
        PDF bytes
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    items = checklist.items if checklist else []
    completed = checklist.completed_count if checklist else 0
    template = "-"
    if checklist:
        template = safe_string(checklist.template_title, fallback=checklist.template_id or "-", max_len=200)

    doc = PdfDoc(title=REPORT_TITLE, author=REPORT_AUTHOR, creation_date=generated_at)

    def body(text: str, line_height_pt: Optional[float] = BODY_LINE_HEIGHT_PT) -> None:
        doc.add_wrapped_text(
            text,
            font="F1",
            font_size_pt=BODY_FONT_SIZE_PT,
            max_width_pt=BODY_WIDTH_PT,
            line_height_pt=line_height_pt,
        )

    doc.add_text(REPORT_TITLE, font="F1", font_size_pt=16)
    doc.add_line_break(16)
    for line in (
        f"Generated: {to_iso(generated_at)}",
        f"Risk: {safe_string(risk.title, fallback='(untitled)', max_len=200)}",
        f"Risk status: {safe_string(risk.status, fallback='-')}",
        f"Checklist template: {template}",
    ):
        doc.add_text(line, font="F1", font_size_pt=10)
        doc.add_line_break(12)
    doc.add_text(
        f"Checklist completion: {completed}/{len(items)} "
        f"(rollup: {safe_string(risk.checklist_status, fallback='-')})",
        font="F1",
        font_size_pt=10,
    )
    doc.add_line_break(10)
    doc.add_hr()

    doc.add_text("Risk context", font="F1", font_size_pt=12)
    doc.add_line_break(14)
    body(safe_string(risk.description, fallback="(no description)"))
    doc.add_line_break(4)
    doc.add_text(
        f"Created: {format_datetime(risk.created_at)} | Updated: {format_datetime(risk.updated_at)}",
        font="F1",
        font_size_pt=9,
    )
    doc.add_line_break(10)

    if playbook and playbook.steps:
        doc.add_text("Incident response playbook", font="F1", font_size_pt=12)
        doc.add_line_break(12)
        doc.add_text(safe_string(playbook.title, fallback="Playbook"), font="F1", font_size_pt=10)
        doc.add_line_break(12)
        for number, step in enumerate(playbook.steps, start=1):
            timestamp = format_datetime(step.completed_at) if step.completed_at else "-"
            body(f"{number}. [{_status(step.completed_at)}] {safe_string(step.description)} ({timestamp})")
        doc.add_line_break(4)

    doc.add_text("Checklist items", font="F1", font_size_pt=12)
    doc.add_line_break(12)

    if checklist is None:
        body("Checklist is not attached to this risk.", line_height_pt=None)
    elif not items:
        body("No checklist items found.", line_height_pt=None)
    else:
        for item in items:
            position = "" if item.position is None else str(item.position)
            prefix = f"{position.rjust(2)}. [{_status(item.completed_at)}] "
            body(prefix + safe_string(item.description, max_len=2000))
            doc.add_text(f"Completed at: {format_datetime(item.completed_at)}", font="F1", font_size_pt=9)
            doc.add_line_break(12)

    logger.info(f"Privacy incident report: {len(items)} checklist items on {doc.page_count} pages")
    return doc.to_buffer()
