"""Report layouts built on PdfDoc for the risk register application."""

from .formatting import content_disposition, export_filename, format_datetime, safe_string
from .models import (
    Checklist,
    ChecklistItem,
    IncidentRisk,
    Playbook,
    PlaybookStep,
    RiskFilters,
    RiskRow,
    RiskThresholds,
    severity_from_score,
)
from .privacy_incident import build_privacy_incident_pdf
from .risk_register import build_risk_register_pdf, format_filters, make_risk_row_line

__all__ = [
    "Checklist",
    "ChecklistItem",
    "IncidentRisk",
    "Playbook",
    "PlaybookStep",
    "RiskFilters",
    "RiskRow",
    "RiskThresholds",
    "severity_from_score",
    "build_privacy_incident_pdf",
    "build_risk_register_pdf",
    "format_filters",
    "make_risk_row_line",
    "content_disposition",
    "export_filename",
    "format_datetime",
    "safe_string",
]
