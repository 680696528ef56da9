"""Plain data handed to the report builders by the surrounding application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from ..config import NumericRange, to_finite_float

Timestamp = Union[datetime, str, None]

LOW_MAX_RANGE = NumericRange(1, 23, 8)
MEDIUM_MAX_RANGE = NumericRange(2, 24, 15)


@dataclass(frozen=True)
class RiskThresholds:
    """Upper score bounds for the low and medium severity bands."""

    low_max: int = 8
    medium_max: int = 15

    def normalized(self) -> "RiskThresholds":
        """Clamp both bounds and keep ``low_max < medium_max``."""
        low_max = int(LOW_MAX_RANGE.clamp(self.low_max))
        medium_max = int(MEDIUM_MAX_RANGE.clamp(self.medium_max))
        low_max = min(low_max, medium_max - 1)
        medium_max = max(medium_max, low_max + 1)
        return RiskThresholds(low_max=low_max, medium_max=medium_max)


def severity_from_score(score: Any, thresholds: Optional[RiskThresholds] = None) -> Optional[str]:
    """Map a risk score to "low", "medium" or "high" (None if not a number)."""
    value = to_finite_float(score)
    if value is None:
        return None
    bands = (thresholds or RiskThresholds()).normalized()
    if value <= bands.low_max:
        return "low"
    if value <= bands.medium_max:
        return "medium"
    return "high"


@dataclass
class RiskRow:
    """One line of the risk register export."""

    title: str = ""
    category: str = ""
    status: str = ""
    probability: Optional[int] = None
    impact: Optional[int] = None
    risk_score: Optional[int] = None
    severity: Optional[str] = None
    threat_type: str = ""
    checklist_status: str = "not_started"

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], thresholds: Optional[RiskThresholds] = None) -> "RiskRow":
        """Build a row from a database-style mapping (snake_case keys).

        Severity is derived from ``risk_score`` when the mapping has none.
        """
        score = row.get("risk_score")
        severity = row.get("severity") or severity_from_score(score, thresholds)
        return cls(
            title=row.get("title") or "",
            category=row.get("category") or "",
            status=row.get("status") or "",
            probability=row.get("probability"),
            impact=row.get("impact"),
            risk_score=score,
            severity=severity,
            threat_type=row.get("threat_type") or "",
            checklist_status=row.get("checklist_status") or "not_started",
        )


@dataclass
class RiskFilters:
    """Filters that were applied when selecting the exported risks."""

    q: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    threat_type: Optional[str] = None
    checklist_status: Optional[str] = None
    probability: Optional[int] = None
    impact: Optional[int] = None
    min_score: Optional[int] = None
    max_score: Optional[int] = None


@dataclass
class IncidentRisk:
    title: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    checklist_status: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass
class ChecklistItem:
    position: Optional[int] = None
    description: Optional[str] = None
    completed_at: Timestamp = None


@dataclass
class Checklist:
    template_id: Optional[str] = None
    template_title: Optional[str] = None
    items: List[ChecklistItem] = field(default_factory=list)

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self.items if item.completed_at)


@dataclass
class PlaybookStep:
    description: Optional[str] = None
    completed_at: Timestamp = None


@dataclass
class Playbook:
    title: Optional[str] = None
    steps: List[PlaybookStep] = field(default_factory=list)
