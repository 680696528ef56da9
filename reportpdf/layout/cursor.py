"""Page geometry and the draw cursor."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import MARGIN_RANGE, PAGE_HEIGHT_RANGE, PAGE_WIDTH_RANGE


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size and uniform margin, in points. Values are clamped on creation."""

    width: float
    height: float
    margin: float

    @classmethod
    def create(cls, width=None, height=None, margin=None) -> "PageGeometry":
        return cls(
            width=PAGE_WIDTH_RANGE.clamp(width),
            height=PAGE_HEIGHT_RANGE.clamp(height),
            margin=MARGIN_RANGE.clamp(margin),
        )

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        """Y of the first baseline on a fresh page."""
        return self.height - self.margin

    @property
    def bottom(self) -> float:
        return self.margin


@dataclass(slots=True)
class Cursor:
    """Current drawing position on the active page."""

    x: float
    y: float

    @classmethod
    def at_top(cls, geometry: PageGeometry) -> "Cursor":
        return cls(x=geometry.margin, y=geometry.top)

    def fits(self, height: float, geometry: PageGeometry) -> bool:
        """Whether advancing by ``height`` keeps y at or above the bottom margin."""
        return self.y - height >= geometry.bottom
