"""Resource management for PDF (standard fonts)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .objects import PdfRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdfFont:
    """Represents one of the standard 14 Type1 fonts (never embedded)."""

    alias: str  # PDF alias (e.g., "/F1")
    base_font: str  # e.g., "Helvetica"
    monospace: bool = False
    # Average glyph advance as a fraction of the font size
    width_factor: float = 0.52

    @property
    def resource_name(self) -> str:
        """Alias without the leading slash (e.g., "F1")."""
        return self.alias.lstrip("/")

    def get_font_dict(self) -> Dict[str, str]:
        return {
            "Type": "/Font",
            "Subtype": "/Type1",
            "BaseFont": f"/{self.base_font}",
        }


HELVETICA = PdfFont(alias="/F1", base_font="Helvetica", monospace=False, width_factor=0.52)
COURIER = PdfFont(alias="/F2", base_font="Courier", monospace=True, width_factor=0.60)


class PdfFontRegistry:
    """Registry for the fonts a document may reference.

    Lookups accept the alias with or without a slash ("F2", "/F2") or the base
    font name ("Courier"), case-insensitively. Unknown names resolve to the
    default font.
    """

    def __init__(self, fonts: Optional[List[PdfFont]] = None):
        self._fonts: Dict[str, PdfFont] = {}
        for font in fonts or [HELVETICA, COURIER]:
            self.register_font(font)
        self._default = next(iter(self._fonts.values()))

    def register_font(self, font: PdfFont) -> PdfFont:
        """Register a font and return it (existing alias wins)."""
        return self._fonts.setdefault(font.resource_name, font)

    @property
    def default_font(self) -> PdfFont:
        return self._default

    def get_font(self, name: Optional[str]) -> Optional[PdfFont]:
        """Get registered font by alias or base font name.

        Args:
            name: Alias ("F1", "/F1") or base font name ("Helvetica")

        Returns:
            PdfFont or None if not found
        """
        if not isinstance(name, str):
            return None
        key = name.strip().lstrip("/").lower()
        for font in self._fonts.values():
            if key in (font.resource_name.lower(), font.base_font.lower()):
                return font
        return None

    def resolve(self, name: Optional[str]) -> PdfFont:
        """Like ``get_font`` but falls back to the default font."""
        font = self.get_font(name)
        if font is None:
            logger.warning(f"Unknown font {name!r}, falling back to {self._default.resource_name}")
            return self._default
        return font

    def fonts(self) -> List[PdfFont]:
        """Registered fonts in registration order."""
        return list(self._fonts.values())

    def get_resources_dict(self, object_numbers: Dict[str, int]) -> Dict[str, PdfRef]:
        """Generate the /Font resource dictionary for a page.

        Args:
            object_numbers: Mapping resource name -> font object number

        Returns:
            Dictionary mapping resource names to indirect references
        """
        return {
            font.resource_name: PdfRef(object_numbers[font.resource_name])
            for font in self._fonts.values()
        }
