"""PDF objects and data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .utils import format_pdf_coordinate, format_pdf_number, pdf_string_literal


@dataclass(frozen=True)
class PdfRef:
    """Indirect reference to object ``number`` (generation 0)."""

    number: int
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.number} {self.generation} R"


class PdfString(str):
    """Text that is always written as a string object, never as a name."""


def value_to_pdf(value: Any) -> str:
    """Convert a Python value to PDF syntax.

    Strings starting with "/" are names; other strings go through the
    string encoder. Lists become arrays, dicts become dictionaries.
    """
    if isinstance(value, PdfRef):
        return str(value)
    if isinstance(value, PdfString):
        return pdf_string_literal(value)
    if isinstance(value, dict):
        return dict_to_pdf(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(value_to_pdf(item) for item in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_pdf_number(value)
    if isinstance(value, str):
        if value.startswith("/"):
            return value
        return pdf_string_literal(value)
    if value is None:
        return "null"
    raise TypeError(f"Cannot convert {type(value).__name__} to a PDF object")


def dict_to_pdf(d: Dict[str, Any]) -> str:
    """Convert dictionary to PDF format.

    Args:
        d: Dictionary to convert; keys may carry a leading slash

    Returns:
        PDF-formatted string, e.g. ``<< /Type /Catalog /Pages 4 0 R >>``
    """
    parts = ["<<"]
    for key, value in d.items():
        parts.append(f"/{key.lstrip('/')} {value_to_pdf(value)}")
    parts.append(">>")
    return " ".join(parts)


@dataclass
class PdfStream:
    """Represents a PDF content stream (instructions for drawing).

    Each entry of ``commands`` is one complete operator sequence, written on
    its own line.
    """

    commands: List[str] = field(default_factory=list)

    def write(self, command: str) -> None:
        """Append a raw PDF command to the stream."""
        if command is None:
            return
        self.commands.append(str(command))

    def add_text(self, font_alias: str, font_size: float, x: float, y: float, text: str) -> None:
        """Add one text-showing instruction.

        Args:
            font_alias: Font alias (e.g., "/F1")
            font_size: Font size in points
            x: X position of the baseline start
            y: Y position of the baseline
            text: Text content (encoded by the string encoder)
        """
        self.write(
            f"BT {font_alias} {format_pdf_number(font_size)} Tf "
            f"{format_pdf_coordinate(x)} {format_pdf_coordinate(y)} Td "
            f"{pdf_string_literal(text)} Tj ET"
        )

    def add_line(self, x1: float, y1: float, x2: float, y2: float, width: float = 1.0) -> None:
        """Add a stroked line.

        Args:
            x1: Start X
            y1: Start Y
            x2: End X
            y2: End Y
            width: Line width
        """
        self.write(
            f"{format_pdf_coordinate(width)} w "
            f"{format_pdf_coordinate(x1)} {format_pdf_coordinate(y1)} m "
            f"{format_pdf_coordinate(x2)} {format_pdf_coordinate(y2)} l S"
        )

    def get_content(self) -> str:
        """Get stream content as string (every command newline-terminated)."""
        return "".join(f"{command}\n" for command in self.commands) or "\n"

    def get_bytes(self) -> bytes:
        # Text is already reduced to ASCII by the string encoder
        return self.get_content().encode("latin-1")


@dataclass
class PdfPage:
    """Represents a single PDF page."""

    page_number: int
    width: float
    height: float
    stream: PdfStream = field(default_factory=PdfStream)

    def get_page_dict(self, parent: PdfRef, contents: PdfRef, fonts: Dict[str, PdfRef]) -> Dict[str, Any]:
        """Generate page dictionary for PDF.

        Args:
            parent: Reference to the pages tree root
            contents: Reference to the content stream object
            fonts: Font resource dictionary

        Returns:
            Page dictionary
        """
        return {
            "Type": "/Page",
            "Parent": parent,
            "MediaBox": [0, 0, self.width, self.height],
            "Resources": {"Font": fonts},
            "Contents": contents,
        }


@dataclass
class PdfObject:
    """A numbered indirect object.

    ``body`` is either a dictionary or preformatted PDF syntax. Stream
    objects also carry ``stream`` bytes. ``offset`` is filled in by the
    writer once the object is emitted.
    """

    number: int
    body: Union[Dict[str, Any], str]
    stream: Optional[bytes] = None
    offset: Optional[int] = None

    def to_bytes(self) -> bytes:
        body = self.body if isinstance(self.body, str) else dict_to_pdf(self.body)
        parts = [f"{self.number} 0 obj\n{body}".encode("latin-1")]
        if self.stream is not None:
            parts.append(b"\nstream\n")
            parts.append(self.stream)
            if not self.stream.endswith(b"\n"):
                parts.append(b"\n")
            parts.append(b"endstream")
        parts.append(b"\nendobj\n")
        return b"".join(parts)


@dataclass
class PdfDocument:
    """Represents a complete PDF document: geometry, metadata and pages."""

    width: float
    height: float
    pages: List[PdfPage] = field(default_factory=list)
    info_dict: Dict[str, str] = field(default_factory=dict)  # Title, Author, Producer, ...

    def get_page_count(self) -> int:
        """Get total number of pages."""
        return len(self.pages)

    def new_page(self) -> PdfPage:
        """Append an empty page and return it."""
        page = PdfPage(page_number=len(self.pages) + 1, width=self.width, height=self.height)
        self.pages.append(page)
        return page

    @property
    def current_page(self) -> PdfPage:
        return self.pages[-1]

    def get_catalog_dict(self, pages_ref: PdfRef) -> Dict[str, Any]:
        """Generate catalog dictionary for PDF.

        Args:
            pages_ref: Reference to the pages tree

        Returns:
            Catalog dictionary
        """
        return {
            "Type": "/Catalog",
            "Pages": pages_ref,
        }

    def get_pages_tree_dict(self, page_refs: List[PdfRef]) -> Dict[str, Any]:
        """Generate pages tree dictionary for PDF.

        Args:
            page_refs: References to page objects, in page order

        Returns:
            Pages tree dictionary
        """
        return {
            "Type": "/Pages",
            "Kids": list(page_refs),
            "Count": len(page_refs),
        }
