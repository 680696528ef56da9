"""PdfDoc - single-use builder that lays out report text and produces PDF bytes.

Typical use::

    doc = PdfDoc(title="Risk register export", author="Easy Risk Register")
    doc.add_text("Risk register export", font_size_pt=18)
    doc.add_line_break(18)
    doc.add_wrapped_text(description, font_size_pt=10, max_width_pt=520)
    doc.add_hr()
    pdf_bytes = doc.to_buffer()

Coordinates are PDF points with the origin at the bottom-left corner. Every
numeric argument is clamped to a safe range (see ``reportpdf.config``) rather
than rejected.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

from .config import (
    A4_HEIGHT_PT,
    A4_WIDTH_PT,
    DEFAULT_CREATOR,
    DEFAULT_MARGIN_PT,
    DEFAULT_PRODUCER,
    FONT_SIZE_RANGE,
    LINE_BREAK_RANGE,
    LINE_HEIGHT_FACTOR,
    LINE_HEIGHT_RANGE,
    MIN_WRAP_WIDTH_PT,
    RULE_SPACE_PT,
    RULE_SPACING_PT,
    RULE_THICKNESS_RANGE,
    TEXT_LEADING_PT,
    NumericRange,
    PdfDocOptions,
    finite_number,
)
from .exceptions import DocumentFinalizedError
from .layout.cursor import Cursor, PageGeometry
from .layout.line_breaker import LineBreaker
from .pdfcompiler.objects import PdfDocument, PdfPage
from .pdfcompiler.resources import PdfFontRegistry
from .pdfcompiler.utils import format_pdf_date
from .pdfcompiler.writer import PdfWriter

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class PdfDoc:
    """Builds a paginated text report page by page.

    The builder owns its pages and cursor. It is not thread-safe and may be
    serialized only once.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        page_width_pt: Any = A4_WIDTH_PT,
        page_height_pt: Any = A4_HEIGHT_PT,
        margin_pt: Any = DEFAULT_MARGIN_PT,
        *,
        creator: str = DEFAULT_CREATOR,
        producer: str = DEFAULT_PRODUCER,
        creation_date: Optional[datetime] = None,
        compress: bool = False,
    ):
        """Initialize the builder with one empty page.

        Args:
            title: Document title (ignored unless a string)
            author: Document author (ignored unless a string)
            page_width_pt: Page width, clamped to [200, 2000]
            page_height_pt: Page height, clamped to [200, 2000]
            margin_pt: Uniform margin, clamped to [10, 200]
            creator: Info /Creator value
            producer: Info /Producer value
            creation_date: Info /CreationDate (default: time of serialization)
            compress: FlateDecode page content streams
        """
        self.geometry = PageGeometry.create(page_width_pt, page_height_pt, margin_pt)
        self.title = title if isinstance(title, str) else None
        self.author = author if isinstance(author, str) else None
        self.creator = creator
        self.producer = producer
        self.creation_date = creation_date
        self.compress = compress

        self.fonts = PdfFontRegistry()
        self._document = PdfDocument(width=self.geometry.width, height=self.geometry.height)
        self._cursor = Cursor.at_top(self.geometry)
        self._finalized = False
        self._start_new_page()

    @classmethod
    def from_options(cls, options: Optional[PdfDocOptions] = None) -> "PdfDoc":
        """Create a builder from a ``PdfDocOptions`` instance."""
        options = options or PdfDocOptions()
        return cls(
            title=options.title,
            author=options.author,
            page_width_pt=options.page_width_pt,
            page_height_pt=options.page_height_pt,
            margin_pt=options.margin_pt,
            creator=options.creator,
            producer=options.producer,
            creation_date=options.creation_date,
            compress=options.compress,
        )

    @property
    def page_width_pt(self) -> float:
        return self.geometry.width

    @property
    def page_height_pt(self) -> float:
        return self.geometry.height

    @property
    def margin_pt(self) -> float:
        return self.geometry.margin

    @property
    def pages(self) -> List[PdfPage]:
        return self._document.pages

    @property
    def page_count(self) -> int:
        return self._document.get_page_count()

    @property
    def cursor(self) -> Cursor:
        """Copy of the current cursor position."""
        return Cursor(self._cursor.x, self._cursor.y)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self) -> None:
        if self._finalized:
            raise DocumentFinalizedError("PdfDoc already serialized", "create a new builder per document")

    def _start_new_page(self) -> PdfPage:
        page = self._document.new_page()
        self._cursor = Cursor.at_top(self.geometry)
        if page.page_number > 1:
            logger.debug(f"Page break: started page {page.page_number}")
        return page

    def _ensure_space(self, height: float) -> bool:
        """Start a new page unless ``height`` fits above the bottom margin.

        Returns:
            True if a new page was started
        """
        if self._cursor.fits(height, self.geometry):
            return False
        self._start_new_page()
        return True

    def move_to(self, x: Any = None, y: Any = None) -> None:
        """Move the cursor; coordinates that are not finite numbers are ignored."""
        self._check_open()
        new_x = finite_number(x)
        new_y = finite_number(y)
        if new_x is not None:
            self._cursor.x = new_x
        if new_y is not None:
            self._cursor.y = new_y

    def add_line_break(self, height_pt: Any = LINE_BREAK_RANGE.fallback) -> None:
        """Advance the cursor down by ``height_pt`` (clamped to [6, 60]).

        If the advance does not fit, a new page is started instead and the
        cursor stays at its top margin.
        """
        self._check_open()
        height = LINE_BREAK_RANGE.clamp(height_pt)
        if self._ensure_space(height):
            return
        self._cursor.y -= height

    def add_text(
        self,
        text: Any,
        font: str = "F1",
        font_size_pt: Any = FONT_SIZE_RANGE.fallback,
        x: Any = None,
        y: Any = None,
    ) -> None:
        """Draw one line of text without wrapping.

        The text baseline starts at the cursor, or at ``x``/``y`` when given.
        The cursor is moved to the drawing position but not advanced.

        Args:
            text: Text to draw (any value, converted with ``str``)
            font: Font alias ("F1" Helvetica, "F2" Courier)
            font_size_pt: Font size, clamped to [6, 28]
            x: Optional explicit X position
            y: Optional explicit Y position
        """
        self._check_open()
        font_size = FONT_SIZE_RANGE.clamp(font_size_pt)
        pdf_font = self.fonts.resolve(font)
        self._ensure_space(font_size + TEXT_LEADING_PT)

        explicit_x = finite_number(x)
        explicit_y = finite_number(y)
        draw_x = self._cursor.x if explicit_x is None else explicit_x
        draw_y = self._cursor.y if explicit_y is None else explicit_y

        self._document.current_page.stream.add_text(pdf_font.alias, font_size, draw_x, draw_y, text)
        self._cursor.x = draw_x
        self._cursor.y = draw_y

    def add_wrapped_text(
        self,
        text: Any,
        font: str = "F1",
        font_size_pt: Any = FONT_SIZE_RANGE.fallback,
        max_width_pt: Any = None,
        line_height_pt: Any = None,
    ) -> int:
        """Wrap text to ``max_width_pt`` and draw it line by line.

        Args:
            text: Possibly multi-line text; blank lines are kept
            font: Font alias ("F1" Helvetica, "F2" Courier)
            font_size_pt: Font size, clamped to [6, 28]
            max_width_pt: Wrap width, clamped to [50, content width]
            line_height_pt: Advance per line, default font size * 1.25, clamped to [8, 60]

        Returns:
            Number of lines drawn
        """
        self._check_open()
        font_size = FONT_SIZE_RANGE.clamp(font_size_pt)
        content_width = self.geometry.content_width
        max_width = NumericRange(MIN_WRAP_WIDTH_PT, content_width, content_width).clamp(max_width_pt)
        if line_height_pt is None:
            line_height_pt = font_size * LINE_HEIGHT_FACTOR
        line_height = LINE_HEIGHT_RANGE.clamp(line_height_pt)

        pdf_font = self.fonts.resolve(font)
        breaker = LineBreaker(pdf_font, font_size)
        lines = breaker.break_text("" if text is None else str(text), max_width)

        for line in lines:
            self.add_text(line.text, font=pdf_font.resource_name, font_size_pt=font_size)
            self.add_line_break(line_height)
        return len(lines)

    def add_horizontal_rule(self, thickness_pt: Any = RULE_THICKNESS_RANGE.fallback) -> None:
        """Stroke a rule across the content width at the cursor, then advance.

        Args:
            thickness_pt: Line width, clamped to [0.5, 4]
        """
        self._check_open()
        thickness = RULE_THICKNESS_RANGE.clamp(thickness_pt)
        self._ensure_space(RULE_SPACE_PT)
        y = self._cursor.y
        self._document.current_page.stream.add_line(
            self.geometry.margin, y, self.geometry.width - self.geometry.margin, y, thickness
        )
        self.add_line_break(RULE_SPACING_PT)

    add_hr = add_horizontal_rule

    def _info_dict(self) -> dict:
        info = {}
        if self.title:
            info["Title"] = self.title
        if self.author:
            info["Author"] = self.author
        info["Creator"] = self.creator
        info["Producer"] = self.producer
        info["CreationDate"] = format_pdf_date(self.creation_date)
        return info

    def to_buffer(self) -> bytes:
        """Serialize the document and finalize the builder.

        Returns:
            Complete PDF file contents

        Raises:
            DocumentFinalizedError: If called more than once
        """
        self._check_open()
        self._document.info_dict = self._info_dict()
        writer = PdfWriter(font_registry=self.fonts, compress=self.compress)
        data = writer.write(self._document)
        self._finalized = True
        logger.debug(f"PdfDoc finalized: {self.page_count} pages, {len(data)} bytes")
        return data

    def save(self, path: Union[str, Path]) -> Path:
        """Serialize the document (finalizing the builder) and write it to ``path``."""
        path = Path(path)
        data = self.to_buffer()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info(f"PDF saved to {path} ({len(data)} bytes)")
        return path
