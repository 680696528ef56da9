"""
reportpdf - dependency-free PDF generation for text reports.

Builds paginated PDF files from report text without an external PDF engine:

- String encoding: single-byte literals or UTF-16BE hex strings
- Layout: heuristic line wrapping and automatic page breaks
- Serialization: numbered objects, exact xref offsets, trailer

Main Components:
- PdfDoc: single-use document builder
- PdfWriter: byte-level serializer
- reports: risk register and privacy incident report layouts
"""

from .config import A4_HEIGHT_PT, A4_WIDTH_PT, PdfDocOptions
from .document import PDF_CONTENT_TYPE, PdfDoc
from .exceptions import DocumentFinalizedError, ReportPdfError, SerializationError
from .layout import estimate_max_chars, wrap_text
from .pdfcompiler import PdfWriter, pdf_string_literal

__version__ = "1.0.0"

__all__ = [
    "A4_HEIGHT_PT",
    "A4_WIDTH_PT",
    "PDF_CONTENT_TYPE",
    "PdfDoc",
    "PdfDocOptions",
    "PdfWriter",
    "DocumentFinalizedError",
    "ReportPdfError",
    "SerializationError",
    "estimate_max_chars",
    "pdf_string_literal",
    "wrap_text",
]
