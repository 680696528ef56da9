"""PDF Compiler - objects, standard fonts, string encoding and the byte-level writer."""

from .objects import PdfDocument, PdfObject, PdfPage, PdfRef, PdfStream
from .resources import COURIER, HELVETICA, PdfFont, PdfFontRegistry
from .utils import pdf_string_literal
from .writer import PdfWriter

__all__ = [
    "PdfDocument",
    "PdfObject",
    "PdfPage",
    "PdfRef",
    "PdfStream",
    "PdfFont",
    "PdfFontRegistry",
    "HELVETICA",
    "COURIER",
    "PdfWriter",
    "pdf_string_literal",
]
