"""PDF file writer - numbers objects, generates xref, trailer, and final PDF bytes."""

from __future__ import annotations

import io
import logging
import zlib
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

from ..exceptions import ReportPdfError, SerializationError
from .objects import PdfDocument, PdfObject, PdfPage, PdfRef, PdfString
from .resources import PdfFontRegistry

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n"
# Comment with high-bit bytes so transfer tools treat the file as binary
BINARY_MARKER = b"%\xe2\xe3\xcf\xd3\n"


class PdfWriter:
    """Serializes a PdfDocument into a single, self-consistent byte buffer.

    Object layout, in number order: Info, one object per registered font,
    the pages tree root, then a content stream and a page object for every
    page, and finally the catalog.
    """

    def __init__(self, font_registry: Optional[PdfFontRegistry] = None, compress: bool = False):
        """Initialize PDF writer.

        Args:
            font_registry: Fonts referenced from every page (default: Helvetica and Courier)
            compress: FlateDecode content streams when that makes them smaller
        """
        self.font_registry = font_registry or PdfFontRegistry()
        self.compress = compress
        self.objects: List[PdfObject] = []

    def write(self, document: PdfDocument) -> bytes:
        """Serialize a document.

        Args:
            document: PdfDocument to write

        Returns:
            Complete PDF file contents

        Raises:
            ValueError: If document is None
            SerializationError: If the document cannot be serialized
        """
        if document is None:
            raise ValueError("document cannot be None")

        try:
            catalog, info = self._build_objects(document)
            buffer = io.BytesIO()
            self._write_file(buffer, catalog, info)
            data = buffer.getvalue()
        except ReportPdfError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error while serializing PDF: {e}")
            raise SerializationError("Failed to serialize PDF", str(e)) from e

        logger.debug(
            f"Serialized PDF: {document.get_page_count()} pages, "
            f"{len(self.objects)} objects, {len(data)} bytes"
        )
        return data

    def _allocate(self, body: Union[Dict, str], stream: Optional[bytes] = None) -> PdfObject:
        """Create the next numbered object."""
        obj = PdfObject(number=len(self.objects) + 1, body=body, stream=stream)
        self.objects.append(obj)
        return obj

    def _build_objects(self, document: PdfDocument) -> Tuple[PdfObject, PdfObject]:
        """Allocate and number every object of the document.

        Returns:
            Tuple (catalog object, info object)
        """
        self.objects = []

        info = self._allocate({key: PdfString(value) for key, value in document.info_dict.items()})

        font_numbers: Dict[str, int] = {}
        for font in self.font_registry.fonts():
            font_numbers[font.resource_name] = self._allocate(font.get_font_dict()).number
        font_resources = self.font_registry.get_resources_dict(font_numbers)

        # Kids are unknown until every page has a number
        pages_root = self._allocate("<<>>")
        pages_ref = PdfRef(pages_root.number)

        page_refs: List[PdfRef] = []
        for page in document.pages:
            stream_dict, stream_bytes = self._build_stream(page)
            contents = self._allocate(stream_dict, stream=stream_bytes)
            page_obj = self._allocate(page.get_page_dict(pages_ref, PdfRef(contents.number), font_resources))
            page_refs.append(PdfRef(page_obj.number))

        pages_root.body = document.get_pages_tree_dict(page_refs)
        catalog = self._allocate(document.get_catalog_dict(pages_ref))
        return catalog, info

    def _build_stream(self, page: PdfPage) -> Tuple[Dict, bytes]:
        """Encode a page's operators, compressing when enabled and worthwhile."""
        stream_bytes = page.stream.get_bytes()
        if self.compress:
            compressed = zlib.compress(stream_bytes)
            if len(compressed) < len(stream_bytes):
                return {"Length": len(compressed), "Filter": "/FlateDecode"}, compressed
        return {"Length": len(stream_bytes)}, stream_bytes

    def _write_file(self, f: BinaryIO, catalog: PdfObject, info: PdfObject) -> None:
        f.write(PDF_HEADER)
        f.write(BINARY_MARKER)

        for obj in self.objects:
            self._write_object(f, obj)

        xref_offset = f.tell()
        self._write_xref(f)
        self._write_trailer(f, xref_offset, catalog.number, info.number)

    def _write_object(self, f: BinaryIO, obj: PdfObject) -> None:
        """Write PDF object, recording the offset of its header.

        Args:
            f: Binary output
            obj: Object to write
        """
        obj.offset = f.tell()
        f.write(obj.to_bytes())

    def _write_xref(self, f: BinaryIO) -> None:
        """Write xref table.

        Args:
            f: Binary output
        """
        f.write(b"xref\n")
        f.write(f"0 {len(self.objects) + 1}\n".encode("ascii"))
        f.write(b"0000000000 65535 f \n")  # Free object

        for obj in self.objects:
            f.write(f"{obj.offset:010d} {0:05d} n \n".encode("ascii"))

    def _write_trailer(self, f: BinaryIO, xref_offset: int, root_obj_num: int, info_obj_num: int) -> None:
        """Write trailer.

        Args:
            f: Binary output
            xref_offset: Offset of the ``xref`` keyword
            root_obj_num: Root object number (catalog)
            info_obj_num: Info object number for metadata
        """
        f.write(b"trailer\n")
        trailer = f"<< /Size {len(self.objects) + 1} /Root {root_obj_num} 0 R /Info {info_obj_num} 0 R >>"
        f.write(trailer.encode("ascii"))
        f.write(b"\nstartxref\n")
        f.write(f"{xref_offset}\n".encode("ascii"))
        f.write(b"%%EOF\n")
