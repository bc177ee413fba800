from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Optional

from pypdf import PdfReader

from docjson.core.errors import ConversionError
from docjson.core.logging import configure_logging
from docjson.models import PDFConversion, PDFMetadata

logger = configure_logging()

PDF_ERROR_MESSAGE = "Error converting PDF to JSON"

_BLANK_LINE = re.compile(r"\n\s*\n")


class PDFService:
    """Extract text, paragraphs, and document information from a PDF file."""

    def to_json(self, pdf_path: Path) -> dict:
        try:
            reader = PdfReader(str(pdf_path))
            page_count = len(reader.pages)
            text = "\n".join(page.extract_text() or "" for page in reader.pages).strip()
            metadata = self._metadata(reader, page_count)
        except Exception as exc:
            logger.exception("PDF conversion failed for %s", pdf_path.name)
            raise ConversionError(PDF_ERROR_MESSAGE) from exc

        result = PDFConversion(
            text=text,
            paragraphs=self.split_paragraphs(text),
            num_pages=page_count,
            metadata=metadata,
        )
        return result.model_dump(by_alias=True)

    # ------------------------------------------------------------------
    @staticmethod
    def split_paragraphs(text: str) -> List[str]:
        """Split on blank lines, trimming each block and dropping empty ones."""
        if not text:
            return []
        blocks = (block.strip() for block in _BLANK_LINE.split(text))
        return [block for block in blocks if block]

    @classmethod
    def _metadata(cls, reader: PdfReader, page_count: int) -> PDFMetadata:
        info = reader.metadata
        if info is None:
            return PDFMetadata(page_count=page_count)

        return PDFMetadata(
            title=cls._as_text(info.get("/Title")),
            author=cls._as_text(info.get("/Author")),
            subject=cls._as_text(info.get("/Subject")),
            keywords=cls._as_text(info.get("/Keywords")),
            creator=cls._as_text(info.get("/Creator")),
            producer=cls._as_text(info.get("/Producer")),
            creation_date=cls._as_text(info.get("/CreationDate")),
            modification_date=cls._as_text(info.get("/ModDate")),
            page_count=page_count,
        )

    @staticmethod
    def _as_text(value: Optional[Any]) -> str:
        if value is None:
            return ""
        if hasattr(value, "get_object"):
            value = value.get_object()
        return str(value).strip()
