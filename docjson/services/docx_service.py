from __future__ import annotations

import warnings
from pathlib import Path
from typing import List

from docx import Document as DocxDocument
from docx.table import Table

from docjson.core.errors import ConversionError
from docjson.core.logging import configure_logging
from docjson.models import ExtractionMessage, WordConversion

logger = configure_logging()

WORD_ERROR_MESSAGE = "Error converting Word document to JSON"


class DocxService:
    """Raw text extraction from Word documents with python-docx."""

    def to_json(self, docx_path: Path) -> dict:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                document = DocxDocument(str(docx_path))
                blocks = self._blocks(document)
            except Exception as exc:
                logger.exception("Word conversion failed for %s", docx_path.name)
                raise ConversionError(WORD_ERROR_MESSAGE) from exc

        messages = [ExtractionMessage(type="warning", message=str(item.message)) for item in caught]
        if messages:
            logger.info("Word extraction for %s produced %s warning(s)", docx_path.name, len(messages))

        result = WordConversion(text="\n\n".join(blocks), messages=messages)
        return result.model_dump()

    # ------------------------------------------------------------------
    @staticmethod
    def _blocks(document) -> List[str]:
        # Paragraphs and tables in body order; one block per table row.
        blocks: List[str] = []
        for item in document.iter_inner_content():
            if isinstance(item, Table):
                for row in item.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    if any(cells):
                        blocks.append("\t".join(cells))
            else:
                text = item.text.strip()
                if text:
                    blocks.append(text)
        return blocks
