from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from docjson.core.errors import UnsupportedFileType
from docjson.services.docx_service import DocxService
from docjson.services.excel_service import ExcelService
from docjson.services.pdf_service import PDFService

Converter = Callable[[Path], Any]


class ConversionService:
    """Route a stored upload to the converter registered for its extension."""

    def __init__(
        self,
        pdf_service: Optional[PDFService] = None,
        docx_service: Optional[DocxService] = None,
        excel_service: Optional[ExcelService] = None,
    ) -> None:
        pdf_service = pdf_service or PDFService()
        docx_service = docx_service or DocxService()
        excel_service = excel_service or ExcelService()

        self.converters: Dict[str, Converter] = {
            ".pdf": pdf_service.to_json,
            ".docx": docx_service.to_json,
            ".xlsx": excel_service.to_json,
            ".xls": excel_service.to_json,
        }

    # ------------------------------------------------------------------
    def convert(self, source_path: Path, extension: Optional[str] = None) -> Any:
        suffix = (extension or source_path.suffix).lower()
        converter = self.converters.get(suffix)
        if converter is None:
            raise UnsupportedFileType()
        return converter(source_path)
