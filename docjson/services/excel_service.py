from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from docjson.core.errors import ConversionError
from docjson.core.logging import configure_logging

logger = configure_logging()

EXCEL_ERROR_MESSAGE = "Error converting Excel file to JSON"


class ExcelService:
    """Turn every worksheet into a list of row objects keyed by the header row."""

    def to_json(self, workbook_path: Path) -> Dict[str, List[Dict[str, Any]]]:
        try:
            # engine=None: xlsx or BIFF is detected from the file content
            sheets = pd.read_excel(
                workbook_path,
                sheet_name=None,
                header=None,
                dtype=object,
                keep_default_na=False,
                engine=None,
            )
            return {str(name): self._records(frame) for name, frame in sheets.items()}
        except Exception as exc:
            logger.exception("Excel conversion failed for %s", workbook_path.name)
            raise ConversionError(EXCEL_ERROR_MESSAGE) from exc

    # ------------------------------------------------------------------
    @classmethod
    def _records(cls, frame: pd.DataFrame) -> List[Dict[str, Any]]:
        if frame.empty:
            return []
        rows_iter = frame.itertuples(index=False, name=None)
        headers = cls._headers(next(rows_iter))
        rows: List[Dict[str, Any]] = []
        for values in rows_iter:
            row = {
                header: cls._native(value)
                for header, value in zip(headers, values)
                if not cls._is_blank(value)
            }
            if row:
                rows.append(row)
        return rows

    @classmethod
    def _headers(cls, cells: tuple) -> List[str]:
        """Blank cells become ``__EMPTY``; repeats get ``_1``, ``_2``, ... suffixes."""
        headers: List[str] = []
        seen: Dict[str, int] = {}
        for cell in cells:
            base = "__EMPTY" if cls._is_blank(cell) else str(cls._native(cell))
            count = seen.get(base, 0)
            seen[base] = count + 1
            headers.append(base if count == 0 else f"{base}_{count}")
        return headers

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value == ""
        try:
            return bool(pd.isna(value))
        except (TypeError, ValueError):
            return False

    @staticmethod
    def _native(value: Any) -> Any:
        if isinstance(value, (dt.datetime, dt.date, dt.time)):
            return value.isoformat()
        if isinstance(value, np.generic):
            return value.item()
        return value
