from typing import Any, Optional

from fastapi import APIRouter, File, UploadFile

from docjson.core.logging import configure_logging
from docjson.services.conversion_service import ConversionService
from docjson.storage.local import LocalStorage
from docjson.utils.file_utils import ensure_upload

router = APIRouter(prefix="/api", tags=["Conversion"])

logger = configure_logging()
storage = LocalStorage()
conversion_service = ConversionService()


@router.post("/convert", summary="Convert an uploaded PDF, Word or Excel file to JSON")
def convert_file(file: Optional[UploadFile] = File(None)) -> Any:
    extension = ensure_upload(file)
    stored = storage.save_upload(file)
    logger.info("Received %s (%s bytes) for conversion", stored.filename, stored.size_bytes)

    try:
        result = conversion_service.convert(stored.path, stored.extension)
    finally:
        storage.discard(stored.path)

    logger.info("Converted %s (%s)", stored.filename, extension)
    return result
