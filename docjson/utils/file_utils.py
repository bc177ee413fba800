import re
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from docjson.core.errors import UploadError

ALLOWED_EXTENSIONS = frozenset({".pdf", ".docx", ".xlsx", ".xls"})

NO_FILE_MESSAGE = "No file uploaded"
INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF, Word, and Excel files are allowed."

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def file_extension(filename: Optional[str]) -> str:
    """Lower-case suffix of ``filename`` including the dot, or ``""``."""
    return Path(filename or "").suffix.lower()


def ensure_upload(upload: Optional[UploadFile]) -> str:
    """Check that a file was sent with an allowed extension and return that extension."""
    if upload is None or not upload.filename:
        raise UploadError(NO_FILE_MESSAGE)

    extension = file_extension(upload.filename)
    if extension not in ALLOWED_EXTENSIONS:
        raise UploadError(INVALID_TYPE_MESSAGE)
    return extension


def size_limit_message(max_bytes: int) -> str:
    megabytes = max_bytes / (1024 * 1024)
    label = f"{megabytes:g}MB" if megabytes >= 1 else f"{max_bytes} bytes"
    return f"File too large. Maximum size is {label}."


def sanitize_filename(filename: str) -> str:
    """Keep only the basename and replace anything outside ``[A-Za-z0-9._-]`` with ``_``."""
    name = Path(filename.replace("\\", "/")).name
    cleaned = _UNSAFE_CHARS.sub("_", name).lstrip(".")
    return cleaned or "upload"
