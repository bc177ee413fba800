import time
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Optional
from uuid import uuid4

from fastapi import UploadFile

from docjson.core.config import get_settings
from docjson.core.errors import UploadError
from docjson.core.logging import configure_logging
from docjson.utils.file_utils import file_extension, sanitize_filename, size_limit_message

logger = configure_logging()

CHUNK_SIZE = 1024 * 1024


@dataclass
class StoredUpload:
    path: Path
    filename: str
    extension: str
    size_bytes: int


class LocalStorage:
    """Scratch-directory storage for uploads that only live for one request."""

    def __init__(self, temp_dir: Optional[Path] = None, max_upload_bytes: Optional[int] = None) -> None:
        settings = get_settings()
        self.temp_dir = Path(temp_dir or settings.temp_dir)
        self.max_upload_bytes = max_upload_bytes or settings.max_upload_bytes
        self.temp_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _generate_filename(original: str) -> str:
        return f"{int(time.time() * 1000)}-{uuid4().hex[:8]}-{sanitize_filename(original)}"

    def save_upload(self, upload: UploadFile) -> StoredUpload:
        filename = upload.filename or ""
        # size is known once the multipart body has been spooled; the stream count below
        # covers uploads that arrive without it
        if upload.size is not None and upload.size > self.max_upload_bytes:
            raise UploadError(size_limit_message(self.max_upload_bytes))
        upload.file.seek(0)
        path, size = self._save_stream(upload.file, self.temp_dir / self._generate_filename(filename))
        return StoredUpload(
            path=path,
            filename=filename,
            extension=file_extension(filename),
            size_bytes=size,
        )

    def _save_stream(self, stream: IO[bytes], target_path: Path) -> tuple[Path, int]:
        written = 0
        try:
            with target_path.open("wb") as buffer:
                while True:
                    chunk = stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_upload_bytes:
                        raise UploadError(size_limit_message(self.max_upload_bytes))
                    buffer.write(chunk)
        except BaseException:
            self.discard(target_path)
            raise
        return target_path, written

    def discard(self, path: Optional[Path]) -> None:
        """Delete a stored upload; failures are logged and never raised."""
        if not path:
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not delete temporary file %s: %s", path, exc)
