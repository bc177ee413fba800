from fastapi import status


class DocumentError(Exception):
    """Base error rendered to clients as ``{"message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UploadError(DocumentError):
    """The upload was rejected before any conversion started."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedFileType(UploadError):
    def __init__(self, message: str = "Unsupported file type") -> None:
        super().__init__(message)


class ConversionError(DocumentError):
    """A parsing library failed on the stored file."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
