
from .conversion import ExtractionMessage, PDFConversion, PDFMetadata, WordConversion

__all__ = [
    "ExtractionMessage",
    "PDFConversion",
    "PDFMetadata",
    "WordConversion",
]
