from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class PDFMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    author: str = ""
    subject: str = ""
    keywords: str = ""
    creator: str = ""
    producer: str = ""
    creation_date: str = Field(default="", alias="creationDate")
    modification_date: str = Field(default="", alias="modificationDate")
    page_count: int = Field(default=0, alias="pageCount")


class PDFConversion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    paragraphs: List[str] = Field(default_factory=list)
    num_pages: int = Field(default=0, alias="numPages")
    metadata: PDFMetadata = Field(default_factory=PDFMetadata)


class ExtractionMessage(BaseModel):
    type: Literal["warning", "error"] = "warning"
    message: str


class WordConversion(BaseModel):
    text: str = ""
    messages: List[ExtractionMessage] = Field(default_factory=list)
