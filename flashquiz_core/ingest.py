from __future__ import annotations

from pathlib import Path

from .ingest_docx import DocxIngestError, ingest_docx_bytes, ingest_docx_path
from .ingest_pdf import PdfIngestError, ingest_pdf_bytes, ingest_pdf_path
from .ingest_text import MIN_TEXT_LENGTH, IngestError, ingest_text, ingest_txt_bytes
from .models import SourceDocument

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")

__all__ = [
    "DocxIngestError",
    "IngestError",
    "MIN_TEXT_LENGTH",
    "PdfIngestError",
    "SUPPORTED_EXTENSIONS",
    "ingest_bytes",
    "ingest_docx_bytes",
    "ingest_docx_path",
    "ingest_path",
    "ingest_pdf_bytes",
    "ingest_pdf_path",
    "ingest_text",
    "ingest_txt_bytes",
]


def ingest_bytes(data: bytes, filename: str) -> SourceDocument:
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return ingest_pdf_bytes(data, source_name=filename)
    if suffix == ".docx":
        return ingest_docx_bytes(data, source_name=filename)
    if suffix == ".txt":
        return ingest_txt_bytes(data, source_name=filename)
    raise IngestError("Unsupported file type. Please upload PDF, DOCX, or TXT files.")


def ingest_path(path: str | Path) -> SourceDocument:
    file_path = Path(path)
    return ingest_bytes(file_path.read_bytes(), filename=file_path.name)
