from __future__ import annotations

import io
from pathlib import Path
from typing import List

from .ingest_text import IngestError, build_document
from .models import SourceDocument


class PdfIngestError(IngestError):
    """Raised when PDF ingestion fails cleanly."""


def ingest_pdf_path(path: str | Path) -> SourceDocument:
    pdf_path = Path(path)
    return ingest_pdf_bytes(pdf_path.read_bytes(), source_name=pdf_path.name)


def ingest_pdf_bytes(pdf_bytes: bytes, source_name: str = "uploaded.pdf") -> SourceDocument:
    try:
        from pypdf import PdfReader
    except ImportError as exc:  # pragma: no cover - guarded by install docs
        raise PdfIngestError("pypdf is required for PDF ingestion") from exc

    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        page_texts: List[str] = [(page.extract_text() or "").strip() for page in reader.pages]
    except Exception as exc:
        raise PdfIngestError(
            f"Failed to extract text from {source_name}. Please ensure the file is a valid PDF. ({exc})"
        ) from exc

    text = "\n".join(page_text for page_text in page_texts if page_text)
    if not text.strip():
        raise PdfIngestError(f"No readable text extracted from {source_name}")
    return build_document(
        text,
        source_type="pdf",
        source_ref=source_name,
        metadata={"page_count": len(page_texts)},
    )
