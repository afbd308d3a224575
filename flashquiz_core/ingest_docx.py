from __future__ import annotations

import io
from pathlib import Path

from .ingest_text import IngestError, build_document
from .models import SourceDocument


class DocxIngestError(IngestError):
    """Raised when DOCX ingestion fails cleanly."""


def ingest_docx_path(path: str | Path) -> SourceDocument:
    docx_path = Path(path)
    return ingest_docx_bytes(docx_path.read_bytes(), source_name=docx_path.name)


def ingest_docx_bytes(docx_bytes: bytes, source_name: str = "uploaded.docx") -> SourceDocument:
    try:
        import docx
    except ImportError as exc:  # pragma: no cover - guarded by install docs
        raise DocxIngestError("python-docx is required for DOCX ingestion") from exc

    try:
        document = docx.Document(io.BytesIO(docx_bytes))
    except Exception as exc:
        raise DocxIngestError(
            f"Failed to extract text from {source_name}. Please ensure the file is a valid DOCX. ({exc})"
        ) from exc

    paragraphs = [paragraph.text.strip() for paragraph in document.paragraphs]
    text = "\n".join(paragraph for paragraph in paragraphs if paragraph)
    if not text:
        raise DocxIngestError(f"No readable text extracted from {source_name}")
    return build_document(
        text,
        source_type="docx",
        source_ref=source_name,
        metadata={"paragraph_count": len(paragraphs)},
    )
