from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, Optional

from .models import SourceDocument, SourceType

MIN_TEXT_LENGTH = 100

_log = logging.getLogger("flashquiz_core.ingest")


class IngestError(RuntimeError):
    """Raised when a document cannot be turned into study text."""


def ingest_text(text: str, title: str = "Pasted text") -> SourceDocument:
    return build_document(text, source_type="text", source_ref=title, title=title)


def ingest_txt_bytes(data: bytes, source_name: str = "uploaded.txt") -> SourceDocument:
    text = data.decode("utf-8", errors="replace").lstrip("\ufeff")
    return build_document(text, source_type="txt", source_ref=source_name)


def build_document(
    text: str,
    source_type: SourceType,
    source_ref: str,
    title: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> SourceDocument:
    clean = text.replace("\x00", " ").strip()
    if len(clean) < MIN_TEXT_LENGTH:
        _log.warning("Rejected %s: only %d characters of text", source_ref, len(clean))
        raise IngestError(
            f"Not enough text in {source_ref} ({len(clean)} characters). "
            f"Please provide at least {MIN_TEXT_LENGTH} characters."
        )
    document_id = hashlib.sha1(f"{source_type}::{source_ref}::{len(clean)}".encode("utf-8")).hexdigest()[:12]
    details = {"character_count": len(clean)}
    details.update(metadata or {})
    _log.info("Ingested %s (%s, %d characters)", source_ref, source_type, len(clean))
    return SourceDocument(
        document_id=document_id,
        title=title or _title_from_text(clean, source_ref),
        source_type=source_type,
        source_ref=source_ref,
        text=clean,
        metadata=details,
    )


def _title_from_text(text: str, fallback: str) -> str:
    first_line = next((line.strip() for line in text.splitlines() if line.strip()), "")
    if 3 <= len(first_line) <= 90:
        return first_line
    return fallback
