from __future__ import annotations

import re
from typing import List, Optional

SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
WHITESPACE_RE = re.compile(r"\s+")


def split_sentences(text: str, min_length: int, limit: Optional[int] = None) -> List[str]:
    """Split text after terminal punctuation and keep sentences longer than min_length.

    Abbreviations and decimal numbers are not special-cased.
    """
    if not text:
        return []
    normalized = WHITESPACE_RE.sub(" ", text)
    sentences = [sentence.strip() for sentence in SENTENCE_SPLIT_RE.split(normalized)]
    sentences = [sentence for sentence in sentences if len(sentence) > min_length]
    if limit is not None:
        sentences = sentences[:limit]
    return sentences
