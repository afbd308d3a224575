from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from .models import BLANK_MARKER, GENERAL_TOPIC

CAPITALIZED_PHRASE_RE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
DEFINITION_CLAUSE_RE = re.compile(r"\b(?:is|are|was|were|means|refers to)\s+([^.!?]+)", re.IGNORECASE)
DEFINITION_PREDICATE_RE = re.compile(r"\b(?:is|are|was|were|means|refers to|defined as)\b", re.IGNORECASE)
LEADING_PREDICATE_RE = re.compile(
    r"^(?:(?:is|are|was|were)\s+defined\s+as|is|are|was|were|means|refers\s+to|defined\s+as)\s+",
    re.IGNORECASE,
)

MAX_DEFINITION_WORDS = 7


def extract_key_terms(
    sentences: Iterable[str],
    min_length: int = 4,
    max_length: int = 29,
    include_definitions: bool = False,
    limit: Optional[int] = None,
) -> List[str]:
    """Collect candidate study terms in sentence order, deduplicated by exact match.

    Capitalized phrases are always mined. With ``include_definitions`` the short
    clause following a definition predicate ("X is ...", "Y refers to ...") is
    mined as well.
    """
    terms: Dict[str, None] = {}
    for sentence in sentences:
        for match in CAPITALIZED_PHRASE_RE.finditer(sentence):
            phrase = match.group(0)
            if min_length <= len(phrase) <= max_length:
                terms.setdefault(phrase, None)
        if not include_definitions:
            continue
        for match in DEFINITION_CLAUSE_RE.finditer(sentence):
            words = match.group(1).split()
            if 0 < len(words) <= MAX_DEFINITION_WORDS:
                terms.setdefault(" ".join(words), None)
    ordered = list(terms)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def find_definition_sentences(sentences: Iterable[str], min_length: int = 30, max_length: int = 200) -> List[str]:
    return [
        sentence
        for sentence in sentences
        if min_length <= len(sentence) < max_length and DEFINITION_PREDICATE_RE.search(sentence)
    ]


def contains_term(sentence: str, term: str) -> bool:
    return term.lower() in sentence.lower()


def blank_term(sentence: str, term: str, marker: str = BLANK_MARKER) -> str:
    """Replace every case-insensitive occurrence of term with the blank marker."""
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return pattern.sub(lambda _: marker, sentence)


def find_topic(sentence: str, terms: Sequence[str]) -> str:
    for term in terms:
        if contains_term(sentence, term):
            return term
    return GENERAL_TOPIC


def strip_definition_prefix(sentence: str, term: str) -> str:
    """Drop the defined term and its predicate from the front of a definition sentence."""
    remainder = re.sub(rf"^{re.escape(term)}\s+", "", sentence, flags=re.IGNORECASE)
    remainder = LEADING_PREDICATE_RE.sub("", remainder)
    return remainder.strip()


def starts_with_term(sentence: str, term: str) -> bool:
    return sentence.lower().startswith(term.lower() + " ")
