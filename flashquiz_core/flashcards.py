from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Set, Tuple

from .models import Flashcard, FlashcardOptions
from .segmenter import split_sentences
from .terms import (
    blank_term,
    contains_term,
    extract_key_terms,
    find_definition_sentences,
    find_topic,
    starts_with_term,
    strip_definition_prefix,
)

_log = logging.getLogger("flashquiz_core.flashcards")

CardDraft = Tuple[str, str, str, str]


def generate_flashcards(
    text: str,
    count: int = 20,
    options: Optional[FlashcardOptions] = None,
    rng: Optional[random.Random] = None,
) -> List[Flashcard]:
    """Build up to ``count`` flashcards, best sources first.

    Definition sentences ("Osmosis is the movement of ...") give term/definition
    cards. Other sentences mentioning a key term give "What is X?" cards with the
    sentence as the answer. Any shortfall is filled from key terms in random
    order. No sentence and no term is used twice.
    """
    config = options or FlashcardOptions()
    random_source = rng or random.Random(config.seed)
    if count <= 0 or not text or len(text.strip()) < config.min_text_length:
        return []

    sentences = split_sentences(text, min_length=config.min_sentence_length)
    if not sentences:
        return []

    key_terms = extract_key_terms(
        sentences,
        min_length=config.min_term_length,
        max_length=config.max_term_length,
    )
    if not key_terms:
        _log.debug("No key terms found in %d sentences", len(sentences))
        return []

    cards: List[Flashcard] = []
    used_sentences: Set[str] = set()
    used_terms: Set[str] = set()

    def add(draft: CardDraft, sentence: str) -> None:
        term, front, back, topic = draft
        cards.append(Flashcard(id=len(cards) + 1, front=front, back=back, topic=topic))
        used_sentences.add(sentence)
        used_terms.add(term)

    definition_sentences = find_definition_sentences(
        sentences,
        min_length=config.min_definition_length,
        max_length=config.max_definition_length,
    )
    for sentence in definition_sentences:
        if len(cards) >= count:
            break
        if sentence in used_sentences:
            continue
        draft = _card_from_definition(sentence, key_terms, used_terms, config)
        if draft is not None:
            add(draft, sentence)
    from_definitions = len(cards)

    for sentence in sentences:
        if len(cards) >= count:
            break
        if sentence in used_sentences:
            continue
        draft = _card_from_context(sentence, key_terms, used_terms, config)
        if draft is not None:
            add(draft, sentence)
    from_context = len(cards) - from_definitions

    if len(cards) < count:
        shuffled_terms = list(key_terms)
        random_source.shuffle(shuffled_terms)
        for term in shuffled_terms:
            if len(cards) >= count:
                break
            if term in used_terms:
                continue
            sentence = next(
                (item for item in sentences if item not in used_sentences and contains_term(item, term)),
                None,
            )
            if sentence is not None:
                add((term, f"What is {term}?", sentence, term), sentence)

    _log.info(
        "Generated %d flashcards (%d definition, %d context, %d fallback) from %d sentences and %d terms",
        len(cards),
        from_definitions,
        from_context,
        len(cards) - from_definitions - from_context,
        len(sentences),
        len(key_terms),
    )
    return cards[:count]


def _card_from_definition(
    sentence: str,
    key_terms: Sequence[str],
    used_terms: Set[str],
    config: FlashcardOptions,
) -> Optional[CardDraft]:
    for term in key_terms:
        if term in used_terms or not starts_with_term(sentence, term):
            continue
        definition = strip_definition_prefix(sentence, term)
        if config.min_back_length <= len(definition) < config.max_back_length:
            return term, term, definition, find_topic(sentence, key_terms)
    return None


def _card_from_context(
    sentence: str,
    key_terms: Sequence[str],
    used_terms: Set[str],
    config: FlashcardOptions,
) -> Optional[CardDraft]:
    if not config.min_context_length <= len(sentence) < config.max_context_length:
        return None
    for term in key_terms:
        if term in used_terms or not contains_term(sentence, term):
            continue
        # the blanked text is only a validity gate
        if blank_term(sentence, term) != sentence:
            return term, f"What is {term}?", sentence, term
    return None
