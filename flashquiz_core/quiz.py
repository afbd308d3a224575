from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Set

from .distractors import build_options, select_distractors
from .models import QuizOptions, QuizQuestion
from .segmenter import split_sentences
from .terms import blank_term, contains_term, extract_key_terms

_log = logging.getLogger("flashquiz_core.quiz")


def generate_quiz(
    text: str,
    count: int = 10,
    options: Optional[QuizOptions] = None,
    rng: Optional[random.Random] = None,
) -> List[QuizQuestion]:
    """Build up to ``count`` multiple-choice questions from plain text.

    Fill-in-the-blank questions come first, one per sentence. When the text runs
    out of usable sentences, "What is X?" questions are built from the remaining
    key terms. Sparse input yields a shorter (possibly empty) list, never an error.
    """
    config = options or QuizOptions()
    random_source = rng or random.Random(config.seed)
    if count <= 0 or not text or len(text.strip()) < config.min_text_length:
        return []

    sentences = split_sentences(text, min_length=config.min_sentence_length, limit=config.max_sentences)
    if not sentences:
        return []

    key_terms = extract_key_terms(
        sentences,
        min_length=config.min_term_length,
        max_length=config.max_term_length,
        include_definitions=True,
        limit=config.max_terms,
    )
    if not key_terms:
        _log.debug("No key terms found in %d sentences", len(sentences))
        return []

    questions: List[QuizQuestion] = []
    used_sentences: Set[str] = set()

    for sentence in sentences:
        if len(questions) >= count:
            break
        if sentence in used_sentences:
            continue
        question = _question_from_sentence(sentence, key_terms, len(questions) + 1, config, random_source)
        if question is not None:
            questions.append(question)
            used_sentences.add(sentence)

    from_sentences = len(questions)
    used_terms = {question.correct_answer for question in questions}
    for term in key_terms:
        if len(questions) >= count:
            break
        if term in used_terms:
            continue
        used_terms.add(term)
        option_list = _assemble_options(term, key_terms, config, random_source)
        if len(option_list) < config.min_options:
            continue
        questions.append(
            QuizQuestion(
                id=len(questions) + 1,
                question=f"What is {term}?",
                options=option_list,
                correct_answer=term,
                topic=term,
            )
        )

    _log.info(
        "Generated %d quiz questions (%d fill-in-the-blank, %d term) from %d sentences and %d terms",
        len(questions),
        from_sentences,
        len(questions) - from_sentences,
        len(sentences),
        len(key_terms),
    )
    return questions[:count]


def _question_from_sentence(
    sentence: str,
    key_terms: Sequence[str],
    question_id: int,
    config: QuizOptions,
    rng: random.Random,
) -> Optional[QuizQuestion]:
    for term in key_terms:
        if not contains_term(sentence, term):
            continue
        question_text = blank_term(sentence, term).strip()
        if question_text == sentence or len(question_text) <= config.min_question_length:
            continue
        option_list = _assemble_options(term, key_terms, config, rng)
        if len(option_list) >= config.min_options:
            return QuizQuestion(
                id=question_id,
                question=question_text,
                options=option_list,
                correct_answer=term,
                topic=term,
            )
    return None


def _assemble_options(
    term: str,
    key_terms: Sequence[str],
    config: QuizOptions,
    rng: random.Random,
) -> List[str]:
    distractors = select_distractors(
        term,
        key_terms,
        rng,
        count=config.distractor_count,
        max_similarity=config.max_similarity,
        fillers=config.fillers,
    )
    return build_options(term, distractors, rng, max_options=config.max_options)
