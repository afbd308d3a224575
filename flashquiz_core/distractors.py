from __future__ import annotations

import random
from typing import List, Sequence

from .models import GENERIC_DISTRACTORS


def edit_distance(first: str, second: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    if len(first) < len(second):
        first, second = second, first
    previous = list(range(len(second) + 1))
    for row, first_char in enumerate(first, start=1):
        current = [row]
        for column, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current.append(previous[column - 1])
            else:
                current.append(1 + min(previous[column - 1], previous[column], current[column - 1]))
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(first, second)) / longest


def select_distractors(
    correct_answer: str,
    pool: Sequence[str],
    rng: random.Random,
    count: int = 3,
    max_similarity: float = 0.5,
    fillers: Sequence[str] = GENERIC_DISTRACTORS,
) -> List[str]:
    """Pick wrong answers from the term pool, padding once with generic fillers.

    Candidates at or above ``max_similarity`` to the correct answer are
    rejected as near-duplicates. The filler pass walks the list a single time,
    so fewer than ``count`` distractors can come back.
    """
    distractors: List[str] = []
    correct_lower = correct_answer.lower()
    shuffled = list(pool)
    rng.shuffle(shuffled)

    for candidate in shuffled:
        if len(distractors) >= count:
            break
        if candidate in distractors or candidate.lower() == correct_lower:
            continue
        if similarity(candidate, correct_answer) < max_similarity:
            distractors.append(candidate)

    for filler in fillers:
        if len(distractors) >= count:
            break
        if filler in distractors or filler.lower() == correct_lower:
            continue
        distractors.append(filler)

    return distractors[:count]


def build_options(
    correct_answer: str,
    distractors: Sequence[str],
    rng: random.Random,
    max_options: int = 4,
) -> List[str]:
    options = [correct_answer, *distractors]
    rng.shuffle(options)
    return options[:max_options]
