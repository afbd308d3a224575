from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence

from .models import GENERAL_TOPIC, QuizQuestion, QuizResult, StudySummary, TopicScore, WeakTopic, round_percent

WEAK_TOPIC_LIMIT = 5


def score_quiz(
    questions: Sequence[QuizQuestion],
    answers: Mapping[int, Optional[str]],
    elapsed_seconds: Optional[int] = None,
) -> QuizResult:
    """Grade answers keyed by question id; unanswered questions count as wrong."""
    correct = 0
    performance: Dict[str, List[int]] = {}
    for question in questions:
        topic = question.topic or GENERAL_TOPIC
        stats = performance.setdefault(topic, [0, 0])
        stats[1] += 1
        if answers.get(question.id) == question.correct_answer:
            correct += 1
            stats[0] += 1
    total = len(questions)
    return QuizResult(
        total=total,
        correct=correct,
        incorrect=total - correct,
        score=round_percent(correct, total),
        topic_performance={topic: TopicScore(correct=hits, total=seen) for topic, (hits, seen) in performance.items()},
        answers={question_id: answer for question_id, answer in answers.items() if answer is not None},
        elapsed_seconds=elapsed_seconds,
        taken_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )


def summarize_results(results: Sequence[QuizResult], limit: int = WEAK_TOPIC_LIMIT) -> StudySummary:
    total_questions = sum(result.total for result in results)
    total_correct = sum(result.correct for result in results)

    topic_totals: Dict[str, List[int]] = {}
    for result in results:
        for topic, stats in result.topic_performance.items():
            totals = topic_totals.setdefault(topic, [0, 0])
            totals[0] += stats.correct
            totals[1] += stats.total

    weak_topics = [
        WeakTopic(topic=topic, score=round_percent(hits, seen), correct=hits, total=seen)
        for topic, (hits, seen) in topic_totals.items()
        if seen > 0
    ]
    weak_topics.sort(key=lambda item: item.score)
    return StudySummary(
        total_quizzes=len(results),
        total_questions=total_questions,
        total_correct=total_correct,
        average_score=round_percent(total_correct, total_questions),
        weak_topics=weak_topics[:limit],
    )
