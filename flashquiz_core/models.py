from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple


SourceType = Literal["pdf", "docx", "txt", "text"]

GENERAL_TOPIC = "General"
BLANK_MARKER = "________"
GENERIC_DISTRACTORS: Tuple[str, ...] = ("None of the above", "All of the above", "Not mentioned")


@dataclass(frozen=True)
class SourceDocument:
    document_id: str
    title: str
    source_type: SourceType
    source_ref: str
    text: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    question: str
    options: List[str]
    correct_answer: str
    topic: str = GENERAL_TOPIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
            "topic": self.topic,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "QuizQuestion":
        return cls(
            id=int(payload["id"]),
            question=str(payload["question"]),
            options=[str(option) for option in payload["options"]],
            correct_answer=str(payload["correct_answer"]),
            topic=str(payload.get("topic") or GENERAL_TOPIC),
        )


@dataclass(frozen=True)
class Flashcard:
    id: int
    front: str
    back: str
    topic: str = GENERAL_TOPIC

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Flashcard":
        return cls(
            id=int(payload["id"]),
            front=str(payload["front"]),
            back=str(payload["back"]),
            topic=str(payload.get("topic") or GENERAL_TOPIC),
        )


@dataclass(frozen=True)
class TopicScore:
    correct: int = 0
    total: int = 0

    @property
    def percent(self) -> int:
        return round_percent(self.correct, self.total)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuizResult:
    total: int
    correct: int
    incorrect: int
    score: int
    topic_performance: Dict[str, TopicScore]
    answers: Dict[int, str] = field(default_factory=dict)
    elapsed_seconds: Optional[int] = None
    taken_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "score": self.score,
            "topic_performance": {topic: stats.to_dict() for topic, stats in self.topic_performance.items()},
            # JSON object keys are strings
            "answers": {str(question_id): answer for question_id, answer in self.answers.items()},
            "elapsed_seconds": self.elapsed_seconds,
            "taken_at": self.taken_at,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "QuizResult":
        performance = payload.get("topic_performance") or {}
        return cls(
            total=int(payload.get("total", 0)),
            correct=int(payload.get("correct", 0)),
            incorrect=int(payload.get("incorrect", 0)),
            score=int(payload.get("score", 0)),
            topic_performance={
                str(topic): TopicScore(correct=int(stats.get("correct", 0)), total=int(stats.get("total", 0)))
                for topic, stats in performance.items()
            },
            answers={int(key): str(value) for key, value in (payload.get("answers") or {}).items()},
            elapsed_seconds=payload.get("elapsed_seconds"),
            taken_at=payload.get("taken_at"),
        )


@dataclass(frozen=True)
class WeakTopic:
    topic: str
    score: int
    correct: int
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StudySummary:
    total_quizzes: int
    total_questions: int
    total_correct: int
    average_score: int
    weak_topics: List[WeakTopic]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_quizzes": self.total_quizzes,
            "total_questions": self.total_questions,
            "total_correct": self.total_correct,
            "average_score": self.average_score,
            "weak_topics": [topic.to_dict() for topic in self.weak_topics],
        }


@dataclass(frozen=True)
class QuizOptions:
    min_text_length: int = 100
    min_sentence_length: int = 20
    max_sentences: Optional[int] = 50
    min_term_length: int = 4
    max_term_length: int = 29
    max_terms: Optional[int] = 30
    min_question_length: int = 20
    distractor_count: int = 3
    max_options: int = 4
    min_options: int = 2
    max_similarity: float = 0.5
    fillers: Tuple[str, ...] = GENERIC_DISTRACTORS
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FlashcardOptions:
    min_text_length: int = 100
    min_sentence_length: int = 10
    min_term_length: int = 4
    max_term_length: int = 39
    min_definition_length: int = 30
    max_definition_length: int = 200
    min_back_length: int = 10
    max_back_length: int = 150
    min_context_length: int = 30
    max_context_length: int = 200
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_percent(part: int, whole: int) -> int:
    """Percentage rounded half up; 0 when there is nothing to divide."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)
