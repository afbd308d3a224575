"""Rule-based quiz and flashcard generation core."""

from . import ingest, outputs, results, share, storage
from .flashcards import generate_flashcards
from .models import Flashcard, FlashcardOptions, QuizOptions, QuizQuestion, QuizResult, SourceDocument
from .quiz import generate_quiz

__all__ = [
    "Flashcard",
    "FlashcardOptions",
    "QuizOptions",
    "QuizQuestion",
    "QuizResult",
    "SourceDocument",
    "generate_flashcards",
    "generate_quiz",
    "ingest",
    "outputs",
    "results",
    "share",
    "storage",
]
