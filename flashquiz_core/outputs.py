from __future__ import annotations

import csv
import io
import json
from typing import Sequence

from .models import Flashcard, QuizQuestion, SourceDocument

OPTION_LABELS = "ABCD"


def export_quiz_json(document: SourceDocument, questions: Sequence[QuizQuestion]) -> str:
    payload = {
        "document": {
            "document_id": document.document_id,
            "title": document.title,
            "source_type": document.source_type,
            "source_ref": document.source_ref,
        },
        "questions": [question.to_dict() for question in questions],
    }
    return json.dumps(payload, indent=2)


def export_flashcards_json(document: SourceDocument, flashcards: Sequence[Flashcard]) -> str:
    payload = {
        "document": {
            "document_id": document.document_id,
            "title": document.title,
            "source_type": document.source_type,
            "source_ref": document.source_ref,
        },
        "flashcards": [flashcard.to_dict() for flashcard in flashcards],
    }
    return json.dumps(payload, indent=2)


def export_quiz_csv(questions: Sequence[QuizQuestion]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=["id", "question", "option_a", "option_b", "option_c", "option_d", "correct_answer", "topic"],
    )
    writer.writeheader()
    for question in questions:
        row = {
            "id": question.id,
            "question": question.question,
            "correct_answer": question.correct_answer,
            "topic": question.topic,
        }
        for index, label in enumerate(OPTION_LABELS):
            row[f"option_{label.lower()}"] = question.options[index] if index < len(question.options) else ""
        writer.writerow(row)
    return buffer.getvalue()


def export_quiz_markdown(document: SourceDocument, questions: Sequence[QuizQuestion]) -> str:
    lines = [f"# {document.title}", ""]
    for question in questions:
        lines.append(f"## Question {question.id}")
        lines.append(question.question)
        lines.append("")
        for label, option in zip(OPTION_LABELS, question.options):
            lines.append(f"- {label}. {option}")
        lines.extend(["", f"**Answer**: {question.correct_answer} _(topic: {question.topic})_", ""])
    return "\n".join(lines)


def export_anki_tsv(flashcards: Sequence[Flashcard]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter="\t", lineterminator="\n")
    writer.writerow(["front", "back", "topic"])
    for flashcard in flashcards:
        writer.writerow([flashcard.front, flashcard.back, flashcard.topic])
    return buffer.getvalue()
