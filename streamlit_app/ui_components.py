from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional, Sequence

import streamlit as st

from flashquiz_core.models import Flashcard, QuizQuestion, QuizResult, SourceDocument, StudySummary
from flashquiz_core.outputs import export_anki_tsv, export_flashcards_json, export_quiz_csv, export_quiz_json, export_quiz_markdown
from flashquiz_core.share import encode_share_code

LONG_BACK_LENGTH = 200
RECENT_RESULT_LIMIT = 5
PARAGRAPH_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def answer_key(question: QuizQuestion) -> str:
    return f"answer_{question.id}"


def format_back(back: str, sentences_per_paragraph: int = 2) -> str:
    """Reflow long card backs into short paragraphs at sentence boundaries."""
    if len(back) <= LONG_BACK_LENGTH:
        return back
    sentences = [sentence for sentence in PARAGRAPH_SPLIT_RE.split(back.strip()) if sentence]
    paragraphs = [
        " ".join(sentences[index : index + sentences_per_paragraph])
        for index in range(0, len(sentences), sentences_per_paragraph)
    ]
    return "\n\n".join(paragraphs)


def format_duration(seconds: Optional[int]) -> str:
    if seconds is None:
        return ""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes}:{secs:02d}"


def recent_result_rows(results: Sequence[QuizResult], limit: int = RECENT_RESULT_LIMIT) -> List[Dict[str, str]]:
    """Newest results first, numbered in the order they were taken."""
    rows: List[Dict[str, str]] = []
    for number in range(len(results), max(len(results) - limit, 0), -1):
        result = results[number - 1]
        rows.append(
            {
                "Quiz": f"#{number}",
                "Score": f"{result.score}%",
                "Correct": f"{result.correct}/{result.total}",
                "Time": format_duration(result.elapsed_seconds),
            }
        )
    return rows


def weak_topic_rows(summary: StudySummary) -> List[Dict[str, str]]:
    return [
        {
            "Topic": topic.topic,
            "Score": f"{topic.score}%",
            "Correct": str(topic.correct),
            "Total": str(topic.total),
        }
        for topic in summary.weak_topics
    ]


def render_quiz(questions: Sequence[QuizQuestion], result: Optional[QuizResult]) -> None:
    st.subheader("Quiz")
    for question in questions:
        st.radio(
            f"{question.id}. {question.question}",
            question.options,
            index=None,
            key=answer_key(question),
        )
        if result is not None:
            chosen = result.answers.get(question.id)
            if chosen == question.correct_answer:
                st.markdown(f"Correct: **{question.correct_answer}**")
            else:
                st.markdown(f"Incorrect. The answer is **{question.correct_answer}** (topic: {question.topic})")


def collect_answers(questions: Sequence[QuizQuestion], state: Mapping[str, object]) -> Dict[int, Optional[str]]:
    answers: Dict[int, Optional[str]] = {}
    for question in questions:
        value = state.get(answer_key(question))
        answers[question.id] = str(value) if value is not None else None
    return answers


def render_result(result: QuizResult) -> None:
    score_col, correct_col, incorrect_col = st.columns(3)
    score_col.metric("Score", f"{result.score}%")
    correct_col.metric("Correct", result.correct)
    incorrect_col.metric("Incorrect", result.incorrect)
    if result.elapsed_seconds is not None:
        st.caption(f"Time: {format_duration(result.elapsed_seconds)}")


def render_flashcards(flashcards: Sequence[Flashcard]) -> None:
    st.subheader("Flashcards")
    for flashcard in flashcards:
        with st.expander(f"{flashcard.id}. {flashcard.front}", expanded=False):
            st.markdown(format_back(flashcard.back))
            st.caption(f"Topic: {flashcard.topic}")


def render_statistics(summary: StudySummary, results: Sequence[QuizResult] = ()) -> None:
    st.subheader("Study Statistics")
    if summary.total_quizzes == 0:
        st.info("Complete a quiz to see your statistics.")
        return
    quizzes_col, questions_col, average_col = st.columns(3)
    quizzes_col.metric("Quizzes taken", summary.total_quizzes)
    questions_col.metric("Questions answered", summary.total_questions)
    average_col.metric("Average score", f"{summary.average_score}%")
    if summary.weak_topics:
        st.markdown("**Topics to review**")
        st.dataframe(weak_topic_rows(summary), hide_index=True, width="stretch")
    if results:
        st.markdown("**Recent quiz results**")
        st.dataframe(recent_result_rows(results), hide_index=True, width="stretch")


def render_share_code(document: SourceDocument, questions: Sequence[QuizQuestion]) -> None:
    if not questions:
        return
    st.markdown("**Share this quiz**")
    st.code(encode_share_code(questions, title=document.title), language=None)


def render_export_buttons(
    document: SourceDocument,
    questions: Sequence[QuizQuestion],
    flashcards: Sequence[Flashcard],
) -> None:
    col1, col2, col3, col4 = st.columns(4)
    col1.download_button(
        "Download Quiz JSON",
        data=export_quiz_json(document, questions),
        file_name="flashquiz_quiz.json",
        mime="application/json",
        width="stretch",
    )
    col2.download_button(
        "Download Quiz CSV",
        data=export_quiz_csv(questions),
        file_name="flashquiz_quiz.csv",
        mime="text/csv",
        width="stretch",
    )
    col3.download_button(
        "Download Quiz Markdown",
        data=export_quiz_markdown(document, questions),
        file_name="flashquiz_quiz.md",
        mime="text/markdown",
        width="stretch",
    )
    col4.download_button(
        "Download Anki TSV",
        data=export_anki_tsv(flashcards),
        file_name="flashquiz_flashcards.tsv",
        mime="text/tab-separated-values",
        width="stretch",
    )
    st.download_button(
        "Download Flashcards JSON",
        data=export_flashcards_json(document, flashcards),
        file_name="flashquiz_flashcards.json",
        mime="application/json",
    )
