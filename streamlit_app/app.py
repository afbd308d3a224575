from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flashquiz_core import generate_flashcards, generate_quiz, ingest  # noqa: E402
from flashquiz_core.config import load_settings  # noqa: E402
from flashquiz_core.models import FlashcardOptions, QuizOptions, SourceDocument  # noqa: E402
from flashquiz_core.results import score_quiz, summarize_results  # noqa: E402
from flashquiz_core.share import ShareCodeError, decode_share_code  # noqa: E402
from flashquiz_core.storage import StudyStore  # noqa: E402
from streamlit_app.ui_components import (  # noqa: E402
    answer_key,
    collect_answers,
    render_export_buttons,
    render_flashcards,
    render_quiz,
    render_result,
    render_share_code,
    render_statistics,
)

APP_KEY = "study_set"
RESULT_KEY = "quiz_result"
STARTED_KEY = "quiz_started_at"
MAX_QUESTIONS = 50
MAX_FLASHCARDS = 100

_log = logging.getLogger("flashquiz_app")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(name)s | %(message)s")
    store = StudyStore(settings.data_full_path)

    st.set_page_config(page_title="FlashQuiz", layout="wide")
    st.title("FlashQuiz")
    st.caption("Turn your notes into quiz questions and flashcards. Everything is generated locally from your text.")

    with st.sidebar:
        st.subheader("Controls")
        user = st.text_input("Profile name", value=settings.default_user)
        question_count = int(
            st.number_input(
                "Quiz questions",
                min_value=1,
                max_value=MAX_QUESTIONS,
                value=clamp(settings.question_count, 1, MAX_QUESTIONS),
            )
        )
        flashcard_count = int(
            st.number_input(
                "Flashcards",
                min_value=1,
                max_value=MAX_FLASHCARDS,
                value=clamp(settings.flashcard_count, 1, MAX_FLASHCARDS),
            )
        )
        seed_value = int(st.number_input("Random seed (0 for random)", min_value=0, value=max(settings.seed or 0, 0)))
        seed = seed_value or None
        st.markdown("Supported uploads: PDF, DOCX and TXT. Files are processed in memory.")
        if st.button("Clear saved data", key="clear_data"):
            store.clear(user)
            st.session_state.pop(APP_KEY, None)
            st.session_state.pop(RESULT_KEY, None)
            st.session_state.pop(STARTED_KEY, None)
            st.success("Saved study data cleared.")

    upload_tab, text_tab, shared_tab = st.tabs(["Upload File", "Paste Text", "Open Shared Quiz"])
    with upload_tab:
        render_upload_tab(store, user, question_count, flashcard_count, seed)
    with text_tab:
        render_text_tab(store, user, question_count, flashcard_count, seed)
    with shared_tab:
        render_shared_tab()

    study_set = st.session_state.get(APP_KEY)
    if study_set:
        render_results(store, user, study_set)
    results = store.load_results(user)
    render_statistics(summarize_results(results), results)


def clamp(value: int, low: int, high: int) -> int:
    return min(max(int(value), low), high)


def render_upload_tab(store: StudyStore, user: str, question_count: int, flashcard_count: int, seed: Optional[int]) -> None:
    st.subheader("Upload a Document")
    uploaded_file = st.file_uploader("Upload lecture notes, a chapter, or an article", type=["pdf", "docx", "txt"])
    if uploaded_file is not None:
        st.write(f"Selected file: `{uploaded_file.name}`")
        if st.button("Generate from file", type="primary", width="content", key="generate_file"):
            try:
                document = ingest.ingest_bytes(uploaded_file.getvalue(), filename=uploaded_file.name)
            except ingest.IngestError as exc:
                st.error(str(exc))
                return
            build_study_set(store, user, document, question_count, flashcard_count, seed)


def render_text_tab(store: StudyStore, user: str, question_count: int, flashcard_count: int, seed: Optional[int]) -> None:
    st.subheader("Paste Text")
    text = st.text_area("Study text", height=220, key="study_text")
    if st.button("Generate from text", type="primary", width="content", key="generate_text"):
        try:
            document = ingest.ingest_text(text)
        except ingest.IngestError as exc:
            st.error(str(exc))
            return
        build_study_set(store, user, document, question_count, flashcard_count, seed)


def render_shared_tab() -> None:
    st.subheader("Open a Shared Quiz")
    code = st.text_input("Share code", key="share_code")
    if st.button("Load shared quiz", width="content", key="load_shared"):
        try:
            title, questions = decode_share_code(code)
        except ShareCodeError as exc:
            st.error(str(exc))
            return
        document = SourceDocument(
            document_id="shared",
            title=title,
            source_type="text",
            source_ref="share code",
            text="",
        )
        reset_answers(questions)
        st.session_state[APP_KEY] = {"document": document, "questions": questions, "flashcards": []}
        st.session_state.pop(RESULT_KEY, None)
        st.session_state[STARTED_KEY] = time.monotonic()
        st.success(f"Loaded {len(questions)} shared questions.")


def build_study_set(
    store: StudyStore,
    user: str,
    document: SourceDocument,
    question_count: int,
    flashcard_count: int,
    seed: Optional[int],
) -> None:
    questions = generate_quiz(document.text, question_count, options=QuizOptions(seed=seed))
    flashcards = generate_flashcards(document.text, flashcard_count, options=FlashcardOptions(seed=seed))
    if not questions and not flashcards:
        st.warning("Could not find enough key terms in this document to build a quiz or flashcards.")
        return
    store.save_quiz(questions, user)
    store.save_flashcards(flashcards, user)
    reset_answers(questions)
    st.session_state[APP_KEY] = {"document": document, "questions": questions, "flashcards": flashcards}
    st.session_state.pop(RESULT_KEY, None)
    st.session_state[STARTED_KEY] = time.monotonic()
    _log.info("Built study set for %s: %d questions, %d flashcards", document.title, len(questions), len(flashcards))
    st.success(f"Generated {len(questions)} quiz questions and {len(flashcards)} flashcards.")


def reset_answers(questions) -> None:
    for question in questions:
        st.session_state.pop(answer_key(question), None)


def elapsed_seconds() -> Optional[int]:
    started = st.session_state.get(STARTED_KEY)
    if started is None:
        return None
    return int(time.monotonic() - started)


def render_results(store: StudyStore, user: str, study_set) -> None:
    document = study_set["document"]
    questions = study_set["questions"]
    flashcards = study_set["flashcards"]

    st.divider()
    st.markdown(f"**Document**: {document.title}")
    result = st.session_state.get(RESULT_KEY)
    if questions:
        render_quiz(questions, result)
        if st.button("Submit quiz", type="primary", width="content", key="submit_quiz"):
            answers = collect_answers(questions, st.session_state)
            result = score_quiz(questions, answers, elapsed_seconds=elapsed_seconds())
            store.append_result(result, user)
            st.session_state[RESULT_KEY] = result
        if result is not None:
            render_result(result)
    if flashcards:
        render_flashcards(flashcards)
    render_share_code(document, questions)
    render_export_buttons(document, questions, flashcards)


if __name__ == "__main__":
    main()
