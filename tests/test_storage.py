from __future__ import annotations

from pathlib import Path
from typing import List

from flashquiz_core.models import Flashcard, QuizQuestion
from flashquiz_core.results import score_quiz
from flashquiz_core.storage import StudyStore, user_slug


def _questions() -> List[QuizQuestion]:
    return [
        QuizQuestion(id=1, question="________ moves water.", options=["Diffusion", "Osmosis"], correct_answer="Osmosis", topic="Osmosis"),
        QuizQuestion(id=2, question="What is Mitosis?", options=["Mitosis", "Not mentioned"], correct_answer="Mitosis", topic="Mitosis"),
    ]


def test_quiz_and_flashcards_are_stored_per_user(tmp_path: Path) -> None:
    store = StudyStore(tmp_path / "data")
    cards = [Flashcard(id=1, front="Osmosis", back="the movement of water across a membrane.", topic="Osmosis")]

    store.save_quiz(_questions(), user="Ada Lovelace")
    store.save_flashcards(cards, user="Ada Lovelace")

    assert store.load_quiz("Ada Lovelace") == _questions()
    assert store.load_flashcards("Ada Lovelace") == cards
    assert store.load_quiz("someone else") == []
    assert (tmp_path / "data" / "ada-lovelace_quiz.json").exists()
    assert store.list_users() == ["ada-lovelace"]


def test_results_accumulate(tmp_path: Path) -> None:
    store = StudyStore(tmp_path)
    questions = _questions()

    store.append_result(score_quiz(questions, {1: "Osmosis", 2: "Mitosis"}))
    store.append_result(score_quiz(questions, {1: "Diffusion"}))

    results = store.load_results()
    assert [result.score for result in results] == [100, 0]
    assert results[0].answers == {1: "Osmosis", 2: "Mitosis"}
    assert results[1].topic_performance["Osmosis"].total == 1


def test_clear_removes_user_files(tmp_path: Path) -> None:
    store = StudyStore(tmp_path)
    store.save_quiz(_questions(), user="kim")
    store.append_result(score_quiz(_questions(), {}), user="kim")
    store.save_quiz(_questions(), user="lee")

    store.clear("kim")

    assert store.load_quiz("kim") == []
    assert store.load_results("kim") == []
    assert store.load_quiz("lee") == _questions()


def test_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    (tmp_path / "default_results.json").write_text("{not json", encoding="utf-8")
    assert StudyStore(tmp_path).load_results() == []


def test_user_slug() -> None:
    assert user_slug(None) == "default"
    assert user_slug("  ") == "default"
    assert user_slug("José O'Neil") == "jos-o-neil"


def test_non_list_results_file_is_replaced_on_append(tmp_path: Path) -> None:
    (tmp_path / "default_results.json").write_text('{"score": 100}', encoding="utf-8")
    store = StudyStore(tmp_path)

    assert store.load_results() == []
    store.append_result(score_quiz(_questions(), {1: "Osmosis"}))

    assert [result.score for result in store.load_results()] == [50]
