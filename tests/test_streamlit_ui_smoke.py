from __future__ import annotations

import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from flashquiz_core import FlashcardOptions, generate_flashcards
from flashquiz_core.models import QuizQuestion
from flashquiz_core.results import score_quiz
from flashquiz_core.share import encode_share_code
from streamlit_app.ui_components import format_back, format_duration, recent_result_rows


ROOT = Path(__file__).resolve().parents[1]
APP_PATH = ROOT / "streamlit_app" / "app.py"


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"data_dir": str(tmp_path / "data"), "question_count": 4, "seed": 5}))
    monkeypatch.setattr("flashquiz_core.config.CONFIG_PATH", config_path)
    return tmp_path / "data"


def test_streamlit_ui_smoke_text_flow(isolated_config: Path, sample_text: str) -> None:
    at = AppTest.from_file(str(APP_PATH), default_timeout=15)
    at.run()

    assert [tab.label for tab in at.tabs] == ["Upload File", "Paste Text", "Open Shared Quiz"]
    assert len(at.tabs[0].get("file_uploader")) == 1

    at.text_area(key="study_text").set_value(sample_text)
    at.button(key="generate_text").click().run()
    cards = generate_flashcards(sample_text.strip(), 20, options=FlashcardOptions(seed=5))
    assert [message.value for message in at.success] == [f"Generated 4 quiz questions and {len(cards)} flashcards."]
    assert len(at.radio) == 4
    assert len(at.expander) == len(cards)

    download_labels = [element.proto.label for element in at.get("download_button")]
    assert download_labels == [
        "Download Quiz JSON",
        "Download Quiz CSV",
        "Download Quiz Markdown",
        "Download Anki TSV",
        "Download Flashcards JSON",
    ]

    for radio in at.radio:
        radio.set_value(radio.options[0])
    at.button(key="submit_quiz").click().run()

    labels = [metric.label for metric in at.metric]
    assert "Score" in labels
    assert "Quizzes taken" in labels
    assert (isolated_config / "default_results.json").exists()
    saved = json.loads((isolated_config / "default_results.json").read_text(encoding="utf-8"))
    assert isinstance(saved[0]["elapsed_seconds"], int)
    assert [caption.value for caption in at.caption if caption.value.startswith("Time: ")]


def test_streamlit_ui_rejects_short_text(isolated_config: Path) -> None:
    at = AppTest.from_file(str(APP_PATH), default_timeout=15)
    at.run()

    at.text_area(key="study_text").set_value("Too short.")
    at.button(key="generate_text").click().run()

    assert len(at.error) == 1
    assert "at least 100 characters" in at.error[0].value
    assert len(at.radio) == 0


def test_streamlit_ui_loads_shared_quiz(isolated_config: Path) -> None:
    questions = [
        QuizQuestion(id=1, question="________ moves water.", options=["Diffusion", "Osmosis"], correct_answer="Osmosis"),
    ]
    at = AppTest.from_file(str(APP_PATH), default_timeout=15)
    at.run()

    at.text_input(key="share_code").set_value(encode_share_code(questions, title="Shared Biology"))
    at.button(key="load_shared").click().run()

    assert [message.value for message in at.success] == ["Loaded 1 shared questions."]
    assert len(at.radio) == 1
    assert at.radio[0].options == ["Diffusion", "Osmosis"]


def test_format_back_reflows_long_text() -> None:
    short = "Osmosis moves water."
    assert format_back(short) == short

    long_back = " ".join(f"Sentence {index} explains one more detail about membranes." for index in range(6))
    reflowed = format_back(long_back)
    assert reflowed.count("\n\n") == 2
    assert reflowed.replace("\n\n", " ") == long_back


def test_streamlit_ui_clamps_configured_counts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"data_dir": str(tmp_path / "data"), "question_count": 500, "flashcard_count": 0}))
    monkeypatch.setattr("flashquiz_core.config.CONFIG_PATH", config_path)

    at = AppTest.from_file(str(APP_PATH), default_timeout=15)
    at.run()

    assert not at.exception
    assert [widget.value for widget in at.number_input][:2] == [50, 1]


def test_format_duration() -> None:
    assert format_duration(None) == ""
    assert format_duration(0) == "0:00"
    assert format_duration(59) == "0:59"
    assert format_duration(61) == "1:01"
    assert format_duration(3600) == "60:00"


def test_recent_result_rows_lists_newest_five() -> None:
    questions = [
        QuizQuestion(id=1, question="________ moves water.", options=["Diffusion", "Osmosis"], correct_answer="Osmosis"),
    ]
    results = [score_quiz(questions, {1: "Osmosis" if index % 2 else "Diffusion"}, elapsed_seconds=index * 30) for index in range(7)]

    rows = recent_result_rows(results)

    assert [row["Quiz"] for row in rows] == ["#7", "#6", "#5", "#4", "#3"]
    assert rows[0] == {"Quiz": "#7", "Score": "0%", "Correct": "0/1", "Time": "3:00"}
    assert rows[1]["Score"] == "100%"
    assert recent_result_rows([]) == []
