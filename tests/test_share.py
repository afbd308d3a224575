from __future__ import annotations

import base64

import pytest

from flashquiz_core.models import QuizQuestion
from flashquiz_core.share import ShareCodeError, decode_share_code, encode_share_code


def test_share_code_carries_questions_and_title() -> None:
    questions = [
        QuizQuestion(id=4, question="________ moves water.", options=["Diffusion", "Osmosis"], correct_answer="Osmosis", topic="Osmosis"),
        QuizQuestion(id=9, question="What is Mitosis?", options=["Mitosis", "Not mentioned", "Meiosis"], correct_answer="Mitosis", topic="Mitosis"),
    ]
    code = encode_share_code(questions, title="Cell Biology")

    assert "=" not in code
    title, decoded = decode_share_code(code)
    assert title == "Cell Biology"
    assert [question.id for question in decoded] == [1, 2]
    assert decoded[0].options == ["Diffusion", "Osmosis"]
    assert decoded[1].correct_answer == "Mitosis"
    assert all(question.topic == "General" for question in decoded)


def test_decode_tolerates_whitespace() -> None:
    code = encode_share_code([QuizQuestion(1, "What is Osmosis?", ["Osmosis", "Diffusion"], "Osmosis")])
    spaced = " ".join(code[index : index + 10] for index in range(0, len(code), 10))
    assert decode_share_code(spaced)[1][0].question == "What is Osmosis?"


@pytest.mark.parametrize(
    "code",
    [
        "",
        "!!!not-base64!!!",
        base64.urlsafe_b64encode(b"[1, 2, 3]").decode("ascii"),
        base64.urlsafe_b64encode(b'{"questions": [{"question": "Q"}]}').decode("ascii"),
        base64.urlsafe_b64encode(b'{"questions": [{"question": "Q", "options": ["A"], "correct_answer": "B"}]}').decode("ascii"),
    ],
)
def test_malformed_codes_raise(code: str) -> None:
    with pytest.raises(ShareCodeError):
        decode_share_code(code)
