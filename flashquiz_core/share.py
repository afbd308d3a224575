from __future__ import annotations

import base64
import binascii
import json
from typing import List, Sequence, Tuple

from .models import GENERAL_TOPIC, QuizQuestion

DEFAULT_SHARE_TITLE = "Shared Quiz"


class ShareCodeError(ValueError):
    """Raised when a share code cannot be decoded into a quiz."""


def encode_share_code(questions: Sequence[QuizQuestion], title: str = DEFAULT_SHARE_TITLE) -> str:
    payload = {
        "title": title or DEFAULT_SHARE_TITLE,
        "questions": [
            {
                "question": question.question,
                "options": list(question.options),
                "correct_answer": question.correct_answer,
            }
            for question in questions
        ],
    }
    raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_share_code(code: str) -> Tuple[str, List[QuizQuestion]]:
    compact = "".join(code.split())
    if not compact:
        raise ShareCodeError("Share code is empty")
    padded = compact + "=" * (-len(compact) % 4)
    try:
        payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ShareCodeError(f"Share code could not be decoded: {exc}") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("questions"), list):
        raise ShareCodeError("Share code does not contain a quiz")

    questions: List[QuizQuestion] = []
    for index, item in enumerate(payload["questions"], start=1):
        try:
            options = [str(option) for option in item["options"]]
            correct_answer = str(item["correct_answer"])
            question_text = str(item["question"])
        except (KeyError, TypeError) as exc:
            raise ShareCodeError(f"Question {index} in share code is malformed") from exc
        if correct_answer not in options:
            raise ShareCodeError(f"Question {index} in share code has no matching answer")
        questions.append(
            QuizQuestion(
                id=index,
                question=question_text,
                options=options,
                correct_answer=correct_answer,
                topic=GENERAL_TOPIC,
            )
        )
    return str(payload.get("title") or DEFAULT_SHARE_TITLE), questions
