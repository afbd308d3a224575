from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .models import Flashcard, QuizQuestion, QuizResult

DEFAULT_USER = "default"
ARTIFACTS = ("quiz", "flashcards", "results")

_log = logging.getLogger("flashquiz_core.storage")


def user_slug(user: Optional[str]) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (user or "").lower()).strip("-")
    return slug or DEFAULT_USER


class StudyStore:
    """Per-user JSON files for generated quizzes, flashcards and quiz results."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def save_quiz(self, questions: Sequence[QuizQuestion], user: Optional[str] = None) -> None:
        self._write(user, "quiz", [question.to_dict() for question in questions])

    def load_quiz(self, user: Optional[str] = None) -> List[QuizQuestion]:
        return [QuizQuestion.from_dict(item) for item in self._read(user, "quiz", [])]

    def save_flashcards(self, flashcards: Sequence[Flashcard], user: Optional[str] = None) -> None:
        self._write(user, "flashcards", [flashcard.to_dict() for flashcard in flashcards])

    def load_flashcards(self, user: Optional[str] = None) -> List[Flashcard]:
        return [Flashcard.from_dict(item) for item in self._read(user, "flashcards", [])]

    def append_result(self, result: QuizResult, user: Optional[str] = None) -> None:
        history = self._read(user, "results", [])
        history.append(result.to_dict())
        self._write(user, "results", history)

    def load_results(self, user: Optional[str] = None) -> List[QuizResult]:
        return [QuizResult.from_dict(item) for item in self._read(user, "results", [])]

    def clear(self, user: Optional[str] = None) -> None:
        for artifact in ARTIFACTS:
            path = self._path(user, artifact)
            if path.exists():
                path.unlink()
        _log.info("Cleared study data for %s", user_slug(user))

    def list_users(self) -> List[str]:
        if not self.root.exists():
            return []
        users = set()
        for path in self.root.glob("*.json"):
            name, _, artifact = path.stem.rpartition("_")
            if name and artifact in ARTIFACTS:
                users.add(name)
        return sorted(users)

    def _path(self, user: Optional[str], artifact: str) -> Path:
        return self.root / f"{user_slug(user)}_{artifact}.json"

    def _read(self, user: Optional[str], artifact: str, default: Any) -> Any:
        path = self._path(user, artifact)
        if not path.exists():
            return default
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            _log.warning("Ignoring unreadable %s: %s", path, exc)
            return default
        if not isinstance(payload, type(default)):
            _log.warning("Ignoring %s: expected a JSON %s", path, type(default).__name__)
            return default
        return payload

    def _write(self, user: Optional[str], artifact: str, payload: Any) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path(user, artifact)
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        _log.debug("Wrote %s", path)
