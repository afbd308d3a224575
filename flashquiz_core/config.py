from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS: Dict[str, Any] = {
    "question_count": 10,
    "flashcard_count": 20,
    "data_dir": "study_data",
    "log_level": "INFO",
    "seed": None,
    "default_user": "default",
}


@dataclass
class Settings:
    question_count: int = DEFAULTS["question_count"]
    flashcard_count: int = DEFAULTS["flashcard_count"]
    data_dir: str = DEFAULTS["data_dir"]
    log_level: str = DEFAULTS["log_level"]
    seed: Optional[int] = DEFAULTS["seed"]
    default_user: str = DEFAULTS["default_user"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def data_full_path(self) -> Path:
        path = Path(self.data_dir)
        return path if path.is_absolute() else self.project_root / path

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
