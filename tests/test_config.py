"""Tests for configuration loading and saving."""
from __future__ import annotations

import json
from unittest.mock import patch

from flashquiz_core.config import Settings, load_settings, save_settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.question_count == 10
        assert s.flashcard_count == 20
        assert s.seed is None
        assert s.log_level == "INFO"

    def test_to_dict_roundtrip(self):
        s = Settings(question_count=5, seed=7)
        s2 = Settings(**s.to_dict())
        assert s2.question_count == 5
        assert s2.seed == 7

    def test_relative_data_dir_resolves_under_project_root(self, tmp_path):
        assert Settings().data_full_path == Settings().project_root / "study_data"
        assert Settings(data_dir=str(tmp_path)).data_full_path == tmp_path


class TestLoadSaveSettings:
    def test_load_from_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"question_count": 15, "log_level": "DEBUG"}))

        with patch("flashquiz_core.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.question_count == 15
        assert s.log_level == "DEBUG"
        assert s.flashcard_count == 20

    def test_load_missing_file(self, tmp_path):
        with patch("flashquiz_core.config.CONFIG_PATH", tmp_path / "nonexistent.json"):
            s = load_settings()
        assert s == Settings()

    def test_save_creates_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        with patch("flashquiz_core.config.CONFIG_PATH", config_path):
            save_settings(Settings(flashcard_count=12))

        data = json.loads(config_path.read_text())
        assert data["flashcard_count"] == 12

    def test_unknown_keys_ignored(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"seed": 3, "theme": "dark"}))

        with patch("flashquiz_core.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.seed == 3
        assert not hasattr(s, "theme")
