from __future__ import annotations

import random
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SAMPLE_PATH = ROOT / "sample_data" / "cell_biology.txt"

PHOTOSYNTHESIS_TEXT = (
    "Photosynthesis is the process by which plants convert light into energy. "
    "Plants grow toward the sun during the day in most gardens. "
    "Farmers water their crops early in the morning to save water."
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_PATH.read_text(encoding="utf-8")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def photosynthesis_text() -> str:
    return PHOTOSYNTHESIS_TEXT
