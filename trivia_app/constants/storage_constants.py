"""Storage keys and locations for locally persisted state."""

from __future__ import annotations

import os
from pathlib import Path

STORAGE_KEY_USER: str = "quizUser"
STORAGE_KEY_QUESTIONS: str = "quizQuestions"
STORAGE_KEY_ANALYTICS: str = "quizAnalytics"
STORAGE_KEY_THEME: str = "theme"
STORAGE_KEY_SETTINGS: str = "quizSettings"

DATA_DIR_ENV: str = "TRIVIA_QUIZ_DATA_DIR"
BUNDLED_QUESTIONS_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "questions.json"
EXPORT_FILE_NAME: str = "questions.json"


def resolve_data_dir() -> Path:
    """Return the directory holding persisted state, honouring the env override."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".trivia_quiz"
