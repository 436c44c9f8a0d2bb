"""Business logic shared by the UI: identity, questions, history and preferences."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
from typing import Callable

from trivia_app.constants.storage_constants import (
    STORAGE_KEY_SETTINGS,
    STORAGE_KEY_THEME,
    STORAGE_KEY_USER,
)
from trivia_app.core.models import BucketSummary, Difficulty, HistoryEntry, Question
from trivia_app.core.question_bank import QuestionBank
from trivia_app.core.question_bank_exporter import save_question_bank_to_file
from trivia_app.core.question_bank_importer import ImportedQuestionBank, load_question_bank_from_file
from trivia_app.core.screens import LoginScreen, Screen, TopicSelectionScreen
from trivia_app.core.services.analytics import BucketKey
from trivia_app.core.services.history_log import HistoryLog
from trivia_app.core.services.question_source import QuestionSource
from trivia_app.core.services.quiz_session import CompletedSession
from trivia_app.core.settings import QuizSettings
from trivia_app.core.storage import KeyValueStore
from trivia_app.styling.color_palette import Theme

logger = logging.getLogger(__name__)


class TriviaManager:
    """Facade for the store-backed services: QuestionSource, HistoryLog and preferences."""

    def __init__(
        self,
        store: KeyValueStore,
        question_source: QuestionSource | None = None,
        history_log: HistoryLog | None = None,
        wall_clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._questions = question_source or QuestionSource(store)
        self._history = history_log or HistoryLog(store)
        self._wall_clock = wall_clock or (lambda: datetime.now(timezone.utc))

    # --- Identity ---

    def login(self, display_name: str) -> str:
        cleaned = display_name.strip()
        if not cleaned:
            raise ValueError("Please enter a name.")
        self._store.set(STORAGE_KEY_USER, cleaned)
        logger.info("User %s logged in", cleaned)
        return cleaned

    def logout(self) -> None:
        self._store.remove(STORAGE_KEY_USER)

    def get_user(self) -> str | None:
        user = self._store.get(STORAGE_KEY_USER)
        if isinstance(user, str) and user.strip():
            return user
        return None

    def initial_screen(self) -> Screen:
        user = self.get_user()
        if user is None:
            return LoginScreen()
        return TopicSelectionScreen(user=user)

    # --- Question Source Delegation ---

    def get_topics(self) -> list[str]:
        return self._questions.topics()

    def get_question_bank(self) -> QuestionBank:
        return self._questions.get_bank()

    def load_questions(self, topic: str, difficulty: Difficulty) -> list[Question]:
        return self._questions.load(topic, difficulty)

    def import_question_bank(self, file_path: Path) -> ImportedQuestionBank:
        """Merge a question file into the bank. Nothing changes when the file is rejected."""
        imported = load_question_bank_from_file(file_path)
        self._questions.import_bank(imported.bank)
        return imported

    def export_question_bank(self, file_path: Path) -> None:
        save_question_bank_to_file(file_path, self._questions.get_bank())
        logger.info("Exported question bank to %s", file_path)

    # --- History Delegation ---

    def record_completed_session(self, completed: CompletedSession) -> HistoryEntry:
        if completed.is_unavailable or completed.score is None:
            raise ValueError("Sessions without questions are not recorded.")
        entry = HistoryEntry(
            timestamp=self._wall_clock(),
            topic=completed.topic,
            difficulty=completed.difficulty,
            score=completed.score,
            total_questions=completed.total_questions,
            time_taken_seconds=completed.time_taken_seconds,
            answered_questions=completed.questions,
        )
        self._history.append(entry)
        return entry

    def get_history(self) -> list[HistoryEntry]:
        return self._history.entries()

    def get_summary(self) -> dict[BucketKey, BucketSummary]:
        return self._history.summary(self.get_topics())

    def get_bucket_summary(self, topic: str, difficulty: Difficulty) -> BucketSummary:
        return self.get_summary().get((topic, difficulty), BucketSummary())

    def get_topic_accuracy(self, topic: str) -> float:
        return self._history.topic_accuracy(topic)

    def clear_history(self) -> None:
        self._history.clear()

    # --- Preferences ---

    def get_theme(self) -> Theme:
        stored = self._store.get(STORAGE_KEY_THEME)
        try:
            return Theme(stored)
        except ValueError:
            return Theme.LIGHT

    def set_theme(self, theme: Theme) -> None:
        self._store.set(STORAGE_KEY_THEME, theme.value)

    def toggle_theme(self) -> Theme:
        theme = Theme.LIGHT if self.get_theme() is Theme.DARK else Theme.DARK
        self.set_theme(theme)
        return theme

    def get_settings(self) -> QuizSettings:
        return QuizSettings.from_json(self._store.get(STORAGE_KEY_SETTINGS))

    def update_settings(self, settings: QuizSettings) -> None:
        self._store.set(STORAGE_KEY_SETTINGS, settings.to_json())
