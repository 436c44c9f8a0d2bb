"""Service supplying question buckets from the stored, bundled or built-in bank."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from trivia_app.constants.storage_constants import BUNDLED_QUESTIONS_PATH, STORAGE_KEY_QUESTIONS
from trivia_app.core.default_questions import default_question_bank
from trivia_app.core.models import Difficulty, Question
from trivia_app.core.question_bank import (
    QuestionBank,
    QuestionBankError,
    has_bucket,
    lookup,
    merge_question_banks,
    parse_question_bank,
    question_bank_to_json,
)
from trivia_app.core.storage import KeyValueStore

logger = logging.getLogger(__name__)


class QuestionSource:
    """Resolves the active question bank and serves buckets from it.

    Resolution order: the bank persisted under ``quizQuestions`` (written by
    imports), then the bundled JSON file, then the built-in table.
    """

    def __init__(
        self,
        store: KeyValueStore,
        bundle_path: Path = BUNDLED_QUESTIONS_PATH,
        fallback: QuestionBank | None = None,
    ) -> None:
        self._store = store
        self._bundle_path = bundle_path
        self._fallback = fallback if fallback is not None else default_question_bank()

    def get_bank(self) -> QuestionBank:
        stored = self._load_stored_bank()
        if stored is not None:
            return stored
        return self._load_bundled_bank()

    def load(self, topic: str, difficulty: Difficulty) -> list[Question]:
        """Return the bucket's questions, or an empty list when no source has it."""
        bank = self.get_bank()
        if has_bucket(bank, topic, difficulty):
            return lookup(bank, topic, difficulty)
        questions = lookup(self._fallback, topic, difficulty)
        if not questions:
            logger.info("No questions available for %s/%s", topic, difficulty.value)
        return questions

    def topics(self) -> list[str]:
        return sorted(self.get_bank())

    def import_bank(self, imported: QuestionBank) -> QuestionBank:
        """Merge ``imported`` over the current bank, persist and return the result."""
        merged = merge_question_banks(self.get_bank(), imported)
        self._store.set(STORAGE_KEY_QUESTIONS, question_bank_to_json(merged))
        logger.info("Imported topics %s; bank now has %d topics", sorted(imported), len(merged))
        return merged

    def reset(self) -> None:
        """Forget imported questions."""
        self._store.remove(STORAGE_KEY_QUESTIONS)

    def _load_stored_bank(self) -> QuestionBank | None:
        raw = self._store.get(STORAGE_KEY_QUESTIONS)
        if raw is None:
            return None
        try:
            return parse_question_bank(raw)
        except QuestionBankError as exc:
            logger.warning("Ignoring stored question bank: %s", exc)
            return None

    def _load_bundled_bank(self) -> QuestionBank:
        try:
            raw = json.loads(self._bundle_path.read_text(encoding="utf-8"))
            return parse_question_bank(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, QuestionBankError) as exc:
            logger.warning("Failed to load questions from %s, using built-in set: %s", self._bundle_path, exc)
            return merge_question_banks({}, self._fallback)
