"""Utilities for importing question banks from JSON files.

Accepted documents (see ``trivia_app.core.question_bank``)::

    {
      "nodejs": {
        "easy": [
          {"id": 1, "question": "What is Node.js built on?",
           "options": ["JVM", "V8", "CPython", "Mono"],
           "answer": "V8",
           "explanation": "Node.js runs JavaScript on Google's V8 engine."}
        ]
      }
    }

A document without the topic level (``{"easy": [...]}``) is imported under
the default topic.

Architecture note:
    Importing is all-or-nothing. A file that fails to decode or validate
    raises ``QuestionBankImportError`` before anything is merged, so the
    caller's bank and the persisted copy stay untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from trivia_app.core.question_bank import (
    QuestionBank,
    QuestionBankError,
    count_questions,
    parse_question_bank,
)


class QuestionBankImportError(QuestionBankError):
    """Raised when a question bank file cannot be imported."""


@dataclass(slots=True)
class ImportedQuestionBank:
    """Container for an imported bank and where it came from."""

    source_path: Path
    bank: QuestionBank

    @property
    def question_count(self) -> int:
        return count_questions(self.bank)


def load_question_bank_from_file(file_path: Path) -> ImportedQuestionBank:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuestionBankImportError("Question file is not valid UTF-8 text.") from exc
    bank = parse_question_bank_text(text)
    return ImportedQuestionBank(source_path=file_path, bank=bank)


def parse_question_bank_text(text: str) -> QuestionBank:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuestionBankImportError(
            f"Failed to import file. Please ensure it's a valid JSON (line {exc.lineno}, column {exc.colno})."
        ) from exc

    try:
        bank = parse_question_bank(data)
    except QuestionBankImportError:
        raise
    except QuestionBankError as exc:
        raise QuestionBankImportError(str(exc)) from exc

    if not bank:
        raise QuestionBankImportError("Question file did not contain any topics.")
    return bank
