"""Utilities for exporting question banks to the JSON format used for imports."""

from __future__ import annotations

import json
from pathlib import Path

from trivia_app.core.question_bank import QuestionBank, question_bank_to_json


def save_question_bank_to_file(file_path: Path, bank: QuestionBank) -> None:
    """Persist the full bank to disk as pretty-printed JSON."""

    if not bank:
        raise ValueError("Cannot export an empty question bank.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_question_bank(bank), encoding="utf-8")


def serialize_question_bank(bank: QuestionBank) -> str:
    return json.dumps(question_bank_to_json(bank), ensure_ascii=False, indent=2) + "\n"
