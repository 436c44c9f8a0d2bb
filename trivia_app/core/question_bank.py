"""Question bank structure: topic -> difficulty -> questions.

Two JSON shapes are accepted. The multi-topic shape nests difficulties under
topic names::

    {"nodejs": {"easy": [...], "medium": [...]}, "laravel": {"hard": [...]}}

The single-topic shape omits the topic level and is stored under
``DEFAULT_TOPIC``::

    {"easy": [...], "hard": [...]}
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from trivia_app.constants.quiz_constants import DEFAULT_TOPIC
from trivia_app.core.models import Difficulty, Question
from trivia_app.core.schemas import QuestionRecord

QuestionBank = dict[str, dict[Difficulty, list[Question]]]

_DIFFICULTY_KEYS = {difficulty.value for difficulty in Difficulty}


class QuestionBankError(Exception):
    """Raised when a question bank document has an invalid structure."""


def parse_question_bank(data: Any) -> QuestionBank:
    """Validate a decoded JSON document and return a question bank.

    Either the whole document parses or ``QuestionBankError`` is raised.
    """
    if not isinstance(data, Mapping):
        raise QuestionBankError("Question bank must be a JSON object.")

    if _is_single_topic_shape(data):
        data = {DEFAULT_TOPIC: data}

    bank: QuestionBank = {}
    for topic, buckets in data.items():
        topic_name = str(topic).strip()
        if not topic_name:
            raise QuestionBankError("Topic names cannot be empty.")
        if not isinstance(buckets, Mapping):
            raise QuestionBankError(f"Topic '{topic_name}' must map difficulties to question lists.")
        bank[topic_name] = _parse_topic(topic_name, buckets)
    return bank


def _is_single_topic_shape(data: Mapping[str, Any]) -> bool:
    return bool(data) and all(
        key in _DIFFICULTY_KEYS and isinstance(value, list) for key, value in data.items()
    )


def _parse_topic(topic: str, buckets: Mapping[str, Any]) -> dict[Difficulty, list[Question]]:
    parsed: dict[Difficulty, list[Question]] = {}
    for key, items in buckets.items():
        if key not in _DIFFICULTY_KEYS:
            raise QuestionBankError(
                f"Unknown difficulty '{key}' in topic '{topic}'. Expected one of: easy, medium, hard."
            )
        if not isinstance(items, list):
            raise QuestionBankError(f"'{topic}'.'{key}' must be a list of questions.")
        difficulty = Difficulty(key)
        questions: list[Question] = []
        seen_ids: set[int] = set()
        for position, item in enumerate(items, start=1):
            try:
                record = QuestionRecord.model_validate(item)
            except ValidationError as exc:
                raise QuestionBankError(
                    f"Question {position} in '{topic}'.'{key}' is invalid: {_first_error(exc)}"
                ) from exc
            if record.id in seen_ids:
                raise QuestionBankError(f"Duplicate question id {record.id} in '{topic}'.'{key}'.")
            seen_ids.add(record.id)
            questions.append(record.to_question())
        parsed[difficulty] = questions
    return parsed


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def merge_question_banks(base: QuestionBank, overlay: QuestionBank) -> QuestionBank:
    """Shallow merge: topics in ``overlay`` replace same-named topics in ``base``."""
    merged: QuestionBank = {topic: dict(buckets) for topic, buckets in base.items()}
    for topic, buckets in overlay.items():
        merged[topic] = dict(buckets)
    return merged


def lookup(bank: Mapping[str, Mapping[Difficulty, list[Question]]], topic: str, difficulty: Difficulty) -> list[Question]:
    """Return a copy of the bucket's questions, or an empty list when it is absent."""
    buckets = bank.get(topic)
    if not buckets:
        return []
    return list(buckets.get(difficulty, []))


def has_bucket(bank: Mapping[str, Mapping[Difficulty, list[Question]]], topic: str, difficulty: Difficulty) -> bool:
    buckets = bank.get(topic)
    return bool(buckets) and difficulty in buckets


def question_bank_to_json(bank: QuestionBank) -> dict[str, dict[str, list[dict[str, Any]]]]:
    """Serialize a bank into the multi-topic JSON shape."""
    return {
        topic: {
            difficulty.value: [QuestionRecord.from_question(question).to_json() for question in questions]
            for difficulty, questions in _ordered_buckets(buckets)
        }
        for topic, buckets in bank.items()
    }


def _ordered_buckets(buckets: Mapping[Difficulty, list[Question]]):
    for difficulty in Difficulty:
        if difficulty in buckets:
            yield difficulty, buckets[difficulty]


def count_questions(bank: QuestionBank) -> int:
    return sum(len(questions) for buckets in bank.values() for questions in buckets.values())
