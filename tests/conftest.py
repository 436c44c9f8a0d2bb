from __future__ import annotations

from datetime import datetime, timedelta, timezone
import random

import pytest

from trivia_app.core.models import Question
from trivia_app.core.storage import MemoryStore


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWallClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


def make_question(question_id: int, correct: str = "b", options: tuple[str, ...] = ("a", "b", "c", "d")) -> Question:
    return Question(
        id=question_id,
        prompt=f"Question {question_id}?",
        options=options,
        correct_option=correct,
        explanation=f"Because {correct}.",
    )


def question_json(question_id: int, answer: str = "b") -> dict:
    return {
        "id": question_id,
        "question": f"Question {question_id}?",
        "options": ["a", "b", "c", "d"],
        "answer": answer,
        "explanation": "",
    }


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def wall_clock() -> FakeWallClock:
    return FakeWallClock()


@pytest.fixture
def questions() -> list[Question]:
    return [make_question(1, "a"), make_question(2, "b"), make_question(3, "c")]
