"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from trivia_app.constants.quiz_constants import DEFAULT_TOPIC


class Difficulty(str, Enum):
    """Difficulty level of a question bucket."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question; the correct option is stored as option text."""

    id: int
    prompt: str
    options: tuple[str, ...]
    correct_option: str
    explanation: str = ""

    def __post_init__(self) -> None:
        if self.correct_option not in self.options:
            raise ValueError(
                f"Correct option {self.correct_option!r} is not one of the options of question {self.id}."
            )

    def is_correct(self, option: str) -> bool:
        return option == self.correct_option


@dataclass(frozen=True, slots=True)
class AnsweredQuestion:
    """Per-session copy of a question, annotated with the user's answer once given."""

    question: Question
    user_answer: str | None = None

    @property
    def is_answered(self) -> bool:
        return self.user_answer is not None

    @property
    def is_correct(self) -> bool:
        return self.user_answer is not None and self.question.is_correct(self.user_answer)

    def with_answer(self, option: str) -> AnsweredQuestion:
        return replace(self, user_answer=option)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Immutable record of one completed session."""

    timestamp: datetime
    difficulty: Difficulty
    score: int
    total_questions: int
    time_taken_seconds: int
    topic: str = DEFAULT_TOPIC
    answered_questions: tuple[AnsweredQuestion, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.total_questions < 0:
            raise ValueError("Total questions cannot be negative.")
        if not 0 <= self.score <= self.total_questions:
            raise ValueError(
                f"Score {self.score} must be between 0 and {self.total_questions}."
            )
        if self.time_taken_seconds < 0:
            raise ValueError("Time taken cannot be negative.")


@dataclass(frozen=True, slots=True)
class BucketSummary:
    """Accuracy percentage and average duration for one topic/difficulty bucket."""

    accuracy: float = 0.0
    avg_time: float = 0.0
