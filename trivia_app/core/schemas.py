"""Pydantic schemas for the JSON documents the application reads and writes.

Persisted and imported documents keep the camelCase keys of the original
browser client (``totalQuestions``, ``timeTaken``, ``userAnswer``) so that
existing exports and stored analytics remain readable.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from trivia_app.constants.quiz_constants import DEFAULT_TOPIC
from trivia_app.core.models import AnsweredQuestion, Difficulty, HistoryEntry, Question


class QuestionRecord(BaseModel):
    """Schema for a single question inside a question bank or history entry."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    question: str
    options: list[str]
    answer: str
    explanation: str = ""
    user_answer: str | None = Field(default=None, alias="userAnswer")

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Question text must not be empty.")
        return cleaned

    @field_validator("options")
    @classmethod
    def _options_valid(cls, value: list[str]) -> list[str]:
        if len(value) < 2:
            raise ValueError("A question needs at least two options.")
        if any(not option.strip() for option in value):
            raise ValueError("Option text cannot be empty.")
        if len(set(value)) != len(value):
            raise ValueError("Options must be unique.")
        return value

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> QuestionRecord:
        if self.answer not in self.options:
            raise ValueError(f"Answer {self.answer!r} is not one of the options.")
        return self

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            prompt=self.question,
            options=tuple(self.options),
            correct_option=self.answer,
            explanation=self.explanation,
        )

    def to_answered_question(self) -> AnsweredQuestion:
        return AnsweredQuestion(question=self.to_question(), user_answer=self.user_answer)

    @classmethod
    def from_question(cls, question: Question, user_answer: str | None = None) -> QuestionRecord:
        return cls(
            id=question.id,
            question=question.prompt,
            options=list(question.options),
            answer=question.correct_option,
            explanation=question.explanation,
            user_answer=user_answer,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HistoryRecord(BaseModel):
    """Schema for one completed session in the analytics store."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: datetime
    topic: str | None = None
    # Older multi-topic documents stored the topic under "language".
    language: str | None = None
    difficulty: Difficulty
    score: int = Field(ge=0)
    total_questions: int = Field(alias="totalQuestions", ge=0)
    time_taken: int = Field(alias="timeTaken", ge=0)
    answered_questions: list[QuestionRecord] = Field(default_factory=list, alias="answeredQuestions")

    @model_validator(mode="after")
    def _score_within_total(self) -> HistoryRecord:
        if self.score > self.total_questions:
            raise ValueError("Score cannot exceed the number of questions.")
        return self

    @property
    def resolved_topic(self) -> str:
        return self.topic or self.language or DEFAULT_TOPIC

    def to_entry(self) -> HistoryEntry:
        timestamp = self.date
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return HistoryEntry(
            timestamp=timestamp,
            topic=self.resolved_topic,
            difficulty=self.difficulty,
            score=self.score,
            total_questions=self.total_questions,
            time_taken_seconds=self.time_taken,
            answered_questions=tuple(
                record.to_answered_question() for record in self.answered_questions
            ),
        )

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> HistoryRecord:
        return cls(
            date=entry.timestamp,
            topic=entry.topic,
            difficulty=entry.difficulty,
            score=entry.score,
            total_questions=entry.total_questions,
            time_taken=entry.time_taken_seconds,
            answered_questions=[
                QuestionRecord.from_question(item.question, item.user_answer)
                for item in entry.answered_questions
            ],
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnalyticsDocument(BaseModel):
    """Top-level analytics document. Stored ``stats`` are ignored and always recomputed."""

    model_config = ConfigDict(extra="ignore")

    history: list[Any] = Field(default_factory=list)
