"""User-adjustable quiz settings persisted in the local store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trivia_app.constants.quiz_constants import (
    ANSWER_REVEAL_DELAY_MS,
    DEFAULT_TIME_BUDGET_SECONDS,
    MAX_TIME_BUDGET_SECONDS,
    MIN_TIME_BUDGET_SECONDS,
)

MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 32
DEFAULT_FONT_SIZE = 14


@dataclass(frozen=True, slots=True)
class QuizSettings:
    time_budget_seconds: int = DEFAULT_TIME_BUDGET_SECONDS
    reveal_delay_ms: int = ANSWER_REVEAL_DELAY_MS
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if not MIN_TIME_BUDGET_SECONDS <= self.time_budget_seconds <= MAX_TIME_BUDGET_SECONDS:
            raise ValueError(
                f"Time budget must be between {MIN_TIME_BUDGET_SECONDS} and {MAX_TIME_BUDGET_SECONDS} seconds."
            )
        if not 0 <= self.reveal_delay_ms <= 5000:
            raise ValueError("Reveal delay must be between 0 and 5000 ms.")
        if not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise ValueError(f"Font size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE} pt.")

    @classmethod
    def from_json(cls, data: Any) -> QuizSettings:
        """Build settings from a stored document; unusable values fall back to defaults."""
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        return cls(
            time_budget_seconds=_clamped_int(
                data.get("timeBudgetSeconds"),
                defaults.time_budget_seconds,
                MIN_TIME_BUDGET_SECONDS,
                MAX_TIME_BUDGET_SECONDS,
            ),
            reveal_delay_ms=_clamped_int(data.get("revealDelayMs"), defaults.reveal_delay_ms, 0, 5000),
            font_size=_clamped_int(data.get("fontSize"), defaults.font_size, MIN_FONT_SIZE, MAX_FONT_SIZE),
        )

    def to_json(self) -> dict[str, int]:
        return {
            "timeBudgetSeconds": self.time_budget_seconds,
            "revealDelayMs": self.reveal_delay_ms,
            "fontSize": self.font_size,
        }


def _clamped_int(value: Any, default: int, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(low, min(high, value))
