"""Aggregation of session history into per-bucket accuracy and timing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from trivia_app.core.models import BucketSummary, Difficulty, HistoryEntry

BucketKey = tuple[str, Difficulty]


@dataclass(frozen=True, slots=True)
class BucketTotals:
    """Running sums for one bucket. Totals of disjoint histories add up."""

    correct: int = 0
    total: int = 0
    time_sum: int = 0
    count: int = 0

    def __add__(self, other: BucketTotals) -> BucketTotals:
        return BucketTotals(
            correct=self.correct + other.correct,
            total=self.total + other.total,
            time_sum=self.time_sum + other.time_sum,
            count=self.count + other.count,
        )

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> BucketTotals:
        return cls(
            correct=entry.score,
            total=entry.total_questions,
            time_sum=entry.time_taken_seconds,
            count=1,
        )

    def summary(self) -> BucketSummary:
        accuracy = 100 * self.correct / self.total if self.total > 0 else 0.0
        avg_time = self.time_sum / self.count if self.count > 0 else 0.0
        return BucketSummary(accuracy=accuracy, avg_time=avg_time)


def accumulate(history: Iterable[HistoryEntry]) -> dict[BucketKey, BucketTotals]:
    totals: dict[BucketKey, BucketTotals] = {}
    for entry in history:
        key = (entry.topic, entry.difficulty)
        totals[key] = totals.get(key, BucketTotals()) + BucketTotals.from_entry(entry)
    return totals


def combine_totals(*parts: Mapping[BucketKey, BucketTotals]) -> dict[BucketKey, BucketTotals]:
    combined: dict[BucketKey, BucketTotals] = {}
    for part in parts:
        for key, value in part.items():
            combined[key] = combined.get(key, BucketTotals()) + value
    return combined


def summaries_from_totals(
    totals: Mapping[BucketKey, BucketTotals],
    topics: Iterable[str] = (),
) -> dict[BucketKey, BucketSummary]:
    """Summaries for every difficulty of every topic seen in ``totals`` or ``topics``."""
    all_topics = {topic for topic, _ in totals} | set(topics)
    return {
        (topic, difficulty): totals.get((topic, difficulty), BucketTotals()).summary()
        for topic in sorted(all_topics)
        for difficulty in Difficulty
    }


def summarize(
    history: Iterable[HistoryEntry],
    topics: Iterable[str] = (),
) -> dict[BucketKey, BucketSummary]:
    return summaries_from_totals(accumulate(history), topics)


def topic_accuracy(history: Iterable[HistoryEntry], topic: str) -> float:
    """Accuracy across all difficulties of ``topic``."""
    overall = BucketTotals()
    for (entry_topic, _), totals in accumulate(history).items():
        if entry_topic == topic:
            overall = overall + totals
    return overall.summary().accuracy
