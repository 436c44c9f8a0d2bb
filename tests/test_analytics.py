from datetime import datetime, timezone

import pytest

from trivia_app.core.models import Difficulty, HistoryEntry
from trivia_app.core.services.analytics import (
    BucketTotals,
    accumulate,
    combine_totals,
    summaries_from_totals,
    summarize,
    topic_accuracy,
)

STAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _entry(difficulty, score, total, time_taken, topic="general"):
    return HistoryEntry(
        timestamp=STAMP,
        topic=topic,
        difficulty=difficulty,
        score=score,
        total_questions=total,
        time_taken_seconds=time_taken,
    )


def test_accuracy_and_average_time_for_one_bucket():
    history = [
        _entry(Difficulty.EASY, 2, 4, 30),
        _entry(Difficulty.EASY, 3, 6, 50),
    ]
    summary = summarize(history)

    easy = summary[("general", Difficulty.EASY)]
    assert easy.accuracy == pytest.approx(50.0)
    assert easy.avg_time == pytest.approx(40.0)


def test_empty_history_reports_zero_for_known_topics():
    summary = summarize([], topics=["nodejs"])

    assert set(summary) == {("nodejs", difficulty) for difficulty in Difficulty}
    for bucket in summary.values():
        assert bucket.accuracy == 0
        assert bucket.avg_time == 0


def test_buckets_without_history_are_zero():
    summary = summarize([_entry(Difficulty.HARD, 1, 2, 10, topic="laravel")])

    assert summary[("laravel", Difficulty.EASY)].accuracy == 0
    assert summary[("laravel", Difficulty.HARD)].accuracy == pytest.approx(50.0)


def test_zero_question_sessions_do_not_divide_by_zero():
    summary = summarize([_entry(Difficulty.MEDIUM, 0, 0, 12)])
    medium = summary[("general", Difficulty.MEDIUM)]

    assert medium.accuracy == 0
    assert medium.avg_time == pytest.approx(12.0)


def test_totals_of_split_history_combine_to_the_whole():
    history = [
        _entry(Difficulty.EASY, 2, 4, 30),
        _entry(Difficulty.HARD, 1, 5, 80, topic="nodejs"),
        _entry(Difficulty.EASY, 3, 6, 50),
        _entry(Difficulty.HARD, 4, 5, 20, topic="nodejs"),
    ]
    whole = accumulate(history)
    parts = combine_totals(accumulate(history[:1]), accumulate(history[1:3]), accumulate(history[3:]))

    assert parts == whole
    assert summaries_from_totals(parts) == summaries_from_totals(whole)


def test_accuracy_stays_within_bounds():
    history = [_entry(Difficulty.EASY, score, 5, 10) for score in range(6)]
    for bucket in summarize(history).values():
        assert 0 <= bucket.accuracy <= 100
        assert bucket.avg_time >= 0


def test_topic_accuracy_spans_all_difficulties():
    history = [
        _entry(Difficulty.EASY, 4, 4, 10, topic="nodejs"),
        _entry(Difficulty.HARD, 0, 4, 10, topic="nodejs"),
        _entry(Difficulty.EASY, 0, 10, 10, topic="laravel"),
    ]
    assert topic_accuracy(history, "nodejs") == pytest.approx(50.0)
    assert topic_accuracy(history, "python") == 0


def test_bucket_totals_addition():
    left = BucketTotals(correct=1, total=2, time_sum=3, count=1)
    right = BucketTotals(correct=2, total=3, time_sum=4, count=1)
    assert left + right == BucketTotals(correct=3, total=5, time_sum=7, count=2)
