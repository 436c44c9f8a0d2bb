import pytest

from trivia_app.core import screens
from trivia_app.core.models import Difficulty
from trivia_app.core.screens import (
    DifficultySelectionScreen,
    LoginScreen,
    QuizScreen,
    ResultsScreen,
    ReviewScreen,
    TopicSelectionScreen,
)
from trivia_app.core.services.quiz_session import CompletedSession, SessionOutcome


def _completed(outcome=SessionOutcome.FINISHED, score=2):
    return CompletedSession(
        topic="nodejs",
        difficulty=Difficulty.MEDIUM,
        score=score,
        total_questions=3 if score is not None else 0,
        time_taken_seconds=12,
        questions=(),
        outcome=outcome,
    )


def test_full_navigation_cycle():
    topic = screens.after_login("Ada")
    assert topic == TopicSelectionScreen(user="Ada")

    difficulty = screens.select_topic(topic, "nodejs")
    assert difficulty == DifficultySelectionScreen(user="Ada", topic="nodejs")
    assert screens.back_to_topics(difficulty) == topic

    quiz = screens.start_quiz(difficulty, Difficulty.MEDIUM)
    assert quiz == QuizScreen(user="Ada", topic="nodejs", difficulty=Difficulty.MEDIUM)

    results = screens.after_completion(quiz, _completed())
    assert isinstance(results, ResultsScreen)

    review = screens.review(results)
    assert isinstance(review, ReviewScreen)
    assert screens.back_to_results(review) == results
    assert screens.go_home(review) == difficulty
    assert screens.go_home(results) == difficulty

    assert screens.after_logout() == LoginScreen()


def test_unavailable_session_returns_to_difficulty_selection():
    quiz = QuizScreen(user="Ada", topic="nodejs", difficulty=Difficulty.HARD)
    unavailable = _completed(SessionOutcome.UNAVAILABLE, score=None)

    assert screens.after_completion(quiz, unavailable) == DifficultySelectionScreen(user="Ada", topic="nodejs")


def test_results_require_a_played_session():
    with pytest.raises(ValueError):
        ResultsScreen(user="Ada", session=_completed(SessionOutcome.UNAVAILABLE, score=None))


def test_timed_out_session_still_has_results():
    quiz = QuizScreen(user="Ada", topic="nodejs", difficulty=Difficulty.MEDIUM)
    results = screens.after_completion(quiz, _completed(SessionOutcome.TIMED_OUT, score=0))
    assert isinstance(results, ResultsScreen)
    assert results.session.percentage == 0


def test_review_requires_a_played_session():
    with pytest.raises(ValueError):
        ReviewScreen(user="Ada", session=_completed(SessionOutcome.UNAVAILABLE, score=None))
