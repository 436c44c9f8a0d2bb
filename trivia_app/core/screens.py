"""Screen states of the application window.

Each screen carries exactly the data it needs; results and review screens
cannot exist without a completed session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from trivia_app.core.models import Difficulty
from trivia_app.core.services.quiz_session import CompletedSession


@dataclass(frozen=True, slots=True)
class LoginScreen:
    pass


@dataclass(frozen=True, slots=True)
class TopicSelectionScreen:
    user: str


@dataclass(frozen=True, slots=True)
class DifficultySelectionScreen:
    user: str
    topic: str


@dataclass(frozen=True, slots=True)
class QuizScreen:
    user: str
    topic: str
    difficulty: Difficulty


@dataclass(frozen=True, slots=True)
class ResultsScreen:
    user: str
    session: CompletedSession

    def __post_init__(self) -> None:
        if self.session.is_unavailable:
            raise ValueError("An unavailable session has no results to show.")


@dataclass(frozen=True, slots=True)
class ReviewScreen:
    user: str
    session: CompletedSession

    def __post_init__(self) -> None:
        if self.session.is_unavailable:
            raise ValueError("An unavailable session has nothing to review.")


Screen = Union[
    LoginScreen,
    TopicSelectionScreen,
    DifficultySelectionScreen,
    QuizScreen,
    ResultsScreen,
    ReviewScreen,
]


def after_login(user: str) -> TopicSelectionScreen:
    return TopicSelectionScreen(user=user)


def after_logout() -> LoginScreen:
    return LoginScreen()


def select_topic(screen: TopicSelectionScreen, topic: str) -> DifficultySelectionScreen:
    return DifficultySelectionScreen(user=screen.user, topic=topic)


def back_to_topics(screen: DifficultySelectionScreen) -> TopicSelectionScreen:
    return TopicSelectionScreen(user=screen.user)


def start_quiz(screen: DifficultySelectionScreen, difficulty: Difficulty) -> QuizScreen:
    return QuizScreen(user=screen.user, topic=screen.topic, difficulty=difficulty)


def after_completion(screen: QuizScreen, session: CompletedSession) -> ResultsScreen | DifficultySelectionScreen:
    """Results for a played session; back to difficulty selection when nothing was available."""
    if session.is_unavailable:
        return DifficultySelectionScreen(user=screen.user, topic=screen.topic)
    return ResultsScreen(user=screen.user, session=session)


def review(screen: ResultsScreen) -> ReviewScreen:
    return ReviewScreen(user=screen.user, session=screen.session)


def back_to_results(screen: ReviewScreen) -> ResultsScreen:
    return ResultsScreen(user=screen.user, session=screen.session)


def go_home(screen: ResultsScreen | ReviewScreen) -> DifficultySelectionScreen:
    return DifficultySelectionScreen(user=screen.user, topic=screen.session.topic)
