"""Quiz session engine: question sequencing, scoring and the countdown.

The engine is a set of pure reducers over an immutable ``SessionState``.
Time never advances on its own: whoever owns the session (the quiz panel in
the UI, a fake clock in tests) calls ``tick`` once per second and
``advance`` once the answer reveal delay has elapsed.

    begin_session ──► ACTIVE ──submit_answer──► ACTIVE (awaiting advance)
                        ▲                              │
                        └────────────advance───────────┘
    ACTIVE ──advance past last question──► COMPLETED (FINISHED)
    ACTIVE ──tick reaches zero───────────► COMPLETED (TIMED_OUT)
    begin_session with no questions ─────► COMPLETED (UNAVAILABLE)

COMPLETED is terminal: every reducer returns a completed state unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
import logging
import random
import time
from typing import Callable, Sequence

from trivia_app.core.models import AnsweredQuestion, Difficulty, Question
from trivia_app.core.randomizer import shuffled

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    ACTIVE = auto()
    COMPLETED = auto()


class SessionOutcome(Enum):
    """How a session ended."""

    FINISHED = auto()
    TIMED_OUT = auto()
    UNAVAILABLE = auto()


@dataclass(frozen=True, slots=True)
class CompletedSession:
    """Completion event emitted once per session.

    ``score`` is ``None`` only for the UNAVAILABLE outcome. ``total_questions``
    is the full length of the session's sequence, so a timed-out session
    counts its unanswered tail as incorrect.
    """

    topic: str
    difficulty: Difficulty
    score: int | None
    total_questions: int
    time_taken_seconds: int
    questions: tuple[AnsweredQuestion, ...]
    outcome: SessionOutcome

    @property
    def is_unavailable(self) -> bool:
        return self.outcome is SessionOutcome.UNAVAILABLE

    @property
    def answered_count(self) -> int:
        return sum(1 for question in self.questions if question.is_answered)

    @property
    def percentage(self) -> int:
        if not self.score or not self.total_questions:
            return 0
        return round(self.score / self.total_questions * 100)


@dataclass(frozen=True, slots=True)
class SessionState:
    topic: str
    difficulty: Difficulty
    questions: tuple[AnsweredQuestion, ...]
    time_budget_seconds: int
    started_at: float
    remaining_seconds: int
    position: int = 0
    score: int = 0
    awaiting_advance: bool = False
    completion: CompletedSession | None = None

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase.COMPLETED if self.completion is not None else SessionPhase.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.completion is not None

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> AnsweredQuestion | None:
        if self.is_completed or self.position >= len(self.questions):
            return None
        return self.questions[self.position]


def begin_session(
    topic: str,
    difficulty: Difficulty,
    questions: Sequence[Question],
    *,
    time_budget_seconds: int,
    now: float,
    rng: random.Random | None = None,
) -> SessionState:
    """Create the initial state; an empty ``questions`` yields an UNAVAILABLE completion."""
    if time_budget_seconds <= 0:
        raise ValueError("Time budget must be a positive number of seconds.")

    if not questions:
        return SessionState(
            topic=topic,
            difficulty=difficulty,
            questions=(),
            time_budget_seconds=time_budget_seconds,
            started_at=now,
            remaining_seconds=0,
            completion=CompletedSession(
                topic=topic,
                difficulty=difficulty,
                score=None,
                total_questions=0,
                time_taken_seconds=0,
                questions=(),
                outcome=SessionOutcome.UNAVAILABLE,
            ),
        )

    ordered = shuffled(questions, rng)
    return SessionState(
        topic=topic,
        difficulty=difficulty,
        questions=tuple(AnsweredQuestion(question=question) for question in ordered),
        time_budget_seconds=time_budget_seconds,
        started_at=now,
        remaining_seconds=time_budget_seconds,
    )


def submit_answer(state: SessionState, option: str) -> SessionState:
    """Record ``option`` for the current question. Repeated submissions are ignored."""
    current = state.current_question
    if current is None or current.is_answered:
        return state
    if option not in current.question.options:
        raise ValueError(f"{option!r} is not an option of question {current.question.id}.")

    answered = current.with_answer(option)
    questions = state.questions[: state.position] + (answered,) + state.questions[state.position + 1 :]
    return replace(
        state,
        questions=questions,
        score=state.score + (1 if answered.is_correct else 0),
        awaiting_advance=True,
    )


def advance(state: SessionState, now: float) -> SessionState:
    """Move past an answered question, completing the session after the last one."""
    if state.is_completed or not state.awaiting_advance:
        return state
    advanced = replace(state, position=state.position + 1, awaiting_advance=False)
    if advanced.position >= advanced.total_questions:
        return _complete(advanced, now, SessionOutcome.FINISHED)
    return advanced


def tick(state: SessionState, now: float) -> SessionState:
    """One second of countdown; reaching zero forces completion."""
    if state.is_completed:
        return state
    remaining = max(0, state.remaining_seconds - 1)
    if remaining == 0:
        return _complete(replace(state, remaining_seconds=0), now, SessionOutcome.TIMED_OUT)
    return replace(state, remaining_seconds=remaining)


def _complete(state: SessionState, now: float, outcome: SessionOutcome) -> SessionState:
    time_taken = max(0, round(now - state.started_at))
    completion = CompletedSession(
        topic=state.topic,
        difficulty=state.difficulty,
        score=state.score,
        total_questions=state.total_questions,
        time_taken_seconds=time_taken,
        questions=state.questions,
        outcome=outcome,
    )
    return replace(state, awaiting_advance=False, completion=completion)


class QuizSession:
    """Stateful holder for one session that reports completion exactly once."""

    def __init__(
        self,
        topic: str,
        difficulty: Difficulty,
        questions: Sequence[Question],
        *,
        time_budget_seconds: int,
        on_complete: Callable[[CompletedSession], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock
        self._on_complete = on_complete
        self._notified = False
        self._state = begin_session(
            topic,
            difficulty,
            questions,
            time_budget_seconds=time_budget_seconds,
            now=clock(),
            rng=rng,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_completed(self) -> bool:
        return self._state.is_completed

    def start(self) -> SessionState:
        """Report an UNAVAILABLE completion immediately; otherwise a no-op."""
        self._publish_completion()
        return self._state

    def submit_answer(self, option: str) -> bool:
        """Return True when the answer was recorded."""
        before = self._state
        self._apply(submit_answer(before, option))
        return self._state is not before

    def advance(self) -> SessionState:
        return self._apply(advance(self._state, self._clock()))

    def tick(self) -> SessionState:
        return self._apply(tick(self._state, self._clock()))

    def _apply(self, new_state: SessionState) -> SessionState:
        self._state = new_state
        self._publish_completion()
        return new_state

    def _publish_completion(self) -> None:
        completion = self._state.completion
        if completion is None or self._notified:
            return
        self._notified = True
        logger.info(
            "Session %s/%s ended (%s): %s/%d in %ds",
            completion.topic,
            completion.difficulty.value,
            completion.outcome.name,
            completion.score,
            completion.total_questions,
            completion.time_taken_seconds,
        )
        if self._on_complete is not None:
            self._on_complete(completion)
