import pytest

from trivia_app.core.models import Difficulty
from trivia_app.core.services.quiz_session import (
    QuizSession,
    SessionOutcome,
    SessionPhase,
    advance,
    begin_session,
    submit_answer,
    tick,
)

from conftest import make_question


def _answer_current(session: QuizSession, correct: bool = True) -> None:
    question = session.state.current_question.question
    if correct:
        option = question.correct_option
    else:
        option = next(option for option in question.options if option != question.correct_option)
    assert session.submit_answer(option)


def test_all_correct_answers_finish_with_full_score(questions, clock, rng):
    completions = []
    session = QuizSession(
        "nodejs",
        Difficulty.EASY,
        questions,
        time_budget_seconds=300,
        on_complete=completions.append,
        clock=clock,
        rng=rng,
    )
    session.start()

    for _ in range(3):
        clock.advance(5)
        session.tick()
        _answer_current(session)
        session.advance()

    assert session.is_completed
    assert len(completions) == 1
    result = completions[0]
    assert result.outcome is SessionOutcome.FINISHED
    assert result.score == 3
    assert result.total_questions == 3
    assert result.time_taken_seconds == 15
    assert result.percentage == 100
    assert all(item.is_correct for item in result.questions)


def test_empty_question_list_is_unavailable(clock):
    completions = []
    session = QuizSession(
        "nodejs",
        Difficulty.HARD,
        [],
        time_budget_seconds=300,
        on_complete=completions.append,
        clock=clock,
    )
    state = session.start()

    assert state.phase is SessionPhase.COMPLETED
    assert len(completions) == 1
    assert completions[0].outcome is SessionOutcome.UNAVAILABLE
    assert completions[0].score is None
    assert completions[0].is_unavailable

    session.tick()
    session.start()
    assert len(completions) == 1


def test_timeout_counts_unanswered_questions(clock, rng):
    completions = []
    five = [make_question(i, "a") for i in range(1, 6)]
    session = QuizSession(
        "nodejs",
        Difficulty.MEDIUM,
        five,
        time_budget_seconds=3,
        on_complete=completions.append,
        clock=clock,
        rng=rng,
    )
    session.start()
    _answer_current(session)
    session.advance()
    _answer_current(session, correct=False)

    for _ in range(3):
        clock.advance(1)
        session.tick()

    assert len(completions) == 1
    result = completions[0]
    assert result.outcome is SessionOutcome.TIMED_OUT
    assert result.score == 1
    assert result.total_questions == 5
    assert result.answered_count == 2
    assert session.state.remaining_seconds == 0

    frozen = session.state
    clock.advance(1)
    session.tick()
    session.advance()
    assert session.submit_answer("a") is False
    assert session.state is frozen
    assert len(completions) == 1


def test_second_submission_for_same_question_is_ignored(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=60, now=clock(), rng=rng)
    current = state.current_question.question
    wrong = next(option for option in current.options if option != current.correct_option)

    answered = submit_answer(state, wrong)
    again = submit_answer(answered, current.correct_option)

    assert again is answered
    assert again.score == 0
    assert again.questions[0].user_answer == wrong


def test_unknown_option_is_rejected(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=60, now=clock(), rng=rng)
    with pytest.raises(ValueError):
        submit_answer(state, "not an option")


def test_advance_requires_an_answer(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=60, now=clock(), rng=rng)
    assert advance(state, clock()) is state


def test_position_and_score_stay_in_bounds(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=60, now=clock(), rng=rng)
    while not state.is_completed:
        assert 0 <= state.position < state.total_questions
        assert 0 <= state.score <= state.position + 1
        state = submit_answer(state, state.current_question.question.correct_option)
        state = advance(state, clock())

    assert state.position == state.total_questions
    assert state.current_question is None
    assert state.completion.score == state.total_questions


def test_tick_never_goes_negative(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=2, now=clock(), rng=rng)
    for _ in range(5):
        state = tick(state, clock())
    assert state.remaining_seconds == 0
    assert state.completion.outcome is SessionOutcome.TIMED_OUT


def test_questions_are_shuffled_copies(questions, clock, rng):
    state = begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=60, now=clock(), rng=rng)
    assert sorted(item.question.id for item in state.questions) == [1, 2, 3]
    assert all(item.user_answer is None for item in state.questions)
    assert [question.id for question in questions] == [1, 2, 3]


def test_non_positive_time_budget_is_rejected(questions, clock):
    with pytest.raises(ValueError):
        begin_session("nodejs", Difficulty.EASY, questions, time_budget_seconds=0, now=clock())
