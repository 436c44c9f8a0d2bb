from trivia_app.core.models import AnsweredQuestion, Difficulty
from trivia_app.core.question_html import option_label, render_question_document, render_review_document
from trivia_app.core.services.quiz_session import CompletedSession, SessionOutcome
from trivia_app.styling.color_palette import Theme

from conftest import make_question


def test_question_document_renders_inline_code():
    html = render_question_document("What does `npm install` do?", font_size=16, theme=Theme.DARK)

    assert "<code>npm install</code>" in html
    assert "16pt" in html


def test_raw_html_in_prompts_is_escaped():
    html = render_question_document("<script>alert(1)</script>")
    assert "<script>alert" not in html


def test_review_document_marks_answers():
    session = CompletedSession(
        topic="nodejs",
        difficulty=Difficulty.EASY,
        score=1,
        total_questions=3,
        time_taken_seconds=30,
        questions=(
            AnsweredQuestion(make_question(1, "a"), "a"),
            AnsweredQuestion(make_question(2, "b"), "c"),
            AnsweredQuestion(make_question(3, "d"), None),
        ),
        outcome=SessionOutcome.TIMED_OUT,
    )

    html = render_review_document(session)

    assert html.count('class="card"') == 3
    assert "Question 3:" in html
    assert "Not answered" in html
    assert 'class="incorrect">c<' in html
    assert "Because b." in html


def test_option_label_strips_backticks():
    assert option_label("`php artisan migrate`") == "php artisan migrate"
