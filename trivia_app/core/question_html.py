"""HTML documents for the question view and the answer review."""

from __future__ import annotations

from trivia_app.core.markdown_renderer import renderer
from trivia_app.core.models import AnsweredQuestion
from trivia_app.core.services.quiz_session import CompletedSession
from trivia_app.styling.color_palette import ColorPalette, Theme


def _wrap(body_html: str, title: str, font_size: int, theme: Theme) -> str:
    return renderer.wrap_document(
        body_html,
        title=title,
        font_size=font_size,
        text_color=ColorPalette.TEXT_PRIMARY.get(theme),
        background=ColorPalette.PREVIEW_BG.get(theme),
        code_background=ColorPalette.BACKGROUND_TERTIARY.get(theme),
    )


def render_question_document(prompt: str, font_size: int = 14, theme: Theme = Theme.LIGHT) -> str:
    """Render a question prompt (Markdown) as a standalone HTML document."""
    fragment = renderer.render_fragment(prompt)
    return _wrap(f"<h3>{fragment}</h3>", "Question", font_size, theme)


def render_review_document(
    session: CompletedSession,
    font_size: int = 12,
    theme: Theme = Theme.LIGHT,
) -> str:
    """One card per question: the prompt, the user's answer, the correct answer and why."""
    cards = [_render_review_card(index, item) for index, item in enumerate(session.questions, start=1)]
    if not cards:
        cards = ["<p><em>No questions in this session.</em></p>"]
    return _wrap("\n".join(cards), "Review Answers", font_size, theme)


def _render_review_card(index: int, item: AnsweredQuestion) -> str:
    question = item.question
    prompt = renderer.render_inline(question.prompt)
    if item.user_answer is None:
        user_answer = "Not answered"
    else:
        user_answer = renderer.render_inline(item.user_answer)
    answer_class = "correct" if item.is_correct else "incorrect"
    correct = renderer.render_inline(question.correct_option)
    explanation = (
        renderer.render_fragment(question.explanation)
        if question.explanation.strip()
        else "<p><em>No explanation provided.</em></p>"
    )
    return (
        '<div class="card">'
        f"<h4>Question {index}: {prompt}</h4>"
        f'<p>Your answer: <span class="{answer_class}">{user_answer}</span></p>'
        f'<p>Correct answer: <span class="correct">{correct}</span></p>'
        f"<p>Explanation:</p>{explanation}"
        "</div>"
    )


def option_label(option: str) -> str:
    """Plain-text label for an option button; code spans lose their backticks."""
    return option.replace("`", "")
