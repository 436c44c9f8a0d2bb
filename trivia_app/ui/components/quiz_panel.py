"""Component for answering a timed quiz."""

from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import (
    COUNTDOWN_TICK_INTERVAL_MS,
    TIME_BUDGET_WARNING_WINDOW_SECONDS,
)
from trivia_app.constants.ui_constants import QUIZ_COUNTER_TEMPLATE, QUIZ_LEAVE_BUTTON
from trivia_app.core.models import Difficulty, Question
from trivia_app.core.question_html import option_label, render_question_document
from trivia_app.core.services.quiz_session import CompletedSession, QuizSession, SessionState
from trivia_app.core.settings import QuizSettings
from trivia_app.styling.color_palette import ColorPalette, Theme
from trivia_app.ui.dialog_helpers import confirm_leave_quiz


def format_countdown(seconds: int) -> str:
    minutes, remainder = divmod(max(0, seconds), 60)
    return f"{minutes}:{remainder:02d}"


class QuizPanel(QWidget):
    """UI component running one quiz session.

    The panel owns the countdown and reveal timers; both stop when the session
    completes, when ``stop_session`` is called and when a new session starts.
    """

    def __init__(
        self,
        on_complete: Callable[[CompletedSession], None],
        on_leave: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_complete = on_complete
        self.on_leave = on_leave

        self._session: QuizSession | None = None
        self._settings = QuizSettings()
        self._theme = Theme.LIGHT
        self._option_buttons: list[QPushButton] = []

        self._build_ui()
        self._configure_timers()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        status_row = QHBoxLayout()
        self.counter_label = QLabel("", self)
        status_row.addWidget(self.counter_label)
        status_row.addStretch()
        self.countdown_label = QLabel("", self)
        self.countdown_label.setStyleSheet("padding: 2px 10px; border-radius: 10px; font-family: monospace;")
        status_row.addWidget(self.countdown_label)
        layout.addLayout(status_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_view = QWebEngineView(self)
        self.question_view.setMinimumHeight(120)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        leave_row = QHBoxLayout()
        leave_row.addStretch()
        self.leave_button = QPushButton(QUIZ_LEAVE_BUTTON, self)
        self.leave_button.clicked.connect(self._handle_leave)
        leave_row.addWidget(self.leave_button)
        layout.addLayout(leave_row)

    def _configure_timers(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(COUNTDOWN_TICK_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._handle_tick)

        self.reveal_timer = QTimer(self)
        self.reveal_timer.setSingleShot(True)
        self.reveal_timer.timeout.connect(self._handle_advance)

    def start_session(
        self,
        topic: str,
        difficulty: Difficulty,
        questions: Sequence[Question],
        settings: QuizSettings,
        theme: Theme,
    ) -> None:
        """Start a new session. An empty question list reports UNAVAILABLE without starting timers."""
        self.stop_session()
        self._settings = settings
        self._theme = theme
        self._session = QuizSession(
            topic,
            difficulty,
            questions,
            time_budget_seconds=settings.time_budget_seconds,
            on_complete=self._handle_session_complete,
        )
        state = self._session.start()
        if state.is_completed:
            return

        self.countdown_timer.start()
        self._update_countdown(state)
        self._display_current_question(state)

    def stop_session(self) -> None:
        self.countdown_timer.stop()
        self.reveal_timer.stop()
        self._session = None

    def has_running_session(self) -> bool:
        return self._session is not None and not self._session.is_completed

    def _handle_session_complete(self, completed: CompletedSession) -> None:
        self.countdown_timer.stop()
        self.reveal_timer.stop()
        self.on_complete(completed)

    def _handle_tick(self) -> None:
        if self._session is None:
            self.countdown_timer.stop()
            return
        state = self._session.tick()
        if not state.is_completed:
            self._update_countdown(state)

    def _handle_option_clicked(self, option: str) -> None:
        if self._session is None:
            return
        if not self._session.submit_answer(option):
            return
        self._reveal_answer(self._session.state, option)
        self.reveal_timer.start(self._settings.reveal_delay_ms)

    def _handle_advance(self) -> None:
        if self._session is None:
            return
        state = self._session.advance()
        if not state.is_completed:
            self._display_current_question(state)

    def _handle_leave(self) -> None:
        if self.has_running_session() and not confirm_leave_quiz(self):
            return
        self.stop_session()
        self.on_leave()

    def _display_current_question(self, state: SessionState) -> None:
        current = state.current_question
        if current is None:
            return
        self.counter_label.setText(
            QUIZ_COUNTER_TEMPLATE.format(current=state.position + 1, total=state.total_questions)
        )
        self.progress_bar.setRange(0, state.total_questions)
        self.progress_bar.setValue(state.position)
        self.question_view.setHtml(
            render_question_document(current.question.prompt, self._settings.font_size, self._theme)
        )
        self._rebuild_option_buttons(current.question.options)

    def _rebuild_option_buttons(self, options: Sequence[str]) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        for option in options:
            button = QPushButton(option_label(option), self)
            button.setStyleSheet(self._option_style(None))
            button.clicked.connect(lambda _checked=False, value=option: self._handle_option_clicked(value))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def _reveal_answer(self, state: SessionState, selected: str) -> None:
        current = state.questions[state.position]
        correct_option = current.question.correct_option
        for button, option in zip(self._option_buttons, current.question.options):
            button.setEnabled(False)
            if option == selected:
                button.setStyleSheet(self._option_style(option == correct_option))
            elif option == correct_option:
                button.setStyleSheet(self._option_style(True))

    def _option_style(self, correct: bool | None) -> str:
        base = f"text-align: left; padding: 12px 16px; border-radius: 12px; font-size: {self._settings.font_size - 2}pt;"
        if correct is None:
            return base
        color = ColorPalette.ANSWER_CORRECT if correct else ColorPalette.ANSWER_INCORRECT
        background = color.get(self._theme)
        return f"QPushButton {{ {base} background-color: {background}; color: #FFFFFF; border: none; }}"

    def _update_countdown(self, state: SessionState) -> None:
        self.countdown_label.setText(format_countdown(state.remaining_seconds))
        base_style = "padding: 2px 10px; border-radius: 10px; font-family: monospace;"
        if state.remaining_seconds <= TIME_BUDGET_WARNING_WINDOW_SECONDS:
            blink = state.remaining_seconds % 2 == 0
            background = "#b91c1c" if blink else "#ef4444"
            self.countdown_label.setStyleSheet(base_style + f" color: #fff; background-color: {background};")
        else:
            background = ColorPalette.BACKGROUND_TERTIARY.get(self._theme)
            self.countdown_label.setStyleSheet(base_style + f" background-color: {background};")
        self.countdown_label.setAlignment(Qt.AlignCenter)
