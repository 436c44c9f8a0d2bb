"""Component for showing the result of a finished quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import (
    HOME_BUTTON,
    RESULTS_HEADING,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_TIME_TEMPLATE,
    RESULTS_TIMED_OUT_HEADING,
    REVIEW_BUTTON,
)
from trivia_app.core.services.quiz_session import CompletedSession, SessionOutcome
from trivia_app.styling.color_palette import ColorPalette, Theme
from trivia_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Percentage, score and time of the last session."""

    def __init__(
        self,
        on_review: Callable[[], None],
        on_home: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_review = on_review
        self.on_home = on_home
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.heading_label = QLabel(RESULTS_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.percentage_label = QLabel("", self)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percentage_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.time_label)

        button_row = QHBoxLayout()
        self.review_button = QPushButton(REVIEW_BUTTON, self)
        self.review_button.clicked.connect(self.on_review)
        button_row.addWidget(self.review_button)

        self.home_button = QPushButton(HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        button_row.addWidget(self.home_button)
        layout.addLayout(button_row)

    def show_session(self, session: CompletedSession, theme: Theme) -> None:
        timed_out = session.outcome is SessionOutcome.TIMED_OUT
        self.heading_label.setText(RESULTS_TIMED_OUT_HEADING if timed_out else RESULTS_HEADING)

        accent = ColorPalette.BUTTON_PRIMARY_BG.get(theme)
        self.percentage_label.setText(f"{session.percentage}%")
        self.percentage_label.setStyleSheet(f"font-size: 48pt; font-weight: bold; color: {accent};")
        self.score_label.setText(
            RESULTS_SCORE_TEMPLATE.format(score=session.score or 0, total=session.total_questions)
        )
        self.time_label.setText(RESULTS_TIME_TEMPLATE.format(seconds=session.time_taken_seconds))

        self.review_button.setStyleSheet(Styles.get_filled_button_style(accent))
        self.home_button.setStyleSheet(
            Styles.get_filled_button_style(ColorPalette.TEXT_SECONDARY.get(theme))
        )
