"""Component listing every question of a finished quiz with the user's answer."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import BACK_BUTTON, REVIEW_HEADING
from trivia_app.core.question_html import render_review_document
from trivia_app.core.services.quiz_session import CompletedSession
from trivia_app.styling.color_palette import Theme
from trivia_app.styling.styles import Styles


class ReviewPanel(QWidget):
    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        heading = QLabel(REVIEW_HEADING, self)
        heading.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(heading)
        header_row.addStretch()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header_row.addWidget(self.back_button)
        layout.addLayout(header_row)

        self.review_view = QWebEngineView(self)
        layout.addWidget(self.review_view, stretch=1)

    def show_session(self, session: CompletedSession, theme: Theme, font_size: int) -> None:
        self.review_view.setHtml(render_review_document(session, font_size, theme))
