"""Component for choosing a difficulty and viewing per-difficulty analytics."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    ANALYTICS_TITLE_TEMPLATE,
    BACK_BUTTON,
    DIFFICULTY_HEADING,
    DIFFICULTY_TITLE_TEMPLATE,
    OVERALL_ACCURACY_LABEL,
)
from trivia_app.core.models import Difficulty
from trivia_app.core.trivia_manager import TriviaManager
from trivia_app.styling.color_palette import ColorPalette, Theme, ThemeColors
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.topic_panel import topic_title

_DIFFICULTY_COLORS: dict[Difficulty, ThemeColors] = {
    Difficulty.EASY: ColorPalette.DIFFICULTY_EASY,
    Difficulty.MEDIUM: ColorPalette.DIFFICULTY_MEDIUM,
    Difficulty.HARD: ColorPalette.DIFFICULTY_HARD,
}


class DifficultyPanel(QWidget):
    """UI component with one button per difficulty and the topic's analytics."""

    def __init__(
        self,
        trivia_manager: TriviaManager,
        on_start_quiz: Callable[[Difficulty], None],
        on_back: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.trivia_manager = trivia_manager
        self.on_start_quiz = on_start_quiz
        self.on_back = on_back
        self._difficulty_buttons: dict[Difficulty, QPushButton] = {}
        self._accuracy_labels: dict[Difficulty, QLabel] = {}
        self._time_labels: dict[Difficulty, QLabel] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label)
        header_row.addStretch()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header_row.addWidget(self.back_button)
        layout.addLayout(header_row)

        heading = QLabel(DIFFICULTY_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)

        button_row = QHBoxLayout()
        for difficulty in Difficulty:
            button = QPushButton(difficulty.label, self)
            button.clicked.connect(lambda _checked=False, level=difficulty: self.on_start_quiz(level))
            button_row.addWidget(button)
            self._difficulty_buttons[difficulty] = button
        layout.addLayout(button_row)

        self.analytics_label = QLabel("", self)
        self.analytics_label.setStyleSheet("font-weight: bold; margin-top: 12px;")
        layout.addWidget(self.analytics_label)

        layout.addWidget(QLabel(OVERALL_ACCURACY_LABEL, self))

        grid = QGridLayout()
        for column, difficulty in enumerate(Difficulty):
            name_label = QLabel(difficulty.label, self)
            name_label.setAlignment(Qt.AlignCenter)
            grid.addWidget(name_label, 0, column)

            accuracy_label = QLabel("0%", self)
            accuracy_label.setAlignment(Qt.AlignCenter)
            grid.addWidget(accuracy_label, 1, column)
            self._accuracy_labels[difficulty] = accuracy_label

            time_label = QLabel("", self)
            time_label.setAlignment(Qt.AlignCenter)
            grid.addWidget(time_label, 2, column)
            self._time_labels[difficulty] = time_label
        layout.addLayout(grid)
        layout.addStretch()

    def refresh(self, topic: str, theme: Theme) -> None:
        title = topic_title(topic)
        self.title_label.setText(DIFFICULTY_TITLE_TEMPLATE.format(topic=title))
        self.analytics_label.setText(ANALYTICS_TITLE_TEMPLATE.format(topic=title))

        tile_style = Styles.get_stat_tile_style(theme)
        for difficulty in Difficulty:
            color = _DIFFICULTY_COLORS[difficulty].get(theme)
            self._difficulty_buttons[difficulty].setStyleSheet(Styles.get_filled_button_style(color))

            summary = self.trivia_manager.get_bucket_summary(topic, difficulty)
            accuracy_label = self._accuracy_labels[difficulty]
            accuracy_label.setText(f"{summary.accuracy:.0f}%")
            accuracy_label.setStyleSheet(tile_style + f" color: {color}; font-size: 16pt; font-weight: bold;")
            self._time_labels[difficulty].setText(f"avg {summary.avg_time:.0f}s")
