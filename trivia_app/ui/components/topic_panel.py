"""Component for choosing a topic, managing question files and viewing overall accuracy."""

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
    CLEAR_HISTORY_BUTTON,
    DATA_HEADING,
    EXPORT_BUTTON,
    IMPORT_BUTTON,
    LOGOUT_BUTTON,
    OVERALL_ACCURACY_LABEL,
    TOPIC_EMPTY_STATE,
    TOPIC_GREETING_TEMPLATE,
    TOPIC_HEADING,
)
from trivia_app.core.trivia_manager import TriviaManager
from trivia_app.styling.color_palette import ColorPalette, Theme
from trivia_app.styling.styles import Styles


def topic_title(topic: str) -> str:
    return topic[:1].upper() + topic[1:]


class TopicPanel(QWidget):
    """UI component listing topics with import/export controls."""

    def __init__(
        self,
        trivia_manager: TriviaManager,
        on_select_topic: Callable[[str], None],
        on_logout: Callable[[], None],
        on_import: Callable[[], None],
        on_export: Callable[[], None],
        on_clear_history: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.trivia_manager = trivia_manager
        self.on_select_topic = on_select_topic
        self.on_logout = on_logout
        self.on_import = on_import
        self.on_export = on_export
        self.on_clear_history = on_clear_history
        self._theme = Theme.LIGHT
        self._topic_buttons: list[QPushButton] = []
        self._accuracy_tiles: list[QLabel] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.greeting_label = QLabel("", self)
        self.greeting_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.greeting_label)
        header_row.addStretch()
        self.logout_button = QPushButton(LOGOUT_BUTTON, self)
        self.logout_button.clicked.connect(self.on_logout)
        header_row.addWidget(self.logout_button)
        layout.addLayout(header_row)

        heading = QLabel(TOPIC_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)

        self.topic_layout = QVBoxLayout()
        layout.addLayout(self.topic_layout)

        self.empty_label = QLabel(TOPIC_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

        data_heading = QLabel(DATA_HEADING, self)
        data_heading.setStyleSheet("font-weight: bold; margin-top: 12px;")
        layout.addWidget(data_heading)

        data_row = QHBoxLayout()
        self.import_button = QPushButton(IMPORT_BUTTON, self)
        self.import_button.clicked.connect(self.on_import)
        data_row.addWidget(self.import_button)

        self.export_button = QPushButton(EXPORT_BUTTON, self)
        self.export_button.clicked.connect(self.on_export)
        data_row.addWidget(self.export_button)

        self.clear_history_button = QPushButton(CLEAR_HISTORY_BUTTON, self)
        self.clear_history_button.clicked.connect(self.on_clear_history)
        data_row.addWidget(self.clear_history_button)
        layout.addLayout(data_row)

        accuracy_label = QLabel(OVERALL_ACCURACY_LABEL, self)
        layout.addWidget(accuracy_label)

        self.accuracy_grid = QGridLayout()
        layout.addLayout(self.accuracy_grid)
        layout.addStretch()

    def refresh(self, user: str, theme: Theme) -> None:
        """Rebuild topic buttons and accuracy tiles from the current bank and history."""
        self._theme = theme
        self.greeting_label.setText(TOPIC_GREETING_TEMPLATE.format(user=user))
        self.logout_button.setStyleSheet(
            Styles.get_filled_button_style(ColorPalette.LOGOUT_BG.get(theme), font_size=10)
        )

        topics = self.trivia_manager.get_topics()
        self._rebuild_topic_buttons(topics)
        self._rebuild_accuracy_tiles(topics)
        self.empty_label.setVisible(not topics)
        self.export_button.setEnabled(bool(topics))

    def _rebuild_topic_buttons(self, topics: list[str]) -> None:
        for button in self._topic_buttons:
            self.topic_layout.removeWidget(button)
            button.deleteLater()
        self._topic_buttons = []

        style = Styles.get_filled_button_style(ColorPalette.BUTTON_PRIMARY_BG.get(self._theme))
        for topic in topics:
            button = QPushButton(topic_title(topic), self)
            button.setStyleSheet(style)
            button.clicked.connect(lambda _checked=False, name=topic: self.on_select_topic(name))
            self.topic_layout.addWidget(button)
            self._topic_buttons.append(button)

    def _rebuild_accuracy_tiles(self, topics: list[str]) -> None:
        for tile in self._accuracy_tiles:
            self.accuracy_grid.removeWidget(tile)
            tile.deleteLater()
        self._accuracy_tiles = []

        tile_style = Styles.get_stat_tile_style(self._theme)
        for index, topic in enumerate(topics):
            accuracy = self.trivia_manager.get_topic_accuracy(topic)
            tile = QLabel(f"{topic.upper()}\n{accuracy:.0f}%", self)
            tile.setAlignment(Qt.AlignCenter)
            tile.setStyleSheet(tile_style + " font-weight: bold;")
            self.accuracy_grid.addWidget(tile, index // 3, index % 3)
            self._accuracy_tiles.append(tile)
