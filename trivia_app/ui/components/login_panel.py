"""Component for the login form."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_PLACEHOLDER,
    LOGIN_PROMPT,
    LOGIN_WELCOME,
)
from trivia_app.styling.styles import Styles


class LoginPanel(QWidget):
    """Asks for a display name before anything else."""

    def __init__(self, on_login: Callable[[str], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_login = on_login
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.welcome_label = QLabel(LOGIN_WELCOME, self)
        self.welcome_label.setAlignment(Qt.AlignCenter)
        self.welcome_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.welcome_label)

        self.prompt_label = QLabel(LOGIN_PROMPT, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.prompt_label)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(LOGIN_PLACEHOLDER)
        self.name_input.setMaximumWidth(320)
        self.name_input.returnPressed.connect(self._handle_submit)
        self.name_input.textChanged.connect(self._update_button_state)
        layout.addWidget(self.name_input, alignment=Qt.AlignCenter)

        self.start_button = QPushButton(LOGIN_BUTTON, self)
        self.start_button.setMaximumWidth(320)
        self.start_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        self._update_button_state()

    def _update_button_state(self) -> None:
        self.start_button.setEnabled(bool(self.name_input.text().strip()))

    def _handle_submit(self) -> None:
        username = self.name_input.text().strip()
        if not username:
            return
        self.on_login(username)

    def reset_state(self) -> None:
        self.name_input.clear()
        self.name_input.setFocus()
