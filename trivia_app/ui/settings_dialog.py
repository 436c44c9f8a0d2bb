"""Settings dialog for configuring quiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
)

from trivia_app.constants.quiz_constants import MAX_TIME_BUDGET_SECONDS, MIN_TIME_BUDGET_SECONDS
from trivia_app.core.settings import MAX_FONT_SIZE, MIN_FONT_SIZE, QuizSettings


class SettingsDialog(QDialog):
    """Dialog for configuring the quiz timer and display."""

    def __init__(self, parent=None, settings: QuizSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or QuizSettings()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Timer settings group
        timer_group = QGroupBox("Timer")
        timer_layout = QVBoxLayout()
        timer_group.setLayout(timer_layout)

        budget_row = QHBoxLayout()
        budget_label = QLabel("Time per quiz:")
        budget_label.setToolTip("Countdown for a whole quiz; the quiz ends when it reaches zero.")
        self.time_budget_spinbox = QSpinBox()
        self.time_budget_spinbox.setRange(MIN_TIME_BUDGET_SECONDS, MAX_TIME_BUDGET_SECONDS)
        self.time_budget_spinbox.setSingleStep(30)
        self.time_budget_spinbox.setValue(self._settings.time_budget_seconds)
        self.time_budget_spinbox.setSuffix(" s")
        budget_row.addWidget(budget_label)
        budget_row.addStretch()
        budget_row.addWidget(self.time_budget_spinbox)
        timer_layout.addLayout(budget_row)

        reveal_row = QHBoxLayout()
        reveal_label = QLabel("Answer reveal delay:")
        reveal_label.setToolTip("How long the correct answer is shown before the next question.")
        self.reveal_delay_spinbox = QSpinBox()
        self.reveal_delay_spinbox.setRange(0, 5000)
        self.reveal_delay_spinbox.setSingleStep(250)
        self.reveal_delay_spinbox.setValue(self._settings.reveal_delay_ms)
        self.reveal_delay_spinbox.setSuffix(" ms")
        reveal_row.addWidget(reveal_label)
        reveal_row.addStretch()
        reveal_row.addWidget(self.reveal_delay_spinbox)
        timer_layout.addLayout(reveal_row)

        layout.addWidget(timer_group)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Question font size:")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(MIN_FONT_SIZE, MAX_FONT_SIZE)
        self.font_spinbox.setValue(self._settings.font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_settings(self) -> QuizSettings:
        """Return the settings chosen in the dialog."""
        return QuizSettings(
            time_budget_seconds=self.time_budget_spinbox.value(),
            reveal_delay_ms=self.reveal_delay_spinbox.value(),
            font_size=self.font_spinbox.value(),
        )
