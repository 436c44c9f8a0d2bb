"""Message boxes shared by the trivia screens."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def _ask(parent: QWidget, title: str, question: str) -> bool:
    """Yes/No question defaulting to No; True when the user picked Yes."""
    reply = QMessageBox.question(
        parent,
        title,
        question,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def confirm_leave_quiz(parent: QWidget) -> bool:
    return _ask(
        parent,
        "Leave Quiz",
        "Leaving now discards this quiz without recording a result. Continue?",
    )


def confirm_clear_history(parent: QWidget) -> bool:
    return _ask(
        parent,
        "Clear History",
        "This deletes every recorded quiz result and resets your accuracy. Continue?",
    )


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Informational box; long texts such as the help page wrap inside it."""
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Information)
    box.setWindowTitle(title)
    box.setText(message)
    box.setStandardButtons(QMessageBox.Ok)
    box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
