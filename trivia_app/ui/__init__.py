"""Qt UI components for the trivia application."""

from .dialog_helpers import (
    confirm_clear_history,
    confirm_leave_quiz,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow

__all__ = [
    "MainWindow",
    "confirm_clear_history",
    "confirm_leave_quiz",
    "show_error",
    "show_info",
    "show_warning",
]
