"""Qt main window driving the login, topic, difficulty, quiz, results and review screens."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_app.constants.storage_constants import EXPORT_FILE_NAME
from trivia_app.constants.ui_constants import (
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    HEADER_TITLE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    IMPORT_SUCCESS_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    THEME_BUTTON_TO_DARK,
    THEME_BUTTON_TO_LIGHT,
    WINDOW_TITLE,
)
from trivia_app.core import screens
from trivia_app.core.models import Difficulty
from trivia_app.core.question_bank_importer import QuestionBankImportError
from trivia_app.core.screens import (
    DifficultySelectionScreen,
    LoginScreen,
    QuizScreen,
    ResultsScreen,
    ReviewScreen,
    Screen,
    TopicSelectionScreen,
)
from trivia_app.core.services.quiz_session import CompletedSession
from trivia_app.core.storage import StorageError
from trivia_app.core.trivia_manager import TriviaManager
from trivia_app.styling.color_palette import Theme
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.difficulty_panel import DifficultyPanel
from trivia_app.ui.components.login_panel import LoginPanel
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.components.results_panel import ResultsPanel
from trivia_app.ui.components.review_panel import ReviewPanel
from trivia_app.ui.components.topic_panel import TopicPanel
from trivia_app.ui.dialog_helpers import (
    confirm_clear_history,
    confirm_leave_quiz,
    show_error,
    show_info,
    show_warning,
)
from trivia_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main Qt window; exactly one screen is shown at a time."""

    def __init__(self, trivia_manager: TriviaManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 700)

        self.trivia_manager = trivia_manager
        self._theme = trivia_manager.get_theme()
        self._screen: Screen = LoginScreen()
        self._last_export_path: Path | None = None

        self._build_ui()
        self._apply_styles()
        self._show_screen(self.trivia_manager.initial_screen())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.screen_stack = QStackedWidget(self)

        self.login_panel = LoginPanel(on_login=self._handle_login, parent=self)
        self.topic_panel = TopicPanel(
            self.trivia_manager,
            on_select_topic=self._handle_select_topic,
            on_logout=self._handle_logout,
            on_import=self._handle_import_questions,
            on_export=self._handle_export_questions,
            on_clear_history=self._handle_clear_history,
            parent=self,
        )
        self.difficulty_panel = DifficultyPanel(
            self.trivia_manager,
            on_start_quiz=self._handle_start_quiz,
            on_back=self._handle_back_to_topics,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            on_complete=self._handle_quiz_complete,
            on_leave=self._handle_leave_quiz,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_review=self._handle_review,
            on_home=self._handle_go_home,
            parent=self,
        )
        self.review_panel = ReviewPanel(on_back=self._handle_back_to_results, parent=self)

        for panel in (
            self.login_panel,
            self.topic_panel,
            self.difficulty_panel,
            self.quiz_panel,
            self.results_panel,
            self.review_panel,
        ):
            self.screen_stack.addWidget(panel)

        root_layout.addWidget(self.screen_stack)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        title_label = QLabel(HEADER_TITLE, self)
        title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(title_label)
        header_row.addStretch()

        self.theme_button = QPushButton("", self)
        self.theme_button.clicked.connect(self._handle_toggle_theme)
        header_row.addWidget(self.theme_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        header_row.addWidget(self.settings_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        layout.addLayout(header_row)

    # --- Screen dispatch ---

    def _show_screen(self, screen: Screen) -> None:
        if isinstance(self._screen, QuizScreen) and not isinstance(screen, QuizScreen):
            self.quiz_panel.stop_session()
        self._screen = screen

        if isinstance(screen, LoginScreen):
            self.login_panel.reset_state()
            self.screen_stack.setCurrentWidget(self.login_panel)
        elif isinstance(screen, TopicSelectionScreen):
            self.topic_panel.refresh(screen.user, self._theme)
            self.screen_stack.setCurrentWidget(self.topic_panel)
        elif isinstance(screen, DifficultySelectionScreen):
            self.difficulty_panel.refresh(screen.topic, self._theme)
            self.screen_stack.setCurrentWidget(self.difficulty_panel)
        elif isinstance(screen, QuizScreen):
            self.screen_stack.setCurrentWidget(self.quiz_panel)
        elif isinstance(screen, ResultsScreen):
            self.results_panel.show_session(screen.session, self._theme)
            self.screen_stack.setCurrentWidget(self.results_panel)
        elif isinstance(screen, ReviewScreen):
            font_size = self.trivia_manager.get_settings().font_size
            self.review_panel.show_session(screen.session, self._theme, font_size)
            self.screen_stack.setCurrentWidget(self.review_panel)

        self.settings_button.setEnabled(not isinstance(screen, QuizScreen))
        logger.debug("Showing %s", type(screen).__name__)

    # --- Navigation handlers ---

    def _handle_login(self, display_name: str) -> None:
        try:
            user = self.trivia_manager.login(display_name)
        except ValueError as exc:
            show_warning(self, "Login", str(exc))
            return
        except StorageError as exc:
            show_error(self, "Login failed", str(exc))
            return
        self._show_screen(screens.after_login(user))

    def _handle_logout(self) -> None:
        self.trivia_manager.logout()
        self._show_screen(screens.after_logout())

    def _handle_select_topic(self, topic: str) -> None:
        if isinstance(self._screen, TopicSelectionScreen):
            self._show_screen(screens.select_topic(self._screen, topic))

    def _handle_back_to_topics(self) -> None:
        if isinstance(self._screen, DifficultySelectionScreen):
            self._show_screen(screens.back_to_topics(self._screen))

    def _handle_start_quiz(self, difficulty: Difficulty) -> None:
        if not isinstance(self._screen, DifficultySelectionScreen):
            return
        quiz_screen = screens.start_quiz(self._screen, difficulty)
        questions = self.trivia_manager.load_questions(quiz_screen.topic, difficulty)
        self._show_screen(quiz_screen)
        # An empty question list completes synchronously through _handle_quiz_complete.
        self.quiz_panel.start_session(
            quiz_screen.topic,
            difficulty,
            questions,
            self.trivia_manager.get_settings(),
            self._theme,
        )

    def _handle_quiz_complete(self, completed: CompletedSession) -> None:
        if not isinstance(self._screen, QuizScreen):
            return
        if completed.is_unavailable:
            show_warning(self, "No questions", NO_QUESTIONS_MESSAGE)
        else:
            try:
                self.trivia_manager.record_completed_session(completed)
            except StorageError as exc:
                show_error(self, "History not saved", str(exc))
        self._show_screen(screens.after_completion(self._screen, completed))

    def _handle_leave_quiz(self) -> None:
        if isinstance(self._screen, QuizScreen):
            self._show_screen(
                DifficultySelectionScreen(user=self._screen.user, topic=self._screen.topic)
            )

    def _handle_review(self) -> None:
        if isinstance(self._screen, ResultsScreen):
            self._show_screen(screens.review(self._screen))

    def _handle_back_to_results(self) -> None:
        if isinstance(self._screen, ReviewScreen):
            self._show_screen(screens.back_to_results(self._screen))

    def _handle_go_home(self) -> None:
        if isinstance(self._screen, (ResultsScreen, ReviewScreen)):
            self._show_screen(screens.go_home(self._screen))

    # --- Data handlers ---

    def _handle_import_questions(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = self.trivia_manager.import_question_bank(Path(file_path))
        except (OSError, QuestionBankImportError, StorageError) as exc:
            show_error(self, "Import failed", str(exc))
            return

        show_info(
            self,
            "Questions imported",
            f"{IMPORT_SUCCESS_MESSAGE}\n{imported.question_count} questions loaded.",
        )
        self._show_screen(self._screen)

    def _handle_export_questions(self) -> None:
        default_path = self._last_export_path or (Path.home() / EXPORT_FILE_NAME)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            EXPORT_DIALOG_TITLE,
            str(default_path),
            EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            self.trivia_manager.export_question_bank(Path(file_path))
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return

        self._last_export_path = Path(file_path)
        show_info(self, "Questions saved", f"Questions exported to {file_path}.")

    def _handle_clear_history(self) -> None:
        if not confirm_clear_history(self):
            return
        try:
            self.trivia_manager.clear_history()
        except StorageError as exc:
            show_error(self, "Clear failed", str(exc))
            return
        self._show_screen(self._screen)

    # --- Header handlers ---

    def _handle_toggle_theme(self) -> None:
        self._theme = self.trivia_manager.toggle_theme()
        self._apply_styles()
        if not isinstance(self._screen, QuizScreen):
            self._show_screen(self._screen)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.trivia_manager.get_settings())
        if dialog.exec():
            try:
                self.trivia_manager.update_settings(dialog.get_settings())
            except StorageError as exc:
                show_error(self, "Settings not saved", str(exc))

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.theme_button.setText(
            THEME_BUTTON_TO_LIGHT if self._theme is Theme.DARK else THEME_BUTTON_TO_DARK
        )

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        if self.quiz_panel.has_running_session() and not confirm_leave_quiz(self):
            event.ignore()
            return
        self.quiz_panel.stop_session()
        super().closeEvent(event)
