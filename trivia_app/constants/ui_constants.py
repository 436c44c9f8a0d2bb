"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"
HEADER_TITLE: str = "Trivia Quiz"

LOGIN_WELCOME: str = "Welcome to the Trivia Quiz"
LOGIN_PROMPT: str = "Enter your username:"
LOGIN_PLACEHOLDER: str = "Your name"
LOGIN_BUTTON: str = "Start"

TOPIC_HEADING: str = "Select a Topic"
TOPIC_GREETING_TEMPLATE: str = "Hello, {user}!"
TOPIC_EMPTY_STATE: str = "No topics available. Import a question file to get started."
LOGOUT_BUTTON: str = "Logout"
IMPORT_BUTTON: str = "Import Questions"
EXPORT_BUTTON: str = "Export Questions"
CLEAR_HISTORY_BUTTON: str = "Clear History"
DATA_HEADING: str = "Data & Analytics"
OVERALL_ACCURACY_LABEL: str = "Overall Accuracy:"

DIFFICULTY_HEADING: str = "Select a Difficulty"
DIFFICULTY_TITLE_TEMPLATE: str = "{topic} Quiz"
ANALYTICS_TITLE_TEMPLATE: str = "Analytics for {topic}"
BACK_BUTTON: str = "Back"

QUIZ_COUNTER_TEMPLATE: str = "Question {current} / {total}"
QUIZ_LEAVE_BUTTON: str = "Leave Quiz"

RESULTS_HEADING: str = "Quiz Complete!"
RESULTS_TIMED_OUT_HEADING: str = "Time's Up!"
RESULTS_SCORE_TEMPLATE: str = "Your Score: {score} / {total}"
RESULTS_TIME_TEMPLATE: str = "Time Taken: {seconds} seconds"
REVIEW_BUTTON: str = "Review Answers"
HOME_BUTTON: str = "Go Home"
REVIEW_HEADING: str = "Review Answers"

THEME_BUTTON_TO_DARK: str = "Dark Mode"
THEME_BUTTON_TO_LIGHT: str = "Light Mode"

IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.json);;All files (*.*)"
EXPORT_DIALOG_TITLE: str = "Export questions"
EXPORT_FILE_FILTER: str = "Question files (*.json);;All files (*.*)"

NO_QUESTIONS_MESSAGE: str = "No questions available for this difficulty."
IMPORT_SUCCESS_MESSAGE: str = "Questions imported successfully!"
