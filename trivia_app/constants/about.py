"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.2"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a desktop trivia quiz built with Qt. Pick a topic and a difficulty, "
    "answer multiple-choice questions against the clock, and follow your accuracy over time. "
    "Everything is stored locally on this computer."
)

HELP_TEXT = (
    "Log in with any name, choose a topic and a difficulty, then answer before the timer runs out. "
    "Each answer is revealed for a moment before the next question appears.\n\n"
    "Question banks can be imported from a JSON file shaped like:\n\n"
    '{"topic": {"easy": [{"id": 1, "question": "...", "options": ["a", "b", "c", "d"], '
    '"answer": "b", "explanation": "..."}]}}\n\n'
    "Imported topics replace topics with the same name. "
    "Use Export Questions to save the full bank (built-in plus imported questions)."
)
