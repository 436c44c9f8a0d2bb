"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_BUDGET_SECONDS: int = 300
MIN_TIME_BUDGET_SECONDS: int = 30
MAX_TIME_BUDGET_SECONDS: int = 3600
COUNTDOWN_TICK_INTERVAL_MS: int = 1000
ANSWER_REVEAL_DELAY_MS: int = 1000
TIME_BUDGET_WARNING_WINDOW_SECONDS: int = 30
DEFAULT_TOPIC: str = "general"
