import pytest

from trivia_app.core.settings import QuizSettings


def test_defaults():
    settings = QuizSettings()
    assert settings.time_budget_seconds == 300
    assert settings.reveal_delay_ms == 1000


def test_from_json_clamps_and_defaults():
    settings = QuizSettings.from_json({"timeBudgetSeconds": 5, "revealDelayMs": "fast", "fontSize": 99})

    assert settings.time_budget_seconds == 30
    assert settings.reveal_delay_ms == 1000
    assert settings.font_size == 32


def test_from_json_ignores_non_objects():
    assert QuizSettings.from_json(None) == QuizSettings()
    assert QuizSettings.from_json([1, 2]) == QuizSettings()


def test_out_of_range_values_are_rejected():
    with pytest.raises(ValueError):
        QuizSettings(time_budget_seconds=0)
    with pytest.raises(ValueError):
        QuizSettings(reveal_delay_ms=-1)
