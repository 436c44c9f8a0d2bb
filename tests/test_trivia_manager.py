import json

import pytest

from trivia_app.constants.storage_constants import STORAGE_KEY_SETTINGS, STORAGE_KEY_THEME, STORAGE_KEY_USER
from trivia_app.core.models import Difficulty
from trivia_app.core.question_bank_importer import QuestionBankImportError
from trivia_app.core.screens import LoginScreen, TopicSelectionScreen
from trivia_app.core.services.question_source import QuestionSource
from trivia_app.core.services.quiz_session import QuizSession
from trivia_app.core.settings import QuizSettings
from trivia_app.core.storage import MemoryStore, StorageError
from trivia_app.core.trivia_manager import TriviaManager
from trivia_app.styling.color_palette import Theme

from conftest import question_json


@pytest.fixture
def manager(store, tmp_path, wall_clock):
    bundle = tmp_path / "bundle.json"
    bundle.write_text(
        json.dumps({"nodejs": {"easy": [question_json(1), question_json(2)]}, "laravel": {"easy": [question_json(3)]}}),
        encoding="utf-8",
    )
    source = QuestionSource(store, bundle_path=bundle, fallback={})
    return TriviaManager(store, question_source=source, wall_clock=wall_clock)


def test_login_is_remembered(manager, store):
    assert isinstance(manager.initial_screen(), LoginScreen)

    assert manager.login("  Ada  ") == "Ada"

    assert store.get(STORAGE_KEY_USER) == "Ada"
    assert manager.initial_screen() == TopicSelectionScreen(user="Ada")


def test_blank_login_is_rejected(manager):
    with pytest.raises(ValueError, match="Please enter a name"):
        manager.login("   ")
    assert manager.get_user() is None


def test_logout_forgets_user_only(manager, store):
    manager.login("Ada")
    manager.set_theme(Theme.DARK)
    manager.logout()

    assert manager.get_user() is None
    assert store.get(STORAGE_KEY_THEME) == "dark"


def test_theme_defaults_to_light_and_toggles(manager, store):
    assert manager.get_theme() is Theme.LIGHT
    assert manager.toggle_theme() is Theme.DARK
    assert manager.get_theme() is Theme.DARK
    assert manager.toggle_theme() is Theme.LIGHT

    store.set(STORAGE_KEY_THEME, "sepia")
    assert manager.get_theme() is Theme.LIGHT


def test_settings_round_trip(manager, store):
    assert manager.get_settings() == QuizSettings()

    manager.update_settings(QuizSettings(time_budget_seconds=120, reveal_delay_ms=500, font_size=18))

    assert store.get(STORAGE_KEY_SETTINGS) == {"timeBudgetSeconds": 120, "revealDelayMs": 500, "fontSize": 18}
    assert manager.get_settings().time_budget_seconds == 120


def test_completed_session_is_recorded(manager, clock, rng):
    completions = []
    session = QuizSession(
        "nodejs",
        Difficulty.EASY,
        manager.load_questions("nodejs", Difficulty.EASY),
        time_budget_seconds=60,
        on_complete=completions.append,
        clock=clock,
        rng=rng,
    )
    while not session.is_completed:
        clock.advance(4)
        session.submit_answer("b")
        session.advance()

    entry = manager.record_completed_session(completions[0])

    assert entry.score == 2
    assert entry.time_taken_seconds == 8
    assert manager.get_history() == [entry]
    summary = manager.get_bucket_summary("nodejs", Difficulty.EASY)
    assert summary.accuracy == pytest.approx(100.0)
    assert summary.avg_time == pytest.approx(8.0)
    assert manager.get_bucket_summary("laravel", Difficulty.HARD).accuracy == 0
    assert manager.get_topic_accuracy("nodejs") == pytest.approx(100.0)

    manager.clear_history()
    assert manager.get_history() == []


def test_unavailable_session_is_not_recorded(manager, clock):
    completions = []
    QuizSession(
        "nodejs", Difficulty.HARD, [], time_budget_seconds=60, on_complete=completions.append, clock=clock
    ).start()

    with pytest.raises(ValueError):
        manager.record_completed_session(completions[0])
    assert manager.get_history() == []


def test_summary_covers_every_topic(manager):
    summary = manager.get_summary()
    assert ("laravel", Difficulty.MEDIUM) in summary
    assert ("nodejs", Difficulty.HARD) in summary


def test_import_and_export(manager, tmp_path):
    source_file = tmp_path / "import.json"
    source_file.write_text(json.dumps({"nodejs": {"hard": [question_json(9)]}}), encoding="utf-8")

    imported = manager.import_question_bank(source_file)

    assert imported.question_count == 1
    assert manager.get_topics() == ["laravel", "nodejs"]
    assert [q.id for q in manager.load_questions("nodejs", Difficulty.HARD)] == [9]

    export_file = tmp_path / "out" / "questions.json"
    manager.export_question_bank(export_file)
    exported = json.loads(export_file.read_text(encoding="utf-8"))
    assert exported["nodejs"]["hard"][0]["id"] == 9
    assert exported["laravel"]["easy"][0]["id"] == 3


def test_rejected_import_changes_nothing(manager, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"nodejs": {"easy": [', encoding="utf-8")

    with pytest.raises(QuestionBankImportError):
        manager.import_question_bank(broken)

    assert [q.id for q in manager.load_questions("nodejs", Difficulty.EASY)] == [1, 2]


class _ReadOnlyStore(MemoryStore):
    def set(self, key, value):
        raise StorageError(f"Could not write '{key}'")


def test_settings_write_failure_surfaces_as_storage_error(tmp_path):
    manager = TriviaManager(_ReadOnlyStore(), question_source=QuestionSource(MemoryStore(), bundle_path=tmp_path / "none.json"))

    with pytest.raises(StorageError):
        manager.update_settings(QuizSettings(time_budget_seconds=60))
    assert manager.get_settings() == QuizSettings()
