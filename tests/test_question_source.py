import json

from trivia_app.constants.storage_constants import STORAGE_KEY_QUESTIONS
from trivia_app.core.default_questions import default_question_bank
from trivia_app.core.models import Difficulty
from trivia_app.core.question_bank import parse_question_bank
from trivia_app.core.services.question_source import QuestionSource

from conftest import question_json


def _write_bundle(tmp_path, document):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_bundled_bank_is_used_without_imports(store, tmp_path):
    bundle = _write_bundle(tmp_path, {"python": {"easy": [question_json(1), question_json(2)]}})
    source = QuestionSource(store, bundle_path=bundle)

    assert source.topics() == ["python"]
    assert [q.id for q in source.load("python", Difficulty.EASY)] == [1, 2]


def test_missing_bundle_falls_back_to_builtin_table(store, tmp_path):
    source = QuestionSource(store, bundle_path=tmp_path / "missing.json")

    assert source.topics() == sorted(default_question_bank())
    assert len(source.load("nodejs", Difficulty.EASY)) == 3


def test_malformed_bundle_falls_back_to_builtin_table(store, tmp_path):
    bundle = tmp_path / "questions.json"
    bundle.write_text("[[[", encoding="utf-8")
    source = QuestionSource(store, bundle_path=bundle)

    assert "laravel" in source.topics()


def test_missing_bucket_uses_builtin_entry(store, tmp_path):
    bundle = _write_bundle(tmp_path, {"nodejs": {"easy": [question_json(1)]}})
    source = QuestionSource(store, bundle_path=bundle)

    assert len(source.load("nodejs", Difficulty.HARD)) == 2
    assert source.load("python", Difficulty.HARD) == []


def test_unknown_bucket_is_empty(store, tmp_path):
    source = QuestionSource(store, bundle_path=tmp_path / "missing.json", fallback={})
    assert source.load("nodejs", Difficulty.EASY) == []


def test_import_merges_and_persists(store, tmp_path):
    bundle = _write_bundle(tmp_path, {"nodejs": {"easy": [question_json(1)]}, "laravel": {"easy": [question_json(2)]}})
    source = QuestionSource(store, bundle_path=bundle)

    source.import_bank(parse_question_bank({"nodejs": {"medium": [question_json(7)]}}))

    assert store.get(STORAGE_KEY_QUESTIONS) is not None
    reloaded = QuestionSource(store, bundle_path=bundle, fallback={})
    assert reloaded.topics() == ["laravel", "nodejs"]
    assert [q.id for q in reloaded.load("nodejs", Difficulty.MEDIUM)] == [7]
    assert reloaded.load("nodejs", Difficulty.EASY) == []


def test_invalid_stored_bank_is_ignored(store, tmp_path):
    bundle = _write_bundle(tmp_path, {"python": {"easy": [question_json(1)]}})
    store.set(STORAGE_KEY_QUESTIONS, {"python": {"impossible": []}})

    assert QuestionSource(store, bundle_path=bundle).topics() == ["python"]


def test_reset_forgets_imports(store, tmp_path):
    bundle = _write_bundle(tmp_path, {"python": {"easy": [question_json(1)]}})
    source = QuestionSource(store, bundle_path=bundle)
    source.import_bank(parse_question_bank({"go": {"easy": [question_json(5)]}}))

    source.reset()

    assert source.topics() == ["python"]
