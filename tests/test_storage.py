import pytest

from trivia_app.core.storage import JsonFileStore, MemoryStore, StorageError


def test_memory_store_round_trip_copies_values():
    store = MemoryStore()
    value = {"history": [1, 2]}
    store.set("quizAnalytics", value)
    value["history"].append(3)

    loaded = store.get("quizAnalytics")
    loaded["history"].append(4)

    assert store.get("quizAnalytics") == {"history": [1, 2]}


def test_memory_store_rejects_non_json_values():
    with pytest.raises(StorageError):
        MemoryStore().set("key", {"bad": object()})


def test_memory_store_remove_missing_key_is_silent():
    store = MemoryStore({"theme": "dark"})
    store.remove("theme")
    store.remove("theme")
    assert store.get("theme") is None
    assert store.keys() == []


def test_file_store_persists_between_instances(tmp_path):
    JsonFileStore(tmp_path).set("quizUser", "Ada")
    assert JsonFileStore(tmp_path).get("quizUser") == "Ada"
    assert (tmp_path / "quizUser.json").exists()


def test_file_store_treats_malformed_file_as_absent(tmp_path):
    (tmp_path / "quizQuestions.json").write_text("{broken", encoding="utf-8")
    assert JsonFileStore(tmp_path).get("quizQuestions") is None


def test_file_store_remove(tmp_path):
    store = JsonFileStore(tmp_path)
    store.set("theme", "dark")
    store.remove("theme")
    store.remove("theme")
    assert store.get("theme") is None


def test_file_store_rejects_path_like_keys(tmp_path):
    with pytest.raises(ValueError):
        JsonFileStore(tmp_path).get("../escape")
