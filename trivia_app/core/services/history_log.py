"""Service for the append-only log of completed sessions."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from trivia_app.constants.storage_constants import STORAGE_KEY_ANALYTICS
from trivia_app.core.models import BucketSummary, HistoryEntry
from trivia_app.core.schemas import AnalyticsDocument, HistoryRecord
from trivia_app.core.services.analytics import BucketKey, summarize, topic_accuracy
from trivia_app.core.storage import KeyValueStore

logger = logging.getLogger(__name__)


class HistoryLog:
    """Reads and appends history entries in the analytics store.

    Stored records are never rewritten: ``append`` adds to the raw list, so
    records this version cannot read survive untouched.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def entries(self) -> list[HistoryEntry]:
        entries: list[HistoryEntry] = []
        for index, item in enumerate(self._raw_history()):
            if not isinstance(item, dict):
                logger.warning("Skipping history entry %d: not an object", index)
                continue
            try:
                entries.append(HistoryRecord.model_validate(item).to_entry())
            except (ValidationError, ValueError) as exc:
                logger.warning("Skipping history entry %d: %s", index, exc)
        return entries

    def append(self, entry: HistoryEntry) -> None:
        raw_history = self._raw_history()
        raw_history.append(HistoryRecord.from_entry(entry).to_json())
        self._store.set(STORAGE_KEY_ANALYTICS, {"history": raw_history})

    def clear(self) -> None:
        self._store.remove(STORAGE_KEY_ANALYTICS)

    def summary(self, topics: Iterable[str] = ()) -> dict[BucketKey, BucketSummary]:
        return summarize(self.entries(), topics)

    def topic_accuracy(self, topic: str) -> float:
        return topic_accuracy(self.entries(), topic)

    def _raw_history(self) -> list[Any]:
        # An unusable document reads as empty and is replaced on the next append.
        raw = self._store.get(STORAGE_KEY_ANALYTICS)
        if raw is None:
            return []
        try:
            document = AnalyticsDocument.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Ignoring malformed analytics store: %s", exc.errors()[:1])
            return []
        return list(document.history)
