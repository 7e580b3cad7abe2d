"""
Per-orchestrator state: in-memory word lists, the error log, the persisted cache.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from .cache import CorpusCache


class WordStore:
    """
    Each slot (source id) is replaced atomically under the store lock.
    Cold fetches for the same source id are serialised with a per-source lock so
    concurrent requests don't hit the network twice for one list.
    """

    def __init__(self, persisted: CorpusCache | None = None) -> None:
        self.persisted = persisted
        self._lock = threading.Lock()
        self._words: dict[str, list[str]] = {}
        self._errors: dict[str, str] = {}
        self._source_locks: dict[str, threading.Lock] = {}

    @contextmanager
    def source_lock(self, source_id: str) -> Iterator[None]:
        with self._lock:
            lock = self._source_locks.setdefault(source_id, threading.Lock())
        with lock:
            yield

    def get_words(self, source_id: str) -> list[str] | None:
        with self._lock:
            return self._words.get(source_id)

    def set_words(self, source_id: str, words: list[str]) -> None:
        with self._lock:
            self._words[source_id] = words

    def forget(self, source_id: str) -> None:
        with self._lock:
            self._words.pop(source_id, None)

    def record_error(self, source_id: str, message: str) -> None:
        with self._lock:
            self._errors[source_id] = message

    def clear_error(self, source_id: str) -> None:
        with self._lock:
            self._errors.pop(source_id, None)

    def error_log(self) -> dict[str, str]:
        with self._lock:
            return dict(self._errors)

    def word_cache(self) -> dict[str, list[str]]:
        with self._lock:
            return {k: list(v) for k, v in self._words.items()}
