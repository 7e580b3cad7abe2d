"""
Persisted word-list cache (DuckDB): key -> {data, timestamp}.
Best-effort: a missing, corrupted or stale entry reads as a miss and the caller refetches.
"""
from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from pathlib import Path

import duckdb

from . import config
from .parsing import WORD_RE

logger = logging.getLogger(__name__)


def get_connection(path: str | Path | None = None) -> duckdb.DuckDBPyConnection:
    path = str(path or config.cache_db_path())
    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(path)


def init_db(conn: duckdb.DuckDBPyConnection) -> None:
    cur = conn.cursor()
    # data is the JSON-encoded word list; fetched_at is epoch millis
    cur.execute("""
        CREATE TABLE IF NOT EXISTS wordlist_cache (
            cache_key VARCHAR PRIMARY KEY,
            url VARCHAR,
            data VARCHAR NOT NULL,
            fetched_at BIGINT NOT NULL
        )
    """)
    conn.commit()


def cache_key(url: str) -> str:
    """wordlist_<last path segment>_<short url hash>."""
    tail = url.rstrip("/").split("?")[0].split("/")[-1] or "index"
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:10]
    return f"wordlist_{tail}_{digest}"


def now_ms() -> int:
    return int(time.time() * 1000)


class CorpusCache:
    """One DuckDB connection shared by all fetch threads; access is serialised."""

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        freshness_ms: int | None = None,
        conn: duckdb.DuckDBPyConnection | None = None,
    ) -> None:
        self._conn = conn or get_connection(path)
        self._lock = threading.Lock()
        self.freshness_ms = config.FRESHNESS_MS if freshness_ms is None else freshness_ms
        with self._lock:
            init_db(self._conn)

    def get_entry(self, key: str) -> tuple[list[str], int] | None:
        """(words, fetched_at) regardless of age, or None if missing or unreadable."""
        try:
            with self._lock:
                row = self._conn.execute(
                    "SELECT data, fetched_at FROM wordlist_cache WHERE cache_key = ?", (key,)
                ).fetchone()
        except duckdb.Error as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None
        if not row:
            return None
        try:
            data = json.loads(row[0])
        except (json.JSONDecodeError, TypeError):
            logger.warning("Ignoring corrupted cache entry %s", key)
            return None
        if not isinstance(data, list) or not all(isinstance(w, str) and WORD_RE.match(w) for w in data):
            logger.warning("Ignoring malformed cache entry %s", key)
            return None
        return data, int(row[1])

    def get(self, key: str, *, now: int | None = None) -> list[str] | None:
        """Words for key if the entry is younger than the freshness window."""
        entry = self.get_entry(key)
        if entry is None:
            return None
        words, fetched_at = entry
        age = (now if now is not None else now_ms()) - fetched_at
        if age < 0 or age >= self.freshness_ms:
            logger.debug("Cache entry %s is stale (%d ms old)", key, age)
            return None
        return words

    def put(self, key: str, words: list[str], *, url: str = "", timestamp: int | None = None) -> None:
        ts = timestamp if timestamp is not None else now_ms()
        payload = json.dumps(words)
        try:
            with self._lock:
                self._conn.execute(
                    "INSERT INTO wordlist_cache (cache_key, url, data, fetched_at) VALUES (?, ?, ?, ?)"
                    " ON CONFLICT (cache_key) DO UPDATE SET url = excluded.url, data = excluded.data,"
                    " fetched_at = excluded.fetched_at",
                    (key, url, payload, ts),
                )
        except duckdb.Error as e:
            # Persisting is best-effort; the in-memory copy still serves this process
            logger.warning("Cache write failed for %s: %s", key, e)

    def clear(self) -> None:
        with self._lock:
            self._conn.execute("DELETE FROM wordlist_cache")

    def keys(self) -> list[str]:
        with self._lock:
            rows = self._conn.execute("SELECT cache_key FROM wordlist_cache ORDER BY cache_key").fetchall()
        return [r[0] for r in rows]

    def close(self) -> None:
        with self._lock:
            self._conn.close()
