"""
Fetch word lists from their remote hosts.
Cache-first: the in-memory copy, then the persisted DuckDB entry if it is fresh,
and only then one GET per list.
"""
from __future__ import annotations

import logging
import time

import requests

from . import config
from .cache import cache_key
from .errors import (
    BadStatus,
    EmptyResult,
    FetchError,
    FetchTimeout,
    NetworkFailure,
    ParseFailure,
)
from .parsing import extract_entries, normalize_tokens
from .sources import SourceSpec
from .store import WordStore

logger = logging.getLogger(__name__)

# Ask intermediaries for a fresh copy; the persisted cache does our caching
REQUEST_HEADERS = {
    "User-Agent": config.USER_AGENT,
    "Accept": "text/plain,application/json,text/csv;q=0.9,*/*;q=0.8",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}
CHUNK_SIZE = 64 * 1024


def _session() -> requests.Session:
    s = requests.Session()
    s.headers.update(REQUEST_HEADERS)
    return s


def _timed_out(source_id: str, url: str) -> FetchTimeout:
    return FetchTimeout("Request timed out. Please try again later.", source_id=source_id, url=url)


def fetch_one(session, url: str, *, timeout: float, source_id: str = "") -> str:
    """
    GET url and return the decoded body. Raises a FetchError subclass.
    `timeout` bounds the whole fetch, body included, not just each socket read.
    """
    deadline = time.monotonic() + timeout
    try:
        r = session.get(url, timeout=timeout, headers=REQUEST_HEADERS, stream=True)
        try:
            if not 200 <= r.status_code < 300:
                raise BadStatus(r.status_code, r.reason or "", source_id=source_id, url=url)
            chunks = []
            for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise _timed_out(source_id, url)
        finally:
            r.close()
    except requests.Timeout as e:
        raise _timed_out(source_id, url) from e
    except requests.RequestException as e:
        raise NetworkFailure(
            f"Failed to fetch {url}: {e}", source_id=source_id, url=url
        ) from e
    # Stray bytes become U+FFFD and the token holding them is dropped later
    return b"".join(chunks).decode("utf-8-sig", errors="replace")


class CorpusFetcher:
    def __init__(
        self,
        store: WordStore,
        *,
        session=None,
        timeout: float | None = None,
    ) -> None:
        self.store = store
        self.session = session or _session()
        self.timeout = config.FETCH_TIMEOUT if timeout is None else timeout

    def fetch(self, spec: SourceSpec, *, refresh: bool = False) -> list[str]:
        """
        Word list for one source. Every token matches ^[a-z]+$.
        Failures are recorded in the store's error log and re-raised.
        """
        sid = spec.id
        if not refresh:
            words = self.store.get_words(sid)
            if words is not None:
                return words

        with self.store.source_lock(sid):
            if not refresh:
                # Another thread may have loaded it while we waited
                words = self.store.get_words(sid)
                if words is not None:
                    return words
                words = self._from_persisted(spec)
                if words is not None:
                    self.store.set_words(sid, words)
                    self.store.clear_error(sid)
                    return words
            try:
                words = self._download(spec)
            except FetchError as e:
                logger.warning("Error fetching words from source %s: %s", sid, e.message)
                self.store.record_error(sid, e.message)
                raise
            if self.store.persisted is not None:
                self.store.persisted.put(cache_key(spec.url), words, url=spec.url)
            self.store.set_words(sid, words)
            self.store.clear_error(sid)
            return words

    def _from_persisted(self, spec: SourceSpec) -> list[str] | None:
        if self.store.persisted is None:
            return None
        words = self.store.persisted.get(cache_key(spec.url))
        if words:
            logger.debug("Using cached word list for %s", spec.url)
            return words
        return None

    def _download(self, spec: SourceSpec) -> list[str]:
        logger.info("Fetching word list from %s", spec.url)
        text = fetch_one(self.session, spec.url, timeout=self.timeout, source_id=spec.id)
        entries = extract_entries(text, spec.url)
        if not entries:
            raise ParseFailure(
                f"Could not read any entries from the word list at {spec.url}",
                source_id=spec.id,
                url=spec.url,
            )
        words = normalize_tokens(entries, split_phrases=spec.split_phrases)
        logger.info("Filtered %d entries to %d valid words from %s", len(entries), len(words), spec.url)
        if not words:
            raise EmptyResult(
                f"No valid words found in the word list from {spec.url}",
                source_id=spec.id,
                url=spec.url,
            )
        return words
