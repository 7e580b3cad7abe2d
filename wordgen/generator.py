"""
Word generation: fetch the selected sources, keep words of the requested length,
merge, validate, and sample.

One failing source never sinks a request: it is reported in failed_sources and
kept in the error log, and the other sources carry on.
"""
from __future__ import annotations

import logging
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from . import config
from .cache import CorpusCache
from .denylist import build_problem_words
from .errors import AllSourcesFailed, FetchError, InputError, NoMatches, NoSourcesSelected
from .fetch import CorpusFetcher
from .pos import filter_category
from .sampler import sample
from .sources import PROBLEM_SOURCES, DEFAULT_SOURCE_ID, Source, SourceRegistry, SourceSpec
from .store import WordStore
from .validator import ValidatorOptions, WordValidator

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    words: list[str]
    failed_sources: list[str] = field(default_factory=list)


class WordGenerator:
    def __init__(
        self,
        *,
        registry: SourceRegistry | None = None,
        store: WordStore | None = None,
        fetcher: CorpusFetcher | None = None,
        validator: WordValidator | None = None,
        session=None,
        cache_path: str | Path | None = None,
        problem_sources: list[SourceSpec] | None = None,
        max_workers: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.registry = registry or SourceRegistry()
        if store is None:
            store = WordStore(CorpusCache(cache_path))
        self.store = store
        self.fetcher = fetcher or CorpusFetcher(store, session=session)
        self.validator = validator or WordValidator(
            ValidatorOptions(enable_denylist=config.ENABLE_DENYLIST)
        )
        self.problem_sources = PROBLEM_SOURCES if problem_sources is None else problem_sources
        self.max_workers = max_workers or config.MAX_WORKERS
        self.rng = rng or random.Random()
        self._problem_lock = threading.Lock()
        self._problem_words_loaded = False

    # --- Catalog & diagnostics ---

    def available_sources(self) -> list[Source]:
        return self.registry.available_sources()

    def error_log(self) -> dict[str, str]:
        return self.store.error_log()

    def word_cache(self) -> dict[str, list[str]]:
        return self.store.word_cache()

    def persisted_keys(self) -> list[str]:
        return self.store.persisted.keys() if self.store.persisted is not None else []

    def close(self) -> None:
        if self.store.persisted is not None:
            self.store.persisted.close()

    # --- Generation ---

    def generate(
        self,
        length: int,
        source_ids: list[str],
        count: int = config.DEFAULT_COUNT,
        *,
        refresh: bool = False,
    ) -> GenerationResult:
        """
        Words of exactly `length` letters from every selected source, validated and
        sampled down to `count`. Raises NoSourcesSelected, AllSourcesFailed or NoMatches.
        """
        ids = _check_request(length, source_ids, count)
        validator = self._ready_validator()

        pool: dict[str, None] = {}  # ordered set
        failed: list[str] = []
        fetch_failures = 0
        for sid, words in self._fetch_all(ids, refresh=refresh):
            if words is None:
                failed.append(sid)
                fetch_failures += 1
                continue
            matching = [w for w in words if len(w) == length]
            if not matching:
                logger.warning("No words of length %d found in source %s", length, sid)
                failed.append(sid)
                continue
            for w in matching:
                pool.setdefault(w)
            logger.info("Added %d words from source %s", len(matching), sid)

        candidates = list(pool)
        valid = validator.filter(candidates)
        logger.info("Filtered %d words to %d valid words", len(candidates), len(valid))
        if not valid:
            if fetch_failures == len(ids):
                raise AllSourcesFailed(failed)
            raise NoMatches(f"No valid words of length {length} found in the selected sources.")
        return GenerationResult(sample(valid, count, self.rng), failed)

    def generate_words(
        self,
        length: int,
        source_id: str,
        count: int = 50,
        *,
        refresh: bool = False,
    ) -> list[str]:
        """Single-source form. Fetch errors propagate as FetchError."""
        _check_request(length, [source_id], count)
        validator = self._ready_validator()
        words = self._fetch_for(source_id, refresh=refresh)
        matching = [w for w in words if len(w) == length]
        if not matching:
            raise NoMatches(f"No words of length {length} found in the selected source.")
        valid = validator.filter(matching)
        if not valid:
            raise NoMatches(f"No valid words of length {length} found in the selected source.")
        return sample(valid, count, self.rng)

    def warm(self, source_id: str = DEFAULT_SOURCE_ID) -> int:
        """Load one source into the caches ahead of the first request. Returns its size (0 on failure)."""
        try:
            words = self._fetch_for(source_id)
        except FetchError as e:
            logger.warning("Failed to preload %s: %s", source_id, e.message)
            return 0
        logger.info("Preloaded %d words from %s", len(words), source_id)
        return len(words)

    # --- Internals ---

    def _ready_validator(self) -> WordValidator:
        if not self.validator.options.enable_denylist or self._problem_words_loaded:
            return self.validator
        with self._problem_lock:
            if not self._problem_words_loaded:
                problem = build_problem_words(
                    self.fetcher, self.problem_sources, max_workers=self.max_workers
                )
                self.validator = self.validator.with_problem_words(problem)
                self._problem_words_loaded = True
        return self.validator

    def _fetch_source(self, spec: SourceSpec, *, refresh: bool = False) -> list[str]:
        try:
            return self.fetcher.fetch(spec, refresh=refresh)
        except FetchError:
            if spec.fallback is None:
                raise
        fallback = self.registry.get(spec.fallback)
        logger.info("Falling back to %s words for %s", fallback.id, spec.id)
        words = self.fetcher.fetch(fallback, refresh=refresh)
        if spec.category:
            words = filter_category(words, spec.category)
        # Keep the degraded list under the alias so later requests don't retry the dead URL
        self.store.set_words(spec.id, words)
        return words

    def _fetch_for(self, source_id: str, *, refresh: bool = False) -> list[str]:
        """Words for a caller-supplied id. Unknown ids read the default corpus but keep their own error-log entry."""
        known = source_id in self.registry
        try:
            words = self._fetch_source(self.registry.get(source_id), refresh=refresh)
        except FetchError as e:
            if not known:
                self.store.record_error(source_id, e.message)
            raise
        if not known:
            self.store.clear_error(source_id)
        return words

    def _try_fetch(self, source_id: str, refresh: bool) -> tuple[str, list[str] | None]:
        try:
            return source_id, self._fetch_for(source_id, refresh=refresh)
        except FetchError as e:
            logger.warning("Error fetching words from source %s: %s", source_id, e.message)
            return source_id, None


    def _fetch_all(self, ids: list[str], *, refresh: bool) -> list[tuple[str, list[str] | None]]:
        """(id, words or None) per id, in request order; sources run concurrently."""
        workers = max(1, min(self.max_workers, len(ids)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda sid: self._try_fetch(sid, refresh), ids))


def _check_request(length, source_ids, count) -> list[str]:
    if isinstance(source_ids, str):
        source_ids = [source_ids]
    if not source_ids:
        raise NoSourcesSelected()
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InputError(f"Word length must be a positive integer, got {length!r}")
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InputError(f"Word count must be a positive integer, got {count!r}")
    # Same id twice would only be fetched and counted twice
    return list(dict.fromkeys(source_ids))
