"""
Problem-word denylist: names, places, technical terms, slang, acronyms and other
words that pass the letter heuristics but make poor game words.
Assembled from the problem corpora plus synthetic suffix patterns.
"""
from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor

from . import config
from .errors import FetchError
from .sources import PROBLEM_SOURCES, SourceSpec

logger = logging.getLogger(__name__)

MIN_PROBLEM_WORD_LENGTH = 3

NATIONALITY_SUFFIXES = ("ese", "ian", "ish", "ean", "ite", "can", "ani")
TECHNICAL_SUFFIXES = ("ium", "ide", "ate", "ite", "ene", "ase", "one", "ane", "yne", "ol", "yl", "ose")
PLACE_SUFFIXES = ("land", "ville", "town", "burg", "berg", "shire", "port", "ford", "ham", "ton")

_BASE_LETTERS = "abcdefghijklmnoprstuvwxyz"


def _synthetic(
    rng: random.Random,
    suffixes: tuple[str, ...],
    base_lengths: range,
    per_length: int,
) -> set[str]:
    out: set[str] = set()
    for suffix in suffixes:
        for n in base_lengths:
            for _ in range(per_length):
                base = "".join(rng.choice(_BASE_LETTERS) for _ in range(n))
                out.add(base + suffix)
    return out


def synthetic_problem_words(seed: int | None = None) -> set[str]:
    """Random base + nationality/technical/place-name suffix, reproducible for a seed."""
    rng = random.Random(config.DENYLIST_SEED if seed is None else seed)
    words = _synthetic(rng, NATIONALITY_SUFFIXES, range(3, 7), 5)
    words |= _synthetic(rng, TECHNICAL_SUFFIXES, range(3, 6), 3)
    words |= _synthetic(rng, PLACE_SUFFIXES, range(3, 6), 3)
    return words


def build_problem_words(
    fetcher,
    specs: list[SourceSpec] | None = None,
    *,
    max_workers: int | None = None,
    seed: int | None = None,
) -> frozenset[str]:
    """
    Fetch every problem corpus (failures are logged and skipped) and merge them
    with the synthetic patterns.
    """
    specs = PROBLEM_SOURCES if specs is None else specs
    problem: set[str] = set()

    def load(spec: SourceSpec) -> list[str]:
        try:
            return fetcher.fetch(spec)
        except FetchError as e:
            logger.warning("Error loading problem words from %s: %s", spec.id, e.message)
            return []

    workers = max_workers or config.MAX_WORKERS
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for spec, words in zip(specs, pool.map(load, specs)):
            kept = [w for w in words if len(w) >= MIN_PROBLEM_WORD_LENGTH]
            problem.update(kept)
            if kept:
                logger.info("Added %d problem words from %s", len(kept), spec.id)

    problem |= synthetic_problem_words(seed)
    logger.info("Total problem words loaded: %d", len(problem))
    return frozenset(problem)
