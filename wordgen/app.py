"""
JSON API for the word generator.
Run: uvicorn wordgen.app:app --reload --host 0.0.0.0
"""
from __future__ import annotations

import logging
import threading

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from . import config
from .diagnostics import check_source
from .errors import AllSourcesFailed, WordGenError
from .generator import WordGenerator
from .stats import word_stats

logger = logging.getLogger(__name__)

app = FastAPI(title="Word Generator")

# One generator per process so its caches and error log outlive single requests
_GENERATOR: WordGenerator | None = None
_GENERATOR_LOCK = threading.Lock()


def get_generator() -> WordGenerator:
    global _GENERATOR
    # Sync endpoints run in a threadpool
    with _GENERATOR_LOCK:
        if _GENERATOR is None:
            _GENERATOR = WordGenerator()
    return _GENERATOR


def _error(e: WordGenError) -> dict:
    out = {"ok": False, "error": e.message, "kind": e.kind}
    if isinstance(e, AllSourcesFailed):
        out["failed_sources"] = e.failed_sources
    return out


class GenerateRequest(BaseModel):
    length: int = 5
    sources: list[str] = []
    count: int = config.DEFAULT_COUNT


@app.get("/api/sources")
def api_sources(gen: WordGenerator = Depends(get_generator)):
    """Sources a caller can select."""
    return {
        "ok": True,
        "sources": [
            {"id": s.id, "name": s.name, "description": s.description}
            for s in gen.available_sources()
        ],
    }


@app.post("/api/generate")
def api_generate(body: GenerateRequest, gen: WordGenerator = Depends(get_generator)):
    """Words from one or more sources. failed_sources lists the ones that contributed nothing."""
    try:
        result = gen.generate(body.length, body.sources, body.count)
    except WordGenError as e:
        logger.info("Generation failed: %s", e.message)
        return _error(e)
    return {
        "ok": True,
        "words": result.words,
        "failed_sources": result.failed_sources,
        "stats": word_stats(result.words),
    }


@app.get("/api/words")
def api_words(
    length: int = 5,
    source: str = "google_common",
    count: int = 50,
    gen: WordGenerator = Depends(get_generator),
):
    """Single-source form."""
    try:
        words = gen.generate_words(length, source, count)
    except WordGenError as e:
        return _error(e)
    return {"ok": True, "words": words}


@app.get("/api/debug/errors")
def api_debug_errors(gen: WordGenerator = Depends(get_generator)):
    """Last fetch error per source."""
    return {"ok": True, "errors": gen.error_log()}


@app.get("/api/debug/cache")
def api_debug_cache(sample: int = 10, gen: WordGenerator = Depends(get_generator)):
    """Size and a few words of every list held in memory, plus the persisted cache keys."""
    cache = gen.word_cache()
    return {
        "ok": True,
        "cache": {sid: {"count": len(words), "sample": words[:sample]} for sid, words in cache.items()},
        "persisted": gen.persisted_keys(),
    }


@app.get("/api/debug/sources/{source_id}")
def api_debug_source(source_id: str, gen: WordGenerator = Depends(get_generator)):
    """Try one source now; includes help text and alternatives when it fails."""
    return check_source(gen, source_id)
