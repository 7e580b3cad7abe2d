"""
Runtime settings for the word generator.
Values come from the environment (optionally a .env file at the repo root).
"""
from __future__ import annotations

import os
from pathlib import Path

# Load .env if present; optional, no extra dep required at runtime
try:
    from dotenv import load_dotenv
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
except ImportError:
    pass

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CACHE_DB = DATA_DIR / "wordgen_cache.duckdb"

# Freshness window for persisted word lists: 24h minimum, 7 days maximum
MIN_FRESHNESS_HOURS = 24
MAX_FRESHNESS_HOURS = 7 * 24


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def cache_db_path() -> str:
    """Path of the DuckDB cache file, or ':memory:'."""
    p = os.environ.get("WORDGEN_CACHE_DB")
    if p:
        return p
    return str(DEFAULT_CACHE_DB)


def ensure_data_dir() -> Path:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR


FETCH_TIMEOUT = _env_float("WORDGEN_FETCH_TIMEOUT", 10.0)
FRESHNESS_HOURS = min(
    MAX_FRESHNESS_HOURS,
    max(MIN_FRESHNESS_HOURS, _env_int("WORDGEN_FRESHNESS_HOURS", MAX_FRESHNESS_HOURS)),
)
FRESHNESS_MS = FRESHNESS_HOURS * 60 * 60 * 1000
MAX_WORKERS = max(1, _env_int("WORDGEN_MAX_WORKERS", 4))
USER_AGENT = os.environ.get("WORDGEN_USER_AGENT", "WordGen/1.0 (word list generator)")
ENABLE_DENYLIST = _env_bool("WORDGEN_DENYLIST", False)

# Seed for the synthetic problem-word patterns so the denylist is reproducible
DENYLIST_SEED = _env_int("WORDGEN_DENYLIST_SEED", 1729)

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 9
DEFAULT_COUNT = 100
