"""
Turn a raw corpus body into word tokens.

Corpora are third-party static files whose format drifts: plain lists split by
newlines, commas or spaces, JSON arrays, JSON objects keyed by whatever the
author liked, CSV. Each shape is handled by a small extraction strategy; they
are tried in order and the first non-empty result wins.
"""
from __future__ import annotations

import csv
import io
import json
import re
from typing import Any, Callable

WORD_RE = re.compile(r"^[a-z]+$")

# Keys under which JSON corpora keep their word array
CANDIDATE_KEYS = (
    "words", "data", "list", "items", "entries", "terms",
    "nouns", "verbs", "adjs", "adjectives", "adverbs",
)
# Fields that hold the word when array entries are objects
ENTRY_FIELDS = ("word", "name", "value", "text", "term", "acronym", "present")
CSV_COLUMNS = ("word", "name", "element")
_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")
_SEPARATOR_RE = re.compile(r"[,\s]+")


def _unwrap(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        for field in ENTRY_FIELDS:
            v = item.get(field)
            if isinstance(v, str) and v:
                return v
    return ""


def _entries(arr: list) -> list[str]:
    return [s for s in (_unwrap(i) for i in arr) if s]


# --- JSON strategies: each takes the decoded document ---


def _json_array(doc: Any) -> list[str]:
    return _entries(doc) if isinstance(doc, list) else []


def _json_candidate_key(doc: Any) -> list[str]:
    if not isinstance(doc, dict):
        return []
    for key in CANDIDATE_KEYS:
        v = doc.get(key)
        if isinstance(v, list):
            out = _entries(v)
            if out:
                return out
    return []


def _json_any_array(doc: Any) -> list[str]:
    """Last resort for objects: first array-valued property with usable entries."""
    if not isinstance(doc, dict):
        return []
    for v in doc.values():
        if isinstance(v, list):
            out = _entries(v)
            if out:
                return out
    return []


def _json_mapping_keys(doc: Any) -> list[str]:
    """{"colour": "color", ...} style maps: the keys are the words the file is about."""
    if not isinstance(doc, dict) or not doc:
        return []
    if all(isinstance(v, str) for v in doc.values()):
        return [k for k in doc if isinstance(k, str)]
    return []


JSON_STRATEGIES: list[Callable[[Any], list[str]]] = [
    _json_array,
    _json_candidate_key,
    _json_any_array,
    _json_mapping_keys,
]


def _looks_like_json(text: str, url: str) -> bool:
    if url.lower().endswith(".json"):
        return True
    head = text.lstrip()[:1]
    return head in ("[", "{")


def parse_json(text: str) -> list[str] | None:
    """Entries from a JSON body, or None when it isn't JSON we recognise."""
    try:
        doc = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    for strategy in JSON_STRATEGIES:
        out = strategy(doc)
        if out:
            return out
    return None


def parse_csv(text: str) -> list[str]:
    """Word column of a CSV body (named column if the header has one, else the first)."""
    rows = list(csv.reader(io.StringIO(text)))
    if not rows:
        return []
    header = [h.strip().lower() for h in rows[0]]
    col = next((header.index(c) for c in CSV_COLUMNS if c in header), None)
    body = rows[1:] if col is not None else rows
    idx = col or 0
    return [r[idx].strip() for r in body if len(r) > idx and r[idx].strip()]


def _line_tokens(line: str) -> list[str]:
    fields = line.split()
    # Frequency lists carry "word count" per line
    if len(fields) > 1 and all(_NUMBER_RE.match(f) for f in fields[1:]):
        return fields[:1]
    return [t for t in _SEPARATOR_RE.split(line) if t]


def parse_text(text: str) -> list[str]:
    """Newline-, then comma-, then whitespace-separated; else the whole body is one token."""
    body = text.strip()
    if "\n" in body:
        out = []
        for line in body.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            out.extend(_line_tokens(line))
        return out
    if "," in body:
        return [w.strip() for w in body.split(",") if w.strip()]
    if " " in body:
        return body.split()
    return [body] if body else []



def extract_entries(text: str, url: str = "") -> list[str]:
    """Raw entries from a body, in file order. Not yet normalised."""
    if _looks_like_json(text, url):
        parsed = parse_json(text)
        if parsed:
            return parsed
    if url.lower().endswith(".csv"):
        parsed = parse_csv(text)
        if parsed:
            return parsed
    return parse_text(text)


def normalize_tokens(entries: list[str], *, split_phrases: bool = False) -> list[str]:
    """Lowercase, trim, keep ^[a-z]+$ tokens only, dedupe preserving order."""
    seen: set[str] = set()
    out: list[str] = []
    for entry in entries:
        parts = entry.split() if split_phrases else [entry]
        for part in parts:
            w = part.strip().lower()
            if not w or w in seen or not WORD_RE.match(w):
                continue
            seen.add(w)
            out.append(w)
    return out
