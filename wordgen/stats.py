"""
Summary statistics for a generated word list (shown alongside the words).
"""
from __future__ import annotations

import string

import numpy as np

VOWEL_INDICES = np.array([string.ascii_lowercase.index(v) for v in "aeiouy"])


def letter_counts(words: list[str]) -> np.ndarray:
    """Length-26 array of a..z occurrence counts across all words."""
    joined = "".join(w for w in words if w.isascii() and w.isalpha()).lower()
    if not joined:
        return np.zeros(26, dtype=np.int64)
    codes = np.frombuffer(joined.encode("ascii"), dtype=np.uint8).astype(np.int64) - ord("a")
    return np.bincount(codes, minlength=26)


def word_stats(words: list[str]) -> dict | None:
    """
    Totals, unique count, average length, vowel share (a, e, i, o, u, y) and the most
    common letter. None for an empty list.
    """
    if not words:
        return None
    counts = letter_counts(words)
    total_letters = int(counts.sum())
    lengths = np.array([len(w) for w in words], dtype=np.float64)
    vowel_count = int(counts[VOWEL_INDICES].sum())
    top = int(np.argmax(counts))
    return {
        "total_words": len(words),
        "unique_words": len(set(words)),
        "average_length": round(float(lengths.mean()), 1),
        "vowel_percentage": round(100 * vowel_count / total_letters) if total_letters else 0,
        "most_common_letter": string.ascii_lowercase[top] if total_letters else "",
        "most_common_letter_count": int(counts[top]),
        "letter_frequency": {
            string.ascii_lowercase[i]: int(c) for i, c in enumerate(counts) if c
        },
    }
