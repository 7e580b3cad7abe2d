"""
Part-of-speech guesses from word endings.
Used to carve nouns/verbs/adjectives/adverbs out of a general word list when a
dedicated corpus can't be fetched. Lossy by nature: "rely" reads as an adverb.
"""
from __future__ import annotations

import re

NOUN = "noun"
VERB = "verb"
ADJECTIVE = "adjective"
ADVERB = "adverb"

CATEGORIES = (NOUN, VERB, ADJECTIVE, ADVERB)

CATEGORY_PATTERNS: dict[str, re.Pattern[str]] = {
    ADVERB: re.compile(r"(?:ly|ward|wards|wise)$"),
    ADJECTIVE: re.compile(r"(?:able|ible|al|ful|ous|ive|less|ic|ish|ary|ent|ant|some)$"),
    VERB: re.compile(r"(?:ate|ify|ize|ise|en|ed|ing|esce)$"),
    NOUN: re.compile(r"(?:tion|sion|ment|ness|ity|ance|ence|ship|hood|dom|ism|ist|er|or|age|ery|ure)$"),
}

# Checked in this order; adverb endings are the least ambiguous
_DETECT_ORDER = (ADVERB, ADJECTIVE, VERB, NOUN)


def matches_category(word: str, category: str) -> bool:
    pattern = CATEGORY_PATTERNS.get(category)
    if pattern is None:
        raise ValueError(f"Unknown part-of-speech category: {category!r}")
    return bool(pattern.search(word))


def detect_category(word: str) -> str | None:
    """First category whose ending matches, or None."""
    w = word.strip().lower()
    for cat in _DETECT_ORDER:
        if CATEGORY_PATTERNS[cat].search(w):
            return cat
    return None


def filter_category(words: list[str], category: str) -> list[str]:
    return [w for w in words if matches_category(w, category)]
