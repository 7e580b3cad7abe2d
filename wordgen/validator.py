"""
Word acceptability checks.

A word is accepted when it "looks like a plausible common word": letters only,
sensible length, not profane, has a vowel, no runaway letter repetition, not an
abbreviation, US spelling, no rare-letter clusters, and (optionally) not on the
problem-word denylist and shaped like the requested part of speech.
Rules run in a fixed order and the first failing rule supplies the reason.
"""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, NamedTuple

from . import config
from .pos import CATEGORIES, matches_category
from .profanity import PROFANE_WORDS

VOWELS = frozenset("aeiouy")
WORD_RE = re.compile(r"^[a-z]+$")

REGIONAL_PATTERNS = [
    re.compile(r"our$"),   # colour
    re.compile(r"ise$"),   # realise
    re.compile(r"yse$"),   # analyse
    re.compile(r"re$"),    # centre
    re.compile(r"ogue$"),  # catalogue
    re.compile(r"ae"),     # anaemia
    re.compile(r"oe"),     # oesophagus
]

UNCOMMON_PATTERNS = [
    re.compile(r"[qwxz]{2,}"),
    re.compile(r"[jzxq][jzxq]"),
    re.compile(r"^[qx]"),
    re.compile(r"^[^aeiouy]{3,}"),
    re.compile(r"[^aeiouy]{4,}"),
]

_VOWEL_RUN = re.compile(r"[aeiouy]+")


class RepetitionRule(str, Enum):
    # Reject when the most frequent letter fills at least half the word
    HALF = "half"
    # Reject when it exceeds floor(len/2), or reaches it while another letter also repeats
    HALF_WITH_PAIRS = "half_with_pairs"


class AbbreviationStrictness(str, Enum):
    OFF = "off"
    # Consonant ratio only; keeps short words like "cat"
    STANDARD = "standard"
    # Ratio, short consonant-heavy words, all-caps input, three or more single-vowel runs
    STRICT = "strict"


class ValidationResult(NamedTuple):
    is_valid: bool
    reason: str | None = None


class Rule(NamedTuple):
    name: str
    # (normalised word, raw input) -> True when the word is rejected
    rejects: Callable[[str, str], bool]
    reason: str


@dataclass(frozen=True)
class ValidatorOptions:
    min_length: int = config.MIN_WORD_LENGTH
    max_length: int = config.MAX_WORD_LENGTH
    repetition_rule: RepetitionRule = RepetitionRule.HALF_WITH_PAIRS
    abbreviation_strictness: AbbreviationStrictness = AbbreviationStrictness.STRICT
    enable_denylist: bool = False
    enable_pos_heuristics: bool = False
    pos_category: str | None = None


# --- Predicates ---


def has_vowel(word: str) -> bool:
    return any(c in VOWELS for c in word)


def consonant_count(word: str) -> int:
    return sum(1 for c in word if c not in VOWELS)


def has_excessive_repetition(word: str, rule: RepetitionRule = RepetitionRule.HALF_WITH_PAIRS) -> bool:
    if not word:
        return False
    counts = Counter(word)
    top_letter, top_count = counts.most_common(1)[0]
    n = len(word)
    if rule is RepetitionRule.HALF:
        return top_count >= n / 2
    half = n // 2
    if top_count > half:
        return True
    if top_count == half:
        return any(c > 1 for letter, c in counts.items() if letter != top_letter)
    return False


def looks_like_abbreviation(
    word: str,
    strictness: AbbreviationStrictness = AbbreviationStrictness.STRICT,
    raw: str | None = None,
) -> bool:
    if strictness is AbbreviationStrictness.OFF or not word:
        return False
    consonants = consonant_count(word)
    if consonants / len(word) > 0.7:
        return True
    if strictness is AbbreviationStrictness.STRICT:
        if len(word) <= 3 and consonants >= 2:
            return True
        # Only the caller's original spelling can be all caps
        src = (raw if raw is not None else word).strip()
        if src.isalpha() and src.upper() == src:
            return True
        runs = _VOWEL_RUN.findall(word)
        if len(runs) >= 3 and all(len(r) == 1 for r in runs):
            return True
    return False


def is_regional_spelling(word: str) -> bool:
    return any(p.search(word) for p in REGIONAL_PATTERNS)


def has_uncommon_letter_patterns(word: str) -> bool:
    return any(p.search(word) for p in UNCOMMON_PATTERNS)


# --- Validator ---


class WordValidator:
    """Ordered rule chain built once from options; validate() is pure."""

    def __init__(
        self,
        options: ValidatorOptions | None = None,
        *,
        problem_words: Iterable[str] | None = None,
        profane_words: Iterable[str] | None = None,
    ) -> None:
        self.options = options or ValidatorOptions()
        if self.options.pos_category is not None and self.options.pos_category not in CATEGORIES:
            raise ValueError(f"Unknown part-of-speech category: {self.options.pos_category!r}")
        self.problem_words: frozenset[str] = frozenset(problem_words or ())
        self.profane_words: frozenset[str] = (
            frozenset(profane_words) if profane_words is not None else PROFANE_WORDS
        )
        self.rules = self._build_rules()

    def _build_rules(self) -> list[Rule]:
        o = self.options
        rules = [
            Rule("letters", lambda w, _r: not WORD_RE.match(w), "Word must contain only letters"),
            Rule(
                "length",
                lambda w, _r: not (o.min_length <= len(w) <= o.max_length),
                f"Word must be between {o.min_length} and {o.max_length} letters",
            ),
            Rule("profanity", lambda w, _r: w in self.profane_words, "Word is inappropriate"),
            Rule("vowel", lambda w, _r: not has_vowel(w), "Word must contain at least one vowel"),
            Rule(
                "repetition",
                lambda w, _r: has_excessive_repetition(w, o.repetition_rule),
                "Word has problematic letter repetition",
            ),
            Rule(
                "abbreviation",
                lambda w, r: looks_like_abbreviation(w, o.abbreviation_strictness, r),
                "Word looks like an abbreviation",
            ),
            Rule("regional", lambda w, _r: is_regional_spelling(w), "UK spelling variant"),
            Rule("uncommon", lambda w, _r: has_uncommon_letter_patterns(w), "Contains uncommon letter patterns"),
        ]
        if o.enable_denylist:
            rules.append(
                Rule("denylist", lambda w, _r: w in self.problem_words, "Word is in the problematic words list")
            )
        if o.enable_pos_heuristics and o.pos_category:
            cat = o.pos_category
            rules.append(
                Rule("part_of_speech", lambda w, _r: not matches_category(w, cat), f"Word does not look like a {cat}")
            )
        return rules

    def with_problem_words(self, problem_words: Iterable[str]) -> "WordValidator":
        return WordValidator(self.options, problem_words=problem_words, profane_words=self.profane_words)

    def validate(self, word) -> ValidationResult:
        if not isinstance(word, str) or not word.strip():
            return ValidationResult(False, "Invalid input")
        w = word.strip().lower()
        for rule in self.rules:
            if rule.rejects(w, word):
                return ValidationResult(False, rule.reason)
        return ValidationResult(True)

    def is_valid(self, word) -> bool:
        return self.validate(word).is_valid

    def filter(self, words: Iterable[str]) -> list[str]:
        return [w for w in words if self.is_valid(w)]
