"""
Source registry: which word lists the generator can pull from and where they live.
Ids are what callers pass around; URLs and fallbacks stay in here.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Source:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class SourceSpec:
    source: Source
    url: str
    # Source id to degrade to when the primary corpus can't be fetched
    fallback: str | None = None
    # Part-of-speech category applied to the fallback (or any general) corpus
    category: str | None = None
    # Multi-word entries ("new york") are split into single tokens
    split_phrases: bool = False

    @property
    def id(self) -> str:
        return self.source.id


DEFAULT_SOURCE_ID = "google_common"

_RAW = "https://raw.githubusercontent.com"

# Corpora of good words
GOOGLE_COMMON_URL = f"{_RAW}/first20hours/google-10000-english/master/google-10000-english-usa-no-swears.txt"
ENABLE_URL = f"{_RAW}/dolph/dictionary/master/enable1.txt"
SCRABBLE_URL = f"{_RAW}/redbo/scrabble/master/dictionary.txt"
WORD_FREQ_URL = f"{_RAW}/hermitdave/FrequencyWords/master/content/2018/en/en_50k.txt"
SIMPLE_WORDS_URL = f"{_RAW}/taikuukaits/SimpleWords/master/words.txt"
WORDLE_ALLOWED_URL = f"{_RAW}/tabatkins/wordle-list/main/words"
WORDLE_ANSWERS_URL = (
    "https://gist.githubusercontent.com/cfreshman/a03ef2cba789d8cf00c08f767e0fad7b/raw/"
    "a9e55d7e0c08100ce62133a1fa0d9c4f0f542f2c/wordle-answers-alphabetical.txt"
)
WORDNIK_URL = f"{_RAW}/wordnik/wordlist/main/wordlist.txt"
COMMON_MULTI_URL = f"{_RAW}/skedwards88/word_lists/main/compiled/commonWords.json"
SINDRESORHUS_URL = f"{_RAW}/sindresorhus/word-list/main/words.txt"
POWERLANGUAGE_URL = f"{_RAW}/powerlanguage/word-lists/master/word-list-filtered.txt"
BROKENSANDALS_URL = f"{_RAW}/brokensandals/wordlists/master/common-5-letter-words.txt"

# Part-of-speech corpora (dariusk/corpora)
NOUNS_URL = f"{_RAW}/dariusk/corpora/master/data/words/nouns.json"
VERBS_URL = f"{_RAW}/dariusk/corpora/master/data/words/verbs.json"
ADJECTIVES_URL = f"{_RAW}/dariusk/corpora/master/data/words/adjs.json"
ADVERBS_URL = f"{_RAW}/dariusk/corpora/master/data/words/adverbs.json"


def _spec(id: str, name: str, description: str, url: str, **kwargs) -> SourceSpec:
    return SourceSpec(Source(id, name, description), url, **kwargs)


# Order here is the order sources are offered to callers.
SOURCES: list[SourceSpec] = [
    _spec("google_common", "Google Common Words",
          "Top 10,000 most frequently used words in American English", GOOGLE_COMMON_URL),
    _spec("wordle_answers", "Wordle Answer Words",
          "Words that have been used as answers in the official Wordle game", WORDLE_ANSWERS_URL),
    _spec("wordle_allowed", "Wordle Allowed Words",
          "All words accepted as valid guesses in Wordle", WORDLE_ALLOWED_URL),
    _spec("wordnik", "Wordnik Game Words",
          "Curated list of words specifically for word games (from Wordnik)", WORDNIK_URL),
    _spec("common_multi", "Multi-Source Common Words",
          "Common words verified across multiple dictionaries and sources", COMMON_MULTI_URL),
    _spec("enable", "ENABLE Dictionary",
          "Enhanced North American Benchmark Lexicon (standard word game dictionary)", ENABLE_URL),
    _spec("scrabble", "Scrabble Words",
          "Words allowed in Scrabble games (filtered for common words)", SCRABBLE_URL),
    _spec("word_freq", "Word Frequency List",
          "Words sorted by frequency of usage in English", WORD_FREQ_URL),
    _spec("simple_words", "Simple English Words",
          "Basic vocabulary with common, easy-to-guess words", SIMPLE_WORDS_URL),
    _spec("sindresorhus", "Sindre Sorhus Word List",
          "Filtered list of English words with profanity removed", SINDRESORHUS_URL),
    _spec("powerlanguage", "Powerlanguage Word List",
          "Filtered list by Wordle creator - good for word games", POWERLANGUAGE_URL),
    _spec("brokensandals", "5-Letter Common Words",
          "Curated list of common 5-letter words ideal for word games", BROKENSANDALS_URL),
    # Aliases: dedicated corpus first, ENABLE narrowed by suffix heuristics if that fails
    _spec("common", "Common Words",
          "Everyday American English words (Google common list)", GOOGLE_COMMON_URL),
    _spec("nouns", "Nouns", "Common English nouns", NOUNS_URL,
          fallback="enable", category="noun"),
    _spec("verbs", "Verbs", "Common English verbs", VERBS_URL,
          fallback="enable", category="verb"),
    _spec("adjectives", "Adjectives", "Common English adjectives", ADJECTIVES_URL,
          fallback="enable", category="adjective"),
    _spec("adverbs", "Adverbs", "Common English adverbs", ADVERBS_URL,
          fallback="enable", category="adverb"),
]

# Problem-word corpora: never offered as sources, only feed the denylist.
PROBLEM_SOURCES: list[SourceSpec] = [
    _spec("first_names", "First names", "Given names",
          f"{_RAW}/dominictarr/random-name/master/first-names.txt"),
    _spec("last_names", "Last names", "Family names",
          f"{_RAW}/arineng/arincli/master/lib/last-names.txt"),
    _spec("countries", "Countries", "Country names",
          f"{_RAW}/umpirsky/country-list/master/data/en/country.txt", split_phrases=True),
    _spec("cities", "Cities", "City names",
          f"{_RAW}/lutangar/cities.json/master/cities.json", split_phrases=True),
    _spec("tech_terms", "Technical terms", "Technology vocabulary",
          f"{_RAW}/words/technological-terms/master/index.txt"),
    _spec("medical_terms", "Medical eponyms", "Medical terminology",
          f"{_RAW}/glutanimate/wordlist-medicaleponyms-en/master/wordlist.txt"),
    _spec("chemical_elements", "Chemical elements", "Periodic table",
          "https://gist.githubusercontent.com/GoodmanSciences/c2dd862cd38f21b0ad36b8f96b4bf1ee/raw/"
          "1d92663004489a5b6926e944c1b3d9ec5c40900e/Periodic%2520Table%2520of%2520Elements.csv"),
    _spec("internet_slang", "Internet slang", "Slang and chat abbreviations",
          f"{_RAW}/both/language-dataset/master/data/internet-slang.json"),
    _spec("acronyms", "Acronyms", "Common acronyms",
          f"{_RAW}/stands4/acronym-list/master/acronyms.json"),
    _spec("uncommon_words", "Uncommon words", "Rare or obscure words",
          f"{_RAW}/skedwards88/word_lists/main/compiled/uncommonWords.json"),
    _spec("offensive_words", "Offensive words", "Obscene and otherwise bad words",
          f"{_RAW}/LDNOOBW/List-of-Dirty-Naughty-Obscene-and-Otherwise-Bad-Words/master/en"),
    _spec("non_us_words", "British spellings", "Non-US spelling variants",
          f"{_RAW}/hyperreality/American-British-English-Translator/master/data/british_spellings.json"),
]


class SourceRegistry:
    """Id → SourceSpec lookup. Unknown ids resolve to the default general corpus."""

    def __init__(
        self,
        specs: list[SourceSpec] | None = None,
        *,
        default_id: str = DEFAULT_SOURCE_ID,
    ) -> None:
        self._specs: dict[str, SourceSpec] = {}
        for spec in specs if specs is not None else SOURCES:
            self._specs[spec.id] = spec
        if default_id not in self._specs:
            raise ValueError(f"Default source {default_id!r} is not registered")
        self.default_id = default_id

    def __contains__(self, source_id: str) -> bool:
        return source_id in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, source_id: str) -> SourceSpec:
        return self._specs.get(source_id) or self._specs[self.default_id]

    def resolve_id(self, source_id: str) -> str:
        """Registered id for source_id (the default id when unknown)."""
        return source_id if source_id in self._specs else self.default_id

    def available_sources(self) -> list[Source]:
        return [spec.source for spec in self._specs.values()]

    def ids(self) -> list[str]:
        return list(self._specs)
