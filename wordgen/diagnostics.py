"""
Source troubleshooting: what an error message means, what to try instead, and a
live check of one source.
"""
from __future__ import annotations

from .errors import WordGenError

# (substrings in the error message, user-facing help); first match wins
ERROR_HELP: list[tuple[tuple[str, ...], str]] = [
    (("timed out",),
     "The request took too long to complete. This can happen if the server is slow or overloaded. "
     "Try again later."),
    (("404", "not found"),
     "The word list URL no longer exists. The repository or file might have been moved or deleted."),
    (("403", "forbidden"),
     "Access to the word list is forbidden. The server might be rate-limiting requests or requires authentication."),
    (("json",),
     "Expected JSON data but received something else. This typically happens when the source format has changed."),
    (("no valid words found",),
     "The word source was reached, but no valid words were found that match the filtering criteria."),
    (("failed to fetch", "networkerror", "connection"),
     "Network issue. Check your internet connection or try again later. "
     "The word source URL might be temporarily unavailable."),
]
DEFAULT_HELP = "An unexpected error occurred. Try again or select a different word source."

ALTERNATIVES: dict[str, list[str]] = {
    "nouns": ["common", "enable", "wordnik"],
    "verbs": ["common", "enable", "wordnik"],
    "adjectives": ["common", "enable", "wordnik"],
    "adverbs": ["common", "simple_words"],
    "common": ["wordnik", "enable", "simple_words"],
    "google_common": ["wordnik", "enable", "simple_words"],
    "wordle_answers": ["brokensandals", "powerlanguage", "wordle_allowed"],
    "wordle_allowed": ["wordle_answers", "brokensandals", "enable"],
    "brokensandals": ["wordle_answers", "powerlanguage"],
    "powerlanguage": ["wordle_answers", "brokensandals"],
}
POS_SOURCES = ("nouns", "verbs", "adjectives", "adverbs")


def error_help(message: str) -> str:
    m = (message or "").lower()
    for needles, help_text in ERROR_HELP:
        if any(n in m for n in needles):
            return help_text
    return DEFAULT_HELP


def technical_explanation(source_id: str, message: str) -> str:
    m = (message or "").lower()
    if "json" in m:
        return ("The source is expected to have a JSON structure, but it has a different format or structure. "
                "Several JSON layouts are recognised, but very unusual structures can still fail.")
    if "404" in m or "not found" in m:
        return ("The repository or file path in the URL no longer exists. The owner may have moved or deleted "
                "the file, or renamed the repository.")
    if "403" in m or "forbidden" in m:
        return ("GitHub rate-limits raw content URLs. After too many requests in a short period further requests "
                "are blocked for a while. Wait or use a different source.")
    if source_id in POS_SOURCES:
        return ("Part-of-speech sources rely on JSON lists from the dariusk/corpora repository. When those are "
                "unavailable, words are picked out of the ENABLE list by their endings instead.")
    return ("The error appears to be related to network connectivity, server response, or data format issues.")


def suggested_alternatives(source_id: str, known_ids: list[str] | None = None) -> list[str]:
    alts = ALTERNATIVES.get(source_id, ["common"])
    alts = [a for a in alts if a != source_id]
    if known_ids is not None:
        alts = [a for a in alts if a in known_ids]
    return alts


def check_source(generator, source_id: str, *, length: int = 5, sample_size: int = 10) -> dict:
    """Try one source and report status, sample words, and help for any error."""
    known = generator.registry.ids()
    out: dict = {"source_id": source_id, "known": source_id in known}
    try:
        words = generator.generate_words(length, source_id, sample_size)
    except WordGenError as e:
        out.update({
            "ok": False,
            "error": e.message,
            "help": error_help(e.message),
            "technical": technical_explanation(source_id, e.message),
            "alternatives": suggested_alternatives(source_id, known),
        })
        return out
    logged = generator.error_log().get(source_id)
    out.update({"ok": True, "sample": words[:sample_size]})
    if logged:
        # Served from a fallback corpus; the primary still failed
        out["warning"] = logged
        out["help"] = error_help(logged)
    return out
