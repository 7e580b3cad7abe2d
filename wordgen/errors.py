"""
Error taxonomy for word generation.

Per-source fetch errors are recoverable inside a multi-source request and end up
as failed-source annotations; InputError, NoMatches and AllSourcesFailed are the
hard failures a caller sees.
"""
from __future__ import annotations


class WordGenError(Exception):
    """Base class. Every error carries a human-readable message."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(WordGenError):
    kind = "input"


class NoSourcesSelected(InputError):
    kind = "no_sources"

    def __init__(self, message: str = "At least one word source must be selected") -> None:
        super().__init__(message)


class FetchError(WordGenError):
    kind = "fetch"

    def __init__(self, message: str, *, source_id: str = "", url: str = "") -> None:
        super().__init__(message)
        self.source_id = source_id
        self.url = url


class NetworkFailure(FetchError):
    kind = "network"


class FetchTimeout(FetchError):
    kind = "timeout"


class BadStatus(FetchError):
    kind = "bad_status"

    def __init__(self, status_code: int, reason: str = "", *, source_id: str = "", url: str = "") -> None:
        msg = f"Failed to fetch word list: {status_code} {reason}".rstrip()
        super().__init__(msg, source_id=source_id, url=url)
        self.status_code = status_code


class ParseFailure(FetchError):
    kind = "parse"


class EmptyResult(FetchError):
    kind = "empty"


class NoMatches(WordGenError):
    kind = "no_matches"


class AllSourcesFailed(WordGenError):
    kind = "all_sources_failed"

    def __init__(self, failed_sources: list[str], message: str | None = None) -> None:
        super().__init__(
            message or "Could not fetch words from any of the selected sources. Please try again later."
        )
        self.failed_sources = list(failed_sources)
