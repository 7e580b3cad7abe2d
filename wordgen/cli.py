"""
Generate words from the command line.
Run: python -m wordgen.cli --length 5 --source google_common --source wordnik
"""
from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .diagnostics import check_source
from .errors import WordGenError
from .generator import WordGenerator
from .stats import word_stats


def _print_sources(gen: WordGenerator) -> None:
    for s in gen.available_sources():
        print(f"  {s.id:<16} {s.name}: {s.description}")


def _print_checks(gen: WordGenerator, source_ids: list[str]) -> int:
    failures = 0
    for sid in source_ids:
        report = check_source(gen, sid)
        if report["ok"]:
            print(f"[ok]     {sid}: {', '.join(report['sample'])}")
            if report.get("warning"):
                print(f"         (fallback in use: {report['warning']})")
        else:
            failures += 1
            print(f"[failed] {sid}: {report['error']}")
            print(f"         {report['help']}")
            if report["alternatives"]:
                print(f"         Try instead: {', '.join(report['alternatives'])}")
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Generate a random sample of common words of one length.")
    p.add_argument("--length", type=int, default=5, help="Word length")
    p.add_argument("--source", action="append", dest="sources", default=None,
                   help="Source id (repeatable); default: google_common")
    p.add_argument("--count", type=int, default=config.DEFAULT_COUNT, help="Maximum number of words")
    p.add_argument("--list-sources", action="store_true", help="List available sources and exit")
    p.add_argument("--check", action="store_true", help="Test the selected sources (or all) and exit")
    p.add_argument("--refresh", action="store_true", help="Ignore cached word lists")
    p.add_argument("--stats", action="store_true", help="Print statistics for the generated words")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.ensure_data_dir()
    gen = WordGenerator()
    try:
        if args.list_sources:
            print("Available sources:")
            _print_sources(gen)
            return 0
        if args.check:
            return _print_checks(gen, args.sources or gen.registry.ids())

        sources = args.sources or [gen.registry.default_id]
        try:
            result = gen.generate(args.length, sources, args.count, refresh=args.refresh)
        except WordGenError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        for w in result.words:
            print(w)
        if result.failed_sources:
            print(f"Failed sources: {', '.join(result.failed_sources)}", file=sys.stderr)
        if args.stats:
            stats = word_stats(result.words) or {}
            for key in ("total_words", "unique_words", "average_length", "vowel_percentage", "most_common_letter"):
                print(f"{key}: {stats.get(key)}", file=sys.stderr)
        return 0
    finally:
        gen.close()


if __name__ == "__main__":
    sys.exit(main())
