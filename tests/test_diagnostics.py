# tests/test_diagnostics.py

from wordgen.diagnostics import DEFAULT_HELP, check_source, error_help, suggested_alternatives
from wordgen.sources import ADVERBS_URL, ENABLE_URL, GOOGLE_COMMON_URL


def test_error_help_matches_by_message():
    assert "too long" in error_help("Request timed out. Please try again later.")
    assert "no longer exists" in error_help("Failed to fetch word list: 404 Not Found")
    assert "forbidden" in error_help("Failed to fetch word list: 403 Forbidden")
    assert "Network issue" in error_help("Connection refused")
    assert error_help("something odd") == DEFAULT_HELP


def test_alternatives_exclude_self_and_unknown():
    assert suggested_alternatives("wordle_answers") == ["brokensandals", "powerlanguage", "wordle_allowed"]
    assert suggested_alternatives("nouns", ["common", "enable"]) == ["common", "enable"]
    assert suggested_alternatives("mystery") == ["common"]


def test_check_working_source(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, "apple\ngrape\nmango\n")})
    report = check_source(gen, "google_common")
    assert report["ok"] is True
    assert report["known"] is True
    assert sorted(report["sample"]) == ["apple", "grape", "mango"]
    assert "warning" not in report


def test_check_failing_source(make_generator):
    gen, _ = make_generator({})
    report = check_source(gen, "wordle_answers")
    assert report["ok"] is False
    assert "404" in report["error"]
    assert "no longer exists" in report["help"]
    assert report["alternatives"] == ["brokensandals", "powerlanguage", "wordle_allowed"]


def test_check_source_on_fallback_warns(make_generator):
    gen, _ = make_generator({
        ADVERBS_URL: (403, "Forbidden"),
        ENABLE_URL: (200, "gladly\nsoftly\nquick\n"),
    })
    report = check_source(gen, "adverbs", length=6)
    assert report["ok"] is True
    assert "403" in report["warning"]
    assert "forbidden" in report["help"]
