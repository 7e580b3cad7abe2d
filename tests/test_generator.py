# tests/test_generator.py

import random

import pytest

from wordgen.errors import AllSourcesFailed, BadStatus, InputError, NoMatches, NoSourcesSelected
from wordgen.sources import (
    ADVERBS_URL,
    ENABLE_URL,
    GOOGLE_COMMON_URL,
    WORDNIK_URL,
    Source,
    SourceSpec,
)
from wordgen.validator import ValidatorOptions, WordValidator

CORPUS = "apple\ngrape\nmango\ncandy\nzebra\nqwxyz\n"


def test_common_five_letter_words(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    result = gen.generate(5, ["common"], 100)
    assert sorted(result.words) == ["apple", "candy", "grape", "mango", "zebra"]
    assert result.failed_sources == []


def test_count_caps_result(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)}, rng=random.Random(5))
    result = gen.generate(5, ["common"], 2)
    assert len(result.words) == 2
    assert set(result.words) <= {"apple", "candy", "grape", "mango", "zebra"}


def test_failed_source_is_reported_and_others_contribute(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    result = gen.generate(5, ["common", "wordnik"])
    assert sorted(result.words) == ["apple", "candy", "grape", "mango", "zebra"]
    assert result.failed_sources == ["wordnik"]
    assert "404" in gen.error_log()["wordnik"]


def test_every_source_failing_raises_all_sources_failed(make_generator):
    gen, _ = make_generator({})
    with pytest.raises(AllSourcesFailed) as exc:
        gen.generate(5, ["common", "wordnik"])
    assert exc.value.failed_sources == ["common", "wordnik"]


def test_no_words_of_length_is_no_matches(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, "cat\ndog\nbook\n")})
    with pytest.raises(NoMatches):
        gen.generate(5, ["common"])


def test_only_invalid_words_is_no_matches(make_generator):
    gen, _ = make_generator({
        GOOGLE_COMMON_URL: (200, "qwxyz\npffft\n"),
        WORDNIK_URL: (500, "boom"),
    })
    with pytest.raises(NoMatches) as exc:
        gen.generate(5, ["common", "wordnik"])
    assert "length 5" in exc.value.message


def test_empty_selection_makes_no_network_calls(make_generator):
    gen, session = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    with pytest.raises(NoSourcesSelected):
        gen.generate(5, [])
    assert session.calls == []


@pytest.mark.parametrize("length, count", [(0, 10), (-2, 10), ("5", 10), (True, 10), (5, 0), (5, 2.5)])
def test_bad_length_or_count(make_generator, length, count):
    gen, session = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    with pytest.raises(InputError):
        gen.generate(length, ["common"], count)
    assert session.calls == []


def test_words_are_unique_across_sources(make_generator):
    gen, _ = make_generator({
        GOOGLE_COMMON_URL: (200, CORPUS),
        WORDNIK_URL: (200, "apple\nmango\nhouse\n"),
    })
    result = gen.generate(5, ["common", "wordnik", "common"])
    assert len(result.words) == len(set(result.words))
    assert sorted(result.words) == ["apple", "candy", "grape", "house", "mango", "zebra"]


def test_all_results_have_requested_length_and_pass_validator(make_generator):
    body = "apple\nbanana\ncat\nhouse\nstreet\nhappy\ncolour\nplate\n"
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, body)})
    result = gen.generate(5, ["common"])
    assert result.words
    assert all(len(w) == 5 and gen.validator.is_valid(w) for w in result.words)


def test_unknown_id_uses_default_corpus(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    result = gen.generate(5, ["bogus"])
    assert sorted(result.words) == ["apple", "candy", "grape", "mango", "zebra"]


def test_unknown_id_failure_is_logged_under_caller_id(make_generator):
    gen, _ = make_generator({})
    with pytest.raises(AllSourcesFailed):
        gen.generate(5, ["bogus"])
    assert "bogus" in gen.error_log()


def test_alias_falls_back_to_enable_by_suffix(make_generator):
    gen, _ = make_generator({
        ADVERBS_URL: (404, "Not Found"),
        ENABLE_URL: (200, "gladly\nquick\nsoftly\ntable\n"),
    })
    result = gen.generate(6, ["adverbs"])
    assert sorted(result.words) == ["gladly", "softly"]
    assert result.failed_sources == []
    assert gen.word_cache()["adverbs"] == ["gladly", "softly"]


def test_alias_with_dead_fallback_fails(make_generator):
    gen, _ = make_generator({})
    with pytest.raises(AllSourcesFailed):
        gen.generate(5, ["nouns"])


def test_generate_words_single_source(make_generator):
    gen, _ = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)}, rng=random.Random(1))
    words = gen.generate_words(5, "google_common", 3)
    assert len(words) == 3
    assert set(words) <= {"apple", "candy", "grape", "mango", "zebra"}
    with pytest.raises(NoMatches):
        gen.generate_words(8, "google_common")


def test_generate_words_propagates_fetch_errors(make_generator):
    gen, _ = make_generator({})
    with pytest.raises(BadStatus):
        gen.generate_words(5, "wordnik")


def test_warm_loads_source(make_generator):
    gen, session = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    assert gen.warm() == 6
    gen.generate(5, ["google_common"])
    assert session.calls == [GOOGLE_COMMON_URL]
    assert gen.warm("wordnik") == 0


def test_denylist_removes_problem_words(make_generator):
    problem_url = "https://example.test/names.txt"
    problem = [SourceSpec(Source("names", "Names", ""), problem_url)]
    validator = WordValidator(ValidatorOptions(enable_denylist=True))
    gen, _ = make_generator(
        {GOOGLE_COMMON_URL: (200, CORPUS), problem_url: (200, "mango\ngrape\n")},
        validator=validator,
        problem_sources=problem,
    )
    result = gen.generate(5, ["common"])
    assert sorted(result.words) == ["apple", "candy", "zebra"]


def test_denylist_skips_unreachable_problem_sources(make_generator):
    problem = [SourceSpec(Source("names", "Names", ""), "https://example.test/gone.txt")]
    gen, _ = make_generator(
        {GOOGLE_COMMON_URL: (200, CORPUS)},
        validator=WordValidator(ValidatorOptions(enable_denylist=True)),
        problem_sources=problem,
    )
    assert sorted(gen.generate(5, ["common"]).words) == ["apple", "candy", "grape", "mango", "zebra"]


def test_unknown_id_error_cleared_after_success(make_generator):
    gen, session = make_generator({})
    with pytest.raises(AllSourcesFailed):
        gen.generate(5, ["bogus"])
    assert "bogus" in gen.error_log()
    session.routes[GOOGLE_COMMON_URL] = (200, CORPUS)
    assert gen.generate(5, ["bogus"]).words
    assert gen.error_log() == {}
