"""Tests for digit and unit token matching."""

import pytest

from suji_lens.interpretation.matching import TokenMatcher
from suji_lens.interpretation.parser import NumberParser
from suji_lens.interpretation.repository import LexiconRepository


@pytest.fixture(scope="module")
def matcher():
    return TokenMatcher(LexiconRepository())


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("はち", 8),
        ("しち", 7),
        ("し", 4),
        ("九", 9),
        ("ゼロ", 0),
        (" いち ", 1),
    ],
)
def test_basic_digit_exact(matcher, text, expected):
    assert matcher.basic_digit(text) == expected


def test_basic_digit_phonetic_variant(matcher):
    # No digit key is contained in "きゅ"; the clipped variant of きゅう matches.
    assert matcher.basic_digit("きゅ") == 9


def test_basic_digit_unresolved(matcher):
    assert matcher.basic_digit("xyz") is None


def test_basic_digit_or_zero_conflates_zero_and_unresolved(matcher):
    assert matcher.basic_digit_or_zero("xyz") == 0
    assert matcher.basic_digit_or_zero("ぜろ") == 0


def test_find_unit_exact_split(matcher):
    lexicon = matcher.lexicon

    match = matcher.find_unit("にじゅうさん", lexicon.units_for(10))

    assert match is not None
    assert match.unit == "じゅう"
    assert match.multiplier == 10
    assert match.before == "に"
    assert match.after == "さん"
    assert match.similarity == 1.0


def test_find_unit_splits_at_first_occurrence(matcher):
    match = matcher.find_unit("三百百", matcher.lexicon.units_for(100))

    assert match.before == "三"
    assert match.after == "百"


def test_find_unit_partial_reading(matcher):
    match = matcher.find_unit("にじゅ", matcher.lexicon.units_for(10))

    assert match is not None
    assert match.unit == "じゅう"
    assert match.before == "に"
    assert match.after == ""
    assert match.similarity == pytest.approx(0.7)


def test_find_unit_absent(matcher):
    assert matcher.find_unit("さん", matcher.lexicon.units_for(1000)) is None


def test_unresolved_prefix_counts_as_zero(matcher):
    parser = NumberParser(matcher)

    assert parser.parse_magnitude_part("あのじゅうご") == 5


def test_thresholds_are_configurable(matcher):
    strict = TokenMatcher(LexiconRepository(), digit_threshold=0.9)

    # 2/3 similarity to きゅう
    assert matcher.basic_digit("きょう") == 9
    assert strict.basic_digit("きょう") is None


def test_basic_digit_fuzzy_containment_tier():
    loose = TokenMatcher(LexiconRepository(), digit_threshold=0.5)

    # ゼ is only contained in ゼロ (similarity 0.5); no variant is close enough.
    assert loose.basic_digit("ゼ") == 0
    assert TokenMatcher(LexiconRepository()).basic_digit("ゼ") is None


def test_basic_digit_katakana_variant(matcher):
    assert matcher.basic_digit("イッ") == 1


def test_find_unit_keeps_closer_variant_over_partial(matcher):
    match = matcher.find_unit("にじゅー", matcher.lexicon.units_for(10))

    assert match.unit == "じゅう"
    assert match.before == "に"
    assert match.after == ""
    assert match.similarity == pytest.approx(0.75)


def test_find_unit_exact_outranks_partial(matcher):
    match = matcher.find_unit("じゅ十", matcher.lexicon.units_for(10))

    assert match.unit == "十"
    assert match.before == "じゅ"
    assert match.similarity == 1.0
