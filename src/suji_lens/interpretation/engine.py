"""Interpretation engine for Japanese spoken numbers."""

from __future__ import annotations

import logging
import os
import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache

import jaconv

from suji_lens.interpretation.matching import (
    DIGIT_FUZZY_THRESHOLD,
    PARTIAL_UNIT_SIMILARITY,
    UNIT_FUZZY_THRESHOLD,
    TokenMatcher,
)
from suji_lens.interpretation.parser import NumberParser
from suji_lens.interpretation.repository import LexiconRepository
from suji_lens.interpretation.similarity import similarity
from suji_lens.interpretation.types import ExtractionResult, Method

logger = logging.getLogger(__name__)

_ASCII_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ScoreWeights:
    keyword_match: float = 10
    fuzzy_match_base: float = 5
    number_conversion: float = 50
    compound_number_bonus: float = 15
    arabic_numeral: float = 30
    length_bonus_per_char: float = 0.5
    single_char_penalty: float = -20
    short_text_penalty: float = -25
    noise_word_penalty: float = -15
    three_digit_penalty: float = -10
    four_digit_penalty: float = -25
    repeating_pattern_penalty: float = -15


SCORE = ScoreWeights()


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class InterpreterConfig:
    lexicon_version: str = "v1"
    digit_fuzzy_threshold: float = DIGIT_FUZZY_THRESHOLD
    unit_fuzzy_threshold: float = UNIT_FUZZY_THRESHOLD
    partial_unit_similarity: float = PARTIAL_UNIT_SIMILARITY
    corrections_path: str | None = None

    @classmethod
    def from_env(cls) -> "InterpreterConfig":
        return cls(
            lexicon_version=os.getenv("SUJI_LENS_LEXICON_VERSION", "v1").strip() or "v1",
            digit_fuzzy_threshold=_safe_float(
                os.getenv("SUJI_LENS_DIGIT_FUZZY_THRESHOLD"), DIGIT_FUZZY_THRESHOLD
            ),
            unit_fuzzy_threshold=_safe_float(
                os.getenv("SUJI_LENS_UNIT_FUZZY_THRESHOLD"), UNIT_FUZZY_THRESHOLD
            ),
            partial_unit_similarity=_safe_float(
                os.getenv("SUJI_LENS_PARTIAL_UNIT_SIMILARITY"), PARTIAL_UNIT_SIMILARITY
            ),
            corrections_path=os.getenv("SUJI_LENS_CORRECTIONS_PATH") or None,
        )


class NumberInterpreter:
    """Lexicon-first interpreter turning transcripts into numerals.

    Instances hold only read-only tables and can be shared between threads.
    """

    def __init__(self, config: InterpreterConfig | None = None):
        self.config = config or InterpreterConfig()
        self.lexicon = LexiconRepository(
            version=self.config.lexicon_version,
            corrections_path=self.config.corrections_path,
        )
        self.matcher = TokenMatcher(
            self.lexicon,
            digit_threshold=self.config.digit_fuzzy_threshold,
            unit_threshold=self.config.unit_fuzzy_threshold,
            partial_similarity=self.config.partial_unit_similarity,
        )
        self.parser = NumberParser(self.matcher)
        self._numeral_tokens = self._build_numeral_tokens()

    def extract_number(self, text: str) -> str:
        """Convert a transcript fragment to a numeral string.

        The original text comes back unchanged when no numeral is found, so
        callers must check for a pure-digit result before trusting it.
        """

        return self.interpret(text).value

    def interpret(self, text: str) -> ExtractionResult:
        literal = _ASCII_DIGITS.search(unicodedata.normalize("NFKC", text))
        if literal:
            return self._result(text, literal.group(0), "literal")

        corrected, corrections = self.correct_misrecognition(text)
        normalized = normalize_script(corrected)

        direct = self._match_direct(normalized)
        if direct is not None:
            return self._result(text, str(direct), "direct", corrected, corrections)

        parsed = self.parser.parse_full_number(normalized)
        if parsed is not None:
            return self._result(text, str(parsed), "parsed", corrected, corrections)

        for key, value in self.lexicon.digits.items():
            if key.lower() in normalized:
                return self._result(text, str(value), "fallback", corrected, corrections)

        return ExtractionResult(
            raw=text,
            value=text,
            method="unmapped",
            corrected_text=corrected,
            corrections=corrections,
        )

    def correct_misrecognition(self, text: str) -> tuple[str, list[str]]:
        """Replace known misheard phrases; a whole-string hit stops the scan."""

        corrected = text
        applied: list[str] = []
        for wrong, right in self.lexicon.misrecognitions.items():
            if corrected == wrong:
                applied.append(f"{wrong}->{right}")
                logger.debug("corrected misrecognition %r -> %r", text, right)
                return right, applied
            if wrong in corrected:
                corrected = corrected.replace(wrong, right)
                applied.append(f"{wrong}->{right}")

        if applied:
            logger.debug("corrected misrecognition %r -> %r", text, corrected)
        return corrected, applied

    def score(self, text: str) -> float:
        """Rate how number-like a transcript is; only meaningful relative to other candidates."""

        score = 0.0
        normalized = normalize_script(text)
        has_arabic = _ASCII_DIGITS.search(text) is not None
        misrecognized = self.lexicon.is_misrecognition(text)

        if misrecognized:
            score += SCORE.number_conversion

        keyword_hits = sum(1 for keyword in self.lexicon.numeral_keywords if keyword.lower() in normalized)
        score += keyword_hits * SCORE.keyword_match

        for variants in self.lexicon.phonetic_variants.values():
            for variant in variants:
                ratio = similarity(normalized, variant)
                if ratio >= self.config.digit_fuzzy_threshold:
                    score += SCORE.fuzzy_match_base * ratio

        extracted = self.extract_number(text)
        is_numeric = _ASCII_DIGITS.fullmatch(extracted) is not None
        if is_numeric and extracted != text:
            score += SCORE.number_conversion
            if len(extracted) >= 2:
                score += SCORE.compound_number_bonus

        if has_arabic:
            score += SCORE.arabic_numeral

        unit_hits = sum(1 for unit in self.lexicon.compound_units if unit.lower() in normalized)
        score += unit_hits * SCORE.compound_number_bonus

        score += len(text) * SCORE.length_bonus_per_char

        # Short fragments are only suspicious when they hold no numeral token at all.
        if not has_arabic and keyword_hits == 0:
            if len(text) == 1:
                score += SCORE.single_char_penalty
            if len(text) <= 2 and unit_hits == 0 and not misrecognized:
                score += SCORE.short_text_penalty

        if not misrecognized:
            for word in self.lexicon.noise_words:
                if word in normalized:
                    score += SCORE.noise_word_penalty

        if is_numeric:
            score += _magnitude_penalty(int(extracted))
            if _has_repeating_pattern(extracted):
                score += SCORE.repeating_pattern_penalty

        return score

    def _match_direct(self, text: str) -> int | None:
        best_key: str | None = None
        for key in self.lexicon.direct_matches:
            if key.lower() in text and (best_key is None or len(key) > len(best_key)):
                best_key = key
        if best_key is None:
            return None

        start = text.find(best_key.lower())
        end = start + len(best_key)
        if not self._covers_all_numerals(text, start, end):
            return None
        return self.lexicon.direct_matches[best_key]

    def _covers_all_numerals(self, text: str, start: int, end: int) -> bool:
        for token in self._numeral_tokens:
            position = text.find(token)
            while position != -1:
                if position < start or position + len(token) > end:
                    return False
                position = text.find(token, position + 1)
        return True

    def _build_numeral_tokens(self) -> tuple[str, ...]:
        tokens = [key.lower() for key in (*self.lexicon.digits, *self.lexicon.units)]
        # Clipped unit readings count too; single kana such as せ or ま are too
        # common in ordinary speech.
        for unit in self.lexicon.units:
            clipped = [*self.lexicon.phonetic_variants.get(unit, ()), unit[:-1]]
            tokens.extend(token for token in clipped if len(token) >= 2)
        return tuple(dict.fromkeys(tokens))

    def _result(
        self,
        raw: str,
        value: str,
        method: Method,
        corrected: str | None = None,
        corrections: list[str] | None = None,
    ) -> ExtractionResult:
        return ExtractionResult(
            raw=raw,
            value=value,
            number=int(value),
            method=method,
            corrected_text=corrected,
            corrections=corrections or [],
        )


def normalize_script(text: str) -> str:
    """Fold width variants, lowercase, and map katakana onto hiragana."""

    return jaconv.kata2hira(unicodedata.normalize("NFKC", text).lower())


def _magnitude_penalty(value: int) -> float:
    # Practice answers are small; large values are usually misheard fragments.
    if value >= 1000:
        return SCORE.four_digit_penalty
    if value >= 100:
        return SCORE.three_digit_penalty
    return 0.0


def _has_repeating_pattern(numeral: str) -> bool:
    if len(numeral) < 3:
        return False
    half = len(numeral) // 2
    if len(numeral) % 2 == 0 and numeral[:half] == numeral[half:]:
        return True
    return len(set(numeral)) == 1


@lru_cache(maxsize=1)
def get_default_interpreter() -> NumberInterpreter:
    return NumberInterpreter(InterpreterConfig.from_env())


def extract_number(text: str) -> str:
    """Convert a transcript fragment to a numeral string using the default lexicon."""

    return get_default_interpreter().extract_number(text)


def score_number_candidate(text: str) -> float:
    """Score how number-like a transcript fragment is using the default lexicon."""

    return get_default_interpreter().score(text)
