"""Exact and fuzzy lookup of digit and unit tokens."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from suji_lens.interpretation.repository import LexiconRepository
from suji_lens.interpretation.similarity import similarity

DIGIT_FUZZY_THRESHOLD = 0.6
UNIT_FUZZY_THRESHOLD = 0.5
PARTIAL_UNIT_SIMILARITY = 0.7


@dataclass(frozen=True)
class UnitMatch:
    """A positional unit located in free text.

    ``before`` and ``after`` are the text on either side of the matched token;
    an empty string means the side is absent.
    """

    unit: str
    multiplier: int
    before: str
    after: str
    similarity: float = 1.0


class TokenMatcher:
    """Resolves digit and unit tokens with exact, phonetic and fuzzy tiers."""

    def __init__(
        self,
        lexicon: LexiconRepository,
        *,
        digit_threshold: float = DIGIT_FUZZY_THRESHOLD,
        unit_threshold: float = UNIT_FUZZY_THRESHOLD,
        partial_similarity: float = PARTIAL_UNIT_SIMILARITY,
    ):
        self.lexicon = lexicon
        self.digit_threshold = digit_threshold
        self.unit_threshold = unit_threshold
        self.partial_similarity = partial_similarity

    def basic_digit(self, text: str) -> int | None:
        """Resolve a short fragment to 0-9, or ``None`` when nothing qualifies."""

        value = text.lower().strip()
        for match in (self._match_digit_exact, self._match_digit_phonetic, self._match_digit_fuzzy):
            digit = match(value)
            if digit is not None:
                return digit
        return None

    def basic_digit_or_zero(self, text: str) -> int:
        # An unresolved fragment counts as zero; callers cannot tell the two apart.
        digit = self.basic_digit(text)
        return digit if digit is not None else 0

    def find_unit(self, text: str, units: Mapping[str, int]) -> UnitMatch | None:
        """Locate one unit token of ``units`` in ``text`` and split around it."""

        exact = self._match_unit_exact(text, units)
        if exact:
            return exact

        best: UnitMatch | None = None
        for unit, multiplier in units.items():
            for variant in self.lexicon.phonetic_variants.get(unit, (unit,)):
                score = similarity(text, variant)
                if score < self.unit_threshold or variant not in text:
                    continue
                if best is None or score > best.similarity:
                    best = _split(text, variant, unit, multiplier, score)

            # じゅう heard as じゅ, せん as せ
            partial = unit[: max(1, len(unit) - 1)]
            if partial in text and (best is None or self.partial_similarity > best.similarity):
                best = _split(text, partial, unit, multiplier, self.partial_similarity)

        return best

    def _match_digit_exact(self, value: str) -> int | None:
        for key, digit in self.lexicon.digit_lookup_order:
            if key.lower() in value:
                return digit
        return None

    def _match_digit_phonetic(self, value: str) -> int | None:
        digits = self.lexicon.digits
        for base, variants in self.lexicon.phonetic_variants.items():
            if base not in digits:
                continue
            for variant in variants:
                if similarity(value, variant) >= self.digit_threshold:
                    return digits[base]
        return None

    def _match_digit_fuzzy(self, value: str) -> int | None:
        best_ratio = 0.0
        best_digit: int | None = None
        for key, digit in self.lexicon.digits.items():
            key_lower = key.lower()
            if value not in key_lower and key_lower not in value:
                continue
            ratio = similarity(value, key_lower)
            if ratio >= self.digit_threshold and ratio > best_ratio:
                best_ratio = ratio
                best_digit = digit
        return best_digit

    @staticmethod
    def _match_unit_exact(text: str, units: Mapping[str, int]) -> UnitMatch | None:
        for unit, multiplier in units.items():
            if unit in text:
                return _split(text, unit, unit, multiplier, 1.0)
        return None


def _split(text: str, token: str, unit: str, multiplier: int, score: float) -> UnitMatch:
    before, _, after = text.partition(token)
    return UnitMatch(
        unit=unit,
        multiplier=multiplier,
        before=before,
        after=after,
        similarity=score,
    )
