"""Edit-distance based string similarity."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Return the unit-cost insert/delete/substitute distance between two strings.

    Characters are compared per code point, so kana and kanji count as one
    character each.
    """

    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / max(len)`` in ``[0, 1]``; two empty strings are identical."""

    return Levenshtein.normalized_similarity(a, b)
