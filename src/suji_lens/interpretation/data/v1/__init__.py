"""Numeral lexicon v1."""

from suji_lens.interpretation.data.v1.corrections import MISRECOGNITIONS, NOISE_WORDS
from suji_lens.interpretation.data.v1.numerals import DIGITS, TEEN_READINGS, UNITS
from suji_lens.interpretation.data.v1.variants import PHONETIC_VARIANTS

__all__ = [
    "DIGITS",
    "UNITS",
    "TEEN_READINGS",
    "PHONETIC_VARIANTS",
    "MISRECOGNITIONS",
    "NOISE_WORDS",
]
