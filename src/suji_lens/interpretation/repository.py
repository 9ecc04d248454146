"""Lexicon repository for numeral interpretation."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import import_module
from pathlib import Path
from types import MappingProxyType

from suji_lens.exceptions import LexiconError

ARABIC_DIGITS = tuple(str(i) for i in range(10))
COMPOUND_MULTIPLIERS = (10, 100, 1000)


class LexiconRepository:
    """Loads numeral tables from packaged lexicon data.

    Every table is exposed read-only; the repository has no mutation API.
    """

    def __init__(self, version: str = "v1", corrections_path: str | None = None):
        self.version = version
        module = self._load_module()

        self.digits: Mapping[str, int] = MappingProxyType(dict(module.DIGITS))
        self.units: Mapping[str, int] = MappingProxyType(dict(module.UNITS))
        self.teen_readings: Mapping[str, int] = MappingProxyType(dict(module.TEEN_READINGS))
        self.phonetic_variants: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {base: tuple(variants) for base, variants in module.PHONETIC_VARIANTS.items()}
        )
        corrections = dict(module.MISRECOGNITIONS)
        if corrections_path:
            corrections.update(_load_corrections(Path(corrections_path)))
        self.misrecognitions: Mapping[str, str] = MappingProxyType(corrections)
        self.noise_words: tuple[str, ...] = tuple(dict.fromkeys(module.NOISE_WORDS))

        # Longest keys first so that しち is tried before し.
        self.digit_lookup_order: tuple[tuple[str, int], ...] = tuple(
            sorted(self.digits.items(), key=lambda item: -len(item[0]))
        )
        self.direct_matches: Mapping[str, int] = MappingProxyType(
            {**self.digits, **self.teen_readings}
        )
        self.numeral_keywords: tuple[str, ...] = tuple(
            dict.fromkeys([*self.digits, *self.units, *ARABIC_DIGITS])
        )
        self.compound_units: tuple[str, ...] = tuple(
            unit for unit, multiplier in self.units.items() if multiplier in COMPOUND_MULTIPLIERS
        )

    def units_for(self, multiplier: int) -> Mapping[str, int]:
        """Return the unit tokens of one positional tier, in table order."""

        return MappingProxyType(
            {unit: value for unit, value in self.units.items() if value == multiplier}
        )

    def is_misrecognition(self, text: str) -> bool:
        return any(wrong in text for wrong in self.misrecognitions)

    def _load_module(self):
        try:
            return import_module(f"suji_lens.interpretation.data.{self.version}")
        except ModuleNotFoundError as exc:
            raise LexiconError(f"Unknown lexicon version: {self.version}") from exc


def _load_corrections(path: Path) -> dict[str, str]:
    if not path.exists():
        raise LexiconError(f"Corrections file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LexiconError(f"Corrections file is not valid JSON: {path}") from exc
    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise LexiconError(f"Corrections file must map strings to strings: {path}")
    return data
