"""Validate numeral lexicon consistency.

Checks:
1. Phonetic variant canonicals are digit or unit keys.
2. Digit and unit keys do not overlap.
3. Every misrecognition target interprets to a number.
4. Every teen reading parses to its own value through the recursive parser.
"""

from __future__ import annotations

import argparse

from suji_lens.exceptions import LexiconError
from suji_lens.interpretation import InterpreterConfig, NumberInterpreter, normalize_script


def fail(message: str) -> None:
    print(f"[lexicon-check] ERROR: {message}")
    raise SystemExit(1)


def validate_variant_canonicals(interpreter: NumberInterpreter) -> None:
    lexicon = interpreter.lexicon
    for base in lexicon.phonetic_variants:
        if base not in lexicon.digits and base not in lexicon.units:
            fail(f"Phonetic variants reference unknown token: {base}")


def validate_disjoint_keys(interpreter: NumberInterpreter) -> None:
    lexicon = interpreter.lexicon
    overlap = sorted(set(lexicon.digits) & set(lexicon.units))
    if overlap:
        fail(f"Tokens listed as both digit and unit: {overlap}")


def validate_correction_targets(interpreter: NumberInterpreter) -> None:
    for wrong, right in interpreter.lexicon.misrecognitions.items():
        if interpreter.interpret(right).number is None:
            fail(f"Correction target does not interpret to a number: {wrong} -> {right}")


def validate_teen_readings(interpreter: NumberInterpreter) -> None:
    for reading, expected in interpreter.lexicon.teen_readings.items():
        parsed = interpreter.parser.parse_full_number(normalize_script(reading))
        if parsed != expected:
            fail(f"Teen reading {reading} parses to {parsed}, expected {expected}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--version", default="v1", help="Lexicon version to check")
    parser.add_argument("--corrections", default=None, help="Extra corrections JSON file")
    args = parser.parse_args()

    try:
        interpreter = NumberInterpreter(
            InterpreterConfig(lexicon_version=args.version, corrections_path=args.corrections)
        )
    except LexiconError as exc:
        fail(str(exc))

    validate_variant_canonicals(interpreter)
    validate_disjoint_keys(interpreter)
    validate_correction_targets(interpreter)
    validate_teen_readings(interpreter)

    print("[lexicon-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
