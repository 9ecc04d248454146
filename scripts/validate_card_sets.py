"""Validate card set definitions.

Checks that every declared card count matches the number of cards the set's
operand and answer ranges actually generate.
"""

from __future__ import annotations

from suji_lens.cards import ALL_CARD_SETS, validate_card_set


def main() -> int:
    failures = 0
    for definition in ALL_CARD_SETS:
        result = validate_card_set(definition)
        if result.is_valid:
            print(f"[card-set-check] {result.message}")
            continue
        failures += 1
        print(f"[card-set-check] ERROR: {result.message}")

    if failures:
        print(f"[card-set-check] {failures} card set(s) out of sync")
        return 1

    print("[card-set-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
