"""Recursive composition of Japanese numerals up to 99999."""

from __future__ import annotations

from suji_lens.interpretation.matching import TokenMatcher

MAN = 10000
MAGNITUDE_TIERS = (1000, 100, 10)


class NumberParser:
    """Composes digit and unit matches tier by tier.

    Example:
        "二千三百四十五" -> 千 splits "二" / "三百四十五", 百 splits "三" / "四十五",
        十 splits "四" / "五", giving 2000 + 300 + 40 + 5.
    """

    def __init__(self, matcher: TokenMatcher):
        self.matcher = matcher
        lexicon = matcher.lexicon
        self._tiers = {multiplier: lexicon.units_for(multiplier) for multiplier in MAGNITUDE_TIERS}
        self._man_units = lexicon.units_for(MAN)

    def parse_magnitude_part(self, text: str) -> int:
        """Parse the 0-9999 range (thousands, hundreds, tens and units)."""

        for multiplier in MAGNITUDE_TIERS:
            match = self.matcher.find_unit(text, self._tiers[multiplier])
            if match is None:
                continue

            if match.before:
                result = self.matcher.basic_digit_or_zero(match.before) * multiplier
            else:
                result = multiplier

            if match.after:
                if multiplier > 10:
                    result += self.parse_magnitude_part(match.after)
                else:
                    result += self.matcher.basic_digit_or_zero(match.after)
            return result

        return self.matcher.basic_digit_or_zero(text)

    def parse_full_number(self, text: str) -> int | None:
        """Parse 1-99999; ``None`` means nothing was recognized.

        Zero is never produced here: without a 万 token a result of 0 is
        reported as ``None``.
        """

        match = self.matcher.find_unit(text, self._man_units)
        if match:
            result = self.parse_magnitude_part(match.before) * MAN if match.before else MAN
            if match.after:
                result += self.parse_magnitude_part(match.after)
            return result

        parsed = self.parse_magnitude_part(text)
        return parsed if parsed > 0 else None
