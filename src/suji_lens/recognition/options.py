"""Speech engine options for numeral recognition."""

from __future__ import annotations

import jaconv
from pydantic import BaseModel, Field

_DIGIT_READINGS = {
    1: "いち",
    2: "に",
    3: "さん",
    4: "よん",
    5: "ご",
    6: "ろく",
    7: "なな",
    8: "はち",
    9: "きゅう",
}
_DIGIT_KANJI = "一二三四五六七八九"
_EXTRA_READINGS = ["ぜろ", "れい", "し", "しち", "く", "じゅうし", "じゅうしち", "じゅうく", "しちじゅう"]


def default_contextual_strings() -> list[str]:
    """Phrases that bias the engine towards numerals: 0-100 as digits and readings."""

    phrases = [str(i) for i in range(101)]
    phrases.extend(_DIGIT_READINGS.values())
    phrases.extend(_EXTRA_READINGS)
    phrases.extend(jaconv.hira2kata(reading) for reading in _DIGIT_READINGS.values())

    for tens in range(1, 10):
        tens_reading = "じゅう" if tens == 1 else f"{_DIGIT_READINGS[tens]}じゅう"
        tens_kanji = "十" if tens == 1 else f"{_DIGIT_KANJI[tens - 1]}十"
        phrases.extend([tens_reading, tens_kanji])
        for ones in range(1, 10):
            phrases.append(f"{tens_reading}{_DIGIT_READINGS[ones]}")
            phrases.append(f"{tens_kanji}{_DIGIT_KANJI[ones - 1]}")

    phrases.extend(["ひゃく", "百"])
    return list(dict.fromkeys(phrases))


class RecognitionOptions(BaseModel):
    """Options handed to a recognition source on start."""

    lang: str = "ja-JP"
    interim_results: bool = True
    max_alternatives: int = Field(default=5, ge=1)
    continuous: bool = True
    requires_on_device_recognition: bool = False
    adds_punctuation: bool = False
    contextual_strings: list[str] = Field(default_factory=default_contextual_strings)
