"""Misrecognition corrections and noise words for lexicon v1."""

# Homophones the recognizer prefers over a bare numeral reading.
MISRECOGNITIONS = {
    "自由": "じゅう",
    "銃": "じゅう",
    "蜂": "はち",
    "鉢": "はち",
    "位置": "いち",
    "碁": "ご",
    "語": "ご",
    "苦": "く",
    "球": "きゅう",
    "急": "きゅう",
    "質": "しち",
    "ロック": "ろく",
    "酸": "さん",
    "線": "せん",
    "満": "まん",
}

NOISE_WORDS = ["です", "ます", "でした", "ました", "は", "が", "を", "の", "と"]
