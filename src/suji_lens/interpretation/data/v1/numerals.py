"""Numeral tokens for lexicon v1."""

# 0-9 in every script a recognizer emits, including formal kanji.
DIGITS = {
    "零": 0,
    "〇": 0,
    "ゼロ": 0,
    "ぜろ": 0,
    "れい": 0,
    "レイ": 0,
    "一": 1,
    "いち": 1,
    "イチ": 1,
    "壱": 1,
    "二": 2,
    "に": 2,
    "ニ": 2,
    "弐": 2,
    "三": 3,
    "さん": 3,
    "サン": 3,
    "参": 3,
    "四": 4,
    "し": 4,
    "よん": 4,
    "シ": 4,
    "ヨン": 4,
    "五": 5,
    "ご": 5,
    "ゴ": 5,
    "六": 6,
    "ろく": 6,
    "ロク": 6,
    "七": 7,
    "しち": 7,
    "なな": 7,
    "シチ": 7,
    "ナナ": 7,
    "八": 8,
    "はち": 8,
    "ハチ": 8,
    "九": 9,
    "きゅう": 9,
    "く": 9,
    "キュウ": 9,
    "ク": 9,
}

# Positional multipliers. びゃく/ぴゃく/ぜん are the voiced forms heard in
# さんびゃく, ろっぴゃく, さんぜん.
UNITS = {
    "十": 10,
    "じゅう": 10,
    "ジュウ": 10,
    "百": 100,
    "ひゃく": 100,
    "びゃく": 100,
    "ぴゃく": 100,
    "ヒャク": 100,
    "ビャク": 100,
    "ピャク": 100,
    "千": 1000,
    "せん": 1000,
    "ぜん": 1000,
    "セン": 1000,
    "ゼン": 1000,
    "万": 10000,
    "まん": 10000,
    "マン": 10000,
}

# Single-tier compounds; only the direct-match shortcut reads these.
TEEN_READINGS = {
    "じゅういち": 11,
    "じゅうに": 12,
    "じゅうさん": 13,
    "じゅうし": 14,
    "じゅうよん": 14,
    "じゅうご": 15,
    "じゅうろく": 16,
    "じゅうしち": 17,
    "じゅうなな": 17,
    "じゅうはち": 18,
    "じゅうきゅう": 19,
    "じゅうく": 19,
    "十一": 11,
    "十二": 12,
    "十三": 13,
    "十四": 14,
    "十五": 15,
    "十六": 16,
    "十七": 17,
    "十八": 18,
    "十九": 19,
}
