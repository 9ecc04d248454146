"""Phonetic variants for lexicon v1.

Each canonical reading lists the clipped or stretched spellings a recognizer
tends to produce for it. The interpreter folds katakana to hiragana before
matching, so the katakana entries only serve callers that hand raw fragments
to `TokenMatcher` directly.
"""

PHONETIC_VARIANTS = {
    "れい": ["れい", "れー", "れ"],
    "ぜろ": ["ぜろ", "ぜ", "ぜーろ"],
    "いち": ["いっ", "い", "いち", "いっち"],
    "イチ": ["イッ", "イ", "イチ", "イッチ"],
    "に": ["に", "にい", "にー"],
    "ニ": ["ニ", "ニー"],
    "さん": ["さん", "さ", "さーん", "さあん"],
    "サン": ["サン", "サ", "サーン"],
    "し": ["し", "しー", "しぃ"],
    "よん": ["よん", "よ", "よーん", "よおん"],
    "ヨン": ["ヨン", "ヨ", "ヨーン"],
    "ご": ["ご", "ごー", "ごお"],
    "ゴ": ["ゴ", "ゴー"],
    "ろく": ["ろく", "ろ", "ろっ", "ろーく"],
    "ロク": ["ロク", "ロ", "ロッ", "ローク"],
    "しち": ["しち", "し", "しっち", "しーち"],
    "なな": ["なな", "な", "なーな", "なあな"],
    "ナナ": ["ナナ", "ナ", "ナーナ"],
    "はち": ["はち", "は", "はっ", "はーち", "はっち"],
    "ハチ": ["ハチ", "ハ", "ハッ", "ハーチ"],
    "きゅう": ["きゅう", "きゅ", "きゅー", "きゅうう"],
    "く": ["く", "くー", "くう"],
    "キュウ": ["キュウ", "キュ", "キュー"],
    "ク": ["ク", "クー"],
    "じゅう": ["じゅう", "じゅ", "じゅー", "じゅうう", "じゅーう"],
    "ジュウ": ["ジュウ", "ジュ", "ジュー"],
    "ひゃく": ["ひゃく", "ひゃ", "ひゃーく", "ひゃっ", "ひゃくく"],
    "ヒャク": ["ヒャク", "ヒャ", "ヒャーク"],
    "せん": ["せん", "せ", "せーん", "せえん", "せんん"],
    "セン": ["セン", "セ", "セーン"],
    "まん": ["まん", "ま", "まーん", "まあん"],
    "マン": ["マン", "マ", "マーン"],
}
