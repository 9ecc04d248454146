"""Tests for the interpretation engine."""

import json
import logging

import pytest

from suji_lens import extract_number
from suji_lens.exceptions import LexiconError
from suji_lens.interpretation import InterpreterConfig, NumberInterpreter, normalize_script


@pytest.fixture(scope="module")
def interpreter():
    return NumberInterpreter()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123abc", "123"),
        ("42", "42"),
        ("４２", "42"),
        ("にじゅうさん", "23"),
        ("二千三百四十五", "2345"),
        ("一万", "10000"),
        ("千", "1000"),
        ("百", "100"),
        ("十", "10"),
        ("じゅうし", "14"),
        ("じゅうさん", "13"),
        ("しち", "7"),
        ("に", "2"),
        ("にじゅう", "20"),
        ("ニジュウ", "20"),
        ("にじゅ", "20"),
        ("さんびゃく", "300"),
        ("ろっぴゃく", "600"),
        ("さんぜん", "3000"),
        ("自由", "10"),
        ("自由です", "10"),
    ],
)
def test_extract_number(interpreter, text, expected):
    assert interpreter.extract_number(text) == expected


def test_unit_reading_is_not_read_as_digit(interpreter):
    # ひゃく contains く (9); the whole token must win.
    assert interpreter.extract_number("ひゃく") == "100"


def test_unmapped_returns_original_text(interpreter):
    assert interpreter.extract_number("abc") == "abc"
    assert interpreter.extract_number("") == ""


def test_incidental_kana_is_read_as_digit(interpreter):
    assert interpreter.extract_number("こんにちは") == "2"


def test_interpret_reports_method(interpreter):
    assert interpreter.interpret("123abc").method == "literal"
    assert interpreter.interpret("に").method == "direct"
    assert interpreter.interpret("にじゅう").method == "parsed"

    unmapped = interpreter.interpret("abc")
    assert unmapped.method == "unmapped"
    assert unmapped.number is None


def test_interpret_records_corrections(interpreter):
    result = interpreter.interpret("自由です")

    assert result.number == 10
    assert result.corrected_text == "じゅうです"
    assert result.corrections == ["自由->じゅう"]


def test_correct_misrecognition_whole_string(interpreter, caplog):
    caplog.set_level(logging.DEBUG, logger="suji_lens.interpretation.engine")

    corrected, applied = interpreter.correct_misrecognition("自由")

    assert corrected == "じゅう"
    assert applied == ["自由->じゅう"]
    assert "corrected misrecognition" in caplog.text


def test_correct_misrecognition_untouched(interpreter):
    assert interpreter.correct_misrecognition("にじゅう") == ("にじゅう", [])


def test_normalize_script():
    assert normalize_script("ニジュウ") == "にじゅう"
    assert normalize_script("ＡＢ１") == "ab1"


def test_module_level_extract_number():
    assert extract_number("にじゅうさん") == "23"


def test_extra_corrections_file(tmp_path):
    path = tmp_path / "corrections.json"
    path.write_text(json.dumps({"ハロー": "ご"}, ensure_ascii=False), encoding="utf-8")

    interpreter = NumberInterpreter(InterpreterConfig(corrections_path=str(path)))

    assert NumberInterpreter().extract_number("ハロー") == "ハロー"
    assert interpreter.extract_number("ハロー") == "5"


def test_unknown_lexicon_version_raises():
    with pytest.raises(LexiconError):
        NumberInterpreter(InterpreterConfig(lexicon_version="v99"))


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SUJI_LENS_LEXICON_VERSION", " v1 ")
    monkeypatch.setenv("SUJI_LENS_DIGIT_FUZZY_THRESHOLD", "not-a-number")
    monkeypatch.setenv("SUJI_LENS_UNIT_FUZZY_THRESHOLD", "0.4")
    monkeypatch.delenv("SUJI_LENS_PARTIAL_UNIT_SIMILARITY", raising=False)
    monkeypatch.setenv("SUJI_LENS_CORRECTIONS_PATH", str(tmp_path / "extra.json"))

    config = InterpreterConfig.from_env()

    assert config.lexicon_version == "v1"
    assert config.digit_fuzzy_threshold == 0.6
    assert config.unit_fuzzy_threshold == 0.4
    assert config.partial_unit_similarity == 0.7
    assert config.corrections_path == str(tmp_path / "extra.json")


def test_config_from_env_defaults(monkeypatch):
    for name in (
        "SUJI_LENS_LEXICON_VERSION",
        "SUJI_LENS_DIGIT_FUZZY_THRESHOLD",
        "SUJI_LENS_UNIT_FUZZY_THRESHOLD",
        "SUJI_LENS_PARTIAL_UNIT_SIMILARITY",
        "SUJI_LENS_CORRECTIONS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    assert InterpreterConfig.from_env() == InterpreterConfig()


@pytest.mark.parametrize(
    "text",
    ["にじゅうさん", "123abc", "自由です", "一万二千三百四十五", "こんにちは", "abc", ""],
)
def test_extract_number_is_idempotent(interpreter, text):
    once = interpreter.extract_number(text)

    assert interpreter.extract_number(once) == once


def test_five_digit_number_with_tail(interpreter):
    assert interpreter.extract_number("一万二千三百四十五") == "12345"
    assert interpreter.interpret("一万二千三百四十五").method == "parsed"
