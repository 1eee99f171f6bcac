# tests/test_standard.py
from decimal import Decimal

import pytest

from puzzlecodec import (
    MalformedPayload, UnknownShortcut, compress_text, decode_standard, encode, grid_url,
    shortcut_url, try_decode_standard,
)
from puzzlecodec.standard import to_json


def test_roundtrip(fpuzzle, fpuzzle_payload):
    decoded = decode_standard(fpuzzle_payload)
    assert decoded == fpuzzle
    assert decoded["weight"] == Decimal("1.25")


def test_json_is_compact_and_unescaped():
    value = {"a": [1, "x"], "b": None, "c": True, "d": "ü 'q' \"dq\"", "e": Decimal("0.10")}
    assert to_json(value) == '{"a":[1,"x"],"b":null,"c":true,"d":"ü \'q\' \\"dq\\"","e":0.10}'


def test_no_sparse_convention_in_standard_format():
    assert to_json([{}, 5, {}]) == "[{},5,{}]"
    assert decode_standard(encode([{}, 5, {}])) == [{}, 5, {}]


def test_astral_text_survives():
    value = {"title": "Jigsaw 🧩"}
    assert decode_standard(encode(value)) == value


def test_not_json_is_malformed():
    with pytest.raises(MalformedPayload):
        decode_standard(compress_text("{size:9}"))


def test_try_decode_swallows_codec_errors():
    assert try_decode_standard("!!!!") is None
    assert try_decode_standard(compress_text("nope")) is None


def test_unencodable():
    with pytest.raises(TypeError):
        encode({"x": {1, 2}})
    with pytest.raises(ValueError):
        encode({"x": float("nan")})


@pytest.mark.parametrize("target, prefix", [
    ("fpuzzles", "https://f-puzzles.com/?load="),
    ("sudokupad", "https://sudokupad.app/fpuzzles"),
    ("beta-sudokupad", "https://beta.sudokupad.app/fpuzzles"),
    ("sudokupad-beta", "https://beta.sudokupad.app/fpuzzles"),
])
def test_shortcut_url(fpuzzle, fpuzzle_payload, target, prefix):
    assert shortcut_url(fpuzzle, target) == prefix + fpuzzle_payload


def test_unknown_shortcut(fpuzzle):
    with pytest.raises(UnknownShortcut) as exc:
        shortcut_url(fpuzzle, "penpa")
    assert exc.value.code == "SHORTCUT_UNKNOWN"
    assert "sudokupad" in exc.value.hint


def test_grid_url(fpuzzle, fpuzzle_payload):
    url = grid_url(fpuzzle)
    assert url.endswith(f"fpuzzles{fpuzzle_payload}_512x512.svg")
    assert url.startswith("https://")


def test_deep_nesting_is_malformed():
    payload = compress_text("[" * 100000 + "]" * 100000)
    with pytest.raises(MalformedPayload):
        decode_standard(payload)
    assert try_decode_standard(payload) is None


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_rejected(constant):
    with pytest.raises(MalformedPayload):
        decode_standard(compress_text('{"size":%s}' % constant))


@pytest.mark.parametrize("text", ['{"title":"\\ud800"}', '{"\\udc00":1}', '["ok",["\\ud83e"]]'])
def test_unpaired_surrogate_escapes_rejected(text):
    with pytest.raises(MalformedPayload):
        decode_standard(compress_text(text))


def test_paired_surrogate_escapes_decode():
    value = decode_standard(compress_text('{"title":"\\ud83e\\udde9"}'))
    assert value == {"title": "🧩"}
    assert decode_standard(encode(value)) == value
