from __future__ import annotations

import json
from pathlib import Path

import pytest

from packager.errors import InvalidJsonError
from packager.transformer.json_minifier import minify_json_file, minify_text


def test_minify_text_strips_whitespace() -> None:
    assert minify_text('{"b": 1,   "c":[1,2]}') == '{"b":1,"c":[1,2]}'


def test_minify_text_keeps_key_order_and_unicode() -> None:
    src = '{\n  "z": "caf\\u00e9",\n  "a": ["ü", null, true]\n}\n'
    assert minify_text(src) == '{"z":"café","a":["ü",null,true]}'


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_minify_text_rejects_non_standard_constants(literal: str) -> None:
    with pytest.raises(ValueError):
        minify_text(f'{{"x": {literal}}}')


def test_minify_json_file_writes_equivalent_smaller_output(tmp_path: Path) -> None:
    src = tmp_path / "in.json"
    payload = {"name": "pack", "items": [1, 2.5, {"deep": [None, False]}], "text": "a b  c"}
    src.write_text(json.dumps(payload, indent=4), encoding="utf-8")
    dst = tmp_path / "out" / "nested" / "in.json"

    result = minify_json_file(src, dst)

    assert json.loads(dst.read_text(encoding="utf-8")) == payload
    assert result.output_bytes == dst.stat().st_size
    assert result.output_bytes <= result.source_bytes
    assert not dst.read_bytes().endswith(b"\n")


def test_minify_json_file_rejects_malformed_without_writing(tmp_path: Path) -> None:
    src = tmp_path / "bad.json"
    src.write_text("{not valid}", encoding="utf-8")
    dst = tmp_path / "out" / "bad.json"

    with pytest.raises(InvalidJsonError) as excinfo:
        minify_json_file(src, dst)

    assert excinfo.value.path == str(src)
    assert not dst.exists()


def test_minify_json_file_treats_invalid_utf8_as_malformed(tmp_path: Path) -> None:
    src = tmp_path / "latin.json"
    src.write_bytes(b'{"k": "\xff\xfe"}')

    with pytest.raises(InvalidJsonError):
        minify_json_file(src, tmp_path / "out.json")


@pytest.mark.parametrize("literal", ["1e400", "-1e400", "1.5E+999"])
def test_minify_text_writes_out_of_range_numbers_as_null(literal: str) -> None:
    assert minify_text(f'{{"x": {literal}, "y": 1}}') == '{"x":null,"y":1}'


def test_minify_json_file_keeps_file_with_out_of_range_number(tmp_path: Path) -> None:
    src = tmp_path / "big.json"
    src.write_text('{"x": 1e400}', encoding="utf-8")
    dst = tmp_path / "out" / "big.json"

    minify_json_file(src, dst)

    assert dst.read_text(encoding="utf-8") == '{"x":null}'


@pytest.mark.parametrize(
    "text",
    [
        '{"b":1,"c":[1,2]}',
        "[]",
        '"plain string"',
        "  \n\t{ \"a\" :\n [ 1 ,\t2 , 3 ] ,\r\n \"b\" : { } }  \n",
        '[\n    {\n        "id": 1,\n        "tags": [\n            "x",\n            "y"\n        ]\n    }\n]\n',
        '{"nested":{"deep":{"deeper":[null,true,false,0,-1,2.5]}}}',
        '{"u": "\\u00e9\\u4e2d"}',
    ],
)
def test_minify_never_enlarges_whitespace_heavy_or_minified_input(text: str) -> None:
    minified = minify_text(text)

    assert json.loads(minified) == json.loads(text)
    assert len(minified.encode("utf-8")) <= len(text.encode("utf-8"))


def test_minify_rewrites_exponent_floats_in_python_form() -> None:
    # known exception to the size bound: exponent literals are re-rendered
    assert minify_text("[1E2]") == "[100.0]"
