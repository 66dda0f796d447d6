import pytest

from slangd.jsonutil import read_optional, read_required, write_optional


def test_read_optional_missing_is_none():
    assert read_optional({"other": 1}, "key", int) is None


def test_read_optional_null_is_none():
    assert read_optional({"key": None}, "key", int) is None


def test_read_optional_converts_value():
    assert read_optional({"key": "12"}, "key", int) == 12


def test_read_optional_without_converter_returns_raw():
    payload = {"nested": [1, 2]}
    assert read_optional({"key": payload}, "key") == payload


def test_read_optional_rejects_non_object():
    with pytest.raises(TypeError):
        read_optional(["key"], "key")


def test_write_optional_skips_none():
    obj = {}
    write_optional(obj, "key", None, str)
    assert obj == {}


def test_write_optional_writes_converted():
    obj = {}
    write_optional(obj, "key", 5, str)
    assert obj == {"key": "5"}


def test_write_optional_keeps_false_values():
    obj = {}
    write_optional(obj, "flag", False)
    assert obj == {"flag": False}


def test_read_required_returns_value():
    assert read_required({"query": "abc"}, "query", str.upper) == "ABC"


def test_read_required_keeps_null():
    assert read_required({"settings": None}, "settings") is None


def test_read_required_missing_raises():
    with pytest.raises(KeyError):
        read_required({}, "query")


def test_read_required_rejects_non_object():
    with pytest.raises(TypeError):
        read_required("text", "query")


def test_round_trip_through_write_and_read():
    obj = {}
    write_optional(obj, "items", [3, 4], list)
    assert read_required(obj, "items", tuple) == (3, 4)