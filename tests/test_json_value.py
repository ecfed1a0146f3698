"""Tests for the JSON value model"""
import pytest

from variant_schema.exceptions import DocumentParseError
from variant_schema.models.json_value import (
    FrozenJsonObject,
    JsonType,
    canonical_json,
    dump_json,
    freeze_json,
    is_json_type,
    json_equal,
    json_type_of,
    parse_json,
    thaw_json,
)


def test_parse_keeps_member_order():
    value = parse_json('{"b": 1, "a": [true, null, 2.5]}')
    assert list(value) == ["b", "a"]
    assert value["a"] == [True, None, 2.5]


@pytest.mark.parametrize("text", [
    '{"a": 1, "a": 2}',
    '[NaN]',
    '{"x": Infinity}',
    '{"x": 1,}',
])
def test_parse_rejects_invalid_documents(text):
    with pytest.raises(DocumentParseError):
        parse_json(text)


def test_parse_error_reports_position():
    with pytest.raises(DocumentParseError, match="line 2"):
        parse_json('{\n  "a": }')


def test_booleans_are_not_numbers():
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert json_equal(1, 1.0)
    assert json_equal({"a": [1, {"b": None}]}, {"a": [1.0, {"b": None}]})
    assert not json_equal([1, 2], [2, 1])
    assert not json_equal({"a": 1}, [("a", 1)])


def test_type_names():
    assert json_type_of(None) == JsonType.NULL
    assert json_type_of(True) == JsonType.BOOLEAN
    assert json_type_of(3) == JsonType.INTEGER
    assert json_type_of(3.0) == JsonType.NUMBER
    assert json_type_of("x") == JsonType.STRING
    assert json_type_of((1,)) == JsonType.ARRAY
    assert json_type_of(freeze_json({})) == JsonType.OBJECT
    with pytest.raises(TypeError):
        json_type_of(object())


def test_type_membership():
    assert is_json_type(2.0, "integer")
    assert not is_json_type(2.5, "integer")
    assert not is_json_type(True, "integer")
    assert not is_json_type(False, "number")
    assert is_json_type(7, "number")
    assert is_json_type([], "array")
    assert not is_json_type("x", "bogus")


def test_freeze_is_deep_and_immutable():
    frozen = freeze_json({"a": [1, {"b": 2}]})
    assert isinstance(frozen, FrozenJsonObject)
    assert isinstance(frozen["a"], tuple)
    assert isinstance(frozen["a"][1], FrozenJsonObject)
    with pytest.raises(TypeError):
        frozen["c"] = 3
    with pytest.raises(AttributeError):
        frozen.extra = 1


def test_freeze_rejects_non_json():
    with pytest.raises(TypeError):
        freeze_json({"when": object()})
    with pytest.raises(TypeError):
        freeze_json({1: "non-string key"})


def test_thaw_returns_independent_copy():
    frozen = freeze_json({"a": [1]})
    thawed = thaw_json(frozen)
    thawed["a"].append(2)
    assert thawed == {"a": [1, 2]}
    assert frozen["a"] == (1,)


def test_frozen_objects_compare_and_hash_structurally():
    left = freeze_json({"a": 1, "b": [2.0]})
    right = freeze_json({"b": [2], "a": 1.0})
    assert left == right
    assert hash(left) == hash(right)
    assert left == {"a": 1, "b": [2]}


def test_canonical_json_sorts_keys_and_normalizes_integral_floats():
    assert canonical_json({"b": 1, "a": 2.0}) == '{"a":2,"b":1}'
    assert canonical_json([True, 1]) == "[true,1]"


def test_dump_accepts_frozen_values():
    assert dump_json(freeze_json({"a": [1, None]})) == '{"a": [1, null]}'
