"""Tests for the leaf and structural schema kinds"""
import dataclasses

import pytest

from variant_schema.engine import (
    EnumSchema,
    ItemsSchema,
    PropertiesSchema,
    ReferenceSchema,
    SchemaIssue,
    TypeSchema,
)
from variant_schema.exceptions import MalformedSchemaError, PointerNotFoundError


STRING = TypeSchema("string")
INTEGER = TypeSchema("integer")


def messages(result):
    return [issue.message for issue in result.errors]


def paths(result):
    return [issue.instance_path for issue in result.errors]


# ---- enum ---------------------------------------------------------------------


def test_enum_valid_iff_some_candidate_validates():
    schema = EnumSchema([STRING, INTEGER])
    assert schema.validate("x").valid
    assert schema.validate(4).valid
    result = schema.validate(1.5)
    assert not result.valid
    assert messages(result) == [
        "Invalid type: expected string, got number",
        "Invalid type: expected integer, got number",
    ]


def test_enum_collects_every_candidate_error_in_order():
    schema = EnumSchema([STRING, PropertiesSchema({"a": STRING}, required=["b"])])
    result = schema.validate({"a": 1})
    assert messages(result) == [
        "Invalid type: expected string, got object",
        "Missing required property 'b'",
        "Invalid type: expected string, got integer",
    ]
    assert paths(result) == ["", "/b", "/a"]


def test_enum_drops_failing_candidate_errors_on_success():
    result = EnumSchema([INTEGER, STRING]).validate("x")
    assert result.valid
    assert result.errors == ()


def test_enum_order_matters_for_equality():
    assert EnumSchema([STRING, INTEGER]) != EnumSchema([INTEGER, STRING])
    assert EnumSchema([STRING, INTEGER]) == EnumSchema([TypeSchema("string"), TypeSchema("integer")])
    assert hash(EnumSchema([STRING])) == hash(EnumSchema([TypeSchema("string")]))


def test_enum_needs_candidates():
    with pytest.raises(MalformedSchemaError):
        EnumSchema([])
    with pytest.raises(MalformedSchemaError) as excinfo:
        EnumSchema.from_json({"enum": []})
    assert excinfo.value.schema_path == "/enum"


# ---- type ---------------------------------------------------------------------


def test_type_single_and_union():
    assert TypeSchema("string").to_json() == {"type": "string"}
    union = TypeSchema(["string", "null"])
    assert union.to_json() == {"type": ["string", "null"]}
    assert union.validate(None).valid
    assert messages(union.validate(3)) == ["Invalid type: expected string | null, got integer"]


def test_type_integer_accepts_integral_floats_but_not_booleans():
    assert INTEGER.validate(2.0).valid
    assert not INTEGER.validate(2.5).valid
    assert messages(INTEGER.validate(True)) == ["Invalid type: expected integer, got boolean"]
    assert not TypeSchema("number").validate(False).valid


@pytest.mark.parametrize("types", ["float", ["string", "string"], [], 5])
def test_type_rejects_bad_names(types):
    with pytest.raises(MalformedSchemaError):
        TypeSchema(types)


# ---- properties ---------------------------------------------------------------


def test_properties_error_order():
    schema = PropertiesSchema(
        properties={"name": STRING, "age": INTEGER},
        required=["name", "email"],
        additional_properties=False,
    )
    result = schema.validate({"age": "old", "extra": 1})
    assert messages(result) == [
        "Missing required property 'name'",
        "Missing required property 'email'",
        "Invalid type: expected integer, got string",
        "Unknown property 'extra'",
    ]
    assert paths(result) == ["/name", "/email", "/age", "/extra"]


def test_properties_on_non_object_is_one_type_error():
    result = PropertiesSchema(required=["a"]).validate(["a"])
    assert result.errors == (SchemaIssue("Invalid type: expected object, got array", ""),)


def test_properties_allows_extra_members_by_default():
    assert PropertiesSchema({"a": STRING}).validate({"a": "x", "b": 2}).valid


def test_properties_compare_as_mapping_required_as_sequence():
    left = PropertiesSchema({"a": STRING, "b": INTEGER})
    right = PropertiesSchema([("b", INTEGER), ("a", STRING)])
    assert left == right
    assert hash(left) == hash(right)
    assert PropertiesSchema(required=["a", "b"]) != PropertiesSchema(required=["b", "a"])


def test_properties_to_json_omits_defaults():
    assert PropertiesSchema({"a": STRING}).to_json() == {"properties": {"a": {"type": "string"}}}
    assert PropertiesSchema(required=["a"], additional_properties=False).to_json() == {
        "properties": {},
        "required": ["a"],
        "additionalProperties": False,
    }


def test_properties_rejects_malformed_members():
    with pytest.raises(MalformedSchemaError):
        PropertiesSchema(required=["a", "a"])
    with pytest.raises(MalformedSchemaError):
        PropertiesSchema(additional_properties="no")
    for pairs in ([("a",)], [5], [("a", STRING, "extra")]):
        with pytest.raises(MalformedSchemaError, match="pairs"):
            PropertiesSchema(pairs)
    with pytest.raises(MalformedSchemaError) as excinfo:
        PropertiesSchema.from_json({"properties": {"a": {"type": "bogus"}}})
    assert excinfo.value.schema_path == "/properties/a/type"


# ---- items --------------------------------------------------------------------


def test_items_reports_elements_then_duplicates():
    schema = ItemsSchema(INTEGER, unique_items=True)
    result = schema.validate([1, "a", 1, 1.0])
    assert messages(result) == [
        "Invalid type: expected integer, got string",
        "Duplicate array item (same as index 0)",
        "Duplicate array item (same as index 0)",
    ]
    assert paths(result) == ["/1", "/2", "/3"]


def test_items_uniqueness_keeps_booleans_apart():
    schema = ItemsSchema(TypeSchema(["integer", "boolean"]), unique_items=True)
    assert schema.validate([1, True, 0, False]).valid
    objects = ItemsSchema(TypeSchema("object"), unique_items=True)
    assert messages(objects.validate([{"a": 1}, {"a": 1.0}])) == ["Duplicate array item (same as index 0)"]


def test_items_on_non_array():
    assert messages(ItemsSchema(STRING).validate("abc")) == ["Invalid type: expected array, got string"]


def test_unique_items_requires_items():
    with pytest.raises(MalformedSchemaError):
        ItemsSchema.from_json({"uniqueItems": True})


# ---- reference ----------------------------------------------------------------


def test_reference_uses_self_root_annotations():
    schema = ReferenceSchema("#/definitions/s", annotations={"definitions": {"s": {"type": "string"}}})
    assert schema.validate("x").valid
    assert messages(schema.validate(1)) == ["Invalid type: expected string, got integer"]


def test_reference_to_missing_target():
    with pytest.raises(PointerNotFoundError):
        ReferenceSchema("#/definitions/missing").validate(1)


def test_reference_must_be_pointer():
    with pytest.raises(MalformedSchemaError):
        ReferenceSchema(STRING)
    with pytest.raises(MalformedSchemaError):
        ReferenceSchema.from_json({"$ref": 5})


# ---- shared contract ----------------------------------------------------------


def test_self_root_default_matches_explicit_root():
    schema = PropertiesSchema(
        {"x": "#/definitions/s"},
        annotations={"definitions": {"s": {"type": "string"}}},
    )
    instance = {"x": 1}
    assert schema.validate(instance) == schema.validate(instance, schema.to_json())
    assert paths(schema.validate(instance)) == ["/x"]


def test_variants_are_immutable():
    schema = TypeSchema("string", annotations={"title": "t"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        schema.types = ("integer",)
    with pytest.raises(TypeError):
        schema.annotations["title"] = "changed"


def test_annotations_cannot_shadow_keywords():
    with pytest.raises(MalformedSchemaError):
        TypeSchema("string", annotations={"enum": []})


def test_annotations_take_part_in_equality():
    assert TypeSchema("string", annotations={"title": "a"}) != TypeSchema("string", annotations={"title": "b"})
    assert TypeSchema("string") != EnumSchema([STRING])
    assert TypeSchema("string") != "string"


def test_variants_form_a_closed_set():
    with pytest.raises(TypeError):
        class LengthSchema(TypeSchema):
            pass
