"""Tests for SchemaRef and the resolution context"""
import pytest

from variant_schema.engine import ResolutionContext, SchemaRef, TypeSchema
from variant_schema.engine_config import engine_config
from variant_schema.exceptions import (
    CycleDetectedError,
    MalformedSchemaError,
    NoRootError,
    PointerNotFoundError,
    ResolutionErrorKind,
)


ROOT = {
    "definitions": {
        "text": {"type": "string"},
        "alias": "#/definitions/text",
        "loop_a": "#/definitions/loop_b",
        "loop_b": "#/definitions/loop_a",
        "hop1": "#/definitions/hop2",
        "hop2": "#/definitions/hop3",
        "hop3": "#/definitions/hop4",
        "hop4": "#/definitions/text",
        "number": 5,
    },
}


def test_exactly_one_form():
    with pytest.raises(MalformedSchemaError):
        SchemaRef()
    with pytest.raises(MalformedSchemaError):
        SchemaRef(inline=TypeSchema("string"), pointer="#/definitions/text")
    with pytest.raises(MalformedSchemaError):
        SchemaRef(inline={"type": "string"})


def test_from_json_and_to_json():
    pointer = SchemaRef.from_json("#/definitions/text")
    assert pointer.is_pointer
    assert pointer.to_json() == "#/definitions/text"

    inline = SchemaRef.from_json({"type": "string"})
    assert not inline.is_pointer
    assert inline.inline == TypeSchema("string")
    assert inline.to_json() == {"type": "string"}

    with pytest.raises(MalformedSchemaError) as excinfo:
        SchemaRef.from_json(5, schema_path="/not")
    assert excinfo.value.schema_path == "/not"


def test_coerce():
    assert SchemaRef.coerce("#/a") == SchemaRef(pointer="#/a")
    assert SchemaRef.coerce(TypeSchema("null")) == SchemaRef(inline=TypeSchema("null"))
    ref = SchemaRef(pointer="#/a")
    assert SchemaRef.coerce(ref) is ref
    with pytest.raises(MalformedSchemaError):
        SchemaRef.coerce(5)


def test_inline_resolves_without_root():
    assert SchemaRef(inline=TypeSchema("string")).resolve() == TypeSchema("string")


def test_pointer_needs_root():
    with pytest.raises(NoRootError) as excinfo:
        SchemaRef(pointer="#/definitions/text").resolve()
    assert excinfo.value.kind == ResolutionErrorKind.NO_ROOT


def test_missing_segment():
    with pytest.raises(PointerNotFoundError) as excinfo:
        SchemaRef(pointer="#/definitions/missing").resolve(ROOT)
    assert excinfo.value.kind == ResolutionErrorKind.NOT_FOUND
    assert excinfo.value.pointer == "#/definitions/missing"


def test_target_that_is_not_a_schema():
    with pytest.raises(MalformedSchemaError) as excinfo:
        SchemaRef(pointer="#/definitions/number").resolve(ROOT)
    assert excinfo.value.schema_path == "/definitions/number"


def test_pointer_chain_is_followed():
    assert SchemaRef(pointer="#/definitions/alias").resolve(ROOT) == TypeSchema("string")


def test_pointer_chain_cycle():
    with pytest.raises(CycleDetectedError) as excinfo:
        SchemaRef(pointer="#/definitions/loop_a").resolve(ROOT)
    assert excinfo.value.kind == ResolutionErrorKind.CYCLE_DETECTED
    assert excinfo.value.chain == [
        "#/definitions/loop_a",
        "#/definitions/loop_b",
        "#/definitions/loop_a",
    ]


def test_depth_limit(monkeypatch):
    monkeypatch.setattr(engine_config, "max_depth", 3)
    with pytest.raises(CycleDetectedError, match="depth limit 3"):
        SchemaRef(pointer="#/definitions/hop1").resolve(ROOT)


def test_enter_reference_derives_new_context():
    context = ResolutionContext.for_root(ROOT)
    inner = context.enter_reference("#/definitions/text", "/x")
    assert context.active == frozenset()
    assert context.depth == 0
    assert inner.depth == 1
    assert inner.active == frozenset({("/definitions/text", "/x")})


def test_guard_keys_on_pointer_and_instance_path():
    context = ResolutionContext.for_root(ROOT).enter_reference("#/definitions/text", "/x")
    # same pointer for another instance location is fine
    context.enter_reference("/definitions/text", "/y")
    # fragment and plain spellings name the same target
    with pytest.raises(CycleDetectedError):
        context.enter_reference("/definitions/text", "/x")


def test_enter_reference_rejects_malformed_pointer():
    with pytest.raises(MalformedSchemaError):
        ResolutionContext.for_root(ROOT).enter_reference("definitions/text")
