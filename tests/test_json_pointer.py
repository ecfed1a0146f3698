"""Tests for JSON pointer helpers"""
import pytest

from variant_schema.utils.json_pointer import (
    PointerLookupError,
    PointerSyntaxError,
    join_pointer,
    normalize_pointer,
    resolve_pointer,
    split_pointer,
)


DOCUMENT = {
    "definitions": {"a/b": {"type": "string"}, "c~d": 1, "a b": True},
    "list": ["zero", "one"],
}


def test_split_plain_and_fragment_forms():
    assert split_pointer("") == []
    assert split_pointer("#") == []
    assert split_pointer("/definitions/a~1b") == ["definitions", "a/b"]
    assert split_pointer("#/definitions/c~0d") == ["definitions", "c~d"]
    assert split_pointer("#/definitions/a%20b") == ["definitions", "a b"]


def test_split_rejects_relative_pointer():
    with pytest.raises(PointerSyntaxError):
        split_pointer("definitions/a")
    with pytest.raises(PointerSyntaxError):
        split_pointer(3)


def test_resolve():
    assert resolve_pointer(DOCUMENT, "") is DOCUMENT
    assert resolve_pointer(DOCUMENT, "#/definitions/a~1b") == {"type": "string"}
    assert resolve_pointer(DOCUMENT, "/list/1") == "one"


@pytest.mark.parametrize("pointer", [
    "/definitions/missing",
    "/list/2",
    "/list/01",
    "/list/-",
    "/list/0\n",
    "/list/0/deeper",
])
def test_resolve_missing_segment(pointer):
    with pytest.raises(PointerLookupError):
        resolve_pointer(DOCUMENT, pointer)


def test_lookup_error_names_segment():
    with pytest.raises(PointerLookupError) as excinfo:
        resolve_pointer(DOCUMENT, "/definitions/missing")
    assert excinfo.value.segment == "missing"
    assert excinfo.value.depth == 1


def test_normalize_and_join():
    assert normalize_pointer("#") == ""
    assert normalize_pointer("#/definitions/a%20b") == "/definitions/a b"
    assert normalize_pointer("/x/a~1b") == "/x/a~1b"
    assert join_pointer("", "a/b") == "/a~1b"
    assert join_pointer("/items", 0) == "/items/0"
