# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON value model used by the schema engine.

Instances are the plain values produced by :mod:`json` (dict, list, str, int,
float, bool, None). Schema documents held by the engine are deep-frozen with
:func:`freeze_json` so that nothing reachable from a schema can be mutated
after construction.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from ..exceptions import DocumentParseError


JsonValue = Any


class JsonType:
    """Type names understood by the ``type`` keyword."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def get_all_types(cls) -> List[str]:
        return [cls.NULL, cls.BOOLEAN, cls.INTEGER, cls.NUMBER, cls.STRING, cls.ARRAY, cls.OBJECT]


class FrozenJsonObject(Mapping):
    """Read-only, insertion-ordered JSON object."""

    __slots__ = ("_items", "_index")

    def __init__(self, pairs: Any = ()):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        items: Dict[str, Any] = {}
        for key, value in pairs:
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}: {key!r}")
            items[key] = freeze_json(value)
        object.__setattr__(self, "_items", tuple(items.items()))
        object.__setattr__(self, "_index", items)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FrozenJsonObject is immutable")

    def __getitem__(self, key: str) -> Any:
        return self._index[key]

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return json_equal(self, other)

    def __hash__(self) -> int:
        return hash(canonical_json(self))

    def __repr__(self) -> str:
        return f"FrozenJsonObject({dict(self._items)!r})"


EMPTY_OBJECT = FrozenJsonObject()


def is_json_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_json_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_json_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_type_of(value: Any) -> str:
    """Return the JSON type name of *value* (integral floats report as number)."""
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, int):
        return JsonType.INTEGER
    if isinstance(value, float):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if is_json_array(value):
        return JsonType.ARRAY
    if is_json_object(value):
        return JsonType.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_json_type(value: Any, type_name: str) -> bool:
    """Check *value* against a ``type`` keyword name."""
    if type_name == JsonType.NULL:
        return value is None
    if type_name == JsonType.BOOLEAN:
        return isinstance(value, bool)
    if type_name == JsonType.INTEGER:
        if isinstance(value, float):
            return value.is_integer()
        return isinstance(value, int) and not isinstance(value, bool)
    if type_name == JsonType.NUMBER:
        return is_json_number(value)
    if type_name == JsonType.STRING:
        return isinstance(value, str)
    if type_name == JsonType.ARRAY:
        return is_json_array(value)
    if type_name == JsonType.OBJECT:
        return is_json_object(value)
    return False


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality that keeps booleans apart from numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_json_number(left) and is_json_number(right):
        return left == right
    if is_json_object(left) and is_json_object(right):
        if len(left) != len(right):
            return False
        return all(key in right and json_equal(left[key], right[key]) for key in left)
    if is_json_array(left) and is_json_array(right):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    if is_json_object(left) or is_json_object(right) or is_json_array(left) or is_json_array(right):
        return False
    return type(left) is type(right) and left == right


def freeze_json(value: Any) -> Any:
    """Return a deep-immutable copy of *value*."""
    if isinstance(value, FrozenJsonObject):
        return value
    if is_json_object(value):
        return FrozenJsonObject(value)
    if is_json_array(value):
        return tuple(freeze_json(item) for item in value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def thaw_json(value: Any) -> Any:
    """Return a fresh mutable (dict/list) copy of *value*."""
    if is_json_object(value):
        return {key: thaw_json(item) for key, item in value.items()}
    if is_json_array(value):
        return [thaw_json(item) for item in value]
    return value


def _canonical_form(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if is_json_object(value):
        return {key: _canonical_form(item) for key, item in value.items()}
    if is_json_array(value):
        return [_canonical_form(item) for item in value]
    return value


def canonical_json(value: Any) -> str:
    """Key-sorted compact text; equal values (per json_equal) give equal text."""
    return json.dumps(_canonical_form(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DocumentParseError(f"Duplicate object key '{key}'")
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise DocumentParseError(f"Invalid JSON constant '{name}'")


def parse_json(text: str) -> JsonValue:
    """Parse JSON text into plain Python values.

    Raises:
        DocumentParseError: If the text is not valid JSON, repeats a key within
            one object, or uses NaN/Infinity.
    """
    try:
        return json.loads(
            text,
            object_pairs_hook=_reject_duplicate_keys,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e


def dump_json(value: JsonValue, indent: int = None) -> str:
    """Serialize a (possibly frozen) JSON value to text."""
    return json.dumps(thaw_json(value), indent=indent, ensure_ascii=False)
