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

"""The closed family of schema variants.

Each kind is a frozen dataclass. Validation, serialization, equality and child
traversal are module-level functions dispatching over the fixed set of kinds;
the methods on the classes delegate to them. New kinds are added here and only
here: subclassing a variant from another module raises ``TypeError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from ..exceptions import MalformedSchemaError
from ..models.json_value import (
    EMPTY_OBJECT,
    FrozenJsonObject,
    JsonType,
    canonical_json,
    freeze_json,
    is_json_array,
    is_json_object,
    is_json_type,
    json_equal,
    json_type_of,
)
from ..utils.json_pointer import JsonPointer, join_pointer
from .aggregator import merge_all, merge_any, merge_exactly_one, negate
from .reference import ResolutionContext, SchemaRef
from .results import SchemaIssue, ValidationResult

if TYPE_CHECKING:
    from .serializer import SchemaSerializer


def _resolve_serializer(serializer: Optional["SchemaSerializer"]) -> "SchemaSerializer":
    if serializer is not None:
        return serializer
    from .serializer import default_serializer
    return default_serializer()


def _describe(value: Any) -> str:
    try:
        return json_type_of(value)
    except TypeError:
        return type(value).__name__


class _SchemaVariantBase:
    """Behaviour shared by every schema kind."""

    KIND: str = ""
    KEYWORDS: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Schema variants form a closed set; '{cls.__qualname__}' cannot extend "
                f"a variant outside {__name__}"
            )

    def validate(self, instance: Any, root: Any = None) -> ValidationResult:
        """Validate *instance*.

        Pointers resolve against *root*; without one the variant's own
        serialized form is the root.
        """
        serializer = _resolve_serializer(None)
        if root is None:
            root = self.to_json(serializer)
        return self.validate_in(instance, ResolutionContext.for_root(root, serializer), "")

    def validate_in(
        self,
        instance: Any,
        context: ResolutionContext,
        instance_path: JsonPointer = "",
    ) -> ValidationResult:
        return validate_variant(self, instance, context, instance_path)

    def to_json(self, serializer: Optional["SchemaSerializer"] = None) -> Dict[str, Any]:
        return variant_to_json(self, serializer)

    def equals(self, other: Any) -> bool:
        return variants_equal(self, other)

    def __eq__(self, other: Any) -> bool:
        if not is_schema_variant(other):
            return NotImplemented
        return variants_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.KIND, canonical_json(self.to_json())))


# ---- construction helpers ---------------------------------------------------


def _set(variant: Any, name: str, value: Any) -> None:
    object.__setattr__(variant, name, value)


def _init_annotations(variant: Any) -> None:
    value = variant.annotations
    if value is None:
        value = EMPTY_OBJECT
    if not is_json_object(value):
        raise MalformedSchemaError(f"Schema annotations must be an object, got {_describe(value)}")
    try:
        frozen = freeze_json(value)
    except TypeError as e:
        raise MalformedSchemaError(f"Schema annotations must be JSON values: {e}") from e
    reserved = [key for key in frozen if key in ALL_KEYWORDS]
    if reserved:
        raise MalformedSchemaError(
            f"Annotation keys {reserved} are schema keywords and cannot be used as annotations"
        )
    _set(variant, "annotations", frozen)


def _coerce_refs(values: Any, keyword: str) -> Tuple[SchemaRef, ...]:
    if isinstance(values, (str, bytes)) or is_json_object(values) or not isinstance(values, Iterable):
        raise MalformedSchemaError(f"'{keyword}' must be a sequence of schemas")
    refs = tuple(SchemaRef.coerce(value) for value in values)
    if not refs:
        raise MalformedSchemaError(f"'{keyword}' must contain at least one schema")
    return refs


def _build(cls, schema_path: JsonPointer, **fields):
    try:
        return cls(**fields)
    except MalformedSchemaError as e:
        if e.schema_path is None:
            e.schema_path = schema_path
        raise


def _split_node(cls, node: Any, schema_path: JsonPointer) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split a schema object into this kind's keywords and free annotations."""
    if not is_json_object(node):
        raise MalformedSchemaError(
            f"Expected a schema object for '{cls.KIND}', got {_describe(node)}",
            schema_path=schema_path,
        )
    own = {key: node[key] for key in node if key in cls.KEYWORDS}
    if not own:
        raise MalformedSchemaError(
            f"Schema object is missing the '{cls.KEYWORDS[0]}' keyword",
            schema_path=schema_path,
        )
    foreign = [key for key in node if key in ALL_KEYWORDS and key not in cls.KEYWORDS]
    if foreign:
        raise MalformedSchemaError(
            f"Keywords {foreign} cannot be combined with '{cls.KEYWORDS[0]}' in one schema object",
            schema_path=schema_path,
        )
    annotations = {key: node[key] for key in node if key not in ALL_KEYWORDS}
    return own, annotations


def _ref_list_from_json(
    node: Any,
    keyword: str,
    serializer: "SchemaSerializer",
    schema_path: JsonPointer,
) -> Tuple[SchemaRef, ...]:
    keyword_path = join_pointer(schema_path, keyword)
    if not is_json_array(node):
        raise MalformedSchemaError(
            f"'{keyword}' must be an array of schemas or pointers, got {_describe(node)}",
            schema_path=keyword_path,
        )
    if not node:
        raise MalformedSchemaError(f"'{keyword}' must contain at least one schema", schema_path=keyword_path)
    return tuple(
        SchemaRef.from_json(item, serializer, schema_path=join_pointer(keyword_path, index))
        for index, item in enumerate(node)
    )


# ---- variant kinds ------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class EnumSchema(_SchemaVariantBase):
    """Accepts a value matching any one of an ordered list of candidate schemas."""

    KIND = "enum"
    KEYWORDS = ("enum",)

    values: Tuple[SchemaRef, ...]
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        _set(self, "values", _coerce_refs(self.values, "enum"))
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        return _build(
            cls,
            schema_path,
            values=_ref_list_from_json(own["enum"], "enum", serializer, schema_path),
            annotations=serializer.hydrate(annotations),
        )


@dataclass(frozen=True, eq=False)
class TypeSchema(_SchemaVariantBase):
    """Accepts a value whose JSON type is one of ``types``."""

    KIND = "type"
    KEYWORDS = ("type",)

    types: Tuple[str, ...]
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        types = self.types
        if isinstance(types, str):
            types = (types,)
        elif is_json_array(types):
            types = tuple(types)
        else:
            raise MalformedSchemaError(f"'type' must be a type name or a list of type names, got {_describe(types)}")
        if not types:
            raise MalformedSchemaError("'type' must name at least one type")
        allowed = JsonType.get_all_types()
        for name in types:
            if name not in allowed:
                raise MalformedSchemaError(f"Unknown type name {name!r}. Valid types: {allowed}")
        if len(set(types)) != len(types):
            raise MalformedSchemaError(f"'type' lists a type more than once: {list(types)}")
        _set(self, "types", types)
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        types = own["type"]
        if not isinstance(types, str) and not (is_json_array(types) and all(isinstance(t, str) for t in types)):
            raise MalformedSchemaError(
                f"'type' must be a type name or a list of type names, got {_describe(types)}",
                schema_path=join_pointer(schema_path, "type"),
            )
        return _build(cls, join_pointer(schema_path, "type"), types=types, annotations=serializer.hydrate(annotations))


@dataclass(frozen=True, eq=False)
class PropertiesSchema(_SchemaVariantBase):
    """Checks an object's named members.

    ``properties`` holds (name, schema) pairs in declaration order; members
    listed in ``required`` must be present; undeclared members are rejected
    when ``additional_properties`` is false. Any non-object instance fails,
    so a nullable object is written as ``anyOf`` of ``{"type": "null"}`` and
    the object schema rather than by widening ``type`` beside ``properties``.
    """

    KIND = "properties"
    KEYWORDS = ("properties", "required", "additionalProperties")

    properties: Tuple[Tuple[str, SchemaRef], ...] = ()
    required: Tuple[str, ...] = ()
    additional_properties: bool = True
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        pairs = self.properties
        if is_json_object(pairs):
            pairs = pairs.items()
        elif isinstance(pairs, (str, bytes)) or not isinstance(pairs, Iterable):
            raise MalformedSchemaError(f"'properties' must map names to schemas, got {_describe(pairs)}")
        properties: List[Tuple[str, SchemaRef]] = []
        seen = set()
        for pair in pairs:
            try:
                name, schema = pair
            except (TypeError, ValueError) as e:
                raise MalformedSchemaError(f"Property entries must be (name, schema) pairs, got {pair!r}") from e
            if not isinstance(name, str):
                raise MalformedSchemaError(f"Property names must be strings, got {name!r}")
            if name in seen:
                raise MalformedSchemaError(f"Property '{name}' is declared more than once")
            seen.add(name)
            properties.append((name, SchemaRef.coerce(schema)))
        _set(self, "properties", tuple(properties))

        required = self.required
        if isinstance(required, str) or not is_json_array(required) or not all(isinstance(r, str) for r in required):
            raise MalformedSchemaError(f"'required' must be a list of property names, got {required!r}")
        if len(set(required)) != len(required):
            raise MalformedSchemaError(f"'required' lists a property more than once: {list(required)}")
        _set(self, "required", tuple(required))

        if not isinstance(self.additional_properties, bool):
            raise MalformedSchemaError(
                f"'additionalProperties' must be a boolean, got {_describe(self.additional_properties)}"
            )
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        members = own.get("properties", {})
        members_path = join_pointer(schema_path, "properties")
        if not is_json_object(members):
            raise MalformedSchemaError(
                f"'properties' must be an object, got {_describe(members)}", schema_path=members_path
            )
        properties = tuple(
            (name, SchemaRef.from_json(value, serializer, schema_path=join_pointer(members_path, name)))
            for name, value in members.items()
        )
        return _build(
            cls,
            schema_path,
            properties=properties,
            required=own.get("required", ()),
            additional_properties=own.get("additionalProperties", True),
            annotations=serializer.hydrate(annotations),
        )

    def property_schemas(self) -> Dict[str, SchemaRef]:
        return dict(self.properties)


@dataclass(frozen=True, eq=False)
class ItemsSchema(_SchemaVariantBase):
    """Checks every element of an array against one schema."""

    KIND = "items"
    KEYWORDS = ("items", "uniqueItems")

    items: SchemaRef
    unique_items: bool = False
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        _set(self, "items", SchemaRef.coerce(self.items))
        if not isinstance(self.unique_items, bool):
            raise MalformedSchemaError(f"'uniqueItems' must be a boolean, got {_describe(self.unique_items)}")
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        if "items" not in own:
            raise MalformedSchemaError("'uniqueItems' requires an 'items' schema", schema_path=schema_path)
        return _build(
            cls,
            schema_path,
            items=SchemaRef.from_json(own["items"], serializer, schema_path=join_pointer(schema_path, "items")),
            unique_items=own.get("uniqueItems", False),
            annotations=serializer.hydrate(annotations),
        )


@dataclass(frozen=True, eq=False)
class _CompositeSchema(_SchemaVariantBase):
    schemas: Tuple[SchemaRef, ...]
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        _set(self, "schemas", _coerce_refs(self.schemas, self.KEYWORDS[0]))
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        keyword = cls.KEYWORDS[0]
        return _build(
            cls,
            schema_path,
            schemas=_ref_list_from_json(own[keyword], keyword, serializer, schema_path),
            annotations=serializer.hydrate(annotations),
        )


@dataclass(frozen=True, eq=False)
class AllOfSchema(_CompositeSchema):
    """Accepts a value matching every child schema."""

    KIND = "allOf"
    KEYWORDS = ("allOf",)


@dataclass(frozen=True, eq=False)
class AnyOfSchema(_CompositeSchema):
    """Accepts a value matching at least one child schema."""

    KIND = "anyOf"
    KEYWORDS = ("anyOf",)


@dataclass(frozen=True, eq=False)
class OneOfSchema(_CompositeSchema):
    """Accepts a value matching exactly one child schema."""

    KIND = "oneOf"
    KEYWORDS = ("oneOf",)


@dataclass(frozen=True, eq=False)
class NotSchema(_SchemaVariantBase):
    """Accepts a value that does not match the child schema."""

    KIND = "not"
    KEYWORDS = ("not",)

    schema: SchemaRef
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        _set(self, "schema", SchemaRef.coerce(self.schema))
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        return _build(
            cls,
            schema_path,
            schema=SchemaRef.from_json(own["not"], serializer, schema_path=join_pointer(schema_path, "not")),
            annotations=serializer.hydrate(annotations),
        )


@dataclass(frozen=True, eq=False)
class ReferenceSchema(_SchemaVariantBase):
    """Delegates to the schema found at a pointer in the root document."""

    KIND = "$ref"
    KEYWORDS = ("$ref",)

    ref: SchemaRef
    annotations: FrozenJsonObject = EMPTY_OBJECT

    def __post_init__(self):
        ref = SchemaRef.coerce(self.ref)
        if not ref.is_pointer:
            raise MalformedSchemaError("'$ref' must be a pointer string")
        _set(self, "ref", ref)
        _init_annotations(self)

    @classmethod
    def from_json(cls, node: Any, serializer: Optional["SchemaSerializer"] = None, *, schema_path: JsonPointer = ""):
        serializer = _resolve_serializer(serializer)
        own, annotations = _split_node(cls, node, schema_path)
        pointer = own["$ref"]
        if not isinstance(pointer, str):
            raise MalformedSchemaError(
                f"'$ref' must be a pointer string, got {_describe(pointer)}",
                schema_path=join_pointer(schema_path, "$ref"),
            )
        return _build(cls, schema_path, ref=SchemaRef(pointer=pointer), annotations=serializer.hydrate(annotations))


SchemaVariant = Union[
    EnumSchema,
    TypeSchema,
    PropertiesSchema,
    ItemsSchema,
    AllOfSchema,
    AnyOfSchema,
    OneOfSchema,
    NotSchema,
    ReferenceSchema,
]

SCHEMA_KINDS: Tuple[type, ...] = (
    EnumSchema,
    TypeSchema,
    PropertiesSchema,
    ItemsSchema,
    AllOfSchema,
    AnyOfSchema,
    OneOfSchema,
    NotSchema,
    ReferenceSchema,
)

ALL_KEYWORDS: Tuple[str, ...] = tuple(keyword for kind in SCHEMA_KINDS for keyword in kind.KEYWORDS)


def is_schema_variant(value: Any) -> bool:
    return isinstance(value, SCHEMA_KINDS)


# ---- dispatch -----------------------------------------------------------------


def _ref_labels(refs: Tuple[SchemaRef, ...]) -> List[str]:
    return [f"{index} ({ref.pointer})" if ref.is_pointer else str(index) for index, ref in enumerate(refs)]


def _validate_children(
    refs: Tuple[SchemaRef, ...],
    instance: Any,
    context: ResolutionContext,
    instance_path: JsonPointer,
) -> List[ValidationResult]:
    return [ref.validate_in(instance, context, instance_path) for ref in refs]


def _type_mismatch(variant: Any, expected: str, instance: Any, instance_path: JsonPointer) -> ValidationResult:
    return ValidationResult.failure([
        SchemaIssue(
            message=f"Invalid type: expected {expected}, got {_describe(instance)}",
            instance_path=instance_path,
            schema=variant,
        )
    ])


def _validate_properties(
    variant: PropertiesSchema,
    instance: Any,
    context: ResolutionContext,
    instance_path: JsonPointer,
) -> ValidationResult:
    if not is_json_object(instance):
        return _type_mismatch(variant, JsonType.OBJECT, instance, instance_path)

    issues: List[SchemaIssue] = []
    for name in variant.required:
        if name not in instance:
            issues.append(
                SchemaIssue(
                    message=f"Missing required property '{name}'",
                    instance_path=join_pointer(instance_path, name),
                    schema=variant,
                )
            )

    declared = variant.property_schemas()
    for name, value in instance.items():
        member_path = join_pointer(instance_path, name)
        ref = declared.get(name)
        if ref is None:
            if not variant.additional_properties:
                issues.append(
                    SchemaIssue(message=f"Unknown property '{name}'", instance_path=member_path, schema=variant)
                )
            continue
        issues.extend(ref.validate_in(value, context, member_path).errors)

    if issues:
        return ValidationResult.failure(issues)
    return ValidationResult.success()


def _validate_items(
    variant: ItemsSchema,
    instance: Any,
    context: ResolutionContext,
    instance_path: JsonPointer,
) -> ValidationResult:
    if not is_json_array(instance):
        return _type_mismatch(variant, JsonType.ARRAY, instance, instance_path)

    issues: List[SchemaIssue] = []
    for index, item in enumerate(instance):
        issues.extend(variant.items.validate_in(item, context, join_pointer(instance_path, index)).errors)

    if variant.unique_items:
        first_seen: Dict[str, int] = {}
        for index, item in enumerate(instance):
            key = canonical_json(item)
            if key in first_seen:
                issues.append(
                    SchemaIssue(
                        message=f"Duplicate array item (same as index {first_seen[key]})",
                        instance_path=join_pointer(instance_path, index),
                        schema=variant,
                    )
                )
            else:
                first_seen[key] = index

    if issues:
        return ValidationResult.failure(issues)
    return ValidationResult.success()


def validate_variant(
    variant: SchemaVariant,
    instance: Any,
    context: ResolutionContext,
    instance_path: JsonPointer = "",
) -> ValidationResult:
    if isinstance(variant, EnumSchema):
        return merge_any(_validate_children(variant.values, instance, context, instance_path))

    if isinstance(variant, AnyOfSchema):
        return merge_any(_validate_children(variant.schemas, instance, context, instance_path))

    if isinstance(variant, AllOfSchema):
        return merge_all(_validate_children(variant.schemas, instance, context, instance_path))

    if isinstance(variant, OneOfSchema):
        return merge_exactly_one(
            _validate_children(variant.schemas, instance, context, instance_path),
            instance_path=instance_path,
            labels=_ref_labels(variant.schemas),
            schema=variant,
        )

    if isinstance(variant, NotSchema):
        return negate(
            variant.schema.validate_in(instance, context, instance_path),
            instance_path=instance_path,
            schema=variant,
        )

    if isinstance(variant, TypeSchema):
        if any(is_json_type(instance, name) for name in variant.types):
            return ValidationResult.success()
        return _type_mismatch(variant, " | ".join(variant.types), instance, instance_path)

    if isinstance(variant, PropertiesSchema):
        return _validate_properties(variant, instance, context, instance_path)

    if isinstance(variant, ItemsSchema):
        return _validate_items(variant, instance, context, instance_path)

    if isinstance(variant, ReferenceSchema):
        return variant.ref.validate_in(instance, context, instance_path)

    raise TypeError(f"Internal error: unknown schema variant {type(variant).__name__}")


def variant_to_json(variant: SchemaVariant, serializer: Optional["SchemaSerializer"] = None) -> Dict[str, Any]:
    serializer = _resolve_serializer(serializer)

    if isinstance(variant, EnumSchema):
        body: Dict[str, Any] = {"enum": [serializer.serialize_ref(ref) for ref in variant.values]}
    elif isinstance(variant, TypeSchema):
        body = {"type": variant.types[0] if len(variant.types) == 1 else list(variant.types)}
    elif isinstance(variant, PropertiesSchema):
        body = {"properties": {name: serializer.serialize_ref(ref) for name, ref in variant.properties}}
        if variant.required:
            body["required"] = list(variant.required)
        if not variant.additional_properties:
            body["additionalProperties"] = False
    elif isinstance(variant, ItemsSchema):
        body = {"items": serializer.serialize_ref(variant.items)}
        if variant.unique_items:
            body["uniqueItems"] = True
    elif isinstance(variant, (AllOfSchema, AnyOfSchema, OneOfSchema)):
        body = {variant.KEYWORDS[0]: [serializer.serialize_ref(ref) for ref in variant.schemas]}
    elif isinstance(variant, NotSchema):
        body = {"not": serializer.serialize_ref(variant.schema)}
    elif isinstance(variant, ReferenceSchema):
        body = {"$ref": variant.ref.pointer}
    else:
        raise TypeError(f"Internal error: unknown schema variant {type(variant).__name__}")

    body.update(serializer.dehydrate(variant.annotations))
    return body


def variants_equal(left: Any, right: Any) -> bool:
    """Same kind, equal kind-specific fields, equal annotations.

    Sequence fields compare element-wise in order; the ``properties`` mapping
    compares as a mapping.
    """
    if type(left) is not type(right) or not is_schema_variant(left):
        return False
    if not json_equal(left.annotations, right.annotations):
        return False

    if isinstance(left, EnumSchema):
        return left.values == right.values
    if isinstance(left, TypeSchema):
        return left.types == right.types
    if isinstance(left, PropertiesSchema):
        return (
            left.property_schemas() == right.property_schemas()
            and left.required == right.required
            and left.additional_properties == right.additional_properties
        )
    if isinstance(left, ItemsSchema):
        return left.items == right.items and left.unique_items == right.unique_items
    if isinstance(left, (AllOfSchema, AnyOfSchema, OneOfSchema)):
        return left.schemas == right.schemas
    if isinstance(left, NotSchema):
        return left.schema == right.schema
    if isinstance(left, ReferenceSchema):
        return left.ref == right.ref

    raise TypeError(f"Internal error: unknown schema variant {type(left).__name__}")


def child_refs(variant: SchemaVariant) -> Tuple[SchemaRef, ...]:
    """Return the schema references directly held by *variant*, in order."""
    if isinstance(variant, EnumSchema):
        return variant.values
    if isinstance(variant, (AllOfSchema, AnyOfSchema, OneOfSchema)):
        return variant.schemas
    if isinstance(variant, PropertiesSchema):
        return tuple(ref for _, ref in variant.properties)
    if isinstance(variant, ItemsSchema):
        return (variant.items,)
    if isinstance(variant, NotSchema):
        return (variant.schema,)
    if isinstance(variant, ReferenceSchema):
        return (variant.ref,)
    if isinstance(variant, TypeSchema):
        return ()

    raise TypeError(f"Internal error: unknown schema variant {type(variant).__name__}")
