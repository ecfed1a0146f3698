"""Schema validation engine.

The engine is a stateless recursive evaluator: variants are immutable, and
each ``validate`` call is a pure function of (instance, schema, root).
"""

from .results import SchemaIssue, ValidationResult
from .aggregator import merge_all, merge_any, merge_exactly_one, negate
from .reference import ResolutionContext, SchemaRef
from .variants import (
    SCHEMA_KINDS,
    AllOfSchema,
    AnyOfSchema,
    EnumSchema,
    ItemsSchema,
    NotSchema,
    OneOfSchema,
    PropertiesSchema,
    ReferenceSchema,
    SchemaVariant,
    TypeSchema,
    is_schema_variant,
)
from .serializer import SchemaSerializer, default_serializer
from .facade import JsonSchema, validate_instance

__all__ = [
    "SchemaIssue",
    "ValidationResult",
    "merge_all",
    "merge_any",
    "merge_exactly_one",
    "negate",
    "ResolutionContext",
    "SchemaRef",
    "SCHEMA_KINDS",
    "AllOfSchema",
    "AnyOfSchema",
    "EnumSchema",
    "ItemsSchema",
    "NotSchema",
    "OneOfSchema",
    "PropertiesSchema",
    "ReferenceSchema",
    "SchemaVariant",
    "TypeSchema",
    "is_schema_variant",
    "SchemaSerializer",
    "default_serializer",
    "JsonSchema",
    "validate_instance",
]
