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

"""Schema references and the resolution context threaded through validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, FrozenSet, Optional, Tuple

from ..engine_config import engine_config
from ..exceptions import CycleDetectedError, MalformedSchemaError, NoRootError, PointerNotFoundError
from ..models.json_value import freeze_json, is_json_object, json_type_of
from ..utils.json_pointer import (
    JsonPointer,
    PointerLookupError,
    PointerSyntaxError,
    normalize_pointer,
    resolve_pointer,
)

if TYPE_CHECKING:
    from .results import ValidationResult
    from .serializer import SchemaSerializer
    from .variants import SchemaVariant

logger = logging.getLogger(__name__)


def _default_serializer() -> "SchemaSerializer":
    from .serializer import default_serializer
    return default_serializer()


def _describe_node(node: Any) -> str:
    try:
        return json_type_of(node)
    except TypeError:
        return type(node).__name__


@dataclass(frozen=True)
class ResolutionContext:
    """Root document and cycle-guard state for one validation pass.

    Contexts are immutable; entering a reference derives a new one, so sibling
    branches never see each other's entries.
    """

    root: Any = None
    serializer: Any = None
    max_depth: int = field(default_factory=lambda: engine_config.max_depth)
    depth: int = 0
    active: FrozenSet[Tuple[JsonPointer, JsonPointer]] = frozenset()
    chain: Tuple[JsonPointer, ...] = ()

    @classmethod
    def for_root(
        cls,
        root: Any,
        serializer: Optional["SchemaSerializer"] = None,
        max_depth: Optional[int] = None,
    ) -> "ResolutionContext":
        return cls(
            root=None if root is None else freeze_json(root),
            serializer=serializer if serializer is not None else _default_serializer(),
            max_depth=max_depth if max_depth is not None else engine_config.max_depth,
        )

    def enter_reference(self, pointer: JsonPointer, instance_path: JsonPointer = "") -> "ResolutionContext":
        """Record that *pointer* is being resolved for the value at *instance_path*.

        Raises:
            MalformedSchemaError: If *pointer* is not a JSON pointer.
            CycleDetectedError: If the same pointer is already being resolved for
                the same instance location, or the hop limit is exceeded.
        """
        try:
            target = normalize_pointer(pointer)
        except PointerSyntaxError as e:
            raise MalformedSchemaError(str(e), pointer=pointer) from e

        chain = self.chain + (f"#{target}",)
        if (target, instance_path) in self.active:
            raise CycleDetectedError(
                f"Reference cycle detected at instance path '{instance_path or '/'}': "
                f"{' -> '.join(chain)}",
                pointer=pointer,
                chain=list(chain),
            )
        if self.depth >= self.max_depth:
            raise CycleDetectedError(
                f"Reference depth limit {self.max_depth} exceeded while resolving '{pointer}'",
                pointer=pointer,
                chain=list(chain),
            )
        return replace(
            self,
            depth=self.depth + 1,
            active=self.active | {(target, instance_path)},
            chain=chain,
        )

    def lookup(self, pointer: JsonPointer) -> Any:
        """Return the root document node addressed by *pointer*."""
        if self.root is None:
            raise NoRootError(f"Cannot resolve pointer '{pointer}': no root document", pointer=pointer)
        try:
            return resolve_pointer(self.root, pointer)
        except PointerSyntaxError as e:
            raise MalformedSchemaError(str(e), pointer=pointer) from e
        except PointerLookupError as e:
            raise PointerNotFoundError(str(e), pointer=pointer) from e


@dataclass(frozen=True)
class SchemaRef:
    """Either an inline schema variant or a pointer into the root document."""

    inline: Optional["SchemaVariant"] = None
    pointer: Optional[JsonPointer] = None

    def __post_init__(self):
        from .variants import is_schema_variant

        if (self.inline is None) == (self.pointer is None):
            raise MalformedSchemaError("A schema reference holds exactly one of an inline schema or a pointer")
        if self.pointer is not None and not isinstance(self.pointer, str):
            raise MalformedSchemaError(
                f"Schema pointer must be a string, got {type(self.pointer).__name__}"
            )
        if self.inline is not None and not is_schema_variant(self.inline):
            raise MalformedSchemaError(
                f"Inline schema must be a schema variant, got {type(self.inline).__name__}"
            )

    @classmethod
    def coerce(cls, value: Any, schema_path: JsonPointer = "") -> "SchemaRef":
        """Build a reference from a SchemaRef, a variant, or a pointer string."""
        from .variants import is_schema_variant

        if isinstance(value, SchemaRef):
            return value
        if isinstance(value, str):
            return cls(pointer=value)
        if is_schema_variant(value):
            return cls(inline=value)
        raise MalformedSchemaError(
            f"Expected a schema, schema reference or pointer string, got {type(value).__name__}",
            schema_path=schema_path,
        )

    @property
    def is_pointer(self) -> bool:
        return self.pointer is not None

    @classmethod
    def from_json(
        cls,
        node: Any,
        serializer: Optional["SchemaSerializer"] = None,
        *,
        schema_path: JsonPointer = "",
    ) -> "SchemaRef":
        if isinstance(node, str):
            return cls(pointer=node)
        if is_json_object(node):
            if serializer is None:
                serializer = _default_serializer()
            return cls(inline=serializer.deserialize(node, schema_path=schema_path))
        raise MalformedSchemaError(
            f"Expected a schema object or pointer string, got {_describe_node(node)}",
            schema_path=schema_path,
        )

    def to_json(self, serializer: Optional["SchemaSerializer"] = None) -> Any:
        if self.pointer is not None:
            return self.pointer
        return self.inline.to_json(serializer)

    def resolve(self, root: Any = None, serializer: Optional["SchemaSerializer"] = None) -> "SchemaVariant":
        """Return the concrete variant this reference designates.

        The inline form needs no root. The pointer form is looked up in *root*,
        following pointer chains.
        """
        if self.inline is not None:
            return self.inline
        variant, _ = self.resolve_in(ResolutionContext.for_root(root, serializer))
        return variant

    def resolve_in(
        self,
        context: ResolutionContext,
        instance_path: JsonPointer = "",
    ) -> Tuple["SchemaVariant", ResolutionContext]:
        """Resolve within *context*, returning the variant and the derived context."""
        ref = self
        while ref.pointer is not None:
            context = context.enter_reference(ref.pointer, instance_path)
            node = context.lookup(ref.pointer)
            logger.debug(f"Resolved pointer '{ref.pointer}' (depth {context.depth})")
            ref = SchemaRef.from_json(node, context.serializer, schema_path=normalize_pointer(ref.pointer))
        return ref.inline, context

    def validate_in(
        self,
        instance: Any,
        context: ResolutionContext,
        instance_path: JsonPointer = "",
    ) -> "ValidationResult":
        variant, context = self.resolve_in(context, instance_path)
        return variant.validate_in(instance, context, instance_path)
