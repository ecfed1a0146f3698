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

"""Top-level entry point: a loaded schema document ready to validate instances."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Set, Union

from ..engine_config import engine_config
from ..models.json_value import freeze_json, parse_json
from ..utils.json_pointer import normalize_pointer
from .reference import ResolutionContext, SchemaRef
from .results import ValidationResult
from .serializer import SchemaSerializer, default_serializer
from .variants import ReferenceSchema, SchemaVariant, child_refs

logger = logging.getLogger(__name__)


class JsonSchema:
    """A schema document and its deserialized root variant.

    The document is deep-frozen on construction; validating is free of side
    effects, so one instance can serve any number of threads.
    """

    def __init__(
        self,
        document: Any,
        *,
        serializer: Optional[SchemaSerializer] = None,
        check_references: Optional[bool] = None,
        source: Optional[str] = None,
    ):
        """Load a schema document.

        Args:
            document: The schema document's JSON form.
            serializer: Serializer used to build variants (default: shared one).
            check_references: Resolve every reachable pointer now so broken
                references abort loading (default: from configuration).
            source: Where the document came from, for diagnostics.

        Raises:
            ResolutionError: If the document is malformed or, with reference
                checking on, a pointer cannot be resolved.
        """
        self._serializer = serializer if serializer is not None else default_serializer()
        self._root = freeze_json(document)
        self._source = source
        self._variant = self._serializer.deserialize(self._root)

        if check_references is None:
            check_references = engine_config.check_references
        if check_references:
            self.check_references()
        logger.debug(f"Loaded schema {source or '<document>'} ({self._variant.KIND})")

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "JsonSchema":
        return cls(parse_json(text), **kwargs)

    @classmethod
    def from_file(cls, file_path: Union[str, Path], **kwargs) -> "JsonSchema":
        from ..models.document_loader import load_document

        kwargs.setdefault("source", str(file_path))
        return cls(load_document(file_path), **kwargs)

    @property
    def root(self) -> Any:
        """The frozen root document."""
        return self._root

    @property
    def variant(self) -> SchemaVariant:
        return self._variant

    @property
    def source(self) -> Optional[str]:
        return self._source

    def _context(self) -> ResolutionContext:
        return ResolutionContext(
            root=self._root,
            serializer=self._serializer,
            max_depth=engine_config.max_depth,
        )

    def validate(self, instance: Any) -> ValidationResult:
        result = self._variant.validate_in(instance, self._context(), "")
        logger.debug(f"Validated instance against {self._source or '<document>'}: valid={result.valid}")
        return result

    def is_valid(self, instance: Any) -> bool:
        return self.validate(instance).valid

    def check_references(self) -> List[str]:
        """Resolve every pointer reachable from the root variant.

        Returns the normalized pointers visited, in discovery order.

        Raises:
            ResolutionError: For the first pointer that is malformed, missing,
                or part of a cycle of pointers and ``$ref`` objects.
        """
        visited: List[str] = []
        seen: Set[str] = set()
        pending: List[SchemaRef] = list(reversed(child_refs(self._variant)))
        while pending:
            ref = pending.pop()
            if ref.is_pointer:
                variant, context = ref.resolve_in(self._context())
                # a chain of bare $ref objects never reaches the instance, so a loop in it cannot end
                probe = variant
                while isinstance(probe, ReferenceSchema):
                    probe, context = probe.ref.resolve_in(context)
                target = normalize_pointer(ref.pointer)
                if target in seen:
                    continue
                seen.add(target)
                visited.append(target)
            else:
                variant = ref.inline
            pending.extend(reversed(child_refs(variant)))
        return visited

    def __repr__(self) -> str:
        return f"JsonSchema(source={self._source!r}, kind={self._variant.KIND!r})"


def validate_instance(instance: Any, schema_document: Any) -> ValidationResult:
    """Validate *instance* against a schema document in one call."""
    return JsonSchema(schema_document).validate(instance)
