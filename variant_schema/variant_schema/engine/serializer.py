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

"""Serializer capability handed to ``from_json`` / ``to_json``."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..engine_config import engine_config
from ..exceptions import MalformedSchemaError
from ..models.json_value import freeze_json, is_json_object, json_type_of, thaw_json
from ..utils.json_pointer import JsonPointer
from .reference import SchemaRef
from .variants import ALL_KEYWORDS, SCHEMA_KINDS, AllOfSchema, SchemaVariant

logger = logging.getLogger(__name__)


class SchemaSerializer:
    """Turns schema JSON into variants and back.

    Dispatch is by keyword: the kind owning the keywords present in a schema
    object builds the variant. An object mixing keywords of several kinds
    becomes an implicit ``allOf`` of the single-kind parts (in keyword order)
    when ``combine_keywords`` is set, and is rejected otherwise. Every part must
    pass, so ``{"type": ["object", "null"], "properties": {...}}`` still
    rejects ``null``.
    """

    def __init__(self, combine_keywords: Optional[bool] = None):
        self.combine_keywords = engine_config.combine_keywords if combine_keywords is None else combine_keywords

    def deserialize(self, node: Any, *, schema_path: JsonPointer = "") -> SchemaVariant:
        if not is_json_object(node):
            try:
                kind = json_type_of(node)
            except TypeError:
                kind = type(node).__name__
            raise MalformedSchemaError(f"Expected a schema object, got {kind}", schema_path=schema_path)

        claimed = self._claiming_kinds(node)
        if not claimed:
            raise MalformedSchemaError(
                f"Schema object has no schema keyword (expected one of: {', '.join(ALL_KEYWORDS)})",
                schema_path=schema_path,
            )
        if len(claimed) == 1:
            return claimed[0].from_json(node, self, schema_path=schema_path)

        kind_names = [kind.KIND for kind in claimed]
        if not self.combine_keywords:
            raise MalformedSchemaError(
                f"Schema object mixes keywords of several kinds: {kind_names}",
                schema_path=schema_path,
            )

        logger.debug(f"Combining {kind_names} at '{schema_path or '/'}' into an implicit allOf")
        parts = []
        for kind in claimed:
            part = {key: node[key] for key in node if key in kind.KEYWORDS}
            parts.append(SchemaRef(inline=kind.from_json(part, self, schema_path=schema_path)))
        annotations = {key: node[key] for key in node if key not in ALL_KEYWORDS}
        return AllOfSchema(schemas=tuple(parts), annotations=self.hydrate(annotations))

    def deserialize_ref(self, node: Any, *, schema_path: JsonPointer = "") -> SchemaRef:
        return SchemaRef.from_json(node, self, schema_path=schema_path)

    def serialize(self, variant: SchemaVariant) -> Dict[str, Any]:
        return variant.to_json(self)

    def serialize_ref(self, ref: SchemaRef) -> Any:
        return ref.to_json(self)

    def hydrate(self, value: Any) -> Any:
        """Freeze an auxiliary JSON payload (annotations) for storage on a variant."""
        return freeze_json(value)

    def dehydrate(self, value: Any) -> Any:
        return thaw_json(value)

    @staticmethod
    def _claiming_kinds(node: Any) -> List[type]:
        """Kinds whose keywords appear in *node*, ordered by first keyword position."""
        claimed: List[type] = []
        for key in node:
            for kind in SCHEMA_KINDS:
                if key in kind.KEYWORDS and kind not in claimed:
                    claimed.append(kind)
        return claimed


_DEFAULT_SERIALIZER: Optional[SchemaSerializer] = None


def default_serializer() -> SchemaSerializer:
    """Return the shared serializer matching the current configuration."""
    global _DEFAULT_SERIALIZER
    if _DEFAULT_SERIALIZER is None or _DEFAULT_SERIALIZER.combine_keywords != engine_config.combine_keywords:
        _DEFAULT_SERIALIZER = SchemaSerializer()
    return _DEFAULT_SERIALIZER
