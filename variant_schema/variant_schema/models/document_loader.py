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

"""Loading of schema and instance documents (JSON or YAML) with caching."""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema
import yaml

from ..engine_config import engine_config
from ..engine.results import SchemaIssue
from ..exceptions import DocumentParseError, SchemaLoadError
from ..schema import get_meta_schema_path
from ..utils.json_pointer import escape_token, join_pointer
from .json_value import freeze_json, parse_json, thaw_json

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)
DOCUMENT_SUFFIXES = JSON_SUFFIXES + YAML_SUFFIXES

SourceMap = Dict[str, Dict[str, int]]

# Document cache keyed by resolved path: (mtime_ns, frozen data, source map)
_DOCUMENT_CACHE: Dict[Path, Tuple[int, Any, SourceMap]] = {}
_CACHE_LOCK = threading.Lock()
_META_SCHEMA: Optional[dict] = None


def build_source_map(content: str) -> SourceMap:
    """Map JSON pointers of a document to 1-based line/column.

    Uses PyYAML's composed node tree, which also covers JSON text. If the text
    cannot be composed the map is empty; parse errors are reported elsewhere.
    """
    source_map: SourceMap = {}

    try:
        root = yaml.compose(content, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        return source_map

    if root is None:
        return source_map

    def _record(path: str, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML marks are 0-based
        source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    def _walk(node, path: str) -> None:
        _record(path, node)

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, f"{path}/{escape_token(str(key))}")
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, f"{path}/{idx}")

    _walk(root, "")
    return source_map


def _parse_content(path: Path, content: str) -> Any:
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise DocumentParseError(f"Invalid YAML in {path}: {e}") from e
    else:
        try:
            data = parse_json(content)
        except DocumentParseError as e:
            raise DocumentParseError(f"{path}: {e}") from e

    try:
        return freeze_json(data)
    except TypeError as e:
        raise DocumentParseError(f"{path} holds a value that is not representable as JSON: {e}") from e


def _read(file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
    path = Path(file_path)

    if not path.exists():
        raise SchemaLoadError(f"Document file not found: {path}")

    if not path.is_file():
        raise SchemaLoadError(f"Path is not a file: {path}")

    key = path.resolve()
    mtime = path.stat().st_mtime_ns

    if engine_config.cache_enabled:
        with _CACHE_LOCK:
            cached = _DOCUMENT_CACHE.get(key)
        if cached is not None and cached[0] == mtime:
            logger.debug(f"Loading document from cache: {path}")
            return cached[1], cached[2]

    logger.debug(f"Loading document file: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read {path}: {e}") from e

    data = _parse_content(path, content)
    source_map = build_source_map(content)

    if engine_config.cache_enabled:
        with _CACHE_LOCK:
            _DOCUMENT_CACHE.pop(key, None)
            _DOCUMENT_CACHE[key] = (mtime, data, source_map)
            while len(_DOCUMENT_CACHE) > max(engine_config.max_cache_size, 1):
                _DOCUMENT_CACHE.pop(next(iter(_DOCUMENT_CACHE)))

    return data, source_map


def load_document(file_path: Union[str, Path]) -> Any:
    """Load a JSON (``.json``) or YAML (``.yaml``/``.yml``) document.

    Files with other suffixes are read as JSON.

    Returns:
        A fresh copy of the document as plain dicts and lists.

    Raises:
        SchemaLoadError: If the file is missing or unreadable.
        DocumentParseError: If the content is not a valid document.
    """
    data, _ = _read(file_path)
    return thaw_json(data)


def load_document_with_source(file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
    """Load a document and return (data, source_map).

    source_map keys are JSON pointers (e.g. "/items/0/name"); values hold
    1-based line/column.
    """
    data, source_map = _read(file_path)
    return thaw_json(data), dict(source_map)


def clear_cache() -> None:
    """Clear the document cache. Useful for testing."""
    with _CACHE_LOCK:
        _DOCUMENT_CACHE.clear()


def load_meta_schema() -> dict:
    """Load the bundled meta-schema describing schema documents."""
    global _META_SCHEMA
    if _META_SCHEMA is None:
        schema_path = get_meta_schema_path()
        with open(schema_path, "r", encoding="utf-8") as f:
            meta_schema = json.load(f)
        jsonschema.Draft7Validator.check_schema(meta_schema)
        _META_SCHEMA = meta_schema
    return _META_SCHEMA


def lint_schema_document(document: Any) -> List[SchemaIssue]:
    """Check a schema document's structure against the bundled meta-schema.

    Every problem is reported, ordered by location in the document; an empty
    list means the document is well-formed.
    """
    validator = jsonschema.Draft7Validator(load_meta_schema())
    issues: List[SchemaIssue] = []
    for error in validator.iter_errors(thaw_json(document)):
        path = ""
        for token in error.absolute_path:
            path = join_pointer(path, token)
        issues.append(SchemaIssue(message=error.message, instance_path=path))
    issues.sort(key=lambda issue: issue.instance_path)
    return issues
