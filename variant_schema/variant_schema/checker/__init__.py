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

"""Checker package: validate instance documents against a schema file."""

import logging
from pathlib import Path
from typing import List, Tuple, Union, Optional

from ..engine.facade import JsonSchema
from ..engine.results import SchemaIssue
from ..exceptions import SchemaEngineError
from ..file_io.source_location import lookup_source
from ..models.document_loader import lint_schema_document, load_document, load_document_with_source
from .report import CheckResult

__all__ = ['check_files', 'load_schema', 'CheckResult']

logger = logging.getLogger(__name__)


def load_schema(
    schema_path: Union[str, Path],
    meta_check: bool = True,
) -> Tuple[Optional[JsonSchema], List[SchemaIssue]]:
    """Load a schema file for checking.

    Args:
        schema_path: Path to the schema document
        meta_check: Check the document against the bundled meta-schema first

    Returns:
        (schema, issues): ``schema`` is None when the meta-schema check found
        issues, which are returned with paths into the schema document.

    Raises:
        SchemaEngineError: If the file cannot be read or parsed, or the schema
            cannot be built or its references resolved.
    """
    document = load_document(schema_path)
    if meta_check:
        issues = lint_schema_document(document)
        if issues:
            logger.debug(f"Schema {schema_path} failed the meta-schema check with {len(issues)} issue(s)")
            return None, issues
    return JsonSchema(document, source=str(schema_path)), []


def check_files(schema: JsonSchema, file_paths: List[Path]) -> List[CheckResult]:
    """Validate a list of instance documents.

    Args:
        schema: Loaded schema
        file_paths: List of instance document paths

    Returns:
        List of CheckResult objects, one per file

    Raises:
        ResolutionError: If a reference fault surfaces while validating.
    """
    results = []

    for file_path in file_paths:
        result = CheckResult(file_path)

        try:
            instance, source_map = load_document_with_source(file_path)
        except SchemaEngineError as e:
            result.add_error(f"Failed to load document: {e}")
            results.append(result)
            continue

        validation = schema.validate(instance)
        for issue in validation.errors:
            loc = lookup_source(source_map, issue.instance_path, file_path)
            result.add_error(
                issue.message,
                line=loc.line,
                column=loc.column,
                instance_path=issue.instance_path,
            )

        results.append(result)

    return results
