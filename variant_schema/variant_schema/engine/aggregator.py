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

"""Merge functions combining child results of composite variants.

All functions are pure: inputs are left untouched and child declaration order
is kept when errors are concatenated.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .results import SchemaIssue, ValidationResult
from ..utils.json_pointer import JsonPointer


def _concat_errors(results: Sequence[ValidationResult]) -> List[SchemaIssue]:
    errors: List[SchemaIssue] = []
    for result in results:
        errors.extend(result.errors)
    return errors


def merge_any(results: Sequence[ValidationResult]) -> ValidationResult:
    """Valid if any child is valid.

    On success the failing alternatives' errors are discarded; on failure every
    child's errors are reported in order.
    """
    results = list(results)
    if not results:
        raise ValueError("merge_any requires at least one result")
    if any(result.valid for result in results):
        return ValidationResult.success()
    return ValidationResult.failure(_concat_errors(results))


def merge_all(results: Sequence[ValidationResult]) -> ValidationResult:
    """Valid if every child is valid; otherwise the failing children's errors."""
    failing = [result for result in results if not result.valid]
    if not failing:
        return ValidationResult.success()
    return ValidationResult.failure(_concat_errors(failing))


def merge_exactly_one(
    results: Sequence[ValidationResult],
    *,
    instance_path: JsonPointer,
    labels: Optional[Sequence[str]] = None,
    schema: Optional[Any] = None,
) -> ValidationResult:
    """Valid if exactly one child is valid.

    With no match every child's errors are reported. With several matches the
    success diagnostics are replaced by a single issue naming the matching
    children, using ``labels`` (defaults to the child indices).
    """
    results = list(results)
    if not results:
        raise ValueError("merge_exactly_one requires at least one result")
    if labels is None:
        labels = [str(index) for index in range(len(results))]
    elif len(labels) != len(results):
        raise ValueError(f"Expected {len(results)} labels, got {len(labels)}")

    matching = [label for label, result in zip(labels, results) if result.valid]
    if len(matching) == 1:
        return ValidationResult.success()
    if not matching:
        return ValidationResult.failure(_concat_errors(results))
    return ValidationResult.failure([
        SchemaIssue(
            message=f"Value matches more than one schema in 'oneOf' (matching: {', '.join(matching)})",
            instance_path=instance_path,
            schema=schema,
        )
    ])


def negate(
    result: ValidationResult,
    *,
    instance_path: JsonPointer,
    schema: Optional[Any] = None,
) -> ValidationResult:
    """Valid if the child failed."""
    if not result.valid:
        return ValidationResult.success()
    return ValidationResult.failure([
        SchemaIssue(
            message="Value must not match the schema in 'not'",
            instance_path=instance_path,
            schema=schema,
        )
    ])
