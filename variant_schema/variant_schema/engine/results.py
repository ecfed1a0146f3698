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

"""Validation diagnostics returned by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from ..utils.json_pointer import JsonPointer


@dataclass(frozen=True)
class SchemaIssue:
    """One instance validation failure.

    ``instance_path`` points into the instance being checked; ``schema`` is the
    variant that raised the issue and takes no part in equality.
    """

    message: str
    instance_path: JsonPointer = ""
    schema: Optional[Any] = field(default=None, compare=False, repr=False)

    def to_json(self) -> Dict[str, str]:
        return {"message": self.message, "instancePath": self.instance_path}

    def __str__(self) -> str:
        return f"{self.instance_path or '/'}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool = True
    errors: Tuple[SchemaIssue, ...] = ()

    def __post_init__(self):
        errors = tuple(self.errors)
        object.__setattr__(self, "errors", errors)
        if self.valid != (not errors):
            raise ValueError(
                f"Inconsistent validation result: valid={self.valid} with {len(errors)} error(s)"
            )

    @classmethod
    def success(cls) -> "ValidationResult":
        return _SUCCESS

    @classmethod
    def failure(cls, errors: Iterable[SchemaIssue]) -> "ValidationResult":
        return cls(valid=False, errors=tuple(errors))

    def __bool__(self) -> bool:
        return self.valid

    def to_json(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": [issue.to_json() for issue in self.errors]}


_SUCCESS = ValidationResult()
