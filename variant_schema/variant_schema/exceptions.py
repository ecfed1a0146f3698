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

"""Custom exceptions for the variant schema engine.

Instance validation failures are never raised; they are returned as data in a
ValidationResult. The exceptions below cover faults in the schema itself or in
the documents being loaded.
"""

from typing import List, Optional


class SchemaEngineError(Exception):
    """Base exception for schema engine related errors."""
    pass


class DocumentParseError(SchemaEngineError):
    """Exception raised when a JSON or YAML document cannot be parsed."""
    pass


class SchemaLoadError(SchemaEngineError):
    """Exception raised when a document file cannot be read."""
    pass


class ResolutionErrorKind:
    """Sub-kinds of ResolutionError."""

    MALFORMED = "malformed"
    NOT_FOUND = "not_found"
    NO_ROOT = "no_root"
    CYCLE_DETECTED = "cycle_detected"

    @classmethod
    def get_all_kinds(cls) -> List[str]:
        return [cls.MALFORMED, cls.NOT_FOUND, cls.NO_ROOT, cls.CYCLE_DETECTED]


class ResolutionError(SchemaEngineError):
    """Exception raised for a schema node that cannot be built or resolved."""

    def __init__(
        self,
        message: str,
        kind: str = ResolutionErrorKind.MALFORMED,
        pointer: Optional[str] = None,
        schema_path: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.pointer = pointer
        self.schema_path = schema_path

    def __str__(self) -> str:
        if self.schema_path:
            return f"{self.message} (schema_path={self.schema_path})"
        return self.message


class MalformedSchemaError(ResolutionError):
    """Exception raised when a schema node is not a well-formed schema."""

    def __init__(self, message: str, schema_path: Optional[str] = None, pointer: Optional[str] = None):
        super().__init__(message, ResolutionErrorKind.MALFORMED, pointer=pointer, schema_path=schema_path)


class PointerNotFoundError(ResolutionError):
    """Exception raised when a pointer segment is missing from the root document."""

    def __init__(self, message: str, pointer: Optional[str] = None, schema_path: Optional[str] = None):
        super().__init__(message, ResolutionErrorKind.NOT_FOUND, pointer=pointer, schema_path=schema_path)


class NoRootError(ResolutionError):
    """Exception raised when a pointer must be resolved but no root document is available."""

    def __init__(self, message: str, pointer: Optional[str] = None):
        super().__init__(message, ResolutionErrorKind.NO_ROOT, pointer=pointer)


class CycleDetectedError(ResolutionError):
    """Exception raised when reference resolution loops back on itself."""

    def __init__(self, message: str, pointer: Optional[str] = None, chain: Optional[List[str]] = None):
        super().__init__(message, ResolutionErrorKind.CYCLE_DETECTED, pointer=pointer)
        self.chain = list(chain or [])
