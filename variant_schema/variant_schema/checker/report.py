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

"""Per-file results of checking instance documents."""

from pathlib import Path
from typing import List, Dict, Any, Optional


class CheckResult:
    """Container for the check results of a single instance document."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the instance document being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(
        message: str,
        line: Optional[int],
        column: Optional[int],
        instance_path: Optional[str],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if instance_path is not None:
            entry['instance_path'] = instance_path
        return entry

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        instance_path: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where the offending value starts
            column: Optional column number where the offending value starts
            instance_path: Optional JSON pointer to the offending value
        """
        self.errors.append(self._entry(message, line, column, instance_path))

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_json(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'valid': self.valid,
            'errors': list(self.errors),
        }
