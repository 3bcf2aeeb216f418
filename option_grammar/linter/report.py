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

"""Error reporting for the catalog linter."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..catalog.source_location import SourceLocation, format_source


class LintResult:
    """Container for linting results for a single catalog file."""

    def __init__(self, file_path: Path):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(message: str, location: Optional[SourceLocation]) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if location is None:
            return entry
        entry['message'] = f"{message}{format_source(location)}"
        if location.line is not None:
            entry['line'] = location.line
        if location.column is not None:
            entry['column'] = location.column
        if location.yaml_path:
            entry['yaml_path'] = location.yaml_path
        return entry

    def add_error(self, message: str, location: Optional[SourceLocation] = None):
        """Add an error message, optionally pointing at a YAML location."""
        self.errors.append(self._entry(message, location))

    def add_warning(self, message: str, location: Optional[SourceLocation] = None):
        """Add a warning message, optionally pointing at a YAML location."""
        self.warnings.append(self._entry(message, location))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }
