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


"""Structure and schema linter for option catalog files.

Runs the same checks as :class:`~option_grammar.catalog.loader.CatalogLoader`
(format version, bundled JSON Schema, operation schema build) but records
every finding with its YAML location instead of stopping at the first one.
"""

from pathlib import Path
from typing import Optional

from ..catalog.loader import Catalog, CatalogLoader
from ..catalog.source_location import lookup_source
from ..catalog.yaml_reader import YamlReader
from ..exceptions import CatalogError
from .file_linter import catalog_name_from_path
from .report import LintResult


class StructureLinter:
    """Linter for structure and schema validation."""

    def __init__(self, reader: Optional[YamlReader] = None):
        self.reader = reader or YamlReader(cache_enabled=True)
        self.loader = CatalogLoader(self.reader)

    def lint(self, file_path: Path, result: LintResult) -> Optional[Catalog]:
        """Lint structure and schema of the catalog file.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to

        Returns:
            The built catalog, or None when it could not be built.
        """
        try:
            data, source_map = self.reader.load_file(file_path)
        except CatalogError as e:
            result.add_error(f"Failed to load YAML file: {e}")
            return None

        if not isinstance(data, dict):
            result.add_error("Catalog root must be a mapping")
            return None

        version, version_loc = self.loader.check_version(data, source_map, file_path)
        if not version.compatible:
            result.add_error(version.error, version_loc)
            return None
        if version.warning:
            result.add_warning(version.warning, version_loc)

        try:
            issues = self.loader.structure_issues(data, version, source_map, file_path)
        except FileNotFoundError as e:
            result.add_error(f"Schema file not found: {e}")
            return None

        for message, location in issues:
            result.add_error(message, location)
        if issues:
            return None

        expected_name = catalog_name_from_path(file_path)
        if data["name"] != expected_name:
            result.add_warning(
                f"Catalog name '{data['name']}' does not match file name '{expected_name}'",
                lookup_source(source_map, "/name", file_path),
            )

        try:
            operations = self.loader.build_operations(data["operations"], source_map, file_path)
        except CatalogError as e:
            result.add_error(str(e))
            return None

        return self.loader.assemble(data, operations, file_path)
