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

"""File naming linter for option catalog files."""

from pathlib import Path

from ..inflection import is_snake_case
from .report import LintResult

CATALOG_EXTENSION = '.catalog.yaml'


class FileLinter:
    """Linter for file naming conventions."""

    def lint(self, file_path: Path, result: LintResult):
        """Lint file naming conventions.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        file_name = file_path.name

        if not file_name.endswith(CATALOG_EXTENSION):
            result.add_error(
                f"File does not have a catalog extension. Expected '<name>{CATALOG_EXTENSION}'"
            )
            return

        base_name = file_name[:-len(CATALOG_EXTENSION)]
        if not is_snake_case(base_name):
            result.add_warning(
                f"Catalog file name '{base_name}' should be in snake_case format "
                f"(e.g., 'ec2', 'simple_db')"
            )


def catalog_name_from_path(file_path: Path) -> str:
    """``ec2.catalog.yaml`` -> ``ec2``."""
    name = file_path.name
    if name.endswith(CATALOG_EXTENSION):
        return name[:-len(CATALOG_EXTENSION)]
    return file_path.stem
