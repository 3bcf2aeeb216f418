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

"""Naming convention linter for option catalog files."""

from typing import Dict, Iterable, Optional

from ..catalog.loader import Catalog
from ..catalog.source_location import SourceLocation, SourceMap, join_pointer, lookup_source
from ..inflection import is_pascal_case, is_snake_case
from ..nodes import ListKind, SchemaNode, StructureKind
from .report import LintResult


class NamingLinter:
    """Linter for naming conventions of operations and options."""

    def lint(self, catalog: Catalog, result: LintResult, source_map: Optional[SourceMap] = None):
        """Lint naming conventions of a built catalog.

        Args:
            catalog: Catalog built from the file being linted
            result: LintResult to add errors/warnings to
            source_map: Optional YAML source map of the file
        """
        for op_name, schema in catalog.operations.items():
            location = lookup_source(source_map, join_pointer("/operations", op_name), catalog.file_path)
            if not is_pascal_case(op_name):
                result.add_warning(
                    f"Operation name '{op_name}' should be in PascalCase format "
                    f"(e.g., 'DescribeInstances', 'PutObject')",
                    location,
                )
            self._lint_nodes(schema.options, f"operation {op_name}", result, location)

    def _lint_nodes(
        self,
        nodes: Iterable[SchemaNode],
        owner: str,
        result: LintResult,
        location: SourceLocation,
    ):
        seen: Dict[str, str] = {}
        for node in nodes:
            if not is_pascal_case(node.wire_name):
                result.add_warning(
                    f"Option name '{node.wire_name}' of {owner} should be in PascalCase format "
                    f"(e.g., 'MaxResults', 'InstanceId')",
                    location,
                )
            if not is_snake_case(node.binding_name):
                result.add_warning(
                    f"Binding name '{node.binding_name}' of option '{node.wire_name}' in {owner} "
                    f"should be in snake_case format",
                    location,
                )
            if node.binding_name in seen:
                result.add_error(
                    f"Options '{seen[node.binding_name]}' and '{node.wire_name}' of {owner} "
                    f"share the binding name '{node.binding_name}'",
                    location,
                )
            seen[node.binding_name] = node.wire_name

            structure = self._structure_of(node)
            if structure is not None:
                self._lint_nodes(structure.members, f"structure {node.wire_name} of {owner}", result, location)

    @staticmethod
    def _structure_of(node: SchemaNode) -> Optional[StructureKind]:
        """The structure held by ``node`` directly or through (nested) list members."""
        kind = node.kind
        while isinstance(kind, ListKind):
            kind = kind.member.kind
        if isinstance(kind, StructureKind):
            return kind
        return None
