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

"""Operation catalogs: YAML documents declaring one schema per operation.

Example::

    option_grammar_format: 1.0.0
    name: ec2
    operations:
      DescribeInstances:
        - InstanceId: [membered_list: [string]]
        - MaxResults: [integer]
      DescribeReservedInstances:
        base: DescribeInstances
        options:
          - OfferingType: [string]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..exceptions import CatalogError, FormatVersionError, SchemaDefinitionError
from ..params import Param
from ..schema import Schema, customize
from ..utils.format_version import FORMAT_VERSION_FIELD, VersionCheck, check_catalog_version
from .json_schema_loader import validate_structure
from .source_location import SourceLocation, SourceMap, format_source, join_pointer, lookup_source
from .yaml_reader import YamlReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Schemas of every operation declared in one catalog file."""

    name: str
    operations: Dict[str, Schema] = field(default_factory=dict)
    format_version: Optional[str] = None
    file_path: Optional[Path] = None

    @property
    def operation_names(self) -> List[str]:
        return list(self.operations)

    def schema(self, operation: str) -> Schema:
        schema = self.operations.get(operation)
        if schema is None:
            available = ", ".join(self.operations) or "none"
            raise CatalogError(
                f"Unknown operation '{operation}' in catalog '{self.name}'. Available: {available}"
            )
        return schema

    def validate(self, operation: str, options: Mapping) -> None:
        self.schema(operation).validate(options)

    def request_params(self, operation: str, options: Mapping, **kwargs) -> List[Param]:
        return self.schema(operation).request_params(options, **kwargs)


class CatalogLoader:
    """Loads catalog files into :class:`Catalog` objects."""

    def __init__(self, reader: Optional[YamlReader] = None):
        self.reader = reader or YamlReader()

    def load(self, file_path: Union[str, Path]) -> Catalog:
        path = Path(file_path)
        data, source_map = self.reader.load_file(path)
        return self.build(data, source_map=source_map, file_path=path)

    def load_string(self, content: str, file_path: Optional[Path] = None) -> Catalog:
        data, source_map = self.reader.load_string(content)
        return self.build(data, source_map=source_map, file_path=file_path)

    def build(
        self,
        data: Any,
        source_map: Optional[SourceMap] = None,
        file_path: Optional[Path] = None,
    ) -> Catalog:
        """Check a parsed catalog document and build its operation schemas.

        Raises:
            FormatVersionError: If the declared format version is incompatible.
            CatalogError: If the document structure or a declaration is invalid.
        """
        where = f" in {file_path}" if file_path else ""

        if not isinstance(data, Mapping):
            raise CatalogError(f"Catalog root must be a mapping{where}")

        version, version_loc = self.check_version(data, source_map, file_path)
        if not version.compatible:
            raise FormatVersionError(f"{version.error}{format_source(version_loc)}")
        if version.warning:
            logger.warning(f"{version.warning}{format_source(version_loc)}")

        issues = self.structure_issues(data, version, source_map, file_path)
        if issues:
            details = "\n".join(f"  - {message}{format_source(loc)}" for message, loc in issues)
            raise CatalogError(f"Catalog structure validation failed{where}:\n{details}")

        operations = self.build_operations(data["operations"], source_map, file_path)
        logger.debug(f"Loaded catalog '{data['name']}' with {len(operations)} operations{where}")
        return self.assemble(data, operations, file_path)

    @staticmethod
    def check_version(
        data: Mapping,
        source_map: Optional[SourceMap],
        file_path: Optional[Path],
    ) -> Tuple[VersionCheck, SourceLocation]:
        """Check the declared format version and locate the field."""
        loc = lookup_source(source_map, f"/{FORMAT_VERSION_FIELD}", file_path)
        return check_catalog_version(data.get(FORMAT_VERSION_FIELD)), loc

    @staticmethod
    def structure_issues(
        data: Mapping,
        version: VersionCheck,
        source_map: Optional[SourceMap],
        file_path: Optional[Path],
    ) -> List[Tuple[str, SourceLocation]]:
        """JSON Schema violations of the document, each with its YAML location.

        Raises:
            FileNotFoundError: If no bundled schema matches the declared version.
        """
        return [
            (issue.message, lookup_source(source_map, issue.yaml_path, file_path))
            for issue in validate_structure(dict(data), version.schema_version)
        ]

    @staticmethod
    def assemble(data: Mapping, operations: Dict[str, Schema], file_path: Optional[Path]) -> Catalog:
        return Catalog(
            name=data["name"],
            operations=operations,
            format_version=data.get(FORMAT_VERSION_FIELD),
            file_path=file_path,
        )

    def build_operations(
        self,
        raw_operations: Mapping,
        source_map: Optional[SourceMap],
        file_path: Optional[Path],
    ) -> Dict[str, Schema]:
        built: Dict[str, Schema] = {}

        def _build(name: str, chain: Tuple[str, ...]) -> Schema:
            if name in built:
                return built[name]
            if name in chain:
                cycle = " -> ".join(chain + (name,))
                raise CatalogError(f"Circular base reference between operations: {cycle}")

            entry = raw_operations[name]
            path = join_pointer("/operations", name)
            base: Optional[Schema] = None
            declarations = entry
            if isinstance(entry, Mapping):
                declarations = entry.get("options") or []
                base_name = entry.get("base")
                if base_name is not None:
                    if base_name not in raw_operations:
                        loc = lookup_source(source_map, f"{path}/base", file_path)
                        raise CatalogError(
                            f"Operation '{name}' extends unknown operation '{base_name}'{format_source(loc)}"
                        )
                    base = _build(base_name, chain + (name,))

            try:
                schema = customize(base, declarations)
            except SchemaDefinitionError as exc:
                loc = lookup_source(source_map, path, file_path)
                raise CatalogError(f"Invalid declaration in operation '{name}': {exc}{format_source(loc)}") from exc

            built[name] = schema
            return schema

        for name in raw_operations:
            _build(name, ())

        # Keep declaration order even when bases were built out of order.
        return {name: built[name] for name in raw_operations}


# Global loader instance
catalog_loader = CatalogLoader()


def load_catalog(file_path: Union[str, Path]) -> Catalog:
    """Load a catalog file with the shared loader."""
    return catalog_loader.load(file_path)
