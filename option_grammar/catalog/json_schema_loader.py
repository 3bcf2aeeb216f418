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

"""JSON Schema loading and structural validation of catalog documents."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from ..utils.format_version import parse_format_version
from ..exceptions import FormatVersionError
from .source_location import json_pointer_escape

_SCHEMA_DIR = Path(__file__).parent / "schema"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: str = ""


def get_schema_path(version: str) -> Path:
    return _SCHEMA_DIR / version / "catalog.json"


def resolve_schema_version(version: str) -> str:
    """Pick the bundled schema for ``version``.

    The exact version is used when bundled; otherwise the newest bundled
    schema with the same major version. Unparsable versions are returned
    unchanged (loading them then fails with a clear error).
    """
    try:
        parsed = parse_format_version(version)
    except FormatVersionError:
        return version

    if get_schema_path(version).exists():
        return version

    candidates = []
    for version_dir in _SCHEMA_DIR.iterdir():
        if not version_dir.is_dir() or not (version_dir / "catalog.json").exists():
            continue
        try:
            dir_version = parse_format_version(version_dir.name)
        except FormatVersionError:
            continue
        if dir_version.major == parsed.major:
            candidates.append(dir_version)

    if not candidates:
        return version
    return str(max(candidates, key=lambda v: (v.minor, v.patch)))


def load_schema(version: str) -> dict:
    """Load the catalog JSON Schema for a format version.

    Raises:
        FileNotFoundError: If no bundled schema matches the version.
    """
    resolved = resolve_schema_version(version)
    if resolved in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[resolved]

    schema_path = get_schema_path(resolved)
    if not schema_path.exists():
        raise FileNotFoundError(
            f"Catalog schema not found for version {version} (resolved to {resolved}): {schema_path}"
        )

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[resolved] = schema
    return schema


def validate_structure(data: Any, version: str, schema: Optional[dict] = None) -> List[SchemaIssue]:
    """Validate a catalog document against its JSON Schema.

    Returns every structural issue found, ordered by document position.
    """
    if schema is None:
        schema = load_schema(version)
    validator = jsonschema.Draft7Validator(schema)

    issues = []
    for error in sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
        path = "".join(f"/{json_pointer_escape(str(p))}" for p in error.absolute_path)
        issues.append(SchemaIssue(message=error.message, yaml_path=path))
    return issues


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
