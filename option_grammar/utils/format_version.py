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


"""Catalog format version checks.

A catalog names its layout version in ``option_grammar_format``. The major
version must equal the one this library reads. A newer minor version still
loads but is reported, and the patch level is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .. import CATALOG_FORMAT_VERSION
from ..exceptions import FormatVersionError

FORMAT_VERSION_FIELD = "option_grammar_format"

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_format_version(raw: Any) -> SemanticVersion:
    """Parse ``1.0.0`` (a leading ``v`` is allowed).

    Raises:
        FormatVersionError: If ``raw`` is not a version string.
    """
    if not isinstance(raw, str):
        raise FormatVersionError(
            f"'{FORMAT_VERSION_FIELD}' must be a string, got {type(raw).__name__}: {raw!r}"
        )
    match = _VERSION_RE.match(raw.strip())
    if match is None:
        raise FormatVersionError(
            f"Invalid '{FORMAT_VERSION_FIELD}' value '{raw}', expected MAJOR.MINOR.PATCH"
        )
    return SemanticVersion(*(int(part) for part in match.groups()))


SUPPORTED_VERSION = parse_format_version(CATALOG_FORMAT_VERSION)


@dataclass(frozen=True)
class VersionCheck:
    """Outcome of checking a catalog's declared version.

    ``error`` is set when the catalog cannot be read by this library;
    ``warning`` when it can, but the declaration deserves attention.
    """

    declared: Optional[SemanticVersion] = None
    error: Optional[str] = None
    warning: Optional[str] = None

    @property
    def compatible(self) -> bool:
        return self.error is None

    @property
    def schema_version(self) -> str:
        """Version whose bundled JSON Schema applies to the catalog."""
        return str(self.declared or SUPPORTED_VERSION)


def check_catalog_version(raw: Any) -> VersionCheck:
    if raw is None:
        return VersionCheck(
            warning=f"Missing '{FORMAT_VERSION_FIELD}' field, assuming {SUPPORTED_VERSION}"
        )

    try:
        declared = parse_format_version(raw)
    except FormatVersionError as exc:
        return VersionCheck(error=str(exc))

    if declared.major != SUPPORTED_VERSION.major:
        return VersionCheck(
            declared=declared,
            error=(
                f"Incompatible format version: catalog declares {declared}, "
                f"this library reads {SUPPORTED_VERSION.major}.x catalogs"
            ),
        )
    if declared.minor > SUPPORTED_VERSION.minor:
        return VersionCheck(
            declared=declared,
            warning=(
                f"Catalog format {declared} has a newer minor version than {SUPPORTED_VERSION}; "
                "unknown fields will be rejected"
            ),
        )
    return VersionCheck(declared=declared)
