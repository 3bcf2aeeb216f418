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

"""Recursive validation of option values against a schema.

Errors carry a breadcrumb built by nesting each level's context, e.g.
``member 2 of key Values of option filter``. Each scan stops at the first bad
key; the required-member check always runs afterwards as a separate pass.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable, Optional

from .descriptors import is_enumerable, validate_scalar
from .exceptions import (
    FormatError,
    MissingRequiredKeyError,
    MissingRequiredOptionError,
    UnexpectedKeyError,
    UnexpectedOptionError,
)
from .nodes import ListKind, ScalarKind, SchemaNode, StructureKind

if TYPE_CHECKING:
    from .schema import Schema


def _supplied_names(value: Mapping) -> set:
    return {str(key) for key in value.keys()}


def _missing_required(nodes: Iterable[SchemaNode], supplied: set) -> Optional[SchemaNode]:
    for node in nodes:
        if node.required and node.binding_name not in supplied:
            return node
    return None


def validate_node(node: SchemaNode, value: Any, context: Optional[str] = None) -> None:
    """Validate ``value`` against one node.

    ``context`` is the breadcrumb of the enclosing value; ``None`` means the
    node is a top-level option.
    """
    kind = node.kind
    context = node.context_description(context)

    if isinstance(kind, ScalarKind):
        validate_scalar(kind.leaf, value, context)
        return

    if isinstance(kind, ListKind):
        if not is_enumerable(value):
            raise FormatError("enumerable value", context)
        for i, member in enumerate(value, start=1):
            validate_node(kind.member, member, f"member {i} of {context}")
        return

    if isinstance(kind, StructureKind):
        if not isinstance(value, Mapping):
            raise FormatError("hash value", context)
        for key, member_value in value.items():
            name = str(key)
            member = kind.member(name)
            if member is None:
                raise UnexpectedKeyError(name, context)
            validate_node(member, member_value, f"key {name} of {context}")

        missing = _missing_required(kind.members, _supplied_names(value))
        if missing is not None:
            raise MissingRequiredKeyError(missing.binding_name, context)
        return

    raise TypeError(f"Internal error: unknown node kind {kind!r}")


def validate(schema: "Schema", options: Mapping) -> None:
    """Validate caller options against ``schema``.

    Raises:
        FormatError: If ``options`` or one of its values has the wrong shape.
        UnexpectedOptionError: If a supplied option is not part of the schema.
        UnexpectedKeyError: If a structure value carries an unknown key.
        MissingRequiredOptionError: If a required option was not supplied.
        MissingRequiredKeyError: If a required structure key was not supplied.
    """
    if not isinstance(options, Mapping):
        raise FormatError("hash value", "options")

    for key, value in options.items():
        name = str(key)
        option = schema.option(name)
        if option is None:
            raise UnexpectedOptionError(name)
        validate_node(option, value)

    missing = _missing_required(schema.options, _supplied_names(options))
    if missing is not None:
        raise MissingRequiredOptionError(missing.binding_name)


def validate_option(schema: "Schema", binding_name: str, value: Any) -> None:
    """Validate a single option value without the required-option scan."""
    option = schema.option(binding_name)
    if option is None:
        raise UnexpectedOptionError(binding_name)
    validate_node(option, value)
