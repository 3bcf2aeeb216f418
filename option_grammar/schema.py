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

"""Schemas and the ``customize`` builder.

A schema is built once from a declarative option list and then shared
read-only. Customizing a schema returns a new one; the base is never changed,
so a base schema can be extended any number of times independently.

Declaration format::

    customize(None, [
        "Name",                                     # optional string option
        {"MaxResults": ["integer"]},
        {"Bucket": ["string", "required"]},
        {"Filter": [{"membered_list": [{"structure": {
            "Name": ["string"],
            "Value": [{"membered_list": ["string"]}],
        }}]}]},
    ])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .descriptors import extend_node
from .encoder import request_params
from .exceptions import SchemaDefinitionError
from .nodes import SchemaNode
from .params import Param
from .validator import validate, validate_option

logger = logging.getLogger(__name__)

OptionDeclaration = Any


class Schema:
    """Immutable collection of top-level option nodes for one operation."""

    __slots__ = ("_options", "_by_wire_name", "_by_binding_name")

    def __init__(self, options: Iterable[SchemaNode] = ()):
        by_wire_name: Dict[str, SchemaNode] = {}
        for option in options:
            by_wire_name[option.wire_name] = option
        self._options: Tuple[SchemaNode, ...] = tuple(by_wire_name.values())
        self._by_wire_name = by_wire_name
        self._by_binding_name = {o.binding_name: o for o in self._options}

    def __repr__(self) -> str:
        names = ", ".join(o.wire_name for o in self._options)
        return f"Schema([{names}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._options == other._options

    def __hash__(self) -> int:
        return hash(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[SchemaNode]:
        return iter(self._options)

    def __contains__(self, binding_name: object) -> bool:
        return binding_name in self._by_binding_name

    @property
    def options(self) -> Tuple[SchemaNode, ...]:
        return self._options

    def option(self, binding_name: str) -> Optional[SchemaNode]:
        return self._by_binding_name.get(binding_name)

    def option_by_wire_name(self, wire_name: str) -> Optional[SchemaNode]:
        return self._by_wire_name.get(wire_name)

    def customize(self, config: Any = ()) -> "Schema":
        return customize(self, config)

    def validate(self, options: Mapping) -> None:
        validate(self, options)

    def validate_option(self, binding_name: str, value: Any) -> None:
        validate_option(self, binding_name, value)

    def request_params(self, options: Mapping, **kwargs) -> List[Param]:
        return request_params(self, options, **kwargs)


EMPTY_SCHEMA = Schema()


def parse_option(option: OptionDeclaration) -> Tuple[str, List[Any]]:
    """Split one option declaration into (wire name, descriptor list)."""
    value_desc = None
    if isinstance(option, Mapping):
        if not option:
            raise SchemaDefinitionError("passed empty hash where an option was expected")
        if len(option) > 1:
            raise SchemaDefinitionError("too many entries in option description")

        (name, value_desc), = option.items()
        name = str(name)

        if value_desc is not None and not isinstance(value_desc, (list, tuple)):
            raise SchemaDefinitionError(
                f"expected an array for value description of option {name}, got {value_desc!r}"
            )
    elif isinstance(option, str) and option:
        name = option
    else:
        raise SchemaDefinitionError(f"Option declaration must be a name or a mapping, got: {option!r}")

    return name, list(value_desc or [])


def _declarations(config: Any) -> Sequence[Tuple[str, List[Any]]]:
    if config is None:
        return []
    if isinstance(config, Mapping):
        declarations = []
        for name, value_desc in config.items():
            declarations.append(parse_option({name: value_desc}))
        return declarations
    if isinstance(config, (str, bytes)):
        raise SchemaDefinitionError(f"Schema configuration must be a list or a mapping, got: {config!r}")
    return [parse_option(option) for option in config]


def customize(base: Optional[Schema] = None, config: Any = ()) -> Schema:
    """Build a new schema from ``base`` extended by ``config``.

    Args:
        base: Schema to extend; ``None`` starts from an empty schema.
        config: Mapping of wire name to descriptor list, or a list of option
            declarations (a bare wire name or a single-entry mapping).

    Returns:
        A new :class:`Schema`. ``base`` is not modified.

    Raises:
        SchemaDefinitionError: If a declaration or descriptor is invalid.
    """
    if base is None:
        base = EMPTY_SCHEMA
    options: Dict[str, SchemaNode] = {o.wire_name: o for o in base.options}

    for name, value_desc in _declarations(config):
        option = options.get(name) or SchemaNode.default(name)
        options[name] = extend_node(option, value_desc)

    schema = Schema(options.values())
    logger.debug(f"Built schema with {len(schema)} options (base had {len(base)})")
    return schema
