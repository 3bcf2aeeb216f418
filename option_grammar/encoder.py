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

"""Flatten validated option values into ordered request parameters.

Key naming follows the wire protocol:

* a top-level option is keyed by its wire name (``MaxResults``);
* a structure member appends ``.`` and its wire name (``Filter.Name``);
* a list element appends the list's join and its 1-based index
  (``Tag.1`` for lists, ``Tag.member.1`` for membered lists);
* an empty list emits a single ``(prefix, "")`` marker.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, List, Optional

from .descriptors import BlobCodec, encode_scalar
from .nodes import ListKind, ScalarKind, SchemaNode, StructureKind
from .params import Param
from .validator import validate

if TYPE_CHECKING:
    from .schema import Schema

logger = logging.getLogger(__name__)


def node_params(
    node: SchemaNode,
    value: Any,
    name: str,
    blob_codec: Optional[BlobCodec] = None,
) -> List[Param]:
    """Encode ``value`` (already validated against ``node``) under key ``name``."""
    kind = node.kind

    if isinstance(kind, ScalarKind):
        return [Param(name, encode_scalar(kind.leaf, value, blob_codec))]

    if isinstance(kind, ListKind):
        params: List[Param] = []
        for i, member in enumerate(value, start=1):
            params.extend(node_params(kind.member, member, f"{name}{kind.join}{i}", blob_codec))
        if not params:
            return [Param(name, "")]
        return params

    if isinstance(kind, StructureKind):
        params = []
        for key, member_value in value.items():
            member = kind.member(str(key))
            params.extend(node_params(member, member_value, f"{name}.{member.wire_name}", blob_codec))
        return params

    raise TypeError(f"Internal error: unknown node kind {kind!r}")


def request_params(
    schema: "Schema",
    options: Mapping,
    blob_codec: Optional[BlobCodec] = None,
) -> List[Param]:
    """Validate ``options`` and flatten them into request parameters.

    Parameters are produced in the caller's key order. Nothing is encoded if
    validation fails; the validation error propagates to the caller.

    Args:
        schema: Schema of the operation being called.
        options: Mapping of binding name to value.
        blob_codec: Optional byte-to-text codec for blob values (base64 by default).

    Returns:
        Flat list of :class:`Param`.
    """
    validate(schema, options)

    params: List[Param] = []
    for key, value in options.items():
        option = schema.option(str(key))
        params.extend(node_params(option, value, option.wire_name, blob_codec))

    logger.debug(f"Encoded {len(options)} options into {len(params)} request parameters")
    return params
