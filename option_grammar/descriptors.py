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

"""Descriptor registry.

A descriptor is a named unit of behavior applied to a schema node while a
schema is being built. Descriptors are declared either as a bare name
(``"string"``, ``"required"``) or as a single-entry mapping carrying an
argument (``{"rename": "new_name"}``, ``{"membered_list": ["string"]}``).

The set of descriptors is closed: names are resolved into
:class:`DescriptorKind` and unknown names fail while the schema is built.
"""

from __future__ import annotations

import base64
import operator
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple

from .exceptions import FormatError, SchemaDefinitionError
from .inflection import binding_name as to_binding_name
from .inflection import descriptor_key
from .nodes import (
    LIST_JOIN,
    MEMBERED_LIST_JOIN,
    LeafType,
    ListKind,
    ScalarKind,
    SchemaNode,
    StructureKind,
)

BlobCodec = Callable[[bytes], str]


class DescriptorKind(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    BLOB = "Blob"
    TIMESTAMP = "Timestamp"
    REQUIRED = "Required"
    RENAME = "Rename"
    PATTERN = "Pattern"
    LIST = "List"
    MEMBERED_LIST = "MemberedList"
    STRUCTURE = "Structure"


class ArgumentMode(Enum):
    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class Descriptor:
    kind: DescriptorKind
    apply: Callable[[SchemaNode, Any], SchemaNode]
    argument: ArgumentMode = ArgumentMode.NONE


# ---- scalar contracts --------------------------------------------------------


def encode_blob(data: bytes) -> str:
    """Default byte codec: standard base64 without line breaks."""
    return base64.b64encode(data).decode("ascii")


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_bytes_like(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def _is_utf8_text(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _is_integer(value: Any) -> bool:
    # Numbers that convert through __int__ (float, Decimal) count as integers.
    if isinstance(value, bool):
        return False
    return hasattr(type(value), "__index__") or hasattr(type(value), "__int__")


def validate_scalar(leaf: LeafType, value: Any, context: str) -> None:
    """Check ``value`` against a leaf type, raising :class:`FormatError`."""
    if leaf is LeafType.STRING:
        if not _is_string(value):
            raise FormatError("string value", context)
    elif leaf is LeafType.BLOB:
        if not (_is_utf8_text(value) or _is_bytes_like(value)):
            raise FormatError("string value", context)
    elif leaf is LeafType.INTEGER:
        if not _is_integer(value):
            raise FormatError("integer value", context)
    elif leaf is LeafType.BOOLEAN:
        if value is not True and value is not False:
            raise FormatError("boolean value", context)
    elif leaf is LeafType.TIMESTAMP:
        # Timestamps are not checked structurally; any value is accepted.
        return
    else:
        raise SchemaDefinitionError(f"Internal error: unknown leaf type {leaf!r}")


def encode_scalar(leaf: LeafType, value: Any, blob_codec: Optional[BlobCodec] = None) -> str:
    """Encode an already validated scalar value as wire text."""
    if leaf is LeafType.BOOLEAN:
        return "true" if value else "false"
    if leaf is LeafType.INTEGER:
        if hasattr(type(value), "__index__"):
            return str(operator.index(value))
        return str(value)
    if leaf is LeafType.BLOB:
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        return (blob_codec or encode_blob)(data)
    return str(value)


def is_enumerable(value: Any) -> bool:
    """True for re-iterable collections that can be encoded as list members."""
    if isinstance(value, (str, bytes, bytearray, memoryview, Mapping, Iterator)):
        return False
    return isinstance(value, Iterable)


# ---- descriptor application --------------------------------------------------


def _leaf(leaf: LeafType) -> Callable[[SchemaNode, Any], SchemaNode]:
    def _apply(node: SchemaNode, _arg: Any = None) -> SchemaNode:
        return node.evolve(kind=ScalarKind(leaf))

    return _apply


def _apply_required(node: SchemaNode, _arg: Any = None) -> SchemaNode:
    return node.evolve(required=True)


def _apply_rename(node: SchemaNode, new_name: Any) -> SchemaNode:
    return node.evolve(binding_name=to_binding_name(str(new_name)))


def _apply_pattern(node: SchemaNode, _regex: Any = None) -> SchemaNode:
    # Accepted for catalog compatibility; values are not matched.
    return node


def _list(join: str) -> Callable[[SchemaNode, Any], SchemaNode]:
    def _apply(node: SchemaNode, member_descriptors: Any) -> SchemaNode:
        if isinstance(node.kind, ListKind):
            member = node.kind.member
        else:
            member = SchemaNode.list_member()
        member = extend_node(member, _as_descriptor_list(member_descriptors, node.wire_name))
        return node.evolve(kind=ListKind(member=member, join=join))

    return _apply


def _apply_structure(node: SchemaNode, members: Any) -> SchemaNode:
    existing = {}
    if isinstance(node.kind, StructureKind):
        existing = {m.wire_name: m for m in node.kind.members}

    for name, descriptors in _member_pairs(members, node.wire_name):
        member = existing.get(name) or SchemaNode.default(name)
        existing[name] = extend_node(member, _as_descriptor_list(descriptors, name))

    return node.evolve(kind=StructureKind(members=tuple(existing.values())))


def _member_pairs(members: Any, owner: str) -> Sequence[Tuple[str, Any]]:
    if isinstance(members, Mapping):
        return [(str(name), descs) for name, descs in members.items()]
    if isinstance(members, (list, tuple)):
        pairs = []
        for entry in members:
            if isinstance(entry, Mapping) and len(entry) == 1:
                (name, descs), = entry.items()
            elif isinstance(entry, (list, tuple)) and len(entry) == 2:
                name, descs = entry
            else:
                raise SchemaDefinitionError(
                    f"Invalid structure member declaration for {owner}: {entry!r}"
                )
            pairs.append((str(name), descs))
        return pairs
    raise SchemaDefinitionError(
        f"Structure members of {owner} must be a mapping or a list, got {members!r}"
    )


def _as_descriptor_list(descriptors: Any, owner: str) -> Sequence[Any]:
    if descriptors is None:
        return []
    if isinstance(descriptors, (str, Mapping)):
        return [descriptors]
    if isinstance(descriptors, (list, tuple)):
        return descriptors
    raise SchemaDefinitionError(f"Invalid descriptor list for {owner}: {descriptors!r}")


DESCRIPTORS = {
    DescriptorKind.STRING: Descriptor(DescriptorKind.STRING, _leaf(LeafType.STRING)),
    DescriptorKind.INTEGER: Descriptor(DescriptorKind.INTEGER, _leaf(LeafType.INTEGER)),
    DescriptorKind.BOOLEAN: Descriptor(DescriptorKind.BOOLEAN, _leaf(LeafType.BOOLEAN)),
    DescriptorKind.BLOB: Descriptor(DescriptorKind.BLOB, _leaf(LeafType.BLOB)),
    DescriptorKind.TIMESTAMP: Descriptor(DescriptorKind.TIMESTAMP, _leaf(LeafType.TIMESTAMP)),
    DescriptorKind.REQUIRED: Descriptor(DescriptorKind.REQUIRED, _apply_required),
    DescriptorKind.RENAME: Descriptor(DescriptorKind.RENAME, _apply_rename, ArgumentMode.REQUIRED),
    DescriptorKind.PATTERN: Descriptor(DescriptorKind.PATTERN, _apply_pattern, ArgumentMode.OPTIONAL),
    DescriptorKind.LIST: Descriptor(DescriptorKind.LIST, _list(LIST_JOIN), ArgumentMode.REQUIRED),
    DescriptorKind.MEMBERED_LIST: Descriptor(
        DescriptorKind.MEMBERED_LIST, _list(MEMBERED_LIST_JOIN), ArgumentMode.REQUIRED
    ),
    DescriptorKind.STRUCTURE: Descriptor(DescriptorKind.STRUCTURE, _apply_structure, ArgumentMode.REQUIRED),
}


def resolve_descriptor(name: Any) -> Descriptor:
    """Look up a descriptor by its declared name (``"membered_list"`` etc.)."""
    if isinstance(name, DescriptorKind):
        return DESCRIPTORS[name]
    if not isinstance(name, str) or not name:
        raise SchemaDefinitionError(f"Descriptor name must be a non-empty string, got: {name!r}")
    key = descriptor_key(name)
    try:
        kind = DescriptorKind(key)
    except ValueError:
        valid = ", ".join(k.value for k in DescriptorKind)
        raise SchemaDefinitionError(f"Unknown descriptor '{name}'. Valid descriptors: {valid}") from None
    return DESCRIPTORS[kind]


def parse_descriptor(desc: Any) -> Tuple[Descriptor, Any]:
    """Split a declared descriptor into (descriptor, argument)."""
    if isinstance(desc, Mapping):
        if len(desc) != 1:
            raise SchemaDefinitionError(
                f"Descriptor with an argument must be a single-entry mapping, got: {desc!r}"
            )
        (name, arg), = desc.items()
    else:
        name, arg = desc, None
    return resolve_descriptor(name), arg


def apply_descriptor(node: SchemaNode, desc: Any) -> SchemaNode:
    """Apply one declared descriptor, returning a new node."""
    descriptor, arg = parse_descriptor(desc)
    if arg is None and descriptor.argument is ArgumentMode.REQUIRED:
        raise SchemaDefinitionError(
            f"Descriptor '{descriptor.kind.value}' on {node.wire_name} requires an argument"
        )
    if arg is not None and descriptor.argument is ArgumentMode.NONE:
        raise SchemaDefinitionError(
            f"Descriptor '{descriptor.kind.value}' on {node.wire_name} does not take an argument"
        )
    return descriptor.apply(node, arg)


def extend_node(node: SchemaNode, descriptors: Sequence[Any]) -> SchemaNode:
    """Apply descriptors in declared order; ``node`` itself is left untouched."""
    for desc in descriptors:
        node = apply_descriptor(node, desc)
    return node
